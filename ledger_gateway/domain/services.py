"""Domain services containing gateway logic that belongs to no single model."""

from collections.abc import Mapping, MutableMapping
from typing import Any


class OptionsMergeService:
    """Domain service for merging option trees.

    An option tree is a nested mapping whose leaves are scalars, callables or
    arbitrary objects. Overrides are merged into a base tree with these rules:

    - an explicit ``None`` replaces the base value, subtree included;
    - a mapping merged onto a mapping recurses, keeping unmentioned keys;
    - anything else replaces the base value wholesale.

    Keys absent from the override leave the base untouched.
    """

    @staticmethod
    def merge(
        base: MutableMapping[str, Any], override: Mapping[str, Any] | None
    ) -> MutableMapping[str, Any]:
        """Merge ``override`` into ``base`` in place.

        Args:
            base: Tree receiving the override. It is mutated.
            override: Tree of caller supplied values, or None for no changes

        Returns:
            The mutated ``base`` tree
        """
        if not override:
            return base

        for key, value in override.items():
            if value is None:
                base[key] = None
                continue

            current = base.get(key)
            if isinstance(value, Mapping) and isinstance(current, MutableMapping):
                OptionsMergeService.merge(current, value)
            else:
                base[key] = value

        return base

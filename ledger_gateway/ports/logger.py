"""Logger port used by the gateway and its adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """Abstract interface for structured logging.

    Keyword arguments carry structured context (channel, label, msp_id)
    alongside the message. ``bind`` returns a logger that adds fixed
    context to every call, e.g. the organization of a connected gateway.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def exception(self, message: str, exc_info: Exception | None = None, **kwargs: Any) -> None:
        """Log an error together with its traceback."""
        ...

    def bind(self, **context: Any) -> LoggerPort:
        """Get a logger adding ``context`` to every message.

        Keyword arguments given per call win over bound context.
        """
        return BoundLogger(self, context)


class BoundLogger(LoggerPort):
    """Logger forwarding to another logger with fixed context merged in."""

    def __init__(self, target: LoggerPort, context: dict[str, Any]) -> None:
        self._target = target
        self._context = dict(context)

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def _merge(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        return {**self._context, **kwargs}

    def debug(self, message: str, **kwargs: Any) -> None:
        self._target.debug(message, **self._merge(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._target.info(message, **self._merge(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._target.warning(message, **self._merge(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._target.error(message, **self._merge(kwargs))

    def exception(self, message: str, exc_info: Exception | None = None, **kwargs: Any) -> None:
        self._target.exception(message, exc_info=exc_info, **self._merge(kwargs))

    def bind(self, **context: Any) -> LoggerPort:
        return BoundLogger(self._target, self._merge(context))

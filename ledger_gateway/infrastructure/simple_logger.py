"""Logger adapter backed by the standard logging module."""

import logging
from typing import Any

from ..ports.logger import LoggerPort

CONTEXT_ATTRIBUTE = "gateway_context"


class ContextFormatter(logging.Formatter):
    """Formatter appending a record's gateway context as ``key=value`` pairs.

    The context is rendered before any traceback, sorted by key so that the
    same context always reads the same way:

        2024-01-01 ... - INFO - Network created [channel=mychannel msp_id=Org1MSP]
    """

    def formatMessage(self, record: logging.LogRecord) -> str:  # noqa: N802
        message = super().formatMessage(record)
        context = getattr(record, CONTEXT_ATTRIBUTE, None)
        if not context:
            return message
        pairs = " ".join(f"{key}={context[key]}" for key in sorted(context))
        return f"{message} [{pairs}]"


class SimpleLogger(LoggerPort):
    """Logger implementation using Python's standard logging.

    Keyword context travels on the record as ``gateway_context``, so it never
    collides with the record's own attributes (``name``, ``msg`` ...).
    """

    def __init__(self, name: str = "ledger_gateway", level: int = logging.INFO):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                ContextFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            self._logger.addHandler(handler)

    @staticmethod
    def _extra(kwargs: dict[str, Any]) -> dict[str, Any]:
        return {CONTEXT_ATTRIBUTE: kwargs}

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, extra=self._extra(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, extra=self._extra(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, extra=self._extra(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, extra=self._extra(kwargs))

    def exception(self, message: str, exc_info: Exception | None = None, **kwargs: Any) -> None:
        self._logger.exception(message, exc_info=exc_info or True, extra=self._extra(kwargs))

"""
Structured logging for the CLI and the catalog and utils layers.

Two renderings of the same record are supported: ``level name message
key=value ...`` lines for terminals, and one JSON object per line for
piping CLI runs into log tooling. Long values (event content, tag dumps)
are cut to a configurable length in both.

[Logger][nostrkinds.core.logger.Logger] attaches its keyword arguments to
the record as the ``structured_kv`` extra. In JSON mode it serializes the
record itself and marks it so the formatter passes it through.

[StructuredFormatter][nostrkinds.core.logger.StructuredFormatter] is the
root handler's formatter. It renders ``Logger`` records and plain
``logging.getLogger(__name__)`` records (catalog loader, signature
verifier) in the same format, so a JSON run never mixes in text lines.

Examples:
    ```python
    from nostrkinds.core.logger import Logger

    logger = Logger("validate")
    logger.info("events_validated", total=3, invalid=1)
    # Output: info validate events_validated total=3 invalid=1

    json_logger = Logger("validate", json_output=True)
    json_logger.info("events_validated", total=3)
    # Output: {"timestamp": "...", "level": "info", "logger": "validate", ...}
    ```
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, ClassVar


_TRUNCATION_SUFFIX = "...<truncated {} chars>"
_PRESERIALIZED = "structured_json"


def _truncate(value: str, max_length: int | None) -> str:
    if max_length and len(value) > max_length:
        return value[:max_length] + _TRUNCATION_SUFFIX.format(len(value) - max_length)
    return value


def _json_line(
    created: float,
    level: str,
    logger_name: str,
    message: str,
    fields: dict[str, Any],
    max_value_length: int | None,
) -> str:
    record = {
        "timestamp": datetime.datetime.fromtimestamp(created, datetime.UTC).isoformat(),
        "level": level,
        "logger": logger_name,
        "message": message,
        **{k: _truncate(str(v), max_value_length) for k, v in fields.items()},
    }
    return json.dumps(record, default=str)


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Render *kwargs* as space-separated ``key=value`` pairs.

    Empty values and values holding whitespace, ``=`` or quotes are
    double-quoted with backslash escaping.

    Args:
        kwargs: Fields to render, in order.
        max_value_length: Cut each value to this many characters.
            None disables cutting.
        prefix: Prepended to a non-empty result.

    Returns:
        For example ``' kind=7 error="Missing required tag: p"'``, or an
        empty string when *kwargs* is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for key, value in kwargs.items():
        text = _truncate(str(value), max_value_length)
        if not text or any(c in text for c in " =\"'"):
            escaped = text.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        else:
            parts.append(f"{key}={text}")
    return prefix + " ".join(parts)


class StructuredFormatter(logging.Formatter):
    """Root handler formatter shared by ``Logger`` and plain loggers.

    Text mode renders ``level name message key=value ...``; records without
    ``structured_kv`` get no trailing pairs. JSON mode wraps every record
    in a JSON object, except records a JSON ``Logger`` already serialized.
    """

    def __init__(self, *, json_output: bool = False) -> None:
        super().__init__()
        self.json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        fields: dict[str, Any] = getattr(record, "structured_kv", {})
        if self.json_output:
            if getattr(record, _PRESERIALIZED, False):
                return record.getMessage()
            return _json_line(
                record.created,
                record.levelname.lower(),
                record.name,
                record.getMessage(),
                fields,
                None,
            )
        base = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        return base + format_kv_pairs(fields)


class Logger:
    """Logger whose level methods take the record's fields as kwargs.

    Examples:
        ```python
        logger = Logger("catalog")
        logger.info("catalog_loaded", kinds=71, references=5)
        ```
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
    ) -> None:
        """
        Args:
            name: Passed to ``logging.getLogger(name)``.
            json_output: Serialize records to JSON instead of attaching
                ``structured_kv``.
            max_value_length: Per-value cut length. Defaults to 1000.
        """
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = (
            self._DEFAULT_MAX_VALUE_LENGTH if max_value_length is None else max_value_length
        )

    @property
    def name(self) -> str:
        return self._logger.name

    def _format_json(self, msg: str, level: str, kwargs: dict[str, Any]) -> str:
        return _json_line(
            datetime.datetime.now(datetime.UTC).timestamp(),
            level,
            self._logger.name,
            msg,
            kwargs,
            self._max_value_length,
        )

    def _make_extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        # Short values keep their type; long ones become cut strings.
        limit = self._max_value_length
        fields = {
            key: _truncate(str(value), limit) if limit and len(str(value)) > limit else value
            for key, value in kwargs.items()
        }
        return {"structured_kv": fields} if fields else {}

    def _log(self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False) -> None:
        if self._json_output:
            line = self._format_json(msg, logging.getLevelName(level).lower(), kwargs)
            self._logger.log(level, line, exc_info=exc_info, extra={_PRESERIALIZED: True})
        else:
            self._logger.log(level, msg, exc_info=exc_info, extra=self._make_extra(kwargs))

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log at ERROR with the active exception's traceback."""
        self._log(logging.ERROR, msg, kwargs, exc_info=True)

"""
Structured logging with key=value and JSON output support.

Wraps the standard library ``logging`` module so that every log call takes
a short event name plus keyword fields. Output is human-readable key=value
pairs by default, or one JSON object per line for machine consumption.

Values containing spaces, equals signs, or quotes are escaped and wrapped in
double quotes. Long values (hex payloads, pasted JSON) are truncated.
Fields named in ``SENSITIVE_KEYS`` are always replaced by a mask, so private
key material decoded from an ``nsec`` can never reach a log line.

Examples:
    ```python
    from decodenote.core.logger import Logger

    logger = Logger("classifier")
    logger.debug("identifier_decoded", prefix="npub", relays=2)
    # Output: debug classifier identifier_decoded prefix=npub relays=2

    json_logger = Logger("classifier", json_output=True)
    json_logger.info("classified", result="event")
    # Output: {"timestamp": "...", "level": "info", "logger": "classifier", ...}
    ```
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, ClassVar


SENSITIVE_KEYS: frozenset[str] = frozenset({"secret_key", "nsec", "private_key"})
_MASK = "[redacted]"


def _truncate(value: str, max_value_length: int | None) -> str:
    if max_value_length and len(value) > max_value_length:
        return value[:max_value_length] + f"...<truncated {len(value) - max_value_length} chars>"
    return value


def format_kv_pairs(
    kwargs: dict[str, Any],
    max_value_length: int | None = 1000,
    prefix: str = " ",
) -> str:
    """Format a dictionary as space-separated key=value pairs.

    Args:
        kwargs: Key-value pairs to format.
        max_value_length: Maximum characters per value before truncation.
            Pass None to disable truncation.
        prefix: String prepended to the output (default: single space).

    Returns:
        Formatted string, e.g. ' key1=value1 key2="value with spaces"'.
        Returns empty string if kwargs is empty.
    """
    if not kwargs:
        return ""

    parts = []
    for k, v in kwargs.items():
        s = _truncate(str(v), max_value_length)
        if not s or " " in s or "=" in s or '"' in s or "'" in s:
            escaped = s.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{k}="{escaped}"')
        else:
            parts.append(f"{k}={s}")

    return prefix + " ".join(parts)


def redact(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *kwargs* with every sensitive field masked."""
    return {k: (_MASK if k in SENSITIVE_KEYS else v) for k, v in kwargs.items()}


class StructuredFormatter(logging.Formatter):
    """Formats all log records as ``level name message key=value ...``.

    Reads structured data from the ``structured_kv`` extra field attached by
    [Logger][decodenote.core.logger.Logger]. Records from plain
    ``logging.getLogger()`` calls are emitted with the same prefix and no
    fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        extra: dict[str, Any] = getattr(record, "structured_kv", {})
        if extra:
            base += format_kv_pairs(extra)
        return base


class Logger:
    """Structured logger that appends keyword arguments as extra fields.

    All public methods mirror the standard logging API with an added
    ``**kwargs`` parameter. Sensitive keys are masked before formatting.

    Examples:
        ```python
        logger = Logger("validator")
        logger.info("event_validated", id="ab12...", valid=True)
        # Output: info validator event_validated id=ab12... valid=True
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
        """Initialize a structured logger.

        Args:
            name: Logger name, typically the module's role
                (``classifier``, ``codec``, ``validator``, ``cli``).
            json_output: If True, emit JSON objects instead of key=value pairs.
            max_value_length: Maximum character length for individual values
                before truncation. Defaults to 1000.
        """
        if max_value_length is None:
            max_value_length = self._DEFAULT_MAX_VALUE_LENGTH
        self._logger = logging.getLogger(f"decodenote.{name}")
        self._json_output = json_output
        self._max_value_length = max_value_length

    @property
    def name(self) -> str:
        return self._logger.name

    def _format_json(self, msg: str, level: str, kwargs: dict[str, Any]) -> str:
        record = {
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
            "level": level,
            "logger": self._logger.name,
            "message": msg,
            **self._truncated(kwargs),
        }
        return json.dumps(record, default=str)

    def _truncated(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        truncated: dict[str, Any] = {}
        for k, v in kwargs.items():
            s = str(v)
            if self._max_value_length and len(s) > self._max_value_length:
                truncated[k] = _truncate(s, self._max_value_length)
            else:
                truncated[k] = v
        return truncated

    def _make_extra(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        if not kwargs:
            return {}
        return {"structured_kv": self._truncated(kwargs)}

    def _log(self, level: int, msg: str, kwargs: dict[str, Any], *, exc_info: bool = False) -> None:
        if not self._logger.isEnabledFor(level):
            return
        fields = redact(kwargs)
        if self._json_output:
            name = logging.getLevelName(level).lower()
            self._logger.log(level, self._format_json(msg, name, fields), exc_info=exc_info)
        else:
            self._logger.log(level, msg, extra=self._make_extra(fields), exc_info=exc_info)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a DEBUG level message with optional key=value pairs."""
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an INFO level message with optional key=value pairs."""
        self._log(logging.INFO, msg, kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log a WARNING level message with optional key=value pairs."""
        self._log(logging.WARNING, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with optional key=value pairs."""
        self._log(logging.ERROR, msg, kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log an ERROR level message with exception traceback."""
        self._log(logging.ERROR, msg, kwargs, exc_info=True)


class JsonFormatter(logging.Formatter):
    """Formats all log records as one JSON object per line.

    The ``structured_kv`` fields attached by
    [Logger][decodenote.core.logger.Logger] become top-level keys next to
    ``timestamp``, ``level``, ``logger`` and ``message``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.datetime.fromtimestamp(record.created, datetime.UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            **getattr(record, "structured_kv", {}),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(level: str = "INFO", *, json_output: bool = False) -> None:
    """Install a structured handler on the root logger.

    Uses [StructuredFormatter][decodenote.core.logger.StructuredFormatter]
    by default and [JsonFormatter][decodenote.core.logger.JsonFormatter]
    with ``json_output``. Calling this more than once replaces the
    previously installed handler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_output else StructuredFormatter())
    handler.set_name("decodenote")
    for existing in list(logging.root.handlers):
        if existing.get_name() == "decodenote":
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper()))

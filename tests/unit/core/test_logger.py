"""
Unit tests for core.logger module.

Tests:
- Logger initialization and naming
- Structured key=value message formatting
- Sensitive field redaction
- JSON output from the Logger and from JsonFormatter
- setup_logging() handler installation
"""

import json
import logging

import pytest

from decodenote.core import Logger, StructuredFormatter, format_kv_pairs, setup_logging
from decodenote.core.logger import JsonFormatter, redact


SECRET = "67dea2ed018072d675f5415ecfaed7d2597555e202d85b3d65ea4e58d2d92ffa"  # pragma: allowlist secret


class TestInit:
    """Logger initialization."""

    def test_name_is_namespaced(self):
        assert Logger("codec").name == "decodenote.codec"

    def test_default_not_json(self):
        assert Logger("test")._json_output is False

    def test_json_mode(self):
        assert Logger("test", json_output=True)._json_output is True


class TestFormatKvPairs:
    """Key-value pairs formatting and escaping."""

    def test_simple(self):
        assert format_kv_pairs({"key": "hello"}) == " key=hello"
        assert format_kv_pairs({"key": 123}) == " key=123"

    def test_with_spaces(self):
        assert format_kv_pairs({"key": "hello world"}) == ' key="hello world"'

    def test_with_equals(self):
        assert format_kv_pairs({"key": "foo=bar"}) == ' key="foo=bar"'

    def test_with_double_quotes(self):
        assert format_kv_pairs({"key": 'say "hello"'}) == ' key="say \\"hello\\""'

    def test_empty_value(self):
        assert format_kv_pairs({"key": ""}) == ' key=""'

    def test_empty_dict(self):
        assert format_kv_pairs({}) == ""

    def test_truncation(self):
        result = format_kv_pairs({"key": "x" * 1500}, max_value_length=1000)
        assert "truncated 500 chars" in result

    def test_no_truncation(self):
        assert "truncated" not in format_kv_pairs({"key": "x" * 1500}, max_value_length=None)

    def test_custom_prefix(self):
        assert format_kv_pairs({"key": "val"}, prefix="") == "key=val"


class TestRedact:
    """Sensitive keys are masked."""

    @pytest.mark.parametrize("key", ["secret_key", "nsec", "private_key"])
    def test_sensitive(self, key: str):
        assert redact({key: SECRET}) == {key: "[redacted]"}

    def test_other_keys_untouched(self):
        assert redact({"pubkey": "b" * 64, "count": 2}) == {"pubkey": "b" * 64, "count": 2}


# =============================================================================
# Emission Tests
# =============================================================================


class TestEmission:
    """Records emitted through the standard logging machinery."""

    def test_structured_kv_attached(self, caplog: pytest.LogCaptureFixture):
        logger = Logger("test_emit")
        with caplog.at_level(logging.DEBUG, logger="decodenote.test_emit"):
            logger.info("event_validated", valid=True, errors=0)

        record = caplog.records[-1]
        assert record.getMessage() == "event_validated"
        assert record.structured_kv == {"valid": True, "errors": 0}

    def test_secret_never_logged(self, caplog: pytest.LogCaptureFixture):
        logger = Logger("test_secret")
        with caplog.at_level(logging.DEBUG, logger="decodenote.test_secret"):
            logger.debug("identifier_decoded", secret_key=SECRET)

        assert SECRET not in caplog.text
        assert caplog.records[-1].structured_kv["secret_key"] == "[redacted]"

    def test_disabled_level_skipped(self, caplog: pytest.LogCaptureFixture):
        logger = Logger("test_quiet")
        with caplog.at_level(logging.ERROR, logger="decodenote.test_quiet"):
            logger.debug("noise", a=1)
        assert not [r for r in caplog.records if r.name == "decodenote.test_quiet"]

    def test_long_values_truncated(self, caplog: pytest.LogCaptureFixture):
        logger = Logger("test_long", max_value_length=10)
        with caplog.at_level(logging.INFO, logger="decodenote.test_long"):
            logger.info("pasted", text="x" * 50)
        assert caplog.records[-1].structured_kv["text"].startswith("x" * 10 + "...<truncated")

    def test_json_logger_message(self, caplog: pytest.LogCaptureFixture):
        logger = Logger("test_json", json_output=True)
        with caplog.at_level(logging.INFO, logger="decodenote.test_json"):
            logger.warning("input_unrecognised", length=5, nsec=SECRET)

        parsed = json.loads(caplog.records[-1].getMessage())
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "decodenote.test_json"
        assert parsed["message"] == "input_unrecognised"
        assert parsed["length"] == 5
        assert parsed["nsec"] == "[redacted]"

    def test_exception_includes_traceback(self, caplog: pytest.LogCaptureFixture):
        logger = Logger("test_exc")
        with caplog.at_level(logging.ERROR, logger="decodenote.test_exc"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                logger.exception("failed")
        assert caplog.records[-1].exc_info is not None


# =============================================================================
# Formatter Tests
# =============================================================================


def _record(**structured: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="decodenote.codec",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="identifier_decoded",
        args=None,
        exc_info=None,
    )
    if structured:
        record.structured_kv = structured
    return record


class TestStructuredFormatter:
    """level name message key=value output."""

    def test_with_fields(self):
        line = StructuredFormatter().format(_record(prefix="npub", relays=2))
        assert line == "info decodenote.codec identifier_decoded prefix=npub relays=2"

    def test_plain_record(self):
        assert StructuredFormatter().format(_record()) == "info decodenote.codec identifier_decoded"


class TestJsonFormatter:
    """One JSON object per record."""

    def test_fields_become_keys(self):
        parsed = json.loads(JsonFormatter().format(_record(prefix="npub", relays=2)))
        assert parsed["level"] == "info"
        assert parsed["logger"] == "decodenote.codec"
        assert parsed["message"] == "identifier_decoded"
        assert parsed["prefix"] == "npub"
        assert parsed["relays"] == 2
        assert "timestamp" in parsed


class TestSetupLogging:
    """setup_logging() installs exactly one named handler."""

    @pytest.fixture(autouse=True)
    def _restore_root(self):
        handlers = list(logging.root.handlers)
        level = logging.root.level
        yield
        logging.root.handlers = handlers
        logging.root.setLevel(level)

    def _installed(self) -> list[logging.Handler]:
        return [h for h in logging.root.handlers if h.get_name() == "decodenote"]

    def test_key_value_handler(self):
        setup_logging("DEBUG")
        (handler,) = self._installed()
        assert isinstance(handler.formatter, StructuredFormatter)
        assert logging.root.level == logging.DEBUG

    def test_json_handler(self):
        setup_logging("warning", json_output=True)
        (handler,) = self._installed()
        assert isinstance(handler.formatter, JsonFormatter)
        assert logging.root.level == logging.WARNING

    def test_repeat_replaces_handler(self):
        setup_logging("INFO")
        setup_logging("ERROR")
        assert len(self._installed()) == 1

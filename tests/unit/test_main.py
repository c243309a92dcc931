"""
Unit tests for the decodenote CLI module.

Tests:
- parse_args argument parsing
- load_config merging of file and flags
- main() output and exit codes
"""

import io
import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from decodenote.__main__ import (
    DEFAULT_CONFIG,
    EXIT_CONFIG_ERROR,
    EXIT_OK,
    EXIT_UNRECOGNISED,
    load_config,
    main,
    parse_args,
)
from decodenote.core.exceptions import ConfigurationError


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run every test in an empty directory with the root logger restored."""
    monkeypatch.chdir(tmp_path)
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield tmp_path
    logging.root.handlers = handlers
    logging.root.setLevel(level)


# ============================================================================
# parse_args Tests
# ============================================================================


class TestParseArgs:
    """parse_args()."""

    def test_defaults(self):
        args = parse_args(["npub1abc"])
        assert args.input == "npub1abc"
        assert args.config is None
        assert args.log_level is None
        assert args.reveal_secrets is False

    def test_all_flags(self):
        args = parse_args(
            ["--config", "x.yaml", "--log-level", "DEBUG", "--reveal-secrets", "-"]
        )
        assert args.config == Path("x.yaml")
        assert args.log_level == "DEBUG"
        assert args.reveal_secrets is True
        assert args.input == "-"

    def test_missing_input(self):
        with pytest.raises(SystemExit):
            parse_args([])

    def test_invalid_log_level(self):
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "TRACE", "x"])


# ============================================================================
# load_config Tests
# ============================================================================


class TestLoadConfig:
    """load_config()."""

    def test_no_file(self):
        config = load_config(parse_args(["x"]))
        assert config.logging.level == "WARNING"

    def test_default_file_picked_up(self, isolated_cwd: Path):
        (isolated_cwd / DEFAULT_CONFIG).write_text("display:\n  truncate_length: 5\n")
        assert load_config(parse_args(["x"])).display.truncate_length == 5

    def test_flags_override_file(self, isolated_cwd: Path):
        config_file = isolated_cwd / "custom.yaml"
        config_file.write_text("logging:\n  level: ERROR\n")
        args = parse_args(
            ["--config", str(config_file), "--log-level", "DEBUG", "--reveal-secrets", "x"]
        )
        config = load_config(args)
        assert config.logging.level == "DEBUG"
        assert config.display.reveal_secrets is True

    def test_missing_explicit_file(self):
        with pytest.raises(ConfigurationError):
            load_config(parse_args(["--config", "missing.yaml", "x"]))


# ============================================================================
# main Tests
# ============================================================================


class TestMain:
    """main() exit codes and output."""

    async def test_identifier(self, capsys: pytest.CaptureFixture, npub_vector: tuple[str, str]):
        text, pubkey = npub_vector
        assert await main([text]) == EXIT_OK
        report = json.loads(capsys.readouterr().out)
        assert report["identifier"] == {"type": "npub", "pubkey": pubkey}

    async def test_event_from_stdin(
        self,
        capsys: pytest.CaptureFixture,
        monkeypatch: pytest.MonkeyPatch,
        signed_event_json: str,
    ):
        monkeypatch.setattr("sys.stdin", io.StringIO(signed_event_json))
        assert await main(["-"]) == EXIT_OK
        report = json.loads(capsys.readouterr().out)
        assert report["validation"]["is_valid"] is True

    async def test_nsec_masked_unless_revealed(
        self, capsys: pytest.CaptureFixture, nsec_vector: tuple[str, str]
    ):
        text, secret = nsec_vector
        assert await main([text]) == EXIT_OK
        assert secret not in capsys.readouterr().out

        assert await main(["--reveal-secrets", text]) == EXIT_OK
        assert secret in capsys.readouterr().out

    async def test_unrecognised(self, capsys: pytest.CaptureFixture):
        assert await main(["hello world"]) == EXIT_UNRECOGNISED
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unrecognised input" in captured.err

    async def test_config_error(self, isolated_cwd: Path):
        (isolated_cwd / "bad.yaml").write_text("codec:\n  max_length: 1\n")
        assert await main(["--config", "bad.yaml", "a" * 64]) == EXIT_CONFIG_ERROR

"""CLI entry point for DecodeNote.

Inspects one input (a JSON event, a bech32 identifier, a ``nostr:`` URI or a
64-character hex id) and prints the report as JSON on stdout.

Exit codes: 0 on success, 1 on configuration errors, 2 when the input is
not recognised.

Examples:
    ```bash
    decodenote npub1...
    decodenote "nostr:nevent1qqs..."
    python -m decodenote --log-level DEBUG "$(cat event.json)"
    echo '{"id": ...}' | decodenote -
    ```
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from decodenote.core.config import InspectorConfig
from decodenote.core.exceptions import ConfigurationError
from decodenote.core.logger import Logger, setup_logging
from decodenote.inspector import Inspector


DEFAULT_CONFIG = Path("decodenote.yaml")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_UNRECOGNISED = 2

logger = Logger("cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="decodenote",
        description="Inspect Nostr events and NIP-19 identifiers",
    )

    parser.add_argument(
        "input",
        help="Event JSON, bech32 identifier, nostr: URI or hex id ('-' reads stdin)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help=f"Config path (default: {DEFAULT_CONFIG} if it exists)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides the config file)",
    )

    parser.add_argument(
        "--reveal-secrets",
        action="store_true",
        help="Show decoded nsec private keys instead of masking them",
    )

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> InspectorConfig:
    """Build the effective configuration from the config file and CLI flags.

    Raises:
        ConfigurationError: If an explicit ``--config`` is missing or invalid.
    """
    if args.config is not None:
        data = InspectorConfig.from_yaml(args.config).model_dump()
    elif DEFAULT_CONFIG.exists():
        data = InspectorConfig.from_yaml(DEFAULT_CONFIG).model_dump()
    else:
        data = {}

    if args.log_level:
        data.setdefault("logging", {})["level"] = args.log_level
    if args.reveal_secrets:
        data.setdefault("display", {})["reveal_secrets"] = True
    return InspectorConfig.from_dict(data)


async def main(argv: list[str] | None = None) -> int:
    """Main entry point: parse args, load config, inspect, print."""
    args = parse_args(argv)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        setup_logging("ERROR")
        logger.error("config_invalid", error=str(e))
        return EXIT_CONFIG_ERROR

    setup_logging(config.logging.level, json_output=config.logging.json_output)

    text = sys.stdin.read() if args.input == "-" else args.input
    report = await Inspector(config).inspect(text)
    if report is None:
        logger.warning("input_unrecognised")
        print(
            "Unrecognised input: expected event JSON, a NIP-19 identifier, or a hex id",
            file=sys.stderr,
        )
        return EXIT_UNRECOGNISED

    print(json.dumps(report, indent=2, ensure_ascii=False))
    return EXIT_OK


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()

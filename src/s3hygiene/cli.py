"""CLI entry point for s3hygiene: sanitize, validate and encode S3 parameters."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from s3hygiene.config import HygieneConfig, check_profile, load_config
from s3hygiene.errors import UnknownRuleError
from s3hygiene.logging_config import configure_logging
from s3hygiene.registry import resolve_kind, sanitize, validate
from s3hygiene.rules import RuleKind
from s3hygiene.serialization import decode_object_name, encode_object_name

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        prog="s3hygiene",
        description="Sanitize and validate Amazon S3 request parameters",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config, default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        default=None,
        choices=["text", "json"],
        help="Log format: 'text' (human-readable) or 'json' (structured)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    rules = ", ".join(kind.value for kind in RuleKind)

    sanitize_parser = subparsers.add_parser("sanitize", help="Print the sanitized value")
    sanitize_parser.add_argument("rule", help=f"Rule name. Valid: {rules}")
    sanitize_parser.add_argument("value")

    validate_parser = subparsers.add_parser(
        "validate", help="Check a value; exit 1 if it is rejected"
    )
    validate_parser.add_argument("rule", help=f"Rule name. Valid: {rules}")
    validate_parser.add_argument("value")

    encode_parser = subparsers.add_parser("encode", help="URL-encode an object key")
    encode_parser.add_argument("key")

    decode_parser = subparsers.add_parser("decode", help="Decode an encoded object key")
    decode_parser.add_argument("key")

    subparsers.add_parser("check", help="Validate the profile section of --config")

    return parser.parse_args(argv)


def _coerce_value(rule: RuleKind, raw: str) -> Any:
    """Durations arrive as text on the command line; pass them on as ints."""
    if rule is RuleKind.DURATION:
        try:
            return int(raw)
        except ValueError:
            return raw
    return raw


def _run_check(config: HygieneConfig) -> int:
    failures = check_profile(config.profile)
    for name, result in failures.items():
        print(f"{name}: {result.violation.value}: {result.message}")
    if failures:
        return EXIT_INVALID
    print("ok")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the s3hygiene CLI.

    Args:
        argv: Argument list to parse. Defaults to sys.argv[1:].

    Returns:
        The process exit code.
    """
    args = parse_args(argv)

    config = HygieneConfig()
    if args.config is not None:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            print(f"Error: config file not found: {args.config}", file=sys.stderr)
            return EXIT_INVALID
        except Exception as exc:
            print(f"Error reading config: {exc}", file=sys.stderr)
            return EXIT_INVALID

    if args.log_level is not None:
        config.logging.level = args.log_level
    if args.log_format is not None:
        config.logging.format = args.log_format

    configure_logging(level=config.logging.level, fmt=config.logging.format)

    if args.command == "encode":
        print(encode_object_name(args.key))
        return EXIT_OK

    if args.command == "decode":
        print(decode_object_name(args.key))
        return EXIT_OK

    if args.command == "check":
        if args.config is None:
            print("Error: check requires --config", file=sys.stderr)
            return EXIT_USAGE
        return _run_check(config)

    try:
        rule = resolve_kind(args.rule)
        value = _coerce_value(rule, args.value)
        if args.command == "sanitize":
            print(sanitize(rule, value))
            return EXIT_OK
        result = validate(rule, value)
    except UnknownRuleError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if result.valid:
        print("ok")
        return EXIT_OK
    print(f"{result.violation.value}: {result.message}")
    return EXIT_INVALID


def entry_point() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    entry_point()

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from .core import (
    DevUrnError,
    breakdown,
    detect,
    generate,
    list_subtypes,
    lookup,
    validate,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devurn",
        description="Generate, validate and decode RFC 9039 DEV URNs",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help="Send requests to a running DEV URN API instead of computing locally",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("subtypes", help="List supported subtypes")

    detect_cmd = commands.add_parser("detect", help="Guess the subtype of an identifier")
    detect_cmd.add_argument("input")

    for name, summary in (
        ("validate", "Check an identifier against a subtype"),
        ("generate", "Build a DEV URN from an identifier"),
    ):
        command = commands.add_parser(name, help=summary)
        command.add_argument("subtype")
        command.add_argument("input")

    breakdown_cmd = commands.add_parser("breakdown", help="Split a DEV URN into its parts")
    breakdown_cmd.add_argument("urn")
    return parser


def _run_local(args: argparse.Namespace) -> Any:
    if args.command == "subtypes":
        return [descriptor.to_dict() for descriptor in list_subtypes()]
    if args.command == "detect":
        return detect(args.input)
    if args.command == "validate":
        result = validate(args.subtype, args.input)
        return {
            "valid": result.is_valid,
            "error": result.error.value if result.error else None,
            "message": result.message,
        }
    if args.command == "generate":
        return generate(args.subtype, args.input)
    return breakdown(args.urn).to_dict()


def _run_remote(args: argparse.Namespace) -> Any:
    from .api.client import DevUrnHttpClient

    client = DevUrnHttpClient(base_url=args.api_url)
    if args.command == "subtypes":
        return client.subtypes()
    if args.command == "detect":
        return client.detect(args.input)
    if args.command == "validate":
        data = client.validate(args.subtype, args.input)
        return {key: data.get(key) for key in ("valid", "error", "message")}
    if args.command == "generate":
        return client.generate(args.subtype, args.input)
    return client.breakdown(args.urn)


def _render(command: str, result: Any) -> str:
    if command == "subtypes":
        return "\n".join(
            f"{entry['subtype']:<4} {entry['name']} ({entry['format']})" for entry in result
        )
    if command == "detect":
        if result is None:
            return "no subtype detected"
        descriptor = lookup(result)
        return f"{result} ({descriptor.name})" if descriptor else str(result)
    if command == "validate":
        return "valid" if result["valid"] else f"invalid: {result['message']}"
    if command == "breakdown":
        return "\n".join(f"{key}: {value}" for key, value in result.items())
    return str(result)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s [%(name)s] %(message)s",
        )

    try:
        result = _run_remote(args) if args.api_url else _run_local(args)
    except DevUrnError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 2

    print(json.dumps(result, indent=2) if args.json else _render(args.command, result))
    if args.command == "validate" and not result["valid"]:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

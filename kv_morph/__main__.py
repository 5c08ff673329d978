"""Interface for ``python -m kv_morph``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING, Any

from ._version import version
from .logger import setup_logger
from .result import Err
from .sequences import try_partition
from .traversal import try_compact, try_compact_deep, try_flatten


if TYPE_CHECKING:
    from argparse import Namespace
    from collections.abc import Sequence

    from .result import Ok


__all__ = ["main"]

logger = logging.getLogger(__name__)


def _load(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as stream:
        return json.load(stream)


def _run(options: Namespace, payload: Any) -> Ok[Any] | Err:
    if options.command == "flatten":
        return try_flatten(payload)
    if options.command == "compact":
        return try_compact_deep(payload) if options.deep else try_compact(payload)
    return try_partition(payload, options.buckets)


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="kv_morph", description="Transform nested JSON mappings and arrays.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--log-level", default=None, help="logging level (default: $KV_MORPH_LOG_LEVEL or WARNING)")
    commands = parser.add_subparsers(dest="command", required=True)

    flatten_cmd = commands.add_parser("flatten", help="hoist nested pairs to the top level")
    compact_cmd = commands.add_parser("compact", help="drop null and empty-object entries")
    _ = compact_cmd.add_argument("--deep", action="store_true", help="compact nested objects too")
    partition_cmd = commands.add_parser("partition", help="split an array into balanced buckets")
    _ = partition_cmd.add_argument("-k", "--buckets", type=int, required=True, help="number of buckets")

    for command in (flatten_cmd, compact_cmd, partition_cmd):
        _ = command.add_argument("input", nargs="?", default="-", help="JSON file, '-' for stdin")
    return parser


def main(args: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    options = _build_parser().parse_args(args)
    _ = setup_logger(level=options.log_level)

    try:
        payload = _load(options.input)
    except json.JSONDecodeError as exc:
        logger.debug("could not decode %s", options.input, exc_info=exc)
        print(f"error: invalid JSON input: {exc}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("could not read %s", options.input, exc_info=exc)
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 1

    outcome = _run(options, payload)
    if isinstance(outcome, Err):
        print(f"error: {outcome.message}", file=sys.stderr)
        return 1
    print(json.dumps(outcome.value))
    return 0


if __name__ == "__main__":
    sys.exit(main())

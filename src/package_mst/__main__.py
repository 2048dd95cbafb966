"""Command line entry point for the package MST lookup."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .builder import MstBuilderConfig
from .runner import run_file


def _env_seed() -> int | None:
    value = os.getenv("PACKAGE_MST_SEED")
    return int(value) if value else None


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a minimum spanning tree and look up edges by package code."
    )
    parser.add_argument("input", type=Path, help="Graph file: 'V E' header then edge records, or a CSV")
    parser.add_argument("--query", help="Package code to look up (prompted for when omitted)")
    parser.add_argument("--output", type=Path, help="Write the MST edges to this CSV or Excel file")
    parser.add_argument(
        "--seed",
        type=int,
        default=_env_seed(),
        help="Seed for index priorities (default: $PACKAGE_MST_SEED, else random)",
    )
    parser.add_argument(
        "--vertex-count",
        type=int,
        help="Vertex count for CSV input (default: one past the largest vertex index)",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the MST and the lookup result")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable the progress bar on large graphs",
    )
    return parser.parse_args(argv)


def _prompt_query() -> str | None:
    if not sys.stdin.isatty():
        return None
    try:
        return input("Enter the package code to search: ")
    except EOFError:
        return None


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    config = MstBuilderConfig(
        seed=args.seed,
        verbose=not args.quiet,
        use_tqdm=False if args.disable_tqdm else None,
    )

    query = args.query
    if query is None:
        query = _prompt_query()

    outcome = run_file(
        args.input,
        query=query,
        config=config,
        output_path=args.output,
        vertex_count=args.vertex_count,
    )
    return 0 if outcome is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

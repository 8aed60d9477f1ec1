"""Command line: ``mergesvg merge`` and ``mergesvg prefetch``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from mergesvg.cache import RemoteCache
from mergesvg.config import Settings
from mergesvg.engine.config import MergeConfig
from mergesvg.engine.pipeline import load_layout, merge_layout_file
from mergesvg.engine.prefetch import prefetch_remotes
from mergesvg.errors import LayoutError, OutputError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 2


def build_parser(s: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mergesvg", description="Compose SVG fragments onto one canvas.")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    merge = sub.add_parser("merge", help="merge a layout into one SVG")
    merge.add_argument("--layout", type=Path, required=True, help="layout JSON file")
    merge.add_argument("--out", type=Path, default=Path(s.mergesvg_output), help="output SVG path")
    merge.add_argument("--cache-dir", type=Path, default=Path(s.mergesvg_cache_dir), help="prefetched remotes")
    merge.add_argument("--base-dir", type=Path, default=None, help="directory local paths are relative to")
    merge.add_argument("--timeout", type=float, default=s.mergesvg_fetch_timeout, help="fetch timeout (s)")

    prefetch = sub.add_parser("prefetch", help="download remote SVGs into the cache")
    prefetch.add_argument("--layout", type=Path, required=True, help="layout JSON file")
    prefetch.add_argument("--outdir", type=Path, default=Path(s.mergesvg_cache_dir), help="cache directory")
    prefetch.add_argument("--timeout", type=float, default=s.mergesvg_prefetch_timeout, help="fetch timeout (s)")

    return parser


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def _run_merge(args: argparse.Namespace) -> int:
    config = MergeConfig(
        layout_path=args.layout.resolve(),
        output_path=args.out,
        cache_dir=args.cache_dir,
        working_dir=args.base_dir.resolve() if args.base_dir else Path.cwd(),
        fetch_timeout=args.timeout,
    )
    document = merge_layout_file(config)
    if document.warnings:
        logger.warning("%d element(s) skipped", len(document.warnings))
    print(f"Merged SVG written to {config.output_path.resolve()}")
    return EXIT_OK


def _run_prefetch(args: argparse.Namespace) -> int:
    layout = load_layout(args.layout.resolve())
    report = prefetch_remotes(layout, RemoteCache(args.outdir.resolve()), timeout=args.timeout)
    print(f"Done. Fetched {report.fetched} remote SVG(s) to {args.outdir.resolve()}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    s = Settings()
    args = build_parser(s).parse_args(argv)
    _configure_logging(s.mergesvg_log_level, args.verbose)

    try:
        if args.command == "merge":
            return _run_merge(args)
        return _run_prefetch(args)
    except (LayoutError, OutputError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())

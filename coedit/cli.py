"""
`coedit` command-line interface.

Commands
--------
coedit regions FILE...                         -- list the regions of each file
coedit regions FILE... --json                  -- same, as JSON
coedit partition --workers N FILE...           -- deal files to N worker buckets
coedit hunks DIFF_FILE                         -- list hunks with previews
coedit apply ORIGINAL DIFF_FILE                -- apply every hunk
coedit apply ORIGINAL DIFF_FILE --hunk hunk-0  -- apply selected hunks only
coedit diff ORIGINAL MODIFIED                  -- generate a unified diff
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from tqdm import tqdm

from .config import Config
from .errors import HunkApplyError, PartitionError
from .hunks import apply_hunks, generate_diff, get_hunk_stats, parse_diff
from .regions import RegionExtractor, assign_regions_to_workers

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _read(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        return fh.read()


def _analyze(paths: list[str], config: Config) -> list:
    """Analyze *paths* with one extractor, showing progress on a TTY."""
    extractor = RegionExtractor.from_config(config)
    regions = []
    for path in tqdm(paths, unit="file", desc="Analyzing", disable=None):
        try:
            content = _read(path)
        except OSError as exc:
            print(f"Cannot read {path}: {exc}", file=sys.stderr)
            continue
        regions.extend(extractor.analyze_file(path, content))
    return regions


def _print_regions(regions: list) -> None:
    """Pretty-print regions grouped by file."""
    current_file = None
    for r in regions:
        if r.file_path != current_file:
            current_file = r.file_path
            print(f"\n{current_file}")
            print("-" * 60)
        label = f"{r.type.value:<16}  {r.name}"
        print(f"  {label:<44}  {r.start_line}-{r.end_line}")


# ---------------------------------------------------------------------------
# Sub-command handlers
# ---------------------------------------------------------------------------

def _cmd_regions(args: argparse.Namespace, config: Config) -> int:
    regions = _analyze(args.files, config)
    if args.json:
        print(json.dumps([r.to_dict() for r in regions], indent=2))
    else:
        _print_regions(regions)
    return 0


def _cmd_partition(args: argparse.Namespace, config: Config) -> int:
    regions = _analyze(args.files, config)
    try:
        buckets = assign_regions_to_workers(regions, args.workers)
    except PartitionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        payload = {
            str(worker): sorted({r.file_path for r in bucket})
            for worker, bucket in buckets.items()
        }
        print(json.dumps(payload, indent=2))
        return 0

    for worker, bucket in buckets.items():
        files = sorted({r.file_path for r in bucket})
        print(f"worker {worker}: {len(files)} file(s), {len(bucket)} region(s)")
        for path in files:
            print(f"  {path}")
    return 0


def _cmd_hunks(args: argparse.Namespace, config: Config) -> int:
    parsed = parse_diff(_read(args.diff))
    if args.json:
        print(json.dumps({
            "original_path": parsed.original_path,
            "modified_path": parsed.modified_path,
            "hunks": [h.to_dict() for h in parsed.hunks],
        }, indent=2))
        return 0

    print(f"--- {parsed.original_path}\n+++ {parsed.modified_path}")
    for hunk in parsed.hunks:
        print(f"  {hunk.id:<10}  {hunk.header}")
        print(f"  {'':<10}  {hunk.preview}")
    stats = get_hunk_stats(parsed.hunks)
    print(
        f"\n{stats.total_hunks} hunk(s), "
        f"+{stats.total_additions} / -{stats.total_removals}"
    )
    return 0


def _cmd_apply(args: argparse.Namespace, config: Config) -> int:
    parsed = parse_diff(_read(args.diff))
    hunks = parsed.select(args.hunk) if args.hunk else parsed.hunks
    if args.hunk and len(hunks) != len(set(args.hunk)):
        known = {h.id for h in parsed.hunks}
        missing = sorted(set(args.hunk) - known)
        print(f"Unknown hunk id(s): {', '.join(missing)}", file=sys.stderr)
        return 1

    strict = config.STRICT_APPLY and not args.lenient
    try:
        result = apply_hunks(_read(args.original), hunks, strict=strict)
    except HunkApplyError as exc:
        print(f"Cannot apply diff: {exc}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(result)
        logger.info("[Hunks] Wrote %d hunk(s) to %s", len(hunks), args.output)
    else:
        sys.stdout.write(result)
    return 0


def _cmd_diff(args: argparse.Namespace, config: Config) -> int:
    diff = generate_diff(
        _read(args.original),
        _read(args.modified),
        path=args.path or args.original,
        context_lines=config.DIFF_CONTEXT_LINES,
    )
    if diff:
        print(diff)
    return 0


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="coedit",
        description="Region partitioning and hunk-level diffs for concurrent editing",
    )
    parser.add_argument("--config", default=None, help="Path to a .coedit.yaml file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="cmd", metavar="COMMAND")
    subparsers.required = True

    # --- regions ---
    regions_p = subparsers.add_parser("regions", help="List code regions of files")
    regions_p.add_argument("files", nargs="+", help="Source files to analyze")
    regions_p.add_argument("--json", action="store_true", help="Emit JSON")
    regions_p.set_defaults(func=_cmd_regions)

    # --- partition ---
    partition_p = subparsers.add_parser(
        "partition", help="Assign files to worker buckets without splitting a file",
    )
    partition_p.add_argument("files", nargs="+", help="Source files to partition")
    partition_p.add_argument(
        "-w", "--workers", type=int, required=True, help="Number of worker buckets",
    )
    partition_p.add_argument("--json", action="store_true", help="Emit JSON")
    partition_p.set_defaults(func=_cmd_partition)

    # --- hunks ---
    hunks_p = subparsers.add_parser("hunks", help="List the hunks of a unified diff")
    hunks_p.add_argument("diff", help="Unified diff file")
    hunks_p.add_argument("--json", action="store_true", help="Emit JSON")
    hunks_p.set_defaults(func=_cmd_hunks)

    # --- apply ---
    apply_p = subparsers.add_parser("apply", help="Apply all or selected hunks")
    apply_p.add_argument("original", help="File the diff was generated against")
    apply_p.add_argument("diff", help="Unified diff file")
    apply_p.add_argument(
        "--hunk", action="append", default=None, metavar="ID",
        help="Hunk id to apply (repeatable); default applies every hunk",
    )
    apply_p.add_argument(
        "--lenient", action="store_true",
        help="Clamp mismatched hunks instead of failing",
    )
    apply_p.add_argument("-o", "--output", default=None, help="Write result to file")
    apply_p.set_defaults(func=_cmd_apply)

    # --- diff ---
    diff_p = subparsers.add_parser("diff", help="Generate a unified diff of two files")
    diff_p.add_argument("original", help="Original file")
    diff_p.add_argument("modified", help="Modified file")
    diff_p.add_argument("--path", default=None, help="Path to show in the headers")
    diff_p.set_defaults(func=_cmd_diff)

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the `coedit` command.

    Parameters
    ----------
    argv:
        Argument list without the program name. Defaults to sys.argv if None.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = Config.load(args.config)

    # Configure logging if not already configured
    if not logging.root.handlers:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
            format="%(levelname)s  %(name)s  %(message)s",
        )

    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())

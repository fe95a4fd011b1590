#!/usr/bin/env python3
"""
list-photos: Print basic metadata for the camera photos in the Photos
library as JSON, with the dated archive path each original should go to.

Usage:
    list-photos                 # all items
    list-photos --favorites     # favorites album only
    list-favorite-photos        # same, favorites is the default here
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from camera_filter import filter_camera_photos
from models import ListingSummary, PhotoRecord
from normalizer import normalize_items
from photo_library import OsxPhotosSource, PhotoSource, SourceMode, select_items
from report import write_report


# ── Core pipeline ─────────────────────────────────────────────────────────────

def run_pipeline(
    source: PhotoSource,
    mode: SourceMode,
    with_archive_path: bool = True,
    use_progress: bool = False,
) -> Tuple[List[PhotoRecord], ListingSummary]:
    """Query, normalize, derive paths, and filter. Nothing is written here."""
    summary = ListingSummary(mode=mode.value)

    photos = select_items(source, mode)
    summary.items_read = len(photos)

    records = normalize_items(
        photos, with_archive_path=with_archive_path, use_progress=use_progress
    )
    kept = filter_camera_photos(records)
    summary.items_kept = len(kept)
    return kept, summary


def print_summary(summary: ListingSummary) -> None:
    print(f"Source  : {summary.mode}", file=sys.stderr)
    print(f"Read    : {summary.items_read:>6,} items", file=sys.stderr)
    print(f"Kept    : {summary.items_kept:>6,} camera photos", file=sys.stderr)
    print(f"Dropped : {summary.items_dropped:>6,} items", file=sys.stderr)


# ── CLI ───────────────────────────────────────────────────────────────────────

def build_parser(default_mode: SourceMode = SourceMode.ALL) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="list-photos" if default_mode is SourceMode.ALL else "list-favorite-photos",
        description=(
            "List camera photos from the Photos library as JSON, with "
            "their id, date, favorite flag, original filename and archive "
            "path (YYYY/YYYY-MM/YYYY-MM-DD/YYYYMMDD-filename)."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  list-photos --favorites > favorites.json\n"
            "  list-photos --all --library ~/Pictures/Old.photoslibrary\n"
            "  list-favorite-photos --no-archive-path\n"
        ),
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--all",
        action="store_const",
        const="--all",
        dest="source_flag",
        help="Query every item in the library"
        + (" (default)." if default_mode is SourceMode.ALL else "."),
    )
    source.add_argument(
        "--favorites",
        action="store_const",
        const="--favorites",
        dest="source_flag",
        help="Query the favorites album only"
        + (" (default)." if default_mode is SourceMode.FAVORITES else "."),
    )
    parser.add_argument(
        "--library",
        metavar="PATH",
        default=None,
        help="Path to a .photoslibrary to read instead of the system library.",
    )
    parser.add_argument(
        "--no-archive-path",
        action="store_true",
        help="Omit the archive-path field from each record.",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar on stderr.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print read / kept / dropped counts to stderr.",
    )
    return parser


def resolve_mode(args: argparse.Namespace, default_mode: SourceMode) -> SourceMode:
    if args.source_flag is None:
        return default_mode
    return SourceMode.from_flag(args.source_flag)


def main(
    argv: Optional[List[str]] = None,
    default_mode: SourceMode = SourceMode.ALL,
) -> None:
    parser = build_parser(default_mode)
    args = parser.parse_args(argv)

    library_path = None
    if args.library:
        library_path = Path(args.library).expanduser().resolve()
        if not library_path.exists():
            parser.error(f"Library path does not exist: {library_path}")

    mode = resolve_mode(args, default_mode)
    source = OsxPhotosSource(library_path)

    records, summary = run_pipeline(
        source,
        mode,
        with_archive_path=not args.no_archive_path,
        use_progress=not args.no_progress,
    )

    write_report(records)
    if args.verbose:
        print_summary(summary)


def main_favorites(argv: Optional[List[str]] = None) -> None:
    main(argv, default_mode=SourceMode.FAVORITES)


if __name__ == "__main__":
    main()

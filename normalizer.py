import sys
from typing import Iterable, List

from tqdm import tqdm

from archive import build_archive_path
from models import LibraryPhoto, PhotoRecord


def normalize_item(photo: LibraryPhoto, with_archive_path: bool = True) -> PhotoRecord:
    """Flatten one library item into a PhotoRecord."""
    archive_path = None
    if with_archive_path:
        archive_path = build_archive_path(photo.date, photo.filename)
    return PhotoRecord(
        id=photo.id,
        date=photo.date,
        favorite=photo.favorite,
        original_filename=photo.filename,
        archive_path=archive_path,
    )


def normalize_items(
    photos: Iterable[LibraryPhoto],
    with_archive_path: bool = True,
    use_progress: bool = False,
) -> List[PhotoRecord]:
    """Normalize photos in order. The progress bar, if any, goes to stderr."""
    records: List[PhotoRecord] = []
    with tqdm(
        photos,
        unit="photo",
        desc="Reading",
        ncols=80,
        file=sys.stderr,
        disable=not use_progress,
    ) as bar:
        for photo in bar:
            records.append(normalize_item(photo, with_archive_path=with_archive_path))
    return records

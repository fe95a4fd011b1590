import re
from typing import Iterable, List

from models import PhotoRecord

# DSCF0001.JPG (four digits) or R0001234.JPG (seven digits), case-sensitive.
CAMERA_FILENAME_RE = re.compile(r"(DSCF\d{4}|R\d{7})\.JPG$")


def is_camera_filename(filename: str) -> bool:
    return CAMERA_FILENAME_RE.search(filename) is not None


def is_camera_photo(record: PhotoRecord) -> bool:
    """Return True if the record's original filename follows the camera naming."""
    return is_camera_filename(record.original_filename)


def filter_camera_photos(records: Iterable[PhotoRecord]) -> List[PhotoRecord]:
    """Keep camera photos only, preserving input order."""
    return [r for r in records if is_camera_photo(r)]

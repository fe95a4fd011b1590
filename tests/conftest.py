"""
Shared fixtures for the photo-list test suite.
"""
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

import pytest

from models import LibraryPhoto, PhotoRecord


UTC = timezone.utc


# ── Photo helpers ─────────────────────────────────────────────────────────────

def make_photo(
    filename: str,
    date: datetime = datetime(2023, 4, 5, tzinfo=UTC),
    favorite: bool = False,
    id: Optional[str] = None,
) -> LibraryPhoto:
    return LibraryPhoto(
        id=id or f"uuid-{filename}",
        filename=filename,
        date=date,
        favorite=favorite,
    )


class FakeSource:
    """In-memory PhotoSource; favorites are the favorite-flagged items."""

    def __init__(self, photos: Sequence[LibraryPhoto]) -> None:
        self.photos = list(photos)
        self.calls: List[str] = []

    def all_items(self) -> List[LibraryPhoto]:
        self.calls.append("all")
        return list(self.photos)

    def favorites(self) -> List[LibraryPhoto]:
        self.calls.append("favorites")
        return [p for p in self.photos if p.favorite]


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def library() -> FakeSource:
    """A small mixed library: camera shots, phone shots, a screenshot."""
    tokyo = timezone(timedelta(hours=9))
    return FakeSource([
        make_photo("DSCF0001.JPG", favorite=True),
        make_photo("IMG_1234.HEIC", favorite=True),
        make_photo("R0001234.JPG", date=datetime(2023, 4, 6, 1, 0, tzinfo=tokyo)),
        make_photo("Screenshot 2023-04-05.png"),
        make_photo("DSCF0002.JPG", favorite=True, date=datetime(2023, 12, 31, 23, 59, tzinfo=UTC)),
    ])


@pytest.fixture
def sample_record() -> PhotoRecord:
    return PhotoRecord(
        id="8F1C2A3B-0000-4C5D-9E6F-112233445566",
        date=datetime(2023, 4, 5, 0, 0, 0, tzinfo=UTC),
        favorite=True,
        original_filename="DSCF0001.JPG",
        archive_path="2023/2023-04/2023-04-05/20230405-DSCF0001.JPG",
    )


@pytest.fixture
def fixed_date() -> datetime:
    return datetime(2023, 4, 5, 0, 0, 0, tzinfo=UTC)

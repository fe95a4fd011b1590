from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class LibraryPhoto:
    """One item as read from the photo library."""
    id: str
    filename: str
    date: datetime          # timezone-aware capture date
    favorite: bool


@dataclass
class PhotoRecord:
    id: str
    date: datetime
    favorite: bool
    original_filename: str
    archive_path: Optional[str] = None   # None when path derivation is off

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "date": _format_date(self.date),
            "favorite": self.favorite,
            "original-filename": self.original_filename,
        }
        if self.archive_path is not None:
            d["archive-path"] = self.archive_path
        return d

    @staticmethod
    def from_dict(d: dict) -> "PhotoRecord":
        return PhotoRecord(
            id=d["id"],
            date=datetime.fromisoformat(d["date"]),
            favorite=d["favorite"],
            original_filename=d["original-filename"],
            archive_path=d.get("archive-path"),
        )


@dataclass
class ListingSummary:
    mode: str
    items_read: int = 0
    items_kept: int = 0

    @property
    def items_dropped(self) -> int:
        return self.items_read - self.items_kept


def _format_date(value: datetime) -> str:
    """ISO-8601 in UTC; naive values are taken as UTC already."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()

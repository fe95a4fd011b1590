"""
Access to the Photos library.

The pipeline only needs two collections from the library, every item and
the favorites album, and four fields per item. PhotoSource captures that;
OsxPhotosSource is the real implementation backed by osxphotos, which reads
the library database directly and therefore only works on macOS.
"""

import enum
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from models import LibraryPhoto


class SourceMode(enum.Enum):
    ALL = "all"
    FAVORITES = "favorites"

    @classmethod
    def from_flag(cls, flag: str) -> "SourceMode":
        """Map a command-line flag ('--all' / '--favorites') to a mode."""
        name = flag[2:] if flag.startswith("--") else flag
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown source flag: {flag!r}") from None


class PhotoSource(Protocol):
    def all_items(self) -> Sequence[LibraryPhoto]:
        ...

    def favorites(self) -> Sequence[LibraryPhoto]:
        ...


class OsxPhotosSource:
    """PhotoSource over a Photos library, via osxphotos."""

    def __init__(self, library_path: Optional[Path] = None) -> None:
        # osxphotos is macOS only; import when a library is actually opened.
        import osxphotos

        self._osxphotos = osxphotos
        if library_path is None:
            self._db = osxphotos.PhotosDB()
        else:
            self._db = osxphotos.PhotosDB(dbfile=str(library_path))

    @staticmethod
    def _to_library_photo(info) -> LibraryPhoto:
        return LibraryPhoto(
            id=info.uuid,
            filename=info.original_filename,
            date=info.date,
            favorite=bool(info.favorite),
        )

    def all_items(self) -> List[LibraryPhoto]:
        return [self._to_library_photo(p) for p in self._db.photos()]

    def favorites(self) -> List[LibraryPhoto]:
        options = self._osxphotos.QueryOptions(favorite=True)
        return [self._to_library_photo(p) for p in self._db.query(options)]


def select_items(source: PhotoSource, mode: SourceMode) -> Sequence[LibraryPhoto]:
    """Return the collection for mode; the two are never merged."""
    if mode is SourceMode.FAVORITES:
        return source.favorites()
    return source.all_items()

import re
from datetime import datetime, timezone

# Names already carrying an archive prefix, e.g. 20230405-DSCF0001.JPG
DATE_PREFIX_RE = re.compile(r"^\d{8}-")


def to_utc(date: datetime) -> datetime:
    """Normalize to UTC. Naive datetimes are assumed to be UTC already."""
    if date.tzinfo is None:
        return date.replace(tzinfo=timezone.utc)
    return date.astimezone(timezone.utc)


def strip_date_prefix(filename: str) -> str:
    """Drop a leading YYYYMMDD- from filename, if present."""
    return DATE_PREFIX_RE.sub("", filename, count=1)


def build_archive_path(date: datetime, filename: str) -> str:
    """
    Construct: YYYY / YYYY-MM / YYYY-MM-DD / YYYYMMDD-basename
    Example: 2023/2023-04/2023-04-05/20230405-DSCF0001.JPG

    The calendar date is taken in UTC. A filename that already carries the
    YYYYMMDD- prefix is stripped first, so re-deriving is a no-op.
    """
    utc = to_utc(date)
    year = utc.strftime("%Y")
    month = utc.strftime("%m")
    day = utc.strftime("%d")
    basename = strip_date_prefix(filename)
    return (
        f"{year}/{year}-{month}/{year}-{month}-{day}/"
        f"{year}{month}{day}-{basename}"
    )

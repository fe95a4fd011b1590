import json
import sys
from typing import List, Optional, Sequence, TextIO

from models import PhotoRecord

INDENT = 2


def render_report(records: Sequence[PhotoRecord]) -> str:
    """Serialize records as indented JSON."""
    return json.dumps(
        [r.to_dict() for r in records],
        indent=INDENT,
        ensure_ascii=False,
    )


def parse_report(text: str) -> List[PhotoRecord]:
    """Inverse of render_report."""
    return [PhotoRecord.from_dict(d) for d in json.loads(text)]


def write_report(records: Sequence[PhotoRecord], stream: Optional[TextIO] = None) -> None:
    """Write the whole report in one go."""
    if stream is None:
        stream = sys.stdout
    stream.write(render_report(records) + "\n")
    stream.flush()

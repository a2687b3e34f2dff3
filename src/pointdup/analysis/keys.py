import re
from pathlib import Path
from typing import Iterator, NamedTuple

# Records shorter than this have no fifth field and carry no key
MIN_FIELD_COUNT = 5

_FIELD_SEPARATOR = re.compile(r'[ \t]+')


class PointKey(NamedTuple):
    """Composite key identifying a logical point within one file."""
    col1: str
    col2: str
    col5: str


def split_fields(line: str) -> list[str]:
    """Split a record on runs of spaces and tabs, dropping empty tokens."""
    return [token for token in _FIELD_SEPARATOR.split(line) if token]


def extract_key(line: str) -> PointKey | None:
    """Extract the composite key of a single line.

    Returns:
        The key built from the 1st, 2nd and 5th fields, or None for blank lines and
        lines with fewer than five fields
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    fields = split_fields(trimmed)
    if len(fields) < MIN_FIELD_COUNT:
        return None

    return PointKey(fields[0], fields[1], fields[4])


def read_point_keys(path: Path) -> Iterator[tuple[int, PointKey]]:
    """Stream (line_number, key) pairs of a point file.

    Line numbers start at 1 and count every physical line, including the skipped ones.
    The file is decoded as UTF-8 (a leading BOM is ignored) and undecodable bytes are
    replaced rather than failing the read.
    """
    with open(path, 'r', encoding='utf-8-sig', errors='replace') as f:
        for line_number, line in enumerate(f, 1):
            key = extract_key(line)
            if key is not None:
                yield line_number, key

import re
from typing import Iterable

from ..report.record import DuplicateEntry
from ..utils.collation import text_sort_key

_INT32_MIN = -2 ** 31
_INT32_MAX = 2 ** 31 - 1

_INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


def parse_int_or_zero(text: str) -> int:
    """Interpret a field as a 32-bit signed integer for ordering purposes.

    Only an optional sign followed by ASCII digits is accepted. Anything else, including
    values outside the 32-bit range, orders as 0.
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        return 0

    value = int(text)
    if value < _INT32_MIN or value > _INT32_MAX:
        return 0
    return value


def duplicate_sort_key(entry: DuplicateEntry) -> tuple:
    """Numeric then textual col1, followed by numeric then textual col2.

    Text compares linguistically, see text_sort_key().

    col5 does not take part in ordering; entries differing only in col5 keep their
    relative order.
    """
    return (parse_int_or_zero(entry.col1), text_sort_key(entry.col1),
            parse_int_or_zero(entry.col2), text_sort_key(entry.col2))


def sort_duplicates(entries: Iterable[DuplicateEntry]) -> list[DuplicateEntry]:
    return sorted(entries, key=duplicate_sort_key)

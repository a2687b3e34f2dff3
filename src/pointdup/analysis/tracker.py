from ..report.record import DuplicateEntry
from .keys import PointKey


class DuplicateTracker:
    """Groups line numbers by composite key for the lifetime of one file's analysis.

    Keys keep their first-occurrence order and each key's line numbers keep the order in
    which they were recorded, so recording lines in file order yields ascending lists.
    A tracker must not be shared between files.
    """

    def __init__(self):
        self._lines_by_key: dict[PointKey, list[int]] = {}

    def __len__(self):
        return len(self._lines_by_key)

    def record(self, key: PointKey, line_number: int):
        self._lines_by_key.setdefault(key, []).append(line_number)

    def duplicates(self) -> list[DuplicateEntry]:
        """Build one entry per key recorded on two or more lines.

        Keys seen only once are dropped.
        """
        return [
            DuplicateEntry(key.col1, key.col2, key.col5, tuple(line_numbers))
            for key, line_numbers in self._lines_by_key.items()
            if len(line_numbers) > 1
        ]

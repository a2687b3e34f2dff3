"""Result records produced by per-file duplicate analysis."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DuplicateEntry:
    """A composite key found on two or more lines of the same file.

    Attributes:
        col1: First field of the point record, as raw text.
        col2: Second field of the point record, as raw text.
        col5: Fifth field of the point record, as raw text.
        line_numbers: 1-based line numbers carrying this key, strictly increasing.
    """
    col1: str
    col2: str
    col5: str
    line_numbers: tuple[int, ...]

    def __post_init__(self):
        line_numbers = tuple(self.line_numbers)
        if len(line_numbers) < 2:
            raise ValueError(f"A duplicate entry needs at least 2 line numbers, got {len(line_numbers)}")
        for previous, current in zip(line_numbers, line_numbers[1:]):
            if previous >= current:
                raise ValueError(f"Line numbers must be strictly increasing: {line_numbers}")
        if line_numbers[0] < 1:
            raise ValueError(f"Line numbers start at 1: {line_numbers}")
        object.__setattr__(self, 'line_numbers', line_numbers)

    @property
    def occurrence_count(self) -> int:
        return len(self.line_numbers)

    def to_fields(self) -> list[Any]:
        return [self.col1, self.col2, self.col5, list(self.line_numbers)]

    @classmethod
    def from_fields(cls, fields: list[Any]) -> "DuplicateEntry":
        col1, col2, col5, line_numbers = fields
        return cls(col1, col2, col5, tuple(line_numbers))


@dataclass(frozen=True)
class FileDuplicateResult:
    """Duplicate analysis result of a single point file.

    Attributes:
        file_name: Base name of the analyzed file
        file_path: Full path of the analyzed file, as it was enumerated
        duplicates: Duplicate entries in display order
    """
    file_name: str
    file_path: str
    duplicates: tuple[DuplicateEntry, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'duplicates', tuple(self.duplicates))

    @property
    def has_duplicates(self) -> bool:
        return len(self.duplicates) > 0

    def to_fields(self) -> list[Any]:
        """Convert to the plain list structure stored in msgpack.

        Returns:
            [file_name, file_path, duplicate_data_list] where duplicate_data_list is a list of
            [col1, col2, col5, line_numbers]
        """
        return [self.file_name, self.file_path, [entry.to_fields() for entry in self.duplicates]]

    @classmethod
    def from_fields(cls, fields: list[Any]) -> "FileDuplicateResult":
        file_name, file_path, duplicate_data = fields
        return cls(file_name, file_path, tuple(DuplicateEntry.from_fields(d) for d in duplicate_data))

import logging
import os
from pathlib import Path

from ..report.record import FileDuplicateResult
from .keys import read_point_keys
from .sorter import sort_duplicates
from .tracker import DuplicateTracker

logger = logging.getLogger(__name__)


def analyze_point_file(file_path: str | os.PathLike) -> FileDuplicateResult:
    """Find the composite keys recorded more than once within a single point file.

    Args:
        file_path: Path of the point file to read

    Returns:
        FileDuplicateResult whose duplicates are in display order

    Raises:
        OSError: The file cannot be opened or read
    """
    path = Path(file_path)
    tracker = DuplicateTracker()

    for line_number, key in read_point_keys(path):
        tracker.record(key, line_number)

    duplicates = sort_duplicates(tracker.duplicates())
    logger.debug(f"Analyzed {path}: {len(tracker)} distinct keys, {len(duplicates)} duplicated")

    return FileDuplicateResult(path.name, str(file_path), tuple(duplicates))

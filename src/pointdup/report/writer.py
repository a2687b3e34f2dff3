"""Plain-text rendering of a duplicate analysis batch."""

import logging
import os
from pathlib import Path
from typing import Iterator, Sequence

from ..utils.collation import text_sort_key
from .record import FileDuplicateResult

logger = logging.getLogger(__name__)

REPORT_TITLE = 'DUPLICATES WITHIN EACH FILE REPORT'
DUPLICATE_KEY_DESCRIPTION = 'Column1 + Column2 + Column5'
RULE_WIDTH = 80


def iterate_report_lines(results: Sequence[FileDuplicateResult]) -> Iterator[str]:
    """Yield the report line by line, without line terminators.

    Files without duplicates only count towards the totals. Files with duplicates get one
    section each, ordered by file name; files sharing a name keep their batch order.
    """
    files_with_duplicates = [r for r in results if r.has_duplicates]

    yield '=' * RULE_WIDTH
    yield REPORT_TITLE
    yield '=' * RULE_WIDTH
    yield f"Total files analyzed: {len(results)}"
    yield f"Files with internal duplicates: {len(files_with_duplicates)}"
    yield f"Duplicate Key: {DUPLICATE_KEY_DESCRIPTION}"
    yield '=' * RULE_WIDTH
    yield ''

    if not files_with_duplicates:
        yield 'No duplicate combinations found within any file.'
        return

    for file_result in sorted(files_with_duplicates, key=lambda r: text_sort_key(r.file_name)):
        yield '-' * RULE_WIDTH
        yield f"FILE: {file_result.file_name}"
        yield f"Number of duplicate combinations: {len(file_result.duplicates)}"
        yield '-' * RULE_WIDTH

        for entry in file_result.duplicates:
            yield f"  Column1: {entry.col1}, Column2: {entry.col2}, Column5: {entry.col5}"
            yield f"    Appears on lines: {', '.join(str(n) for n in entry.line_numbers)}"
            yield f"    Occurrence count: {entry.occurrence_count}"
        yield ''


def render_report(results: Sequence[FileDuplicateResult]) -> str:
    """Render the whole report as a string with '\\n' line terminators."""
    return ''.join(f"{line}\n" for line in iterate_report_lines(results))


def write_report(results: Sequence[FileDuplicateResult], output_path: str | os.PathLike):
    """Write the report to output_path, replacing any existing content.

    Missing parent directories are created. Lines end with the platform line terminator.

    Raises:
        OSError: The directory cannot be created or the file cannot be written
    """
    output_path = Path(output_path)
    logger.info(f"Writing duplicate report for {len(results)} files to: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        for line in iterate_report_lines(results):
            f.write(line)
            f.write('\n')

    logger.info(f"Completed duplicate report: {output_path}")

import os
from typing import Sequence

from .record import FileDuplicateResult


def format_summary(results: Sequence[FileDuplicateResult], report_path: str | os.PathLike | None = None) -> str:
    """Short human-readable overview of a batch, shown after a run completes.

    Args:
        results: The analysis batch
        report_path: Where the full report was saved; omitted from the summary when None
    """
    files_with_duplicates = sorted((r for r in results if r.has_duplicates), key=lambda r: r.file_name)
    total_duplicates = sum(len(r.duplicates) for r in files_with_duplicates)

    lines = [
        'Analysis completed successfully!',
        '',
        f"Total files analyzed: {len(results)}",
        f"Files with duplicates: {len(files_with_duplicates)}",
        f"Total duplicate combinations found: {total_duplicates}",
    ]

    if report_path is not None:
        lines.append('')
        lines.append(f"Report saved to: {report_path}")

    if files_with_duplicates:
        lines.append('')
        lines.append('Files with duplicates:')
        for file_result in files_with_duplicates:
            lines.append(f"  - {file_result.file_name}: {len(file_result.duplicates)} duplicate combination(s)")

    return '\n'.join(lines) + '\n'

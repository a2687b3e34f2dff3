import logging
import threading
from asyncio import TaskGroup
from pathlib import Path
from typing import NamedTuple

from ..report.record import FileDuplicateResult
from ..utils.processor import Processor
from ..utils.throttler import Throttler

logger = logging.getLogger(__name__)


class AnalysisCancelled(Exception):
    """The cancellation signal stopped an analysis before every file was analyzed."""


class AnalyzeArgs(NamedTuple):
    """Arguments for the parallel analysis of a list of point files."""
    processor: Processor  # Process pool running the per-file analysis
    file_paths: list[Path]  # Point files in enumeration order
    cancel_event: threading.Event | None = None  # Checked before each file is scheduled


class AnalyzeProcessor:
    """Analyzes point files concurrently and collects the results in enumeration order."""

    def __init__(self, args: AnalyzeArgs):
        self._processor = args.processor
        self._file_paths = args.file_paths
        self._cancel_event = args.cancel_event
        self._results: list[FileDuplicateResult | None] = [None] * len(args.file_paths)

    async def run(self) -> list[FileDuplicateResult]:
        cancelled = False

        try:
            async with TaskGroup() as tg:
                throttler = Throttler(tg, self._processor.concurrency * 2)

                for index, file_path in enumerate(self._file_paths):
                    if self._cancel_event is not None and self._cancel_event.is_set():
                        cancelled = True
                        break
                    await throttler.schedule(self._analyze(index, file_path))
        except ExceptionGroup as eg:
            # Surface the first worker failure as a plain exception
            raise eg.exceptions[0] from eg

        if cancelled:
            completed = sum(1 for r in self._results if r is not None)
            logger.info(f"Analysis cancelled after {completed} of {len(self._file_paths)} files")
            raise AnalysisCancelled(f"Analysis cancelled after {completed} of {len(self._file_paths)} files")

        return self._results

    async def _analyze(self, index: int, file_path: Path):
        self._results[index] = await self._processor.analyze_file(file_path)


async def do_analyze(args: AnalyzeArgs) -> list[FileDuplicateResult]:
    """Analyze every file of args.file_paths on the processor's pool.

    Raises:
        AnalysisCancelled: args.cancel_event was set before all files were scheduled
        OSError: A point file could not be read
    """
    return await AnalyzeProcessor(args).run()

import asyncio
import logging
import multiprocessing
from multiprocessing.pool import Pool
import pathlib
from typing import Awaitable

from ..analysis.point_file import analyze_point_file
from ..report.record import FileDuplicateResult
from .profiling import profile_worker

logger = logging.getLogger(__name__)


@profile_worker
def analyze_point_file_in_worker(path: pathlib.Path) -> FileDuplicateResult:
    return analyze_point_file(path)


class Processor:
    """Process pool running per-file analysis off the event loop.

    Each file is analyzed independently in a worker process; callers await the returned
    awaitables from an asyncio event loop.
    """

    def __init__(self, concurrency: int | None = None):
        if concurrency is None:
            concurrency = multiprocessing.cpu_count()
        if concurrency < 1:
            raise ValueError(f"Concurrency must be at least 1, got {concurrency}")

        self._concurrency = concurrency
        self._pool: Pool = Pool(self._concurrency)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self._pool.close()

    @property
    def concurrency(self):
        return self._concurrency

    def analyze_file(self, path: pathlib.Path) -> Awaitable[FileDuplicateResult]:
        """Analyze one point file in the pool.

        :return: awaitable resolving to the file's result, or raising the worker's error"""
        logger.info(f"Starting duplicate analysis for: {path}")

        async def log_and_analyze():
            result = await self._evaluate(analyze_point_file_in_worker, path)
            logger.info(f"Completed duplicate analysis for: {path} (duplicates={len(result.duplicates)})")
            return result

        return log_and_analyze()

    def _evaluate(self, func, *args):
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        # Futures of cancelled tasks may already be done when the worker finishes
        def settle(setter, value):
            if not future.done():
                setter(value)

        def deliver(setter, value):
            if not loop.is_closed():
                loop.call_soon_threadsafe(settle, setter, value)

        self._pool.apply_async(func, args=args,
                               callback=lambda v: deliver(future.set_result, v),
                               error_callback=lambda e: deliver(future.set_exception, e))

        return future

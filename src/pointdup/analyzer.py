import asyncio
import logging
import os
import threading
from pathlib import Path
from typing import Iterable, Sequence

from .analysis.point_file import analyze_point_file
from .commands.analyze import do_analyze, AnalyzeArgs, AnalysisCancelled
from .report.record import FileDuplicateResult
from .report.writer import write_report
from .scan.scanner import list_point_files, DEFAULT_EXTENSION
from .settings import AnalyzerSettings, SETTING_EXTENSION, SETTING_LOG_PATH, SETTING_LOG_LEVEL
from .utils.processor import Processor

logger = logging.getLogger(__name__)


class DuplicateAnalyzer:
    """Entry point for finding duplicate point records within point files.

    Provides the operations consumed by a presentation layer:
    - analyze(): scan directories and analyze every point file in them
    - generate_report(): write the plain-text report for a batch
    - analyze_and_generate_report(): both of the above

    With a Processor, files are analyzed concurrently in its process pool; without one,
    they are analyzed one after another in the calling process. Either way the batch lists
    files in enumeration order. The analyzer holds no state between calls.
    """

    def __init__(self, processor: Processor | None = None, settings: AnalyzerSettings | None = None,
                 extension: str | None = None):
        """
        Args:
            processor: Process pool for concurrent analysis, or None for sequential analysis
            settings: Settings to read scan and logging configuration from
            extension: Point file suffix; overrides the scan.extension setting
        """
        if settings is None:
            settings = AnalyzerSettings()
        if extension is None:
            extension = settings.get(SETTING_EXTENSION, DEFAULT_EXTENSION)

        self._processor = processor
        self._settings = settings
        self._extension = extension

    @property
    def extension(self) -> str:
        return self._extension

    def configure_logging_from_settings(self) -> bool:
        """Configure logging from settings if a log path is specified.

        Preserves the current logging level if already configured (e.g., from CLI arguments),
        unless the settings name a level themselves.

        Returns:
            True if logging was configured, False otherwise
        """
        log_path_setting = self._settings.get(SETTING_LOG_PATH)
        if not log_path_setting:
            return False

        level_setting = self._settings.get(SETTING_LOG_LEVEL)
        if level_setting:
            level = logging.getLevelName(str(level_setting).upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown logging level in settings: {level_setting}")
        else:
            level = logging.root.level if logging.root.level != logging.NOTSET else logging.INFO

        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)

        logging.basicConfig(
            filename=str(log_path_setting),
            level=level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        return True

    def analyze(self, directory_paths: Iterable[str | os.PathLike],
                cancel_event: threading.Event | None = None) -> list[FileDuplicateResult]:
        """Analyze every point file directly inside the given directories.

        Args:
            directory_paths: Directories to scan, in order
            cancel_event: Optional signal checked before each file is started

        Returns:
            One FileDuplicateResult per point file, in enumeration order

        Raises:
            DirectoryNotFound: An input directory does not exist; nothing has been read
            AnalysisCancelled: cancel_event was set before every file was analyzed
            OSError: A point file could not be read
        """
        file_paths = list_point_files(directory_paths, self._extension)
        logger.info(f"Found {len(file_paths)} point files to analyze")

        if self._processor is None:
            return self._analyze_sequentially(file_paths, cancel_event)

        return asyncio.run(do_analyze(AnalyzeArgs(self._processor, file_paths, cancel_event)))

    def analyze_file(self, file_path: str | os.PathLike) -> FileDuplicateResult:
        """Analyze a single point file in the calling process."""
        return analyze_point_file(file_path)

    def generate_report(self, results: Sequence[FileDuplicateResult], output_path: str | os.PathLike):
        """Write the duplicate report for results, replacing output_path.

        Raises:
            OSError: The output directory cannot be created or the report cannot be written
        """
        write_report(results, output_path)

    def analyze_and_generate_report(self, directory_paths: Iterable[str | os.PathLike],
                                    output_path: str | os.PathLike,
                                    cancel_event: threading.Event | None = None) -> list[FileDuplicateResult]:
        """Analyze the directories, write the report and return the batch.

        No report is written when the analysis fails or is cancelled.
        """
        results = self.analyze(directory_paths, cancel_event)
        self.generate_report(results, output_path)
        return results

    @staticmethod
    def _analyze_sequentially(file_paths: list[Path],
                              cancel_event: threading.Event | None) -> list[FileDuplicateResult]:
        results = []
        for file_path in file_paths:
            if cancel_event is not None and cancel_event.is_set():
                logger.info(f"Analysis cancelled after {len(results)} of {len(file_paths)} files")
                raise AnalysisCancelled(f"Analysis cancelled after {len(results)} of {len(file_paths)} files")

            logger.info(f"Starting duplicate analysis for: {file_path}")
            result = analyze_point_file(file_path)
            logger.info(f"Completed duplicate analysis for: {file_path} (duplicates={len(result.duplicates)})")
            results.append(result)
        return results

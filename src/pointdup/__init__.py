from .analyzer import DuplicateAnalyzer
from .analysis.keys import PointKey
from .commands.analyze import AnalysisCancelled
from .scan.scanner import DirectoryNotFound
from .settings import AnalyzerSettings
from .report.record import DuplicateEntry, FileDuplicateResult
from .report.store import ResultManifest, ResultStore
from .utils.processor import Processor

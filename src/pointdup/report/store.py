"""Saved analysis results, so a report or summary can be produced again without re-reading the point files."""

import os
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any

import msgpack

from .record import FileDuplicateResult

RESULT_FORMAT_VERSION = "1.0"


@dataclass
class ResultManifest:
    """Metadata stored ahead of the per-file records."""
    version: str = RESULT_FORMAT_VERSION
    """Saved results format version"""

    timestamp: str = ""
    """ISO format timestamp when analysis was performed"""

    directories: list[str] = field(default_factory=list)
    """Input directories of the analysis, in the order they were given"""

    report_path: str = ""
    """Location the text report was written to, empty if none was written"""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ResultManifest":
        return cls(**data)


class ResultStore:
    """Reads and writes an analysis batch as a msgpack stream.

    The stream holds the manifest dictionary followed by one record per analyzed file,
    in batch order.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    def write(self, manifest: ResultManifest, results: list[FileDuplicateResult]):
        """Write manifest and results, replacing any existing file.

        Raises:
            OSError: The file cannot be written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        packer = msgpack.Packer()
        with open(self.path, 'wb') as f:
            f.write(packer.pack(manifest.to_dict()))
            for result in results:
                f.write(packer.pack(result.to_fields()))

    def read(self) -> tuple[ResultManifest, list[FileDuplicateResult]]:
        """Load manifest and results.

        Raises:
            FileNotFoundError: The file does not exist
            ValueError: The file is not a saved results stream of a supported version
        """
        with open(self.path, 'rb') as f:
            unpacker = msgpack.Unpacker(f)
            try:
                header = next(unpacker)
            except StopIteration:
                raise ValueError(f"Empty results file: {self.path}") from None
            except msgpack.UnpackException as e:
                raise ValueError(f"Not a results file: {self.path}") from e

            if not isinstance(header, dict):
                raise ValueError(f"Not a results file: {self.path}")
            try:
                manifest = ResultManifest.from_dict(header)
            except TypeError as e:
                raise ValueError(f"Not a results file: {self.path}") from e
            if manifest.version != RESULT_FORMAT_VERSION:
                raise ValueError(f"Unsupported results format version: {manifest.version}")

            try:
                results = [FileDuplicateResult.from_fields(fields) for fields in unpacker]
            except (msgpack.UnpackException, TypeError) as e:
                raise ValueError(f"Corrupted results file: {self.path}") from e

        return manifest, results

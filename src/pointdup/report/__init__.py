"""Report module for duplicate analysis results.

This package contains:
- record: DuplicateEntry and FileDuplicateResult, the per-file analysis results
- writer: Rendering and writing of the plain-text duplicate report
- summary: Short run summary for the command line
- store: ResultStore and ResultManifest for saving a batch with msgpack
"""

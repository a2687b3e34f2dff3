"""Tests for report module.

Test Files and Coverage:
========================

| Test File               | Test Classes                 | Tested Constructs                          | Tested Functionalities                   |
|-------------------------|------------------------------|--------------------------------------------|------------------------------------------|
| test_record.py          | DuplicateEntryTest           | DuplicateEntry                             | Validation, immutability, counts         |
|                         | FileDuplicateResultTest      | FileDuplicateResult                        | has_duplicates, field list conversion    |
| test_writer.py          | RenderReportTest             | render_report()                            | Exact layout, ordering, empty batches    |
|                         | WriteReportTest              | write_report()                             | Directories, overwrite, idempotence      |
| test_summary.py         | FormatSummaryTest            | format_summary()                           | Totals, per-file lines, report location  |
| test_result_store.py    | ResultStoreTest              | ResultStore, ResultManifest                | Round trip, order, invalid files         |
"""

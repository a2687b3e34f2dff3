"""Tests for the per-file analysis modules.

Test Files and Coverage:
========================

| Test File            | Test Classes          | Tested Constructs                        | Tested Functionalities                     |
|----------------------|-----------------------|------------------------------------------|--------------------------------------------|
| test_keys.py         | SplitFieldsTest       | split_fields()                           | Spaces, tabs, empty tokens                 |
|                      | ExtractKeyTest        | extract_key()                            | Field positions, short and blank lines     |
|                      | ReadPointKeysTest     | read_point_keys()                        | Line numbering, BOM, invalid bytes         |
| test_tracker.py      | DuplicateTrackerTest  | DuplicateTracker                         | Grouping, singleton keys dropped, ordering |
| test_sorter.py       | ParseIntOrZeroTest    | parse_int_or_zero()                      | Signs, 32-bit range, non-numeric text      |
|                      | SortDuplicatesTest    | sort_duplicates(), duplicate_sort_key()  | Numeric then text order, col5 stability    |
| test_point_file.py   | AnalyzePointFileTest  | analyze_point_file()                     | Scenarios, line partition, key uniqueness  |
"""

"""Tests for point file enumeration.

| Test File          | Test Classes              | Tested Constructs                     | Tested Functionalities                         |
|--------------------|---------------------------|---------------------------------------|------------------------------------------------|
| test_scanner.py    | ListPointFilesTest        | list_point_files(), DirectoryNotFound | Extension filter, name order, blank paths      |
|                    | FindMissingDirectoriesTest| find_missing_directories()            | Missing and blank paths, files as directories  |
"""

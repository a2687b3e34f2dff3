"""Tests for utility modules.

| Test File            | Test Classes     | Tested Constructs                             | Tested Functionalities                 |
|----------------------|------------------|-----------------------------------------------|----------------------------------------|
| test_processor.py    | ProcessorTest    | Processor                                     | Pool analysis, worker errors           |
| test_throttler.py    | ThrottlerTest    | Throttler                                     | Concurrency limit, permit release      |
| test_profiling.py    | ProfilingTest    | profile_function, profile_main, profile_worker| Disabled/enabled profiling, file names |
| test_collation.py    | TextSortKeyTest  | text_sort_key()                               | Letter order, lowercase first          |
"""

"""Tests for command implementation modules.

Test Files and Coverage:
========================

| Test File          | Test Classes        | Tested Constructs              | Tested Functionalities                         |
|--------------------|---------------------|--------------------------------|------------------------------------------------|
| test_analyze.py    | DoAnalyzeTest       | do_analyze(), AnalyzeProcessor | Enumeration order, cancellation, read failures |
"""

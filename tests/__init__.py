"""
Test suite for ATS-AI v3.30

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/integration/   : Integration tests for pipelines
- tests/scenarios/     : Scenario tests (flash crash, depeg, etc.)
"""

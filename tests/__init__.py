"""
Test suite for change-engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for safeint

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""

"""
Test suite for series-math

Contains:
- tests/unit/          : Unit tests for individual modules
"""

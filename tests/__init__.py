"""
Test suite for normdec

Contains:
- tests/unit/          : Unit tests for individual modules
"""

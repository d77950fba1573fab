"""
Test suite for earnings-ticker

Contains:
- tests/unit/          : Unit tests for individual modules
"""

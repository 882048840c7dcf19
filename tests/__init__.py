"""
Test suite for decimal Karatsuba multiplication

Contains:
- tests/unit/          : Unit tests for individual modules
"""

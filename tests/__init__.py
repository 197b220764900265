"""
Test suite for numeral_systems

Contains:
- tests/unit/          : Unit tests for individual modules
"""

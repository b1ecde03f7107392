"""
Test suite for luka

Contains:
- tests/unit/          : Unit tests for individual modules
"""

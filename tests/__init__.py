"""
Test suite for sqrt-longhand

Contains:
- tests/unit/          : Unit tests for individual modules
"""

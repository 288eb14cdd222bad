"""
Test suite for tswarp

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for comparable-utils

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for the quadratic factoring engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""

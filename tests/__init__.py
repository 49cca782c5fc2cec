"""
Test suite for datecalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""

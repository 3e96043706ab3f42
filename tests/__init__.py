"""
Test suite for lowpoly

Contains:
- tests/unit/          : Unit tests for individual modules
"""

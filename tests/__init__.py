"""
Test suite for the 2D transform kernel

Contains:
- tests/unit/          : Unit tests for individual modules
"""

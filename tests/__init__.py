"""
Test suite for fptoolkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for the ATM banknote dispenser

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/conftest.py    : Demo cassette snapshots shared by the unit tests
"""

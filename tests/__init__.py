"""
Test suite for the currency pair model

Contains:
- tests/unit/          : Unit tests for individual modules
"""

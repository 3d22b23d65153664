"""
Test suite for padded-number

Contains:
- tests/unit/          : Unit tests for parser, arithmetic, sectioning and contracts
"""

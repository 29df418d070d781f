"""
Test suite for the integer-only decimal arithmetic engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of the arithmetic engine
that are independent of any caller (test drivers, command-line wrappers, etc.).
"""

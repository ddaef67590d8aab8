"""
Test utilities for semantic tests.
"""

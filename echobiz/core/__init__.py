"""
Core modules for EchoBiz.

This package contains the command-interpretation engine: keyword tables,
intent classification, quantity and name extraction, and manual entry.
"""

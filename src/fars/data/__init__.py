"""
FARS Data Package (Imperative Shell)

This package handles all file-system access for the fars package.

Modules:
- reader: Archive naming, CSV parsing and batch year loading
"""

from .reader import (
    YearLoad,
    make_filename,
    resolve_path,
    read_table,
    available_years,
    load_years,
)

__all__ = [
    'YearLoad',
    'make_filename',
    'resolve_path',
    'read_table',
    'available_years',
    'load_years',
]

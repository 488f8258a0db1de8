"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return new DataFrames.

Modules:
- summary:   Monthly accident counts pivoted by year
- locations: State filtering and coordinate sentinel cleanup
"""

from .summary import summarize_monthly_counts

from .locations import (
    select_state,
    clean_coordinates,
    coordinate_bounds,
)

__all__ = [
    # Summary
    'summarize_monthly_counts',
    # Locations
    'select_state',
    'clean_coordinates',
    'coordinate_bounds',
]

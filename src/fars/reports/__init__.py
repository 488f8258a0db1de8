"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, summaries and map rendering.  No analysis
logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    accidents: summarize_years() and map_state(), the public operations.
"""

from .accidents import (
    summarize_years,
    map_state,
)

__all__ = [
    'summarize_years',
    'map_state',
]

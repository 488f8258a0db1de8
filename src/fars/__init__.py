"""
FARS - Fatality Analysis Reporting System accident summaries

Reads yearly FARS accident archives, counts accidents per month and
year, and maps accident locations for a state, using the Functional
Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file access)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : public operations
"""

from .errors import FarsError, AccidentFileNotFoundError, InvalidStateError
from .reports import summarize_years, map_state

__version__ = "0.1.0"

__all__ = [
    'FarsError',
    'AccidentFileNotFoundError',
    'InvalidStateError',
    'summarize_years',
    'map_state',
]

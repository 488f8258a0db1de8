"""
FARS Exception Types

Package Location: src/fars/errors.py
"""


class FarsError(Exception):
    """Base class for all errors raised by the fars package."""
    pass


class AccidentFileNotFoundError(FarsError, FileNotFoundError):
    """
    Raised when the archive for a requested year is not on disk.

    Terminal for single-file reads.  ``load_years`` catches it and records
    a failed ``YearLoad`` instead of propagating.
    """

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"file '{path}' does not exist")


class InvalidStateError(FarsError, ValueError):
    """
    Raised when a state code does not appear in the ``STATE`` column of
    the requested year's data.
    """

    def __init__(self, state_num: int) -> None:
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")

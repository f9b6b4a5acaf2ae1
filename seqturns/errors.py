"""
seqturns/errors.py

Exception taxonomy for the turns test.

    NonNumericInputError — a sequence element is not a finite real number.
    NoDataError          — no trial count or sequence could be resolved.
    DomainError          — a mathematically undefined operation was requested
                           (square root of a negative variance, or a
                           non-positive variance fed to the z-test).

All three derive from TurnsError so callers can catch the whole family.
"""


class TurnsError(Exception):
    """Base class for every error raised by seqturns."""


class NonNumericInputError(TurnsError, ValueError):
    """A sequence element is not a valid, finite real number."""


class NoDataError(TurnsError, LookupError):
    """No sequence or trial count could be resolved for a statistic."""


class DomainError(TurnsError, ValueError):
    """A statistic is mathematically undefined for the given input."""

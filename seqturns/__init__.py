"""
seqturns — Kendall's turning-point test for numeric sequences

Top-level package exposing the seqturns public API.
"""

from seqturns import simulate
from seqturns.errors import TurnsError, NonNumericInputError, NoDataError, DomainError
from seqturns.sequences import SequenceStore
from seqturns.ztest import NormalZTest
from seqturns.turns import (
    Turns,
    TurnsResult,
    collapse,
    count_turns,
    observed,
    expected,
    variance,
    obsdev,
    stdev,
    zscore,
    pvalue,
)
from seqturns.report import dump, to_frame
from seqturns.datasets import load_example_data

__version__ = "0.1.0"
__all__ = [
    "simulate",
    "TurnsError",
    "NonNumericInputError",
    "NoDataError",
    "DomainError",
    "SequenceStore",
    "NormalZTest",
    "Turns",
    "TurnsResult",
    "collapse",
    "count_turns",
    "observed",
    "expected",
    "variance",
    "obsdev",
    "stdev",
    "zscore",
    "pvalue",
    "dump",
    "to_frame",
    "load_example_data",
]

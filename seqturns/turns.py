"""
seqturns/turns.py

Kendall's test for turning-points (peaks and troughs) in a numeric sequence.

A turn is counted at every interior position of the sequence that is either
a peak (greater than both neighbours) or a trough (less than both
neighbours). Runs of equal successive values are first collapsed to a
single value, so

    0 0 1 1 0 1 1 1 0 1

is counted as

    0 1 0 1 0 1
      * * * *

i.e. four turns. Under the null hypothesis of random ordering the count
has expectation and variance (Kendall 1973, pp. 22-24)

    E[T] = 2/3 (N - 2)
    V[T] = (16N - 29) / 90

where N is the length of the collapsed sequence, and the distribution tends
rapidly to normality, so a z-test gives the p-value.

Every statistic takes its N from one of three sources, tried in order:

    trials=N     — an explicit trial count, no data needed.
    data=[...]   — an explicit sequence; N is its collapsed length.
    store/label  — a sequence loaded into a SequenceStore (default: the first).
"""

import math
import logging
from dataclasses import dataclass, asdict
from typing import Optional, Tuple

import numpy as np

from seqturns.config import TURNS_CONFIG, TurnsConfig
from seqturns.errors import DomainError, NoDataError
from seqturns.sequences import SequenceStore, as_sequence
from seqturns.ztest import NormalZTest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnsResult:
    """Descriptives and significance of one turns test."""

    observed: int
    expected: float
    variance: float
    obsdev: float
    stdev: float
    zscore: float
    pvalue: float
    trials: float
    ccorr: bool
    tails: int

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class _Source:
    """Resolved input of a statistic: the trial count and, if any, the data."""

    trials: float
    collapsed: Optional[np.ndarray] = None


# ---------------------------------------------------------------------------
# Counting
# ---------------------------------------------------------------------------

def collapse(sequence) -> np.ndarray:
    """
    Remove equal successors: (3, 2, 2, 7, 2) -> (3, 2, 7, 2).

    The first element is always kept; each later element is kept only if it
    differs exactly from the last kept one.

    Raises
    ------
    NonNumericInputError
        If any element is not a finite real number, wherever it sits.
    """
    values = as_sequence(sequence)
    if values.size == 0:
        return values
    keep = np.empty(values.size, dtype=bool)
    keep[0] = True
    keep[1:] = values[1:] != values[:-1]
    return values[keep]


def count_turns(sequence) -> int:
    """
    Count the peaks and troughs in a sequence.

    Parameters
    ----------
    sequence : sequence of float
        Values to test; runs of equal values are collapsed first.

    Returns
    -------
    int
        Number of interior positions that are strictly greater than both
        neighbours (peaks) or strictly less than both (troughs). Zero when
        fewer than three values remain after collapsing.

    Examples
    --------
    >>> count_turns([0, 0, 1, 1, 0, 1, 1, 1, 0, 1])
    4
    """
    c = collapse(sequence)
    if c.size < 3:
        return 0
    left, mid, right = c[:-2], c[1:-1], c[2:]
    troughs = (left > mid) & (right > mid)
    peaks = (left < mid) & (right < mid)
    return int(np.count_nonzero(troughs | peaks))


# ---------------------------------------------------------------------------
# Null-hypothesis moments
# ---------------------------------------------------------------------------

def expected_turns(trials: float) -> float:
    """E[T] = 2/3 (N - 2). Negative for N < 2; returned as is."""
    return 2.0 / 3.0 * (trials - 2)


def variance_turns(trials: float) -> float:
    """V[T] = (16N - 29) / 90. Negative for N < 29/16; returned as is."""
    return (16.0 * trials - 29.0) / 90.0


# ---------------------------------------------------------------------------
# Statistics on a resolved source
# ---------------------------------------------------------------------------

def _resolve_source(
    trials: Optional[float] = None,
    data=None,
    store: Optional[SequenceStore] = None,
    label=None,
) -> _Source:
    """Resolve the three N-specifying inputs into a single _Source.

    Priority: trials, then data, then the sequence read from store
    (selected by label, default the first loaded).

    Raises
    ------
    NoDataError
        If none of the three yields a trial count or a sequence.
    """
    if trials is not None:
        return _Source(trials=trials)
    if data is not None:
        c = collapse(data)
        return _Source(trials=len(c), collapsed=c)
    if store is not None:
        c = collapse(store.read(label))
        return _Source(trials=len(c), collapsed=c)
    raise NoDataError(
        "Data for counting up turns are needed: give trials, data, or load a sequence."
    )


def _sqrt_variance(var: float) -> float:
    if var < 0:
        raise DomainError(f"Variance is negative ({var!r}); no standard deviation.")
    return math.sqrt(var)


def _observed_from(source: _Source, observed: Optional[int]) -> int:
    if observed is not None:
        return observed
    if source.collapsed is None:
        raise NoDataError(
            "An observed count is needed when only a trial count is given."
        )
    return count_turns(source.collapsed)


def observed(data=None, store: Optional[SequenceStore] = None, label=None) -> int:
    """Observed number of turns in data, or in the stored sequence."""
    source = _resolve_source(data=data, store=store, label=label)
    return count_turns(source.collapsed)


def expected(
    trials: Optional[float] = None,
    data=None,
    store: Optional[SequenceStore] = None,
    label=None,
) -> float:
    """Expected number of turns, 2/3 (N - 2)."""
    return expected_turns(_resolve_source(trials, data, store, label).trials)


def variance(
    trials: Optional[float] = None,
    data=None,
    store: Optional[SequenceStore] = None,
    label=None,
) -> float:
    """Expected variance of the number of turns, (16N - 29) / 90."""
    return variance_turns(_resolve_source(trials, data, store, label).trials)


def obsdev(
    trials: Optional[float] = None,
    data=None,
    store: Optional[SequenceStore] = None,
    label=None,
    observed: Optional[int] = None,
) -> float:
    """Observed minus expected number of turns."""
    source = _resolve_source(trials, data, store, label)
    return _observed_from(source, observed) - expected_turns(source.trials)


def stdev(
    trials: Optional[float] = None,
    data=None,
    store: Optional[SequenceStore] = None,
    label=None,
) -> float:
    """
    Square root of the expected variance.

    Raises
    ------
    DomainError
        If the variance is negative (N <= 1). NaN is never returned.
    """
    return _sqrt_variance(variance_turns(_resolve_source(trials, data, store, label).trials))


def zscore(
    trials: Optional[float] = None,
    data=None,
    store: Optional[SequenceStore] = None,
    label=None,
    observed: Optional[int] = None,
    ccorr: Optional[bool] = None,
    tails: Optional[int] = None,
    precision_z: Optional[int] = None,
    precision_p: Optional[int] = None,
    ztest: Optional[NormalZTest] = None,
) -> Tuple[float, float]:
    """
    z-score of the turn-count deviation, with its p-value.

    Parameters
    ----------
    trials, data, store, label
        Source of N (and of the observed count); see the module docstring.
    observed : int, optional
        Observed count to use instead of counting turns in the data.
    ccorr : bool, optional
        Continuity correction; default from TURNS_CONFIG (True).
    tails : int, optional
        1 or 2; default from TURNS_CONFIG (2).
    precision_z, precision_p : int, optional
        Decimal places to round the returned z / p to.
    ztest : NormalZTest, optional
        z-test implementation; a new NormalZTest if not given.

    Returns
    -------
    tuple of (float, float)
        (z, p).

    Raises
    ------
    NoDataError
        If no source resolves, or only trials is given without observed.
    DomainError
        If the variance is not positive.
    """
    source = _resolve_source(trials, data, store, label)
    obs = _observed_from(source, observed)
    ztest = ztest if ztest is not None else NormalZTest()
    cfg = TURNS_CONFIG.test
    return ztest.evaluate(
        obs,
        expected_turns(source.trials),
        variance_turns(source.trials),
        ccorr=cfg.ccorr if ccorr is None else ccorr,
        tails=cfg.tails if tails is None else tails,
        precision_z=precision_z,
        precision_p=precision_p,
    )


def pvalue(*args, **kwargs) -> float:
    """Run the turns test and return only its p-value. Takes zscore()'s arguments."""
    return zscore(*args, **kwargs)[1]


def test(
    trials: Optional[float] = None,
    data=None,
    store: Optional[SequenceStore] = None,
    label=None,
    observed: Optional[int] = None,
    ccorr: Optional[bool] = None,
    tails: Optional[int] = None,
    ztest: Optional[NormalZTest] = None,
) -> TurnsResult:
    """
    Test a sequence for significance of its number of turning-points.

    Resolves the source once and bundles every descriptive with the z-score
    and p-value. Arguments as for zscore().

    Returns
    -------
    TurnsResult

    Raises
    ------
    NoDataError, DomainError
        As for zscore(); no partial result is returned.
    """
    source = _resolve_source(trials, data, store, label)
    obs = _observed_from(source, observed)
    cfg = TURNS_CONFIG.test
    ccorr = cfg.ccorr if ccorr is None else ccorr
    tails = cfg.tails if tails is None else tails

    exp = expected_turns(source.trials)
    var = variance_turns(source.trials)
    ztest = ztest if ztest is not None else NormalZTest()
    z, p = ztest.evaluate(obs, exp, var, ccorr=ccorr, tails=tails)

    logger.debug("Turns test on N=%s: observed=%d z=%r p=%r", source.trials, obs, z, p)
    return TurnsResult(
        observed=int(obs),
        expected=exp,
        variance=var,
        obsdev=obs - exp,
        stdev=_sqrt_variance(var),
        zscore=z,
        pvalue=p,
        trials=source.trials,
        ccorr=bool(ccorr),
        tails=int(tails),
    )


# Not a pytest test function.
test.__test__ = False


# ---------------------------------------------------------------------------
# Object API
# ---------------------------------------------------------------------------

class Turns:
    """
    Turns test bound to a SequenceStore and a z-test.

    Parameters
    ----------
    store : SequenceStore, optional
        Where load()ed data live. A new, empty store if not given; pass a
        shared store to test data loaded elsewhere.
    ztest : NormalZTest, optional
        z-test implementation. A new NormalZTest if not given.
    config : TurnsConfig, optional
        Defaults for ccorr, tails and report precision.

    Examples
    --------
    >>> turns = Turns()
    >>> turns.load([0, 3, 9, 2, 1, 1, 3, 4, 0, 3, 5, 5, 5, 8, 4, 7, 3, 2, 4, 3, 6])
    >>> turns.observed()
    10
    >>> z, p = turns.zscore(tails=2, ccorr=True)   # z = -0.0982, 2p = 0.9217
    >>> print(turns.dump())
    Turns: observed = 10.00, expected = 10.67, Z = -0.10, 2p = 0.921736
    """

    def __init__(
        self,
        store: Optional[SequenceStore] = None,
        ztest: Optional[NormalZTest] = None,
        config: Optional[TurnsConfig] = None,
    ):
        self.store = store if store is not None else SequenceStore()
        self.ztest = ztest if ztest is not None else NormalZTest()
        self.config = config if config is not None else TURNS_CONFIG

    # Store forwarding -------------------------------------------------

    def load(self, data=None, **named) -> None:
        self.store.load(data, **named)

    def add(self, data=None, label=None, **named) -> None:
        self.store.add(data, label=label, **named)

    def read(self, label=None) -> np.ndarray:
        return self.store.read(label)

    def unload(self, label=None) -> None:
        self.store.unload(label)

    # Statistics ---------------------------------------------------------

    def observed(self, data=None, label=None) -> int:
        return observed(data=data, store=self.store, label=label)

    def expected(self, trials=None, data=None, label=None) -> float:
        return expected(trials, data, self.store, label)

    def variance(self, trials=None, data=None, label=None) -> float:
        return variance(trials, data, self.store, label)

    def obsdev(self, trials=None, data=None, label=None, observed=None) -> float:
        return obsdev(trials, data, self.store, label, observed=observed)

    def stdev(self, trials=None, data=None, label=None) -> float:
        return stdev(trials, data, self.store, label)

    def zscore(
        self,
        trials=None,
        data=None,
        label=None,
        observed=None,
        ccorr=None,
        tails=None,
        precision_z=None,
        precision_p=None,
    ) -> Tuple[float, float]:
        return zscore(
            trials, data, self.store, label,
            observed=observed,
            ccorr=self.config.test.ccorr if ccorr is None else ccorr,
            tails=self.config.test.tails if tails is None else tails,
            precision_z=precision_z,
            precision_p=precision_p,
            ztest=self.ztest,
        )

    def pvalue(self, *args, **kwargs) -> float:
        return self.zscore(*args, **kwargs)[1]

    def test(
        self, trials=None, data=None, label=None, observed=None, ccorr=None, tails=None
    ) -> TurnsResult:
        return test(
            trials, data, self.store, label,
            observed=observed,
            ccorr=self.config.test.ccorr if ccorr is None else ccorr,
            tails=self.config.test.tails if tails is None else tails,
            ztest=self.ztest,
        )

    def dump(self, fields=None, text=None, precision_s=None, precision_p=None, **test_args) -> str:
        """Run test() with test_args and format the result; see report.dump()."""
        from seqturns.report import dump

        cfg = self.config.report
        return dump(
            self.test(**test_args),
            fields=fields,
            text=cfg.text if text is None else text,
            precision_s=cfg.precision_s if precision_s is None else precision_s,
            precision_p=cfg.precision_p if precision_p is None else precision_p,
        )

    # Compatibility names ----------------------------------------------

    turncount_observed = tco = observed
    turncount_expected = tce = expected
    turncount_variance = tcv = variance
    turncount_zscore = tzs = z_value = zscore
    turns_test = tnt = test

"""
seqturns/ztest.py

Normal-approximation z-test for an observed count against its expectation.

NormalZTest is deliberately generic: it knows nothing about turns, only an
observed value, its expected value and variance under the null hypothesis.
The turns statistics receive an instance by injection so that tests can
substitute a fake.
"""

import math
import logging
from typing import Optional, Tuple

import numpy as np
from scipy.stats import norm

from seqturns.errors import DomainError

logger = logging.getLogger(__name__)


class NormalZTest:
    """Continuity-corrected z-score and p-value from the standard normal."""

    def evaluate(
        self,
        observed: float,
        expected: float,
        variance: float,
        ccorr: bool = True,
        tails: int = 2,
        precision_z: Optional[int] = None,
        precision_p: Optional[int] = None,
    ) -> Tuple[float, float]:
        """
        Return (z, p) for an observed value under a normal null.

        Parameters
        ----------
        observed : float
            Observed value of the statistic (e.g. a count of turns).
        expected : float
            Expected value of the statistic under the null hypothesis.
        variance : float
            Variance of the statistic under the null hypothesis. Must be > 0.
        ccorr : bool
            If True, the deviation ``observed - expected`` is moved 0.5
            towards zero before standardising:
            z = (dev - sign(dev) * 0.5) / sqrt(variance).
        tails : int
            1 for the one-tailed probability of a deviation at least as
            extreme as z, 2 for the two-tailed probability (doubled, capped
            at 1.0).
        precision_z, precision_p : int, optional
            Round the returned z / p to this many decimal places. Rounding
            is applied to the outputs only.

        Returns
        -------
        tuple of (float, float)
            z-score and p-value.

        Raises
        ------
        DomainError
            If variance is zero or negative.
        ValueError
            If tails is not 1 or 2.
        """
        if tails not in (1, 2):
            raise ValueError(f"tails must be 1 or 2, got {tails!r}.")
        if not variance > 0:
            raise DomainError(
                f"Variance must be positive for a z-test, got {variance!r}."
            )

        dev = float(observed) - float(expected)
        if ccorr:
            dev -= np.sign(dev) * 0.5
        z = float(dev / math.sqrt(variance))

        p = float(norm.sf(abs(z)))
        if tails == 2:
            p = min(1.0, 2.0 * p)

        logger.debug(
            "z-test: observed=%r expected=%r variance=%r ccorr=%s tails=%d -> z=%r p=%r",
            observed, expected, variance, ccorr, tails, z, p,
        )

        if precision_z is not None:
            z = round(z, precision_z)
        if precision_p is not None:
            p = round(p, precision_p)
        return z, p


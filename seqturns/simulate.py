"""
seqturns/simulate.py

Reference sequences with known turn structure, for validating the test.

    noise        — iid standard normal; turns / (N - 2) → 2/3.
    ramp         — strictly increasing; no turns.
    alternating  — 0, 1, 0, 1, ...; every interior point is a turn.
    plateaus     — noise in which each value repeats with probability
                   plateau_rate, exercising the run-collapsing step.
"""

import numpy as np
from typing import Optional


def simulate_sequence(
    n: int = 100,
    kind: str = "noise",
    seed: Optional[int] = 42,
    plateau_rate: float = 0.3,
) -> np.ndarray:
    """
    Simulate a sequence of length n.

    Parameters
    ----------
    n : int
        Sequence length (>= 0).
    kind : str
        "noise", "ramp", "alternating" or "plateaus" (see module docstring).
    seed : int, optional
        Random seed for reproducibility.
    plateau_rate : float
        For kind="plateaus": probability that each value repeats its
        predecessor. Ignored otherwise.

    Returns
    -------
    np.ndarray
        1-D float array of length n.

    Raises
    ------
    ValueError
        If kind is unknown, n is negative or plateau_rate is outside [0, 1).
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}.")

    rng = np.random.default_rng(seed)

    if kind == "noise":
        return rng.standard_normal(n)
    elif kind == "ramp":
        return np.arange(n, dtype=float)
    elif kind == "alternating":
        return (np.arange(n) % 2).astype(float)
    elif kind == "plateaus":
        if not 0.0 <= plateau_rate < 1.0:
            raise ValueError(f"plateau_rate must be in [0, 1), got {plateau_rate}.")
        values = rng.standard_normal(n)
        repeat = rng.random(n) < plateau_rate
        for i in range(1, n):
            if repeat[i]:
                values[i] = values[i - 1]
        return values
    else:
        raise ValueError(
            f"Unknown kind '{kind}'. "
            "Choose from: 'noise', 'ramp', 'alternating', 'plateaus'."
        )

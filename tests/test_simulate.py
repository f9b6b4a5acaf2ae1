"""
tests/test_simulate.py

Unit tests for the seqturns simulation helpers and bundled datasets.
"""

import pytest
import numpy as np
import pandas as pd
from seqturns import simulate
from seqturns.datasets import load_example_data


# ---------------------------------------------------------------------------
# simulate_sequence
# ---------------------------------------------------------------------------

class TestSimulateSequence:

    @pytest.mark.parametrize("kind", ["noise", "ramp", "alternating", "plateaus"])
    def test_length(self, kind):
        assert len(simulate.simulate_sequence(37, kind=kind, seed=0)) == 37

    def test_reproducible(self):
        a = simulate.simulate_sequence(50, seed=1)
        b = simulate.simulate_sequence(50, seed=1)
        np.testing.assert_array_equal(a, b)

    def test_different_seeds_differ(self):
        a = simulate.simulate_sequence(50, seed=1)
        b = simulate.simulate_sequence(50, seed=2)
        assert not np.array_equal(a, b)

    def test_ramp_strictly_increasing(self):
        x = simulate.simulate_sequence(20, kind="ramp")
        assert np.all(np.diff(x) > 0)

    def test_alternating_values(self):
        x = simulate.simulate_sequence(6, kind="alternating")
        np.testing.assert_array_equal(x, [0, 1, 0, 1, 0, 1])

    def test_plateaus_have_repeats(self):
        x = simulate.simulate_sequence(500, kind="plateaus", plateau_rate=0.5, seed=0)
        repeats = np.mean(x[1:] == x[:-1])
        assert 0.4 < repeats < 0.6

    def test_default_plateau_rate(self):
        x = simulate.simulate_sequence(1000, kind="plateaus", seed=0)
        repeats = np.mean(x[1:] == x[:-1])
        assert 0.25 < repeats < 0.35

    def test_zero_plateau_rate_has_no_repeats(self):
        x = simulate.simulate_sequence(200, kind="plateaus", plateau_rate=0.0, seed=0)
        assert np.all(x[1:] != x[:-1])

    def test_empty(self):
        assert simulate.simulate_sequence(0).size == 0

    def test_invalid_kind_raises(self):
        with pytest.raises(ValueError, match="Unknown kind"):
            simulate.simulate_sequence(10, kind="bad")

    def test_negative_n_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            simulate.simulate_sequence(-1)

    def test_invalid_plateau_rate_raises(self):
        with pytest.raises(ValueError, match="plateau_rate"):
            simulate.simulate_sequence(10, kind="plateaus", plateau_rate=1.0)


# ---------------------------------------------------------------------------
# load_example_data
# ---------------------------------------------------------------------------

class TestLoadExampleData:

    def test_gatlin_shape(self):
        s = load_example_data()
        assert isinstance(s, pd.Series)
        assert len(s) == 56
        assert s.name == "gatlin"

    def test_gatlin_values(self):
        s = load_example_data("gatlin")
        assert s.iloc[0] == pytest.approx(15.2)
        assert s.iloc[-1] == pytest.approx(17.5)
        assert s.min() == pytest.approx(13.3)
        assert s.max() == pytest.approx(18.1)

    def test_attrs(self):
        attrs = load_example_data().attrs
        assert attrs["observed"] == 35
        assert attrs["trials"] == 54

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown dataset"):
            load_example_data("nope")

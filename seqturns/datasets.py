from pathlib import Path
import pandas as pd

_DATASETS = {
    "gatlin": {
        "file": "gatlin.csv",
        "attrs": {
            "source": "Gatlin measurements, 56 successive values",
            "observed": 35,
            "trials": 54,
            "expected": 104 / 3,
            "variance": 835 / 90,
        },
    },
}


def load_example_data(name: str = "gatlin") -> pd.Series:
    """
    Load a bundled example sequence.

    The default "gatlin" dataset holds 56 successive measurements. Two
    adjacent pairs repeat (16.8, 16.8 and 15.5, 15.5), so the collapsed
    sequence has 54 values, with 35 turns against 34.67 expected.

    Reference results are stored in series.attrs (observed, trials,
    expected, variance).

    Returns
    -------
    pd.Series
        The sequence, in order, named after the dataset.

    Raises
    ------
    ValueError
        If name is not a bundled dataset.
    """
    if name not in _DATASETS:
        raise ValueError(
            f"Unknown dataset '{name}'. Choose from: {', '.join(repr(k) for k in _DATASETS)}."
        )
    info = _DATASETS[name]
    data_path = Path(__file__).parent / "data" / info["file"]
    series = pd.read_csv(data_path)["value"].rename(name)
    series.attrs = dict(info["attrs"])
    return series

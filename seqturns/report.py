"""
seqturns/report.py

Formatting of turns-test results.

    dump      — string summary of one TurnsResult: a one-line sparse form,
                a verbose multi-line form, or plain key=value pairs.

    to_frame  — tabulate several labelled results into a DataFrame, one
                row per sequence, with significance stars.
"""

from typing import Optional

import pandas as pd

from seqturns.config import TURNS_CONFIG
from seqturns.turns import TurnsResult

# Statistic names in report order, with the label used in the text forms.
_FIELD_LABELS = {
    "observed": "observed",
    "expected": "expected",
    "variance": "variance",
    "obsdev": "obsdev",
    "stdev": "stdev",
    "zscore": "Z",
    "pvalue": "p",
}
_SPARSE_FIELDS = ("observed", "expected", "zscore", "pvalue")


def dump(
    result: TurnsResult,
    fields: Optional[list] = None,
    text: Optional[int] = None,
    precision_s: Optional[int] = None,
    precision_p: Optional[int] = None,
) -> str:
    """
    Format a TurnsResult for printing.

    Parameters
    ----------
    result : TurnsResult
        Output of turns.test() or Turns.test().
    fields : list of str, optional
        Statistics to include, from: observed, expected, variance, obsdev,
        stdev, zscore, pvalue. Defaults to observed, expected, zscore,
        pvalue.
    text : int, optional
        0 → "observed=35, expected=34.67, ..." (key=value pairs)
        1 → "Turns: observed = 35.00, expected = 34.67, Z = -0.05, 2p = 0.956363"
        2 → "Turns test results:" followed by one line per statistic.
        Default from TURNS_CONFIG.report.text.
    precision_s : int, optional
        Decimal places for the descriptives and z. Default 2.
    precision_p : int, optional
        Decimal places for the p-value. Default 6.

    Returns
    -------
    str

    Raises
    ------
    ValueError
        If a field name is unknown or text is not 0, 1 or 2.
    """
    cfg = TURNS_CONFIG.report
    text = cfg.text if text is None else text
    precision_s = cfg.precision_s if precision_s is None else precision_s
    precision_p = cfg.precision_p if precision_p is None else precision_p
    fields = list(_SPARSE_FIELDS if fields is None else fields)

    unknown = [f for f in fields if f not in _FIELD_LABELS]
    if unknown:
        raise ValueError(
            f"Unknown field(s) {unknown}. Choose from: {', '.join(_FIELD_LABELS)}."
        )

    values = result.as_dict()
    p_label = f"{result.tails}p"

    if text == 0:
        parts = []
        for f in fields:
            if f == "observed":
                parts.append(f"observed={values[f]}")
            else:
                digits = precision_p if f == "pvalue" else precision_s
                parts.append(f"{f}={values[f]:.{digits}f}")
        return ", ".join(parts)

    elif text == 1:
        parts = []
        for f in fields:
            if f == "pvalue":
                parts.append(f"{p_label} = {values[f]:.{precision_p}f}")
            else:
                parts.append(f"{_FIELD_LABELS[f]} = {values[f]:.{precision_s}f}")
        return "Turns: " + ", ".join(parts)

    elif text == 2:
        lines = ["Turns test results:"]
        for f in fields:
            if f == "pvalue":
                lines.append(
                    f"  {p_label:<9}= {values[f]:.{precision_p}f}"
                    f"  {_sig_stars(values[f])}".rstrip()
                )
            else:
                lines.append(f"  {_FIELD_LABELS[f]:<9}= {values[f]:.{precision_s}f}")
        ccorr = "with" if result.ccorr else "without"
        lines.append(f"  (N = {result.trials}, {ccorr} continuity correction)")
        return "\n".join(lines)

    else:
        raise ValueError(f"Unknown text level {text!r}. Choose from: 0, 1, 2.")


def to_frame(results: dict, precision: Optional[int] = None) -> pd.DataFrame:
    """
    Tabulate labelled TurnsResults.

    Parameters
    ----------
    results : dict
        label → TurnsResult, e.g. one entry per loaded sequence.
    precision : int, optional
        If given, round the float columns to this many decimal places.

    Returns
    -------
    pd.DataFrame
        One row per label (the index), columns: observed, expected,
        variance, obsdev, stdev, zscore, pvalue, trials, ccorr, tails,
        stars.
    """
    columns = list(TurnsResult.__dataclass_fields__) + ["stars"]
    if not results:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame.from_dict(
        {label: res.as_dict() for label, res in results.items()}, orient="index"
    )
    df["stars"] = df["pvalue"].apply(_sig_stars)
    if precision is not None:
        float_cols = ["expected", "variance", "obsdev", "stdev", "zscore", "pvalue"]
        df[float_cols] = df[float_cols].round(precision)
    return df[columns]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _sig_stars(p: float) -> str:
    """Return significance stars for a p-value."""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    return ""

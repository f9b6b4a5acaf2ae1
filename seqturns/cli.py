"""
Command-line entry point: test one sequence for turning-points.

    python -m seqturns 0 3 9 2 1 1 3 4 0 3 5 5 5 8 4 7 3 2 4 3 6
    python -m seqturns --file measurements.csv --column value --tails 1 --text 2
    python -m seqturns --example gatlin
"""

import argparse
import logging
import sys

import pandas as pd

from seqturns.datasets import load_example_data
from seqturns.errors import TurnsError
from seqturns.turns import Turns

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """
    Parse command-line arguments.

    Returns:
        argparse.Namespace: values (list of str), file, column, example,
        tails, no_ccorr, text, verbose.
    """
    ap = argparse.ArgumentParser(
        prog="seqturns",
        description="Kendall's turning-point test for a numeric sequence.",
    )
    ap.add_argument("values", nargs="*", help="Sequence values, in order")
    ap.add_argument("--file", default=None, help="CSV file holding the sequence")
    ap.add_argument("--column", default=None, help="CSV column (default: the first)")
    ap.add_argument("--example", default=None, help="Bundled dataset name, e.g. gatlin")
    ap.add_argument("--tails", type=int, choices=(1, 2), default=2)
    ap.add_argument("--no-ccorr", action="store_true", help="Disable continuity correction")
    ap.add_argument("--text", type=int, choices=(0, 1, 2), default=1)
    ap.add_argument("--verbose", action="store_true")
    return ap.parse_args(argv)


def load_values(args):
    """
    Collect the sequence from the example name, the CSV file, or the values.

    Positional values that do not parse as numbers are passed through as
    strings so that the usual numeric validation reports them.
    """
    if args.example is not None:
        return load_example_data(args.example)
    if args.file is not None:
        df = pd.read_csv(args.file)
        column = args.column if args.column is not None else df.columns[0]
        if column not in df.columns:
            raise ValueError(
                f"Unknown column '{column}'. Choose from: {', '.join(map(str, df.columns))}."
            )
        return df[column]
    return [_parse_number(v) for v in args.values]


def main(argv=None) -> int:
    """Load the sequence, run the test, print the dump. Returns the exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    turns = Turns()
    try:
        turns.load(load_values(args))
        out = turns.dump(
            text=args.text,
            fields=["observed", "expected", "variance", "stdev", "zscore", "pvalue"]
            if args.text == 2 else None,
            tails=args.tails,
            ccorr=not args.no_ccorr,
        )
    except (TurnsError, ValueError, OSError) as exc:
        logger.debug("Turns test failed", exc_info=True)
        print(f"seqturns: error: {exc}", file=sys.stderr)
        return 1

    print(out)
    return 0


def _parse_number(token: str):
    try:
        return float(token)
    except ValueError:
        return token

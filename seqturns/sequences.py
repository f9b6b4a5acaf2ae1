"""
seqturns/sequences.py

In-memory storage for the numeric sequences under test.

A SequenceStore holds one or more sequences, either anonymous (addressed by
insertion position) or labelled (addressed by name). Every sequence is
validated when it enters the store: each element must be a finite real
number, otherwise NonNumericInputError is raised and the store is left
unchanged.
"""

import math
import numbers
import logging
from typing import Optional, Union

import numpy as np
import pandas as pd

from seqturns.errors import NoDataError, NonNumericInputError

logger = logging.getLogger(__name__)

Label = Union[str, int]


def as_sequence(values) -> np.ndarray:
    """
    Validate a flat sequence of reals and return it as a 1-D float array.

    Accepts lists, tuples, numpy arrays and pandas Series. Booleans,
    strings (including numeric-looking ones), None, NaN and infinities are
    rejected.

    Raises
    ------
    NonNumericInputError
        If any element is not a finite real number, or the input is not a
        flat sequence.
    """
    if isinstance(values, pd.Series):
        values = values.to_numpy()
    if isinstance(values, (str, bytes)) or not hasattr(values, "__len__"):
        raise NonNumericInputError(
            f"Expected a flat sequence of numbers, got {type(values).__name__}."
        )

    arr = values if isinstance(values, np.ndarray) else None
    if arr is not None and arr.ndim != 1:
        raise NonNumericInputError(
            f"Expected a 1-D sequence, got array of shape {arr.shape}."
        )

    # Fast path for plain numeric arrays; everything else is checked element-wise.
    if arr is not None and arr.dtype.kind in "iuf":
        out = arr.astype(float)
        bad = np.flatnonzero(~np.isfinite(out))
        if bad.size:
            i = int(bad[0])
            raise NonNumericInputError(
                f"All data must be numerical for testing turns: "
                f"element {i} is {values[i]!r}."
            )
        return out

    for i, x in enumerate(values):
        try:
            ok = (
                not isinstance(x, (bool, np.bool_))
                and isinstance(x, numbers.Real)
                and math.isfinite(x)
            )
        except OverflowError:
            ok = False
        if not ok:
            raise NonNumericInputError(
                f"All data must be numerical for testing turns: element {i} is {x!r}."
            )
    try:
        return np.array(values, dtype=float)
    except OverflowError as exc:
        raise NonNumericInputError(
            f"All data must be numerical for testing turns: {exc}."
        ) from exc


class SequenceStore:
    """
    Named or indexed numeric sequences, held in insertion order.

    Examples
    --------
    >>> store = SequenceStore()
    >>> store.load([0, 3, 9, 2, 1])
    >>> store.read()
    array([0., 3., 9., 2., 1.])
    >>> store.load(dist1=[1, 2, 3], dist2=[3, 2, 1])
    >>> store.read("dist2")
    array([3., 2., 1.])
    >>> store.read(1)
    array([3., 2., 1.])
    """

    def __init__(self):
        self._data = {}

    # ------------------------------------------------------------------
    # Loading and unloading
    # ------------------------------------------------------------------

    def load(self, data=None, **named) -> None:
        """
        Replace the stored sequences.

        Parameters
        ----------
        data : sequence, mapping or pd.DataFrame, optional
            A flat sequence is stored anonymously at index 0. A mapping of
            label -> sequence, or a DataFrame (one sequence per column),
            stores each sequence under its label.
        **named
            Further label=sequence pairs.

        Raises
        ------
        NonNumericInputError
            If any element of any sequence is not a finite real number. The
            store keeps its previous contents in that case.
        NoDataError
            If nothing was given.
        """
        incoming = _normalise(data, named)
        if not incoming:
            raise NoDataError("No data given to load.")
        self._data = incoming
        logger.debug("Loaded %d sequence(s): %s", len(incoming), list(incoming))

    def add(self, data=None, label: Optional[Label] = None, **named) -> None:
        """
        Append values to stored sequences, creating them if absent.

        A flat sequence extends the sequence selected by ``label`` (default:
        the first stored sequence, or a new anonymous one if the store is
        empty). A mapping, DataFrame or keyword arguments extend each named
        sequence.
        """
        if data is not None and not _is_collection(data):
            incoming = {label if label is not None else self._default_key(): as_sequence(data)}
        else:
            incoming = _normalise(data, named)

        for key, values in incoming.items():
            key = self._resolve_key(key, create=True)
            if key in self._data:
                self._data[key] = np.concatenate([self._data[key], values])
            else:
                self._data[key] = values
            logger.debug("Added %d value(s) to sequence %r", len(values), key)

    append = add

    def unload(self, label: Optional[Label] = None) -> None:
        """Drop the sequence selected by label, or every sequence if None."""
        if label is None:
            self._data = {}
            logger.debug("Unloaded all sequences")
            return
        key = self._resolve_key(label)
        del self._data[key]
        logger.debug("Unloaded sequence %r", key)

    clear = unload

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def read(self, label: Optional[Label] = None) -> np.ndarray:
        """
        Return a copy of the selected sequence.

        label may be a string label, an integer position, or None for the
        first stored sequence.

        Raises
        ------
        NoDataError
            If the store is empty or nothing matches label.
        """
        return self._data[self._resolve_key(label)].copy()

    @property
    def labels(self) -> list:
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, label) -> bool:
        return label in self._data

    def __repr__(self) -> str:
        sizes = ", ".join(f"{k!r}: {len(v)}" for k, v in self._data.items())
        return f"SequenceStore({{{sizes}}})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _default_key(self) -> Label:
        return next(iter(self._data)) if self._data else 0

    def _resolve_key(self, label: Optional[Label], create: bool = False) -> Label:
        """Map a label / position / None to a key of self._data."""
        if label is None:
            if not self._data:
                raise NoDataError("No sequences have been loaded.")
            return next(iter(self._data))
        if label in self._data:
            return label
        if isinstance(label, numbers.Integral) and not isinstance(label, (bool, np.bool_)):
            keys = list(self._data)
            if -len(keys) <= label < len(keys):
                return keys[int(label)]
        if create:
            return label
        raise NoDataError(
            f"No loaded sequence matches {label!r}; loaded: {list(self._data)}."
        )


def _is_collection(data) -> bool:
    return isinstance(data, (dict, pd.DataFrame))


def _normalise(data, named: dict) -> dict:
    """Validate data/named into an ordered dict of label -> float array."""
    incoming = {}
    if isinstance(data, pd.DataFrame):
        for col in data.columns:
            incoming[col] = as_sequence(data[col])
    elif isinstance(data, dict):
        for key, values in data.items():
            incoming[key] = as_sequence(values)
    elif data is not None:
        incoming[0] = as_sequence(data)
    for key, values in named.items():
        incoming[key] = as_sequence(values)
    return incoming

"""
Built-in `Mappable` instances. Each one forwards to the container's own element-wise transform.

All instances return a _new_ container and leave the input as-is.
"""

from collections.abc import Iterable, Iterator
from typing import Any

import pandas as pd
import polars as pl
from result import Err, Ok

from .core import Mappable, custom
from .lib.types import A, B, K

"""
`None`-able values and `Result`s
"""

_OPTIONAL: Mappable = custom(
    lambda fn, v: None if v is None else fn(v),
    # The slot is the shape, the value inside it can be anything (including another container)
    shape=lambda before, after: before is not None or after is None,
)
_RESULT: Mappable = custom(lambda fn, r: r.map(fn))


def optional() -> Mappable[A | None, A, B, B | None]:
    """
    `None` stays `None`, anything else has the transform applied.

    NOTE: A present `None` is not representable, so a transform that returns `None` yields "absent"
    """
    return _OPTIONAL


def result() -> Mappable[Ok[A] | Err[Any], A, B, Ok[B] | Err[Any]]:
    """
    Uses `Result.map`: the `Ok` value is transformed, an `Err` is returned unchanged
    """
    return _RESULT


"""
Sequences
"""

_SEQUENCE: Mappable = custom(lambda fn, xs: list(map(fn, xs)))
_INDEXABLE_SEQUENCE: Mappable = custom(lambda fn, xs: tuple(map(fn, xs)))
_ITERATOR: Mappable = custom(map)


def sequence() -> Mappable[list[A], A, B, list[B]]:
    return _SEQUENCE


def indexable_sequence() -> Mappable[tuple[A, ...], A, B, tuple[B, ...]]:
    """
    Fixed-size sequence (a `tuple`): each position keeps its index
    """
    return _INDEXABLE_SEQUENCE


def iterator() -> Mappable[Iterable[A], A, B, Iterator[B]]:
    """
    Lazy version of `sequence`: nothing runs until the result is consumed

    NOTE: If the input is itself an `Iterator`, consuming the result also consumes the input
    """
    return _ITERATOR


"""
Key-value mappings
"""

_KEY_VALUE_MAPPING: Mappable = custom(lambda fn, d: {k: fn((k, v)) for k, v in d.items()})
_DICT_VALUES: Mappable = custom(lambda fn, d: {k: fn(v) for k, v in d.items()})


def key_value_mapping() -> Mappable[dict[K, A], tuple[K, A], B, dict[K, B]]:
    """
    The transform is called with each `(key, value)` pair, so it can depend on the key.
      The result has the same keys, with each value replaced by the transform output.

    NOTE: The elements are pairs, so `flap` does not apply here (use `dict_values` instead)
    """
    return _KEY_VALUE_MAPPING


def dict_values() -> Mappable[dict[K, A], A, B, dict[K, B]]:
    """
    Like `key_value_mapping`, but the transform only receives the value (so `flap` works on dicts)
    """
    return _DICT_VALUES


"""
Dataframe library `Series`
"""

_POLARS_SERIES: Mappable = custom(lambda fn, s: s.map_elements(fn, skip_nulls=False))
_PANDAS_SERIES: Mappable = custom(lambda fn, s: s.map(fn))


def polars_series() -> Mappable[pl.Series, A, B, pl.Series]:
    """
    Uses `Series.map_elements`, including nulls (so the length never changes)
    """
    return _POLARS_SERIES


def pandas_series() -> Mappable[pd.Series, A, B, pd.Series]:
    """
    Uses `Series.map`, the index is kept as-is
    """
    return _PANDAS_SERIES

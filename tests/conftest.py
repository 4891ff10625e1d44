from typing import Any

import pandas as pd
import polars as pl
import pytest
from result import Err, Ok

import mappable as m


def beatles() -> dict[str, str]:
    return {"Lennon": "John", "Starr": "Ringo"}


@pytest.fixture(scope="function")
def beatles_data() -> dict[str, str]:
    return beatles()


@pytest.fixture(scope="function")
def int_cases() -> list[tuple[m.Mappable, Any]]:
    """
    One (instance, container) pair per built-in instance, all holding `int`s
    """
    return [
        (m.optional(), 5),
        (m.optional(), None),
        (m.result(), Ok(7)),
        (m.result(), Err("not found")),
        (m.sequence(), [1, 2, 3]),
        (m.sequence(), []),
        (m.indexable_sequence(), (4, 5, 6)),
        (m.dict_values(), {"a": 1, "b": 2}),
    ]


@pytest.fixture(scope="function")
def simple_polars_series() -> pl.Series:
    return pl.Series("a", [0, 1, 2, 3])


@pytest.fixture(scope="function")
def simple_pandas_series() -> pd.Series:
    return pd.Series([0, 1, 2, 3], index=["q", "w", "e", "r"], name="a")

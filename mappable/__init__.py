from .core import Mappable, custom, flap, map, mapping_context
from .instances import (
    dict_values,
    indexable_sequence,
    iterator,
    key_value_mapping,
    optional,
    pandas_series,
    polars_series,
    result,
    sequence,
)

__all__ = [
    "Mappable",
    "custom",
    "map",
    "flap",
    "mapping_context",
    "optional",
    "result",
    "sequence",
    "indexable_sequence",
    "iterator",
    "key_value_mapping",
    "dict_values",
    "polars_series",
    "pandas_series",
]

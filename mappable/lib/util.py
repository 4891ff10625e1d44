"""
Utility functions that can be used across modules. Meant to be for comparing container "shapes"
"""

from collections.abc import Iterator, Mapping, Sized
from typing import Any

from result import Err, Ok


def has_same_shape(before: Any, after: Any) -> bool:
    """
    Checks if `after` has the same "shape" as `before`: same variant, same length, same keys.

    Element values (and their types) are ignored, only the structure is compared.

    NOTE: Iterators are always considered a match (checking would consume them)
    """
    if before is None:
        return after is None
    if after is None:
        return False
    if isinstance(before, (str, bytes)):
        # Text is a value, not a container of characters
        return True
    if isinstance(before, (Ok, Err)):
        return type(before) is type(after)
    if isinstance(before, Mapping):
        return isinstance(after, Mapping) and before.keys() == after.keys()
    if isinstance(before, Iterator) or isinstance(after, Iterator):
        return True
    if isinstance(before, Sized):
        return isinstance(after, Sized) and len(before) == len(after)
    return True

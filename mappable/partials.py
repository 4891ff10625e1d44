from collections.abc import Callable
from functools import partial, reduce
from typing import Any

from . import core
from .core import Mappable
from .lib.types import ApplyFunc

"""
`mappable` Wrappers
"""


def map(impl: Mappable, fn: Callable | None = None) -> Callable:
    """
    Partial wrapper around `mappable.map`

    - `map(impl)` returns `(fn, container) -> result`
    - `map(impl, fn)` returns `(container) -> result`
    """
    if fn is None:
        return partial(core.map, impl)
    return lambda container: core.map(impl, fn, container)


def flap(impl: Mappable, arg: Any) -> ApplyFunc:
    """
    Partial wrapper around `mappable.flap`, returns `(container) -> result`
    """
    return lambda container: core.flap(impl, container, arg)


"""
Generic Wrappers
"""


def pipe(*funcs: ApplyFunc) -> ApplyFunc:
    """
    Applies the functions in-order and returns the final result.

    Meant for chaining the wrappers above, e.g.

    pipe(map(sequence(), str.strip), map(sequence(), len))(["  a", "bb "]) == [1, 2]
    """
    return lambda val: reduce(lambda res, fn: fn(res), funcs, val)

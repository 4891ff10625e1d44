import contextvars
import logging
from collections.abc import Callable
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Generic

from .lib.types import CA, CB, A, B
from .lib.util import has_same_shape

logger = logging.getLogger(__name__)

_MappingContextStrict = contextvars.ContextVar("_MappingContextStrict", default=None)


@contextmanager
def mapping_context(strict: bool = False):
    """
    Within this context, `map` checks that every result has the same shape as its input,
      and raises `ValueError` otherwise. Outside of it, nothing is checked.
    """
    token = _MappingContextStrict.set(strict)  # type: ignore
    try:
        yield
    finally:
        _MappingContextStrict.reset(token)


@dataclass(frozen=True)
class Mappable(Generic[CA, A, B, CB]):
    """
    Describes how to map over one kind of container: `fn(transform, container) -> container`

    `fn` is expected to be _shape-preserving_: same number of elements (or same keys) in the
      output as in the input, and the input left unmodified. This is not enforced!
      Breaking it is undefined behavior (see `mapping_context` for debugging)

    `shape(before, after)` is only used in strict mode, to tell if a result kept its shape
    """

    fn: Callable[[Callable[[A], B], CA], CB]
    shape: Callable[[Any, Any], bool] = field(default=has_same_shape, compare=False)


def custom(
    fn: Callable[[Callable[[A], B], CA], CB],
    shape: Callable[[Any, Any], bool] = has_same_shape,
) -> Mappable[CA, A, B, CB]:
    """
    Wraps a user-defined `(transform, container) -> container` function as a `Mappable`

    `shape` is optional, and overrides the structural check used by `mapping_context(strict=True)`
    """
    return Mappable(fn, shape)


def map(impl: Mappable[CA, A, B, CB], fn: Callable[[A], B], container: CA) -> CB:
    """
    Applies `fn` to each element of `container`, using the strategy described by `impl`.

    Exceptions raised by `fn` are not caught.
    """
    res = impl.fn(fn, container)
    if _MappingContextStrict.get() and not impl.shape(container, res):
        logger.debug("Shape mismatch from %s: %r -> %r", impl, container, res)
        raise ValueError(
            f"_Strict mode_: {type(container).__name__} changed shape after mapping, got: {res}"
        )
    return res


def flap(impl: Mappable[CA, Callable[[A], B], B, CB], container: CA, arg: A) -> CB:
    """
    Calls each function in `container` with the same `arg`, e.g.

    flap(sequence(), [str.upper, len], "abc") == ["ABC", 3]
    """
    return map(impl, lambda f: f(arg), container)

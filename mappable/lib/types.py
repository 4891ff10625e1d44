from collections.abc import Callable
from typing import Any, TypeAlias, TypeVar

# Element types
A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K")

# Container types (source, target)
CA = TypeVar("CA")
CB = TypeVar("CB")

ApplyFunc: TypeAlias = Callable[[Any], Any]

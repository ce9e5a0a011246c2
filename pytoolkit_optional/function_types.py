from typing import Callable, TypeVar

T = TypeVar("T")
R = TypeVar("R")

Supplier = Callable[[], T]
Consumer = Callable[[T], None]
Func = Callable[[T], R]
Predicate = Callable[[T], bool]
Runnable = Callable[[], None]

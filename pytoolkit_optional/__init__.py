import logging

from .exceptions import NoSuchElementException, NullPointerException
from .function_types import Consumer, Func, Predicate, Runnable, Supplier
from .metadata import NAME, VERSION
from .objects import require_non_null
from .optional import Optional

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Optional",
    "require_non_null",
    "NullPointerException",
    "NoSuchElementException",
    "Supplier",
    "Consumer",
    "Func",
    "Predicate",
    "Runnable",
    "NAME",
    "VERSION",
]

import logging

from .heap import Heap, HeapError, IncompatibleComparator
from .comparators import ascending, descending, by_key
from .adapters import collect, iterate, display

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "__version__",
    "Heap",
    "HeapError",
    "IncompatibleComparator",
    "ascending",
    "descending",
    "by_key",
    "collect",
    "iterate",
    "display"
]

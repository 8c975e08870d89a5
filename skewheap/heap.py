"""
Persistent, mergeable priority queues.

A skew heap keeps no balancing information at all. Every meld swaps the
children of the nodes it passes through, which keeps the amortized cost of
put, take and merge at O(log n) even though a single operation may be slower
and the tree depth is not bounded.

Heaps are values: put, take and merge return new heaps and leave the old
ones intact, sharing every subtree the operation did not touch.

>>> Heap([9, 2, 7, 1, 10, 4, 3, 8, 6, 5]).drain()
(Heap([]), [1, 2, 3, 4, 5, 6, 7, 8, 9, 10])

>>> a = Heap([3, 1, 2])
>>> b = Heap([6, 4, 5])
>>> a.merge(b).drain()[1]
[1, 2, 3, 4, 5, 6]
>>> a, b
(Heap([1, 2, 3]), Heap([4, 5, 6]))
"""

import logging

from . import adapters, comparators
from .node import meld, search, singleton

logger = logging.getLogger(__name__)


class HeapError(Exception):
    pass


class IncompatibleComparator(HeapError):
    pass


def require_heap(obj):
    if isinstance(obj, Heap):
        return obj
    raise TypeError("expected a heap, got {0!r}".format(obj))


class Heap(object):
    __slots__ = "_size", "_root", "_sorter"

    _default_sorter = staticmethod(comparators.ascending)

    def __new__(cls, iterable=(), sorter=None):
        if sorter is None:
            sorter = cls._default_sorter

        heap = adapters.collect(iterable, cls._make(0, None, sorter))
        return cls._make(heap._size, heap._root, sorter)

    @classmethod
    def new(cls, sorter=None):
        """
        >>> Heap.new().size
        0
        >>> Heap.new(comparators.descending).put(1).put(2).peek()
        2
        """

        return cls(sorter=sorter)

    @classmethod
    def _make(cls, size, root, sorter):
        heap = object.__new__(cls)
        heap._assign(size, root, sorter)
        return heap

    def _assign(self, size, root, sorter):
        object.__setattr__(self, "_size", size)
        object.__setattr__(self, "_root", root)
        object.__setattr__(self, "_sorter", sorter)

    def __setattr__(self, name, value):
        raise AttributeError("{0} is immutable".format(type(self).__name__))

    def __reduce__(self):
        return type(self)._make, (self._size, self._root, self._sorter)

    @property
    def size(self):
        return self._size

    @property
    def root(self):
        return self._root

    @property
    def sorter(self):
        return self._sorter

    @property
    def empty(self):
        return self._size == 0

    def peek(self, default=None):
        """
        Return the value take would return next, or default when the heap
        is empty.

        >>> Heap([5, 7, 3]).peek()
        3
        >>> Heap().peek("nothing")
        'nothing'
        """

        if self._root is None:
            return default
        return self._root.payload

    def put(self, value):
        """
        >>> heap = Heap().put(42)
        >>> heap.put(17).root
        Node(17, Node(42, None, None), None)
        >>> heap.size
        1
        """

        root = meld(self._sorter, self._root, singleton(value))
        return self._make(self._size + 1, root, self._sorter)

    def take(self, default=None):
        """
        Return a pair (heap, value) where value is the top of this heap and
        heap holds the rest. An empty heap gives back itself and default.

        >>> Heap([2, 3, 1]).take()
        (Heap([2, 3]), 1)
        >>> Heap().take()
        (Heap([]), None)
        """

        root = self._root
        if root is None:
            return self, default

        rest = meld(self._sorter, root.left, root.right)
        return self._make(self._size - 1, rest, self._sorter), root.payload

    def fill(self, iterable):
        return adapters.collect(iterable, self)

    def drain(self, count=None):
        """
        Take up to count values (all of them by default) and return a pair
        of the remaining heap and the taken values in priority order.

        >>> Heap([4, 1, 5, 3, 2]).drain(3)
        (Heap([4, 5]), [1, 2, 3])
        >>> Heap([2, 1]).drain(10)
        (Heap([]), [1, 2])
        """

        if count is None:
            count = self._size
        elif count < 0:
            raise ValueError("count must be non-negative, got {0!r}".format(count))
        elif count > self._size:
            logger.debug("Clamping drain of %d values to heap size %d", count, self._size)
            count = self._size

        heap = self
        values = []
        for _ in range(count):
            heap, value = heap.take()
            values.append(value)
        return heap, values

    def merge(self, other):
        """
        Return a heap containing the values of both heaps.

        Both heaps must be ordered by the same sorter, unless one of them is
        empty. Merging into an empty heap returns the other heap, sorter and
        all.

        >>> Heap([1, 3]).merge(Heap([2])).drain()[1]
        [1, 2, 3]
        >>> Heap([1], comparators.ascending).merge(Heap([2], comparators.descending))
        Traceback (most recent call last):
            ...
        skewheap.heap.IncompatibleComparator: can not merge heaps ordered by <built-in function le> and <built-in function ge>
        """

        other = require_heap(other)
        if other._size == 0:
            return self
        if self._size == 0:
            return other

        if not comparators.same_order(self._sorter, other._sorter):
            logger.debug("Refusing to merge heaps with sorters %r and %r", self._sorter, other._sorter)
            raise IncompatibleComparator(
                "can not merge heaps ordered by {0!r} and {1!r}".format(self._sorter, other._sorter))

        root = meld(self._sorter, self._root, other._root)
        return self._make(self._size + other._size, root, self._sorter)

    def member(self, value):
        """
        >>> heap = Heap(range(1, 11))
        >>> heap.member(5), heap.member(15), Heap().member(42)
        (True, False, False)
        """

        return search(self._sorter, self._root, value)

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def __contains__(self, value):
        return self.member(value)

    def __iter__(self):
        return adapters.iterate(self)

    def __repr__(self):
        return adapters.display(self)

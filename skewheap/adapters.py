"""
Glue between heaps and the rest of Python. Everything here goes through the
public heap methods only.
"""


def collect(iterable, into):
    """
    Put every value of iterable into the heap into, in iteration order, and
    return the resulting heap.

    >>> from skewheap import Heap
    >>> collect([3, 1, 2], Heap()).peek()
    1
    """

    heap = into
    for value in iterable:
        heap = heap.put(value)
    return heap


def iterate(heap):
    """
    Yield the values of heap in priority order, taking them one at a time.

    The heap itself is left as it was. Abandoning the iterator midway costs
    nothing more than the values already taken.

    >>> from skewheap import Heap
    >>> values = iterate(Heap([4, 2, 3, 1]))
    >>> next(values), next(values)
    (1, 2)
    >>> list(values)
    [3, 4]
    """

    while heap:
        heap, value = heap.take()
        yield value


def display(heap):
    """
    >>> from skewheap import Heap
    >>> display(Heap([3, 4, 1, 2]))
    'Heap([1, 2, 3, 4])'
    >>> display(Heap())
    'Heap([])'
    """

    _, values = heap.drain()
    return "{0}({1!r})".format(type(heap).__name__, values)

"""
Sorters for heaps. A sorter is called as sorter(a, b) and returns True when
a should come out of the heap no later than b.
"""

import operator


ascending = operator.le
descending = operator.ge


class by_key(object):
    """
    Order payloads by key(payload), smallest key first unless reverse is set.

    >>> sorter = by_key(len)
    >>> sorter("ab", "abc"), sorter("abc", "ab")
    (True, False)
    >>> by_key(len, reverse=True)("ab", "abc")
    False

    Sorters built from the same arguments are interchangeable.

    >>> by_key(len) == by_key(len)
    True
    >>> by_key(len) == by_key(len, reverse=True)
    False
    """

    __slots__ = "_key", "_reverse", "_compare"

    def __init__(self, key, reverse=False):
        self._key = key
        self._reverse = bool(reverse)
        self._compare = descending if self._reverse else ascending

    def __call__(self, a, b):
        return self._compare(self._key(a), self._key(b))

    def __eq__(self, other):
        if not isinstance(other, by_key):
            return NotImplemented
        return self._key == other._key and self._reverse == other._reverse

    def __hash__(self):
        return hash((by_key, self._key, self._reverse))

    def __repr__(self):
        if self._reverse:
            return "by_key({0!r}, reverse=True)".format(self._key)
        return "by_key({0!r})".format(self._key)


def same_order(a, b):
    """
    Return True if the sorters a and b are known to order payloads the same.

    >>> same_order(ascending, operator.le)
    True
    >>> same_order(ascending, descending)
    False
    """

    return a is b or a == b

"""
Tree cells and the skew heap meld.

An empty tree is None. Nodes are never modified after construction, so any
number of heaps can share a subtree.
"""


class Node(object):
    __slots__ = "_payload", "_left", "_right"

    def __init__(self, payload, left=None, right=None):
        object.__setattr__(self, "_payload", payload)
        object.__setattr__(self, "_left", left)
        object.__setattr__(self, "_right", right)

    @property
    def payload(self):
        return self._payload

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    def __setattr__(self, name, value):
        raise AttributeError("{0} is immutable".format(type(self).__name__))

    def __reduce__(self):
        return Node, (self._payload, self._left, self._right)

    def __repr__(self):
        # Only children and literal text go on the stack.
        parts = []
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif item is None:
                parts.append("None")
            else:
                parts.append("Node({0!r}, ".format(item._payload))
                stack.extend((")", item._right, ", ", item._left))
        return "".join(parts)


def singleton(payload):
    return Node(payload)


def meld(sorter, a, b):
    """
    Combine two heap-ordered trees into a new heap-ordered tree.

    The winner of each step keeps its payload, takes the meld of the loser
    and its old right child as the new left child, and moves its old left
    child to the right. The first operand wins ties.

    >>> tree = meld(lambda x, y: x <= y, Node(1, Node(4)), Node(2, Node(3)))
    >>> tree
    Node(1, Node(2, Node(3, None, None), None), Node(4, None, None))
    >>> meld(lambda x, y: x <= y, None, tree) is tree
    True
    """

    winners = []
    while a is not None and b is not None:
        if not sorter(a._payload, b._payload):
            a, b = b, a
        winners.append(a)
        a, b = b, a._right

    tree = b if a is None else a
    while winners:
        winner = winners.pop()
        tree = Node(winner._payload, tree, winner._left)
    return tree


def search(sorter, tree, value):
    """
    Return True if value equals some payload in the tree.

    Subtrees rooted at a payload that can not precede the value are skipped:
    heap order puts every payload below such a root after it as well.

    >>> le = lambda x, y: x <= y
    >>> tree = meld(le, Node(3, Node(5), Node(9)), Node(4))
    >>> search(le, tree, 5), search(le, tree, 4), search(le, tree, 6)
    (True, True, False)
    >>> search(le, None, 1)
    False
    """

    stack = [tree]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if node._payload == value:
            return True
        if not sorter(node._payload, value):
            continue
        stack.append(node._right)
        stack.append(node._left)
    return False


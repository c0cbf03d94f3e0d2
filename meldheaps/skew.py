from .base import Heap


class SkewNode():
    __slots__ = ('key', 'left', 'right', '__weakref__')

    def __init__(self, key=None):
        self.key, self.left, self.right = key, None, None

    def __repr__(self):
        return f'{self.key}'


def skew_merge(a, b):
    """
    Merge two skew trees along their right spines.

    At every step the smaller root is kept, its children are swapped, and
    its old left subtree is merged on with the other tree as its new right
    subtree.
    """
    if a is None:
        return b
    if b is None:
        return a
    if b.key < a.key:
        a, b = b, a
    top = tail = a
    while True:
        rest = tail.left
        tail.left = tail.right
        if rest is None:
            tail.right = b
            break
        if b.key < rest.key:
            rest, b = b, rest
        tail.right = rest
        tail = rest
    return top


class SkewHeap(Heap):
    """
    Skew Heap

    Self-adjusting binary heap without rank or parent bookkeeping. Supports
    insert, delete_min, find_min, clear and is_empty only.
    """

    def insert(self, value):
        node = SkewNode()
        self.update(self, node, value)
        self.root = skew_merge(self.root, node)
        self.size += 1
        return node

    def delete_min(self):
        ret = self.root
        if ret is not None:
            self.root = skew_merge(ret.left, ret.right)
            ret.left, ret.right = None, None
            self.size -= 1
        return ret

    def clear(self):
        self.root = None
        self.size = 0

    def children(self, node):
        for child in (node.left, node.right):
            if child is not None:
                yield child

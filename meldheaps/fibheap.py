import logging

from .base import (DetachedNodeError, Heap, IncompatibleHeapsError,
                   SafeDeletionMixin)
from .bits import powers_of_2

logger = logging.getLogger(__name__)


class FibNode():
    """
    Node of a Fibonacci heap.

    Siblings form a circular doubly linked list through ``left`` and
    ``right``; a lone node links to itself. A node that is not in a heap,
    never inserted or already removed, has ``left`` and ``right`` set to
    None.
    """
    __slots__ = ('key', 'degree', 'left', 'right', 'child', 'parent',
                 'marked', '__weakref__')

    def __init__(self,
                 key=None,
                 degree=0,
                 left=None,
                 right=None,
                 child=None,
                 parent=None,
                 marked=False):
        self.key, self.degree, self.left, self.right, self.child, self.parent, self.marked = (
            key, degree, left, right, child, parent, marked)

    def add(self, node):
        self.left.right = node
        node.left = self.left
        self.left = node
        node.right = self
        node.parent = self.parent

    def cat(self, node):
        self.right.left, node.right.left = node, self
        self.right, node.right = node.right, self.right

    def remove(self):
        self.left.right, self.right.left = self.right, self.left
        self.left, self.right = self, self

    def remove_child(self, node):
        self.degree -= 1
        self.child = node.right
        node.remove()
        if self.degree == 0:
            self.child = None
        node.parent = None

    def link(self, node):
        node.remove()
        self.degree += 1
        if self.child is None:
            self.child = node
            node.left, node.right = node, node
        else:
            self.child.add(node)
            self.child = node
        node.parent = self
        node.marked = False

    def ring(self):
        """Nodes of the circular list holding this node, starting here."""
        ret = [self]
        right = self.right
        while right is not self:
            ret.append(right)
            right = right.right
        return ret

    def __repr__(self):
        return f'{self.key}'


class FibHeap(SafeDeletionMixin, Heap):
    """
    Fibonacci Heap

    Attributes:
        size: number of keys in the heap
        root: the node with the minimum key

    Methods:
        insert(value): insert a new node with a key made from value
        insert_node(value, node): insert a caller supplied node
        decrease_key(node, value): lower the key of a node
        delete(node): remove a node
        delete_min(): extract the node with the minimum key
        consolidate(): link roots until no two share a degree
    """

    def _check(self, node):
        if node.left is None:
            raise DetachedNodeError(f'{node!r} is not in a heap')

    def insert(self, value):
        node = FibNode()
        self.insert_node(value, node)
        return node

    def insert_node(self, value, node):
        # stays detached if update raises
        node.left, node.right = None, None
        self.update(self, node, value)
        node.degree, node.child, node.parent, node.marked = 0, None, None, False
        node.left, node.right = node, node
        self._unflag(node)
        if self.root is None:
            self.root = node
        else:
            self.root.add(node)
            if node.key < self.root.key:
                self.root = node
        self.size += 1

    def delete_min(self):
        ret = self.root
        if ret is None:
            return None
        if ret.child is not None:
            for x in ret.child.ring():
                x.parent = None
            ret.cat(ret.child)
            ret.child = None
            ret.degree = 0
        right = ret.right
        ret.remove()
        ret.left, ret.right, ret.marked = None, None, False
        self.size -= 1
        if right is ret:
            self.root = None
        else:
            self.root = right
            self.consolidate()
        return ret

    def consolidate(self):
        if self.root is None:
            return
        cons = []
        bits = 0
        root_list = self.root.ring()
        for x in root_list:
            d = x.degree
            while bits >> d & 1:
                y = cons[d]
                if y.key < x.key:
                    x, y = y, x
                x.link(y)
                cons[d] = None
                bits ^= 1 << d
                d += 1
            if d >= len(cons):
                cons.extend([None] * (d + 1 - len(cons)))
            cons[d] = x
            bits |= 1 << d

        self.root = None
        for _, _, i in powers_of_2(bits):
            if self.root is None or cons[i].key < self.root.key:
                self.root = cons[i]
        logger.debug('consolidated %d roots into %d trees', len(root_list),
                     bin(bits).count('1'))

    def cut(self, node, parent):
        parent.remove_child(node)
        self.root.add(node)
        node.marked = False

    def cascade(self, node, parent):
        while True:
            self.cut(node, parent)
            grandparent = parent.parent
            if grandparent is None:
                break
            if not parent.marked:
                parent.marked = True
                break
            node, parent = parent, grandparent

    def decrease_key(self, node, value):
        self._check(node)
        self.update(self, node, value)
        parent = node.parent
        if parent is not None and node.key < parent.key:
            self.cascade(node, parent)
        if node is not self.root and node.key < self.root.key:
            self.root = node

    def delete(self, node):
        self._check(node)
        if node is not self.root:
            # same path as a decrease to negative infinity
            if node.parent is not None:
                self.cascade(node, node.parent)
            self.root = node
        return self.delete_min()

    @staticmethod
    def neighbors(node):
        """
        Returns:
            (left, right) in the node's ring; a singleton is its own neighbor
        """
        return node.left, node.right

    def roots(self):
        if self.root is not None:
            yield from self.root.ring()

    def children(self, node):
        if node.child is not None:
            yield from node.child.ring()


def heap_union(a, b):
    """
    Union two Fibonacci Heaps

    Destructive: the heap returned is one of the inputs, and the other one
    is left empty.
    """
    if a is None or a.root is None:
        return b
    if b is None or b.root is None:
        return a
    if a.update is not b.update:
        raise IncompatibleHeapsError(
            f'cannot merge heaps with key update functions {a.update!r} '
            f'and {b.update!r}')
    a.root.cat(b.root)
    if b.root.key < a.root.key:
        a.root = b.root
    a.size += b.size
    logger.debug('union of heaps with %d and %d nodes', a.size - b.size,
                 b.size)
    b.root, b.size = None, 0
    return a

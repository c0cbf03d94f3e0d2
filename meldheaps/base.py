from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Iterator, Optional

logger = logging.getLogger(__name__)

KeyUpdate = Callable[['Heap', Any, Any], None]


class HeapError(Exception):
    pass


class DetachedNodeError(HeapError):
    """A node that is not resident in any heap was passed to a heap."""


class IncompatibleHeapsError(HeapError):
    """Heaps with different key update functions cannot be merged."""


def assign_key(heap, node, value):
    node.key = value


class Heap():
    """
    Common base of the mergeable heaps.

    Attributes:
        update: key update function, called as update(heap, node, value);
            afterwards node.key must be comparable by operator <
        root: the node with the minimum key, or None if the heap is empty
        size: number of nodes in the heap

    Methods:
        is_empty(): whether the heap holds no nodes
        find_min(): the minimum node and its key
    """

    def __init__(self, update: Optional[KeyUpdate] = None):
        self.update = assign_key if update is None else update
        self.root = None
        self.size = 0

    def is_empty(self) -> bool:
        return self.root is None

    def find_min(self):
        """
        Returns:
            (node, key) of the minimum node, or (None, None) if empty
        """
        root = self.root
        if root is None:
            return None, None
        return root, root.key

    def roots(self) -> Iterator:
        if self.root is not None:
            yield self.root

    def children(self, node) -> Iterator:
        raise NotImplementedError

    def __len__(self):
        return self.size

    def __iter__(self):
        stack = list(self.roots())
        while stack:
            node = stack.pop()
            yield node
            stack.extend(self.children(node))

    def __repr__(self):
        return f'{self.__class__.__name__}(size={self.size}, min={self.find_min()[1]!r})'


# Removed nodes, shared by every heap so a node stays flagged across unions.
_removed = weakref.WeakKeyDictionary()


class SafeDeletionMixin():
    """
    Idempotent variants of decrease_key and delete.

    A node deleted through delete_safe is flagged; later calls of
    decrease_key_safe or delete_safe on it do nothing. The flag is dropped
    with the node, or when the node is inserted again.
    """

    def decrease_key_safe(self, node, value):
        if node in _removed:
            logger.debug('skip decrease_key of removed node %r', node)
            return
        self.decrease_key(node, value)

    def delete_safe(self, node):
        if node in _removed:
            logger.debug('skip delete of removed node %r', node)
            return
        self.delete(node)
        _removed[node] = True

    @staticmethod
    def is_removed(node) -> bool:
        return node in _removed

    @staticmethod
    def _unflag(node):
        _removed.pop(node, None)

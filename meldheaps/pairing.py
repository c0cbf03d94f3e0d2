from .base import DetachedNodeError, Heap, SafeDeletionMixin


class PairingNode():
    """
    Node of a pairing heap.

    Children form a singly linked list through ``right``, starting at
    ``child``. ``left`` points back to the left sibling, or to the parent
    for the first child.
    """
    __slots__ = ('key', 'child', 'left', 'right', '__weakref__')

    def __init__(self, key=None):
        self.key, self.child, self.left, self.right = key, None, None, None

    def detach(self):
        lnode, rnode = self.left, self.right
        if lnode.child is self:
            lnode.child = rnode
        else:
            lnode.right = rnode
        if rnode is not None:
            rnode.left = lnode
        self.left, self.right = None, None

    def __repr__(self):
        return f'{self.key}'


def meld(n1, n2):
    """
    Meld two pairing trees, the larger root becoming the first child of the
    smaller. Returns the new root.
    """
    if n2 is None:
        return n1
    if n1 is None:
        return n2
    if n2.key < n1.key:
        n1, n2 = n2, n1
    first = n1.child
    n2.left, n2.right = n1, first
    if first is not None:
        first.left = n2
    n1.child = n2
    return n1


class PairingHeap(SafeDeletionMixin, Heap):
    """
    Pairing Heap

    Methods:
        insert(value): insert a new node with a key made from value
        insert_node(value, node): insert a caller supplied node
        decrease_key(node, value): lower the key of a node
        delete(node): remove a node
        delete_min(): remove the node with the minimum key
        neighbors(node): siblings of a node
    """

    def _meld_to_root(self, node):
        self.root = meld(self.root, node)

    def _check(self, node):
        if node is not self.root and node.left is None:
            raise DetachedNodeError(f'{node!r} is not in a heap')

    def insert(self, value):
        node = PairingNode()
        self.insert_node(value, node)
        return node

    def insert_node(self, value, node):
        node.child, node.left, node.right = None, None, None
        self._unflag(node)
        self.update(self, node, value)
        self._meld_to_root(node)
        self.size += 1

    def decrease_key(self, node, value):
        self._check(node)
        self.update(self, node, value)
        if node is not self.root:
            node.detach()
            self._meld_to_root(node)

    def delete(self, node):
        self._check(node)
        if node is self.root:
            self.root = None
        else:
            node.detach()

        # first pass: meld the children in pairs, left to right
        pairs = []
        top = None
        child = node.child
        while child is not None:
            next_child = child.right
            child.left, child.right = None, None
            if top is None:
                top = child
            else:
                pairs.append(meld(top, child))
                top = None
            child = next_child
        node.child = None

        # second pass: meld the pairs right to left, starting from the odd one
        while pairs:
            top = meld(top, pairs.pop())

        self._meld_to_root(top)
        self.size -= 1
        return node

    def delete_min(self):
        if self.root is None:
            return None
        return self.delete(self.root)

    @staticmethod
    def neighbors(node):
        """
        Returns:
            (left, right) siblings of node; left is None for a first child
        """
        lnode = node.left
        if lnode is not None and lnode.child is node:
            lnode = None
        return lnode, node.right

    def children(self, node):
        child = node.child
        while child is not None:
            yield child
            child = child.right

from treelib import Node, Tree


def heap_view(heap):
    """
    Render the forest of a heap as text.

    Every tree hangs below a synthetic 'root' node; nodes are tagged with
    their keys.
    """
    ret = Tree()
    ret.add_node(Node(tag='root', identifier='root'))
    stack = [(node, 'root') for node in heap.roots()]
    while stack:
        node, parent = stack.pop()
        ret.add_node(Node(tag=repr(node.key), identifier=id(node)),
                     parent=parent)
        stack.extend((child, id(node)) for child in heap.children(node))
    return ret.show(stdout=False)

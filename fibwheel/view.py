from itertools import count


def heap_view(heap):
    """
    Render a heap as a tree, one line per key.

    Roots hang under a ``root`` node and children under their parent.
    """
    from treelib import Tree

    ret = Tree()
    ids = count()
    ret.create_node('root', identifier='root')

    def _add(sub_heap, parent):
        for node in sub_heap.roots:
            identifier = f'node{next(ids)}'
            ret.create_node(repr(node.key), identifier=identifier,
                            parent=parent)
            _add(node.children, identifier)

    _add(heap, 'root')
    return ret.show(stdout=False)

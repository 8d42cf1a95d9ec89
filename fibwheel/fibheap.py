"""
Fibonacci Heap

A heap is a min-ordered forest kept in a root wheel of nodes, each node
holding its key, its degree and the sub-heap of its children.  Heaps and
nodes are immutable: every operation returns a new heap that shares the
untouched parts of its inputs.
"""
from __future__ import annotations

import logging
from typing import Any, NamedTuple

from .wheel import EmptyStructure, Wheel

logger = logging.getLogger(__name__)


class FibNode(NamedTuple):
    key: Any
    degree: int
    children: FibHeap


class FibHeap():
    """
    Fibonacci Heap

    Attributes:
        key_number: number of keys in the heap, children included
        roots: wheel of root nodes, its head holds the minimum key

    Methods:
        insert(key): heap with ``key`` added
        union(other): heap holding the keys of both heaps
        extract_min(): the minimum key and the heap without it
    """

    __slots__ = ('_key_number', '_roots')

    def __init__(self, key_number=0, roots=None):
        self._key_number = key_number
        self._roots = Wheel() if roots is None else roots

    @property
    def key_number(self):
        return self._key_number

    @property
    def roots(self):
        return self._roots

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def from_iterable(cls, keys):
        heap = cls()
        for key in keys:
            heap = heap.insert(key)
        return heap

    def is_empty(self):
        return self._key_number == 0

    def minimum(self):
        if self.is_empty():
            raise EmptyStructure("Empty Heap")
        return self._roots.head().key

    def insert(self, key):
        return insert_node(FibNode(key, 0, FibHeap()), self)

    def union(self, other):
        return heap_union(self, other)

    __or__ = union

    def extract_min(self):
        if self.is_empty():
            raise EmptyStructure("Empty Heap")
        node, rest = self._roots.extract()
        roots = node.children.roots.concat(rest)
        return node.key, consolidate(FibHeap(self._key_number - 1, roots))

    def drain(self):
        """Yield the keys in ascending order, leaving this heap intact."""
        heap = self
        while not heap.is_empty():
            key, heap = heap.extract_min()
            yield key

    def nodes(self):
        """Every node of the heap, roots in wheel order, pre-order."""
        for node in self._roots:
            yield node
            yield from node.children.nodes()

    def __len__(self):
        return self._key_number

    def __bool__(self):
        return self._key_number != 0

    def __repr__(self):
        return f'FibHeap({self._key_number}, roots={list(self._roots)!r})'


def _insert_root(wheel, node):
    # keep the current head when it is strictly smaller than the new node
    if wheel.is_empty() or node.key <= wheel.head().key:
        return wheel.insert(node)
    return wheel.insert(node).rotate_right()


def insert_node(node, heap):
    """
    Insert a whole tree as a new root of ``heap``.
    """
    return FibHeap(heap.key_number + 1 + node.children.key_number,
                   _insert_root(heap.roots, node))


def heap_union(a, b):
    """
    Union two Fibonacci Heaps

    The root wheels are spliced so that the head of the heap with the
    smaller minimum stays head, ``a`` winning ties.  No tree is touched.
    """
    if a is None or a.is_empty():
        return FibHeap() if b is None else b
    if b is None or b.is_empty():
        return a
    if a.minimum() <= b.minimum():
        roots = a.roots.concat(b.roots)
    else:
        roots = b.roots.concat(a.roots)
    return FibHeap(a.key_number + b.key_number, roots)


def link(x, y):
    """
    Hang the tree with the larger root key under the other one.
    """
    if x.key <= y.key:
        return FibNode(x.key, x.degree + 1, insert_node(y, x.children))
    return FibNode(y.key, y.degree + 1, insert_node(x, y.children))


def _insert_degree(node, table):
    while node.degree in table:
        node = link(node, table.pop(node.degree))
    table[node.degree] = node


def consolidate(heap):
    """
    Link root trees of equal degree until all root degrees are distinct.

    Returns a heap over the same keys whose root wheel has its minimum at
    the head.
    """
    table = {}
    roots = heap.roots
    while not roots.is_empty():
        node, roots = roots.extract()
        _insert_degree(node, table)

    wheel = Wheel()
    for degree in sorted(table, reverse=True):
        wheel = _insert_root(wheel, table[degree])

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('consolidate %d roots into %d (degrees %s)',
                     len(heap.roots), len(wheel), list(table))
    return FibHeap(heap.key_number, wheel)


def heapsort(keys):
    return list(FibHeap.from_iterable(keys).drain())

from .fibheap import (FibHeap, FibNode, consolidate, heap_union, heapsort,
                      insert_node, link)
from .version import __version__
from .view import heap_view
from .wheel import EmptyStructure, Wheel

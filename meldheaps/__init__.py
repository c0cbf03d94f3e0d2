from .base import (DetachedNodeError, Heap, HeapError, IncompatibleHeapsError,
                   SafeDeletionMixin, assign_key)
from .bits import lowest_power_of_2, powers_of_2
from .fibheap import FibHeap, FibNode, heap_union
from .pairing import PairingHeap, PairingNode
from .skew import SkewHeap, SkewNode
from .version import __version__

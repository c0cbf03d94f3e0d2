import logging

import pytest

from meldheaps import (FibHeap, Heap, PairingHeap, SkewHeap, assign_key,
                       heap_union)


def test_default_update():
    heap = Heap()
    assert heap.update is assign_key
    assert heap.is_empty()
    assert heap.find_min() == (None, None)
    assert len(heap) == 0
    assert list(heap) == []


@pytest.mark.parametrize('cls', [FibHeap, PairingHeap, SkewHeap])
def test_count(cls):
    heap = cls()
    for i, k in enumerate([7, 1, 9, 1, 3]):
        heap.insert(k)
        assert len(heap) == i + 1
    assert sorted(n.key for n in heap) == [1, 1, 3, 7, 9]
    for i in range(5):
        heap.delete_min()
        assert len(heap) == 4 - i
    assert heap.delete_min() is None
    assert len(heap) == 0


@pytest.mark.parametrize('cls', [FibHeap, PairingHeap])
def test_removed_flag_is_shared(cls):
    heap = cls()
    node = heap.insert(1)
    heap.insert(2)
    heap.delete_safe(node)
    assert cls.is_removed(node)
    other = cls()
    other.delete_safe(node)
    assert len(heap) == 1


def test_union_log(caplog):
    a, b = FibHeap(), FibHeap()
    a.insert(1)
    b.insert(2)
    with caplog.at_level(logging.DEBUG, logger='meldheaps.fibheap'):
        heap_union(a, b)
    assert 'union of heaps with 1 and 1 nodes' in caplog.text
    assert len(b) == 0 and b.is_empty()


def test_skip_log(caplog):
    heap = PairingHeap()
    node = heap.insert(1)
    heap.delete_safe(node)
    with caplog.at_level(logging.DEBUG, logger='meldheaps.base'):
        heap.delete_safe(node)
    assert 'skip delete' in caplog.text

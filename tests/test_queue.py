import numpy as np
import pytest

from binheap.heap import BinHeap
from binheap.maps import ArrayMap
from binheap.queue import MinHeap, MaxHeap
from binheap.states import IN_HEAP, PRE_HEAP, POST_HEAP


def test_initialization_min_heap():
    h = MinHeap([('a', 5), ('b', 2), ('c', 8)])
    assert len(h) == 3
    assert h.top == ('b', 2)


def test_initialization_max_heap():
    h = MaxHeap([('a', 5), ('b', 2), ('c', 8)])
    assert len(h) == 3
    assert h.top == ('c', 8)


def test_pop_ordering():
    h = MinHeap([('a', 3), ('b', 1), ('c', 2)])
    popped = []
    while h:
        popped.append(h.pop())
    assert popped == [('b', 1), ('c', 2), ('a', 3)]
    assert h.state('a') == POST_HEAP


def test_push_existing_updates():
    h = MinHeap([('a', 5), ('b', 2)])
    h.push('a', 1)
    assert len(h) == 2
    assert h.top == ('a', 1)


def test_update():
    h = MinHeap([('a', 5), ('b', 2)])
    h.update('b', 9)
    assert h.top == ('a', 5)

    with pytest.raises(KeyError):
        h.update('c', 10)


def test_remove():
    h = MaxHeap([('a', 1), ('b', 2), ('c', 3)])
    assert h.remove('b') == 2
    assert 'b' not in h
    assert 'a' in h
    assert len(h) == 2

    with pytest.raises(KeyError):
        h.remove('b')


def test_empty_queue():
    h = MinHeap()
    assert not h
    assert h.state('x') == PRE_HEAP

    with pytest.raises(IndexError):
        h.top
    with pytest.raises(IndexError):
        h.pop()


def test_iteration_yields_all_pairs():
    pairs = [('a', 4), ('b', 1), ('c', 3), ('d', 2)]
    h = MinHeap(pairs)

    assert sorted(h) == sorted(pairs)
    assert next(iter(h)) == ('b', 1)
    assert h.state('c') == IN_HEAP


def dijkstra(adj, source):
    """ Shortest path distances with the heap and a dense position map.
    """
    n = len(adj)
    heap = BinHeap(ArrayMap(n))
    dist = np.full(n, np.inf)

    heap.push(source, 0.0)
    while heap:
        v, d = heap.top(), heap.prio()
        heap.pop()
        dist[v] = d

        for w, length in adj[v]:
            state = heap.state(w)
            if state == PRE_HEAP:
                heap.push(w, d + length)
            elif state == IN_HEAP and d + length < heap[w]:
                heap.decrease(w, d + length)

    return dist


def test_dijkstra():
    edges = [(0, 1, 4.0), (0, 2, 1.0), (2, 1, 2.0), (1, 3, 1.0),
             (2, 3, 5.0), (3, 4, 3.0)]
    adj = [[] for _ in range(6)]
    for v, w, length in edges:
        adj[v].append((w, length))
        adj[w].append((v, length))

    dist = dijkstra(adj, 0)
    assert list(dist[:5]) == [0.0, 3.0, 1.0, 4.0, 7.0]
    assert np.isinf(dist[5])

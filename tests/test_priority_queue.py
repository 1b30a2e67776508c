import random

import pytest

from spantrees.priority_queue import Node, PriorityQueue


def drain(pq):
    out = []
    while pq:
        out.append(pq.pop())
    return out


def test_pops_in_priority_order():
    pq = PriorityQueue()
    pq.push(Node(1, 10))
    pq.push(Node(2, 5))
    pq.push(Node(3, 15))
    pq.push(Node(4, 1))
    popped = drain(pq)
    assert [n.priority for n in popped] == [1, 5, 10, 15]
    assert [n.vertex for n in popped] == [4, 2, 1, 3]


def test_random_priorities_come_out_sorted():
    rng = random.Random(7)
    priorities = [rng.randint(-50, 50) for _ in range(60)]
    pq = PriorityQueue()
    for i, p in enumerate(priorities):
        pq.push(Node(i, p))
    assert [n.priority for n in drain(pq)] == sorted(priorities)


def test_len_tracks_pushes_and_pops():
    pq = PriorityQueue()
    pq.push(Node(0, 3))
    pq.push(Node(1, 2))
    assert len(pq) == 2
    pq.pop()
    assert len(pq) == 1


def test_full_queue_drops_node():
    pq = PriorityQueue(2)
    assert pq.push(Node(0, 5)) is True
    assert pq.push(Node(1, 6)) is True
    assert pq.push(Node(2, 0)) is False
    assert len(pq) == 2
    assert pq.pop() == Node(0, 5)


def test_default_capacity():
    pq = PriorityQueue()
    results = [pq.push(Node(i, i)) for i in range(101)]
    assert results[-1] is False
    assert len(pq) == 100


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().pop()


def test_node_defaults():
    assert Node() == Node(0, 0)
import pytest

from huffcode.tree import MinHeap, Node


def test_node_without_children_is_leaf():
    assert Node(ch=65, freq=3).is_leaf() is True


def test_node_with_child_is_not_leaf():
    node = Node(left=Node(ch=1, freq=1))
    assert node.is_leaf() is False


def test_push_pop_returns_ascending_frequencies():
    heap = MinHeap()
    for freq in [5, 1, 9, 3, 7, 2, 8]:
        heap.push(Node(freq=freq))
    popped = [heap.pop().freq for _ in range(len(heap))]
    assert popped == sorted([5, 1, 9, 3, 7, 2, 8])
    assert len(heap) == 0


def test_init_heapifies_given_nodes():
    freqs = [10, 4, 6, 1, 8, 3]
    heap = MinHeap(Node(freq=f) for f in freqs)
    assert len(heap) == len(freqs)
    assert [heap.pop().freq for _ in freqs] == sorted(freqs)


def test_heapify_after_external_order():
    heap = MinHeap([Node(freq=2), Node(freq=1)])
    assert heap.pop().freq == 1
    assert heap.pop().freq == 2


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MinHeap().pop()


def test_equal_frequencies_keep_insertion_order_for_first():
    a = Node(ch=ord("a"), freq=1)
    b = Node(ch=ord("b"), freq=1)
    heap = MinHeap()
    heap.push(a)
    heap.push(b)
    assert heap.pop() is a
    assert heap.pop() is b
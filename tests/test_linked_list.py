import pytest

from algokit import linked_list

QUEUES = [linked_list.LinkedQueue, linked_list.HeadedLinkedQueue]
DATA = [1, 2, 3, 4, 5]


def _name(cls):
    return cls.__name__


@pytest.mark.parametrize("queue_cls", QUEUES, ids=_name)
def test_create_keeps_order(queue_cls):
    queue = queue_cls(DATA)
    assert list(queue) == DATA
    assert len(queue) == len(DATA)
    assert list(queue) == list(linked_list.LinkedQueue(DATA))


@pytest.mark.parametrize("queue_cls", QUEUES, ids=_name)
def test_dequeue_then_enqueue_rotates(queue_cls):
    queue = queue_cls(DATA)
    first = queue.dequeue()
    assert first == DATA[0]
    assert list(queue) == DATA[1:]
    queue.enqueue(first)
    assert list(queue) == DATA[1:] + DATA[:1]
    assert len(queue) == len(DATA)

    reference = linked_list.HeadedLinkedQueue(DATA)
    reference.enqueue(reference.dequeue())
    assert list(queue) == list(reference)


@pytest.mark.parametrize("queue_cls", QUEUES, ids=_name)
def test_empty_queue(queue_cls):
    queue = queue_cls()
    assert list(queue) == []
    assert len(queue) == 0
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        linked_list.LinkedQueue().dequeue()


@pytest.mark.parametrize("queue_cls", QUEUES, ids=_name)
def test_drain_and_reuse(queue_cls):
    queue = queue_cls(DATA)
    drained = [queue.dequeue() for _ in range(len(DATA))]
    assert drained == DATA
    with pytest.raises(IndexError):
        queue.dequeue()
    queue.enqueue(9)
    assert list(queue) == [9]
    assert queue.dequeue() == 9
    assert len(queue) == 0

    reference = linked_list.HeadedLinkedQueue(DATA)
    assert [reference.dequeue() for _ in range(len(DATA))] == drained


@pytest.mark.parametrize("queue_cls", QUEUES, ids=_name)
def test_fifo_with_interleaving(queue_cls):
    queue = queue_cls()
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.dequeue() == "a"
    queue.enqueue("c")
    assert list(queue) == ["b", "c"]
    assert list(queue) == list(linked_list.LinkedQueue(["b", "c"]))
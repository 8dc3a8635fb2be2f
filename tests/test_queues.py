from random import Random

import pytest

from cpu_sched_sim import ordering
from cpu_sched_sim.process import Process, ProcessSpec
from cpu_sched_sim.queues import FifoQueue, PriorityQueue


def make_process(pid, cpu=5, io=0, arrival=0, priority=0):
    return Process.from_spec(ProcessSpec(pid, cpu, io, arrival, priority))


def random_process(pid, rng):
    return make_process(
        pid,
        cpu=rng.randint(1, 6),
        io=rng.randint(0, 4),
        arrival=rng.randint(0, 5),
        priority=rng.randint(-3, 3),
    )


def assert_heap_ordered(queue):
    items = list(queue)
    for index in range(1, len(items)):
        parent = (index - 1) // 2
        assert not queue.comparator(items[index], items[parent]), f"child {index} beats parent {parent}"


def test_fifo_preserves_insertion_order():
    queue = FifoQueue()
    processes = [make_process(pid) for pid in (3, 1, 2, 5)]
    for process in processes:
        queue.enqueue(process)
    popped = []
    while not queue.is_empty():
        popped.append(queue.front())
        assert queue.dequeue() is True
    assert popped == processes


def test_fifo_interleaved_dequeues_follow_enqueue_order():
    queue = FifoQueue()
    order = []
    for pid in range(1, 7):
        queue.enqueue(make_process(pid))
        if pid % 2 == 0:
            order.append(queue.pop().pid)
    while not queue.is_empty():
        order.append(queue.pop().pid)
    assert order == [1, 2, 3, 4, 5, 6]


def test_fifo_underflow_reports_empty():
    queue = FifoQueue()
    assert queue.front() is None
    assert queue.dequeue() is False
    assert queue.pop() is None
    assert queue.count() == 0


def test_priority_queue_underflow_reports_empty():
    queue = PriorityQueue(ordering.shortest_burst)
    assert queue.top() is None
    assert queue.dequeue() is False
    assert queue.is_empty()


def test_priority_queue_single_element():
    queue = PriorityQueue(ordering.shortest_burst)
    process = make_process(1)
    queue.enqueue(process)
    assert queue.top() is process
    assert queue.count() == 1
    assert queue.dequeue() is True
    assert queue.is_empty()


@pytest.mark.parametrize(
    "comparator",
    [ordering.shortest_burst, ordering.highest_priority, ordering.shortest_io_burst, ordering.earliest_arrival],
)
def test_heap_invariant_holds_under_interleaved_operations(comparator):
    rng = Random(1234)
    queue = PriorityQueue(comparator)
    next_pid = 1
    for _ in range(300):
        if rng.random() < 0.6 or queue.is_empty():
            queue.enqueue(random_process(next_pid, rng))
            next_pid += 1
        else:
            head = queue.top()
            assert all(not comparator(other, head) for other in queue)
            queue.dequeue()
        assert_heap_ordered(queue)


@pytest.mark.parametrize(
    "comparator,key",
    [
        (ordering.shortest_burst, lambda p: (p.cpu_burst_time, p.pid)),
        (ordering.highest_priority, lambda p: (p.priority, p.pid)),
        (ordering.shortest_io_burst, lambda p: (p.io_burst_time, p.pid)),
        (ordering.earliest_arrival, lambda p: (p.arrival_time, p.pid)),
    ],
)
def test_heap_drains_in_comparator_order(comparator, key):
    rng = Random(99)
    processes = [random_process(pid, rng) for pid in range(1, 41)]
    queue = PriorityQueue(comparator)
    for process in processes:
        queue.enqueue(process)
    drained = []
    while not queue.is_empty():
        drained.append(queue.pop())
    assert drained == sorted(processes, key=key)


def test_heap_keeps_order_after_uniform_io_decrement():
    rng = Random(7)
    queue = PriorityQueue(ordering.shortest_io_burst)
    for pid in range(1, 20):
        queue.enqueue(make_process(pid, io=rng.randint(1, 9)))
    for process in queue:
        process.perform_io()
    assert_heap_ordered(queue)

import pytest

from cpu_sched_sim import ordering
from cpu_sched_sim.process import Process, ProcessSpec


def make_process(pid, cpu=5, io=0, arrival=0, priority=0):
    return Process.from_spec(ProcessSpec(pid, cpu, io, arrival, priority))


def test_shortest_burst_prefers_smaller_remaining_burst():
    long_job = make_process(1, cpu=8)
    short_job = make_process(2, cpu=3)
    assert ordering.shortest_burst(short_job, long_job)
    assert not ordering.shortest_burst(long_job, short_job)


def test_highest_priority_prefers_smaller_value():
    urgent = make_process(5, priority=-10)
    relaxed = make_process(1, priority=4)
    assert ordering.highest_priority(urgent, relaxed)
    assert not ordering.highest_priority(relaxed, urgent)


def test_shortest_io_burst_tracks_remaining_io():
    a = make_process(1, io=4)
    b = make_process(2, io=3)
    assert ordering.shortest_io_burst(b, a)
    a.perform_io()
    a.perform_io()
    assert ordering.shortest_io_burst(a, b)


def test_earliest_arrival_prefers_earlier_tick():
    early = make_process(9, arrival=1)
    late = make_process(2, arrival=6)
    assert ordering.earliest_arrival(early, late)


@pytest.mark.parametrize(
    "comparator",
    [ordering.shortest_burst, ordering.highest_priority, ordering.shortest_io_burst, ordering.earliest_arrival],
)
def test_ties_break_on_smaller_pid(comparator):
    low = make_process(3)
    high = make_process(7)
    assert comparator(low, high)
    assert not comparator(high, low)
    assert not comparator(low, low)

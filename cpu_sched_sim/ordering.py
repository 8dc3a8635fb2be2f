"""Strict total orders over processes used by the priority queues.

Each comparator answers "should ``a`` sit strictly closer to the top than
``b``". Ties always fall back to the smaller pid, so two distinct processes
never compare equal.
"""

from __future__ import annotations

from collections.abc import Callable

from .process import Process

Comparator = Callable[[Process, Process], bool]


def shortest_burst(a: Process, b: Process) -> bool:
    if a.cpu_burst_time != b.cpu_burst_time:
        return a.cpu_burst_time < b.cpu_burst_time
    return a.pid < b.pid


def highest_priority(a: Process, b: Process) -> bool:
    if a.priority != b.priority:
        return a.priority < b.priority
    return a.pid < b.pid


def shortest_io_burst(a: Process, b: Process) -> bool:
    if a.io_burst_time != b.io_burst_time:
        return a.io_burst_time < b.io_burst_time
    return a.pid < b.pid


def earliest_arrival(a: Process, b: Process) -> bool:
    if a.arrival_time != b.arrival_time:
        return a.arrival_time < b.arrival_time
    return a.pid < b.pid

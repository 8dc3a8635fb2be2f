from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .process import Process
from .queues import ProcessQueue


@dataclass(slots=True)
class AggregateMetrics:
    count: int
    execution_time: int
    cpu_utilization: float
    avg_waiting_time: float
    avg_turnaround_time: float
    max_waiting_time: int


def drain(queue: ProcessQueue) -> list[Process]:
    """Empty a queue, returning its processes in head-first order."""

    drained: list[Process] = []
    while not queue.is_empty():
        head = queue.pop()
        if head is not None:
            drained.append(head)
    return drained


def summarise(processes: Sequence[Process], *, elapsed_time: int, idle_time: int, workload_size: int) -> AggregateMetrics:
    """Aggregate the counters of terminated processes.

    Utilization is ``(elapsed_time + 1 - idle_time) / elapsed_time``, where
    ``elapsed_time`` is the zero-based index of the final tick. A run that
    ends on tick zero reports zero utilization, and an empty workload reports
    zero averages.
    """

    utilization = 0.0
    if elapsed_time > 0:
        utilization = (elapsed_time + 1 - idle_time) / elapsed_time

    total_wait = 0
    total_turnaround = 0
    max_wait = 0
    for process in processes:
        total_wait += process.waiting_time
        total_turnaround += process.turnaround_time
        if process.waiting_time > max_wait:
            max_wait = process.waiting_time

    if workload_size == 0:
        return AggregateMetrics(
            count=0,
            execution_time=0,
            cpu_utilization=0.0,
            avg_waiting_time=0.0,
            avg_turnaround_time=0.0,
            max_waiting_time=0,
        )
    return AggregateMetrics(
        count=len(processes),
        execution_time=elapsed_time + 1,
        cpu_utilization=utilization,
        avg_waiting_time=total_wait / workload_size,
        avg_turnaround_time=total_turnaround / workload_size,
        max_waiting_time=max_wait,
    )

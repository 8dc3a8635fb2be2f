from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random
from typing import Optional, Sequence

from . import metrics, ordering
from .policies import Policy, PolicyDescriptor, describe
from .process import Process, ProcessSpec
from .queues import PriorityQueue, ProcessQueue

logger = logging.getLogger(__name__)


def io_interrupt(rng: Random, trials: int = 100, threshold: int = 50) -> bool:
    """Draw ``trials`` fair bits and fire when at least ``threshold`` are set.

    With the defaults this fires slightly more often than a fair coin.
    """

    successes = sum(rng.getrandbits(1) for _ in range(trials))
    return successes >= threshold


@dataclass(slots=True)
class SimulationConfig:
    time_quantum: int = 10
    interrupt_trials: int = 100
    interrupt_threshold: int = 50

    def __post_init__(self) -> None:
        if self.time_quantum < 1:
            msg = "time_quantum must be at least one tick"
            raise ValueError(msg)
        if self.interrupt_trials < 1:
            msg = "interrupt_trials must be strictly positive"
            raise ValueError(msg)
        if not 0 <= self.interrupt_threshold <= self.interrupt_trials:
            msg = "interrupt_threshold must lie within [0, interrupt_trials]"
            raise ValueError(msg)


@dataclass(slots=True)
class SimulationResult:
    descriptor: PolicyDescriptor
    processes: list[Process]
    elapsed_time: int
    idle_time: int
    context_switches: int
    trace: list[Optional[int]]
    aggregate: metrics.AggregateMetrics

    @property
    def name(self) -> str:
        return self.descriptor.label

    @property
    def utilization(self) -> float:
        return self.aggregate.cpu_utilization


class Simulation:
    """Tick-driven simulation of one scheduling policy over a cloned workload.

    Every tick runs the same sub-steps in a fixed order: admit arrivals and
    finished I/O, dispatch (and preempt, for preemptive policies), age the
    ready structure, advance I/O, resolve random I/O interrupts, then execute
    one CPU tick. The loop stops on the tick where the last process
    terminates.
    """

    def __init__(
        self,
        policy: Policy | PolicyDescriptor,
        processes: Sequence[ProcessSpec],
        config: SimulationConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        self.descriptor = policy if isinstance(policy, PolicyDescriptor) else describe(policy)
        self.config = config or SimulationConfig()
        self._rng = rng if rng is not None else Random()
        self._workload_size = len(processes)

        self.elapsed_time = 0
        self.idle_time = 0
        self.running: Process | None = None
        self.ready: ProcessQueue = self.descriptor.make_ready_queue()
        self.waiting = PriorityQueue(ordering.shortest_io_burst)
        self._job_pool = PriorityQueue(ordering.earliest_arrival)
        self._terminated = PriorityQueue(ordering.earliest_arrival)
        self._quantum_used = 0
        self._context_switches = 0
        self._finished = False
        self.trace: list[Optional[int]] = []

        pids = [spec.pid for spec in processes]
        if len(set(pids)) != len(pids):
            msg = "pids must be unique within a workload"
            raise ValueError(msg)
        for spec in processes:
            self._job_pool.enqueue(Process.from_spec(spec))

    def run(self) -> SimulationResult:
        if self._finished:
            msg = "simulation has already run"
            raise RuntimeError(msg)
        while self._workload_size:
            self._admit()
            self._dispatch()
            self._age_ready()
            self._advance_io()
            self._resolve_interrupts()
            self._execute()
            if len(self._terminated) == self._workload_size:
                break
            self.elapsed_time += 1
        self._finished = True
        return self._evaluate()

    def _admit(self) -> None:
        while not self._job_pool.is_empty():
            head = self._job_pool.top()
            if head is None or head.arrival_time != self.elapsed_time:
                break
            self._job_pool.dequeue()
            if head.is_terminated:
                # Nothing to run; retire on arrival.
                head.completion_time = self.elapsed_time
                self._terminated.enqueue(head)
                continue
            self.ready.enqueue(head)

        while not self.waiting.is_empty():
            head = self.waiting.top()
            if head is None or head.io_burst_time != 0:
                break
            self.waiting.dequeue()
            self.ready.enqueue(head)

    def _dispatch(self) -> None:
        if self.running is None:
            self._load()
            return
        if not self.descriptor.preemptive or self.descriptor.comparator is None:
            return
        head = self.ready.peek()
        if head is not None and self.descriptor.comparator(head, self.running):
            logger.debug("t=%d pid=%d preempted by pid=%d", self.elapsed_time, self.running.pid, head.pid)
            self.ready.enqueue(self.running)
            self.running = None
            self._load()

    def _load(self) -> None:
        process = self.ready.pop()
        if process is None:
            return
        self.running = process
        self._context_switches += 1
        logger.debug("t=%d dispatch pid=%d", self.elapsed_time, process.pid)

    def _age_ready(self) -> None:
        for process in self.ready:
            process.wait()

    def _advance_io(self) -> None:
        # Uniform decrement keeps the heap ordered.
        for process in self.waiting:
            process.perform_io()

    def _resolve_interrupts(self) -> None:
        if self.waiting.is_empty():
            return
        survivors = PriorityQueue(self.waiting.comparator)
        while not self.waiting.is_empty():
            process = self.waiting.pop()
            if process is None:
                break
            if self._interrupt() and process.cpu_burst_time > 1:
                logger.debug("t=%d pid=%d interrupted out of I/O", self.elapsed_time, process.pid)
                self.ready.enqueue(process)
            else:
                survivors.enqueue(process)
        self.waiting = survivors

    def _execute(self) -> None:
        process = self.running
        if process is None:
            self.idle_time += 1
            self.trace.append(None)
            return

        process.run()
        self.trace.append(process.pid)
        if self.descriptor.round_robin:
            self._quantum_used += 1

        if process.is_terminated:
            process.completion_time = self.elapsed_time
            self._terminated.enqueue(process)
            self._release()
            logger.debug("t=%d pid=%d terminated", self.elapsed_time, process.pid)
            return

        if process.io_burst_time > 0 and (process.cpu_burst_time == 1 or self._interrupt()):
            self.waiting.enqueue(process)
            self._release()
            logger.debug("t=%d pid=%d requested I/O", self.elapsed_time, process.pid)
            return

        if self.descriptor.round_robin and self._quantum_used >= self.config.time_quantum:
            self.ready.enqueue(process)
            self._release()
            logger.debug("t=%d pid=%d quantum expired", self.elapsed_time, process.pid)

    def _release(self) -> None:
        self.running = None
        self._quantum_used = 0

    def _interrupt(self) -> bool:
        return io_interrupt(self._rng, self.config.interrupt_trials, self.config.interrupt_threshold)

    def _evaluate(self) -> SimulationResult:
        processes = metrics.drain(self._terminated)
        aggregate = metrics.summarise(
            processes,
            elapsed_time=self.elapsed_time,
            idle_time=self.idle_time,
            workload_size=self._workload_size,
        )
        logger.info(
            "%s finished at t=%d: util=%.3f avg_wait=%.3f avg_turnaround=%.3f",
            self.descriptor.label,
            self.elapsed_time,
            aggregate.cpu_utilization,
            aggregate.avg_waiting_time,
            aggregate.avg_turnaround_time,
        )
        return SimulationResult(
            descriptor=self.descriptor,
            processes=processes,
            elapsed_time=self.elapsed_time,
            idle_time=self.idle_time,
            context_switches=self._context_switches,
            trace=self.trace,
            aggregate=aggregate,
        )

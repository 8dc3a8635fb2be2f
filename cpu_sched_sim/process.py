from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class ProcessSpec:
    """Immutable process descriptor produced by the workload generator."""

    pid: int
    cpu_burst_time: int
    io_burst_time: int
    arrival_time: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.pid <= 0:
            msg = "pid must be a positive integer"
            raise ValueError(msg)
        if self.cpu_burst_time < 0:
            msg = "cpu_burst_time cannot be negative"
            raise ValueError(msg)
        if self.io_burst_time < 0:
            msg = "io_burst_time cannot be negative"
            raise ValueError(msg)
        if self.arrival_time < 0:
            msg = "arrival_time cannot be negative"
            raise ValueError(msg)


@dataclass(slots=True)
class Process:
    """Mutable simulation record of one process inside a single simulator."""

    spec: ProcessSpec
    cpu_burst_time: int
    io_burst_time: int
    waiting_time: int = 0
    turnaround_time: int = 0
    completion_time: Optional[int] = None

    @classmethod
    def from_spec(cls, spec: ProcessSpec) -> Process:
        return cls(spec=spec, cpu_burst_time=spec.cpu_burst_time, io_burst_time=spec.io_burst_time)

    @property
    def pid(self) -> int:
        return self.spec.pid

    @property
    def arrival_time(self) -> int:
        return self.spec.arrival_time

    @property
    def priority(self) -> int:
        return self.spec.priority

    @property
    def is_terminated(self) -> bool:
        return self.cpu_burst_time == 0

    def wait(self) -> None:
        """Account one tick spent in the ready structure."""

        self.waiting_time += 1
        self.turnaround_time += 1

    def perform_io(self) -> None:
        """Account one tick spent in the waiting structure."""

        self.io_burst_time -= 1
        self.turnaround_time += 1

    def run(self) -> None:
        """Account one tick spent on the CPU."""

        self.cpu_burst_time -= 1
        self.turnaround_time += 1

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import ordering
from .ordering import Comparator
from .queues import FifoQueue, PriorityQueue, ProcessQueue


class Policy(Enum):
    FCFS = 1
    NON_PREEMPTIVE_SJF = 2
    PREEMPTIVE_SJF = 3
    NON_PREEMPTIVE_PRIORITY = 4
    PREEMPTIVE_PRIORITY = 5
    ROUND_ROBIN = 6


@dataclass(frozen=True, slots=True)
class PolicyDescriptor:
    """Everything that distinguishes one scheduling policy from another.

    ``comparator`` of None means the ready structure is a FIFO queue.
    ``round_robin`` enables the quantum counter; the quantum length itself
    comes from the simulation config.
    """

    policy: Policy
    label: str
    comparator: Comparator | None = None
    preemptive: bool = False
    round_robin: bool = False

    def make_ready_queue(self) -> ProcessQueue:
        if self.comparator is None:
            return FifoQueue()
        return PriorityQueue(self.comparator)


DESCRIPTORS: dict[Policy, PolicyDescriptor] = {
    Policy.FCFS: PolicyDescriptor(Policy.FCFS, "FCFS"),
    Policy.NON_PREEMPTIVE_SJF: PolicyDescriptor(
        Policy.NON_PREEMPTIVE_SJF,
        "Non-Preemptive SJF",
        comparator=ordering.shortest_burst,
    ),
    Policy.PREEMPTIVE_SJF: PolicyDescriptor(
        Policy.PREEMPTIVE_SJF,
        "Preemptive SJF",
        comparator=ordering.shortest_burst,
        preemptive=True,
    ),
    Policy.NON_PREEMPTIVE_PRIORITY: PolicyDescriptor(
        Policy.NON_PREEMPTIVE_PRIORITY,
        "Non-Preemptive Priority",
        comparator=ordering.highest_priority,
    ),
    Policy.PREEMPTIVE_PRIORITY: PolicyDescriptor(
        Policy.PREEMPTIVE_PRIORITY,
        "Preemptive Priority",
        comparator=ordering.highest_priority,
        preemptive=True,
    ),
    Policy.ROUND_ROBIN: PolicyDescriptor(Policy.ROUND_ROBIN, "Round Robin", round_robin=True),
}


def describe(policy: Policy | int | str) -> PolicyDescriptor:
    """Resolve a policy, its numeric value or its enum name to a descriptor."""

    try:
        if isinstance(policy, str):
            policy = Policy[policy.upper()]
        elif not isinstance(policy, Policy):
            policy = Policy(policy)
    except (KeyError, ValueError):
        msg = f"unknown scheduling policy: {policy!r}"
        raise ValueError(msg) from None
    return DESCRIPTORS[policy]

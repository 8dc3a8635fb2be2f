"""Tick-driven simulator comparing CPU scheduling policies over a shared workload."""

from .process import Process, ProcessSpec
from .queues import FifoQueue, PriorityQueue, ProcessQueue
from .policies import Policy, PolicyDescriptor
from .simulator import Simulation, SimulationConfig, SimulationResult
from . import ordering
from . import workload
from . import metrics
from . import evaluation
from . import report

__all__ = [
	"Process",
	"ProcessSpec",
	"FifoQueue",
	"PriorityQueue",
	"ProcessQueue",
	"Policy",
	"PolicyDescriptor",
	"Simulation",
	"SimulationConfig",
	"SimulationResult",
	"ordering",
	"workload",
	"metrics",
	"evaluation",
	"report",
]

from __future__ import annotations

from typing import Optional, Sequence

from .evaluation import EvaluationOutcome
from .process import ProcessSpec
from .simulator import SimulationResult


def format_workload(specs: Sequence[ProcessSpec]) -> str:
    header_fmt = "{:>6} {:>10} {:>10} {:>10} {:>10}"
    lines = [header_fmt.format("PID", "CPU burst", "I/O burst", "Arrival", "Priority")]
    for spec in specs:
        lines.append(header_fmt.format(spec.pid, spec.cpu_burst_time, spec.io_burst_time, spec.arrival_time, spec.priority))
    return "\n".join(lines)


def format_trace(trace: Sequence[Optional[int]], width: int = 10) -> str:
    """Render one gantt block per tick, ``width`` blocks per line."""

    if width < 1:
        msg = "width must be at least one block"
        raise ValueError(msg)
    blocks = ["[  IDLE  ]" if pid is None else f"[ {pid:>6} ]" for pid in trace]
    return "\n".join("".join(blocks[i : i + width]) for i in range(0, len(blocks), width))


def format_evaluation(result: SimulationResult) -> str:
    m = result.aggregate
    return "\n".join(
        [
            f"-> Execution time: {m.execution_time}",
            f"-> CPU utilization: {m.cpu_utilization:.3f}",
            f"-> Average waiting time: {m.avg_waiting_time:.3f}",
            f"-> Average turnaround time: {m.avg_turnaround_time:.3f}",
        ],
    )


def format_summary(outcomes: Sequence[EvaluationOutcome]) -> str:
    header_fmt = "{:<24} {:>9} {:>9} {:>9} {:>9}"
    row_fmt = "{:<24} {:>9.3f} {:>9.3f} {:>9.3f} {:>9d}"
    lines = [header_fmt.format("Policy", "CPUUtil", "AvgWait", "AvgTurn", "MaxWait")]
    for outcome in outcomes:
        m = outcome.simulation.aggregate
        lines.append(
            row_fmt.format(
                outcome.name,
                m.cpu_utilization,
                m.avg_waiting_time,
                m.avg_turnaround_time,
                m.max_waiting_time,
            ),
        )
    return "\n".join(lines)

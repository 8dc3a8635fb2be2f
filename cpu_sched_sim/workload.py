from __future__ import annotations

from collections.abc import Iterable
from random import Random

from .process import ProcessSpec

# (low, high, weight) bands for the skewed CPU burst distribution.
CPU_BURST_BANDS: tuple[tuple[int, int, float], ...] = (
    (1, 10, 0.90),
    (11, 20, 0.05),
    (21, 40, 0.05),
)
IO_BURST_RANGE = (0, 19)
PRIORITY_RANGE = (-20, 20)


def generate(count: int, *, seed: int | None = None, rng: Random | None = None) -> list[ProcessSpec]:
    """Generate ``count`` random processes with pids ``1..count``.

    Arrival times are uniform over ``[0, 3 * count - 1]``; I/O bursts and
    priorities are uniform over their ranges. Pass either a seed or an
    explicit random source; the latter wins when both are given.
    """

    if count < 0:
        msg = "count cannot be negative"
        raise ValueError(msg)
    rng = rng if rng is not None else Random(seed)
    specs: list[ProcessSpec] = []
    for pid in range(1, count + 1):
        specs.append(
            ProcessSpec(
                pid=pid,
                cpu_burst_time=_sample_cpu_burst(rng),
                io_burst_time=rng.randint(*IO_BURST_RANGE),
                arrival_time=rng.randint(0, 3 * count - 1),
                priority=rng.randint(*PRIORITY_RANGE),
            ),
        )
    return specs


def from_rows(rows: Iterable[tuple[int, ...]]) -> list[ProcessSpec]:
    """Build specs from ``(cpu_burst, io_burst, arrival[, priority])`` rows, numbering pids from 1."""

    specs: list[ProcessSpec] = []
    for pid, row in enumerate(rows, start=1):
        if len(row) not in (3, 4):
            msg = "each row must be (cpu_burst, io_burst, arrival[, priority])"
            raise ValueError(msg)
        specs.append(ProcessSpec(pid, *row))
    return specs


def _sample_cpu_burst(rng: Random) -> int:
    weights = [weight for _, _, weight in CPU_BURST_BANDS]
    low, high, _ = rng.choices(CPU_BURST_BANDS, weights=weights)[0]
    return rng.randint(low, high)

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Iterable, Sequence

from .policies import Policy, describe
from .process import ProcessSpec
from .simulator import Simulation, SimulationConfig, SimulationResult

# Interrupt stream modes.
SHARED = "shared"
INDEPENDENT = "independent"
STREAM_MODES = (SHARED, INDEPENDENT)


@dataclass(slots=True)
class EvaluationOutcome:
    name: str
    policy: Policy
    simulation: SimulationResult


def evaluate_policy(
    policy: Policy,
    specs: Sequence[ProcessSpec],
    *,
    config: SimulationConfig | None = None,
    rng: Random | None = None,
) -> EvaluationOutcome:
    descriptor = describe(policy)
    simulation = Simulation(descriptor, specs, config=config, rng=rng)
    result = simulation.run()
    return EvaluationOutcome(name=descriptor.label, policy=descriptor.policy, simulation=result)


def evaluate_suite(
    specs: Sequence[ProcessSpec],
    policies: Iterable[Policy] = tuple(Policy),
    *,
    config: SimulationConfig | None = None,
    seed: int | None = None,
    interrupt_streams: str = INDEPENDENT,
) -> list[EvaluationOutcome]:
    """Run every policy, in order, over its own clone of the same workload.

    With ``"shared"`` streams every simulator gets a fresh ``Random(seed)``,
    so all of them see the same sequence of interrupt draws. With
    ``"independent"`` streams each simulator is seeded from a master
    ``Random(seed)``.
    """

    if interrupt_streams not in STREAM_MODES:
        msg = f"interrupt_streams must be one of {STREAM_MODES}, got {interrupt_streams!r}"
        raise ValueError(msg)
    master = Random(seed)
    shared_seed = seed if seed is not None else master.getrandbits(64)
    outcomes: list[EvaluationOutcome] = []
    for policy in policies:
        if interrupt_streams == SHARED:
            rng = Random(shared_seed)
        else:
            rng = Random(master.getrandbits(64))
        outcomes.append(evaluate_policy(policy, specs, config=config, rng=rng))
    return outcomes

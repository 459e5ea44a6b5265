"""Timing of the breeding search on randomly generated seeds."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Optional

from .calculator import GeneCalculator
from .genes import SEED_LENGTH, GeneType, Seed

_GENES = tuple(GeneType)


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one timed search over random seeds."""

    seeds: tuple[Seed, ...]
    breeding_seeds: Optional[tuple[Seed, Seed, Seed, Seed]]
    offspring_seed: Seed
    elapsed_ms: float


def random_seed(rng: Optional[random.Random] = None) -> Seed:
    """Return a seed whose six genes are drawn uniformly at random."""
    rng = rng if rng is not None else random.Random()
    return Seed(tuple(rng.choice(_GENES) for _ in range(SEED_LENGTH)))


def run_benchmark(
    seed_count: int, rng: Optional[random.Random] = None
) -> BenchmarkResult:
    """Generate ``seed_count`` random seeds and time the best-breeding search."""
    rng = rng if rng is not None else random.Random()
    started = time.perf_counter()

    calculator = GeneCalculator(rng)
    for _ in range(seed_count):
        calculator.add_seed(random_seed(rng))
    calculator.calculate()

    elapsed_ms = (time.perf_counter() - started) * 1000.0
    return BenchmarkResult(
        seeds=calculator.seeds,
        breeding_seeds=calculator.breeding_seeds,
        offspring_seed=calculator.offspring_seed,
        elapsed_ms=elapsed_ms,
    )
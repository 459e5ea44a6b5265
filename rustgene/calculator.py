"""Search for the best four-parent crossbreeding of a set of seeds."""

from __future__ import annotations

import itertools
import random
from collections import Counter
from typing import Iterable, Optional, Sequence

from .genes import GeneType, Seed

BEST_QUALITY = 100
_INITIAL_QUALITY = -100
_NEGATIVE_WEIGHT = 1.2
_POSITIVE_WEIGHT = 1.0
_TOLERANCE = 1e-6

_SCORE_WEIGHTS = {
    GeneType.G: 2,
    GeneType.Y: 3,
    GeneType.H: 1,
    GeneType.W: -2,
    GeneType.X: -1,
}


def calc_quality(seed: Seed) -> int:
    """Score a seed; higher is better, and GGGYYY in any order scores 100."""
    counts = Counter(seed.genes)
    if counts[GeneType.G] == 3 and counts[GeneType.Y] == 3:
        return BEST_QUALITY
    return sum(_SCORE_WEIGHTS[gene] * n for gene, n in counts.items())


def gene_key(genes: Iterable[GeneType]) -> int:
    """Pack four genes into an order-independent integer key."""
    values = sorted(GeneType(g).value for g in genes)
    if len(values) != 4:
        raise ValueError(f"a gene key takes 4 genes, got {len(values)}")
    key = 0
    for value in values:
        key = (key << 8) | value
    return key


def gene_type_to_char(gene: GeneType) -> str:
    """Return the letter for a gene, or ``'?'`` for anything else."""
    return gene.name if isinstance(gene, GeneType) else "?"


def _spaced(seed: Seed) -> str:
    return "".join(f"{gene_type_to_char(g)} " for g in seed.genes)


def format_breeding_result(
    breeding_seeds: Sequence[Optional[Seed]], offspring: Seed
) -> str:
    """Describe one breeding round: the four parents and their offspring."""
    lines = ["=== Breeding Round ==="]
    for number, parent in enumerate(breeding_seeds, start=1):
        body = _spaced(parent) if parent is not None else "(null)"
        lines.append(f"Parent {number}\t: {body}")
    lines.append(f"Offspring\t: {_spaced(offspring)}")
    return "\n".join(lines)


class GeneCalculator:
    """Finds the four parents whose crossbreed yields the best offspring."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._seeds: list[Seed] = []
        self._known: set[Seed] = set()
        self._breeding: Optional[tuple[Seed, Seed, Seed, Seed]] = None
        self._offspring = Seed()
        self._best_quality = _INITIAL_QUALITY
        self._gene_cache: dict[int, GeneType] = {}

    def add_seed(self, seed: Seed) -> None:
        """Record a seed; duplicates are ignored."""
        if seed not in self._known:
            self._known.add(seed)
            self._seeds.append(seed)

    def clear_seeds(self) -> None:
        """Forget all seeds and the best result found so far."""
        self._known.clear()
        self._seeds.clear()
        self._breeding = None
        self._offspring = Seed()
        self._best_quality = _INITIAL_QUALITY

    def calculate(self) -> None:
        """Try every group of four seeds and keep the best offspring."""
        for group in itertools.combinations(self._seeds, 4):
            offspring = self._crossbreed(group)
            quality = calc_quality(offspring)
            if quality > self._best_quality:
                self._best_quality = quality
                self._breeding = group
                self._offspring = offspring
            if self._best_quality == BEST_QUALITY:
                return

    @property
    def breeding_seeds(self) -> Optional[tuple[Seed, Seed, Seed, Seed]]:
        """The four parents of the best offspring, or None before a result."""
        return self._breeding

    @property
    def offspring_seed(self) -> Seed:
        """The best offspring found."""
        return self._offspring

    @property
    def seeds(self) -> tuple[Seed, ...]:
        """All recorded seeds in insertion order."""
        return tuple(self._seeds)

    def _crossbreed(self, parents: Sequence[Seed]) -> Seed:
        return Seed(
            tuple(
                self._gene_at(tuple(p.genes[i] for p in parents))
                for i in range(len(parents[0].genes))
            )
        )

    def _gene_at(self, genes: tuple[GeneType, ...]) -> GeneType:
        key = gene_key(genes)
        cached = self._gene_cache.get(key)
        if cached is not None:
            return cached

        weights: dict[GeneType, float] = {}
        for gene in genes:
            weight = _POSITIVE_WEIGHT if gene.is_positive() else _NEGATIVE_WEIGHT
            weights[gene] = weights.get(gene, 0.0) + weight

        top = max(weights.values())
        candidates = sorted(
            (g for g, w in weights.items() if abs(w - top) < _TOLERANCE),
            key=lambda g: g.value,
        )
        chosen = candidates[0] if len(candidates) == 1 else self._rng.choice(candidates)
        self._gene_cache[key] = chosen
        return chosen
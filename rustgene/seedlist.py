"""An ordered, editable list of seeds and the breeding report built from it."""

from __future__ import annotations

import random
from typing import Iterable, Iterator, Optional

from .calculator import GeneCalculator, gene_type_to_char
from .genes import Seed

MIN_SEEDS = 4


class NotEnoughSeedsError(ValueError):
    """Raised when a calculation is requested with fewer than four seeds."""


def _spaced(seed: Seed) -> str:
    return "".join(f"{gene_type_to_char(g)} " for g in seed.genes)


class SeedList:
    """The seeds the user has entered, in entry order."""

    def __init__(self, seeds: Optional[Iterable[Seed]] = None) -> None:
        self._seeds: list[Seed] = list(seeds) if seeds is not None else []

    def set_seeds(self, seeds: Iterable[Seed]) -> None:
        """Replace the whole list."""
        self._seeds = list(seeds)

    def get_seed(self, row: int) -> Seed:
        """Return the seed at ``row``, or a default seed when out of range."""
        if 0 <= row < len(self._seeds):
            return self._seeds[row]
        return Seed()

    def __len__(self) -> int:
        return len(self._seeds)

    def __iter__(self) -> Iterator[Seed]:
        return iter(self._seeds)

    def remove_seed(self, row: int) -> bool:
        """Delete the seed at ``row``; False if the row does not exist."""
        if not 0 <= row < len(self._seeds):
            return False
        del self._seeds[row]
        return True

    def append_seed(self, seed: Seed) -> None:
        """Add a seed at the end of the list."""
        self._seeds.append(seed)

    def calculate_report(self, rng: Optional[random.Random] = None) -> str:
        """Find the best crossbreeding and describe parents and offspring."""
        if len(self._seeds) < MIN_SEEDS:
            raise NotEnoughSeedsError(
                f"at least {MIN_SEEDS} seeds are needed to calculate"
            )

        calculator = GeneCalculator(rng)
        for seed in self._seeds:
            calculator.add_seed(seed)
        calculator.calculate()

        parents = calculator.breeding_seeds
        if parents is None:
            raise NotEnoughSeedsError(
                f"at least {MIN_SEEDS} distinct seeds are needed to calculate"
            )

        lines = [
            f"Parent {number} genes: {_spaced(parent)}\n"
            for number, parent in enumerate(parents, start=1)
        ]
        lines.append(
            f"Best offspring seed genes: {_spaced(calculator.offspring_seed)}\n"
        )
        return "".join(lines)
"""Gene types and the six-gene seed used by the breeding calculator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

SEED_LENGTH = 6

POSITIVE_COLOR = "#5e861e"
NEGATIVE_COLOR = "#9b4433"
UNKNOWN_COLOR = "#808080"


class GeneType(Enum):
    """A single gene of a plant seed."""

    G = 0  # growth: faster growth
    Y = 1  # yield: larger harvest
    H = 2  # hardiness: better tolerance
    W = 3  # water: higher water demand
    X = 4  # empty: no effect

    @classmethod
    def from_char(cls, char: str) -> GeneType:
        """Return the gene named by a single letter, case-insensitively."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"a gene is a single letter, got {char!r}")
        try:
            return cls[char.upper()]
        except KeyError:
            raise ValueError(f"unknown gene letter {char!r}") from None

    def is_positive(self) -> bool:
        """True for the beneficial genes G, Y and H."""
        return self in (GeneType.G, GeneType.Y, GeneType.H)


def _default_genes() -> tuple[GeneType, ...]:
    return (GeneType.X,) * SEED_LENGTH


@dataclass(frozen=True)
class Seed:
    """A seed carrying exactly six genes; equal genes mean equal seeds."""

    genes: tuple[GeneType, ...] = field(default_factory=_default_genes)

    def __post_init__(self) -> None:
        genes = tuple(
            gene if isinstance(gene, GeneType) else GeneType(gene)
            for gene in self.genes
        )
        if len(genes) != SEED_LENGTH:
            raise ValueError(
                f"a seed has {SEED_LENGTH} genes, got {len(genes)}"
            )
        object.__setattr__(self, "genes", genes)

    @classmethod
    def from_string(cls, text: str) -> Seed:
        """Build a seed from six gene letters such as ``"GGYYHX"``."""
        if len(text) != SEED_LENGTH:
            raise ValueError(
                f"a seed needs exactly {SEED_LENGTH} genes, got {len(text)}"
            )
        return cls(tuple(GeneType.from_char(ch) for ch in text))

    @classmethod
    def from_genes(cls, genes: Iterable[GeneType]) -> Seed:
        return cls(tuple(genes))

    def __str__(self) -> str:
        return "".join(gene.name for gene in self.genes)


def gene_color(char: str) -> str:
    """Return the display colour for a gene letter as a ``#rrggbb`` string."""
    if char in ("G", "Y", "H"):
        return POSITIVE_COLOR
    if char in ("W", "X"):
        return NEGATIVE_COLOR
    return UNKNOWN_COLOR
"""Layout and text rendering of seeds as rows of six connected circles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .genes import SEED_LENGTH, Seed, gene_color

CIRCLE_SIZE = 30
SPACING = 10
NUMBER_WIDTH = 30
CIRCLES_OFFSET = 40
SIZE_HINT = (300, 50)

Rect = tuple[int, int, int, int]
Line = tuple[int, int, int, int]

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class CircleLayout:
    """Geometry of one seed row: the number box, the circles and their links."""

    number_rect: Rect
    circles: tuple[Rect, ...]
    lines: tuple[Line, ...]


def circle_layout(left: int, top: int, height: int) -> CircleLayout:
    """Place the row number and six circles inside a row's rectangle."""
    start_x = left + CIRCLES_OFFSET
    center_y = top + height // 2
    step = CIRCLE_SIZE + SPACING
    half = CIRCLE_SIZE // 2

    circles = tuple(
        (start_x + i * step, center_y - half, CIRCLE_SIZE, CIRCLE_SIZE)
        for i in range(SEED_LENGTH)
    )
    lines = tuple(
        (start_x + i * step + half, center_y, start_x + (i + 1) * step + half, center_y)
        for i in range(SEED_LENGTH - 1)
    )
    return CircleLayout((left, top, NUMBER_WIDTH, height), circles, lines)


def _rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def _circle(letter: str, color: bool) -> str:
    if not color:
        return letter
    r, g, b = _rgb(gene_color(letter))
    return f"\x1b[1;97;48;2;{r};{g};{b}m {letter} {_RESET}"


def render_seed_row(row: int, seed: Seed, color: bool = False) -> str:
    """Render a seed as its 1-based number followed by six linked genes."""
    link = "-" if color else " - "
    body = link.join(_circle(gene.name, color) for gene in seed.genes)
    return f"{row + 1:<4}{body}"


def render_seed_list(seeds: Iterable[Seed], color: bool = False) -> str:
    """Render every seed on its own numbered line."""
    return "\n".join(
        render_seed_row(row, seed, color) for row, seed in enumerate(seeds)
    )
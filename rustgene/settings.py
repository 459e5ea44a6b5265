"""Gene entry state: the six-letter input, its preview labels and submission."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .genes import SEED_LENGTH, UNKNOWN_COLOR, GeneType, Seed, gene_color

VALID_GENES = "GYHWX"
_INPUT_PATTERN = re.compile(r"[GYHWXgyhwx]{0,6}")
_LABEL_STYLE = (
    "background-color: {color};"
    "color: white;"
    "border-radius: 25px;"
    "font-weight: bold;"
    "font-size: 20px;"
    "qproperty-alignment: AlignCenter;"
)


class InvalidSeedInputError(ValueError):
    """Raised when the entered text cannot become a seed."""


@dataclass(frozen=True)
class GeneLabel:
    """One of the six round preview labels."""

    text: str
    color: str

    @property
    def style_sheet(self) -> str:
        return _LABEL_STYLE.format(color=self.color)


def labels_for(text: str) -> tuple[GeneLabel, ...]:
    """Preview labels for the entered text; missing positions show ``?``."""
    upper = text.upper()
    return tuple(
        GeneLabel(upper[i], gene_color(upper[i]))
        if i < len(upper)
        else GeneLabel("?", UNKNOWN_COLOR)
        for i in range(SEED_LENGTH)
    )


class GeneInput:
    """The gene entry field: up to six gene letters, always upper case."""

    def __init__(self) -> None:
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the entry; only up to six gene letters are accepted."""
        if not _INPUT_PATTERN.fullmatch(text):
            raise InvalidSeedInputError(
                f"only up to {SEED_LENGTH} of {VALID_GENES} are allowed, got {text!r}"
            )
        self._text = text.upper()

    def press_gene(self, char: str) -> bool:
        """Append a gene letter; ignored once six are entered."""
        gene = GeneType.from_char(char)
        if len(self._text) >= SEED_LENGTH:
            return False
        self._text += gene.name
        return True

    def clear(self) -> None:
        self._text = ""

    @property
    def labels(self) -> tuple[GeneLabel, ...]:
        return labels_for(self._text)

    def submit(self) -> Seed:
        """Turn the six entered letters into a seed."""
        if len(self._text) != SEED_LENGTH:
            raise InvalidSeedInputError(
                f"a seed needs {SEED_LENGTH} genes, got {len(self._text)}"
            )
        return Seed.from_string(self._text)
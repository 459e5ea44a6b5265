"""Interactive command-line front end for entering seeds and breeding them."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, Optional, TextIO

from .benchmark import run_benchmark
from .calculator import format_breeding_result
from .render import render_seed_list
from .seedlist import NotEnoughSeedsError, SeedList
from .settings import GeneInput, InvalidSeedInputError, VALID_GENES

TITLE = "RustGeneCalculator"

HELP = """\
Commands:
  <genes>        add a seed given as six letters of GYHWX, e.g. GGYYHX
  add <genes>    same as above
  list           show all entered seeds
  del <row>      delete the seed at a 1-based row
  clear          delete all seeds
  calc           find the best four-parent crossbreeding
  help           show this text
  quit           leave"""

_QUIT = {"quit", "exit", "q"}


class Session:
    """Holds the entered seeds and answers one command line at a time."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
        color: bool = False,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.rng = rng
        self.color = color
        self.seeds = SeedList()
        self._input = GeneInput()

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def handle(self, line: str) -> bool:
        """Run one command; return False when the session should end."""
        words = line.split()
        if not words:
            return True
        command, args = words[0].lower(), words[1:]

        if command in _QUIT:
            return False
        if command == "help":
            self._say(HELP)
        elif command == "list":
            self._list()
        elif command in ("del", "delete", "rm"):
            self._delete(args)
        elif command == "clear":
            self.seeds.set_seeds([])
            self._say("All seeds removed.")
        elif command == "calc":
            self._calculate()
        elif command == "add":
            self._add("".join(args))
        elif len(words) == 1 and all(ch in VALID_GENES for ch in words[0].upper()):
            self._add(words[0])
        else:
            self._say(f"Unknown command: {line.strip()!r}. Type 'help'.")
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Handle lines until they run out or a quit command is seen."""
        for line in lines:
            if not self.handle(line):
                break

    def _add(self, text: str) -> None:
        self._input.clear()
        try:
            self._input.set_text(text)
            seed = self._input.submit()
        except InvalidSeedInputError as exc:
            self._say(f"Invalid seed: {exc}")
            return
        finally:
            self._input.clear()
        self.seeds.append_seed(seed)
        self._say(f"Added seed {len(self.seeds)}: {seed}")

    def _list(self) -> None:
        if not len(self.seeds):
            self._say("(no seeds)")
            return
        self._say(render_seed_list(self.seeds, self.color))

    def _delete(self, args: list[str]) -> None:
        if len(args) != 1:
            self._say("Usage: del <row>")
            return
        try:
            row = int(args[0])
        except ValueError:
            self._say(f"Not a row number: {args[0]!r}")
            return
        if not self.seeds.remove_seed(row - 1):
            self._say(f"No seed at row {row}.")
            return
        self._say(f"Removed seed {row}.")

    def _calculate(self) -> None:
        try:
            report = self.seeds.calculate_report(self.rng)
        except NotEnoughSeedsError as exc:
            self._say(f"Cannot calculate: {exc}")
            return
        self._say(report.rstrip("\n"))


def _benchmark(count: int, rng: Optional[random.Random], out: TextIO) -> None:
    result = run_benchmark(count, rng)
    print(f"Gene calculation took {result.elapsed_ms:.0f} milliseconds", file=out)
    if result.breeding_seeds is None:
        print("Not enough distinct seeds to breed.", file=out)
        return
    print(format_breeding_result(result.breeding_seeds, result.offspring_seed), file=out)


def main(argv: Optional[list[str]] = None) -> int:
    """Read commands from standard input, or time a random benchmark."""
    parser = argparse.ArgumentParser(prog="rustgene", description=TITLE)
    parser.add_argument("--seed", type=int, help="random seed for tie-breaking")
    parser.add_argument("--color", action="store_true", help="coloured seed lists")
    parser.add_argument(
        "--benchmark",
        type=int,
        metavar="N",
        help="time the search on N random seeds and exit",
    )
    parser.add_argument("seeds", nargs="*", help="seeds to enter before reading commands")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    if args.benchmark is not None:
        _benchmark(args.benchmark, rng, sys.stdout)
        return 0

    session = Session(sys.stdout, rng, args.color)
    for text in args.seeds:
        session.handle(f"add {text}")
    interactive = sys.stdin.isatty()
    if interactive:
        print(f"{TITLE} - type 'help' for commands.")

    def lines() -> Iterable[str]:
        while True:
            if interactive:
                print("> ", end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                return
            yield line

    session.run(lines())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
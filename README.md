# rustgene

rustgene helps you plan crossbreeding for plants in the game Rust. You
give it the seeds you have. It tries every group of four and reports
which four seeds to plant around a centre plant to get the best
offspring genes.

## Genes

Each seed carries exactly six genes. Each gene is one of these letters:

| Letter | Meaning                         | Kind     |
|--------|---------------------------------|----------|
| `G`    | Growth: grows faster            | positive |
| `Y`    | Yield: bigger harvest           | positive |
| `H`    | Hardiness: tolerates conditions | positive |
| `W`    | Water: needs more water         | negative |
| `X`    | Empty: no effect                | negative |

When four parents crossbreed, each of the six slots is decided on its
own. Each parent's gene in that slot casts a vote. `G`, `Y` and `H` count
1.0, and `W` and `X` count 1.2. The heaviest gene wins. A tie is settled
at random.

Offspring are ranked this way:

- `GGGYYY` in any order scores 100. That is the best result, and the
  search stops as soon as it finds one.
- Otherwise the score is `2·G + 3·Y + 1·H − 2·W − 1·X`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
rustgene
```

This starts a session that reads commands from standard input, one per
line. When standard input is a terminal, it shows a `> ` prompt.

| Command       | Effect                                              |
|---------------|-----------------------------------------------------|
| `<genes>`     | add a seed given as six letters of `GYHWX`          |
| `add <genes>` | the same                                            |
| `list`        | show all entered seeds, numbered from 1             |
| `del <row>`   | delete the seed at a 1-based row (`delete` and `rm` also work) |
| `clear`       | delete all seeds                                    |
| `calc`        | find the best four-parent crossbreeding             |
| `help`        | show the command list                               |
| `quit`        | leave (`exit` and `q` also work)                    |

Gene letters are not case sensitive. A seed must have exactly six
letters, or it is rejected. `calc` needs at least four seeds, and at
least four of them must differ.

Options:

- `--seed N` seeds the random generator, so ties are broken the same
  way on every run.
- `--color` prints `list` output with coloured gene circles, using
  terminal colour codes.
- `--benchmark N` generates `N` random seeds, times the search, prints
  the time and the best breeding round, and exits.
- Any positional arguments are added as seeds before commands are read,
  for example `rustgene GGGXXX XXXYYY GGGHHW HHHYYY`.

Example:

```
$ printf 'calc\n' | rustgene --seed 0 GGGXXX XXXYYY GGGHHW HHHYYY
Added seed 1: GGGXXX
Added seed 2: XXXYYY
Added seed 3: GGGHHW
Added seed 4: HHHYYY
Parent 1 genes: G G G X X X 
Parent 2 genes: X X X Y Y Y 
Parent 3 genes: G G G H H W 
Parent 4 genes: H H H Y Y Y 
Best offspring seed genes: G G G H H ? 
```

Here the last slot is a tie between `X` and `W`. The `?` stands for
whichever of the two the random generator picks.

## Library use

```python
import random

from rustgene.genes import Seed
from rustgene.seedlist import SeedList

seeds = SeedList([
    Seed.from_string("GGGXXX"),
    Seed.from_string("XXXYYY"),
    Seed.from_string("GGGHHW"),
    Seed.from_string("HHHYYY"),
])
print(seeds.calculate_report(random.Random(0)))
```

`calculate_report` raises `NotEnoughSeedsError` if there are fewer than
four seeds, or fewer than four distinct ones.

The modules:

- `rustgene.genes`: `GeneType`, `Seed` (`Seed.from_string`, `str(seed)`)
  and `gene_color`, which maps a gene letter to its display colour.
- `rustgene.calculator`: `GeneCalculator`, the search itself.
  - `add_seed` records a seed and ignores duplicates.
  - `calculate` runs the search.
  - `breeding_seeds` gives the best four parents, or `None` if no group
    of four was bred.
  - `offspring_seed` gives the best offspring.
  - The helpers are `calc_quality`, `gene_key` and
    `format_breeding_result`.
- `rustgene.seedlist`: `SeedList`, an editable ordered list of seeds,
  with the breeding report.
- `rustgene.settings`: `GeneInput`, the state of a six-letter gene entry
  field. It also provides `labels_for`, which builds the six preview
  labels with their colours and style sheets.
- `rustgene.render`: `circle_layout` gives the pixel geometry of a seed
  row drawn as six linked circles. `render_seed_row` and
  `render_seed_list` render seeds as text.
- `rustgene.benchmark`: `run_benchmark` times a search over random seeds
  and returns a `BenchmarkResult`.

## What it does not do

rustgene has no graphical window. It works through the command line and
the library only. The entry state, the preview labels and the row
geometry in `rustgene.settings` and `rustgene.render` are provided for
building a display. The package does not draw one itself. Seeds are not
saved between sessions.
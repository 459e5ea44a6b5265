import pytest

from rustgene.genes import GeneType, Seed, gene_color


def test_from_char_accepts_both_cases():
    assert GeneType.from_char("g") is GeneType.G
    assert GeneType.from_char("W") is GeneType.W


@pytest.mark.parametrize("bad", ["Z", "", "GG", "1"])
def test_from_char_rejects_invalid(bad):
    with pytest.raises(ValueError):
        GeneType.from_char(bad)


@pytest.mark.parametrize(
    "char, expected",
    [("G", True), ("Y", True), ("H", True), ("W", False), ("X", False)],
)
def test_is_positive_splits_genes(char, expected):
    assert GeneType.from_char(char).is_positive() is expected


def test_default_seed_is_all_empty():
    assert Seed().genes == (GeneType.X,) * 6


def test_from_string_round_trip_uppercases():
    seed = Seed.from_string("gyhwxg")
    assert str(seed) == "GYHWXG"
    assert Seed.from_string(str(seed)) == seed


@pytest.mark.parametrize("bad", ["GGG", "GGGYYYY", "GGGYYZ"])
def test_from_string_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        Seed.from_string(bad)


def test_seed_rejects_wrong_gene_count():
    with pytest.raises(ValueError):
        Seed((GeneType.G,) * 5)


def test_equal_seeds_deduplicate_in_set():
    seeds = {Seed.from_string("GGGYYY"), Seed.from_string("gggyyy"), Seed()}
    assert len(seeds) == 2


def test_seed_accepts_integer_genes():
    assert Seed((0, 1, 2, 3, 4, 0)) == Seed.from_string("GYHWXG")


def test_gene_color():
    assert gene_color("G") == "#5e861e"
    assert gene_color("H") == gene_color("Y") == gene_color("G")
    assert gene_color("X") == "#9b4433"
    assert gene_color("W") == gene_color("X")
    assert gene_color("?") == "#808080"
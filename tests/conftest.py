import random

import pytest

from segment_decoder.truth_tables import SEGMENT_NAMES
from segment_decoder.verify import apply_wiring

EXAMPLE_LINE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
    "cdfeb fcadb cdfeb cdbaf"
)

# Canonical wiring, digits 0-9 in order
IDENTITY_DICTIONARY = "abcdef bc abdeg abcdg bcfg acdfg acdefg abc abcdefg abcdfg"

SAMPLE_LINES = [
    "be cfbegad cbdgef fgaecd cgeb fdcge agebfd fecdb fabcd edb | fdgacbe cefdb cefbgd gcbe",
    "edbfga begcd cbg gc gcadebf fbgde acbgfd abcde gfcbed gfec | fcgedb cgb dgebacf gc",
    "fgaebd cg bdaec gdafb agbcfd gdcbef bgcad gfac gcb cdgabef | cg cg fdcagb cbg",
    "fbegcd cbd adcefb dageb afcb bc aefdc ecdab fgdeca fcdbega | efabcd cedba gadfec cb",
    "aecbfdg fbg gf bafeg dbefa fcge gcbea fcaegb dgceab fcbdga | gecf egdcabf bgf bfgea",
    "fgeab ca afcebg bdacfeg cfaedg gcfdb baec bfadeg bafgc acf | gebdcfa ecba ca fadegcb",
    "dbcfg fgd bdegcaf fgec aegbdf ecdfab fbedc dacgb gdcebf gf | cefg dcbef fcge gbcadfe",
    "bdfegc cbegaf gecbf dfcage bdacg ed bedf ced adcbefg gebcd | ed bcgafe cdgba cbgef",
    "egadfb cdbfeg cegd fecab cgb gbdefca cg fgcdab egfdb bfceg | gbdfcae bgc cg cgb",
    "gcafb gcf dcaebfg ecagb gf abcdeg gaef cafbge fdbac fegbdc | fgae cfgab fg bagce",
]

SAMPLE_VALUES = [8394, 9781, 1197, 9361, 4873, 8418, 4548, 1625, 8717, 4315]
SAMPLE_UNIQUE_COUNT = 26
SAMPLE_TOTAL = 61229


def random_wiring(rng: random.Random) -> dict[str, str]:
    wires = list(SEGMENT_NAMES)
    rng.shuffle(wires)
    return dict(zip(SEGMENT_NAMES, wires))


def scrambled_line(wiring: dict[str, str], digits, rng: random.Random) -> str:
    """Build an input line for a display wired this way showing ``digits``."""
    patterns = apply_wiring(wiring)
    shuffled = list(patterns)
    rng.shuffle(shuffled)

    def token(p):
        letters = list(p.segments)
        rng.shuffle(letters)
        return "".join(letters)

    dictionary = " ".join(token(p) for p in shuffled)
    outputs = " ".join(token(patterns[d]) for d in digits)
    return f"{dictionary} | {outputs}"


@pytest.fixture
def rng():
    return random.Random(8)


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n")
    return path

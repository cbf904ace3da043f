from segment_decoder.patterns import Pattern, normalize_token
from segment_decoder.resolver import DigitMapping, resolve_dictionary
from segment_decoder.truth_tables import SEGMENT_NAMES
from segment_decoder.verify import (
    apply_wiring,
    find_wiring,
    format_wiring,
    verify_mapping,
    wiring_cnf,
)

from conftest import random_wiring


def test_identity_wiring():
    mapping = DigitMapping(tuple(apply_wiring({s: s for s in SEGMENT_NAMES})))
    assert find_wiring(mapping) == {s: s for s in SEGMENT_NAMES}


def test_recovers_random_wiring(rng):
    for _ in range(20):
        wiring = random_wiring(rng)
        patterns = apply_wiring(wiring)
        rng.shuffle(patterns)

        mapping = resolve_dictionary(patterns)
        assert find_wiring(mapping) == wiring
        assert verify_mapping(mapping) == (True, [])


def test_example_wiring():
    mapping = resolve_dictionary(
        normalize_token(t)
        for t in "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab".split()
    )
    wiring = find_wiring(mapping)
    assert format_wiring(wiring) == "a=d b=a c=b d=c e=g f=e g=f"


def test_rejects_swapped_digits(rng):
    patterns = list(resolve_dictionary(apply_wiring(random_wiring(rng))).patterns)
    patterns[2], patterns[5] = patterns[5], patterns[2]
    mapping = DigitMapping(tuple(patterns))

    ok, errors = verify_mapping(mapping)
    assert not ok
    assert errors == ["no wire permutation produces this mapping"]
    assert find_wiring(mapping) is None


def test_reports_length_mismatch():
    patterns = apply_wiring({s: s for s in SEGMENT_NAMES})
    patterns[1], patterns[7] = patterns[7], patterns[1]

    ok, errors = verify_mapping(DigitMapping(tuple(patterns)))
    assert not ok
    assert len(errors) == 2
    assert errors[0].startswith("digit 1: pattern 'abc' lights 3 segments")


def test_cnf_size():
    mapping = DigitMapping(tuple(apply_wiring({s: s for s in SEGMENT_NAMES})))
    cnf = wiring_cnf(mapping)
    assert cnf.nv == 49
    # 14 at-least-one, 14 * 21 at-most-one, then per digit one clause per lit
    # segment plus one unit clause per (dark segment, pattern wire) pair
    per_digit = sum(len(p) + (7 - len(p)) * len(p) for p in mapping.patterns)
    assert len(cnf.clauses) == 14 + 14 * 21 + per_digit


def test_apply_wiring_lengths():
    patterns = apply_wiring({s: s for s in SEGMENT_NAMES})
    assert [len(p) for p in patterns] == [6, 2, 5, 5, 4, 5, 6, 3, 7, 6]
    assert all(isinstance(p, Pattern) for p in patterns)

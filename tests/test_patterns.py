import pytest

from segment_decoder.errors import InvalidToken, MalformedInput
from segment_decoder.patterns import Pattern, normalize_token


def test_order_independent():
    assert normalize_token("acedgfb") == normalize_token("cagedbf")
    assert hash(normalize_token("ab")) == hash(normalize_token("ba"))


def test_segments_sorted():
    p = normalize_token("gcdfa")
    assert p.segments == "acdfg"
    assert str(p) == "acdfg"
    assert len(p) == 5


def test_mask_bits():
    assert normalize_token("ab").mask == 0b11
    assert normalize_token("ge").mask == 0b1010000
    assert normalize_token("abcdefg").mask == 0b1111111


def test_shared_and_contains():
    four = normalize_token("eafb")
    five = normalize_token("cdfbe")
    seven = normalize_token("dab")

    assert five.shared(four) == 3
    assert five.shared(seven) == 2
    assert not five.contains(seven)
    assert normalize_token("acedgfb").contains(four)
    assert four.contains(four)


@pytest.mark.parametrize("token, reason", [
    ("a", "length"),
    ("", "length"),
    ("abcdefga", "length"),
    ("aab", "repeats"),
    ("ab1", "unknown"),
    ("abh", "unknown"),
    ("aB", "unknown"),
])
def test_invalid_tokens(token, reason):
    with pytest.raises(InvalidToken) as excinfo:
        normalize_token(token)
    assert reason in str(excinfo.value)
    assert excinfo.value.token == token
    assert isinstance(excinfo.value, MalformedInput)


def test_pattern_is_immutable():
    p = Pattern(0b11)
    with pytest.raises(AttributeError):
        p.mask = 0b111

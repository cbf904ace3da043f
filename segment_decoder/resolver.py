"""
Digit resolution for one scrambled display.

Resolves the ten dictionary patterns to digits from pattern lengths and
shared-segment counts alone, with no search over wire permutations:

    1, 4, 7, 8: unique lengths 2, 4, 3, 7
    2, 3, 5:    length 5; 2 shares two segments with 4, 3 and 5 share three,
                and of those only 3 contains all of 7
    0, 6, 9:    length 6; only 9 contains all of 4, then only 0 contains 7
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator

from .errors import AmbiguousPattern, MalformedDictionary, UnknownPattern
from .patterns import Pattern
from .truth_tables import LENGTH_BUCKETS, UNIQUE_LENGTHS


@dataclass(frozen=True)
class DigitMapping:
    """Bijection between digits 0-9 and the patterns of one display."""

    patterns: tuple[Pattern, ...]  # indexed by digit

    def pattern_for(self, digit: int) -> Pattern:
        return self.patterns[digit]

    def digit_of(self, pattern: Pattern) -> int:
        """Look up the digit a pattern displays."""
        try:
            return self.patterns.index(pattern)
        except ValueError:
            raise UnknownPattern(
                f"pattern {pattern.segments!r} is not in the dictionary"
            ) from None

    def as_dict(self) -> dict[int, str]:
        return {digit: p.segments for digit, p in self}

    def __iter__(self) -> Iterator[tuple[int, Pattern]]:
        return iter(enumerate(self.patterns))


def _check_buckets(patterns: tuple[Pattern, ...]):
    unique = set(patterns)
    if len(patterns) != 10 or len(unique) != len(patterns):
        raise MalformedDictionary(
            f"expected 10 distinct patterns, got {len(patterns)} "
            f"({len(unique)} distinct)"
        )

    lengths = Counter(len(p) for p in patterns)
    if lengths != Counter(LENGTH_BUCKETS):
        found = ", ".join(f"{n}:{lengths[n]}" for n in sorted(lengths))
        raise MalformedDictionary(
            f"expected 10 distinct patterns with length buckets "
            f"2:1, 3:1, 4:1, 5:3, 6:3, 7:1; got {found}"
        )


def _resolve_five(pattern: Pattern, four: Pattern, seven: Pattern) -> int:
    shared4 = pattern.shared(four)
    if shared4 == 2:
        return 2
    if shared4 == 3:
        return 3 if pattern.contains(seven) else 5
    raise AmbiguousPattern(
        f"length-5 pattern {pattern.segments!r} shares {shared4} segments "
        f"with {four.segments!r}"
    )


def _resolve_six(pattern: Pattern, four: Pattern, seven: Pattern) -> int:
    if pattern.contains(four):
        return 9
    if pattern.contains(seven):
        return 0
    return 6


def resolve_dictionary(patterns: Iterable[Pattern]) -> DigitMapping:
    """
    Resolve a display's dictionary into a digit mapping.

    Args:
        patterns: The ten dictionary patterns, in any order

    Returns:
        DigitMapping covering every digit exactly once

    Raises:
        MalformedDictionary: if there are not exactly ten distinct patterns,
            or the length buckets are wrong
        AmbiguousPattern: if a pattern matches no signature, or two
            patterns claim the same digit
    """
    patterns = tuple(patterns)
    _check_buckets(patterns)

    slots: list = [None] * 10

    # Pass 1: anchors
    for p in patterns:
        digit = UNIQUE_LENGTHS.get(len(p))
        if digit is not None:
            slots[digit] = p

    four, seven = slots[4], slots[7]

    # Pass 2: length-5 and length-6 groups
    for p in sorted(patterns, key=lambda p: p.mask):
        if len(p) == 5:
            digit = _resolve_five(p, four, seven)
        elif len(p) == 6:
            digit = _resolve_six(p, four, seven)
        else:
            continue

        if slots[digit] is not None:
            raise AmbiguousPattern(
                f"patterns {slots[digit].segments!r} and {p.segments!r} "
                f"both resolve to {digit}"
            )
        slots[digit] = p

    return DigitMapping(tuple(slots))

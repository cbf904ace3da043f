"""
Order-independent signal patterns.

A pattern is represented by a 7-bit mask over the segment labels a-g:
- Bit 0 = a
- Bit 1 = b
- ...
- Bit 6 = g
"""

from dataclasses import dataclass

from .errors import InvalidToken
from .truth_tables import SEGMENT_NAMES

MIN_SEGMENTS = 2
MAX_SEGMENTS = 7


@dataclass(frozen=True)
class Pattern:
    """The set of lit segment wires for one glyph."""

    mask: int

    @property
    def segments(self) -> str:
        """Sorted segment labels, e.g. ``"abdeg"``."""
        return "".join(
            name for i, name in enumerate(SEGMENT_NAMES) if self.mask & (1 << i)
        )

    def shared(self, other: "Pattern") -> int:
        """Count the segments both patterns light."""
        return bin(self.mask & other.mask).count('1')

    def contains(self, other: "Pattern") -> bool:
        """Check if every segment of ``other`` is lit in this pattern."""
        return (self.mask & other.mask) == other.mask

    def __len__(self):
        return bin(self.mask).count('1')

    def __str__(self):
        return self.segments

    def __repr__(self):
        return f"Pattern({self.segments!r})"


def normalize_token(token: str) -> Pattern:
    """
    Convert a raw token into its canonical pattern.

    Args:
        token: 2-7 distinct segment labels in any order

    Returns:
        Pattern equal to that of any other ordering of the same labels

    Raises:
        InvalidToken: on bad length, unknown labels or repeated labels
    """
    if not MIN_SEGMENTS <= len(token) <= MAX_SEGMENTS:
        raise InvalidToken(
            token, f"length {len(token)} outside {MIN_SEGMENTS}-{MAX_SEGMENTS}"
        )

    mask = 0
    for ch in token:
        if ch not in SEGMENT_NAMES:
            raise InvalidToken(token, f"unknown segment label {ch!r}")
        bit = 1 << SEGMENT_NAMES.index(ch)
        if mask & bit:
            raise InvalidToken(token, f"segment label {ch!r} repeats")
        mask |= bit

    return Pattern(mask)

"""
Line parsing and output decoding for scrambled displays.

Each input line holds one display:

    <dictionary tokens> | <four output tokens>
"""

from dataclasses import dataclass
from typing import Sequence

from .errors import MalformedLine
from .patterns import Pattern, normalize_token
from .resolver import DigitMapping, resolve_dictionary

OUTPUT_DIGITS = 4


@dataclass(frozen=True)
class DisplayEntry:
    """One parsed display: its dictionary and its four output patterns."""

    dictionary: tuple[Pattern, ...]
    outputs: tuple[Pattern, ...]
    line_number: int = 0


def parse_line(line: str, line_number: int = 0) -> DisplayEntry:
    """
    Parse one input line into a display entry.

    Raises:
        MalformedLine: if the line does not have a dictionary, a single
            ``|`` separator and exactly four outputs
        InvalidToken: if any token fails to normalize
    """
    halves = line.split("|")
    if len(halves) != 2:
        raise MalformedLine(
            f"expected one '|' separator, found {len(halves) - 1}"
        )

    dict_tokens = halves[0].split()
    output_tokens = halves[1].split()

    if not dict_tokens:
        raise MalformedLine("dictionary is empty")
    if len(output_tokens) != OUTPUT_DIGITS:
        raise MalformedLine(
            f"expected {OUTPUT_DIGITS} output tokens, found {len(output_tokens)}"
        )

    return DisplayEntry(
        dictionary=tuple(normalize_token(t) for t in dict_tokens),
        outputs=tuple(normalize_token(t) for t in output_tokens),
        line_number=line_number,
    )


def decode_output(mapping: DigitMapping, outputs: Sequence[Pattern]) -> int:
    """Combine the digits of the output patterns into one integer, MSB first."""
    if len(outputs) != OUTPUT_DIGITS:
        raise ValueError(
            f"expected {OUTPUT_DIGITS} output patterns, got {len(outputs)}"
        )

    value = 0
    for pattern in outputs:
        value = value * 10 + mapping.digit_of(pattern)
    return value


def decode_entry(entry: DisplayEntry) -> int:
    """Resolve an entry's dictionary and decode its output value."""
    mapping = resolve_dictionary(entry.dictionary)
    return decode_output(mapping, entry.outputs)

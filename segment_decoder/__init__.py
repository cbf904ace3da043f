"""Scrambled 7-segment display decoding from pattern lengths and shared segments."""

from .errors import (
    DecodeError,
    MalformedInput,
    InvalidToken,
    MalformedLine,
    MalformedDictionary,
    AmbiguousPattern,
    UnknownPattern,
    WiringMismatch,
)
from .truth_tables import SEGMENT_NAMES, DIGIT_SEGMENTS, UNIQUE_LENGTHS
from .patterns import Pattern, normalize_token
from .resolver import DigitMapping, resolve_dictionary
from .decoder import DisplayEntry, parse_line, decode_output, decode_entry
from .aggregate import (
    SessionSummary,
    SkippedEntry,
    count_unique,
    merge_summaries,
    process_lines,
    process_lines_parallel,
)
from .verify import find_wiring, apply_wiring, verify_mapping

__all__ = [
    "DecodeError",
    "MalformedInput",
    "InvalidToken",
    "MalformedLine",
    "MalformedDictionary",
    "AmbiguousPattern",
    "UnknownPattern",
    "WiringMismatch",
    "SEGMENT_NAMES",
    "DIGIT_SEGMENTS",
    "UNIQUE_LENGTHS",
    "Pattern",
    "normalize_token",
    "DigitMapping",
    "resolve_dictionary",
    "DisplayEntry",
    "parse_line",
    "decode_output",
    "decode_entry",
    "SessionSummary",
    "SkippedEntry",
    "count_unique",
    "merge_summaries",
    "process_lines",
    "process_lines_parallel",
    "find_wiring",
    "apply_wiring",
    "verify_mapping",
]
__version__ = "0.1.0"

"""
Session aggregation over many display lines.

Each line is decoded in isolation, so lines can be split into chunks,
processed in separate worker processes and the partial summaries added up.
"""

import logging
import multiprocessing as mp
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .decoder import decode_output, parse_line
from .errors import DecodeError, UnknownPattern, WiringMismatch
from .patterns import Pattern
from .resolver import resolve_dictionary
from .truth_tables import UNIQUE_LENGTHS
from .verify import verify_mapping

log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 200

# Skip kinds that point at a decoding fault rather than bad input
FAULT_KINDS = {UnknownPattern.kind, WiringMismatch.kind}


@dataclass(frozen=True)
class SkippedEntry:
    """A line left out of ``total_value``, with the reason."""

    line_number: int
    kind: str
    message: str

    @property
    def is_fault(self) -> bool:
        """True for consistency faults rather than malformed input."""
        return self.kind in FAULT_KINDS


@dataclass
class SessionSummary:
    """Accumulated results for a batch of display lines."""

    unique_count: int = 0
    total_value: int = 0
    entries: int = 0   # lines parsed into an entry
    decoded: int = 0   # entries contributing to total_value
    skipped: list[SkippedEntry] = field(default_factory=list)

    @property
    def faults(self) -> list[SkippedEntry]:
        return [s for s in self.skipped if s.is_fault]

    def __add__(self, other: "SessionSummary") -> "SessionSummary":
        if not isinstance(other, SessionSummary):
            return NotImplemented
        return SessionSummary(
            unique_count=self.unique_count + other.unique_count,
            total_value=self.total_value + other.total_value,
            entries=self.entries + other.entries,
            decoded=self.decoded + other.decoded,
            skipped=_sorted_skips(self.skipped + other.skipped),
        )

    def to_dict(self) -> dict:
        return {
            "unique_count": self.unique_count,
            "total_value": self.total_value,
            "entries": self.entries,
            "decoded": self.decoded,
            "skipped": [
                {"line": s.line_number, "kind": s.kind, "message": s.message}
                for s in self.skipped
            ],
        }


def _sorted_skips(skipped: list[SkippedEntry]) -> list[SkippedEntry]:
    return sorted(skipped, key=lambda s: (s.line_number, s.kind, s.message))


def merge_summaries(summaries: Iterable[SessionSummary]) -> SessionSummary:
    """Add up partial summaries in any order, sorting skipped entries once."""
    total = SessionSummary()
    for summary in summaries:
        total.unique_count += summary.unique_count
        total.total_value += summary.total_value
        total.entries += summary.entries
        total.decoded += summary.decoded
        total.skipped.extend(summary.skipped)
    total.skipped = _sorted_skips(total.skipped)
    return total


def count_unique(outputs: Sequence[Pattern]) -> int:
    """Count output patterns whose length alone identifies the digit."""
    return sum(1 for p in outputs if len(p) in UNIQUE_LENGTHS)


def _skip(summary: SessionSummary, line_number: int, error: DecodeError):
    log.warning("Skipping line %d (%s): %s", line_number, error.kind, error)
    summary.skipped.append(SkippedEntry(line_number, error.kind, str(error)))


def process_numbered(
    numbered_lines: Iterable[tuple[int, str]],
    verify: bool = False,
) -> SessionSummary:
    """Process ``(line_number, line)`` pairs into one summary."""
    summary = SessionSummary()

    for line_number, line in numbered_lines:
        if not line.strip():
            continue

        try:
            entry = parse_line(line, line_number)
        except DecodeError as e:
            _skip(summary, line_number, e)
            continue

        summary.entries += 1
        # Counted by length alone, before resolution can fail
        summary.unique_count += count_unique(entry.outputs)

        try:
            mapping = resolve_dictionary(entry.dictionary)
            if verify:
                ok, errors = verify_mapping(mapping)
                if not ok:
                    raise WiringMismatch("; ".join(errors))
            value = decode_output(mapping, entry.outputs)
        except DecodeError as e:
            _skip(summary, line_number, e)
            continue

        summary.decoded += 1
        summary.total_value += value

    return summary


def process_lines(
    lines: Iterable[str],
    start: int = 1,
    verify: bool = False,
) -> SessionSummary:
    """Process display lines in a single pass, numbering them from ``start``."""
    return process_numbered(enumerate(lines, start), verify=verify)


def _process_chunk(args):
    """Process one chunk of numbered lines. Run in a separate process."""
    chunk, verify = args
    return process_numbered(chunk, verify=verify)


def process_lines_parallel(
    lines: Iterable[str],
    jobs: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    verify: bool = False,
    start: int = 1,
) -> SessionSummary:
    """
    Process display lines across worker processes.

    Args:
        lines: Input lines
        jobs: Worker process count (default: CPU count); 1 or less runs inline
        chunk_size: Lines handed to a worker at a time
        verify: Check each mapping against a real wiring
        start: Number of the first line

    Returns:
        The same summary process_lines would return
    """
    if jobs is None:
        jobs = mp.cpu_count()
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    numbered = list(enumerate(lines, start))
    if jobs <= 1 or len(numbered) <= chunk_size:
        return process_numbered(numbered, verify=verify)

    chunks = [
        numbered[i:i + chunk_size] for i in range(0, len(numbered), chunk_size)
    ]
    log.debug("Processing %d lines in %d chunks on %d workers",
              len(numbered), len(chunks), jobs)

    partials = []
    with ProcessPoolExecutor(max_workers=jobs) as executor:
        futures = [executor.submit(_process_chunk, (c, verify)) for c in chunks]
        for future in as_completed(futures):
            partial = future.result()
            log.debug("Chunk done: %d entries, %d decoded",
                      partial.entries, partial.decoded)
            partials.append(partial)

    return merge_summaries(partials)

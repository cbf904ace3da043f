"""
Verification of resolved digit mappings against real wirings.

A mapping is only correct if some permutation of the seven wires turns the
canonical digit table into exactly the display's patterns. This module
encodes that question as SAT and, when satisfiable, recovers the wiring.
"""

from typing import Optional
from pysat.formula import CNF
from pysat.solvers import Solver

from .patterns import Pattern
from .resolver import DigitMapping
from .truth_tables import DIGIT_SEGMENTS, SEGMENT_NAMES

N_SEGMENTS = len(SEGMENT_NAMES)


def wire_var(segment: int, wire: int) -> int:
    """SAT variable for 'canonical segment is driven by scrambled wire'."""
    return 1 + segment * N_SEGMENTS + wire


def wiring_cnf(mapping: DigitMapping) -> CNF:
    """
    Encode 'mapping comes from a wire permutation' as CNF.

    Constraints:
    1. Each canonical segment uses exactly one wire
    2. Each wire drives exactly one canonical segment
    3. For every digit, its lit segments land inside its pattern and its
       dark segments land outside it
    """
    cnf = CNF()

    for s in range(N_SEGMENTS):
        row = [wire_var(s, w) for w in range(N_SEGMENTS)]
        cnf.append(row)
        for i, v1 in enumerate(row):
            for v2 in row[i + 1:]:
                cnf.append([-v1, -v2])

    for w in range(N_SEGMENTS):
        col = [wire_var(s, w) for s in range(N_SEGMENTS)]
        cnf.append(col)
        for i, v1 in enumerate(col):
            for v2 in col[i + 1:]:
                cnf.append([-v1, -v2])

    for digit, pattern in mapping:
        wires = [w for w in range(N_SEGMENTS) if pattern.mask & (1 << w)]
        for s, name in enumerate(SEGMENT_NAMES):
            if name in DIGIT_SEGMENTS[digit]:
                cnf.append([wire_var(s, w) for w in wires])
            else:
                for w in wires:
                    cnf.append([-wire_var(s, w)])

    return cnf


def find_wiring(mapping: DigitMapping) -> Optional[dict[str, str]]:
    """
    Recover the wiring behind a mapping.

    Returns:
        Dict of canonical segment -> scrambled wire label, or None if no
        permutation of the wires produces the mapping
    """
    cnf = wiring_cnf(mapping)

    with Solver(name='g3', bootstrap_with=cnf) as sat_solver:
        if not sat_solver.solve():
            return None
        model = set(sat_solver.get_model())

    wiring = {}
    for s, name in enumerate(SEGMENT_NAMES):
        for w in range(N_SEGMENTS):
            if wire_var(s, w) in model:
                wiring[name] = SEGMENT_NAMES[w]
                break
    return wiring


def apply_wiring(wiring: dict[str, str]) -> list[Pattern]:
    """Build the dictionary a display wired this way shows, indexed by digit."""
    patterns = []
    for lit in DIGIT_SEGMENTS:
        mask = 0
        for name in lit:
            mask |= 1 << SEGMENT_NAMES.index(wiring[name])
        patterns.append(Pattern(mask))
    return patterns


def verify_mapping(mapping: DigitMapping) -> tuple[bool, list[str]]:
    """
    Verify that a mapping matches some permutation of the wires.

    Args:
        mapping: The resolved mapping to verify

    Returns:
        Tuple of (correct, list of error messages)
    """
    errors = []

    for digit, pattern in mapping:
        expected = len(DIGIT_SEGMENTS[digit])
        if len(pattern) != expected:
            errors.append(
                f"digit {digit}: pattern {pattern.segments!r} lights "
                f"{len(pattern)} segments, expected {expected}"
            )

    if not errors and find_wiring(mapping) is None:
        errors.append("no wire permutation produces this mapping")

    return len(errors) == 0, errors


def format_wiring(wiring: dict[str, str]) -> str:
    """Format a wiring as ``a=d b=e ...`` (canonical segment = wire)."""
    return " ".join(f"{name}={wiring[name]}" for name in SEGMENT_NAMES)

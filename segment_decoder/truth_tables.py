"""
Canonical wiring of a 7-segment display.

7-segment display layout:
     aaa
    f   b
    f   b
     ggg
    e   c
    e   c
     ddd

A scrambled display lights the same number of segments per digit, only on
different wires, so the per-digit segment counts below hold for every display.
"""

SEGMENT_NAMES = ['a', 'b', 'c', 'd', 'e', 'f', 'g']

# Digits 0-9 for which each segment is ON
SEGMENT_MINTERMS = {
    'a': [0, 2, 3, 5, 6, 7, 8, 9],
    'b': [0, 1, 2, 3, 4, 7, 8, 9],
    'c': [0, 1, 3, 4, 5, 6, 7, 8, 9],
    'd': [0, 2, 3, 5, 6, 8, 9],
    'e': [0, 2, 6, 8],
    'f': [0, 4, 5, 6, 8, 9],
    'g': [2, 3, 4, 5, 6, 8, 9],
}

# Lit segments for digits 0-9 on a correctly wired display, e.g. 1 -> "bc"
DIGIT_SEGMENTS = tuple(
    "".join(s for s in SEGMENT_NAMES if digit in SEGMENT_MINTERMS[s])
    for digit in range(10)
)

# Segment counts that identify a digit on their own
UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}

# How many dictionary patterns of each length a display must have
LENGTH_BUCKETS = {2: 1, 3: 1, 4: 1, 5: 3, 6: 3, 7: 1}


def print_truth_table():
    """Print which segments each digit lights, with its segment count."""
    print("7-Segment Digit Table")
    print("=" * 32)
    print(f"{'Digit':>5} | ", end="")
    print(" ".join(SEGMENT_NAMES), end="")
    print(" | Len")
    print("-" * 32)

    for digit, lit in enumerate(DIGIT_SEGMENTS):
        segments = " ".join("1" if s in lit else "0" for s in SEGMENT_NAMES)
        marker = "*" if len(lit) in UNIQUE_LENGTHS else " "
        print(f"{digit:>5} | {segments} | {len(lit):>2}{marker}")

    print("-" * 32)
    print("* unique segment count")


if __name__ == "__main__":
    print_truth_table()

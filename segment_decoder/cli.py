"""Command-line interface for decoding scrambled 7-segment displays."""

import argparse
import json
import logging
import sys

from .aggregate import DEFAULT_CHUNK_SIZE, process_lines_parallel
from .decoder import decode_output, parse_line
from .errors import DecodeError
from .resolver import resolve_dictionary
from .truth_tables import print_truth_table
from .verify import find_wiring, format_wiring


def read_lines(path: str) -> list[str]:
    """Read input lines from a file, or stdin for ``-``."""
    if path == "-":
        return sys.stdin.read().splitlines()
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


def collect_wirings(lines: list[str]) -> list[dict]:
    """Decoded value and recovered wiring of every entry that decodes."""
    wirings = []
    for line_number, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            entry = parse_line(line, line_number)
            mapping = resolve_dictionary(entry.dictionary)
            value = decode_output(mapping, entry.outputs)
        except DecodeError:
            # Already reported through the summary's skipped list
            continue
        wirings.append({
            "line": line_number,
            "value": value,
            "wiring": find_wiring(mapping),
        })
    return wirings


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Decode scrambled 7-segment display readings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  segment-decode notes.txt              Decode every display in notes.txt
  segment-decode - < notes.txt          Read displays from stdin
  segment-decode -j 4 notes.txt         Decode on 4 worker processes
  segment-decode --verify notes.txt     Check every mapping against a wiring
  segment-decode --format json notes.txt
  segment-decode --truth-table          Show the canonical digit table
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Input file, one display per line (default: stdin)",
    )
    parser.add_argument(
        "--jobs", "-j",
        type=int,
        default=1,
        help="Worker processes (default: 1)",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Lines per worker chunk (default: {DEFAULT_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check each resolved mapping against a real wire permutation",
    )
    parser.add_argument(
        "--show-wiring",
        action="store_true",
        help="Print the recovered wiring of every decoded display",
    )
    parser.add_argument(
        "--truth-table",
        action="store_true",
        help="Print the canonical digit to segment table and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.truth_table:
        print_truth_table()
        return 0

    try:
        lines = read_lines(args.input)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        summary = process_lines_parallel(
            lines,
            jobs=args.jobs,
            chunk_size=args.chunk_size,
            verify=args.verify,
        )

        if args.format == "json":
            data = summary.to_dict()
            if args.show_wiring:
                data["wirings"] = collect_wirings(lines)
            print(json.dumps(data, indent=2))
        else:
            print(f"(Part 1) Amount of digits 1, 4, 7, 8 appearing: {summary.unique_count}")
            print(f"(Part 2) Total of all outputs: {summary.total_value}")

            if args.show_wiring:
                print()
                print("Wirings:")
                for item in collect_wirings(lines):
                    wiring = item["wiring"]
                    wiring_str = format_wiring(wiring) if wiring else "(no wiring)"
                    print(f"  line {item['line']:>4}: {item['value']:04d}  {wiring_str}")

            for skipped in summary.skipped:
                print(
                    f"skipped line {skipped.line_number}: "
                    f"{skipped.kind}: {skipped.message}",
                    file=sys.stderr,
                )

        return 1 if summary.faults else 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

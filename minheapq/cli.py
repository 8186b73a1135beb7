"""Line-oriented command interface to an integer min-heap."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator, Sequence

from minheapq.heap import IntMinHeap

DEFAULT_CAPACITY = 2_400_000

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_command(line: str) -> int:
    """Read the leading integer of ``line``, ignoring anything after it."""
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(f"not an integer: {line!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {line!r}")
    return value


def format_sorted(values: Iterable[int]) -> str:
    """Render a sorted sequence as ``sorted array: [a, b, ...]``."""
    return "sorted array: [" + ", ".join(str(v) for v in values) + "]"


def process_line(heap: IntMinHeap, line: str) -> str | None:
    """Apply one command line to ``heap`` and return the text to print, if any.

    0 shows the heap, -1 extracts the minimum, -2 heap-sorts, a positive
    number is inserted; other negative numbers are ignored.
    """
    command = _parse_command(line)
    if command == 0:
        return str(heap)
    if command == -1:
        return f"extract min: {heap.extract_min()}"
    if command == -2:
        return format_sorted(heap.heapsort())
    if command > 0 and heap.insert(command):
        return f"insert: {command}"
    return None


def run(lines: Iterable[str], heap: IntMinHeap | None = None) -> Iterator[str]:
    """Process ``lines`` in order, yielding each line of output."""
    if heap is None:
        heap = IntMinHeap(DEFAULT_CAPACITY)
    for line in lines:
        output = process_line(heap, line)
        if output is not None:
            yield output


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minheapq",
        description="Read heap commands, one integer per line, from standard input.",
    )
    parser.parse_args(argv)
    try:
        for output in run(sys.stdin):
            print(output)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
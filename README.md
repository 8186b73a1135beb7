# minheapq

A fixed-capacity min-heap of integers, with a small command that reads numbers
from standard input, one per line, and treats each one as an operation on a
shared heap.

## Installation

```
pip install .
```

## Library use

```python
from minheapq.heap import IntMinHeap

heap = IntMinHeap(10)
for key in (5, 3, 8, 1):
    heap.insert(key)          # returns False once the heap is full

print(heap)                   # heap size 4: 1, 3, 8, 5
print(heap.minimum())         # 1
print(heap.heapsort())        # [8, 5, 3, 1]; the heap is left unchanged
print(heap.extract_min())     # 1
print(len(heap), heap.is_empty(), heap.is_full())   # 3 False False
```

- `IntMinHeap(capacity)` raises `ValueError` for a negative capacity.
- `insert(key)` returns `False` and leaves the heap alone when it is full.
- `minimum()` and `extract_min()` return `0` when the heap is empty.
- `heapsort()` returns a new list of the items, largest first, obtained by
  repeatedly moving the root to the end; the heap itself is not changed.
- `decrease_key(index, key)` lowers the item at `index` to `key` and restores
  the heap order. If the index is out of range, or `key` is not smaller than
  the current item, it does nothing.
- `str(heap)` gives `heap size N: a, b, ...` in the heap's internal order, or
  `heap size 0:` when empty.

The module `minheapq.cli` also offers `process_line(heap, line)`, which applies
one command line and returns the text to print (or `None`), `run(lines, heap=None)`,
which yields the output lines for a sequence of command lines, and
`format_sorted(values)`.

## Command-line use

```
minheapq < commands.txt
```

or, equivalently, `python -m minheapq.cli < commands.txt`.

Each input line starts with one integer; anything after it on the line is
ignored.

| input          | action                                                    |
|----------------|-----------------------------------------------------------|
| positive `n`   | insert `n` and print `insert: n`; prints nothing if full  |
| `0`            | print the heap, e.g. `heap size 2: 1, 4`                  |
| `-1`           | remove the minimum and print `extract min: n`             |
| `-2`           | print `sorted array: [...]` from `heapsort()`             |

Any other negative number is ignored. The command's heap holds up to 2,400,000
integers. A line that does not start with an integer, or whose integer lies
outside the signed 32-bit range, stops the command with an `error: ...` message
on standard error and exit status 1; output for the lines before it has already
been printed.

## Running the tests

```
pip install .[test]
pytest
```
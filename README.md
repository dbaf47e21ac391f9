# bacalgo

A small collection of classic algorithms and data structures, each module
with a command-line demonstration. No third-party dependencies.

## Modules

### `bacalgo.graphs`

Four graph representations sharing the abstract `GraphType` interface:
`fill(vertex_count, edges)`, `render()` (returns the description as a
string), `print()` (writes `render()` to standard output) and `clean()`.
Edges are `(a, b)` pairs of integers; duplicates are dropped and they are
kept in sorted order.

- `SimpleGraph` – the vertex count and the sorted edge list (`edges`).
- `AdjacencyMapGraph` – undirected; `adjacency` maps each vertex to the set
  of its neighbours. `dfs(start)` returns the vertices in depth-first order,
  visiting smaller neighbours first, and raises `IndexError` when `start` is
  not a vertex of the graph.
- `AdjacencyMatrixGraph` – undirected; `matrix` is a square list of booleans.
  An edge naming a vertex outside the graph raises `GraphTypeError`.
- `AdjacencyListGraph` – directed; every vertex's targets are stored in one
  flat `adjacencies` list, with `offsets` marking where each vertex's run
  begins and ends.

`fill` raises `GraphTypeError` for a negative vertex count, or when edges are
given to a graph with zero vertices.

### `bacalgo.dynamic`

- `chess_king_rec(x, y)` and `chess_king_dyn(x, y)` – the number of paths
  from `(1, 1)` to `(x, y)` moving only right or down (memoised recursion and
  a row-by-row table). Coordinates below 1 raise `ValueError`.
- `knapsack(items, capacity)` – the best total value of `(weight, value)`
  items that fit in `capacity`, each item used at most once. A negative
  capacity, weight or value raises `ValueError`.
- `levenshtein_distance(a, b)` – the edit distance between two strings.

### `bacalgo.strings`

- `kmp_search(pattern, text)` – a prefix-function scan of `text` that returns
  the start offsets at which it reports `pattern`. The prefix values are kept
  over the text itself, so the fall-back steps use the text's own prefix
  table; an empty pattern reports offsets 1 to `len(text)`.

### `bacalgo.sorting`

- `selection_sort`, `insertion_sort`, `bubble_sort`, `merge_sort` – each
  sorts a mutable sequence in place and returns `None`.
- `ascending_values(count)`, `descending_values(count)`,
  `random_values(count)` (digits 0–9) – input generators.
- `benchmark(sort_func, size)` – times a sort on the empty, single-element,
  all-zeroes, all-`INT_MAX`, ascending, descending and random inputs and
  returns a dict of case name to milliseconds. A negative size raises
  `ValueError`.

### `bacalgo.linked_list`

`SinglyLinkedList(values=())` supports `len()`, indexing, item assignment,
iteration and `repr()`, plus:

- `push_back(value)`, `push_front(value)`
- `pop_back()`, `pop_front()` – do nothing on an empty list
- `remove_at(index)` – `ValueError` for a negative index, `IndexError` past
  the end (index 0 on an empty list does nothing)
- `resize(size, value=None)` – pads at the back with `value` or drops
  elements from the back; a negative size raises `ValueError`
- `insert(value, index)` – first resizes the list to exactly `index`
  elements (cutting it down, or padding with `None`), then places `value` at
  `index`; a negative index raises `ValueError`
- `clear()`

Indexing outside the list raises `IndexError`.

### `bacalgo.multiplexing`

Waiting on a binary stream's file descriptor with a timeout (via
`selectors`), writing `TIMEOUT` to the output each time the wait runs out.
The quit signal is a word whose first character matches the first character
of `QUIT_WORD` (`F`).

- `read_chunks_until_quit(stream, output, timeout=5.0)` – echoes raw chunks of
  up to 1024 bytes.
- `read_words_until_quit(stream, output, timeout=5.0)` – echoes one
  whitespace-separated word at a time.

Both return `True` when stopped by the quit signal and `False` at end of
input.

- `read_once(stream, output, timeout=5.0)` – waits once and echoes the first
  word; returns the word (empty at end of input) or `None` on timeout.

These need a stream that the platform's selector can watch; on Windows that
means sockets only, so standard input cannot be used there.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from bacalgo.dynamic import knapsack, levenshtein_distance
from bacalgo.strings import kmp_search
from bacalgo.sorting import merge_sort
from bacalgo.linked_list import SinglyLinkedList
from bacalgo.graphs import AdjacencyMapGraph

levenshtein_distance("kitten", "sitting")      # 3
kmp_search("aba", "ababacababxs")
knapsack([(2, 3), (4, 2), (5, 5), (3, 2), (3, 8)], 6)

values = [5, 3, 9, 1]
merge_sort(values)                             # values is now [1, 3, 5, 9]

numbers = SinglyLinkedList()
numbers.push_back(1)
numbers.push_front(0)
list(numbers)                                  # [0, 1]

graph = AdjacencyMapGraph(4, {(0, 2), (3, 0), (1, 2), (1, 3), (2, 3)})
graph.dfs(0)
```

## Commands

```
bacalgo-graphs                     # fills every representation with sample graphs and prints them
bacalgo-strings [PATTERN [TEXT]]   # prints the offsets reported by kmp_search (default: aba ababacababxs)
bacalgo-dynamic                    # chess-king paths for 10x15 and a list of edit distances
bacalgo-sorting [--size N]         # times each sort on the standard inputs (default size 10000)
bacalgo-multiplexing [chunks|words|once] [--timeout SECONDS]
                                   # echoes standard input until the quit signal (default: chunks, 5 s)
```
# sortlab

A small teaching lab built around three exercises:

- **Sorting 3D arrays and vectors.** Three algorithms are provided:
  `selection3`, a selection sort that places a minimum and a maximum on each
  pass; `selection5`, a plain selection sort; and `exchange1`, a bubble sort.
  They sort a `P × M × N` array, where each layer is sorted on its own in
  column-major order (down each column, then on to the next), and a flat
  vector. Data can be ordered, back-ordered or random. Timings are taken over
  28 runs. The first 2 runs are dropped, and then the 3 fastest and 3 slowest
  of the rest. The remaining times are averaged and reported in seconds.
- **Threaded tabulation.** Three functions of `x` are each computed in a
  separate worker thread. The workers and the main thread meet at a barrier
  at each step, and the results are printed as a table.
- **Producer/consumer queue.** Six threads share a bounded buffer, which holds
  20 elements by default. They use semaphores and condition variables. They
  also update a set of 32-bit and 64-bit integer cells under a lock.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Commands

### `sortlab`

```
sortlab [--seed SEED]
```

This opens a numbered text menu. Type the number of an algorithm, then the
number of a data order. For a `2 × 3 × 4` array and a 10-element vector, the
program shows the data before and after sorting, together with the average
sort time. Pick `Back to main menu` to return to the first menu. Pick
`Table&Exit` to print timing tables for every algorithm and every order, and
then exit. Typing `q`, `quit` or `exit`, or ending input, leaves the program
at any prompt. `--seed` fixes the random data.

### `sortlab-tabulate`

```
sortlab-tabulate [--start START] [--step STEP] [--steps STEPS]
```

This prints `sin²x·cos x`, `cos²x·(1+sin x)` and `cos x·(1+sin²x)` at
`x = start + i·step` for `i` from 0 to `steps`. By default `x` runs from `-2π`
to `0` in steps of `π/5`.

### `sortlab-queue`

```
sortlab-queue [--duration SECONDS] [--initial COUNT]
```

This puts `COUNT` elements into the buffer (10 by default) and then runs the
producer and consumer threads, printing what each one does. Without
`--duration` it runs until interrupted with Ctrl-C. With `--duration`, it stops
all threads after that many seconds.

## Library use

```python
import random
from sortlab.matrix import random_matrix, selection3_matrix, format_matrix, column_order
from sortlab.vector import back_ordered_vector, exchange1_vector
from sortlab.measurement import average_time
from sortlab.table import render_table
from sortlab.tabulation import tabulate, format_table

mt = random_matrix(2, 3, 4, random.Random(1))
selection3_matrix(mt)          # sorts in place, returns None
print(format_matrix(mt))
print(column_order(mt))        # each layer as one column-major list

vt = back_ordered_vector(10)
exchange1_vector(vt)
print(vt)                      # [1, 2, ..., 10]

print(average_time(exchange1_vector, lambda: back_ordered_vector(100)))
print(render_table(2, 3, 4, 10, random.Random(0)))
print(format_table(tabulate(0.0, 0.5, 4)), end="")
```

- `sortlab.vector` has `ordered_vector`, `back_ordered_vector`,
  `random_vector`, `format_vector`, and the sorts `selection3_vector`,
  `selection5_vector` and `exchange1_vector`.
- `sortlab.matrix` has the matching `*_matrix` functions, and also
  `column_order`.
- `sortlab.measurement` has `measure`, `trimmed_mean`, `average_time` and the
  `Order` enum.
- `sortlab.table` has `matrix_rows`, `vector_rows`, `format_rows`,
  `render_table` and `TableRow`.
- `sortlab.tabulation` has `f1`, `f2`, `f3`, `tabulate` and `format_table`.
- `sortlab.menu` has `Algorithm`, `run_demo` and `choose`.
- `sortlab.queue_demo` has `RingBuffer`, `BufferEmpty`, `AtomicCells` and
  `Demo`.

All sort functions work in place and return nothing. Use `measure` or
`average_time` to time them.

## What it does not do

The menu is a plain numbered prompt read line by line. It has no full-screen
display, no arrow-key navigation and no colours. The array and vector sizes
the menu uses are fixed at `2 × 3 × 4` and 10. To use other sizes, call the
library functions.

## Tests

```
pytest
```
# rvbench

CPU benchmark kernels and a handful of small demo programs, written in plain
Python with no third-party dependencies.

- **CoreMark kernels**: the 16-bit CRC helpers, the number-recognising state
  machine and the matrix kernel, plus timing and seed configuration helpers.
- **Dhrystone 2.1**: the full procedure set and the main measurement loop,
  with a report of the final variable values next to what they should be.
- **Demo programs**: the spigot pi-digit program, a floating-point sort,
  a binary file write/read round trip, an upper-casing echo, a small shape
  hierarchy and "hello world".

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
rvbench-dhrystone [RUNS]
rvbench-programs {hello,pi,qsort,file,io,shapes}
```

`rvbench-dhrystone` runs the Dhrystone loop `RUNS` times (default 100) and
prints the final values of the benchmark variables together with their
expected values, followed by the timing figures.

`rvbench-programs` runs one demo program:

- `hello` prints `hello world!`
- `pi` prints the first 800 digits of pi
- `qsort` prints a fixed set of numbers before and after sorting
- `file [--path out.bin] [--count 4096] [--seed 10]` writes pseudo-random
  32-bit integers to a file, reads them back and verifies them
- `io` echoes one line from standard input with lower-case letters upper-cased
- `shapes` prints the summed area of a 10×5 rectangle and a circle of radius 7,
  plus 10

## Library use

### CoreMark kernels

```python
from rvbench.crc import crcu16, crc16, parseval, get_seed_args
from rvbench.state import init_state, bench_state, CoreState
from rvbench.matrix import init_matrix, bench_matrix
from rvbench.timing import RunKind, Stopwatch, seeds_for, time_in_secs

parseval("0x66")   # 102
parseval("2K")     # 2048

seed1, seed2, seed3, iterations, execs = seeds_for(RunKind.VALIDATION, 1)

block = init_state(666, seed1)
crc = bench_state(666, block, seed1, seed2, 3, 0)

params = init_matrix(666, seed1 | (seed2 << 16))
crc = bench_matrix(params, seed1, crc)

watch = Stopwatch()
watch.start()
# ... timed work ...
watch.stop()
print(time_in_secs(watch.ticks()))
```

`bench_state` corrupts the block between its two passes and undoes the
corruption afterwards when `seed1` equals `seed2`. `matrix_test` leaves the
`a` matrix as it found it.

### Dhrystone

```python
from rvbench.dhrystone import Dhrystone, format_report

result = Dhrystone().run(100)
print(format_report(result))
```

The leaf procedures (`proc_6`, `proc_7`, `proc_8`, `func_1`, `func_2`,
`func_3`) and the `Record`, `Globals` and `Enumeration` types live in
`rvbench.dhry_pack2`.

### Demo programs

```python
from rvbench.programs import pi_digits, sort_values, Rectangle, Circle, total_area

print(pi_digits())
print(sort_values([382.19, -192.293, 0.000001]))
print(total_area([Rectangle(10, 5), Circle(7)], 10))
```

## What is not included

There is no linked-list kernel and no complete CoreMark run: nothing combines
the kernels into iterations, checks the results against the known CRCs for
the standard seed sets or prints a CoreMark score, and there is no CoreMark
command. The CRC, state-machine and matrix kernels are functions to be called
directly.
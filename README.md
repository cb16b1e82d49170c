# highwayhash

HighwayHash is a fast, strong keyed hash function (a pseudorandom function).
You give it a key of four unsigned 64-bit integers and some bytes, and it
produces a 64, 128 or 256-bit hash. For a given key and input the result is
always the same; without the key it cannot be predicted.

This package implements it in pure Python and has no dependencies.

## Installation

```
pip install highwayhash
```

## Hashing in one call

```python
from highwayhash.core import hash64, hash128, hash256

key = (1, 2, 3, 4)          # use your own randomly chosen key
data = b"Hello world!"

h64 = hash64(data, key)     # one 64-bit integer
h128 = hash128(data, key)   # tuple of two 64-bit integers
h256 = hash256(data, key)   # tuple of four 64-bit integers
```

`data` may be any bytes-like object (`bytes`, `bytearray`, `memoryview`);
passing a `str` raises `TypeError`. A key that does not hold exactly four
integers in the range 0 to 2**64 - 1 raises `ValueError` (or `TypeError` for
non-integer lanes).

## Hashing data that arrives in pieces

`highwayhash.cat.HighwayHashCat` takes input in several pieces. The result is
the same as hashing all of the data in one call. `append` returns the hasher,
so calls can be chained. Reading a result with `finish64`, `finish128` or
`finish256` does not consume the hasher: you can keep appending afterwards.

```python
from highwayhash.cat import HighwayHashCat

cat = HighwayHashCat((1, 2, 3, 4))
cat.append(b"Hello").append(b" world!")
print(f"{cat.finish64():016x}")
```

If all the pieces are already at hand, `hash_fragments64`,
`hash_fragments128` and `hash_fragments256` hash an iterable of byte strings in
one call: `hash_fragments64(key, [b"Hello", b" world!"])`.

## Low-level state

`highwayhash.core.HighwayHashState` exposes the steps of the algorithm:

- `reset(key)` starts again from a key.
- `update_packet(packet)` absorbs exactly 32 bytes.
- `update_remainder(data)` absorbs the final 1 to 31 bytes; use it only when
  the input length is not a multiple of 32.
- `finalize64()`, `finalize128()` and `finalize256()` produce the result.

Finalizing changes the state. Take a `copy()` first if you need to carry on
afterwards.

## Targets and clock rate

`highwayhash.targets` names instruction-set targets: the `Target` flag
(`PORTABLE`, `SSE41`, `AVX2`, `VSX`, `NEON`), `target_name(bits)` which returns
the short name of a single bit or `None`, and `iter_targets(bits)` which yields
each set bit, lowest first. `nominal_clock_rate()` returns the CPU clock rate in
hertz, read from `/proc/cpuinfo` or the processor description, or `0.0` when it
cannot be found.

## Command line

Hash a piece of text with a fixed demonstration key `(1, 2, 3, 4)`:

```
highwayhash "some text to hash"
```

This prints the 64-bit hash, as a decimal integer, computed in one call and
again computed with `HighwayHashCat`; the two agree. Without exactly one
argument it prints a usage message and exits with status 1.

Measure throughput for a range of input sizes:

```
highwayhash-benchmark        # LaTeX table of cycles per byte
highwayhash-benchmark p      # bytes-per-cycle columns for plotting
```

Each size is timed 40 times and the median is used. Timings are converted to
cycles with `nominal_clock_rate()`; where no clock rate is known, nanoseconds
are reported in its place. The same output is available from Python through
`highwayhash.benchmark.Measurements` (`add`, `table`, `plots`) and
`measure(func, sizes, repetitions)`.

## What this package does not do

There is only the portable implementation. The `Target` values other than
`PORTABLE` are names only: no instruction-set specific code is chosen or run,
and the benchmark measures the portable implementation alone. Being pure
Python, it is far slower than a native implementation.

## Development

```
pip install -e ".[test]"
pytest
```
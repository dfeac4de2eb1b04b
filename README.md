# fastfss

Small building blocks for function secret sharing (FSS) work in pure Python:
a seeded AES-128 counter-mode generator, an unsigned 128-bit integer type,
fixed-width wrapping arithmetic, a process-wide grid-dimension setting and a
little arithmetic expression evaluator.

## Modules

- `fastfss.prng`
  - `aes128_ctr(seed, counter, num_bytes)` returns `(keystream, next_counter)`.
    `seed` is the 16-byte AES-128 key; `counter` is a 16-byte little-endian
    128-bit value. Block `i` is the AES encryption of `counter + i`
    (mod 2**128). The returned counter has moved past every block used,
    including a partial final block.
  - `Prng(seed=None, counter=None)` keeps a seed and a counter.
    `set_current_seed(seed, counter=None)` sets the seed and resets the counter
    to zero unless one is given; `get_current_seed()` returns
    `(seed, counter)`; `generate(bit_width, element_size, element_num)` returns
    `element_size * element_num` bytes and advances the counter. A `bit_width`
    outside `1 .. element_size * 8` raises `ValueError`, as does a seed or
    counter that is not 16 bytes.
- `fastfss.uint128`: `UInt128`, an immutable unsigned 128-bit integer.
  Arithmetic wraps modulo 2**128, shifts of 128 bits or more give zero, and
  division or remainder by zero gives zero. It has `upper` and `lower`
  (64-bit halves), `bits()`, `to_bytes()` and `UInt128.from_bytes(...)`
  (16 little-endian bytes), and mixes freely with `int`.
- `fastfss.wrapping`: unsigned arithmetic at any bit width:
  `wrap(value, bit_width)`, `shift_left(x, shift, bit_width)`,
  `shift_right(x, shift, bit_width)` and `divmod_wrapped(lhs, rhs, bit_width)`
  (which returns `(0, 0)` on division by zero).
- `fastfss.config`: `set_grid_dim(dim)` and `get_grid_dim()`, a thread-safe
  process-wide setting that defaults to 32. A value that is not positive
  raises `ValueError`.
- `fastfss.expression`: `ExpressionEvaluator().evaluate(expr)` evaluates
  numbers, `+ - * /` and parentheses to a float, raising `EvaluationError`
  (a `ValueError`) on bad input or division by zero.

## Installation

```
pip install .
```

## Examples

```python
from fastfss.prng import Prng, aes128_ctr

rng = Prng(bytes(16))
data = rng.generate(bit_width=32, element_size=4, element_num=8)  # 32 bytes
seed, counter = rng.get_current_seed()  # counter is now 2

stream, next_counter = aes128_ctr(bytes(16), bytes(16), 20)  # 20 bytes, 2 blocks used
```

```python
from fastfss.uint128 import UInt128
from fastfss.wrapping import wrap, shift_left, divmod_wrapped

assert UInt128(-1) == (1 << 128) - 1
assert (UInt128(1) << 128) == 0
assert wrap(-1, 8) == 255
assert shift_left(0x81, 1, 8) == 2
assert divmod_wrapped(7, 0, 8) == (0, 0)
```

```python
from fastfss.expression import ExpressionEvaluator

assert ExpressionEvaluator().evaluate("2 * (3 + 4)") == 14.0
```

## What this package does not do

It does not generate or evaluate function secret sharing keys (point,
comparison or interval functions, or lookup tables), and it has no
accelerated or GPU back end: the grid-dimension setting is only stored and
read back. There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```
# numbig

Functions for arbitrary-precision integers that work on Python's built-in
`int`. They add what `int` leaves out or does differently:

- division that truncates toward zero, beside floored, ceiling and Euclidean
  forms
- bit queries and updates on the two's-complement view of negative numbers
- text, digit-vector and signed-byte conversions in any radix
- modular inverse, modular power and integer roots
- random values of a given bit size or within a range

Every function accepts anything that supports `__index__` and returns plain
`int` values, lists or `bytes`.

## Installation

```
pip install numbig
```

To run the test suite:

```
pip install "numbig[test]"
pytest
```

## Modules

### `numbig.arith`: division, divisibility and roots

```python
from numbig import arith

arith.div_rem(-7, 2)          # (-3, -1): quotient toward zero, remainder takes the sign of a
arith.div_floor(-7, 2)        # -4
arith.mod_floor(-7, 2)        # 1: takes the sign of b
arith.div_mod_floor(-7, 2)    # (-4, 1)
arith.div_ceil(7, 2)          # 4
arith.div_rem_euclid(-7, -2)  # (4, 1): the remainder is never negative
arith.next_multiple_of(7, 3)  # 9
arith.prev_multiple_of(7, 3)  # 6

arith.gcd(12, 18)             # 6
arith.lcm(-4, 6)              # 12
arith.extended_gcd_lcm(12, 18)  # ((gcd, x, y), lcm) with 12*x + 18*y == gcd

arith.modinv(271, 383)        # 106
arith.modinv(271, -383)       # -277: the result follows the sign of the modulus
arith.modinv(2, 4)            # None: no inverse exists

arith.sqrt(99)                # 9
arith.cbrt(-27)               # -3
arith.nth_root(1000, 3)       # 10
```

`div_euclid` and `rem_euclid` return the two halves of `div_rem_euclid`.

### `numbig.power`: powers

```python
from numbig import power

power.power(-2, 3)           # -8
power.modpow(4, 13, 497)     # 445
power.modpow(-2, 3, 5)       # 2: in [0, m) for m > 0, in (m, 0] for m < 0
```

### `numbig.bits`: two's-complement bits

Negative numbers behave as if sign-extended with infinitely many ones.

```python
from numbig import bits

bits.trailing_zeros(40)      # 3
bits.trailing_zeros(0)       # None
bits.bit(-1, 100)            # True
bits.set_bit(-1, 0, False)   # -2
bits.set_bit(0, 70, True)    # 2**70
```

### `numbig.shift`: shifts

```python
from numbig import shift

shift.shift_left(3, 4)       # 48
shift.shift_right(-7, 1)     # -4: rounds toward negative infinity
```

### `numbig.radix`: text, digits and bytes

```python
from numbig import radix

radix.parse_str_radix("ff", 16)       # 255
radix.parse_str_radix("-1_000", 10)   # -1000
radix.to_str_radix(-255, 16)          # "-ff"

radix.to_signed_bytes_be(-1125)       # b"\xfb\x9b"
radix.to_signed_bytes_le(-1125)       # b"\x9b\xfb"
radix.from_signed_bytes_be(b"\xfb\x9b")  # -1125
radix.from_signed_bytes_le(b"")       # 0

radix.to_radix_be(65535, 159)         # [2, 94, 27]
radix.to_radix_le(65535, 159)         # [27, 94, 2]
radix.from_radix_be([2, 94, 27], 159) # 65535
radix.from_radix_be([200], 190)       # None: a digit is not below the radix

radix.to_u32_digits(2**32)            # [0, 1]
radix.to_u64_digits(112500000000)     # [112500000000]

radix.checked_fixed(127, 8, True)     # 127
radix.checked_fixed(300, 8, False)    # raises TryFromBigIntError
```

Parsing takes radixes 2 to 36, a single leading `-` or `+`, and underscores
between digits (not at the start). Digit vectors take radixes 2 to 256; the
digit and `u32`/`u64` functions work on non-negative magnitudes.
`to_radix_be(0, r)` gives `[0]`, while `to_u32_digits(0)` gives `[]`.

A failed parse raises `ParseBigIntError`, whose `kind` is a `ParseErrorKind`
(`EMPTY` or `INVALID`). A failed range check raises `TryFromBigIntError`,
whose `original` holds the value. Both are subclasses of `ValueError`.

### `numbig.rand`: random values

Every generator draws from a `random.Random` you pass in.

```python
import random
from numbig import rand

rng = random.Random(1234)

rand.gen_biguint(rng, 137)              # 0 <= n < 2**137
rand.gen_bigint(rng, 137)               # |n| < 2**137, either sign
rand.gen_biguint_below(rng, 1000)       # 0 <= n < 1000
rand.gen_biguint_range(rng, 10, 20)     # 10 <= n < 20
rand.gen_bigint_range(rng, -20, 20)     # -20 <= n < 20

rand.UniformBigInt(236, 237).sample(rng)          # 236
rand.UniformBigInt.inclusive(-5, 5).sample(rng)   # -5 <= n <= 5
rand.RandomBits(64).sample(rng)                   # signed
rand.RandomBits(64).sample_unsigned(rng)          # non-negative
```

`gen_bigint` redraws zero half of the time, so zero is no likelier than any
other value.

## Errors

- `ZeroDivisionError`: a zero divisor in `numbig.arith`, or a zero modulus
  in `modinv` or `modpow`.
- `ValueError`: a negative shift amount, bit position, exponent or bit size;
  a radix out of range; an even root of a negative number or a root degree
  below one; a square root of a negative number; a negative magnitude; an
  empty range or a bound that is not positive in `numbig.rand`.

## What it does not do

The package has no integer type of its own: it works on `int` and returns
`int`. There is no separate sign type, no serialized data format and no
command-line tool.
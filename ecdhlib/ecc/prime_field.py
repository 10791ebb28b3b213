#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field arithmetic.

Field elements are int in [0, p), p being a prime.
Multiplication, squaring, and division are built on field addition
following the algorithms described in
https://www.johannes-bauer.com/compsci/ecc/
while the modular inverse uses the Extended Euclidean Algorithm, see
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm

All functions reduce their inputs mod p
and return results normalized into [0, p).
"""

from typing import Tuple

from ecdhlib.exceptions import DivisionByZeroError, ECDHlibValueError
from ecdhlib.utils import HEX_THRESHOLD, hex_string


def _int_repr(i: int) -> str:
    return f"{hex_string(i)}" if i > HEX_THRESHOLD else f"{i}"


def add(a: int, b: int, p: int) -> int:
    "Return a + b (mod p)."

    a %= p
    b %= p
    res = a + b
    if res >= p:
        res -= p
    return res


def sub(a: int, b: int, p: int) -> int:
    "Return a - b (mod p)."

    a %= p
    b %= p
    res = a - b
    if res < 0:
        res += p
    return res


def mul(a: int, b: int, p: int) -> int:
    """Return a * b (mod p).

    Binary 'double & add' over the bits of b:
    a copy of a is doubled at each bit of b,
    least significant bit first,
    and it is added to the result if the bit is set.
    All additions are field additions.
    """

    copy = a % p
    b %= p
    res = 0
    while b > 0:
        if b & 1:
            res = add(res, copy, p)
        copy = add(copy, copy, p)
        b >>= 1
    return res


def square(a: int, p: int) -> int:
    """Return a^2 (mod p).

    'Square & multiply' specialized for the exponent 2 (binary 10),
    least significant bit first.
    """

    copy = a % p
    res = 1 % p
    exponent = 2
    while exponent > 0:
        if exponent & 1:
            # loop on the bits of res, not on those of copy
            res = mul(copy, res, p)
        exponent >>= 1
        if exponent:
            copy = mul(copy, copy, p)
    return res


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    Iterative Extended Euclidean Algorithm, tracking Bézout coefficients.
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    DivisionByZeroError is raised if a = 0 (mod m).
    """

    a %= m
    if a == 0:
        raise DivisionByZeroError(f"No inverse for 0 mod {_int_repr(m)}")
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    err_msg = f"No inverse for {_int_repr(a)} mod {_int_repr(m)}"
    raise ECDHlibValueError(err_msg)


def div(a: int, b: int, p: int) -> int:
    """Return a / b (mod p), i.e. a times the inverse of b.

    DivisionByZeroError is raised if b = 0 (mod p).
    """

    if b % p == 0:
        raise DivisionByZeroError(f"division by zero mod {_int_repr(p)}")
    return mul(a, mod_inv(b, p), p)

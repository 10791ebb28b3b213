#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Elliptic curve class."

from dataclasses import dataclass
from math import sqrt
from typing import Optional, Sequence

from ecdhlib.alias import INF, Integer, InfinityPoint, Point
from ecdhlib.ecc.curve_group import CurveGroup, scalar_mult
from ecdhlib.exceptions import ECDHlibValueError
from ecdhlib.utils import HEX_THRESHOLD, hex_string, int_from_integer


@dataclass(frozen=True)
class Curve(CurveGroup):
    """Prime order subgroup of the points of an elliptic curve over Fp.

    Besides the domain parameters (p, a, b, G, n, h)
    it carries the bit length of the private keys to be drawn for it.
    """

    G: Point
    n: int
    h: int
    key_size_bits: int

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Sequence[Integer],
        n: Integer,
        h: int,
        weakness_check: bool = True,
        key_size_bits: Optional[int] = None,
        order_check: bool = True,
    ) -> None:

        super().__init__(p, a, b)

        # 2. check that xG and yG are integers in the interval [0, p−1]
        # 4. Check that yG^2 = xG^3 + a*xG + b (mod p)
        if isinstance(G, InfinityPoint):
            raise ECDHlibValueError("INF point cannot be a generator")
        if len(G) != 2:
            raise ECDHlibValueError("Generator must a be a sequence[int, int]")
        G = (int_from_integer(G[0]), int_from_integer(G[1]))
        if not self.is_on_curve(G):
            raise ECDHlibValueError("Generator is not on the curve")
        object.__setattr__(self, "G", G)

        n = int_from_integer(n)
        nlen = n.bit_length()

        # 5. Check that n is prime.
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            err_msg = "n is not prime: "
            err_msg += f"'{hex_string(n)}'" if n > HEX_THRESHOLD else f"{n}"
            raise ECDHlibValueError(err_msg)
        delta = int(2 * sqrt(self.p))
        # also check n with Hasse Theorem
        if h < 2 and not self.p + 1 - delta <= n <= self.p + 1 + delta:
            err_msg = "n not in p+1-delta..p+1+delta: "
            err_msg += f"'{hex_string(n)}'" if n > HEX_THRESHOLD else f"{n}"
            raise ECDHlibValueError(err_msg)

        # 6. Check cofactor
        exp_h = (self.p + 1 + delta) // n
        if h != exp_h:
            raise ECDHlibValueError(f"invalid cofactor: {h}, expected {exp_h}")

        # 7. Check that n ≠ p
        if n == self.p:
            raise ECDHlibValueError(f"n=p weak curve: '{hex_string(n)}'")

        if weakness_check:
            # 8. Check that p^i % n ≠ 1 for all 1≤i<100
            for i in range(1, 100):
                if pow(self.p, i, n) == 1:
                    raise ECDHlibValueError("weak curve")

        if key_size_bits is None:
            key_size_bits = nlen
        if key_size_bits < 1:
            raise ECDHlibValueError(f"invalid key size: {key_size_bits} bits")

        object.__setattr__(self, "n", n)
        object.__setattr__(self, "h", h)
        object.__setattr__(self, "key_size_bits", key_size_bits)
        object.__setattr__(self, "nlen", nlen)
        object.__setattr__(self, "nsize", (nlen + 7) // 8)

        # 9. Check that nG = INF: the most expensive check, optional
        if order_check and scalar_mult(self.G, n, self) is not INF:
            err_msg = "n is not the group order: "
            err_msg += f"'{hex_string(n)}'" if n > HEX_THRESHOLD else f"{n}"
            raise ECDHlibValueError(err_msg)

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G[0])}"
            result += f"\n y_G = {hex_string(self.G[1])}"
        else:
            result += f"\n x_G = {self.G[0]}"
            result += f"\n y_G = {self.G[1]}"
        if self.n > HEX_THRESHOLD:
            result += f"\n n   = {hex_string(self.n)}"
        else:
            result += f"\n n   = {self.n}"
        result += f"\n h   = {self.h}"
        result += f"\n key = {self.key_size_bits} bits"
        return result

    def __repr__(self) -> str:
        result = super().__repr__()[:-1]
        if self.p > HEX_THRESHOLD:
            result += f", ('{hex_string(self.G[0])}', '{hex_string(self.G[1])}')"
        else:
            result += f", ({self.G[0]}, {self.G[1]})"
        if self.n > HEX_THRESHOLD:
            result += f", '{hex_string(self.n)}'"
        else:
            result += f", {self.n}"
        result += f", {self.h}"
        result += ")"
        return result

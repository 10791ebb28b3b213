#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and point arithmetic functions.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup class of prime order Curve,
see the ecdhlib.ecc.curve module.

Point arithmetic is in affine coordinates
and uses only the ecdhlib.ecc.prime_field functions,
see https://www.johannes-bauer.com/compsci/ecc/ for the formulas.
It is not constant-time.
"""

from dataclasses import dataclass
from math import ceil

from ecdhlib.alias import INF, ECPoint, Integer, InfinityPoint
from ecdhlib.ecc import prime_field as fp
from ecdhlib.exceptions import ECDHlibTypeError, ECDHlibValueError
from ecdhlib.utils import HEX_THRESHOLD, hex_string, int_from_integer


@dataclass(frozen=True)
class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    p: int
    a: int
    b: int

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            err_msg = "p is not prime: "
            err_msg += f"'{hex_string(p)}'" if p > HEX_THRESHOLD else f"{p}"
            raise ECDHlibValueError(err_msg)

        # 2. check that a and b are integers in the interval [0, p−1]
        if a < 0:
            raise ECDHlibValueError(f"negative a: {a}")
        if p <= a:
            err_msg = "p <= a: " + (
                f"'{hex_string(p)}' <= '{hex_string(a)}'"
                if p > HEX_THRESHOLD
                else f"{p} <= {a}"
            )
            raise ECDHlibValueError(err_msg)
        if b < 0:
            raise ECDHlibValueError(f"negative b: {b}")
        if p <= b:
            err_msg = "p <= b: " + (
                f"'{hex_string(p)}' <= '{hex_string(b)}'"
                if p > HEX_THRESHOLD
                else f"{p} <= {b}"
            )
            raise ECDHlibValueError(err_msg)

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        d = 4 * a * a * a + 27 * b * b
        if d % p == 0:
            raise ECDHlibValueError("zero discriminant")

        object.__setattr__(self, "p", p)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        # byte-length
        object.__setattr__(self, "p_size", ceil(p.bit_length() / 8))

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self.a)}"
            result += f"\n b   = {hex_string(self.b)}"
        else:
            result += f"\n a   = {self.a}"
            result += f"\n b   = {self.b}"

        return result

    def __repr__(self) -> str:
        result = "Curve("
        result += f"'{hex_string(self.p)}'" if self.p > HEX_THRESHOLD else f"{self.p}"
        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f", '{hex_string(self.a)}', '{hex_string(self.b)}'"
        else:
            result += f", {self.a}, {self.b}"

        result += ")"
        return result

    def negate(self, Q: ECPoint) -> ECPoint:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, InfinityPoint):
            return INF
        if len(Q) == 2:
            return Q[0], fp.sub(0, Q[1], self.p)
        raise ECDHlibTypeError("not a point")

    def add(self, Q1: ECPoint, Q2: ECPoint) -> ECPoint:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return point_add(Q1, Q2, self)

    def _y2(self, x: int) -> int:
        # x^3 + a*x + b as (x^2 + a)*x + b
        p = self.p
        return fp.add(fp.mul(fp.add(fp.square(x, p), self.a, p), x, p), self.b, p)

    def require_on_curve(self, Q: ECPoint) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECDHlibValueError("point not on curve")

    def is_on_curve(self, Q: ECPoint) -> bool:
        "Return True if the point is on the curve."
        if isinstance(Q, InfinityPoint):
            return True
        if not isinstance(Q, tuple) or len(Q) != 2:
            raise ECDHlibTypeError("point must be a tuple[int, int] or INF")
        x, y = Q
        if not (0 <= x < self.p and 0 <= y < self.p):
            return False
        return self._y2(x) == fp.square(y, self.p)


def point_double(P: ECPoint, ec: CurveGroup) -> ECPoint:
    """Return 2P, using the tangent rule.

    The input point is assumed to be on curve.
    A point with y = 0 is its own opposite, hence 2P = INF.
    """

    if isinstance(P, InfinityPoint) or P[1] == 0:
        return INF

    p = ec.p
    x, y = P
    # s = (3 x^2 + a) / 2 y
    s = fp.div(fp.add(fp.mul(fp.square(x, p), 3, p), ec.a, p), fp.mul(y, 2, p), p)
    # x_R = s^2 - 2 x
    x_R = fp.sub(fp.square(s, p), fp.mul(x, 2, p), p)
    # y_R = s (x - x_R) - y
    y_R = fp.sub(fp.mul(s, fp.sub(x, x_R, p), p), y, p)
    return x_R, y_R


def point_add(P: ECPoint, Q: ECPoint, ec: CurveGroup) -> ECPoint:
    """Return P + Q, using the chord rule for distinct points.

    The input points are assumed to be on curve.
    There is no precondition on the input points:
    INF, equal points, and opposite points are all handled here.
    """

    if isinstance(P, InfinityPoint):
        return Q
    if isinstance(Q, InfinityPoint):
        return P

    if P[0] == Q[0]:
        if P[1] == Q[1]:  # point doubling
            return point_double(P, ec)
        # opposite points
        return INF

    p = ec.p
    # s = (y_P - y_Q) / (x_P - x_Q)
    s = fp.div(fp.sub(P[1], Q[1], p), fp.sub(P[0], Q[0], p), p)
    # x_R = s^2 - x_P - x_Q
    x_R = fp.sub(fp.square(s, p), fp.add(P[0], Q[0], p), p)
    # y_R = s (x_P - x_R) - y_P
    y_R = fp.sub(fp.mul(s, fp.sub(P[0], x_R, p), p), P[1], p)
    return x_R, y_R


def scalar_mult(P: ECPoint, k: int, ec: CurveGroup) -> ECPoint:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses 'double & add' algorithm,
    binary decomposition of k, least significant bit first.
    It is not constant-time.

    The input point is assumed to be on curve,
    k is assumed to have been reduced mod n if appropriate
    (e.g. cyclic groups of order n).
    """

    if k < 0:
        raise ECDHlibValueError(f"negative k: {hex(k)}")

    R: ECPoint = INF  # initialize as infinity point
    while k > 0:  # use binary representation of k
        if k & 1:  # if least significant bit is 1
            R = point_add(R, P, ec)  # then add current P
        k >>= 1  # remove the bit just accounted for
        P = point_double(P, ec)  # double P for next step
    return R

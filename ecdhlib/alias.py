#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "04 db4ff10ec057e9ae26b07d0280b7f4341da5d1b1eae06c7d 9b2f2f6d9c5628a7844163d015be86344082aa88d95e2f9d"
#
# use ecdhlib.utils.bytes_from_octets to convert Octets to bytes
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# "04" point strings may come as ascii bytes, e.g. from a socket:
#    if isinstance(pub_key, bytes):
#        pub_key = pub_key.decode("ascii")
String = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Hash digest constructor: it may be any name suitable to hashlib.new()
HashF = Callable[[], Any]

# Source of cryptographically secure random bytes:
# called with the number of bytes required, it returns exactly that many
RandomSource = Callable[[int], bytes]


class InfinityPoint:
    """The point at infinity, neutral element of the curve group.

    It is a singleton: use INF and compare with 'is'.
    Being a dedicated object it cannot be confused
    with an affine point, e.g. (0, 0) on a curve with b = 0.
    """

    __slots__ = ()

    _instance = None

    def __new__(cls) -> "InfinityPoint":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INF"

    def __copy__(self) -> "InfinityPoint":
        return self

    def __deepcopy__(self, memo: Any) -> "InfinityPoint":
        return self

    def __reduce__(self) -> Tuple[Any, ...]:
        return (InfinityPoint, ())


INF = InfinityPoint()

# Elliptic curve point in affine coordinates.
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, int]

# Either an affine point or the point at infinity
ECPoint = Union[Point, InfinityPoint]

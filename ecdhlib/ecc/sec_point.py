#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC uncompressed point representation.

The hex-string form "04" + x + y is the wire format
used to exchange public keys: x and y are zero-padded
to the same number of hex-digits within a single encoded point.

The octet form 0x04 || x || y, with x and y of the curve byte size,
follows SEC 1 v.2, sections 2.3.3 and 2.3.4.

http://www.secg.org/sec1-v2.pdf
"""

from string import hexdigits

from ecdhlib.alias import ECPoint, InfinityPoint, Octets, Point, String
from ecdhlib.ecc.curve_group import CurveGroup
from ecdhlib.exceptions import ECDHlibValueError, MalformedEncodingError
from ecdhlib.utils import bytes_from_octets

_HEXDIGITS = frozenset(hexdigits)


def point_to_str(Q: ECPoint) -> str:
    """Return a point as uncompressed hex-string.

    Lowercase "04" + x + y, where x and y are left-padded with zeros
    to the length of the longer of the two.
    The point is not checked to be on any curve.
    """

    if isinstance(Q, InfinityPoint):
        raise ECDHlibValueError("no string representation for infinity point")

    x_str = format(Q[0], "x")
    y_str = format(Q[1], "x")
    size = max(len(x_str), len(y_str))
    return "04" + x_str.zfill(size) + y_str.zfill(size)


def point_from_str(pub_key: String) -> Point:
    """Return a tuple (x_Q, y_Q) from its uncompressed hex-string.

    The hex-string payload, after the "04" tag,
    is split in two halves of equal length.
    The point is not checked to be on any curve.
    """

    if isinstance(pub_key, bytes):
        pub_key = pub_key.decode("ascii", errors="replace")
    pub_key = pub_key.strip()

    size = len(pub_key)
    if size < 4 or size % 2 != 0:
        err_msg = f"invalid size for uncompressed point string: {size}"
        raise MalformedEncodingError(err_msg)
    if not _HEXDIGITS.issuperset(pub_key):
        raise MalformedEncodingError(f"not a hex-string: {pub_key!r}")
    if pub_key[:2] != "04":
        raise MalformedEncodingError(f"not an uncompressed point: {pub_key!r}")

    half = (size - 2) // 2
    x_Q = int(pub_key[2 : 2 + half], 16)
    y_Q = int(pub_key[2 + half :], 16)
    return x_Q, y_Q


def bytes_from_point(Q: ECPoint, ec: CurveGroup) -> bytes:
    """Return a point as uncompressed octet sequence.

    Return a point as uncompressed (0x04) octet sequence,
    according to SEC 1 v.2, section 2.3.3.
    """

    # check that Q is a point and that is on curve
    ec.require_on_curve(Q)

    if isinstance(Q, InfinityPoint):
        raise ECDHlibValueError("no bytes representation for infinity point")

    x_bytes = Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)
    return b"\x04" + x_bytes + Q[1].to_bytes(ec.p_size, byteorder="big", signed=False)


def point_from_octets(pub_key: Octets, ec: CurveGroup) -> Point:
    """Return a tuple (x_Q, y_Q) that belongs to the curve.

    Return a tuple (x_Q, y_Q) that belongs to the curve according to
    SEC 1 v.2, section 2.3.4.
    """

    try:
        pub_key = bytes_from_octets(pub_key)
    except ValueError as e:
        raise MalformedEncodingError(f"not a hex-string: {pub_key!r}") from e

    bsize = len(pub_key)  # bytes
    if bsize == 0 or pub_key[0] != 0x04:
        raise MalformedEncodingError(f"not an uncompressed point: {pub_key!r}")
    if bsize != 2 * ec.p_size + 1:
        err_msg = "invalid size for uncompressed point: "
        err_msg += f"{bsize} instead of {2 * ec.p_size + 1}"
        raise MalformedEncodingError(err_msg)

    x_Q = int.from_bytes(pub_key[1 : ec.p_size + 1], byteorder="big", signed=False)
    Q = x_Q, int.from_bytes(pub_key[ec.p_size + 1 :], byteorder="big", signed=False)
    if ec.is_on_curve(Q):
        return Q
    raise ECDHlibValueError(f"point not on curve: {Q}")

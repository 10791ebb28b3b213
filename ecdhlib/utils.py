#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Scalars are plain python int: here are the conversions
from/to hex-strings and big-endian unsigned bytes
used across the package, following SEC 1 v.2 2.3.

https://www.secg.org/sec1-v2.pdf
"""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from ecdhlib.alias import Integer, Octets
from ecdhlib.exceptions import ECDHlibValueError

# integers above this threshold are rendered as hex-strings in messages
HEX_THRESHOLD = 0xFFFFFFFF

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    If the input is not a string, then it goes untouched.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = bytes.fromhex(octets)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise ECDHlibValueError(err_msg)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'

    The binary representation is not allowed because there is no way to
    discriminate it from a valid hex-string
    (e.g. "0b11011110101011011011111011101111").
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ECDHlibValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def str_from_scalar(i: int, base: int = 16) -> str:
    """Return the unpadded base-16 (or base-2) string of a scalar.

    Leading zero digits are dropped, so this is a display format:
    it is not meant for wire interoperability.
    """

    if i < 0:
        raise ECDHlibValueError(f"negative scalar: {i}")
    if base == 16:
        return format(i, "x")
    if base == 2:
        return format(i, "b")
    raise ECDHlibValueError(f"unsupported base: {base}")


def scalar_from_str(scalar: str, base: int = 16) -> int:
    "Return the scalar from its base-16 (or base-2) string."

    if base not in (2, 16):
        raise ECDHlibValueError(f"unsupported base: {base}")
    scalar = scalar.strip()
    try:
        i = int(scalar, base)
    except ValueError as e:
        raise ECDHlibValueError(f"invalid base-{base} scalar: {scalar!r}") from e
    if i < 0:
        raise ECDHlibValueError(f"negative scalar: {scalar!r}")
    return i


def scalar_from_bytes(octets: Octets) -> int:
    "Import a big-endian unsigned scalar."

    return int.from_bytes(bytes_from_octets(octets), byteorder="big", signed=False)


def bytes_from_scalar(i: int, size: Optional[int] = None) -> bytes:
    """Export a scalar as big-endian unsigned bytes.

    If size is not provided, the minimum number of bytes is used
    (one byte for zero).
    """

    if i < 0:
        raise ECDHlibValueError(f"negative scalar: {i}")
    if size is None:
        size = max(1, (i.bit_length() + 7) // 8)
    try:
        return i.to_bytes(size, byteorder="big", signed=False)
    except OverflowError as e:
        err_msg = "scalar too large for "
        err_msg += f"{size} bytes: "
        err_msg += f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
        raise ECDHlibValueError(err_msg) from e

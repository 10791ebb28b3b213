#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curves.

* SEC 2 v.2 curves
  http://www.secg.org/sec2-v2.pdf
* SEC 2 v.1 curves, removed from SEC 2 v.2 as insecure ones
  http://www.secg.org/SEC2-Ver-1.0.pdf

Each function returns a new Curve instance,
built from the hex-string domain parameters
(the generator being given in its uncompressed string form).
No global curve table is shared: Curve instances are immutable anyway.

The private key size is an implementation choice:
for the 192-bit curves it is deliberately shorter (160 bits)
than the field size.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Union

from ecdhlib.ecc.curve import Curve
from ecdhlib.ecc.sec_point import point_from_str
from ecdhlib.exceptions import UnsupportedCurveError
from ecdhlib.utils import scalar_from_str

_LOGGER = logging.getLogger(__name__)


class CurveId(Enum):
    SECP160R1 = "secp160r1"
    SECP192K1 = "secp192k1"
    SECP192R1 = "secp192r1"
    SECP256K1 = "secp256k1"
    SECP256R1 = "secp256r1"


DEFAULT_CURVE_ID = CurveId.SECP192K1


def _curve_from_str(
    p: str, a: str, b: str, G: str, n: str, h: str, key_size_bits: int
) -> Curve:
    # standard parameters: the expensive nG = INF check is left to the test suite
    return Curve(
        scalar_from_str(p),
        scalar_from_str(a),
        scalar_from_str(b),
        point_from_str(G),
        scalar_from_str(n),
        scalar_from_str(h),
        key_size_bits=key_size_bits,
        order_check=False,
    )


def secp160r1() -> Curve:
    "SEC 2 v.1 secp160r1, the curve of the GEC 2 test vectors."
    return _curve_from_str(
        "ffffffff" "ffffffff" "ffffffff" "ffffffff" "7fffffff",
        "ffffffff" "ffffffff" "ffffffff" "ffffffff" "7ffffffc",
        "1c97befc" "54bd7a8b" "65acf89f" "81d4d4ad" "c565fa45",
        "04"
        "4a96b5688ef573284664698968c38bb913cbfc82"
        "23a628553168947d59dcc912042351377ac5fb32",
        "01" "00000000" "00000000" "0001f4c8" "f927aed3" "ca752257",
        "01",
        160,
    )


def secp192k1() -> Curve:
    "SEC 2 v.2 secp192k1, a Koblitz curve."
    return _curve_from_str(
        "ffffffffffffffff" "ffffffffffffffff" "fffffffeffffee37",
        "00",
        "03",
        "04"
        "db4ff10ec057e9ae26b07d0280b7f4341da5d1b1eae06c7d"
        "9b2f2f6d9c5628a7844163d015be86344082aa88d95e2f9d",
        "ffffffffffffffff" "fffffffe26f2fc17" "0f69466a74defd8d",
        "01",
        160,
    )


def secp192r1() -> Curve:
    "SEC 2 v.2 secp192r1, a verifiably random curve (NIST P-192)."
    return _curve_from_str(
        "FFFFFFFFFFFFFFFF" "FFFFFFFFFFFFFFFE" "FFFFFFFFFFFFFFFF",
        "FFFFFFFFFFFFFFFF" "FFFFFFFFFFFFFFFE" "FFFFFFFFFFFFFFFC",
        "64210519E59C80E7" "0FA7E9AB72243049" "FEB8DEECC146B9B1",
        "04"
        "188DA80EB03090F67CBF20EB43A18800F4FF0AFD82FF1012"
        "07192B95FFC8DA78631011ED6B24CDD573F977A11E794811",
        "FFFFFFFFFFFFFFFF" "FFFFFFFF99DEF836" "146BC9B1B4D22831",
        "01",
        160,
    )


def secp256k1() -> Curve:
    "SEC 2 v.2 secp256k1, the bitcoin Koblitz curve."
    return _curve_from_str(
        "FFFFFFFFFFFFFFFF" "FFFFFFFFFFFFFFFF" "FFFFFFFFFFFFFFFF" "FFFFFFFEFFFFFC2F",
        "00",
        "07",
        "04"
        "79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
        "483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8",
        "FFFFFFFFFFFFFFFF" "FFFFFFFFFFFFFFFE" "BAAEDCE6AF48A03B" "BFD25E8CD0364141",
        "01",
        256,
    )


def secp256r1() -> Curve:
    "SEC 2 v.2 secp256r1, a verifiably random curve (NIST P-256)."
    return _curve_from_str(
        "FFFFFFFF00000001" "0000000000000000" "00000000FFFFFFFF" "FFFFFFFFFFFFFFFF",
        "FFFFFFFF00000001" "0000000000000000" "00000000FFFFFFFF" "FFFFFFFFFFFFFFFC",
        "5AC635D8AA3A93E7" "B3EBBD55769886BC" "651D06B0CC53B0F6" "3BCE3C3E27D2604B",
        "04"
        "6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296"
        "4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5",
        "FFFFFFFF00000000" "FFFFFFFFFFFFFFFF" "BCE6FAADA7179E84" "F3B9CAC2FC632551",
        "01",
        256,
    )


CURVE_FACTORIES: Dict[CurveId, Callable[[], Curve]] = {
    CurveId.SECP160R1: secp160r1,
    CurveId.SECP192K1: secp192k1,
    CurveId.SECP192R1: secp192r1,
    CurveId.SECP256K1: secp256k1,
    CurveId.SECP256R1: secp256r1,
}


def curve_id_from(curve_id: Union[CurveId, str], strict: bool = False) -> CurveId:
    """Return the CurveId for a CurveId or its name (e.g. "secp192k1").

    Unknown identifiers fall back to DEFAULT_CURVE_ID, logging a warning,
    unless strict is True: then UnsupportedCurveError is raised.
    """

    if isinstance(curve_id, CurveId):
        return curve_id
    if isinstance(curve_id, str):
        names = {ec_id.value: ec_id for ec_id in CurveId}
        ec_name = curve_id.strip().lower()
        if ec_name in names:
            return names[ec_name]
    if strict:
        raise UnsupportedCurveError(f"unsupported curve: {curve_id!r}")
    _LOGGER.warning(
        "unsupported curve %r, falling back to %s", curve_id, DEFAULT_CURVE_ID.value
    )
    return DEFAULT_CURVE_ID


def curve_from_id(
    curve_id: Union[CurveId, str] = DEFAULT_CURVE_ID, strict: bool = False
) -> Curve:
    """Return a new Curve instance for the given identifier.

    Unknown identifiers fall back to DEFAULT_CURVE_ID (secp192k1),
    logging a warning, unless strict is True:
    then UnsupportedCurveError is raised.
    """

    return CURVE_FACTORIES[curve_id_from(curve_id, strict)]()

#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module ecdhlib.ecc."""

from ecdhlib.ecc.curve import Curve
from ecdhlib.ecc.curve_group import CurveGroup, point_add, point_double, scalar_mult
from ecdhlib.ecc.curves import (
    DEFAULT_CURVE_ID,
    CurveId,
    curve_from_id,
    curve_id_from,
    secp160r1,
    secp192k1,
    secp192r1,
    secp256k1,
    secp256r1,
)
from ecdhlib.ecc.dh import (
    KeyPair,
    ansi_x9_63_kdf,
    derive_shared_secret,
    diffie_hellman,
    generate_key_pair,
    random_prv_key,
)
from ecdhlib.ecc.sec_point import (
    bytes_from_point,
    point_from_octets,
    point_from_str,
    point_to_str,
)

__all__ = [
    "Curve",
    "CurveGroup",
    "point_add",
    "point_double",
    "scalar_mult",
    "DEFAULT_CURVE_ID",
    "CurveId",
    "curve_from_id",
    "curve_id_from",
    "secp160r1",
    "secp192k1",
    "secp192r1",
    "secp256k1",
    "secp256r1",
    "KeyPair",
    "ansi_x9_63_kdf",
    "derive_shared_secret",
    "diffie_hellman",
    "generate_key_pair",
    "random_prv_key",
    "bytes_from_point",
    "point_from_octets",
    "point_from_str",
    "point_to_str",
]

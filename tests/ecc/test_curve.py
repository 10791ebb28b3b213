#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecdhlib.curve` module."

import dataclasses
import secrets
from typing import Dict

import pytest

from ecdhlib.alias import INF
from ecdhlib.ecc.curve import Curve
from ecdhlib.ecc.curve_group import point_add, scalar_mult
from ecdhlib.ecc.curves import CURVE_FACTORIES
from ecdhlib.exceptions import ECDHlibValueError

# test curves: very low cardinality
low_card_curves: Dict[str, Curve] = {}
# 13 % 4 = 1; 13 % 8 = 5
low_card_curves["ec13_11"] = Curve(13, 7, 6, (1, 1), 11, 1, False)
low_card_curves["ec13_19"] = Curve(13, 0, 2, (1, 9), 19, 1, False)
# 17 % 4 = 1; 17 % 8 = 1
low_card_curves["ec17_13"] = Curve(17, 6, 8, (0, 12), 13, 2, False)
low_card_curves["ec17_23"] = Curve(17, 3, 5, (1, 14), 23, 1, False)
# 19 % 4 = 3; 19 % 8 = 3
low_card_curves["ec19_13"] = Curve(19, 0, 2, (4, 16), 13, 2, False)
low_card_curves["ec19_23"] = Curve(19, 2, 9, (0, 16), 23, 1, False)
# 23 % 4 = 3; 23 % 8 = 7
low_card_curves["ec23_19"] = Curve(23, 9, 7, (5, 4), 19, 1, False)
low_card_curves["ec23_31"] = Curve(23, 5, 1, (0, 1), 31, 1, False)

std_curves: Dict[str, Curve] = {
    ec_id.value: factory() for ec_id, factory in CURVE_FACTORIES.items()
}

all_curves: Dict[str, Curve] = {}
all_curves.update(low_card_curves)
all_curves.update(std_curves)


def test_exceptions() -> None:

    # good curve
    Curve(13, 0, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECDHlibValueError, match="p is not prime: "):
        Curve(15, 0, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECDHlibValueError, match="negative a: "):
        Curve(13, -1, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECDHlibValueError, match="p <= a: "):
        Curve(13, 13, 2, (1, 9), 19, 1, False)

    with pytest.raises(ECDHlibValueError, match="negative b: "):
        Curve(13, 0, -2, (1, 9), 19, 1, False)

    with pytest.raises(ECDHlibValueError, match="p <= b: "):
        Curve(13, 0, 13, (1, 9), 19, 1, False)

    with pytest.raises(ECDHlibValueError, match="zero discriminant"):
        Curve(11, 7, 7, (1, 9), 19, 1, False)

    err_msg = "Generator must a be a sequence\\[int, int\\]"
    with pytest.raises(ECDHlibValueError, match=err_msg):
        Curve(13, 0, 2, (1, 9, 1), 19, 1, False)  # type: ignore

    with pytest.raises(ECDHlibValueError, match="Generator is not on the curve"):
        Curve(13, 0, 2, (2, 9), 19, 1, False)

    with pytest.raises(ECDHlibValueError, match="n is not prime: "):
        Curve(13, 0, 2, (1, 9), 20, 1, False)

    with pytest.raises(ECDHlibValueError, match="n not in "):
        Curve(13, 0, 2, (1, 9), 71, 1, False)

    with pytest.raises(ECDHlibValueError, match="INF point cannot be a generator"):
        Curve(13, 0, 2, INF, 19, 1, False)  # type: ignore

    with pytest.raises(ECDHlibValueError, match="n is not the group order: "):
        Curve(13, 0, 2, (1, 9), 17, 1, False)

    # the order check is optional
    Curve(13, 0, 2, (1, 9), 17, 1, False, order_check=False)

    with pytest.raises(ECDHlibValueError, match="invalid cofactor: "):
        Curve(13, 0, 2, (1, 9), 19, 2, False)

    with pytest.raises(ECDHlibValueError, match="weak curve"):
        Curve(11, 2, 7, (6, 9), 7, 2, True)

    with pytest.raises(ECDHlibValueError, match="invalid key size: "):
        Curve(13, 0, 2, (1, 9), 19, 1, False, key_size_bits=0)


def test_key_size() -> None:
    ec = low_card_curves["ec13_19"]
    # default: the bit length of n
    assert ec.key_size_bits == 5 == ec.nlen
    assert ec.nsize == 1

    ec = Curve(13, 0, 2, (1, 9), 19, 1, False, key_size_bits=4)
    assert ec.key_size_bits == 4

    # shorter private keys for the 192-bit curves
    assert std_curves["secp192k1"].key_size_bits == 160
    assert std_curves["secp192r1"].key_size_bits == 160
    assert std_curves["secp192r1"].nlen == 192
    assert std_curves["secp160r1"].key_size_bits == 160
    assert std_curves["secp160r1"].nlen == 161
    assert std_curves["secp256k1"].key_size_bits == 256
    assert std_curves["secp256r1"].key_size_bits == 256


def test_p_size() -> None:
    assert low_card_curves["ec23_31"].p_size == 1
    assert std_curves["secp160r1"].p_size == 20
    assert std_curves["secp192k1"].p_size == 24
    assert std_curves["secp256r1"].p_size == 32


def test_group_order() -> None:
    "The registry skips the expensive nG = INF check: do it here."
    for ec in all_curves.values():
        assert scalar_mult(ec.G, ec.n, ec) is INF
        assert scalar_mult(ec.G, ec.n - 1, ec) == ec.negate(ec.G)
        assert scalar_mult(ec.G, ec.n + 1, ec) == ec.G


def test_low_card_group_order() -> None:
    "Exhaustive enumeration of the cyclic subgroup."
    for ec in low_card_curves.values():
        points = set()
        Q = ec.G
        for _ in range(1, ec.n):
            assert Q is not INF
            assert ec.is_on_curve(Q)
            points.add(Q)
            Q = point_add(Q, ec.G, ec)
        assert Q is INF
        assert len(points) == ec.n - 1


def test_ec_repr() -> None:
    for ec in all_curves.values():
        ec_repr = repr(ec)
        assert ec_repr.startswith("Curve(")
        if ec in low_card_curves.values():
            ec_repr = ec_repr[:-1] + ", False)"
        ec2 = eval(ec_repr)  # pylint: disable=eval-used # nosec
        assert str(ec) == str(ec2).replace(
            f"key = {ec2.key_size_bits}", f"key = {ec.key_size_bits}"
        )
        assert (ec.p, ec.a, ec.b, ec.G, ec.n, ec.h) == (
            ec2.p,
            ec2.a,
            ec2.b,
            ec2.G,
            ec2.n,
            ec2.h,
        )

    ec = low_card_curves["ec13_19"]
    assert repr(ec) == "Curve(13, 0, 2, (1, 9), 19, 1)"
    assert "\n key = 5 bits" in str(ec)


def test_immutable() -> None:
    ec = low_card_curves["ec23_31"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        ec.n = 29  # type: ignore
    with pytest.raises(dataclasses.FrozenInstanceError):
        ec.G = (1, 1)  # type: ignore

    # equal parameters, equal curves
    assert ec == Curve(23, 5, 1, (0, 1), 31, 1, False)
    assert hash(ec) == hash(Curve(23, 5, 1, (0, 1), 31, 1, False))
    assert ec != Curve(23, 5, 1, (0, 1), 31, 1, False, key_size_bits=4)


def test_hex_parameters() -> None:
    ec = std_curves["secp256k1"]
    ec2 = Curve(
        hex(ec.p),
        hex(ec.a),
        hex(ec.b),
        (hex(ec.G[0]), hex(ec.G[1])),
        hex(ec.n),
        ec.h,
        order_check=False,
    )
    assert ec2.G == ec.G
    assert ec2.n == ec.n


def test_random_multiples() -> None:
    for ec in all_curves.values():
        q = 1 + secrets.randbelow(ec.n - 1)
        Q = scalar_mult(ec.G, q, ec)
        assert ec.is_on_curve(Q)
        assert Q is not INF

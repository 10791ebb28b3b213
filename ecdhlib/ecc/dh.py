#!/usr/bin/env python3

# Copyright (C) 2020-2022 The ecdhlib developers
#
# This file is part of ecdhlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdhlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Diffie-Hellman elliptic curve key agreement scheme.

Implementation of the Diffie-Hellman key agreement scheme using
elliptic curve cryptography. A key agreement scheme is used
by two entities to establish shared keying data, which will be
later utilized e.g. in symmetric cryptographic scheme.

The two entities must agree on the elliptic curve and key derivation
function to use.

Each entity generates a KeyPair and publishes its public key string;
the shared secret is the uncompressed string of the point obtained
multiplying the peer public point by the own private key.
"""

import logging
import secrets
from hashlib import sha256
from math import ceil
from typing import Optional, Union

from ecdhlib.alias import ECPoint, HashF, InfinityPoint, Point, RandomSource, String
from ecdhlib.ecc.curve import Curve
from ecdhlib.ecc.curve_group import scalar_mult
from ecdhlib.ecc.curves import DEFAULT_CURVE_ID, CurveId, curve_from_id, curve_id_from
from ecdhlib.ecc.sec_point import point_from_str, point_to_str
from ecdhlib.exceptions import (
    ECDHlibRuntimeError,
    ECDHlibValueError,
    RandomnessUnavailableError,
)
from ecdhlib.utils import scalar_from_bytes

_LOGGER = logging.getLogger(__name__)

# a sound randomness source fails this many draws with negligible probability
MAX_DRAWS = 64


class KeyPair:
    """Private/public key pair on a given curve.

    The private key is available only through the prv_key() accessor
    and it is never part of the str/repr of the key pair.
    clear() zeroes the private key and releases the curve.
    """

    __slots__ = ("_prv_key", "_pub_point", "_pub_key", "_ec")

    def __init__(self, prv_key: int, ec: Curve) -> None:
        if not 0 < prv_key < ec.n:
            raise ECDHlibValueError("private key not in 1..n-1")
        self._prv_key = prv_key
        self._ec: Optional[Curve] = ec
        self._pub_point: ECPoint = scalar_mult(ec.G, prv_key, ec)
        self._pub_key = point_to_str(self._pub_point)

    def __repr__(self) -> str:
        status = "cleared" if self._ec is None else "active"
        return f"KeyPair(pub_key='{self._pub_key}', {status})"

    @property
    def ec(self) -> Curve:
        if self._ec is None:
            raise ECDHlibRuntimeError("key pair has been cleared")
        return self._ec

    @property
    def pub_key(self) -> str:
        "The public key as uncompressed point string."
        return self._pub_key

    @property
    def pub_point(self) -> ECPoint:
        return self._pub_point

    def prv_key(self) -> int:
        if self._ec is None:
            raise ECDHlibRuntimeError("key pair has been cleared")
        return self._prv_key

    def clear(self) -> None:
        self._prv_key = 0
        self._ec = None

    def shared_secret(self, peer_pub_key: String) -> str:
        return derive_shared_secret(self, peer_pub_key)


def random_prv_key(ec: Curve, rand: RandomSource = secrets.token_bytes) -> int:
    """Return a private key drawn from the randomness source.

    ceil(key_size_bits / 8) bytes are read and imported as
    big-endian unsigned integer, discarding the bits exceeding key_size_bits;
    the draw is repeated if the result is not in 1..n-1.

    The default source (os.urandom) may block until the
    system entropy pool is initialized: that is expected.
    Any failure of the source is fatal.
    """

    nbytes = ceil(ec.key_size_bits / 8)
    extra_bits = nbytes * 8 - ec.key_size_bits
    for draw in range(1, MAX_DRAWS + 1):
        try:
            data = rand(nbytes)
        except (OSError, NotImplementedError) as e:
            raise RandomnessUnavailableError("randomness source unavailable") from e
        if len(data) != nbytes:
            err_msg = f"randomness source returned {len(data)} bytes "
            err_msg += f"instead of {nbytes}"
            raise RandomnessUnavailableError(err_msg)
        prv_key = scalar_from_bytes(data) >> extra_bits
        if 0 < prv_key < ec.n:
            _LOGGER.debug("private key drawn in %d attempt(s)", draw)
            return prv_key
    raise RandomnessUnavailableError(f"no valid private key in {MAX_DRAWS} draws")


def generate_key_pair(
    curve_id: Union[CurveId, str] = DEFAULT_CURVE_ID,
    rand: RandomSource = secrets.token_bytes,
) -> KeyPair:
    """Return a new KeyPair on the curve identified by curve_id.

    Unknown identifiers fall back to the default curve,
    see ecdhlib.ecc.curves.curve_from_id.
    """

    ec_id = curve_id_from(curve_id)
    ec = curve_from_id(ec_id)
    _LOGGER.debug("generating a %d-bit key pair on %s", ec.key_size_bits, ec_id.value)
    return KeyPair(random_prv_key(ec, rand), ec)


def _shared_point(key_pair: KeyPair, peer_pub_key: String) -> Point:
    ec = key_pair.ec
    Q = point_from_str(peer_pub_key)
    if not ec.is_on_curve(Q):
        raise ECDHlibValueError("peer public key not on curve")
    shared_point = scalar_mult(Q, key_pair.prv_key(), ec)
    # Q is on a prime order curve, hence INF only if it has small order
    if isinstance(shared_point, InfinityPoint):
        raise ECDHlibRuntimeError("invalid (INF) shared secret")
    return shared_point


def derive_shared_secret(key_pair: KeyPair, peer_pub_key: String) -> str:
    """Return the shared secret as uncompressed point string.

    The peer public key is decoded and checked to be on
    the key pair curve, then multiplied by the private key.
    """

    return point_to_str(_shared_point(key_pair, peer_pub_key))


def ansi_x9_63_kdf(
    z: bytes, size: int, hf: HashF, shared_info: Optional[bytes]
) -> bytes:
    """Return keying data according to ANSI-X9.63-KDF.

    Return a keying data octet sequence of the requested size according
    to ANSI-X9.63-KDF specifications for the key derivation function.

    http://www.secg.org/sec1-v2.pdf, section 3.6.1
    """
    hf_size = hf().digest_size
    max_size = hf_size * (2 ** 32 - 1)
    if size > max_size:
        raise ECDHlibValueError(f"cannot derive a key larger than {max_size} bytes")
    K_temp = []
    for counter in range(1, ceil(size / hf_size) + 1):
        h = hf()
        hash_input = (
            z
            + counter.to_bytes(4, byteorder="big", signed=False)
            + (b"" if shared_info is None else shared_info)
        )
        h.update(hash_input)
        K_temp.append(h.digest())
    return b"".join(K_temp)[:size]


def diffie_hellman(
    key_pair: KeyPair,
    peer_pub_key: String,
    size: int,
    shared_info: Optional[bytes] = None,
    hf: HashF = sha256,
) -> bytes:
    """Diffie-Hellman elliptic curve key agreement scheme.

    Keying data are derived from the x-coordinate of the shared point.

    http://www.secg.org/sec1-v2.pdf, section 6.1
    """

    shared_point = _shared_point(key_pair, peer_pub_key)
    z = shared_point[0].to_bytes(key_pair.ec.p_size, byteorder="big", signed=False)
    return ansi_x9_63_kdf(z, size, hf, shared_info)

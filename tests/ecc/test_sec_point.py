#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkeychain.ecc.sec_point` module."

import pytest

from hdkeychain.ecc.curve import Curve, secp256k1
from hdkeychain.ecc.number_theory import legendre_symbol
from hdkeychain.ecc.point import INF, Point
from hdkeychain.ecc.sec_point import bytes_from_point, hex_from_point, point_from_octets
from hdkeychain.exceptions import HDKeychainValueError

ec = secp256k1


def test_generator() -> None:
    G_compressed = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    assert hex_from_point(ec.G) == G_compressed
    assert bytes_from_point(ec.G) == bytes.fromhex(G_compressed)

    G_uncompressed = (
        "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
        "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
    )
    assert hex_from_point(ec.G, compressed=False) == G_uncompressed

    assert point_from_octets(G_compressed) == ec.G
    assert point_from_octets(G_uncompressed) == ec.G

    # odd y-coordinate
    minus_G = ec.negate(ec.G)
    assert hex_from_point(minus_G)[:2] == "03"
    assert point_from_octets(bytes_from_point(minus_G)) == minus_G


def test_low_cardinality() -> None:
    small = Curve(13, 0, 2, (1, 9), 19, 1)
    for q in range(1, small.n):
        Q = small.mult(q)
        assert point_from_octets(bytes_from_point(Q, small), small) == Q
        Q_bytes = bytes_from_point(Q, small, False)
        assert point_from_octets(Q_bytes, small) == Q


def test_exceptions() -> None:

    with pytest.raises(HDKeychainValueError, match="no bytes representation for infinity"):
        bytes_from_point(INF)
    with pytest.raises(HDKeychainValueError, match="point not on curve"):
        bytes_from_point(Point(1, 1))

    G_bytes = bytes_from_point(ec.G)
    with pytest.raises(HDKeychainValueError, match="not a point: "):
        point_from_octets(b"\x01" + G_bytes[1:])

    with pytest.raises(HDKeychainValueError, match="invalid size for compressed point: "):
        point_from_octets(b"\x02" + bytes_from_point(ec.G, compressed=False)[1:])

    with pytest.raises(HDKeychainValueError, match="invalid size for uncompressed point: "):
        point_from_octets(b"\x04" + G_bytes[1:])

    with pytest.raises(HDKeychainValueError, match="invalid size: "):
        point_from_octets(G_bytes[:-1])

    # first x without a square root for x^3 + 7 modulo p
    x = 1
    while legendre_symbol((x * x * x + 7) % ec.p, ec.p) == 1:
        x += 1
    with pytest.raises(HDKeychainValueError, match="invalid x-coordinate: "):
        point_from_octets(b"\x02" + x.to_bytes(32, "big"))

    G_uncompressed = bytearray(bytes_from_point(ec.G, compressed=False))
    G_uncompressed[-1] ^= 0x01
    with pytest.raises(HDKeychainValueError, match="point not on curve: "):
        point_from_octets(G_uncompressed)

    with pytest.raises(HDKeychainValueError, match="invalid x-coordinate: "):
        point_from_octets(b"\x02" + ec.p.to_bytes(32, "big"))

#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkeychain.ecc.curve` module."

import pytest

from hdkeychain.ecc import CURVES, Curve, mult, secp256k1
from hdkeychain.ecc.point import INF, Point
from hdkeychain.exceptions import HDKeychainTypeError, HDKeychainValueError


def test_secp256k1() -> None:
    ec = secp256k1
    assert CURVES["secp256k1"] is ec
    assert ec.name == "secp256k1"
    assert ec.p == 2**256 - 2**32 - 977
    assert ec.a == 0
    assert ec.b == 7
    assert ec.h == 1
    assert ec.p_size == 32
    assert ec.is_on_curve(ec.G)
    assert ec.G.x == 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
    assert ec.n == 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

    assert "secp256k1" not in repr(ec)
    assert repr(ec).startswith("Curve(")
    assert "n   = " in str(ec)


def test_exceptions() -> None:
    # good curve
    Curve(13, 0, 2, (1, 9), 19, 1)

    with pytest.raises(HDKeychainValueError, match="generator is not on curve"):
        Curve(13, 0, 2, (2, 9), 19, 1)
    with pytest.raises(HDKeychainValueError, match="n is not prime: "):
        Curve(13, 0, 2, (1, 9), 20, 1)
    with pytest.raises(HDKeychainValueError, match="n not in p"):
        Curve(13, 0, 2, (1, 9), 71, 1)
    with pytest.raises(HDKeychainValueError, match="n is not the group order: "):
        Curve(13, 0, 2, (1, 9), 17, 1)


def test_mult() -> None:
    ec = secp256k1
    assert ec.mult(1) == ec.G
    assert ec.mult(0) is INF
    assert ec.mult(ec.n) is INF
    assert ec.mult(ec.n + 1) == ec.G
    assert ec.mult(-1) == ec.negate(ec.G)
    assert ec.mult(2, ec.G) == ec.double(ec.G)
    assert ec.mult("0x2") == ec.double(ec.G)

    assert mult(3) == ec.add(ec.G, ec.double(ec.G))
    assert mult(3, ec.mult(2)) == ec.mult(6)

    with pytest.raises(HDKeychainValueError, match="point not on curve"):
        ec.mult(2, Point(1, 1))
    with pytest.raises(HDKeychainTypeError, match="not a point"):
        ec.mult(2, (1, 1))  # type: ignore

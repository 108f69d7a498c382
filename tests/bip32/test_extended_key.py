#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkeychain.bip32.extended_key` module."

from dataclasses import FrozenInstanceError

import pytest

from hdkeychain.bip32.der_path import DerivationStep
from hdkeychain.bip32.extended_key import ZERO_FINGERPRINT, ExtendedKey
from hdkeychain.ecc.curve import secp256k1
from hdkeychain.ecc.point import Point
from hdkeychain.exceptions import HDKeychainTypeError, HDKeychainValueError

# BIP32 test vector 1, master key
prv_key = bytes.fromhex(
    "e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35"
)
chain_code = bytes.fromhex(
    "873dff81c02f525623fd1fe5167eac3a55a049de3d314bb42ee227ffed37d508"
)
pub_key_hex = "0339a36013301597daef41fbe593a02cc513d0b55527ec2df1050e2e8ff49c85c2"


def test_master_key() -> None:
    key = ExtendedKey(prv_key, chain_code)
    assert key.depth == 0
    assert key.index == 0
    assert key.is_root
    assert not key.is_hardened
    assert key.path == ()
    assert key.path_str == "m"
    assert key.parent_fingerprint == ZERO_FINGERPRINT
    assert key.prv_key_int == int(prv_key.hex(), 16)

    assert key.public_key_hex() == pub_key_hex
    assert key.public_key() == bytes.fromhex(pub_key_hex)
    uncompressed = key.public_key(compressed=False)
    assert len(uncompressed) == 65
    assert uncompressed[0] == 4
    assert uncompressed[1:33] == key.public_key()[1:]
    assert key.public_key_hex(False) == uncompressed.hex()

    assert isinstance(key.public_point, Point)
    assert key.public_point is key.public_point
    assert secp256k1.is_on_curve(key.public_point)

    assert key.fingerprint == bytes.fromhex("3442193e")
    assert key.identifier[:4] == key.fingerprint
    assert len(key.identifier) == 20


def test_repr_hides_private_key() -> None:
    key = ExtendedKey(prv_key, chain_code)
    assert "private_key" not in repr(key)
    assert prv_key.hex() not in repr(key)
    assert str(prv_key) not in repr(key)
    assert "chain_code" in repr(key)


def test_immutability_and_equality() -> None:
    key = ExtendedKey(prv_key, chain_code)
    with pytest.raises(FrozenInstanceError):
        key.chain_code = b"\x00" * 32  # type: ignore

    # public_point caching does not interfere with equality
    _ = key.public_point
    other = ExtendedKey(prv_key, chain_code)
    assert key == other
    assert hash(key) == hash(other)
    assert key != ExtendedKey(prv_key, chain_code[::-1])


def test_child_key() -> None:
    path = [DerivationStep(0, True), DerivationStep(1)]
    key = ExtendedKey(prv_key, chain_code, path, bytes.fromhex("5c1bd648"))
    assert key.path == tuple(path)
    assert key.depth == 2
    assert key.index == 1
    assert not key.is_root
    assert not key.is_hardened
    assert key.path_str == "m/0'/1"

    key = ExtendedKey(prv_key, chain_code, path[:1], bytes.fromhex("3442193e"))
    assert key.index == 0x80000000
    assert key.is_hardened

    # a zero parent fingerprint is not forbidden at non-zero depth
    key = ExtendedKey(prv_key, chain_code, path)
    assert key.parent_fingerprint == ZERO_FINGERPRINT

    path = [DerivationStep(0)] * 255
    key = ExtendedKey(prv_key, chain_code, path, b"\x01" * 4)
    assert key.depth == 255


def test_exceptions() -> None:

    with pytest.raises(HDKeychainTypeError, match="private_key is not an instance"):
        ExtendedKey(prv_key.hex(), chain_code)  # type: ignore
    with pytest.raises(HDKeychainTypeError, match="chain_code is not an instance"):
        ExtendedKey(prv_key, bytearray(chain_code))  # type: ignore
    with pytest.raises(HDKeychainValueError, match="invalid private_key length: "):
        ExtendedKey(prv_key[1:], chain_code)
    with pytest.raises(HDKeychainValueError, match="invalid chain_code length: "):
        ExtendedKey(prv_key, chain_code + b"\x00")
    with pytest.raises(HDKeychainValueError, match="invalid parent_fingerprint length"):
        ExtendedKey(prv_key, chain_code, (), b"\x00" * 5)

    with pytest.raises(HDKeychainTypeError, match="not a derivation step: "):
        ExtendedKey(prv_key, chain_code, (0,), b"\x01" * 4)  # type: ignore
    with pytest.raises(HDKeychainValueError, match="invalid depth: 256"):
        ExtendedKey(prv_key, chain_code, [DerivationStep(0)] * 256, b"\x01" * 4)

    err_msg = "zero depth with non-zero parent fingerprint: "
    with pytest.raises(HDKeychainValueError, match=err_msg):
        ExtendedKey(prv_key, chain_code, (), b"\x01" * 4)

    err_msg = "private key not in 1..n-1"
    with pytest.raises(HDKeychainValueError, match=err_msg):
        ExtendedKey(b"\x00" * 32, chain_code)
    with pytest.raises(HDKeychainValueError, match=err_msg):
        ExtendedKey(secp256k1.n.to_bytes(32, byteorder="big"), chain_code)
    with pytest.raises(HDKeychainValueError, match=err_msg):
        ExtendedKey(b"\xff" * 32, chain_code)

    ExtendedKey((secp256k1.n - 1).to_bytes(32, byteorder="big"), chain_code)
    ExtendedKey(b"\x00" * 31 + b"\x01", chain_code)

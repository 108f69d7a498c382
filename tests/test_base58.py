#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdkeychain.base58` module."

import pytest

from hdkeychain.base58 import _b58decode, _b58encode, b58decode, b58encode
from hdkeychain.exceptions import HDKeychainTypeError, HDKeychainValueError

# raw Base58 vectors, as in bitcoin-core src/test/data/base58_encode_decode.json
raw_vectors = [
    ("", ""),
    ("61", "2g"),
    ("626262", "a3gV"),
    ("636363", "aPEr"),
    ("73696d706c792061206c6f6e6720737472696e67", "2cFupjhnEsSn59qHXstmK2ffpLv2"),
    ("516b6fcd0f", "ABnLTmg"),
    ("bf4f89001e670274dd", "3SEo3LWLoPntC"),
    ("572e4794", "3EFU7m"),
    ("ecac89cad93923c02321", "EJDM8drfXA6uyA"),
    ("10c8511e", "Rt5zm"),
    ("00000000000000000000", "1111111111"),
]


def test_raw_vectors() -> None:
    for hex_data, encoded in raw_vectors:
        data = bytes.fromhex(hex_data)
        assert _b58encode(data) == encoded.encode("ascii")
        assert _b58decode(encoded.encode("ascii")) == data


def test_checksum_round_trip() -> None:
    for hex_data, _ in raw_vectors:
        data = bytes.fromhex(hex_data)
        encoded = b58encode(data)
        assert b58decode(encoded) == data
        assert b58decode(encoded.decode("ascii"), len(data)) == data
        assert b58encode(hex_data) == encoded

    # leading zero bytes are preserved as leading ones
    encoded = b58encode(b"\x00\x00\x01")
    assert encoded.startswith(b"11")
    assert b58decode(encoded) == b"\x00\x00\x01"


def test_wif() -> None:
    # https://en.bitcoin.it/wiki/Wallet_import_format
    prv_key = "0C28FCA386C7A227600B2FE50B7CAE11EC86D3BF1FBE471BE89827E19D72AA1D"

    wif = b"5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ"
    assert b58encode("80" + prv_key) == wif
    assert b58decode(wif, 33) == bytes.fromhex("80" + prv_key)

    # compressed public key flag
    wif = b"KwdMAjGmerYanjeui5SHS7JkmpZvVipYvB2LJGU1ZxJwYvP98617"
    assert b58encode("80" + prv_key + "01") == wif
    assert b58decode(wif, 34) == bytes.fromhex("80" + prv_key + "01")


def test_exceptions() -> None:

    encoded = b58encode("516b6fcd0f")

    with pytest.raises(HDKeychainValueError, match="invalid decoded size: "):
        b58decode(encoded, 4)

    tampered = encoded[:-1] + (b"2" if encoded[-1:] != b"2" else b"3")
    with pytest.raises(HDKeychainValueError, match="invalid checksum: "):
        b58decode(tampered)

    err_msg = "Base58 string contains invalid characters"
    for invalid in ("0", "O", "I", "l", "+", "/", "abè"):
        with pytest.raises(HDKeychainValueError, match=err_msg):
            b58decode(invalid)

    err_msg = "not enough bytes for checksum, invalid base58 decoded size: "
    with pytest.raises(HDKeychainValueError, match=err_msg):
        b58decode(_b58encode(b"\x01\x02\x03"))
    with pytest.raises(HDKeychainValueError, match=err_msg):
        b58decode("")

    with pytest.raises(HDKeychainValueError, match="invalid size: "):
        b58encode("516b6fcd0f", 4)
    with pytest.raises(HDKeychainTypeError, match="not bytes or hex-string: "):
        b58encode(0x516B6FCD0F)  # type: ignore

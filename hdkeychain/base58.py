#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58 and Base58Check codecs.

The Base58 alphabet is the alphanumeric one,
without the easily confused 0, O, I, and l characters.
Leading zero bytes are encoded one by one as leading '1' characters.

Base58Check appends the first four bytes of HASH256(payload)
before encoding; decoding verifies them.
Encoding returns ASCII bytes; decoding accepts ASCII bytes or str.
"""

from typing import Optional

from hdkeychain.alias import Octets, String
from hdkeychain.exceptions import HDKeychainValueError
from hdkeychain.hashes import hash256
from hdkeychain.utils import bytes_from_octets

_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE = len(_ALPHABET)
_ZERO = _ALPHABET[:1]
_CHECKSUM_SIZE = 4


def _b58encode(v: bytes) -> bytes:

    payload = v.lstrip(b"\0")
    n_zeros = len(v) - len(payload)

    num = int.from_bytes(payload, byteorder="big", signed=False)
    digits = bytearray()
    while num:
        num, rem = divmod(num, _BASE)
        digits.append(_ALPHABET[rem])
    digits.reverse()

    return _ZERO * n_zeros + bytes(digits)


def _b58decode(v: bytes) -> bytes:

    if any(char not in _ALPHABET for char in v):
        raise HDKeychainValueError("Base58 string contains invalid characters")

    payload = v.lstrip(_ZERO)
    n_zeros = len(v) - len(payload)

    num = 0
    for char in payload:
        num = num * _BASE + _ALPHABET.index(char)
    size = (num.bit_length() + 7) // 8
    return b"\0" * n_zeros + num.to_bytes(size, byteorder="big", signed=False)


def b58encode(v: Octets, in_size: Optional[int] = None) -> bytes:
    "Base58Check encoding, optionally requiring the input size."

    payload = bytes_from_octets(v, in_size)
    return _b58encode(payload + hash256(payload)[:_CHECKSUM_SIZE])


def b58decode(v: String, out_size: Optional[int] = None) -> bytes:
    "Base58Check decoding, optionally requiring the output size."

    if isinstance(v, str):
        # blanks are not stripped here
        try:
            v = v.encode("ascii")
        except UnicodeEncodeError as e:
            raise HDKeychainValueError("Base58 string contains invalid characters") from e

    decoded = _b58decode(v)
    if len(decoded) < _CHECKSUM_SIZE:
        err_msg = "not enough bytes for checksum, "
        err_msg += f"invalid base58 decoded size: {len(decoded)}"
        raise HDKeychainValueError(err_msg)

    payload, checksum = decoded[:-_CHECKSUM_SIZE], decoded[-_CHECKSUM_SIZE:]
    expected = hash256(payload)[:_CHECKSUM_SIZE]
    if checksum != expected:
        err_msg = f"invalid checksum: 0x{checksum.hex()} instead of 0x{expected.hex()}"
        raise HDKeychainValueError(err_msg)

    if out_size is not None and len(payload) != out_size:
        err_msg = "valid checksum, invalid decoded size: "
        err_msg += f"{len(payload)} bytes instead of {out_size}"
        raise HDKeychainValueError(err_msg)
    return payload

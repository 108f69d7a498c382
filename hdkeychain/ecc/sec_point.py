#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC 1 v.2 encoding of curve points (section 2.3.3 and 2.3.4).

- compressed: 0x02 (even y) or 0x03 (odd y), then x
- uncompressed: 0x04, then x and y

each coordinate being p_size big-endian bytes.
"""

from hdkeychain.alias import Octets
from hdkeychain.ecc.curve import Curve, secp256k1
from hdkeychain.ecc.point import CurvePoint, Infinity, Point
from hdkeychain.exceptions import HDKeychainValueError
from hdkeychain.utils import bytes_from_octets, hex_string


def bytes_from_point(
    Q: CurvePoint, ec: Curve = secp256k1, compressed: bool = True
) -> bytes:
    "Return the SEC encoding of a curve point other than INF."

    if isinstance(Q, Infinity):
        raise HDKeychainValueError("no bytes representation for infinity point")
    ec.require_on_curve(Q)

    x = Q.x.to_bytes(ec.p_size, byteorder="big", signed=False)
    if compressed:
        prefix = b"\x03" if Q.y % 2 else b"\x02"
        return prefix + x
    return b"\x04" + x + Q.y.to_bytes(ec.p_size, byteorder="big", signed=False)


def hex_from_point(
    Q: CurvePoint, ec: Curve = secp256k1, compressed: bool = True
) -> str:
    """Return the SEC encoding of a curve point as hex-string.

    For secp256k1 it is '02' or '03' followed by 64 hex-digits,
    or '04' followed by 128 hex-digits.
    """
    return bytes_from_point(Q, ec, compressed).hex()


def point_from_octets(pub_key: Octets, ec: Curve = secp256k1) -> Point:
    "Return the curve point of a SEC encoding, checking it is on the curve."

    compressed_size = ec.p_size + 1
    uncompressed_size = 2 * ec.p_size + 1
    pub_key = bytes_from_octets(pub_key, (compressed_size, uncompressed_size))
    size = len(pub_key)
    prefix = pub_key[0]

    if prefix in (0x02, 0x03):
        if size != compressed_size:
            err_msg = "invalid size for compressed point: "
            err_msg += f"{size} instead of {compressed_size}"
            raise HDKeychainValueError(err_msg)
        x = int.from_bytes(pub_key[1:], byteorder="big", signed=False)
        try:
            y = ec.y_even(x)
        except HDKeychainValueError as e:
            err_msg = f"invalid x-coordinate: '{hex_string(x)}'"
            raise HDKeychainValueError(err_msg) from e
        return Point(x, y if prefix == 0x02 else ec.p - y)

    if prefix == 0x04:
        if size != uncompressed_size:
            err_msg = "invalid size for uncompressed point: "
            err_msg += f"{size} instead of {uncompressed_size}"
            raise HDKeychainValueError(err_msg)
        x = int.from_bytes(pub_key[1:compressed_size], byteorder="big", signed=False)
        y = int.from_bytes(pub_key[compressed_size:], byteorder="big", signed=False)
        Q = Point(x, y)
        if not ec.is_on_curve(Q):
            raise HDKeychainValueError(f"point not on curve: {Q}")
        return Q

    raise HDKeychainValueError(f"not a point: {pub_key!r}")

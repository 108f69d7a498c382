#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Input normalization helpers.

Public functions accept bytes or hex-strings (Octets)
and several integer representations (Integer):
these helpers turn them into the canonical bytes and int types.
"""

from collections.abc import Iterable as IterableCollection
from io import BytesIO
from typing import Iterable, Optional, Union

from hdkeychain.alias import BinaryData, Integer, Octets
from hdkeychain.exceptions import HDKeychainTypeError, HDKeychainValueError

Sizes = Optional[Union[int, Iterable[int]]]


def _size_ok(size: int, out_size: Sizes) -> bool:
    if out_size is None:
        return True
    if isinstance(out_size, int):
        return size == out_size
    return isinstance(out_size, IterableCollection) and size in out_size


def bytes_from_octets(octets: Octets, out_size: Sizes = None) -> bytes:
    """Return bytes from bytes-like objects or hex-strings.

    Blanks in hex-strings are allowed, e.g. "0488 ade4".
    If out_size is an int (or a collection of int)
    the result length is required to match it.
    """

    if isinstance(octets, str):
        octets = bytes.fromhex(octets)
    elif isinstance(octets, (bytearray, memoryview)):
        octets = bytes(octets)
    elif not isinstance(octets, bytes):
        err_msg = f"not bytes or hex-string: {type(octets).__name__}"
        raise HDKeychainTypeError(err_msg)

    if not _size_ok(len(octets), out_size):
        err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
        raise HDKeychainValueError(err_msg)
    return octets


def bytesio_from_binarydata(stream: BinaryData) -> BytesIO:
    "Wrap Octets in a BytesIO stream; an existing stream is returned as is."

    if isinstance(stream, (str, bytes)):
        return BytesIO(bytes_from_octets(stream))
    return stream


def int_from_integer(i: Integer) -> int:
    """Return an int from its int, hex-string, or bytes representation.

    Hex-strings with a '0x' prefix may be negative ("-0xdeadbeef");
    hex-strings without prefix and bytes are big-endian unsigned.
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith(("0x", "-0x")):
            return int(i, 16)
        i = bytes.fromhex(i)

    return int.from_bytes(i, byteorder="big", signed=False)


def hex_string(i: Integer) -> str:
    """Return the upper case hex-string of a non-negative integer.

    It has an even number of hex-digits, grouped
    in blocks of eight hex-digits (i.e. four bytes),
    e.g. "01 DEADBEEF".
    """

    value = int_from_integer(i)
    if value < 0:
        raise HDKeychainValueError(f"negative integer: {value}")
    digits = f"{value:X}"
    if len(digits) % 2:
        digits = "0" + digits

    head = len(digits) % 8 or 8
    groups = [digits[:head]]
    groups += [digits[j : j + 8] for j in range(head, len(digits), 8)]
    return " ".join(groups)

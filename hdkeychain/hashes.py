#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash functions used by BIP32 and Base58Check.

- HMAC-SHA512: master key and child key derivation
- HASH160: key identifiers and fingerprints
- HASH256: Base58Check checksums
"""

import hashlib
import hmac

from hdkeychain.alias import Octets
from hdkeychain.utils import bytes_from_octets

# OpenSSL 3 moved ripemd160 to its legacy provider,
# which must be loaded for hashlib.new("ripemd160") to work
try:
    hashlib.new("ripemd160")
except ValueError:  # pragma: no cover
    import ctypes

    ctypes.CDLL("libssl.so").OSSL_PROVIDER_load(None, b"legacy")
    ctypes.CDLL("libssl.so").OSSL_PROVIDER_load(None, b"default")


def ripemd160(octets: Octets) -> bytes:
    "RIPEMD160 digest (20 bytes)."
    return hashlib.new("ripemd160", bytes_from_octets(octets)).digest()


def sha256(octets: Octets) -> bytes:
    "SHA256 digest (32 bytes)."
    return hashlib.sha256(bytes_from_octets(octets)).digest()


def hash160(octets: Octets) -> bytes:
    "RIPEMD160(SHA256(octets)), e.g. a public key identifier."
    return ripemd160(sha256(octets))


def hash256(octets: Octets) -> bytes:
    "SHA256(SHA256(octets)), e.g. the Base58Check checksum source."
    return sha256(sha256(octets))


def hmac_sha512(key: bytes, data: bytes) -> bytes:
    "Return the 64 bytes HMAC-SHA512 of data keyed by key."
    return hmac.new(key, data, "sha512").digest()

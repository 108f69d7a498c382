#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 extended private key.

An extended key bundles a private key with its chain code
and the derivation metadata:
the derivation path (whose length is the depth)
and the fingerprint of the parent key.

Extended keys are immutable:
derivation always returns a new key, never modifying its parent.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Tuple

from hdkeychain.bip32.der_path import MAX_DEPTH, DerivationStep, str_from_steps
from hdkeychain.ecc.curve import secp256k1
from hdkeychain.ecc.point import Point
from hdkeychain.ecc.sec_point import bytes_from_point
from hdkeychain.exceptions import HDKeychainTypeError, HDKeychainValueError
from hdkeychain.hashes import hash160

ec = secp256k1

KEY_SIZE = 32
FINGERPRINT_SIZE = 4
ZERO_FINGERPRINT = b"\x00" * FINGERPRINT_SIZE


@dataclass(frozen=True)
class ExtendedKey:
    private_key: bytes = field(repr=False)
    chain_code: bytes
    path: Tuple[DerivationStep, ...] = ()
    parent_fingerprint: bytes = ZERO_FINGERPRINT

    def __post_init__(self) -> None:

        for name, size in (
            ("private_key", KEY_SIZE),
            ("chain_code", KEY_SIZE),
            ("parent_fingerprint", FINGERPRINT_SIZE),
        ):
            value = getattr(self, name)
            if not isinstance(value, bytes):
                raise HDKeychainTypeError(f"{name} is not an instance of bytes")
            if len(value) != size:
                err_msg = f"invalid {name} length: "
                err_msg += f"{len(value)} bytes instead of {size}"
                raise HDKeychainValueError(err_msg)

        # accept any sequence, store an immutable tuple
        object.__setattr__(self, "path", tuple(self.path))
        for step in self.path:
            if not isinstance(step, DerivationStep):
                raise HDKeychainTypeError(f"not a derivation step: {step!r}")
        if len(self.path) > MAX_DEPTH:
            raise HDKeychainValueError(f"invalid depth: {len(self.path)}")

        if not self.path and self.parent_fingerprint != ZERO_FINGERPRINT:
            err_msg = "zero depth with non-zero parent fingerprint: "
            err_msg += f"0x{self.parent_fingerprint.hex()}"
            raise HDKeychainValueError(err_msg)

        if not 0 < self.prv_key_int < ec.n:
            raise HDKeychainValueError("private key not in 1..n-1")

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def index(self) -> int:
        "Child number of the last derivation step, 0 for the master key."
        return self.path[-1].child_number if self.path else 0

    @property
    def is_root(self) -> bool:
        return not self.path

    @property
    def is_hardened(self) -> bool:
        return bool(self.path) and self.path[-1].hardened

    @property
    def prv_key_int(self) -> int:
        return int.from_bytes(self.private_key, byteorder="big", signed=False)

    @cached_property
    def public_point(self) -> Point:
        "The curve point k*G, computed once per key."
        return ec.mult(self.prv_key_int)

    def public_key(self, compressed: bool = True) -> bytes:
        "Return the SEC compressed (33 bytes) or uncompressed (65 bytes) public key."
        return bytes_from_point(self.public_point, ec, compressed)

    def public_key_hex(self, compressed: bool = True) -> str:
        return self.public_key(compressed).hex()

    @property
    def identifier(self) -> bytes:
        "HASH160 of the compressed public key."
        return hash160(self.public_key())

    @property
    def fingerprint(self) -> bytes:
        "Fingerprint of this key, i.e. the parent fingerprint of its children."
        return self.identifier[:FINGERPRINT_SIZE]

    @property
    def path_str(self) -> str:
        return str_from_steps(self.path)

#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 Hierarchical Deterministic Wallet functions.

A deterministic wallet is a hash-chain of private/public key pairs that
derives from a single root, which is the only element requiring backup.

A hierarchical deterministic wallet is a tree of multiple hash-chains,
derived from a single root, allowing for selective sharing of keypair
chains.

Here, the HD wallet is implemented according to BIP32 bitcoin standard
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki.

Private parent key → private child key derivation (CKDpriv):

- hardened: I = HMAC-SHA512(c_par, 0x00 || k_par || ser32(i + 2^31))
- normal: I = HMAC-SHA512(c_par, serP(point(k_par)) || ser32(i))

with I[:32] added to k_par (mod n) and I[32:] as child chain code.
"""

import logging
from typing import Union

from hdkeychain.alias import Octets
from hdkeychain.bip32.der_path import (
    MAX_DEPTH,
    DerivationStep,
    DerPath,
    steps_from_der_path,
)
from hdkeychain.bip32.extended_key import FINGERPRINT_SIZE, KEY_SIZE, ExtendedKey, ec
from hdkeychain.exceptions import (
    HDKeychainTypeError,
    HDKeychainValueError,
    InvalidChildKeyError,
    SeedDecodeError,
)
from hdkeychain.hashes import hash160, hmac_sha512
from hdkeychain.utils import bytes_from_octets, hex_string

log = logging.getLogger(__name__)

# domain separation constant for the master key
_SEED_HMAC_KEY = b"Bitcoin seed"
_MIN_SEED_BITS = 128
_MAX_SEED_BITS = 512


def _seed_from_octets(seed: Union[Octets, bytearray]) -> bytes:

    try:
        seed = bytes_from_octets(seed)
    except HDKeychainTypeError as e:
        raise SeedDecodeError(f"seed is not bytes or hex-string: {e}") from e
    except ValueError as e:
        # bytes.fromhex raises a plain ValueError
        raise SeedDecodeError(f"invalid hex-string seed: {e}") from e

    bitlength = len(seed) * 8
    if bitlength < _MIN_SEED_BITS:
        err_msg = f"too few bits for seed: {bitlength} in '{hex_string(seed)}'"
        raise SeedDecodeError(err_msg)
    if bitlength > _MAX_SEED_BITS:
        err_msg = f"too many bits for seed: {bitlength} in '{hex_string(seed)}'"
        raise SeedDecodeError(err_msg)
    return seed


def rootkey_from_seed(seed: Union[Octets, bytearray]) -> ExtendedKey:
    """Return the BIP32 master extended key from seed.

    The seed can be provided as bytes or hex-string,
    and must be 128 to 512 bits long.
    """

    seed = _seed_from_octets(seed)
    hmac_ = hmac_sha512(_SEED_HMAC_KEY, seed)
    k = int.from_bytes(hmac_[:KEY_SIZE], byteorder="big", signed=False)
    if not 0 < k < ec.n:
        # BIP32 has no recovery here: a different seed is needed
        raise InvalidChildKeyError("invalid master key not in 1..n-1")

    log.debug("master key from %d bits seed", len(seed) * 8)
    return ExtendedKey(private_key=hmac_[:KEY_SIZE], chain_code=hmac_[KEY_SIZE:])


def derive(parent: ExtendedKey, step: DerivationStep) -> ExtendedKey:
    """Return the child of the parent key at the given derivation step.

    The parent key is left untouched.

    In the (very unlikely) case of an invalid child key,
    InvalidChildKeyError is raised: BIP32 mandates to proceed
    with the next index, which is a decision left to the caller.
    """

    if not isinstance(parent, ExtendedKey):
        raise HDKeychainTypeError(f"not an extended key: {type(parent).__name__}")
    if not isinstance(step, DerivationStep):
        raise HDKeychainTypeError(f"not a derivation step: {step!r}")
    if parent.depth >= MAX_DEPTH:
        raise HDKeychainValueError(f"depth greater than {MAX_DEPTH}")

    parent_pub_key = parent.public_key()
    child_number = step.child_number.to_bytes(4, byteorder="big", signed=False)
    if step.hardened:
        data = b"\x00" + parent.private_key + child_number
    else:
        data = parent_pub_key + child_number
    hmac_ = hmac_sha512(parent.chain_code, data)

    offset = int.from_bytes(hmac_[:KEY_SIZE], byteorder="big", signed=False)
    if offset >= ec.n:
        err_msg = f"invalid child key at {step}: offset not in 0..n-1"
        raise InvalidChildKeyError(err_msg, step)
    k = (offset + parent.prv_key_int) % ec.n
    if k == 0:
        raise InvalidChildKeyError(f"invalid child key at {step}: zero", step)

    child = ExtendedKey(
        private_key=k.to_bytes(KEY_SIZE, byteorder="big", signed=False),
        chain_code=hmac_[KEY_SIZE:],
        path=parent.path + (step,),
        parent_fingerprint=hash160(parent_pub_key)[:FINGERPRINT_SIZE],
    )
    log.debug(
        "derived %s at depth %d from parent 0x%s",
        step,
        child.depth,
        child.parent_fingerprint.hex(),
    )
    return child


def derive_path(key: ExtendedKey, der_path: DerPath) -> ExtendedKey:
    """Derive a BIP32 key across a path spanning multiple depth levels.

    Valid DerPath examples:

    - string like "m/44h/0'/1H/0/10" (relative to key, the 'm' is optional)
    - sequence of DerivationStep

    No retry is attempted on invalid child keys:
    InvalidChildKeyError propagates to the caller.
    """

    if not isinstance(key, ExtendedKey):
        raise HDKeychainTypeError(f"not an extended key: {type(key).__name__}")
    steps = steps_from_der_path(der_path)
    final_depth = key.depth + len(steps)
    if final_depth > MAX_DEPTH:
        raise HDKeychainValueError(f"final depth greater than {MAX_DEPTH}: {final_depth}")

    for step in steps:
        key = derive(key, step)
    return key

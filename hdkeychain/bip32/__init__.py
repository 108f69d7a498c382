#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module hdkeychain.bip32."""

from hdkeychain.bip32.bip32 import derive, derive_path, rootkey_from_seed
from hdkeychain.bip32.der_path import (
    DerivationStep,
    DerPath,
    step_from_str,
    steps_from_der_path,
    steps_from_path,
    str_from_step,
    str_from_steps,
)
from hdkeychain.bip32.extended_key import ExtendedKey
from hdkeychain.bip32.serialization import (
    BIP32KeyData,
    decode,
    key_data_from_key,
    to_base58,
    xpub_from_xprv,
)

__all__ = [
    "BIP32KeyData",
    "DerPath",
    "DerivationStep",
    "ExtendedKey",
    "decode",
    "derive",
    "derive_path",
    "key_data_from_key",
    "rootkey_from_seed",
    "step_from_str",
    "steps_from_der_path",
    "steps_from_path",
    "str_from_step",
    "str_from_steps",
    "to_base58",
    "xpub_from_xprv",
]

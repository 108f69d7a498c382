#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Network constants, BIP32 versions and associated functions.

Network parameters are read once, at import time,
from the json files in the _data directory.
"""

import json
from dataclasses import dataclass
from enum import Enum
from os import path
from typing import Any, Dict, List, Mapping, Tuple, Type, TypeVar, Union

from hdkeychain.alias import Octets
from hdkeychain.ecc.curve import CURVES, Curve
from hdkeychain.exceptions import HDKeychainValueError
from hdkeychain.utils import bytes_from_octets

_KEY_SIZE: List[Tuple[str, int]] = [
    ("bip32_prv", 4),
    ("bip32_pub", 4),
]

_Network = TypeVar("_Network", bound="Network")


@dataclass(frozen=True)
class Network:
    curve: Curve

    # base58 extended private key starts with 'xprv' or 'tprv'
    bip32_prv: bytes
    # base58 extended public key starts with 'xpub' or 'tpub'
    bip32_pub: bytes

    def __init__(
        self,
        curve: Curve,
        bip32_prv: Octets,
        bip32_pub: Octets,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "curve", curve)
        object.__setattr__(self, "bip32_prv", bytes_from_octets(bip32_prv))
        object.__setattr__(self, "bip32_pub", bytes_from_octets(bip32_pub))

        if check_validity:
            self.assert_valid()

    def to_dict(self, check_validity: bool = True) -> Dict[str, str]:

        if check_validity:
            self.assert_valid()

        return {
            "curve": self.curve.name,
            "bip32_prv": self.bip32_prv.hex(),
            "bip32_pub": self.bip32_pub.hex(),
        }

    @classmethod
    def from_dict(
        cls: Type[_Network], dict_: Mapping[str, Any], check_validity: bool = True
    ) -> _Network:

        try:
            curve = CURVES[dict_["curve"]]
        except KeyError as e:
            raise HDKeychainValueError(f"unknown curve: {dict_.get('curve')}") from e

        return cls(
            curve,
            dict_["bip32_prv"],
            dict_["bip32_pub"],
            check_validity,
        )

    def assert_valid(self) -> None:

        for key, size in _KEY_SIZE:
            value = bytes(getattr(self, key))
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise HDKeychainValueError(err_msg)
        if self.bip32_prv == self.bip32_pub:
            raise HDKeychainValueError("identical private and public versions")


NETWORKS: Dict[str, Network] = {}
datadir = path.join(path.dirname(__file__), "_data")
for net in ("mainnet", "testnet"):
    filename = path.join(datadir, net + ".json")
    with open(filename, "r", encoding="ascii") as f:
        NETWORKS[net] = Network.from_dict(json.load(f))


class Version(Enum):
    """BIP32 extended key version: 4-bytes magic selecting key type and network.

    The magic, once base58 encoded with the rest of the extended key,
    results in the conventional xprv, xpub, tprv, and tpub prefixes.
    """

    PRIVATE = NETWORKS["mainnet"].bip32_prv
    PUBLIC = NETWORKS["mainnet"].bip32_pub
    TESTNET_PRIVATE = NETWORKS["testnet"].bip32_prv
    TESTNET_PUBLIC = NETWORKS["testnet"].bip32_pub

    @property
    def is_private(self) -> bool:
        return self in (Version.PRIVATE, Version.TESTNET_PRIVATE)

    @property
    def network(self) -> str:
        return "mainnet" if self in (Version.PRIVATE, Version.PUBLIC) else "testnet"

    @property
    def public(self) -> "Version":
        "Return the public version of the same network."
        return Version(NETWORKS[self.network].bip32_pub)


def version_from_octets(version: Union[Version, Octets]) -> Version:
    "Return the Version from a Version, 4 bytes, or an 8 hex-digits string."

    if isinstance(version, Version):
        return version
    version = bytes_from_octets(version, 4)
    try:
        return Version(version)
    except ValueError as e:
        err_msg = f"unknown extended key version: 0x{version.hex()}"
        raise HDKeychainValueError(err_msg) from e


def is_private_version(version: Union[Version, Octets]) -> bool:
    return version_from_octets(version).is_private


def network_from_version(version: Union[Version, Octets]) -> str:
    """Return network string from the xkey version prefix."""
    return version_from_octets(version).network

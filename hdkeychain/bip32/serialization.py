#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 extended key serialization.

The serialized extended key is the concatenation of:

- version (4 bytes), selecting private or public key and network
- depth (1 byte)
- parent key fingerprint (4 bytes), zero for master keys
- child number (4 bytes, big-endian)
- chain code (32 bytes)
- key material (33 bytes): 0x00 followed by the private key,
  or the SEC compressed public key

for a total of 78 bytes, usually exchanged as Base58Check text
starting with xprv, xpub, tprv, or tpub.
"""

import copy
from dataclasses import InitVar, dataclass, field
from typing import Any, List, Tuple, Type, TypeVar, Union

from dataclasses_json import DataClassJsonMixin, config

from hdkeychain import base58
from hdkeychain.alias import BinaryData, Octets, String
from hdkeychain.bip32.extended_key import ExtendedKey, ec
from hdkeychain.ecc.sec_point import bytes_from_point, point_from_octets
from hdkeychain.exceptions import HDKeychainTypeError, HDKeychainValueError
from hdkeychain.network import Version, version_from_octets
from hdkeychain.utils import bytesio_from_binarydata

_BIP32KeyData = TypeVar("_BIP32KeyData", bound="BIP32KeyData")

_KEY_SIZE: List[Tuple[str, int]] = [
    ("version", 4),
    ("parent_fingerprint", 4),
    ("chain_code", 32),
    ("key", 33),
]
_REQUIRED_LENGTH = 78


def _hex_field() -> Any:
    return field(metadata=config(encoder=bytes.hex, decoder=bytes.fromhex))


@dataclass
class BIP32KeyData(DataClassJsonMixin):
    version: bytes = _hex_field()
    depth: int = field()
    parent_fingerprint: bytes = _hex_field()
    # child number as int: serialized big-endian
    index: int = field()
    chain_code: bytes = _hex_field()
    key: bytes = _hex_field()
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def is_private(self) -> bool:
        return self.key[0] == 0

    @property
    def is_hardened(self) -> bool:
        return self.index >= 0x80000000

    @property
    def is_root(self) -> bool:
        return (
            self.depth == 0
            and self.index == 0
            and self.parent_fingerprint == b"\x00" * 4
        )

    @property
    def network(self) -> str:
        return version_from_octets(self.version).network

    def assert_valid(self) -> None:

        for key, size in _KEY_SIZE:
            value = getattr(self, key)
            if not isinstance(value, bytes):
                raise HDKeychainTypeError(f"{key} is not an instance of bytes")
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise HDKeychainValueError(err_msg)

        for key in ("index", "depth"):
            if isinstance(getattr(self, key), bool) or not isinstance(
                getattr(self, key), int
            ):
                raise HDKeychainTypeError(f"{key} is not an instance of int")

        if not 0 <= self.index <= 0xFFFFFFFF:
            raise HDKeychainValueError(f"invalid index: {self.index}")

        if not 0 <= self.depth <= 255:
            raise HDKeychainValueError(f"invalid depth: {self.depth}")

        if self.depth == 0:
            if self.parent_fingerprint != b"\x00" * 4:
                err_msg = "zero depth with non-zero parent fingerprint: "
                err_msg += f"0x{self.parent_fingerprint.hex()}"
                raise HDKeychainValueError(err_msg)
            if self.index != 0:
                raise HDKeychainValueError(f"zero depth with non-zero index: {self.index}")

        version = version_from_octets(self.version)
        if version.is_private:
            if self.key[0] != 0:
                err_msg = f"invalid private key prefix: 0x{self.key[:1].hex()}"
                raise HDKeychainValueError(err_msg)
            q = int.from_bytes(self.key[1:], byteorder="big", signed=False)
            if not 0 < q < ec.n:
                raise HDKeychainValueError(f"invalid private key not in 1..n-1: {hex(q)}")
        else:
            if self.key[0] not in (2, 3):
                err_msg = "invalid public key prefix not in (0x02, 0x03): "
                err_msg += f"0x{self.key[:1].hex()}"
                raise HDKeychainValueError(err_msg)
            try:
                point_from_octets(self.key, ec)
            except HDKeychainValueError as e:
                raise HDKeychainValueError(f"invalid public key: 0x{self.key.hex()}") from e

    def serialize(self, check_validity: bool = True) -> bytes:

        if check_validity:
            self.assert_valid()

        return b"".join(
            [
                self.version,
                self.depth.to_bytes(1, byteorder="big", signed=False),
                self.parent_fingerprint,
                self.index.to_bytes(4, byteorder="big", signed=False),
                self.chain_code,
                self.key,
            ]
        )

    def b58encode(self, check_validity: bool = True) -> str:
        return base58.b58encode(self.serialize(check_validity)).decode("ascii")

    @classmethod
    def parse(
        cls: Type[_BIP32KeyData], xkey_bin: BinaryData, check_validity: bool = True
    ) -> _BIP32KeyData:
        "Return a BIP32KeyData by parsing 78 bytes from binary data."

        stream = bytesio_from_binarydata(xkey_bin)
        xkey_bin = stream.read(_REQUIRED_LENGTH)

        if len(xkey_bin) != _REQUIRED_LENGTH:
            err_msg = f"invalid decoded length: {len(xkey_bin)}"
            err_msg += f" instead of {_REQUIRED_LENGTH}"
            raise HDKeychainValueError(err_msg)

        return cls(
            version=xkey_bin[0:4],
            depth=xkey_bin[4],
            parent_fingerprint=xkey_bin[5:9],
            index=int.from_bytes(xkey_bin[9:13], byteorder="big", signed=False),
            chain_code=xkey_bin[13:45],
            key=xkey_bin[45:78],
            check_validity=check_validity,
        )

    @classmethod
    def b58decode(
        cls: Type[_BIP32KeyData], xkey: String, check_validity: bool = True
    ) -> _BIP32KeyData:

        if isinstance(xkey, str):
            xkey = xkey.strip()

        xkey_bin = base58.b58decode(xkey, _REQUIRED_LENGTH)
        return cls.parse(xkey_bin, check_validity)


def key_data_from_key(
    key: ExtendedKey, version: Union[Version, Octets] = Version.PRIVATE
) -> BIP32KeyData:
    """Return the BIP32KeyData of an extended key.

    Private versions serialize [0x00][prv_key],
    public versions the compressed public key.
    """

    if not isinstance(key, ExtendedKey):
        raise HDKeychainTypeError(f"not an extended key: {type(key).__name__}")
    version = version_from_octets(version)

    if version.is_private:
        key_material = b"\x00" + key.private_key
    else:
        key_material = key.public_key(compressed=True)

    return BIP32KeyData(
        version=version.value,
        depth=key.depth,
        parent_fingerprint=key.parent_fingerprint,
        index=key.index,
        chain_code=key.chain_code,
        key=key_material,
    )


def to_base58(key: ExtendedKey, version: Union[Version, Octets] = Version.PRIVATE) -> str:
    "Return the Base58Check extended key string (xprv, xpub, tprv, tpub)."
    return key_data_from_key(key, version).b58encode()


def decode(xkey: String) -> BIP32KeyData:
    "Return the BIP32KeyData of a Base58Check extended key string."
    return BIP32KeyData.b58decode(xkey)


def xpub_from_xprv(xprv: Union[BIP32KeyData, String]) -> str:
    """Return the xpub (or tpub) of an xprv (or tprv).

    The private key is replaced by its compressed public key,
    all other fields being preserved but the version.
    """

    if isinstance(xprv, BIP32KeyData):
        xkey = copy.copy(xprv)
    else:
        xkey = BIP32KeyData.b58decode(xprv)

    if not xkey.is_private:
        raise HDKeychainValueError(f"not a private key: {xkey.b58encode()}")

    xkey.version = version_from_octets(xkey.version).public.value
    q = int.from_bytes(xkey.key[1:], byteorder="big", signed=False)
    xkey.key = bytes_from_point(ec.mult(q), ec)

    return xkey.b58encode()

#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 derivation steps and derivation paths.

A BIP32 derivation path can be represented as:

- "m/44h/0'/1H/0/10" or "44h/0'/1H/0/10" string
- sequence of DerivationStep

A derivation step is an index in 0..2^31-1, plus a hardened flag:
the hardened flag is never folded into the stored index,
it is added only to the 32-bit child number.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from hdkeychain.exceptions import HDKeychainTypeError, PathSyntaxError

HARDENED = 0x80000000
MAX_DEPTH = 255

# default hardening symbol among the possible ones: "'", "h", "H"
_HARDENING = "'"


@dataclass(frozen=True)
class DerivationStep:
    index: int
    hardened: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            err_msg = f"invalid index type: {type(self.index).__name__}"
            raise HDKeychainTypeError(err_msg)
        if not 0 <= self.index < HARDENED:
            raise PathSyntaxError(f"invalid index: {self.index}")

    @property
    def child_number(self) -> int:
        "The 32-bit value used in derivation and serialization."
        return self.index | HARDENED if self.hardened else self.index

    @classmethod
    def from_child_number(cls, child_number: int) -> "DerivationStep":
        if not 0 <= child_number <= 0xFFFFFFFF:
            raise PathSyntaxError(f"invalid child number: {child_number}")
        return cls(child_number & ~HARDENED, child_number >= HARDENED)

    def __str__(self) -> str:
        return str_from_step(self)


def step_from_str(s: str) -> DerivationStep:
    "Return the DerivationStep from strings like \"0'\", \"0h\", \"0H\", or \"7\"."

    s = s.strip()
    hardened = False
    if s and s[-1] in ("'", "h", "H"):
        s = s[:-1]
        hardened = True

    # int() would also accept '+1', ' 1', '1_000', and non-ascii digits
    if not s.isascii() or not s.isdigit():
        raise PathSyntaxError(f"invalid index: '{s}'")

    return DerivationStep(int(s), hardened)


def str_from_step(step: DerivationStep, hardening: str = _HARDENING) -> str:

    if hardening not in ("'", "h", "H"):
        raise PathSyntaxError(f"invalid hardening symbol: {hardening}")
    return str(step.index) + (hardening if step.hardened else "")


def steps_from_path(der_path: str) -> Tuple[DerivationStep, ...]:
    """Return the derivation steps of a path string.

    The leading 'm' (or 'M') is optional;
    blanks and empty segments (e.g. trailing '/') are ignored.
    """

    if not isinstance(der_path, str):
        raise PathSyntaxError(f"not a path string: {der_path!r}")

    segments = [x.strip() for x in der_path.split("/")]
    if segments[0] in ("m", "M"):
        segments = segments[1:]

    steps = tuple(step_from_str(s) for s in segments if s != "")

    if len(steps) > MAX_DEPTH:
        raise PathSyntaxError(f"depth greater than {MAX_DEPTH}: {len(steps)}")
    return steps


DerPath = Union[str, Iterable[DerivationStep]]


def steps_from_der_path(der_path: DerPath) -> Tuple[DerivationStep, ...]:
    "Return the derivation steps from a path string or a DerivationStep sequence."

    if isinstance(der_path, str):
        return steps_from_path(der_path)

    steps = tuple(der_path)
    for step in steps:
        if not isinstance(step, DerivationStep):
            raise PathSyntaxError(f"not a derivation step: {step!r}")
    return steps


def str_from_steps(steps: Sequence[DerivationStep], hardening: str = _HARDENING) -> str:
    "Return the 'm/0'/1' path string of a DerivationStep sequence."

    return "/".join(["m"] + [str_from_step(step, hardening) for step in steps])

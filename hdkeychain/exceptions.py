#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by hdkeychain from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and TypeError from which the hdkeychain versions are derived.

The BIP32-specific failures are further discriminated:

* SeedDecodeError: malformed seed input
* PathSyntaxError: malformed derivation path or out-of-range index
* InvalidChildKeyError: derived scalar is zero or not less than
  the curve order; the caller may retry with the next index
"""

from typing import Any, Optional


class HDKeychainValueError(ValueError):
    pass


class HDKeychainTypeError(TypeError):
    pass


class SeedDecodeError(HDKeychainValueError):
    pass


class PathSyntaxError(HDKeychainValueError):
    pass


class InvalidChildKeyError(HDKeychainValueError):
    """The derived key is invalid: zero or not less than the curve order.

    BIP32 mandates to proceed with the next index,
    this is left to the caller: the failing step is available
    as the step attribute (None for the master key).
    """

    def __init__(self, msg: str, step: Optional[Any] = None) -> None:
        super().__init__(msg)
        self.step = step

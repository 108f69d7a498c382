#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Type aliases for the accepted input representations.

Functions are liberal in what they accept:
inputs are normalized with the hdkeychain.utils helpers.
"""

from io import BytesIO
from typing import Union

# bytes or hex-string, blanks allowed (e.g. "0488 ade4"),
# normalized by bytes_from_octets;
# used for seeds, versions, fingerprints, and SEC public keys
Octets = Union[bytes, str]

# bytes or ASCII text, e.g. a Base58Check extended key;
# surrounding blanks are stripped before decoding
String = Union[bytes, str]

# a byte stream, or Octets to be wrapped in one
BinaryData = Union[BytesIO, Octets]

# int, "0x"-prefixed or plain hex-string, or big-endian bytes
Integer = Union[bytes, str, int]

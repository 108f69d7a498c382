#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module hdkeychain.ecc."""

from hdkeychain.ecc.curve import CURVES, Curve, mult, secp256k1
from hdkeychain.ecc.curve_group import CurveGroup
from hdkeychain.ecc.number_theory import mod_inv, mod_sqrt, modulo, xgcd
from hdkeychain.ecc.point import INF, CurvePoint, Infinity, Point
from hdkeychain.ecc.sec_point import bytes_from_point, hex_from_point, point_from_octets

__all__ = [
    "CURVES",
    "Curve",
    "CurveGroup",
    "CurvePoint",
    "INF",
    "Infinity",
    "Point",
    "bytes_from_point",
    "hex_from_point",
    "mod_inv",
    "mod_sqrt",
    "modulo",
    "mult",
    "point_from_octets",
    "secp256k1",
    "xgcd",
]

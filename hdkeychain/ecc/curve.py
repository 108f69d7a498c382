#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve of prime order with generator, and secp256k1.

https://www.secg.org/sec2-v2.pdf
"""

from math import isqrt
from typing import Optional, Tuple, Union

from hdkeychain.alias import Integer
from hdkeychain.ecc.curve_group import CurveGroup, _str
from hdkeychain.ecc.curve_group import mult as _mult
from hdkeychain.ecc.point import INF, CurvePoint, Point
from hdkeychain.exceptions import HDKeychainValueError
from hdkeychain.utils import int_from_integer


class Curve(CurveGroup):
    "Prime order subgroup of the points of an elliptic curve over Fp."

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Union[Point, Tuple[int, int]],
        n: Integer,
        h: int,
        name: str = "",
    ) -> None:

        super().__init__(p, a, b)

        # 4. Check that G is on the curve
        if not isinstance(G, Point):
            G = Point(int_from_integer(G[0]), int_from_integer(G[1]))
        if not self.is_on_curve(G):
            raise HDKeychainValueError("generator is not on curve")
        self.G = G

        # 5. Check that n is prime.
        n = int_from_integer(n)
        if n < 2 or n % 2 == 0 or pow(2, n - 1, n) != 1:
            raise HDKeychainValueError(f"n is not prime: {_str(n)}")
        # also check n with Hasse Theorem
        delta = 2 * isqrt(self.p) + 1
        if h == 1 and not self.p + 1 - delta <= n <= self.p + 1 + delta:
            raise HDKeychainValueError(f"n not in p+1-delta..p+1+delta: {_str(n)}")
        self.n = n
        self.h = h

        # 7. Check that nG = INF
        if _mult(n, self.G, self) is not INF:
            raise HDKeychainValueError(f"n is not the group order: {_str(n)}")

        self.name = name

    def __str__(self) -> str:
        result = super().__str__()
        result += f"\n x_G = {_str(self.G.x)}"
        result += f"\n y_G = {_str(self.G.y)}"
        result += f"\n n   = {_str(self.n)}"
        result += f"\n h   = {self.h}"
        return result

    def __repr__(self) -> str:
        result = f"Curve({_str(self.p)}, {_str(self._a)}, {_str(self._b)}"
        result += f", ({_str(self.G.x)}, {_str(self.G.y)}), {_str(self.n)}, {self.h})"
        return result

    def mult(self, m: Integer, Q: Optional[CurvePoint] = None) -> CurvePoint:
        """Point multiplication, implemented using 'double and add'.

        The default point is the curve generator G;
        the m coefficient is reduced mod n.
        """
        Q = self.G if Q is None else Q
        self.require_on_curve(Q)
        m = int_from_integer(m) % self.n
        return _mult(m, Q, self)


# SEC 2 v.2 curve parameters, built once at import
secp256k1 = Curve(
    p=0xFFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFE_FFFFFC2F,
    a=0,
    b=7,
    G=(
        0x79BE667E_F9DCBBAC_55A06295_CE870B07_029BFCDB_2DCE28D9_59F2815B_16F81798,
        0x483ADA77_26A3C465_5DA4FBFC_0E1108A8_FD17B448_A6855419_9C47D08F_FB10D4B8,
    ),
    n=0xFFFFFFFF_FFFFFFFF_FFFFFFFF_FFFFFFFE_BAAEDCE6_AF48A03B_BFD25E8C_D0364141,
    h=1,
    name="secp256k1",
)

CURVES = {"secp256k1": secp256k1}


def mult(m: Integer, Q: Optional[CurvePoint] = None, ec: Curve = secp256k1) -> CurvePoint:
    "Point multiplication, defaulting to secp256k1 generator."
    return ec.mult(m, Q)

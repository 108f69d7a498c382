#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Group of the points of a short Weierstrass curve over a prime field.

Points are affine; the identity is the INF singleton.
The prime-order cyclic subgroup with its generator
is in the hdkeychain.ecc.curve module.
"""

from math import ceil

from hdkeychain.alias import Integer
from hdkeychain.ecc.number_theory import HEX_THRESHOLD, mod_inv, mod_sqrt
from hdkeychain.ecc.point import INF, CurvePoint, Infinity, Point
from hdkeychain.exceptions import HDKeychainTypeError, HDKeychainValueError
from hdkeychain.utils import hex_string, int_from_integer


def _str(i: int) -> str:
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


class CurveGroup:
    """Points (x, y) in Fp x Fp with y^2 = x^3 + a*x + b, plus INF.

    The curve must be non-singular, i.e. 4*a^3 + 27*b^2 != 0 (mod p).
    Instances are not meant to be modified once built.
    """

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)

        # Fermat test, enough for curve parameters
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise HDKeychainValueError(f"p is not prime: {_str(p)}")
        self.p = p
        self.p_size = ceil(p.bit_length() / 8)

        if not 0 <= a < p:
            raise HDKeychainValueError(f"a not in 0..p-1: {_str(a)}")
        if not 0 <= b < p:
            raise HDKeychainValueError(f"b not in 0..p-1: {_str(b)}")
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise HDKeychainValueError("zero discriminant")
        self._a = a
        self._b = b

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def __str__(self) -> str:
        result = "Curve"
        result += f"\n p   = {_str(self.p)}"
        result += f"\n a   = {_str(self._a)}"
        result += f"\n b   = {_str(self._b)}"
        return result

    def __repr__(self) -> str:
        return f"CurveGroup({_str(self.p)}, {_str(self._a)}, {_str(self._b)})"

    def negate(self, Q: CurvePoint) -> CurvePoint:
        "Return -Q; Q is not checked to be on the curve."
        if isinstance(Q, Infinity):
            return INF
        if not isinstance(Q, Point):
            raise HDKeychainTypeError("not a point")
        return Point(Q.x, (self.p - Q.y) % self.p)

    def add(self, Q1: CurvePoint, Q2: CurvePoint) -> CurvePoint:
        "Return Q1 + Q2; both points are assumed to be on the curve."

        for Q in (Q1, Q2):
            if not isinstance(Q, (Point, Infinity)):
                raise HDKeychainTypeError("not a point")

        if isinstance(Q1, Infinity):
            return Q2
        if isinstance(Q2, Infinity):
            return Q1

        if Q1.x == Q2.x:
            if Q1.y == Q2.y:
                return self.double(Q1)
            # Q2 == -Q1
            return INF

        lam = (Q2.y - Q1.y) * mod_inv(Q2.x - Q1.x, self.p)
        x = (lam * lam - Q1.x - Q2.x) % self.p
        y = (lam * (Q1.x - x) - Q1.y) % self.p
        return Point(x, y)

    def double(self, Q: CurvePoint) -> CurvePoint:
        "Return 2Q; Q is assumed to be on the curve."

        if isinstance(Q, Infinity):
            return INF
        if not isinstance(Q, Point):
            raise HDKeychainTypeError("not a point")
        # the tangent is vertical at y == 0
        if Q.y == 0:
            return INF

        lam = (3 * Q.x * Q.x + self._a) * mod_inv(2 * Q.y, self.p)
        x = (lam * lam - 2 * Q.x) % self.p
        y = (lam * (Q.x - x) - Q.y) % self.p
        return Point(x, y)

    def _y2(self, x: int) -> int:
        # x^3 + a*x + b, which might not be a square
        return ((x * x + self._a) * x + self._b) % self.p

    def y(self, x: int) -> int:
        "Return one of the two y-coordinates of the points with abscissa x."
        if not 0 <= x < self.p:
            raise HDKeychainValueError(f"x-coordinate not in 0..p-1: {_str(x)}")
        try:
            return mod_sqrt(self._y2(x), self.p)
        except HDKeychainValueError as e:
            raise HDKeychainValueError(f"invalid x-coordinate: {_str(x)}") from e

    def y_even(self, x: int) -> int:
        "Return the even y-coordinate of the points with abscissa x."
        y = self.y(x)
        return y if y % 2 == 0 else self.p - y

    def is_on_curve(self, Q: CurvePoint) -> bool:
        "Return True if Q is INF or its coordinates satisfy the curve equation."
        if isinstance(Q, Infinity):
            return True
        if not isinstance(Q, Point):
            raise HDKeychainTypeError("not a point")
        if not (0 <= Q.x < self.p and 0 <= Q.y < self.p):
            return False
        return self._y2(Q.x) == Q.y * Q.y % self.p

    def require_on_curve(self, Q: CurvePoint) -> None:
        "Raise HDKeychainValueError if Q is not on the curve."
        if not self.is_on_curve(Q):
            raise HDKeychainValueError("point not on curve")


def mult(m: int, Q: CurvePoint, ec: CurveGroup) -> CurvePoint:
    """Return m*Q by right-to-left 'double and add'.

    O(log m) affine group operations,
    processing the bits of m from the least significant one.
    Q is assumed to be on the curve; m is not reduced here.
    """

    if m < 0:
        raise HDKeychainValueError(f"negative m: {hex(m)}")

    R: CurvePoint = INF
    while m > 0:
        if m & 1:
            R = ec.add(R, Q)
        Q = ec.double(Q)
        m >>= 1
    return R

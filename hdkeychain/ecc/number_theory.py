#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic over arbitrary-precision Python int.

The extended Euclidean algorithm is iterative,
as in https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
while modular square roots use either the p = 3 (mod 4) shortcut
or Tonelli-Shanks.
"""

from typing import Tuple

from hdkeychain.exceptions import HDKeychainValueError
from hdkeychain.utils import hex_string

# integers above this are shown as hex-strings in error messages
HEX_THRESHOLD = 0xFFFFFFFF


def _str(i: int) -> str:
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


def modulo(n: int, m: int) -> int:
    "Return the representative of n in 0..m-1, also for negative n."

    if m <= 0:
        raise HDKeychainValueError(f"non-positive modulus: {m}")
    return (n % m + m) % m


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y = g = gcd(a, b).

    For a == 0 the result is (b, 0, 1).
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return x in 0..m-1 with a*x = 1 (mod m).

    The modulus m is not required to be prime,
    but a and m must be coprime: a = 0 (mod m) has no inverse.
    """

    a = modulo(a, m)
    g, x, _ = xgcd(a, m)
    if g != 1:
        raise HDKeychainValueError(f"No inverse for {_str(a)} mod {_str(m)}")
    return modulo(x, m)


def legendre_symbol(a: int, p: int) -> int:
    """Euler's criterion for the odd prime p.

    1 if a is a non-zero square mod p, -1 if it is not, 0 if p divides a.
    """

    ls = pow(a, p >> 1, p)
    return -1 if ls == p - 1 else ls


def mod_sqrt(a: int, p: int) -> int:
    """Return x with x*x = a (mod p), p prime.

    p - x is the other root.
    """

    a %= p
    if p % 4 == 3:
        x = pow(a, (p + 1) // 4, p)
    else:
        x = tonelli(a, p)

    if x * x % p != a:
        raise HDKeychainValueError(f"no root for {_str(a)} mod {_str(p)}")
    return x


def tonelli(a: int, p: int) -> int:
    "Tonelli-Shanks square root of a modulo the prime p."

    a %= p
    if a == 0 or p == 2:
        return a

    if legendre_symbol(a, p) != 1:
        raise HDKeychainValueError(f"no root for {_str(a)} mod {_str(p)}")

    # p - 1 = q * 2^s, with q odd
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    if s == 1:
        return pow(a, (p + 1) // 4, p)

    # any quadratic non-residue will do
    z = 2
    while legendre_symbol(z, p) != -1:
        z += 1

    m, c, t, r = s, pow(z, q, p), pow(a, q, p), pow(a, (q + 1) // 2, p)
    while t != 1:
        # least i in 1..m-1 with t^(2^i) = 1
        i, t2i = 1, t * t % p
        while t2i != 1:
            t2i = t2i * t2i % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m, c = i, b * b % p
        t, r = t * c % p, r * b % p
    return r

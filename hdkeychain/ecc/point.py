#!/usr/bin/env python3

# Copyright (C) 2021-2022 The hdkeychain developers
#
# This file is part of hdkeychain. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdkeychain including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points in affine coordinates.

A curve point is either a finite Point(x, y)
or the point at infinity INF, the group identity element.

INF is a distinct singleton object, not a magic coordinate pair,
so it can never be confused with a genuine (x, y) point.
"""

from dataclasses import dataclass
from typing import Union


class Infinity:
    """The point at infinity (singleton)."""

    _instance = None

    def __new__(cls) -> "Infinity":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INF"

    def __reduce__(self) -> str:
        return "INF"


INF = Infinity()


@dataclass(frozen=True)
class Point:
    """Finite curve point (x, y)."""

    x: int
    y: int

    def __repr__(self) -> str:
        return f"Point({hex(self.x)}, {hex(self.y)})"


CurvePoint = Union[Point, Infinity]

# -*- coding: utf-8 -*-
"""
Tincture: Exact colour-space conversion and interpolation
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_spaces.py — Scalar colour value types.

Four frozen three-channel records, one per colour space:

    Rgb(r, g, b)   gamma-encoded sRGB.  Float channels in [0, 1], or the
                   8-bit encoding with int channels in [0, 255].
    Xyz(x, y, z)   CIE XYZ, D65 white.
    Lab(l, a, b)   CIE L*a*b*.
    Lch(l, c, h)   cylindrical Lab, hue in radians [0, 2*pi).

Each type converts to each of the other three.  Only the three direct
transforms (Rgb <-> Xyz, Xyz <-> Lab, Lab <-> Lch) call into
``tincture_engine``; every other method is a chain of those, e.g.
``Rgb.to_lch()`` is ``self.to_xyz().to_lab().to_lch()``.

Values are never validated.  NaN and out-of-range channels flow through
the arithmetic; only Xyz -> Rgb clamps, and only ``Rgb.to_int8`` quantises.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, fields
from typing import Any, Generic, Iterator, TypeVar

import numpy as np

from tincture_engine import ColorSpaceEngine
from tincture_interp import Blend, lerp_hue

__all__ = ["Rgb", "Xyz", "Lab", "Lch"]

T = TypeVar("T")
C = TypeVar("C", bound="_Channels")


class _Channels:
    """Shared behaviour of the three-channel colour records."""
    __slots__ = ()

    def __iter__(self) -> Iterator[Any]:
        return (getattr(self, f.name) for f in fields(self))

    def to_array(self) -> np.ndarray:
        """Channels as a float64 vector of shape (3,)."""
        return np.array(tuple(self), dtype=np.float64)

    @classmethod
    def from_array(cls: type[C], arr: Any) -> C:
        """Builds a value from any length-3 sequence of numbers."""
        a, b, c = (float(v) for v in arr)
        return cls(a, b, c)

    def blend(self: C, t: Blend, other: C) -> C:
        """Blends every channel independently with ``t``."""
        _check_same_type(self, other)
        return type(self)(*(t.interp(v0, v1) for v0, v1 in zip(self, other)))


def _check_same_type(v0: Any, v1: Any) -> None:
    if type(v0) is not type(v1):
        raise TypeError(
            f"Cannot blend {type(v0).__name__} with {type(v1).__name__}"
        )


# ═══════════════════════════════════════════════════════════════════════════════
# 1.  Rgb
# ═══════════════════════════════════════════════════════════════════════════════
@dataclass(slots=True, frozen=True)
class Rgb(_Channels, Generic[T]):
    """Gamma-encoded sRGB: float [0, 1] or 8-bit int [0, 255] channels."""
    r: T
    g: T
    b: T

    # --- Channel encoding bridge ---

    def to_float(self) -> Rgb[float]:
        """
        8-bit encoding → float encoding (each channel / 255).

        Raises:
            TypeError: If any channel is not an integer code.
        """
        for v in self:
            if not isinstance(v, numbers.Integral):
                raise TypeError(
                    f"to_float expects 8-bit integer channels, got {self!r}"
                )
        return Rgb.from_array(ColorSpaceEngine.srgb8_to_float(self.to_array()))

    def to_int8(self) -> Rgb[int]:
        """
        Float encoding → 8-bit encoding.

        Each channel is scaled by 255, clamped to [0, 255] and rounded half
        away from zero.  NaN quantises to 0.
        """
        codes = ColorSpaceEngine.float_to_srgb8(self.to_array())
        return Rgb(int(codes[0]), int(codes[1]), int(codes[2]))

    to_int = to_int8

    # --- Conversions ---

    def to_xyz(self) -> Xyz[float]:
        """Expects the float encoding; call ``to_float`` on 8-bit values first."""
        return Xyz.from_array(ColorSpaceEngine.srgb_to_xyz(self.to_array()))

    def to_lab(self) -> Lab[float]:
        return self.to_xyz().to_lab()

    def to_lch(self) -> Lch[float]:
        return self.to_lab().to_lch()


# ═══════════════════════════════════════════════════════════════════════════════
# 2.  Xyz
# ═══════════════════════════════════════════════════════════════════════════════
@dataclass(slots=True, frozen=True)
class Xyz(_Channels, Generic[T]):
    """CIE XYZ tristimulus values, D65 referenced."""
    x: T
    y: T
    z: T

    def to_rgb(self) -> Rgb[float]:
        """Out-of-gamut channels are clamped to [0, 1]."""
        return Rgb.from_array(ColorSpaceEngine.xyz_to_srgb(self.to_array()))

    def to_lab(self) -> Lab[float]:
        return Lab.from_array(ColorSpaceEngine.xyz_to_lab(self.to_array()))

    def to_lch(self) -> Lch[float]:
        return self.to_lab().to_lch()


# ═══════════════════════════════════════════════════════════════════════════════
# 3.  Lab
# ═══════════════════════════════════════════════════════════════════════════════
@dataclass(slots=True, frozen=True)
class Lab(_Channels, Generic[T]):
    """CIE L*a*b*; l nominally in [0, 100], a and b unbounded."""
    l: T
    a: T
    b: T

    def to_xyz(self) -> Xyz[float]:
        return Xyz.from_array(ColorSpaceEngine.lab_to_xyz(self.to_array()))

    def to_lch(self) -> Lch[float]:
        return Lch.from_array(ColorSpaceEngine.lab_to_lch(self.to_array()))

    def to_rgb(self) -> Rgb[float]:
        return self.to_xyz().to_rgb()


# ═══════════════════════════════════════════════════════════════════════════════
# 4.  Lch
# ═══════════════════════════════════════════════════════════════════════════════
@dataclass(slots=True, frozen=True)
class Lch(_Channels, Generic[T]):
    """
    CIE L*C*h: lightness, chroma and hue angle.

    ``h`` is in radians.  Conversions from Lab always return it in
    [0, 2*pi); values built by hand are taken as given.
    """
    l: T
    c: T
    h: T

    def to_lab(self) -> Lab[float]:
        return Lab.from_array(ColorSpaceEngine.lch_to_lab(self.to_array()))

    def to_xyz(self) -> Xyz[float]:
        return self.to_lab().to_xyz()

    def to_rgb(self) -> Rgb[float]:
        return self.to_xyz().to_rgb()

    def blend(self, t: Blend, other: Lch) -> Lch:
        """Blends l and c linearly and h along the shorter arc."""
        _check_same_type(self, other)
        return Lch(
            t.interp(self.l, other.l),
            t.interp(self.c, other.c),
            lerp_hue(t, self.h, other.h),
        )

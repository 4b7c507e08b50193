# -*- coding: utf-8 -*-
"""
Tincture: Exact colour-space conversion and interpolation
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_interp.py — Generic linear interpolation of scalars and colours.

Interpolation is split in two layers:
  1.  A *blend parameter* knows how to mix two plain numbers.  Anything that
      satisfies the ``Blend`` protocol qualifies; ``BlendFactor`` is the
      ordinary ``v0*(1-t) + v1*t`` blend.
  2.  A *colour value* knows how to apply a blend parameter to its own
      channels (``blend`` method on the types in ``tincture_spaces``).  The
      per-channel walk is written once in their shared base class; only
      ``Lch`` overrides it, to route its hue through ``lerp_hue``.

``t`` is never clamped, so t < 0 or t > 1 extrapolates.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Protocol, TypeVar, Union, runtime_checkable

from tincture_engine import TAU

__all__ = ["Blend", "BlendFactor", "lerp", "lerp_hue", "interp"]

V = TypeVar("V")


# ═══════════════════════════════════════════════════════════════════════════════
# 1.  Blend: pluggable scalar blend parameter
# ═══════════════════════════════════════════════════════════════════════════════
@runtime_checkable
class Blend(Protocol):
    """
    Minimal interface a blend parameter must satisfy.

    interp(v0, v1) → the blended scalar

    Concrete implementations:
      - BlendFactor (plain linear blend by a fixed factor)
    """
    def interp(self, v0: Any, v1: Any) -> Any: ...


def lerp(t: float, v0: float, v1: float) -> float:
    """Scalar linear interpolation ``v0*(1-t) + v1*t``, exact at t=0 and t=1."""
    return v0 * (1.0 - t) + v1 * t


class BlendFactor:
    """
    Linear blend by a fixed factor ``t``.

    ``interp`` accepts plain numbers as well as any colour value type, so
    ``BlendFactor(0.25).interp(rgb0, rgb1)`` and
    ``BlendFactor(0.25).interp(0.0, 8.0)`` both work.
    """
    __slots__ = ("t",)

    def __init__(self, t: float) -> None:
        self.t = t

    def __repr__(self) -> str:
        return f"BlendFactor({self.t!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlendFactor):
            return NotImplemented
        return self.t == other.t

    def __hash__(self) -> int:
        return hash((BlendFactor, self.t))

    def interp(self, v0: V, v1: V) -> V:
        if isinstance(v0, Real):
            return lerp(self.t, v0, v1)
        return v0.blend(self, v1)


def _as_blend(t: Union[Blend, float]) -> Blend:
    if isinstance(t, Real):
        return BlendFactor(t)
    if not isinstance(t, Blend):
        raise TypeError(f"Unsupported blend parameter: {type(t).__name__}")
    return t


# ═══════════════════════════════════════════════════════════════════════════════
# 2.  Hue angles
# ═══════════════════════════════════════════════════════════════════════════════
def lerp_hue(t: Union[Blend, float], h0: float, h1: float) -> float:
    """
    Interpolates two hue angles (radians) along the shorter arc.

    Whichever angle is ahead by pi or more is pulled back by 2*pi before
    the scalar blend, so the travel never exceeds pi.  The result is
    normalised into [0, 2*pi), also when ``t`` extrapolates past
    several turns.

    Args:
        t: Blend factor or ``Blend`` implementation.
        h0: Start hue in [0, 2*pi).
        h1: End hue in [0, 2*pi).

    Returns:
        Blended hue in [0, 2*pi).
    """
    t = _as_blend(t)
    if h1 - h0 >= math.pi:
        h1 -= TAU
    elif h0 - h1 >= math.pi:
        h0 -= TAU

    h = t.interp(h0, h1) % TAU
    # a tiny negative can round up to exactly TAU
    if h >= TAU:
        h -= TAU
    return h


# ═══════════════════════════════════════════════════════════════════════════════
# 3.  Generic entry point
# ═══════════════════════════════════════════════════════════════════════════════
def interp(t: Union[Blend, float], v0: V, v1: V) -> V:
    """
    Blends ``v0`` and ``v1`` by ``t``.

    Works for plain numbers and for every colour value type (``Rgb``,
    ``Xyz``, ``Lab``, ``Lch``).  ``t`` may be a number (wrapped in
    ``BlendFactor``) or any object implementing ``Blend``.

    Raises:
        TypeError: If ``t`` is not a number or ``Blend``, or if ``v0`` and
            ``v1`` are different colour types.
    """
    t = _as_blend(t)
    if isinstance(v0, Real):
        return t.interp(v0, v1)
    return v0.blend(t, v1)

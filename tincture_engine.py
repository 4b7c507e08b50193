# -*- coding: utf-8 -*-
"""
Tincture: Exact colour-space conversion and interpolation
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour Conversion Engine
========================
Batch (array) implementation of the four colour spaces handled by Tincture:
gamma-encoded sRGB, CIE XYZ (D65), CIE L*a*b* and its cylindrical form
CIE L*C*h (hue in radians).

Every colour formula in the package lives in this module, either inside a
Numba kernel or inside one of the ``_raw`` engine methods.  The scalar value
types in ``tincture_spaces`` delegate here, so a single-pixel conversion and
a ten-million-pixel conversion run the exact same arithmetic.

Design notes:
    - Only three direct transforms exist (sRGB <-> XYZ, XYZ <-> Lab,
      Lab <-> LCh).  Everything else is an explicit chain of ``_raw`` calls,
      so error accumulates over at most two hops.
    - The CIE linearisation constants are the literal 0.008856 / 7.787 /
      903.3 values, not the rational 6/29 family.  Forward and inverse use
      the same literals, which keeps round trips consistent.
    - XYZ -> sRGB clamps each channel to [0, 1] *after* gamma encoding.
      That clamp (and 8-bit quantisation) are the only lossy steps.
    - Kernels are compiled twice from the same source: strict IEEE 754
      (default, NaN/inf propagate) and ``fastmath``.  See ``set_strict_ieee``.

References:
    - IEC 61966-2-1:1999 (sRGB Standard)
    - CIE 15:2004 "Colorimetry"
"""

import math
import time
import warnings
import functools
import numpy as np
import numpy.typing as npt
from numba import njit
from typing import Final, TypeAlias, Callable, Any

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",

    # --- Constants ---
    "REF_WHITE_D65",
    "LAB_EPSILON",
    "LAB_KAPPA",
    "LAB_SLOPE",
    "LAB_OFFSET",
    "TAU",

    # --- Configuration ---
    "set_strict_ieee",
    "is_strict_ieee",

    # --- Matrices ---
    "M_SRGB_TO_XYZ_T",
    "M_XYZ_TO_SRGB_T",

    # --- Decorators ---
    "handle_shapes",

    # --- Classes ---
    "ColorSpaceEngine",
]

# --- Type Aliases ---
# Kernels compile to float64; other float dtypes are cast in handle_shapes.
ArrayFloat: TypeAlias = npt.NDArray[np.floating]

# --- Constants & Pre-Transposed Matrices ---

# D65 reference white (Y=1.0)
REF_WHITE_D65: Final[ArrayFloat] = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)

# sRGB primaries, four-decimal form.  Rows map (r, g, b) -> x, y, z.
# Pre-transposed so that row-vector pixels can be multiplied as ``rgb @ M_T``.
_M_SRGB_TO_XYZ_BASE = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505]
], dtype=np.float64)
M_SRGB_TO_XYZ_T: Final[ArrayFloat] = _M_SRGB_TO_XYZ_BASE.T.copy()

# Published inverse (not np.linalg.inv of the matrix above).
_M_XYZ_TO_SRGB_BASE = np.array([
    [ 3.2406, -1.5372, -0.4986],
    [-0.9689,  1.8758,  0.0415],
    [ 0.0557, -0.2040,  1.0570]
], dtype=np.float64)
M_XYZ_TO_SRGB_T: Final[ArrayFloat] = _M_XYZ_TO_SRGB_BASE.T.copy()

# --- sRGB transfer function breakpoints (IEC 61966-2-1) ---
SRGB_DECODE_THRESHOLD: Final[float] = 0.04045
SRGB_ENCODE_THRESHOLD: Final[float] = 0.0031308
SRGB_LINEAR_SLOPE: Final[float] = 12.92

# --- CIE Lab linearisation constants ---
# Literal CIE values.  Do not replace with (6/29)**3 etc.: the forward and
# inverse transforms must agree on the same breakpoint.
LAB_EPSILON: Final[float] = 0.008856
LAB_KAPPA: Final[float] = 903.3
LAB_SLOPE: Final[float] = 7.787
LAB_OFFSET: Final[float] = 16.0 / 116.0

TAU: Final[float] = 2.0 * math.pi


# --- Runtime Configuration ---
# When True (default), kernels are the fastmath=False builds that keep strict
# IEEE 754 semantics: NaN and inf flow through conversions unchanged instead
# of being optimised away.  The fastmath builds are opt-in.
#
# Toggle at runtime via:
#     import tincture_engine as te
#     te.set_strict_ieee(False)  # relaxed, faster kernels
#     te.set_strict_ieee(True)   # back to strict mode (default)
_STRICT_IEEE: bool = True

def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between strict IEEE 754 (default) and fastmath Numba kernels.

    With ``enabled=False`` the kernels may reassociate floating-point
    operations and assume finite inputs, so NaN propagation through a
    conversion is no longer guaranteed.  A ``RuntimeWarning`` is emitted
    when switching to that mode.

    Args:
        enabled: If True, use strict IEEE mode.
    """
    global _STRICT_IEEE
    enabled = bool(enabled)
    if not enabled and _STRICT_IEEE:
        warnings.warn(
            "tincture: fastmath kernels enabled; NaN/inf propagation through "
            "conversions is no longer guaranteed.",
            RuntimeWarning,
            stacklevel=2,
        )
    _STRICT_IEEE = enabled

def is_strict_ieee() -> bool:
    """Return True if the strict IEEE 754 kernels are active."""
    return _STRICT_IEEE


# =============================================================================
# 1. ROBUST DECORATORS
# =============================================================================

def handle_shapes(func: Callable[..., np.ndarray]) -> Callable[..., np.ndarray]:
    """
    Decorator to normalize inputs to contiguous float64 (N, 3) batches.

    Any array whose last dimension is 3 is accepted: a single pixel (3,),
    a batch (N, 3), or an image (H, W, 3).  Leading dimensions are flattened
    for the kernels and restored on the way out.

    Args:
        func: The function to decorate.

    Returns:
        The wrapped function with shape handling.

    Raises:
        ValueError: If the last dimension is not 3.
    """
    @functools.wraps(func)
    def wrapper(arr: Any, *args: Any, **kwargs: Any) -> np.ndarray:
        arr = np.asarray(arr)
        if arr.ndim == 0 or arr.shape[-1] != 3:
            got = arr.shape[-1] if arr.ndim else "a scalar"
            raise ValueError(f"Expected last dimension size 3, got {got}")

        arr_in = np.ascontiguousarray(arr.reshape(-1, 3), dtype=np.float64)
        res = func(arr_in, *args, **kwargs)
        return res.reshape(arr.shape)
    return wrapper


# =============================================================================
# 2. LOW-LEVEL MATH KERNELS (Numba)
# =============================================================================

class _KernelPair:
    """Strict and fastmath builds of one Numba kernel, chosen per call."""

    def __init__(self, func: Callable[..., Any]) -> None:
        # Numba's cache index ignores fastmath flags; only cache one build.
        self.strict = njit(cache=True, fastmath=False)(func)
        self.fast = njit(fastmath=True)(func)
        self.__wrapped__ = func
        self.__doc__ = func.__doc__

    def __call__(self, *args: Any) -> Any:
        if _STRICT_IEEE:
            return self.strict(*args)
        return self.fast(*args)


@_KernelPair
def _srgb_decode(srgb):
    """
    Applies the sRGB EOTF (inverse gamma) element-wise.

    Explicit loop instead of ``np.where`` so no boolean mask is allocated
    and the power branch is never evaluated on values below the breakpoint.
    """
    out = np.empty_like(srgb)
    srgb_flat = srgb.ravel()
    out_flat = out.ravel()

    for i in range(srgb.size):
        v = srgb_flat[i]
        if v > SRGB_DECODE_THRESHOLD:
            out_flat[i] = ((v + 0.055) / 1.055) ** 2.4
        else:
            out_flat[i] = v / SRGB_LINEAR_SLOPE
    return out

@_KernelPair
def _srgb_encode(linear, clip):
    """
    Applies the sRGB OETF (gamma) element-wise, then optionally clamps.

    The clamp runs after encoding and uses ordered comparisons, so NaN
    passes through untouched.
    """
    out = np.empty_like(linear)
    linear_flat = linear.ravel()
    out_flat = out.ravel()

    for i in range(linear.size):
        v = linear_flat[i]
        if v > SRGB_ENCODE_THRESHOLD:
            v = 1.055 * (v ** (1.0 / 2.4)) - 0.055
        else:
            v = v * SRGB_LINEAR_SLOPE
        if clip:
            if v > 1.0:
                v = 1.0
            elif v < 0.0:
                v = 0.0
        out_flat[i] = v
    return out

@_KernelPair
def _lab_f(t):
    """
    Non-linear transfer function f(t) for CIELAB.

    Cube root above LAB_EPSILON, linear segment below it.  Negative input
    always lands on the linear segment.
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()

    for i in range(t.size):
        v = t_flat[i]
        if v > LAB_EPSILON:
            out_flat[i] = np.cbrt(v)
        else:
            out_flat[i] = LAB_SLOPE * v + LAB_OFFSET
    return out

@_KernelPair
def _lab_f_inv(t):
    """
    Inverse transfer function for CIELAB.

    The branch test is on t**3 against the same LAB_EPSILON as the forward
    function.
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()

    for i in range(t.size):
        v = t_flat[i]
        cube = v * v * v
        if cube > LAB_EPSILON:
            out_flat[i] = cube
        else:
            out_flat[i] = (v - LAB_OFFSET) / LAB_SLOPE
    return out

@_KernelPair
def _lab_to_lch_kernel(lab):
    """
    Lab -> LCh, hue in radians normalised to [0, 2*pi).
    Input shape (N, 3), Output shape (N, 3).
    """
    n = lab.shape[0]
    lch = np.empty_like(lab)

    for i in range(n):
        L, a, b = lab[i, 0], lab[i, 1], lab[i, 2]
        h = np.arctan2(b, a)
        if h < 0.0:
            h += TAU
        # -1e-17 + 2*pi rounds to 2*pi exactly
        if h >= TAU:
            h -= TAU
        lch[i, 0], lch[i, 1], lch[i, 2] = L, np.hypot(a, b), h
    return lch

@_KernelPair
def _lch_to_lab_kernel(lch):
    """
    LCh -> Lab, hue in radians.
    Input shape (N, 3), Output shape (N, 3).
    """
    n = lch.shape[0]
    lab = np.empty_like(lch)

    for i in range(n):
        L, C, h = lch[i, 0], lch[i, 1], lch[i, 2]
        lab[i, 0] = L
        lab[i, 1] = C * np.cos(h)
        lab[i, 2] = C * np.sin(h)
    return lab

@_KernelPair
def _quantize_u8(values):
    """
    Scales [0, 1] floats to 8-bit codes: x255, clamp, round half away from zero.

    The clamped value is non-negative, so floor(x + 0.5) is half-away-from-zero.
    NaN fails the ``x > 0`` test and quantises to 0.
    """
    out = np.empty(values.shape, dtype=np.uint8)
    v_flat = values.ravel()
    out_flat = out.ravel()

    for i in range(values.size):
        x = v_flat[i] * 255.0
        if not x > 0.0:
            x = 0.0
        elif x > 255.0:
            x = 255.0
        out_flat[i] = math.floor(x + 0.5)
    return out


# =============================================================================
# 3. COLOR SPACE ENGINE
# =============================================================================

class ColorSpaceEngine:
    """Static utility class for batch colour space transformations.

    Architecture Note:
        Core transforms provide both a public ``@handle_shapes`` decorated API
        and an internal ``_raw`` fast-path that assumes pre-validated (N, 3)
        float64 input.  Composite pipelines (e.g. ``srgb_to_lch``) chain the
        ``_raw`` variants to avoid redundant shape checks at each stage.
    """

    # =====================================================================
    #  Internal _raw fast-path methods  (assume validated (N, 3) float64)
    # =====================================================================

    @staticmethod
    def _srgb_to_xyz_raw(rgb_array: ArrayFloat) -> ArrayFloat:
        """Raw sRGB → XYZ.  *rgb_array* must be (N, 3) float64."""
        linear = _srgb_decode(rgb_array)
        return np.dot(linear, M_SRGB_TO_XYZ_T)

    @staticmethod
    def _xyz_to_srgb_raw(xyz_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """Raw XYZ → sRGB.  *xyz_array* must be (N, 3) float64."""
        linear = np.ascontiguousarray(np.dot(xyz_array, M_XYZ_TO_SRGB_T))
        return _srgb_encode(linear, clip)

    @staticmethod
    def _xyz_to_lab_raw(xyz_array: ArrayFloat) -> ArrayFloat:
        """Raw XYZ → Lab.  *xyz_array* must be (N, 3) float64."""
        xyz_norm = xyz_array / REF_WHITE_D65
        f_xyz = _lab_f(xyz_norm)
        y_norm = xyz_norm[:, 1]

        out = np.empty_like(xyz_array)
        # Lightness re-tests the normalised Y, not f(Y)
        out[:, 0] = np.where(y_norm > LAB_EPSILON,
                             116.0 * f_xyz[:, 1] - 16.0,
                             LAB_KAPPA * y_norm)
        out[:, 1] = 500.0 * (f_xyz[:, 0] - f_xyz[:, 1])
        out[:, 2] = 200.0 * (f_xyz[:, 1] - f_xyz[:, 2])
        return out

    @staticmethod
    def _lab_to_xyz_raw(lab_array: ArrayFloat) -> ArrayFloat:
        """Raw Lab → XYZ.  *lab_array* must be (N, 3) float64."""
        L, a, b = lab_array[:, 0], lab_array[:, 1], lab_array[:, 2]

        f_xyz = np.empty_like(lab_array)
        f_xyz[:, 1] = (L + 16.0) / 116.0
        f_xyz[:, 0] = f_xyz[:, 1] + a / 500.0
        f_xyz[:, 2] = f_xyz[:, 1] - b / 200.0

        xyz = _lab_f_inv(f_xyz)
        xyz *= REF_WHITE_D65
        return xyz

    @staticmethod
    def _lab_to_lch_raw(lab_array: ArrayFloat) -> ArrayFloat:
        """Raw Lab → LCh.  *lab_array* must be (N, 3) float64."""
        return _lab_to_lch_kernel(lab_array)

    @staticmethod
    def _lch_to_lab_raw(lch_array: ArrayFloat) -> ArrayFloat:
        """Raw LCh → Lab.  *lch_array* must be (N, 3) float64."""
        return _lch_to_lab_kernel(lch_array)

    # =====================================================================
    #  Public API  (shape-safe wrappers)
    # =====================================================================

    @staticmethod
    @handle_shapes
    def srgb_to_xyz(rgb_array: ArrayFloat) -> ArrayFloat:
        """
        Converts gamma-encoded sRGB [0..1] to XYZ (D65).

        No clamping is applied on this direction; out-of-range input is
        decoded as-is.

        Args:
            rgb_array: Input sRGB data, shape (..., 3).

        Returns:
            XYZ coordinates (D65 relative).
        """
        return ColorSpaceEngine._srgb_to_xyz_raw(rgb_array)

    @staticmethod
    @handle_shapes
    def xyz_to_srgb(xyz_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """
        Converts XYZ (D65) to gamma-encoded sRGB [0..1].

        Args:
            xyz_array: Input XYZ data, shape (..., 3).
            clip: If True (default), clamps each channel to [0, 1] after
                  gamma encoding.  Set False to keep out-of-gamut values.

        Returns:
            sRGB coordinates, gamma corrected.
        """
        return ColorSpaceEngine._xyz_to_srgb_raw(xyz_array, clip=clip)

    @staticmethod
    @handle_shapes
    def xyz_to_lab(xyz_array: ArrayFloat) -> ArrayFloat:
        """
        Converts XYZ to CIELAB (L*a*b*), D65 reference white.

        Args:
            xyz_array: Input XYZ data, shape (..., 3).

        Returns:
            Lab coordinates.
        """
        return ColorSpaceEngine._xyz_to_lab_raw(xyz_array)

    @staticmethod
    @handle_shapes
    def lab_to_xyz(lab_array: ArrayFloat) -> ArrayFloat:
        """
        Converts CIELAB to XYZ, D65 reference white.

        Args:
            lab_array: Input Lab data, shape (..., 3).

        Returns:
            XYZ coordinates.
        """
        return ColorSpaceEngine._lab_to_xyz_raw(lab_array)

    @staticmethod
    @handle_shapes
    def lab_to_lch(lab_array: ArrayFloat) -> ArrayFloat:
        """
        Converts CIELAB to CIELCh (cylindrical representation).

        Args:
            lab_array: Input Lab data, shape (..., 3).

        Returns:
            LCh coordinates (Lightness, Chroma, Hue in radians [0, 2*pi)).
        """
        return ColorSpaceEngine._lab_to_lch_raw(lab_array)

    @staticmethod
    @handle_shapes
    def lch_to_lab(lch_array: ArrayFloat) -> ArrayFloat:
        """
        Converts CIELCh to CIELAB.

        Args:
            lch_array: Input LCh data, shape (..., 3), hue in radians.

        Returns:
            Lab coordinates.
        """
        return ColorSpaceEngine._lch_to_lab_raw(lch_array)

    # --- Convenience composites ---
    # Explicit chains of the _raw primitives above.

    @staticmethod
    @handle_shapes
    def srgb_to_lab(rgb_array: ArrayFloat) -> ArrayFloat:
        """sRGB -> XYZ -> CIELAB."""
        xyz = ColorSpaceEngine._srgb_to_xyz_raw(rgb_array)
        return ColorSpaceEngine._xyz_to_lab_raw(xyz)

    @staticmethod
    @handle_shapes
    def lab_to_srgb(lab_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """CIELAB -> XYZ -> sRGB."""
        xyz = ColorSpaceEngine._lab_to_xyz_raw(lab_array)
        return ColorSpaceEngine._xyz_to_srgb_raw(xyz, clip=clip)

    @staticmethod
    @handle_shapes
    def srgb_to_lch(rgb_array: ArrayFloat) -> ArrayFloat:
        """sRGB -> XYZ -> CIELAB -> CIELCh."""
        xyz = ColorSpaceEngine._srgb_to_xyz_raw(rgb_array)
        lab = ColorSpaceEngine._xyz_to_lab_raw(xyz)
        return ColorSpaceEngine._lab_to_lch_raw(lab)

    @staticmethod
    @handle_shapes
    def lch_to_srgb(lch_array: ArrayFloat, clip: bool = True) -> ArrayFloat:
        """CIELCh -> CIELAB -> XYZ -> sRGB."""
        lab = ColorSpaceEngine._lch_to_lab_raw(lch_array)
        xyz = ColorSpaceEngine._lab_to_xyz_raw(lab)
        return ColorSpaceEngine._xyz_to_srgb_raw(xyz, clip=clip)

    @staticmethod
    @handle_shapes
    def xyz_to_lch(xyz_array: ArrayFloat) -> ArrayFloat:
        """XYZ -> CIELAB -> CIELCh."""
        lab = ColorSpaceEngine._xyz_to_lab_raw(xyz_array)
        return ColorSpaceEngine._lab_to_lch_raw(lab)

    @staticmethod
    @handle_shapes
    def lch_to_xyz(lch_array: ArrayFloat) -> ArrayFloat:
        """CIELCh -> CIELAB -> XYZ."""
        lab = ColorSpaceEngine._lch_to_lab_raw(lch_array)
        return ColorSpaceEngine._lab_to_xyz_raw(lab)

    # --- 8-bit channel bridge ---

    @staticmethod
    @handle_shapes
    def srgb8_to_float(rgb8_array: np.ndarray) -> ArrayFloat:
        """
        Converts 8-bit sRGB codes [0..255] to floats [0..1].

        Division by 255 is exact for every code in range.
        """
        return rgb8_array / 255.0

    @staticmethod
    @handle_shapes
    def float_to_srgb8(rgb_array: ArrayFloat) -> np.ndarray:
        """
        Converts float sRGB [0..1] to 8-bit codes.

        Each channel is multiplied by 255, clamped to [0, 255] and rounded
        half away from zero (127.5 -> 128, 126.5 -> 127).  NaN maps to 0.

        Returns:
            uint8 array of the same shape.
        """
        return _quantize_u8(rgb_array)


# =============================================================================
# 4. VALIDATION SUITE
# =============================================================================

def _all_srgb8_planes():
    """Yields every 8-bit sRGB triple as 256 float planes of shape (65536, 3)."""
    gb = np.stack(np.meshgrid(np.arange(256), np.arange(256), indexing="ij"),
                  axis=-1).reshape(-1, 2)
    plane = np.empty((gb.shape[0], 3), dtype=np.float64)
    plane[:, 1:] = gb
    for r in range(256):
        plane[:, 0] = r
        yield ColorSpaceEngine.srgb8_to_float(plane)


if __name__ == "__main__":
    print("--- Tincture Colour Engine Validation ---")

    # 1. Concrete value
    print("1. Testing pure red -> XYZ...")
    red_xyz = ColorSpaceEngine.srgb_to_xyz(np.array([1.0, 0.0, 0.0]))
    print(f"   XYZ: {red_xyz} (Expected: [0.4124 0.2126 0.0193])")

    # 2. Exhaustive round trips
    print("2. Testing exhaustive 8-bit round trips (256^3)...")
    t0 = time.perf_counter()
    max_err = {"xyz": 0.0, "lab": 0.0, "lch": 0.0}
    for rgb in _all_srgb8_planes():
        xyz = ColorSpaceEngine.srgb_to_xyz(rgb)
        back = ColorSpaceEngine.xyz_to_srgb(xyz)
        max_err["xyz"] = max(max_err["xyz"], float(np.max(np.abs(back - rgb))))
        back = ColorSpaceEngine.lab_to_srgb(ColorSpaceEngine.srgb_to_lab(rgb))
        max_err["lab"] = max(max_err["lab"], float(np.max(np.abs(back - rgb))))
        back = ColorSpaceEngine.lch_to_srgb(ColorSpaceEngine.srgb_to_lch(rgb))
        max_err["lch"] = max(max_err["lch"], float(np.max(np.abs(back - rgb))))
    t1 = time.perf_counter()
    for name, err in max_err.items():
        status = "[PASS]" if err <= 1.0 / 2048.0 else "[FAIL]"
        print(f"   {status} Max Error (sRGB->{name}->sRGB): {err:.2e}")
    print(f"   Processed {3 * 256**3:,} round trips in {(t1 - t0):.2f} s")

    # 3. Shape safety
    print("3. Testing Shape Safety...")
    try:
        ColorSpaceEngine.srgb_to_xyz(np.zeros((4, 2)))
    except ValueError as e:
        print(f"   Caught expected error: {e}")

    # 4. Quantisation
    print("4. Testing 8-bit quantisation...")
    codes = np.arange(256, dtype=np.float64)
    grey = np.repeat(codes[:, None], 3, axis=1)
    back8 = ColorSpaceEngine.float_to_srgb8(ColorSpaceEngine.srgb8_to_float(grey))
    if np.array_equal(back8, grey.astype(np.uint8)):
        print("   [PASS] All 256 codes survive float round trip")
    else:
        print("   [FAIL] 8-bit round trip mismatch")
    print(f"   0.5 -> {ColorSpaceEngine.float_to_srgb8(np.array([0.5, 0.5, 0.5]))} "
          "(Expected: 128, half away from zero)")

    # 5. Hue normalisation
    print("5. Testing hue normalisation...")
    rng = np.random.default_rng(7)
    lab = rng.uniform([0.0, -128.0, -128.0], [100.0, 128.0, 128.0], size=(100_000, 3))
    hue = ColorSpaceEngine.lab_to_lch(lab)[:, 2]
    in_range = bool(np.all((hue >= 0.0) & (hue < TAU)))
    print(f"   {'[PASS]' if in_range else '[FAIL]'} h in [0, 2pi) for 100k samples")

    # 6. Strict vs fast kernels
    print("6. Testing Strict IEEE vs fastmath kernels...")
    lch_strict = ColorSpaceEngine.lab_to_lch(lab)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", RuntimeWarning)
        set_strict_ieee(False)
    lch_fast = ColorSpaceEngine.lab_to_lch(lab)
    set_strict_ieee(True)
    diff = float(np.max(np.abs(lch_strict - lch_fast)))
    print(f"   Max diff (strict vs fast): {diff:.2e}")

    print("--- Validation Complete ---")

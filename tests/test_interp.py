"""Tests for scalar and colour interpolation."""

import math

import pytest

from tincture_engine import TAU
from tincture_interp import Blend, BlendFactor, interp, lerp, lerp_hue
from tincture_spaces import Rgb, Xyz, Lab, Lch


class Smoothstep:
    """Eased blend parameter, used to check that any Blend is accepted."""

    def __init__(self, t):
        self.t = t

    def interp(self, v0, v1):
        w = self.t * self.t * (3.0 - 2.0 * self.t)
        return v0 * (1.0 - w) + v1 * w


class Recording:
    """Blend parameter that records every scalar pair it is asked to mix."""

    def __init__(self):
        self.calls = []

    def interp(self, v0, v1):
        self.calls.append((v0, v1))
        return v0


PAIRS = [
    (Rgb(0.1, 0.7, 0.3), Rgb(0.9, 0.2, 0.4)),
    (Xyz(0.2, 0.3, 0.4), Xyz(0.9, 0.1, 0.05)),
    (Lab(20.0, -40.0, 10.0), Lab(80.0, 60.0, -70.0)),
    (Lch(20.0, 10.0, 0.3), Lch(80.0, 50.0, 5.9)),
    (Lch(20.0, 10.0, 5.9), Lch(80.0, 50.0, 0.3)),
]


class TestScalar:

    def test_midpoint(self):
        assert lerp(0.5, 2.0, 4.0) == 3.0

    def test_boundaries_exact(self):
        assert lerp(0.0, 0.1, 0.7) == 0.1
        assert lerp(1.0, 0.1, 0.7) == 0.7

    def test_extrapolation_is_not_clamped(self):
        assert lerp(2.0, 0.0, 1.0) == 2.0
        assert lerp(-1.0, 0.0, 1.0) == -1.0

    def test_blend_factor_on_numbers(self):
        assert BlendFactor(0.25).interp(0.0, 8.0) == 2.0
        assert interp(0.25, 0.0, 8.0) == 2.0

    def test_blend_factor_value_semantics(self):
        assert BlendFactor(0.5) == BlendFactor(0.5)
        assert hash(BlendFactor(0.5)) == hash(BlendFactor(0.5))
        assert repr(BlendFactor(0.5)) == "BlendFactor(0.5)"

    def test_protocol(self):
        assert isinstance(BlendFactor(0.5), Blend)
        assert isinstance(Smoothstep(0.5), Blend)
        assert not isinstance(0.5, Blend)


class TestColourBoundaries:

    @pytest.mark.parametrize("v0, v1", PAIRS)
    def test_t0_returns_start(self, v0, v1):
        assert interp(0.0, v0, v1) == v0
        assert BlendFactor(0.0).interp(v0, v1) == v0

    @pytest.mark.parametrize("v0, v1", PAIRS)
    def test_t1_returns_end(self, v0, v1):
        assert interp(1.0, v0, v1) == v1
        assert BlendFactor(1.0).interp(v0, v1) == v1

    @pytest.mark.parametrize("v0, v1", PAIRS)
    def test_result_type(self, v0, v1):
        assert type(interp(0.3, v0, v1)) is type(v0)


class TestChannelwise:

    def test_rgb_midpoint(self):
        mid = interp(0.5, Rgb(0.0, 0.2, 1.0), Rgb(1.0, 0.4, 0.0))
        assert mid == Rgb(0.5, pytest.approx(0.3), 0.5)

    def test_lab_extrapolates(self):
        out = BlendFactor(2.0).interp(Lab(10.0, 0.0, 0.0), Lab(20.0, 5.0, -5.0))
        assert out == Lab(30.0, 10.0, -10.0)

    def test_integer_rgb_blends_to_floats(self):
        mid = interp(0.5, Rgb(0, 100, 255), Rgb(255, 200, 0))
        assert mid == Rgb(127.5, 150.0, 127.5)

    def test_every_channel_delegated_in_order(self):
        rec = Recording()
        interp(rec, Xyz(1.0, 2.0, 3.0), Xyz(4.0, 5.0, 6.0))
        assert rec.calls == [(1.0, 4.0), (2.0, 5.0), (3.0, 6.0)]

    def test_custom_blend(self):
        v0, v1 = Rgb(0.0, 0.0, 0.0), Rgb(1.0, 1.0, 1.0)
        assert interp(Smoothstep(0.5), v0, v1) == Rgb(0.5, 0.5, 0.5)
        assert interp(Smoothstep(0.25), v0, v1).r == pytest.approx(0.15625)


class TestHue:

    def test_shortest_arc_across_zero(self):
        out = interp(0.5, Lch(50.0, 20.0, 0.0), Lch(50.0, 20.0, TAU - 0.1))
        assert out.h == pytest.approx(TAU - 0.05)
        assert abs(out.h - math.pi) > 3.0

    def test_shortest_arc_reversed(self):
        out = interp(0.5, Lch(50.0, 20.0, TAU - 0.1), Lch(50.0, 20.0, 0.0))
        assert out.h == pytest.approx(TAU - 0.05)

    def test_wraps_forward_past_zero(self):
        out = interp(0.75, Lch(50.0, 20.0, TAU - 0.2), Lch(50.0, 20.0, 0.2))
        assert out.h == pytest.approx(0.1)

    def test_plain_blend_inside_half_circle(self):
        assert lerp_hue(0.5, 1.0, 2.0) == pytest.approx(1.5)
        assert lerp_hue(0.5, 2.0, 1.0) == pytest.approx(1.5)

    def test_exactly_opposite_goes_backwards(self):
        """A gap of exactly pi shifts the larger angle down by 2*pi."""
        assert lerp_hue(0.5, 0.0, math.pi) == pytest.approx(1.5 * math.pi)

    def test_result_in_range(self):
        steps = [i / 16.0 for i in range(17)]
        hues = [i * TAU / 12.0 for i in range(12)]
        for t in steps:
            for h0 in hues:
                for h1 in hues:
                    h = lerp_hue(t, h0, h1)
                    assert 0.0 <= h < TAU

    @pytest.mark.parametrize("t", [5.0, -4.0, 12.5, -30.25])
    def test_extrapolated_hue_wraps_into_range(self, t):
        out = interp(t, Lch(50.0, 20.0, 0.0), Lch(50.0, 20.0, 3.0))
        assert 0.0 <= out.h < TAU
        assert out.h == pytest.approx((3.0 * t) % TAU)
        for h0, h1 in [(0.2, TAU - 0.2), (1.0, 4.0), (5.5, 0.5)]:
            assert 0.0 <= lerp_hue(t, h0, h1) < TAU

    def test_l_and_c_are_linear(self):
        out = interp(0.25, Lch(20.0, 10.0, 1.0), Lch(60.0, 50.0, 1.0))
        assert out.l == pytest.approx(30.0)
        assert out.c == pytest.approx(20.0)
        assert out.h == pytest.approx(1.0)

    def test_custom_blend_on_hue(self):
        out = interp(Smoothstep(0.5), Lch(50.0, 20.0, 0.0), Lch(50.0, 20.0, TAU - 0.1))
        assert out.h == pytest.approx(TAU - 0.05)


class TestErrors:

    def test_mismatched_types(self):
        with pytest.raises(TypeError, match="Cannot blend Rgb with Xyz"):
            interp(0.5, Rgb(0.0, 0.0, 0.0), Xyz(0.0, 0.0, 0.0))

    def test_mismatched_lch(self):
        with pytest.raises(TypeError):
            BlendFactor(0.5).interp(Lch(0.0, 0.0, 0.0), Lab(0.0, 0.0, 0.0))

    def test_bad_blend_parameter(self):
        with pytest.raises(TypeError, match="Unsupported blend parameter"):
            interp("half", Rgb(0.0, 0.0, 0.0), Rgb(1.0, 1.0, 1.0))

"""Tests for texture system."""

import pytest
import math
import numpy as np

from raycore.vec3 import Vec3, Point3, Color
from raycore.perlin import Perlin, NoiseSettings
from raycore.textures import (
    Texture, SolidColor, CheckerTexture, NoiseTexture, NoiseMode
)


class TestSolidColor:
    """Test SolidColor texture."""

    def test_returns_constant_color(self):
        tex = SolidColor(Color(0.5, 0.3, 0.1))
        assert tex.value(0, 0, Point3(0, 0, 0)) == Color(0.5, 0.3, 0.1)

    def test_ignores_inputs(self):
        tex = SolidColor(Color(1, 0, 0))
        c1 = tex.value(0, 0, Point3(0, 0, 0))
        c2 = tex.value(0.5, 0.5, Point3(1, 1, 1))
        c3 = tex.value(1, 1, Point3(-5, 10, 3))
        assert c1 == c2 == c3

    def test_from_rgb(self):
        color = SolidColor.from_rgb(0.2, 0.4, 0.6).value(0, 0, Point3(0, 0, 0))
        assert abs(color.x - 0.2) < 1e-6
        assert abs(color.y - 0.4) < 1e-6
        assert abs(color.z - 0.6) < 1e-6


class TestCheckerTexture:
    """Test CheckerTexture class."""

    WHITE = Color(1, 1, 1)
    BLACK = Color(0, 0, 0)

    def test_positive_product_is_even(self):
        tex = CheckerTexture.from_colors(self.WHITE, self.BLACK)
        # sin(1) > 0 on every axis
        assert tex.value(0, 0, Point3(0.1, 0.1, 0.1)) == self.WHITE

    def test_negative_product_is_odd(self):
        tex = CheckerTexture.from_colors(self.WHITE, self.BLACK)
        # sin(-1) < 0 on x only
        assert tex.value(0, 0, Point3(-0.1, 0.1, 0.1)) == self.BLACK

    def test_zero_product_is_even(self):
        tex = CheckerTexture.from_colors(self.WHITE, self.BLACK)
        assert tex.value(0, 0, Point3(0, -0.1, 0.1)) == self.WHITE

    def test_flips_across_half_period(self):
        tex = CheckerTexture.from_colors(self.WHITE, self.BLACK)
        p = Point3(0.1, 0.1, 0.1)
        q = p + Vec3(math.pi / 10, 0, 0)
        assert tex.value(0, 0, p) != tex.value(0, 0, q)

    def test_periodic_along_each_axis(self, rng):
        tex = CheckerTexture.from_colors(self.WHITE, self.BLACK)
        period = math.pi / 5
        for _ in range(50):
            p = Vec3.random(rng, -3, 3)
            for axis in (Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)):
                q = p + axis * period
                sines = math.sin(10 * p.x) * math.sin(10 * p.y) * math.sin(10 * p.z)
                if abs(sines) < 1e-6:
                    continue
                assert tex.value(0, 0, p) == tex.value(0, 0, q)

    def test_ignores_uv(self):
        tex = CheckerTexture.from_colors(self.WHITE, self.BLACK)
        p = Point3(0.3, -0.2, 0.7)
        assert tex.value(0, 0, p) == tex.value(0.9, 0.4, p)

    def test_delegates_to_sub_textures(self):
        even = CheckerTexture.from_colors(Color(1, 0, 0), Color(0, 1, 0), frequency=1.0)
        tex = CheckerTexture(even, SolidColor(self.BLACK))
        assert tex.value(0, 0, Point3(0.1, 0.1, 0.1)) == Color(1, 0, 0)

    def test_shared_sub_texture(self):
        shared = SolidColor(Color(0.2, 0.4, 0.6))
        a = CheckerTexture(shared, SolidColor(self.BLACK))
        b = CheckerTexture(SolidColor(self.WHITE), shared)
        assert a.even is b.odd


class TestNoiseMode:
    """Test noise mode parsing."""

    def test_from_string(self):
        tex = NoiseTexture(mode="smooth", rng=np.random.default_rng(1))
        assert tex.mode is NoiseMode.SMOOTH

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            NoiseTexture(mode="wood", rng=np.random.default_rng(1))

    def test_default_is_marble(self):
        tex = NoiseTexture(rng=np.random.default_rng(1))
        assert tex.mode is NoiseMode.MARBLE


class TestNoiseTexture:
    """Test NoiseTexture class."""

    @pytest.fixture
    def perlin(self, rng):
        return Perlin(rng=rng)

    @pytest.mark.parametrize("mode", list(NoiseMode))
    def test_never_negative(self, perlin, rng, mode):
        tex = NoiseTexture(scale=4.0, mode=mode, perlin=perlin)
        for _ in range(100):
            color = tex.value(0, 0, Vec3.random(rng, -10, 10))
            assert color.x >= 0
            assert color.y >= 0
            assert color.z >= 0

    @pytest.mark.parametrize("mode", [NoiseMode.SMOOTH, NoiseMode.MARBLE])
    def test_bounded_modes_in_unit_range(self, perlin, rng, mode):
        tex = NoiseTexture(scale=4.0, mode=mode, perlin=perlin)
        for _ in range(100):
            color = tex.value(0, 0, Vec3.random(rng, -10, 10))
            assert 0 <= color.x <= 1

    def test_smooth_formula(self, perlin):
        tex = NoiseTexture(scale=3.0, mode=NoiseMode.SMOOTH, perlin=perlin)
        p = Point3(0.4, 1.3, -0.8)
        expected = 0.5 * (1 + perlin.noise(p * 3.0))
        assert abs(tex.value(0, 0, p).x - expected) < 1e-12

    def test_smooth_is_half_on_lattice(self, perlin):
        tex = NoiseTexture(scale=1.0, mode=NoiseMode.SMOOTH, perlin=perlin)
        assert tex.value(0, 0, Point3(3, -2, 5)) == Color(0.5, 0.5, 0.5)

    def test_turbulence_formula(self, perlin):
        tex = NoiseTexture(scale=2.0, mode=NoiseMode.TURBULENCE, perlin=perlin)
        p = Point3(0.4, 1.3, -0.8)
        assert abs(tex.value(0, 0, p).y - perlin.turbulence(p * 2.0)) < 1e-12

    def test_marble_formula(self, perlin):
        tex = NoiseTexture(scale=4.0, mode=NoiseMode.MARBLE, perlin=perlin)
        p = Point3(0.4, 1.3, -0.8)
        expected = 0.5 * (1 + math.sin(4.0 * p.z + 10 * perlin.turbulence(p)))
        assert abs(tex.value(0, 0, p).z - expected) < 1e-12

    def test_marble_gain_from_settings(self, rng):
        perlin = Perlin(NoiseSettings(marble_gain=0.0), rng)
        tex = NoiseTexture(scale=1.0, mode=NoiseMode.MARBLE, perlin=perlin)
        p = Point3(0.4, 1.3, 0.5)
        assert abs(tex.value(0, 0, p).x - 0.5 * (1 + math.sin(0.5))) < 1e-12

    def test_marble_varies_with_z(self, perlin):
        tex = NoiseTexture(scale=1.0, mode=NoiseMode.MARBLE, perlin=perlin)
        values = [tex.value(0, 0, Point3(0, 0, z * 0.5)).x for z in range(10)]
        assert max(values) - min(values) > 0.1

    def test_tints_with_color(self, perlin):
        tex = NoiseTexture(scale=1.0, mode=NoiseMode.SMOOTH, color=Color(1, 0.5, 0), perlin=perlin)
        c = tex.value(0, 0, Point3(0.3, 0.6, 0.9))
        assert abs(c.y - 0.5 * c.x) < 1e-12
        assert c.z == 0

    def test_shares_generator(self, perlin):
        a = NoiseTexture(scale=1.0, perlin=perlin)
        b = NoiseTexture(scale=5.0, perlin=perlin)
        assert a.noise is b.noise

    def test_is_texture(self, perlin):
        assert isinstance(NoiseTexture(perlin=perlin), Texture)

"""Tests for the transmittance texture parameterization."""

import math

import numpy as np
import pytest

from skylut.geometry.intersection import distance_to_top_atmosphere_boundary
from skylut.texture.parameterization import (
    TRANSMITTANCE_TEXTURE_HEIGHT,
    TRANSMITTANCE_TEXTURE_WIDTH,
    get_r_mu_from_transmittance_texture_uv,
    get_texture_coord_from_unit_range,
    get_transmittance_texture_uv_from_r_mu,
    get_unit_range_from_texture_coord,
)

WIDTH = TRANSMITTANCE_TEXTURE_WIDTH
HEIGHT = TRANSMITTANCE_TEXTURE_HEIGHT


def _texel_centers(size: int) -> np.ndarray:
    return (np.arange(size) + 0.5) / size


def test_texture_size():
    assert (WIDTH, HEIGHT) == (256, 64)


class TestUnitRange:
    """Test the half-texel correction."""

    def test_first_and_last_texel_centers(self):
        assert get_unit_range_from_texture_coord(0.5 / WIDTH, WIDTH) == pytest.approx(
            0.0, abs=1e-15
        )
        assert get_unit_range_from_texture_coord(
            1.0 - 0.5 / WIDTH, WIDTH
        ) == pytest.approx(1.0, rel=1e-15)

    def test_inverse(self):
        x = np.linspace(0.0, 1.0, 11)

        u = get_texture_coord_from_unit_range(x, HEIGHT)

        np.testing.assert_allclose(
            get_unit_range_from_texture_coord(u, HEIGHT), x, atol=1e-15
        )

    def test_texture_coord_of_unit_range_endpoints(self):
        assert get_texture_coord_from_unit_range(0.0, 4) == 0.125
        assert get_texture_coord_from_unit_range(1.0, 4) == 0.875


class TestRMuFromUv:
    """Test the uv -> (r, mu) mapping."""

    @pytest.mark.parametrize(
        "uv",
        [
            (0.5 / WIDTH, 0.5 / HEIGHT),
            (1.0 - 0.5 / WIDTH, 1.0 - 0.5 / HEIGHT),
            (0.5 / WIDTH, 1.0 - 0.5 / HEIGHT),
            (1.0 - 0.5 / WIDTH, 0.5 / HEIGHT),
        ],
    )
    def test_boundary_texels_in_range(self, earth, uv):
        r, mu = get_r_mu_from_transmittance_texture_uv(earth, uv)

        assert math.isfinite(r) and math.isfinite(mu)
        assert earth.bottom_radius <= r <= earth.top_radius
        assert -1.0 <= mu <= 1.0

    def test_bottom_row_is_ground(self, earth):
        r, _ = get_r_mu_from_transmittance_texture_uv(earth, (0.3, 0.5 / HEIGHT))

        assert r == pytest.approx(earth.bottom_radius, rel=1e-15)

    def test_top_row_is_top_of_atmosphere(self, earth):
        r, _ = get_r_mu_from_transmittance_texture_uv(
            earth, (0.3, 1.0 - 0.5 / HEIGHT)
        )

        assert r == pytest.approx(earth.top_radius, rel=1e-12)

    def test_first_column_looks_straight_up(self, earth):
        _, mu = get_r_mu_from_transmittance_texture_uv(earth, (0.5 / WIDTH, 0.4))

        assert mu == pytest.approx(1.0, abs=1e-9)

    def test_last_column_looks_at_horizon(self, earth):
        r, mu = get_r_mu_from_transmittance_texture_uv(
            earth, (1.0 - 0.5 / WIDTH, 0.4)
        )

        mu_horizon = -math.sqrt(1.0 - (earth.bottom_radius / r) ** 2)
        assert mu == pytest.approx(mu_horizon, abs=1e-7)

    def test_zero_distance_gives_mu_one(self, earth):
        """At the top of the atmosphere looking up, d is 0 and mu is 1."""
        _, mu = get_r_mu_from_transmittance_texture_uv(
            earth, (0.5 / WIDTH, 1.0 - 0.5 / HEIGHT)
        )

        assert mu == 1.0

    def test_pixel_corner_coordinates_are_clamped(self, earth):
        """Pixel corners (no half-texel offset) still yield valid rays."""
        frag = np.stack(
            np.meshgrid(np.arange(WIDTH), np.arange(HEIGHT), indexing="xy"), axis=-1
        )
        uv = frag / np.array([WIDTH, HEIGHT])

        r, mu = get_r_mu_from_transmittance_texture_uv(earth, uv)

        assert r.shape == (HEIGHT, WIDTH)
        assert np.all(np.isfinite(r)) and np.all(np.isfinite(mu))
        assert np.all(r >= earth.bottom_radius) and np.all(r <= earth.top_radius)
        assert np.all(mu >= -1.0) and np.all(mu <= 1.0)

    def test_pixel_corner_first_column(self, earth):
        """Column 0 corners give zenith rays low down and downward rays near the top."""
        height = 8
        uv = np.stack([np.zeros(height), np.arange(height) / height], axis=-1)

        _, mu = get_r_mu_from_transmittance_texture_uv(earth, uv, 16, height)

        np.testing.assert_array_equal(mu[:5], 1.0)
        assert mu[5] == -1.0
        assert mu[6] == pytest.approx(-0.8033, abs=1e-3)
        assert mu[7] == pytest.approx(-0.16865, abs=1e-4)

    def test_distance_reconstruction(self, earth):
        """The distance to the top along (r, mu) is the interpolated d."""
        u, v = np.meshgrid(_texel_centers(WIDTH), _texel_centers(HEIGHT))
        uv = np.stack([u, v], axis=-1)

        r, mu = get_r_mu_from_transmittance_texture_uv(earth, uv)

        H = math.sqrt(earth.top_radius**2 - earth.bottom_radius**2)
        x_mu = get_unit_range_from_texture_coord(u, WIDTH)
        rho = H * get_unit_range_from_texture_coord(v, HEIGHT)
        d_min = earth.top_radius - r
        d_max = rho + H
        expected = d_min + x_mu * (d_max - d_min)

        d = distance_to_top_atmosphere_boundary(earth, r, mu)

        np.testing.assert_allclose(d, expected, rtol=1e-6, atol=1e-9)

    def test_rejects_uv_outside_unit_square(self, earth):
        with pytest.raises(ValueError):
            get_r_mu_from_transmittance_texture_uv(earth, (1.2, 0.5))


class TestUvFromRMu:
    """Test the (r, mu) -> uv lookup used by the renderer."""

    def test_round_trip_texel_centers(self, earth):
        u, v = np.meshgrid(_texel_centers(WIDTH)[::17], _texel_centers(HEIGHT)[::7])
        uv = np.stack([u, v], axis=-1)

        r, mu = get_r_mu_from_transmittance_texture_uv(earth, uv)
        uv_back = get_transmittance_texture_uv_from_r_mu(earth, r, mu)

        np.testing.assert_allclose(uv_back, uv, atol=1e-6)

    def test_ground_zenith(self, earth):
        uv = get_transmittance_texture_uv_from_r_mu(earth, earth.bottom_radius, 1.0)

        np.testing.assert_allclose(uv, [0.5 / WIDTH, 0.5 / HEIGHT], atol=1e-12)

    def test_rejects_r_outside_atmosphere(self, earth):
        with pytest.raises(ValueError):
            get_transmittance_texture_uv_from_r_mu(earth, earth.top_radius + 1.0, 1.0)

"""Tests for path building and Bezier smoothing."""

import pytest
from scroll.path import bezier_point, build_path
from scroll.vec import midpoint

TRIANGLE = ((0.0, 0.0), (10.0, 0.0), (10.0, 10.0))
ZIGZAG = ((0.0, 0.0), (3.0, 7.0), (5.5, -1.0), (9.0, 4.0), (12.25, 0.5))


class TestWithoutSmoothing:
    def test_waypoints_pass_through(self):
        assert build_path(ZIGZAG, smoothing=False) == ZIGZAG

    def test_resolution_ignored(self):
        """Resolution is not checked when smoothing is off."""
        assert build_path(TRIANGLE, smoothing=False, resolution=1) == TRIANGLE

    def test_list_input_returns_tuple(self):
        assert build_path([(0.0, 0.0), (1.0, 1.0)]) == ((0.0, 0.0), (1.0, 1.0))


class TestWithSmoothing:
    def test_two_points_unchanged(self):
        pts = ((0.0, 0.0), (4.0, 2.0))
        assert build_path(pts, smoothing=True, resolution=10) == pts

    @pytest.mark.parametrize("resolution", [2, 3, 15])
    def test_output_length(self, resolution):
        path = build_path(ZIGZAG, smoothing=True, resolution=resolution)
        assert len(path) == (len(ZIGZAG) - 2) * resolution + 2

    def test_endpoints_exact(self):
        path = build_path(ZIGZAG, smoothing=True, resolution=7)
        assert path[0] == ZIGZAG[0]
        assert path[-1] == ZIGZAG[-1]

    def test_known_samples(self):
        path = build_path(TRIANGLE, smoothing=True, resolution=3)
        expected = [(0.0, 0.0), (5.0, 0.0), (8.75, 1.25), (10.0, 5.0), (10.0, 10.0)]
        assert len(path) == len(expected)
        for got, want in zip(path, expected):
            assert got == pytest.approx(want)

    def test_curve_starts_and_ends_at_leg_midpoints(self):
        resolution = 5
        path = build_path(ZIGZAG, smoothing=True, resolution=resolution)
        for i in range(1, len(ZIGZAG) - 1):
            first = path[1 + (i - 1) * resolution]
            last = path[(i - 1) * resolution + resolution]
            assert first == pytest.approx(midpoint(ZIGZAG[i - 1], ZIGZAG[i]))
            assert last == pytest.approx(midpoint(ZIGZAG[i], ZIGZAG[i + 1]))

    def test_deterministic(self):
        assert build_path(ZIGZAG, True, 9) == build_path(ZIGZAG, True, 9)


class TestValidation:
    def test_single_waypoint_rejected(self):
        with pytest.raises(ValueError):
            build_path([(0.0, 0.0)])

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            build_path([], smoothing=True)

    @pytest.mark.parametrize("resolution", [1, 0, -3])
    def test_low_resolution_rejected(self, resolution):
        with pytest.raises(ValueError, match="resolution"):
            build_path(TRIANGLE, smoothing=True, resolution=resolution)


def test_bezier_point_matches_standard_form():
    start, control, end = (1.0, 2.0), (4.0, 8.0), (9.0, 3.0)
    for t in (0.0, 0.2, 0.5, 0.9, 1.0):
        expected = (
            (1 - t) ** 2 * start[0] + 2 * t * (1 - t) * control[0] + t * t * end[0],
            (1 - t) ** 2 * start[1] + 2 * t * (1 - t) * control[1] + t * t * end[1],
        )
        assert bezier_point(control, start, end, t) == pytest.approx(expected)

"""
tests/unit/test_plank.py - Tests for plank flattening and layout.
"""

import math

import pytest

from lapstrake.errors import PlankError, TooFewPointsError
from lapstrake.geometry import Point2D, Point3D
from lapstrake.hull import FlattenedPlank, Plank, layout_planks, practically_zero, triangulate


def assert_close(actual, expected, abs=1e-9):
    assert actual.to_tuple() == pytest.approx(expected.to_tuple(), abs=abs)


def rectangle_plank(length=4.0, width=1.0, count=5, resolution=2):
    """A flat plank lying in the x-z plane."""
    xs = [length * i / (count - 1) for i in range(count)]
    bottom = [Point3D(x, 0.0, 0.0) for x in xs]
    top = [Point3D(x, 0.0, width) for x in xs]
    return Plank.create(bottom, top, resolution)


def twisted_plank():
    """A plank that bends around and twists along its length."""
    bottom = []
    top = []
    for i in range(6):
        x = float(i)
        flare = 0.2 * i
        bottom.append(Point3D(x, 1.0 + 0.1 * i * i / 5, 0.3 * math.sin(i / 2)))
        top.append(Point3D(x, 1.5 + flare, 0.8 + 0.3 * math.sin(i / 2)))
    return Plank.create(bottom, top, 4)


class TestTriangulate:
    """Tests for placing the third corner of a triangle."""

    def test_right_triangle(self):
        """A 3-4-5 triangle."""
        assert_close(triangulate(Point2D(1, 4), Point2D(1, 1), 4, 5), Point2D(5, 4))

    def test_equilateral_rotation(self):
        """The third point lies counterclockwise from pt1 toward pt2."""
        p = triangulate(Point2D(0, 1), Point2D(1, 0), math.sqrt(2), math.sqrt(2))
        assert p.to_tuple() == pytest.approx((1.3660254, 1.3660254), abs=1e-6)

    def test_distances_kept(self):
        """The result is x from pt1 and y from pt2."""
        pt1 = Point2D(0.3, -1.2)
        pt2 = Point2D(2.0, 0.5)
        p = triangulate(pt1, pt2, 1.7, 2.1)
        assert p.distance_to(pt1) == pytest.approx(1.7)
        assert p.distance_to(pt2) == pytest.approx(2.1)

    def test_coincident_pivots(self):
        """With no orientation, the point goes along -x from pt1."""
        assert triangulate(Point2D(2, 3), Point2D(2, 3), 1.5, 1.0) == Point2D(0.5, 3)

    def test_zero_first_distance(self):
        """A zero x pivots about pt2 and lands on pt1."""
        assert_close(triangulate(Point2D(0, 0), Point2D(3, 0), 0.0, 3.0), Point2D(0, 0))

    def test_impossible_triangle(self):
        """Lengths breaking the triangle inequality still give a point."""
        assert_close(triangulate(Point2D(0, 0), Point2D(1, 0), 5.0, 1.0), Point2D(5, 0))

    def test_practically_zero(self):
        """Tolerance for degenerate lengths."""
        assert practically_zero(1e-7)
        assert not practically_zero(1e-5)


class TestFlattenedPlank:
    """Tests for flattened plank transforms."""

    @pytest.fixture
    def slanted(self):
        return FlattenedPlank(
            top_line=(Point2D(1, 1), Point2D(2, 2), Point2D(3, 3)),
            bottom_line=(Point2D(1, 2), Point2D(2, 3), Point2D(3, 4)),
        )

    def test_edges_must_match(self):
        """Top and bottom have the same number of points."""
        with pytest.raises(PlankError):
            FlattenedPlank(top_line=(Point2D(0, 0),), bottom_line=())

    def test_outline_is_closed(self, slanted):
        """The outline returns to its start."""
        outline = slanted.outline()
        assert len(outline) == 7
        assert outline[0] == outline[-1]
        assert outline[3] == Point2D(3, 4)

    def test_oriented_horizontally(self, slanted):
        """The top chord ends up level, pivoting on the first top point."""
        level = slanted.oriented_horizontally()
        assert level.top_line[0] == Point2D(1, 1)
        assert level.top_line[-1].y == pytest.approx(1.0)
        assert level.top_line[-1].x == pytest.approx(1 + 2 * math.sqrt(2))

    def test_shifted_up(self, slanted):
        """shifted_up translates along y."""
        moved = slanted.shifted_up(2.5)
        assert moved.min_y == pytest.approx(slanted.min_y + 2.5)
        assert moved.max_y == pytest.approx(slanted.max_y + 2.5)

    def test_layout_stacks_without_overlap(self, slanted):
        """Each plank sits a gap beyond the one before."""
        laid = layout_planks([slanted, slanted, slanted], gap=0.1)
        assert len(laid) == 3
        for lower, upper in zip(laid, laid[1:]):
            assert upper.min_y == pytest.approx(lower.max_y + 0.1)

    def test_layout_empty(self):
        """Nothing to lay out."""
        assert layout_planks([]) == []


class TestPlank:
    """Tests for planks on the hull."""

    def test_edges_need_four_points(self):
        """Each edge is a spline."""
        points = [Point3D(float(i), 0, 0) for i in range(3)]
        with pytest.raises(TooFewPointsError):
            Plank.create(points, [p + Point3D(0, 0, 1) for p in points], 10)

    def test_resolution_scales_with_points(self):
        """Resampling resolution grows with the number of edge points."""
        assert rectangle_plank(count=5, resolution=2).resolution == 10

    def test_edge_lengths(self):
        """One left edge, then one quad per resampled interval."""
        first, quads = rectangle_plank().edge_lengths()
        assert first == pytest.approx(1.0)
        assert len(quads) == 10
        top, diagonal, right, bottom = quads[0]
        assert top == pytest.approx(0.4)
        assert diagonal == pytest.approx(math.sqrt(1.16))
        assert right == pytest.approx(1.0)
        assert bottom == pytest.approx(0.4)

    def test_flatten_flat_plank(self):
        """A plank that is already flat keeps its shape."""
        flat = rectangle_plank().flatten()
        bounds = flat.bounds()
        assert bounds.width == pytest.approx(4.0)
        assert bounds.height == pytest.approx(1.0)
        for top, bottom in zip(flat.top_line, flat.bottom_line):
            assert top.distance_to(bottom) == pytest.approx(1.0)

    def test_flatten_keeps_triangle_edges(self):
        """Every triangle of the strip keeps its 3D edge lengths."""
        plank = twisted_plank()
        first, quads = plank.edge_lengths()
        flat = plank.flatten()
        top, bot = flat.top_line, flat.bottom_line
        assert top[0].distance_to(bot[0]) == pytest.approx(first)
        for i, (top_len, diagonal, right_len, bot_len) in enumerate(quads):
            assert top[i].distance_to(top[i + 1]) == pytest.approx(top_len)
            assert bot[i].distance_to(top[i + 1]) == pytest.approx(diagonal)
            assert top[i + 1].distance_to(bot[i + 1]) == pytest.approx(right_len)
            assert bot[i].distance_to(bot[i + 1]) == pytest.approx(bot_len)

    def test_render_lines(self):
        """The bottom edge is closed by the top edge's endpoints."""
        plank = rectangle_plank()
        top, bottom = plank.render_lines()
        assert bottom[0] == top[0]
        assert bottom[-1] == top[-1]
        assert len(bottom) == len(plank.bottom_line.sample()) + 2

import math

import pytest

from cubegeom.coordinate import ORIGIN, Coordinate
from cubegeom.errors import InvalidArgument
from cubegeom.geom import close, vclose
from cubegeom.segment import Segment


def seg(a, b):
    return Segment(Coordinate(*a), Coordinate(*b))


class TestSegment:
    """unit tests for cubegeom Segment"""

    def test_create(self):
        s = seg((0, 0, 0), (1, 2, 2))
        assert s.start == ORIGIN
        assert s.end == Coordinate(1, 2, 2)
        assert close(s.length(), 3.0)
        assert s.direction() == (1.0, 2.0, 2.0)
        assert s.midpoint() == Coordinate(0.5, 1, 1)

    def test_rejects_bad_endpoints(self):
        with pytest.raises(InvalidArgument):
            Segment(None, ORIGIN)
        with pytest.raises(InvalidArgument):
            Segment(ORIGIN, None)
        with pytest.raises(InvalidArgument):
            Segment(Coordinate(1, 1, 1), Coordinate(1, 1, 1))

    def test_rejects_underflowing_length(self):
        with pytest.raises(InvalidArgument):
            Segment(ORIGIN, Coordinate(1e-170, 0, 0))
        s = seg((0, 0, 0), (1e-150, 0, 0))
        assert s.closest_point_to(Coordinate(1, 1, 1)) == Coordinate(1e-150, 0, 0)

    def test_equality(self):
        assert seg((0, 0, 0), (1, 0, 0)) == seg((0, 0, 0), (1, 0, 0))
        assert hash(seg((0, 0, 0), (1, 0, 0))) == hash(seg((0, 0, 0), (1, 0, 0)))
        assert seg((0, 0, 0), (1, 0, 0)) != seg((1, 0, 0), (0, 0, 0))
        assert seg((0, 0, 0), (1, 0, 0)).reversed() == seg((1, 0, 0), (0, 0, 0))

    def test_point_at(self):
        s = seg((-5, -1, 0), (5, 3, 0))
        assert vclose(s.point_at(-0.5), (-10, -3, 0))
        assert vclose(s.point_at(0.0), s.start)
        assert vclose(s.point_at(0.5), (0, 1, 0))
        assert vclose(s.point_at(1.5), (10, 5, 0))

    def test_format(self):
        assert str(seg((0, 0, 0), (3, 4, 0))) == \
            'Segment[(0.00, 0.00, 0.00) -> (3.00, 4.00, 0.00), length=5.00]'


class TestParallel:
    def test_parallel(self):
        a = seg((0, 0, 0), (1, 0, 0))
        b = seg((0, 1, 0), (1, 1, 0))
        assert a.is_parallel(b)
        assert b.is_parallel(a)
        # antiparallel still counts
        assert a.is_parallel(seg((5, 5, 5), (3, 5, 5)))

    def test_not_parallel(self):
        a = seg((0, 0, 0), (1, 0, 0))
        assert not a.is_parallel(seg((0, 0, 1), (0, 1, 1)))
        assert not a.is_parallel(seg((0, 0, 0), (1, 1e-6, 0)))

    def test_rejects_none(self):
        with pytest.raises(InvalidArgument):
            seg((0, 0, 0), (1, 0, 0)).is_parallel(None)


class TestContainsPoint:
    def test_on_segment(self):
        s = seg((0, 0, 0), (2, 2, 2))
        assert s.contains_point(Coordinate(1, 1, 1))
        assert s.contains_point(s.start)
        assert s.contains_point(s.end)

    def test_off_segment(self):
        s = seg((0, 0, 0), (2, 2, 2))
        # collinear but beyond the ends
        assert not s.contains_point(Coordinate(3, 3, 3))
        assert not s.contains_point(Coordinate(-1, -1, -1))
        # not collinear
        assert not s.contains_point(Coordinate(1, 1, 1.001))

    def test_rejects_none(self):
        with pytest.raises(InvalidArgument):
            seg((0, 0, 0), (1, 0, 0)).contains_point(None)


class TestClosestPoint:
    def test_projection(self):
        s = seg((0, 0, 0), (10, 0, 0))
        assert vclose(s.closest_point_to(Coordinate(3, 5, -2)), (3, 0, 0))

    def test_clamped(self):
        s = seg((0, 0, 0), (10, 0, 0))
        assert s.closest_point_to(Coordinate(-4, 1, 0)) == s.start
        assert s.closest_point_to(Coordinate(14, 1, 0)) == s.end

    def test_rejects_none(self):
        with pytest.raises(InvalidArgument):
            seg((0, 0, 0), (1, 0, 0)).closest_point_to(None)


class TestLineDistance:
    def test_parallel_lines(self):
        a = seg((0, 0, 0), (1, 0, 0))
        b = seg((0, 1, 0), (1, 1, 0))
        assert a.is_parallel(b)
        assert close(a.shortest_distance_to(b), 1.0)

    def test_skew_lines(self):
        a = seg((0, 0, 0), (1, 0, 0))
        b = seg((0, 0, 1), (0, 1, 1))
        assert not a.is_parallel(b)
        assert close(a.shortest_distance_to(b), 1.0)
        assert close(b.shortest_distance_to(a), 1.0)

    def test_intersecting_lines(self):
        a = seg((-1, 0, 0), (1, 0, 0))
        b = seg((0, -1, 0), (0, 1, 0))
        assert a.shortest_distance_to(b) == 0.0

    def test_collinear(self):
        a = seg((0, 0, 0), (1, 0, 0))
        b = seg((2, 0, 0), (3, 0, 0))
        assert close(a.shortest_distance_to(b), 0.0)

    def test_infinite_line_behaviour(self):
        # parallel segments far apart along their length: the line
        # distance ignores the gap along x
        a = seg((0, 0, 0), (1, 0, 0))
        b = seg((10, 1, 0), (11, 1, 0))
        assert close(a.shortest_distance_to(b), 1.0)
        # skew segments whose lines cross outside both segments
        c = seg((0, 0, 0), (1, 0, 0))
        d = seg((5, 5, 2), (5, 6, 2))
        assert close(c.shortest_distance_to(d), 2.0)

    def test_nearly_coplanar(self):
        a = seg((0, 0, 0), (1, 0, 0))
        b = seg((0, -1, 1e-9), (0, 1, 1e-9))
        assert math.isclose(a.shortest_distance_to(b), 1e-9, rel_tol=1e-9)

    def test_rejects_none(self):
        with pytest.raises(InvalidArgument):
            seg((0, 0, 0), (1, 0, 0)).shortest_distance_to(None)


class TestSegmentDistance:
    def test_matches_line_distance_when_inside(self):
        a = seg((-1, 0, 0), (1, 0, 0))
        b = seg((0, -1, 1), (0, 1, 1))
        assert close(a.segment_distance_to(b), 1.0)
        p, q = a.closest_points_to(b)
        assert vclose(p, (0, 0, 0))
        assert vclose(q, (0, 0, 1))

    def test_parallel_with_gap(self):
        a = seg((0, 0, 0), (1, 0, 0))
        b = seg((10, 1, 0), (11, 1, 0))
        assert close(a.segment_distance_to(b), math.sqrt(82))

    def test_collinear_with_gap(self):
        a = seg((0, 0, 0), (1, 0, 0))
        b = seg((2, 0, 0), (3, 0, 0))
        assert close(a.segment_distance_to(b), 1.0)
        assert close(b.segment_distance_to(a), 1.0)

    def test_overlapping_parallel(self):
        a = seg((0, 0, 0), (4, 0, 0))
        b = seg((1, 2, 0), (3, 2, 0))
        assert close(a.segment_distance_to(b), 2.0)

    def test_skew_outside_range(self):
        c = seg((0, 0, 0), (1, 0, 0))
        d = seg((5, 5, 2), (5, 6, 2))
        p, q = c.closest_points_to(d)
        assert vclose(p, (1, 0, 0))
        assert vclose(q, (5, 5, 2))
        assert close(c.segment_distance_to(d), math.sqrt(45))
        assert c.segment_distance_to(d) > c.shortest_distance_to(d)

    def test_short_skew_segments(self):
        a = seg((0, 0, 0), (1e-6, 0, 0))
        b = seg((5e-7, -1e-6, 1e-7), (5e-7, 1e-6, 1e-7))
        assert a.is_parallel(b)
        p, q = a.closest_points_to(b)
        assert vclose(p, (5e-7, 0, 0), 1e-15)
        assert vclose(q, (5e-7, 0, 1e-7), 1e-15)
        assert math.isclose(a.segment_distance_to(b), 1e-7, rel_tol=1e-9)

    def test_touching(self):
        a = seg((0, 0, 0), (1, 0, 0))
        b = seg((1, 0, 0), (1, 1, 0))
        assert close(a.segment_distance_to(b), 0.0)

    def test_rejects_none(self):
        with pytest.raises(InvalidArgument):
            seg((0, 0, 0), (1, 0, 0)).segment_distance_to(None)

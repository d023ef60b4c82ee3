import unittest

from geometry_td.path import Path, default_path, point_segment_distance


class TestPointSegmentDistance(unittest.TestCase):
    def test_projection_inside_segment(self):
        self.assertAlmostEqual(point_segment_distance(5, 3, 0, 0, 10, 0), 3.0)

    def test_projection_clamped_to_endpoint(self):
        self.assertAlmostEqual(point_segment_distance(-3, -4, 0, 0, 10, 0), 5.0)
        self.assertAlmostEqual(point_segment_distance(13, 4, 0, 0, 10, 0), 5.0)

    def test_degenerate_segment(self):
        self.assertAlmostEqual(point_segment_distance(3, 4, 0, 0, 0, 0), 5.0)


class TestPath(unittest.TestCase):
    def setUp(self):
        self.path = Path([(0, 0), (10, 0), (10, 10)])

    def test_segments_and_length(self):
        self.assertEqual(len(self.path.segments), 2)
        self.assertEqual(self.path.length, 20)
        self.assertEqual([seg.offset for seg in self.path.segments], [0, 10])

    def test_position_at_endpoints(self):
        self.assertEqual(self.path.position_at(0), (0, 0))
        self.assertEqual(self.path.position_at(-5), (0, 0))
        self.assertEqual(self.path.position_at(20), (10, 10))
        self.assertEqual(self.path.position_at(99), (10, 10))

    def test_position_at_interpolates(self):
        x, y = self.path.position_at(15)
        self.assertAlmostEqual(x, 10)
        self.assertAlmostEqual(y, 5)
        x, y = self.path.position_at(4)
        self.assertAlmostEqual(x, 4)
        self.assertAlmostEqual(y, 0)

    def test_positions_lie_on_polyline(self):
        path = default_path()
        steps = 200
        for i in range(steps + 1):
            x, y = path.position_at(path.length * i / steps)
            self.assertLess(path.min_distance_to(x, y), 1e-6)

    def test_min_distance_off_polyline_is_positive(self):
        self.assertAlmostEqual(self.path.min_distance_to(5, 3), 3.0)
        self.assertAlmostEqual(self.path.min_distance_to(13, 5), 3.0)
        self.assertGreater(self.path.min_distance_to(5, 0.01), 0)
        self.assertEqual(self.path.min_distance_to(5, 0), 0)

    def test_duplicate_waypoints_are_dropped(self):
        path = Path([(0, 0), (0, 0), (10, 0)])
        self.assertEqual(len(path.segments), 1)
        self.assertEqual(path.length, 10)

    def test_needs_two_distinct_points(self):
        with self.assertRaises(ValueError):
            Path([(1, 1)])
        with self.assertRaises(ValueError):
            Path([(1, 1), (1, 1)])

    def test_default_path_shape(self):
        path = default_path()
        self.assertEqual(path.start, (-80, 80))
        self.assertEqual(path.end, (1040, 460))
        self.assertAlmostEqual(path.length, 3100)
        offsets = [seg.offset for seg in path.segments]
        self.assertEqual(offsets, sorted(set(offsets)))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

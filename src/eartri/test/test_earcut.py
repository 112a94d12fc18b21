import logging
from random import seed
from math import pi, cos, sin
import unittest

from eartri import earcut, deviation, polygon_signed_area
from eartri.polygon.earclip import EarClipper, PASS_SPLIT
from eartri.polygon.helpers import random_star_polygon
from eartri.polygon.iter import TriangleIterator, RingIterator
from eartri.polygon.ring import linked_list

SQUARE = [0, 0, 10, 0, 10, 10, 0, 10]
SQUARE_WITH_HOLE = SQUARE + [2, 2, 8, 2, 8, 8, 2, 8]
L_SHAPE = [0, 0, 4, 0, 4, 2, 2, 2, 2, 4, 0, 4]
# two triangles touching in a single point (2, 1)
BOWTIE = [0, 0, 2, 1, 4, 0, 4, 2, 2, 1, 0, 2]


def reversed_ring(data, dim=2):
    """Same ring, vertices in opposite order"""
    out = []
    for i in range(len(data) - dim, -1, -dim):
        out.extend(data[i:i + dim])
    return out


def triangle_coordinates(data, triangles, dim=2):
    """Set of triangles, every triangle as a set of coordinate tuples"""
    return set(
        frozenset((data[i * dim], data[i * dim + 1]) for i in triangle)
        for triangle in TriangleIterator(triangles))


def triangle_areas(data, triangles, dim=2):
    areas = []
    for a, b, c in TriangleIterator(triangles):
        ax, ay = data[a * dim], data[a * dim + 1]
        bx, by = data[b * dim], data[b * dim + 1]
        cx, cy = data[c * dim], data[c * dim + 1]
        areas.append(abs((bx - ax) * (cy - ay) - (cx - ax) * (by - ay)) / 2.)
    return areas


class TestEarcutSimple(unittest.TestCase):

    def test_square(self):
        triangles = earcut(SQUARE)
        self.assertEqual(len(triangles), 6)
        self.assertEqual(set(triangles), set(range(4)))
        self.assertAlmostEqual(sum(triangle_areas(SQUARE, triangles)), 100.)
        self.assertEqual(deviation(SQUARE, None, 2, triangles), 0.)

    def test_triangle(self):
        triangles = earcut([0, 0, 10, 0, 0, 10])
        self.assertEqual(sorted(triangles), [0, 1, 2])

    def test_triangle_clockwise(self):
        triangles = earcut([0, 0, 0, 10, 10, 0])
        self.assertEqual(sorted(triangles), [0, 1, 2])

    def test_l_shape(self):
        triangles = earcut(L_SHAPE)
        # n - 2 triangles, every vertex used
        self.assertEqual(len(triangles), 3 * (6 - 2))
        self.assertEqual(set(triangles), set(range(6)))
        self.assertEqual(deviation(L_SHAPE, None, 2, triangles), 0.)
        for area in triangle_areas(L_SHAPE, triangles):
            self.assertGreater(area, 0.)

    def test_reversed_winding_same_triangles(self):
        for data in (SQUARE, L_SHAPE):
            forward = earcut(data)
            backward_data = reversed_ring(data)
            backward = earcut(backward_data)
            self.assertEqual(triangle_coordinates(data, forward),
                             triangle_coordinates(backward_data, backward))

    def test_closed_ring(self):
        # first point repeated at the end
        data = SQUARE + [0, 0]
        triangles = earcut(data)
        self.assertEqual(len(triangles), 6)
        self.assertNotIn(4, triangles)

    def test_three_dimensions(self):
        data = [0, 0, 5, 10, 0, 5, 10, 10, 5, 0, 10, 5]
        triangles = earcut(data, dim=3)
        self.assertEqual(len(triangles), 6)
        self.assertEqual(set(triangles), set(range(4)))
        self.assertEqual(deviation(data, None, 3, triangles), 0.)

    def test_collinear_point(self):
        data = [0, 0, 5, 0, 10, 0, 10, 10, 0, 10]
        triangles = earcut(data)
        self.assertEqual(len(triangles) % 3, 0)
        self.assertEqual(deviation(data, None, 2, triangles), 0.)


class TestEarcutDegenerate(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(earcut([]), [])

    def test_one_point(self):
        self.assertEqual(earcut([1, 1]), [])

    def test_two_points(self):
        self.assertEqual(earcut([0, 0, 1, 1]), [])

    def test_all_same_point(self):
        self.assertEqual(earcut([3, 3, 3, 3, 3, 3, 3, 3]), [])

    def test_bad_dim(self):
        with self.assertRaises(ValueError):
            earcut(SQUARE, dim=1)

    def test_bowtie_touching_point(self):
        triangles = earcut(BOWTIE)
        self.assertEqual(len(triangles), 6)
        self.assertEqual(deviation(BOWTIE, None, 2, triangles), 0.)
        for area in triangle_areas(BOWTIE, triangles):
            self.assertGreater(area, 0.)

    def test_split(self):
        # cut along (0, 4) - (2, 2), then clip both halves
        triangles = []
        ring = linked_list(L_SHAPE, 0, len(L_SHAPE), 2, True)
        clipper = EarClipper(triangles)
        clipper.split(ring)
        self.assertEqual(clipper.splits, 1)
        self.assertEqual(len(triangles), 3 * 4)
        self.assertEqual(deviation(L_SHAPE, None, 2, triangles), 0.)

    def test_cure_local_intersection(self):
        # the bottom edge makes a small self-crossing loop below y = 0,
        # (4, 0)-(6, -1) crosses (4, -1)-(6, 0)
        data = [0, 0, 4, 0, 6, -1, 4, -1, 6, 0, 10, 0, 10, 10, 0, 10]
        triangles = []
        ring = linked_list(data, 0, len(data), 2, True)
        clipper = EarClipper(triangles)
        ring = clipper.cure_local_intersections(ring)
        self.assertEqual(clipper.cures, 1)
        self.assertEqual(sorted(triangles), [1, 2, 4])
        # the loop is gone, collinear (4, 0) and (6, 0) are filtered
        self.assertEqual(sorted(n.index for n in RingIterator(ring)),
                         [0, 5, 6, 7])
        clipper.clip(ring)
        self.assertEqual(len(triangles), 3 * 3)

    def test_self_crossing_loop(self):
        data = [0, 0, 4, 0, 6, -1, 4, -1, 6, 0, 10, 0, 10, 10, 0, 10]
        triangles = earcut(data)
        self.assertGreater(len(triangles), 0)
        self.assertEqual(len(triangles) % 3, 0)

    def test_no_diagonal(self):
        triangles = []
        ring = linked_list([0, 0, 10, 0, 0, 10], 0, 6, 2, True)
        clipper = EarClipper(triangles)
        with self.assertLogs(level=logging.DEBUG):
            clipper.split(ring)
        self.assertEqual(clipper.splits, 0)
        self.assertEqual(triangles, [])

    def test_start_in_split_pass(self):
        triangles = []
        ring = linked_list(L_SHAPE, 0, len(L_SHAPE), 2, True)
        clipper = EarClipper(triangles)
        clipper.clip(ring, PASS_SPLIT)
        self.assertEqual(deviation(L_SHAPE, None, 2, triangles), 0.)


class TestEarcutHoles(unittest.TestCase):

    def test_square_with_hole(self):
        triangles = earcut(SQUARE_WITH_HOLE, [4])
        self.assertEqual(len(triangles), 3 * 8)
        self.assertEqual(set(triangles), set(range(8)))
        self.assertAlmostEqual(
            sum(triangle_areas(SQUARE_WITH_HOLE, triangles)), 64.)
        self.assertEqual(deviation(SQUARE_WITH_HOLE, [4], 2, triangles), 0.)
        # no triangle uses the same vertex twice (bridge duplicates)
        for triangle in TriangleIterator(triangles):
            self.assertEqual(len(set(triangle)), 3)

    def test_square_with_hole_reversed_winding(self):
        data = reversed_ring(SQUARE) + reversed_ring(SQUARE_WITH_HOLE[8:])
        triangles = earcut(data, [4])
        self.assertEqual(len(triangles), 3 * 8)
        self.assertEqual(set(triangles), set(range(8)))
        self.assertEqual(deviation(data, [4], 2, triangles), 0.)
        self.assertAlmostEqual(sum(triangle_areas(data, triangles)), 64.)

    def test_hole_indices_as_empty_list(self):
        self.assertEqual(earcut(SQUARE, []), earcut(SQUARE))

    def test_steiner_point(self):
        data = SQUARE + [5, 5]
        triangles = earcut(data, [4])
        self.assertIn(4, triangles)
        self.assertEqual(deviation(data, [4], 2, triangles), 0.)

    def test_two_holes(self):
        data = [0, 0, 20, 0, 20, 10, 0, 10,
                2, 2, 8, 2, 8, 8, 2, 8,
                12, 2, 18, 2, 18, 8, 12, 8]
        holes = [4, 8]
        triangles = earcut(data, holes)
        self.assertEqual(deviation(data, holes, 2, triangles), 0.)
        self.assertEqual(set(triangles), set(range(12)))

    def test_precomputed_areas(self):
        areas = [polygon_signed_area(SQUARE_WITH_HOLE, 0, 8),
                 polygon_signed_area(SQUARE_WITH_HOLE, 8, 16)]
        self.assertEqual(earcut(SQUARE_WITH_HOLE, [4], areas=areas),
                         earcut(SQUARE_WITH_HOLE, [4]))


class TestEarcutLarge(unittest.TestCase):
    """Polygons big enough for the z-order index to be used"""

    def test_star(self):
        seed(1)
        n = 200
        data = random_star_polygon(n)
        triangles = earcut(data)
        self.assertEqual(len(triangles), 3 * (n - 2))
        self.assertLess(deviation(data, None, 2, triangles), 1e-9)

    def test_star_reversed(self):
        seed(2)
        n = 150
        data = reversed_ring(random_star_polygon(n, 3, 4))
        triangles = earcut(data)
        self.assertEqual(len(triangles), 3 * (n - 2))
        self.assertLess(deviation(data, None, 2, triangles), 1e-9)

    def test_circle_with_hole(self):
        n = 100
        data = []
        for i in range(n):
            t = 2 * pi * i / n
            data.extend((10 * cos(t), 10 * sin(t)))
        data.extend([-2, -2, 2, -2, 2, 2, -2, 2])
        triangles = earcut(data, [n])
        self.assertLess(deviation(data, [n], 2, triangles), 1e-9)
        self.assertEqual(set(triangles), set(range(n + 4)))

    def test_precomputed_areas_large(self):
        seed(3)
        data = random_star_polygon(120)
        areas = [polygon_signed_area(data)]
        self.assertEqual(earcut(data, areas=areas), earcut(data))


if __name__ == "__main__":
    unittest.main()

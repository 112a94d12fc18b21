'''
Created on Oct 12, 2026

Helpers around the flat polygon representation used by earcut.
'''
from math import pi, cos, sin
from random import random

from eartri.polygon.iter import TriangleIterator

WINDING_CLOCKWISE = 1
WINDING_COUNTER_CLOCKWISE = -1


# ------------------------------------------------------------------------------
# Orientation
#


def polygon_signed_area(points, start=0, end=None, size=2):
    """Signed area of the ring stored in points[start:end], where every
    vertex takes size places in the flat list.

    The sign convention: a ring running counter clockwise (with the y-axis
    pointing up) has a *negative* area, a clockwise ring a positive one.
    """
    if end is None:
        end = len(points)
    area = 0.
    j = end - size
    for i in range(start, end, size):
        area += (points[i] - points[j]) * (points[i + 1] + points[j + 1])
        j = i
    return area / 2.


def polygon_winding_direction(points, start=0, end=None, size=2):
    """Returns WINDING_CLOCKWISE, WINDING_COUNTER_CLOCKWISE or 0 for a
    degenerate ring"""
    area = polygon_signed_area(points, start, end, size)
    if area > 0:
        return WINDING_CLOCKWISE
    elif area < 0:
        return WINDING_COUNTER_CLOCKWISE
    return 0


# ------------------------------------------------------------------------------
# Conversion
#


class ToVerticesAndHoles(object):
    """Helper class to convert a polygon, given as a list of rings, to the
    flat vertex list and hole indices that earcut takes.

    The first ring added is the outer ring, every next ring is a hole.
    """

    def __init__(self, dimensions=2):
        self.vertices = []
        self.holes = []
        self.dimensions = dimensions
        self._count = 0
        self._rings = 0

    def add_polygon(self, polygon):
        """Add all rings of a polygon (a list of rings, where every ring
        is a list of points, e.g. tuples with 2 elements)
        """
        for ring in polygon:
            self.add_ring(ring)

    def add_ring(self, ring):
        """Add a ring. The ring may be closed (first point repeated at the
        end), the repeated point is then skipped.
        """
        if len(ring) > 1 and tuple(ring[0]) == tuple(ring[-1]):
            ring = ring[:-1]
        if self._rings > 0:
            self.holes.append(self._count)
        self._rings += 1
        for pt in ring:
            self.add_point(pt)

    def add_point(self, point):
        if len(point) < self.dimensions:
            raise ValueError("Point {} has less than {} ordinates".format(
                point, self.dimensions))
        self.vertices.extend(
            float(point[d]) for d in range(self.dimensions))
        self._count += 1
        return self._count - 1


# ------------------------------------------------------------------------------
# Verification
#


def deviation(data, hole_indices, dim, triangles):
    """Relative difference between the area covered by the triangles and
    the area of the polygon (outer ring minus holes).

    0. means the triangulation is area-wise correct, inf is returned when
    the polygon has no area but the triangles do.
    """
    has_holes = hole_indices is not None and len(hole_indices) > 0
    outer_len = hole_indices[0] * dim if has_holes else len(data)

    polygon_area = abs(polygon_signed_area(data, 0, outer_len, dim))
    if has_holes:
        for i, hole_index in enumerate(hole_indices):
            start = hole_index * dim
            if i < len(hole_indices) - 1:
                end = hole_indices[i + 1] * dim
            else:
                end = len(data)
            polygon_area -= abs(polygon_signed_area(data, start, end, dim))

    triangles_area = 0.
    for a, b, c in TriangleIterator(triangles):
        a *= dim
        b *= dim
        c *= dim
        triangles_area += abs(
            (data[a] - data[c]) * (data[b + 1] - data[a + 1]) -
            (data[a] - data[b]) * (data[c + 1] - data[a + 1])) / 2.

    if polygon_area == 0 and triangles_area == 0:
        return 0.
    # e.g. a self-crossing ring, where the signed areas cancel out
    if polygon_area == 0:
        return float('inf')
    return abs((triangles_area - polygon_area) / polygon_area)


# ------------------------------------------------------------------------------
# Generate randomized polygons (for testing purposes)
#


def random_star_polygon(n=10, cx=0, cy=0):
    """Returns a flat list with the coordinates of a star shaped polygon
    with n vertices around (cx, cy), running counter clockwise.

    Every vertex gets a random distance between .5 and 1.5 to the centre,
    which gives a simple, but far from convex, polygon.
    """
    alpha = 2 * pi / n
    data = []
    for i in range(n):
        r = 0.5 + random()
        t = i * alpha
        data.extend((cx + r * cos(t), cy + r * sin(t)))
    return data

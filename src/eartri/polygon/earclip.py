'''
Created on Oct 14, 2026

Ear clipping triangulation of polygons with holes.
'''
import logging
import time

from eartri.polygon.preds import area, equals, point_in_triangle, \
    intersects, locally_inside, is_valid_diagonal
from eartri.polygon.ring import linked_list, filter_points, remove_node, \
    split_polygon
from eartri.polygon.holes import eliminate_holes
from eartri.polygon.zorder import HASH_THRESHOLD, box, inverse_size, \
    z_order, index_curve

# passes of the ear clipper, a pass is only entered once the previous one
# could not find any ear in a full sweep over the ring
PASS_EARS = 0
PASS_CURE = 1
PASS_SPLIT = 2


def earcut(data, hole_indices=None, dim=2, areas=None):
    """Triangulate a polygon.

    data is a flat list of vertex coordinates (x0, y0, x1, y1, ... or with
    dim=3 x0, y0, z0, ...; only x and y are used).

    hole_indices are the vertex indices (not coordinate offsets) where
    holes start, e.g. [5, 8] for a 12-vertex input is an outer ring of
    vertices 0-4 and holes with vertices 5-7 and 8-11. They have to be
    ascending and in range, this is not checked.

    areas can give the signed areas (as by polygon_signed_area) of the
    outer ring followed by the holes, which saves computing them again.

    Returns a flat list of vertex indices, every 3 of them form a triangle.
    """
    if dim < 2:
        raise ValueError("dim should be at least 2, not {}".format(dim))
    start = time.perf_counter()
    has_holes = hole_indices is not None and len(hole_indices) > 0
    outer_len = hole_indices[0] * dim if has_holes else len(data)
    outer_area = areas[0] if areas is not None else None
    outer_node = linked_list(data, 0, outer_len, dim, True, outer_area)
    triangles = []

    if outer_node is None or outer_node.next is outer_node.prev:
        logging.debug("degenerate polygon, no triangles")
        return triangles

    if has_holes:
        outer_node = eliminate_holes(
            data, hole_indices, outer_node, dim, areas)

    # if the shape is not too simple, use the z-order curve later on
    min_x = min_y = None
    inv_size = 0
    if len(data) > HASH_THRESHOLD * dim:
        aabb = box(data, outer_len, dim)
        (min_x, min_y) = aabb[0]
        inv_size = inverse_size(aabb)
        logging.debug("using z-order index")

    clipper = EarClipper(triangles, min_x, min_y, inv_size)
    clipper.clip(outer_node)
    end = time.perf_counter()

    logging.debug("Triangulating took: " + str(end - start) + " secs")
    logging.debug("{} triangles".format(len(triangles) // 3))
    logging.debug("{} ears".format(clipper.ears))
    logging.debug("{} cures".format(clipper.cures))
    logging.debug("{} splits".format(clipper.splits))
    return triangles


# -----------------------------------------------------------------------------
# Ear tests
#


def is_ear(ear):
    """Does the node form a valid ear with its neighbours"""
    a = ear.prev
    b = ear
    c = ear.next
    # reflex, can't be an ear
    if area(a, b, c) >= 0:
        return False

    # no other (non-reflex) point should be inside the ear
    p = ear.next.next
    while p is not ear.prev:
        if point_in_triangle(a, b, c, p) and area(p.prev, p, p.next) >= 0:
            return False
        p = p.next
    return True


def is_ear_hashed(ear, min_x, min_y, inv_size):
    """Same test as is_ear, but only nodes with a z-order key in the range
    of the box around the ear are considered
    """
    a = ear.prev
    b = ear
    c = ear.next
    if area(a, b, c) >= 0:
        return False

    min_tx = min(a.x, b.x, c.x)
    min_ty = min(a.y, b.y, c.y)
    max_tx = max(a.x, b.x, c.x)
    max_ty = max(a.y, b.y, c.y)

    min_z = z_order(min_tx, min_ty, min_x, min_y, inv_size)
    max_z = z_order(max_tx, max_ty, min_x, min_y, inv_size)

    def blocks(p):
        return p is not a and p is not c and \
            point_in_triangle(a, b, c, p) and \
            area(p.prev, p, p.next) >= 0

    p = ear.prev_z
    n = ear.next_z

    # look in both directions at the same time
    while p is not None and p.z >= min_z and n is not None and n.z <= max_z:
        if blocks(p):
            return False
        p = p.prev_z
        if blocks(n):
            return False
        n = n.next_z

    # remaining points in decreasing z-order
    while p is not None and p.z >= min_z:
        if blocks(p):
            return False
        p = p.prev_z

    # remaining points in increasing z-order
    while n is not None and n.z <= max_z:
        if blocks(n):
            return False
        n = n.next_z
    return True


# -----------------------------------------------------------------------------
# Clipping
#


class EarClipper(object):
    """Cuts ears from a ring, appending them to triangles.

    If min_x, min_y and inv_size are given (inv_size not 0), the z-order
    index is used for the ear tests.
    """

    __slots__ = ('triangles', 'min_x', 'min_y', 'inv_size',
                 'ears', 'cures', 'splits')

    def __init__(self, triangles, min_x=None, min_y=None, inv_size=0):
        self.triangles = triangles
        self.min_x = min_x
        self.min_y = min_y
        self.inv_size = inv_size
        self.ears = 0
        self.cures = 0
        self.splits = 0

    def is_ear(self, ear):
        if self.inv_size:
            return is_ear_hashed(ear, self.min_x, self.min_y, self.inv_size)
        return is_ear(ear)

    def clip(self, ear, stage=PASS_EARS):
        """Triangulate the ring that ear is part of.

        Every sweep over the ring that does not give an ear moves on to
        the next pass:

            PASS_EARS  -> filter points, PASS_CURE
            PASS_CURE  -> filter points, cure local intersections, PASS_SPLIT
            PASS_SPLIT -> split the ring in two and clip both halves
        """
        if ear is None:
            return
        if stage == PASS_EARS and self.inv_size:
            index_curve(ear, self.min_x, self.min_y, self.inv_size)
        while True:
            ear = self.sweep(ear)
            if ear is None:
                return
            if stage == PASS_EARS:
                ear = filter_points(ear)
                stage = PASS_CURE
            elif stage == PASS_CURE:
                ear = self.cure_local_intersections(filter_points(ear))
                stage = PASS_SPLIT
            else:
                self.split(ear)
                return

    def sweep(self, ear):
        """Cut ears until the ring is used up (returns None) or a full
        round over the ring did not give an ear (returns the node where
        the round ended).
        """
        stop = ear
        while ear.prev is not ear.next:
            prev = ear.prev
            nxt = ear.next
            if self.is_ear(ear):
                self.triangles.extend((prev.index, ear.index, nxt.index))
                self.ears += 1
                remove_node(ear)
                # skipping the next vertex leads to less sliver triangles
                ear = nxt.next
                stop = nxt.next
                continue
            ear = nxt
            if ear is stop:
                return ear
        return None

    def cure_local_intersections(self, start):
        """Cut off small self-intersections: a - p - p.next - b where
        a-p and p.next-b cross.
        """
        p = start
        while True:
            a = p.prev
            b = p.next.next
            if not equals(a, b) and intersects(a, p, p.next, b) and \
                    locally_inside(a, b) and locally_inside(b, a):
                self.triangles.extend((a.index, p.index, b.index))
                self.cures += 1
                # remove the two nodes involved
                remove_node(p)
                remove_node(p.next)
                p = start = b
            p = p.next
            if p is start:
                break
        return filter_points(p)

    def split(self, start):
        """Look for a valid diagonal, split the ring along it and clip both
        halves independently
        """
        a = start
        while True:
            b = a.next.next
            while b is not a.prev:
                if a.index != b.index and is_valid_diagonal(a, b):
                    c = split_polygon(a, b)
                    # filter collinear points around the cuts
                    a = filter_points(a, a.next)
                    c = filter_points(c, c.next)
                    self.splits += 1
                    self.clip(a)
                    self.clip(c)
                    return
                b = b.next
            a = a.next
            if a is start:
                break
        logging.debug("no valid diagonal found at {}, "
                      "ring left untriangulated".format(start))

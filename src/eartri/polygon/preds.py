'''
Created on Oct 12, 2026

Geometric predicates for ear clipping.

The orientation test comes from the robust predicates of Shewchuk
(geompreds), the rest is built on top of it.
'''

from geompreds import orient2d


# ------------------------------------------------------------------------------
# Point predicates
#     these accept anything indexable with [0] and [1] (tuples or Nodes)
#


def area(p, q, r):
    """Twice the signed area of the triangle p, q, r as seen when walking
    a polygon ring:

    convex (left) turn:   -
    straight:             0.
    reflex (right) turn:  +
    """
    return -orient2d(p, q, r)


def sign(num):
    if num > 0:
        return 1
    elif num < 0:
        return -1
    else:
        return 0


def point_in_triangle(a, b, c, p):
    """Tests whether p lies inside the ccw triangle a, b, c
    (points on the boundary count as inside)
    """
    return orient2d(c, a, p) >= 0 and \
        orient2d(a, b, p) >= 0 and \
        orient2d(b, c, p) >= 0


def on_segment(p, q, r):
    """For collinear p, q, r: does q lie on segment pr"""
    return min(p[0], r[0]) <= q[0] <= max(p[0], r[0]) and \
        min(p[1], r[1]) <= q[1] <= max(p[1], r[1])


def intersects(p1, q1, p2, q2):
    """Do segment p1q1 and segment p2q2 intersect (touching counts)"""
    o1 = sign(area(p1, q1, p2))
    o2 = sign(area(p1, q1, q2))
    o3 = sign(area(p2, q2, p1))
    o4 = sign(area(p2, q2, q1))

    # general case
    if o1 != o2 and o3 != o4:
        return True
    # collinear, one endpoint lies on the other segment
    if o1 == 0 and on_segment(p1, p2, q1):
        return True
    if o2 == 0 and on_segment(p1, q2, q1):
        return True
    if o3 == 0 and on_segment(p2, p1, q2):
        return True
    if o4 == 0 and on_segment(p2, q1, q2):
        return True
    return False


# ------------------------------------------------------------------------------
# Ring predicates
#     these take Nodes and look at their neighbours in the ring
#


def equals(p1, p2):
    return p1.x == p2.x and p1.y == p2.y


def intersects_polygon(a, b):
    """Does the diagonal a-b cross any edge of the ring"""
    p = a
    while True:
        if p.index != a.index and p.next.index != a.index and \
                p.index != b.index and p.next.index != b.index and \
                intersects(p, p.next, a, b):
            return True
        p = p.next
        if p is a:
            break
    return False


def locally_inside(a, b):
    """Does the diagonal a-b start into the interior of the polygon at a"""
    if area(a.prev, a, a.next) < 0:
        return area(a, b, a.next) >= 0 and area(a, a.prev, b) >= 0
    else:
        return area(a, b, a.prev) < 0 or area(a, a.next, b) < 0


def middle_inside(a, b):
    """Is the midpoint of diagonal a-b inside the polygon (ray crossing)"""
    p = a
    inside = False
    px = (a.x + b.x) / 2.
    py = (a.y + b.y) / 2.
    while True:
        if (p.y > py) != (p.next.y > py) and p.next.y != p.y and \
                px < (p.next.x - p.x) * (py - p.y) / (p.next.y - p.y) + p.x:
            inside = not inside
        p = p.next
        if p is a:
            break
    return inside


def sector_contains_sector(m, p):
    """Does the sector at vertex m contain the sector at vertex p
    (m and p share coordinates)
    """
    return area(m.prev, m, p.prev) < 0 and area(p.next, m, m.next) < 0


def is_valid_diagonal(a, b):
    """Can the ring be cut along a-b (diagonal lies in the interior)"""
    if a.next.index == b.index or a.prev.index == b.index:
        return False
    if intersects_polygon(a, b):
        return False
    if locally_inside(a, b) and locally_inside(b, a) and \
            middle_inside(a, b) and \
            (area(a.prev, a, b.prev) != 0 or area(a, b.prev, b) != 0):
        # the last test rules out two opposite-facing sectors
        return True
    # zero-length diagonal between two coincident reflex vertices
    # (a ring touching itself)
    return equals(a, b) and \
        area(a.prev, a, a.next) > 0 and \
        area(b.prev, b, b.next) > 0

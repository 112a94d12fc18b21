'''
Created on Oct 12, 2026

Polygon rings as circular doubly linked lists of Nodes.
'''
from eartri.polygon.preds import area, equals
from eartri.polygon.helpers import polygon_signed_area


class Node(object):
    """A vertex of a polygon ring.

    Besides the ring links (prev, next) a node can be part of a second,
    linear chain ordered on the z-order key (prev_z, next_z).
    """
    __slots__ = ('index', 'x', 'y', 'prev', 'next',
                 'z', 'prev_z', 'next_z', 'steiner')

    def __init__(self, index, x, y):
        # vertex index in the flat input (not the coordinate offset)
        self.index = index
        self.x = x
        self.y = y
        self.prev = None
        self.next = None
        self.z = None
        self.prev_z = None
        self.next_z = None
        self.steiner = False

    def __str__(self):
        return "{0} {1}".format(self.x, self.y)

    def __repr__(self):
        return "Node({0}, {1}, {2})".format(self.index, self.x, self.y)

    def __getitem__(self, i):
        if i == 0:
            return self.x
        elif i == 1:
            return self.y
        else:
            raise IndexError("No such ordinate: {}".format(i))


# ------------------------------------------------------------------------------
# Linking and unlinking
#


def insert_node(index, x, y, last):
    """Create a node and link it after last (or make a ring of one)"""
    p = Node(index, x, y)
    if last is None:
        p.prev = p
        p.next = p
    else:
        p.next = last.next
        p.prev = last
        last.next.prev = p
        last.next = p
    return p


def remove_node(p):
    """Unlink p from its ring and from the z-order chain.
    The links of p itself are left as they are.
    """
    p.next.prev = p.prev
    p.prev.next = p.next
    if p.prev_z is not None:
        p.prev_z.next_z = p.next_z
    if p.next_z is not None:
        p.next_z.prev_z = p.prev_z


def split_polygon(a, b):
    """Link a and b with a bridge.

    If a and b are on the same ring, the ring is split in two (a ends up
    in one, the returned node in the other). If b is on a hole ring, the
    hole gets merged into the ring of a.

    Both a and b are duplicated, the duplicate of b is returned.
    """
    a2 = Node(a.index, a.x, a.y)
    b2 = Node(b.index, b.x, b.y)
    an = a.next
    bp = b.prev

    a.next = b
    b.prev = a

    a2.next = an
    an.prev = a2

    b2.next = a2
    a2.prev = b2

    bp.next = b2
    b2.prev = bp
    return b2


# ------------------------------------------------------------------------------
# Building and cleaning rings
#


def linked_list(data, start, end, dim, clockwise, signed_area=None):
    """Make a ring out of the vertices in data[start:end] (offsets in the
    flat coordinate list, every vertex takes dim places).

    The order in which vertices are linked depends on the signed area of
    the span (computed when signed_area is not given, see
    polygon_signed_area): with clockwise set, a span with negative area is
    linked in input order, otherwise it is reversed (and the other way
    around without clockwise). This way the outer ring always runs ccw and
    holes cw.

    Returns the last linked node, or None for an empty span.
    """
    if signed_area is None:
        signed_area = polygon_signed_area(data, start, end, dim)
    last = None
    if clockwise == (signed_area < 0):
        for i in range(start, end, dim):
            last = insert_node(i // dim, data[i], data[i + 1], last)
    else:
        for i in range(end - dim, start - 1, -dim):
            last = insert_node(i // dim, data[i], data[i + 1], last)
    # ring explicitly closed in the input
    if last is not None and equals(last, last.next):
        remove_node(last)
        last = last.next
    return last


def filter_points(start, end=None):
    """Remove duplicate and collinear points from the ring, starting at
    start and walking up to end.

    Returns a node that is still part of the ring.
    """
    if start is None:
        return start
    if end is None:
        end = start
    p = start
    while True:
        again = False
        if not p.steiner and \
                (equals(p, p.next) or area(p.prev, p, p.next) == 0):
            remove_node(p)
            p = end = p.prev
            if p is p.next:
                break
            again = True
        else:
            p = p.next
        if not again and p is end:
            break
    return end


def get_leftmost(start):
    """Node with smallest x (and smallest y on ties) of the ring"""
    p = start
    leftmost = start
    while True:
        if p.x < leftmost.x or (p.x == leftmost.x and p.y < leftmost.y):
            leftmost = p
        p = p.next
        if p is start:
            break
    return leftmost

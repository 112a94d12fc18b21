'''
Created on Oct 13, 2026

Merging hole rings into the outer ring.
'''
import logging
from operator import attrgetter

from eartri.polygon.preds import point_in_triangle, locally_inside, \
    sector_contains_sector
from eartri.polygon.ring import linked_list, filter_points, get_leftmost, \
    split_polygon

# -----------------------------------------------------------------------------
# Hole elimination
#     Bridges are found with the method described in:
#         Triangulation by Ear Clipping
#         David Eberly
#
#     Available from:
#         https://www.geometrictools.com/Documentation/TriangulationByEarClipping.pdf
#


def eliminate_holes(data, hole_indices, outer_node, dim, areas=None):
    """Link every hole into the outer ring, so that one ring remains.

    hole_indices are vertex indices where the holes start (ascending, it
    is up to the caller to make sure of this). If areas is given, areas[i +
    1] is used as the signed area of hole i.

    Returns a node on the merged ring.
    """
    queue = []
    for i, hole_index in enumerate(hole_indices):
        start = hole_index * dim
        if i < len(hole_indices) - 1:
            end = hole_indices[i + 1] * dim
        else:
            end = len(data)
        signed_area = areas[i + 1] if areas is not None else None
        ring = linked_list(data, start, end, dim, False, signed_area)
        if ring is None:
            logging.debug("skipping empty hole {}".format(i))
            continue
        if ring is ring.next:
            ring.steiner = True
        queue.append(get_leftmost(ring))

    # process holes from left to right
    queue.sort(key=attrgetter('x'))
    for hole in queue:
        if eliminate_hole(hole, outer_node):
            outer_node = filter_points(outer_node, outer_node.next)
    return outer_node


def eliminate_hole(hole, outer_node):
    """Find a bridge between the hole and the outer ring and link them.

    Returns False if no bridge could be found (the hole is left out).
    """
    bridge = find_hole_bridge(hole, outer_node)
    if bridge is None:
        logging.debug("no bridge found for hole at {}, hole skipped".format(
            hole))
        return False
    b = split_polygon(bridge, hole)
    # filter collinear points around the cuts
    filter_points(bridge, bridge.next)
    filter_points(b, b.next)
    return True


def find_hole_bridge(hole, outer_node):
    """Returns the node of the outer ring to connect the leftmost node of
    the hole with, or None.
    """
    p = outer_node
    hx = hole.x
    hy = hole.y
    qx = float('-inf')
    m = None

    # find a segment intersected by a ray from the hole's leftmost point to
    # the left; the endpoint of the segment with lesser x is a candidate
    while True:
        if hy <= p.y and hy >= p.next.y and p.next.y != p.y:
            x = p.x + (hy - p.y) * (p.next.x - p.x) / (p.next.y - p.y)
            if x <= hx and x > qx:
                qx = x
                if x == hx:
                    if hy == p.y:
                        return p
                    if hy == p.next.y:
                        return p.next
                m = p if p.x < p.next.x else p.next
        p = p.next
        if p is outer_node:
            break

    if m is None:
        return None

    # hole touches outer segment; pick leftmost endpoint
    if hx == qx:
        return m

    # look for points inside the triangle of hole point, segment
    # intersection and endpoint; without such points m is fine, otherwise
    # take the point with the smallest angle to the ray
    stop = m
    mx = m.x
    my = m.y
    tan_min = float('inf')
    if hy < my:
        a, c = (hx, hy), (qx, hy)
    else:
        a, c = (qx, hy), (hx, hy)

    p = m
    while True:
        if hx >= p.x and p.x >= mx and hx != p.x and \
                point_in_triangle(a, (mx, my), c, p):
            tan = abs(hy - p.y) / (hx - p.x)
            if locally_inside(p, hole) and \
                    (tan < tan_min or
                     (tan == tan_min and
                      (p.x > m.x or
                       (p.x == m.x and sector_contains_sector(m, p))))):
                m = p
                tan_min = tan
        p = p.next
        if p is stop:
            break
    return m

'''
Created on Oct 13, 2026

Spatial index for the ear test, based on a z-order (Morton) curve.
'''
from eartri.polygon.iter import RingIterator

# rings with more vertices than this use the z-order index
HASH_THRESHOLD = 80


def box(data, end, dim):
    """Obtain a tight fitting axis-aligned box around the vertices in
    data[:end]"""
    xmin = xmax = data[0]
    ymin = ymax = data[1]
    for i in range(dim, end, dim):
        x = data[i]
        y = data[i + 1]
        if x < xmin:
            xmin = x
        if y < ymin:
            ymin = y
        if x > xmax:
            xmax = x
        if y > ymax:
            ymax = y
    return (xmin, ymin), (xmax, ymax)


def inverse_size(aabb):
    """1 over the largest side of the box (0 for a box without extent)"""
    size = max(aabb[1][0] - aabb[0][0], aabb[1][1] - aabb[0][1])
    if size != 0:
        return 1. / size
    return 0


def z_order(x, y, min_x, min_y, inv_size):
    """Morton key of a point, coordinates are first scaled to 15-bit
    non-negative integers using the box minimum and inverse size
    """
    x = int(32767 * (x - min_x) * inv_size)
    y = int(32767 * (y - min_y) * inv_size)

    x = (x | (x << 8)) & 0x00FF00FF
    x = (x | (x << 4)) & 0x0F0F0F0F
    x = (x | (x << 2)) & 0x33333333
    x = (x | (x << 1)) & 0x55555555

    y = (y | (y << 8)) & 0x00FF00FF
    y = (y | (y << 4)) & 0x0F0F0F0F
    y = (y | (y << 2)) & 0x33333333
    y = (y | (y << 1)) & 0x55555555

    return x | (y << 1)


def index_curve(start, min_x, min_y, inv_size):
    """Interlink the nodes of the ring in z-order.

    Keys already present on nodes are kept. Returns the node with the
    smallest key (head of the z-order chain).
    """
    for p in RingIterator(start):
        if p.z is None:
            p.z = z_order(p.x, p.y, min_x, min_y, inv_size)
        p.prev_z = p.prev
        p.next_z = p.next
    # cut the circle open: start is the head, start.prev the tail
    start.prev_z.next_z = None
    start.prev_z = None
    return sort_linked(start)


def sort_linked(head):
    """Sort the chain of nodes starting at head on their z key.

    Simon Tatham's merge sort for linked lists, see:
    http://www.chiark.greenend.org.uk/~sgtatham/algorithms/listsort.html

    The sort is stable. Returns the new head of the chain.
    """
    in_size = 1
    while True:
        p = head
        head = None
        tail = None
        merges = 0

        while p is not None:
            merges += 1
            q = p
            p_size = 0
            for _ in range(in_size):
                p_size += 1
                q = q.next_z
                if q is None:
                    break
            q_size = in_size

            while p_size > 0 or (q_size > 0 and q is not None):
                if p_size != 0 and \
                        (q_size == 0 or q is None or p.z <= q.z):
                    e = p
                    p = p.next_z
                    p_size -= 1
                else:
                    e = q
                    q = q.next_z
                    q_size -= 1

                if tail is not None:
                    tail.next_z = e
                else:
                    head = e
                e.prev_z = tail
                tail = e

            p = q

        tail.next_z = None
        in_size *= 2
        if merges <= 1:
            return head

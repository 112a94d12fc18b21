'''
Created on Oct 12, 2026
'''

# ------------------------------------------------------------------------------
# Iterators
#


class RingIterator(object):
    """Iterates over the nodes of a ring, following next from start.

    The ring should not be modified while iterating.
    """

    def __init__(self, start):
        self.start = start
        self.current = None
        self.done = start is None

    def __iter__(self):
        return self

    def __next__(self):
        if self.done:
            raise StopIteration()
        if self.current is None:
            self.current = self.start
        else:
            self.current = self.current.next
            if self.current is self.start:
                self.done = True
                raise StopIteration()
        return self.current


class TriangleIterator(object):
    """Iterates over a flat list of vertex indices, 3 at a time"""

    def __init__(self, triangles):
        self.triangles = triangles
        self.pos = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self.pos + 3 > len(self.triangles):
            raise StopIteration()
        ret = (self.triangles[self.pos],
               self.triangles[self.pos + 1],
               self.triangles[self.pos + 2])
        self.pos += 3
        return ret

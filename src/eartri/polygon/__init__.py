"""Eartri - Ear clipping triangulation of polygons with holes
"""

from eartri.polygon.earclip import earcut
from eartri.polygon.helpers import deviation, polygon_signed_area, \
    polygon_winding_direction, ToVerticesAndHoles, \
    WINDING_CLOCKWISE, WINDING_COUNTER_CLOCKWISE


__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__all__ = ("earcut", "deviation", "polygon_signed_area",
           "polygon_winding_direction", "ToVerticesAndHoles",
           "WINDING_CLOCKWISE", "WINDING_COUNTER_CLOCKWISE")

"""Eartri - Ear clipping triangulation of polygons with holes
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'

from eartri.polygon import earcut, deviation, polygon_signed_area, \
    polygon_winding_direction, ToVerticesAndHoles

__all__ = ["earcut", "deviation", "polygon_signed_area",
           "polygon_winding_direction", "ToVerticesAndHoles"]

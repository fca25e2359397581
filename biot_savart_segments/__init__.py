"""Closed-form Biot-Savart field of finite straight current segments.

A :class:`Field` collects :class:`CurrentSegment` wires carrying unit current
and sums their analytic contributions at query points. Bulk evaluation over
many points is offered both as a plain map and over (dask-chunked) xarray
grids.
"""
from .vector import Vector, Location, dot, cross, sub
from .segment import CurrentSegment, DegenerateSegmentError
from .field import Field
from .utils import planar_grid

__all__ = [
    'Vector', 'Location', 'dot', 'cross', 'sub',
    'CurrentSegment', 'DegenerateSegmentError',
    'Field', 'planar_grid',
]

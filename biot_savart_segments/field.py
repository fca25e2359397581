"""Superposition of current segment fields

A :class:`Field` is filled with segments once and then only queried. Queries
do not touch any shared mutable state, so :meth:`Field.eval_at_point` may be
called concurrently, e.g. through :meth:`Field.eval_at_points` with a
thread or process pool map.
"""
import logging

import xarray as xr

from .segment import CurrentSegment
from .utils import check_spatial_dim
from .vector import Vector


logger = logging.getLogger(__name__)


class Field:
    """Magnetic field of an ordered collection of current segments

    Adding segments is not thread-safe, evaluation is.
    """

    def __init__(self, segments=()):
        self._segments = []
        self.extend(segments)

    def add_segment(self, segment):
        if not isinstance(segment, CurrentSegment):
            raise TypeError('expected a CurrentSegment, got {!r}'.format(segment))
        self._segments.append(segment)
        logger.debug('added segment %r, %d in field', segment, len(self._segments))

    def extend(self, segments):
        for segment in segments:
            self.add_segment(segment)

    @property
    def segments(self):
        return tuple(self._segments)

    def __len__(self):
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)

    def eval_at_point(self, point, trace=None):
        """Sum of all segment contributions at `point`

        An empty field gives the zero vector. Non-finite contributions are
        not filtered, one singular segment makes the whole sum undefined.
        `trace` is passed on to :meth:`CurrentSegment.induced_field`.
        """
        res = Vector.zero()
        for segment in self._segments:
            res = res.accumulate(segment.induced_field(point, trace))
        return res

    def eval_at_points(self, points, map_func=map):
        """Evaluate the field at each of `points`

        Parameters
        ----------
        points : iterable of Location
        map_func : map-like func, optional
            e.g. :meth:`concurrent.futures.ThreadPoolExecutor.map` or
            :meth:`multiprocessing.Pool.map`, by default the builtin map

        Returns
        -------
        B : list of Vector
            in the order of `points`
        """
        return list(map_func(self.eval_at_point, points))

    def eval_on_grid(self, r, spatial_dim='s'):
        """Evaluate the field on an xarray of points

        Parameters
        ----------
        r : DataArray
            query points, Cartesian components along `spatial_dim`;
            may be dask-chunked along the other dimensions
        spatial_dim : str, optional
            name of the length-3 component dimension, by default 's'

        Returns
        -------
        B : DataArray
            same dims as `r`, lazy if `r` is dask-backed
        """
        check_spatial_dim(r, spatial_dim)
        r = r.astype(float)
        B = xr.zeros_like(r)
        for segment in self._segments:
            B = B + segment.induced_field_grid(r, spatial_dim)
        return B.transpose(*r.dims)

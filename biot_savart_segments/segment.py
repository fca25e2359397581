"""Straight current segment and its analytic induced field

The segment axis is used as given, it is never normalized. Its magnitude
cancels out of the quadratic coefficient ``a`` (the projection is divided by
``|axis|``) but scales the cross product, so the field is proportional to
``|axis|``. A unit axis gives the field of a unit current. ``length`` is the
integration range along the parameter and is not rescaled by ``|axis|``
either.
"""
import logging
from dataclasses import dataclass
from functools import partial

import numpy as np
import xarray as xr

from .integrand import definite_integral, _SI_FACTOR
from .utils import cross as xr_cross, check_spatial_dim
from .vector import Vector, Location, dot, cross


logger = logging.getLogger(__name__)


class DegenerateSegmentError(ValueError):
    """Segment geometry for which the induced field is not defined"""


@dataclass(frozen=True)
class CurrentSegment:
    start: Location
    axis: Vector
    length: float

    def __post_init__(self):
        if not isinstance(self.start, Location):
            raise TypeError('start must be a Location, got {!r}'.format(self.start))
        if not isinstance(self.axis, Vector):
            raise TypeError('axis must be a Vector, got {!r}'.format(self.axis))
        object.__setattr__(self, 'length', float(self.length))
        if not (self.start.is_finite() and self.axis.is_finite()
                and np.isfinite(self.length)):
            raise DegenerateSegmentError(
                'non-finite segment {!r}'.format(self))
        if self.axis.abs() == 0:
            raise DegenerateSegmentError('segment axis has zero magnitude')
        if self.length < 0:
            raise DegenerateSegmentError(
                'segment length {} is negative'.format(self.length))

    @property
    def end(self):
        """Location where the wire ends, `length` along the axis direction"""
        tip = self.axis.scaled(self.length / self.axis.abs())
        return Location(self.start.x + tip.x, self.start.y + tip.y,
                        self.start.z + tip.z)

    def _coefficients(self, point):
        r0 = self.start.displacement_to(point)
        a = 2.0 * dot(r0, self.axis) / self.axis.abs()
        b = r0.x**2 + r0.y**2 + r0.z**2
        return r0, a, b

    def induced_field(self, point, trace=None):
        """Magnetic field of the segment at `point`

        Parameters
        ----------
        point : Location
            query point
        trace : callable, optional
            called with a dict of the segment, the point and the quadratic
            coefficients ``a`` and ``b`` of the evaluation

        Returns
        -------
        B : Vector
            field in tesla for a unit current

        Notes
        -----
        Points on the line through the segment make the discriminant
        ``4b - a^2`` vanish, the result then holds inf/NaN components.
        Such a result must be read as undefined, no exception is raised.
        """
        r0, a, b = self._coefficients(point)
        logger.debug('a is %g, b is %g', a, b)
        if trace is not None:
            trace({'segment': self, 'point': point, 'a': a, 'b': b})
        mul = _SI_FACTOR * float(definite_integral(self.length, a, b))
        return cross(self.axis, r0).scaled(mul)

    def induced_field_grid(self, r, spatial_dim='s'):
        """Vectorized :meth:`induced_field` over an xarray of points

        `r` holds the query points with the Cartesian components along
        `spatial_dim`, it may be dask-chunked along its other dimensions.
        """
        check_spatial_dim(r, spatial_dim)
        coords = {}
        if spatial_dim in r.coords:
            coords[spatial_dim] = r.coords[spatial_dim].values
        r_start = xr.DataArray(self.start.as_array(), dims=[spatial_dim],
                               coords=coords)
        axis = xr.DataArray(self.axis.as_array(), dims=[spatial_dim],
                            coords=coords)
        r0 = r - r_start
        a = 2.0 * (r0 * axis).sum(dim=spatial_dim) / self.axis.abs()
        b = (r0**2).sum(dim=spatial_dim)
        integral = xr.apply_ufunc(partial(definite_integral, self.length), a, b,
                                  dask='parallelized', output_dtypes=[float])
        return _SI_FACTOR * integral * xr_cross(axis, r0, spatial_dim)

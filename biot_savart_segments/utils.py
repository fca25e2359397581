"""Helper functions
"""

import numpy as np
import xarray as xr


def check_spatial_dim(d, spatial_dim):
    if spatial_dim not in d.dims:
        raise ValueError('dimension {} not in {}'.format(spatial_dim, d))
    if d.sizes[spatial_dim] != 3:
        raise ValueError('dimension {} has not length 3 in {}'.format(spatial_dim, d))


def cross(a, b, spatial_dim, output_dtype=None):
    """xarray-compatible cross product
    
    Compatible with dask, parallelization uses a.dtype as output_dtype
    """
    for d in (a, b):
        check_spatial_dim(d, spatial_dim)
        
    if output_dtype is None:
        output_dtype = a.dtype
    c = xr.apply_ufunc(np.cross, a, b,
                       input_core_dims=[[spatial_dim], [spatial_dim]], 
                       output_core_dims=[[spatial_dim]], 
                       dask='parallelized', output_dtypes=[output_dtype]
                      )
    return c


def planar_grid(origin, resolution, spacing=1.0, z=0.0, spatial_dim='s'):
    """Square sampling grid of points in a plane of constant z

    Parameters
    ----------
    origin : (2,) array_like
        (x, y) of the grid corner with the smallest coordinates
    resolution : int
        number of points along each of x and y
    spacing : float, optional
        distance between neighbouring points, by default 1
    z : float, optional
        height of the plane, by default 0
    spatial_dim : str, optional
        name of the Cartesian component dimension, by default 's'

    Returns
    -------
    r : (resolution, resolution, 3) DataArray
        dims ('y', 'x', spatial_dim), x varies fastest
    """
    if int(resolution) != resolution or resolution < 1:
        raise ValueError('resolution must be a positive integer, got {}'.format(resolution))
    resolution = int(resolution)
    x0, y0 = origin
    x = x0 + spacing * np.arange(resolution)
    y = y0 + spacing * np.arange(resolution)
    X, Y = np.meshgrid(x, y)
    data = np.stack([X, Y, np.full_like(X, z)], axis=-1)
    return xr.DataArray(data, dims=['y', 'x', spatial_dim],
                        coords={'y': y, 'x': x, spatial_dim: list('xyz')})

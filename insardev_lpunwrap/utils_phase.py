# ----------------------------------------------------------------------------
# insardev_lpunwrap
#
# This file is part of the InSARdev project: https://github.com/AlexeyPechnikov/InSARdev
#
# Copyright (c) 2025, Alexey Pechnikov
#
# See the LICENSE file in the insardev directory for license terms.
# Professional use requires an active per-seat subscription at: https://patreon.com/pechnikov
# ----------------------------------------------------------------------------
import numpy as np
import xarray as xr

def wrap(data):
    """
    Wrap phase values into the interval (-π, π].

    Parameters
    ----------
    data : float, np.ndarray or xarray.DataArray
        Phase values in radians. Dask-backed DataArrays stay lazy.

    Returns
    -------
    float, np.ndarray or xarray.DataArray
        Wrapped phase of the same type as the input.

    Examples
    --------
    >>> wrap(np.array([np.pi, -np.pi, 3*np.pi/2]))
    array([ 3.14159265,  3.14159265, -1.57079633])
    """
    import dask.array

    if isinstance(data, xr.DataArray):
        wrapped = xr.DataArray(dask.array.mod(data.data + np.pi, 2 * np.pi) - np.pi, data.coords, dims=data.dims)
        return wrapped.where(wrapped != -np.pi, np.pi).rename(data.name)
    # np.mod remainder is non-negative for the positive divisor
    wrapped = np.mod(np.asarray(data, dtype=np.float64) + np.pi, 2 * np.pi) - np.pi
    wrapped = np.where(wrapped == -np.pi, np.pi, wrapped)
    return wrapped if wrapped.ndim else float(wrapped)

def curl(d1, d2):
    """
    Discrete curl of an edge field around every unit cell of the grid.

    Parameters
    ----------
    d1 : np.ndarray
        (R-1, C) differences along axis 0.
    d2 : np.ndarray
        (R, C-1) differences along axis 1.

    Returns
    -------
    np.ndarray
        (R-1, C-1) circulation `(d1[i, j+1] - d1[i, j]) - (d2[i+1, j] - d2[i, j])`.
    """
    d1 = np.asarray(d1)
    d2 = np.asarray(d2)
    assert d1.shape[0] + 1 == d2.shape[0] and d1.shape[1] == d2.shape[1] + 1, \
        f'ERROR: curl edge fields have inconsistent shapes {d1.shape} and {d2.shape}'
    return (d1[:, 1:] - d1[:, :-1]) - (d2[1:, :] - d2[:-1, :])

def taper(n):
    """Boundary taper weights: ones with 0.5 at both ends."""
    idx = np.arange(n)
    return np.where((idx == 0) | (idx == n - 1), 0.5, 1.0)

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
import dask.array
import pytest

from insardev_lpunwrap import wrap, curl
from insardev_lpunwrap.utils_phase import taper
from conftest import wrapped_equal


def test_wrap_range():
    rng = np.random.default_rng(0)
    values = rng.uniform(-50, 50, 1000)
    wrapped = wrap(values)
    assert wrapped.shape == values.shape
    assert np.all(wrapped > -np.pi)
    assert np.all(wrapped <= np.pi)
    assert wrapped_equal(wrapped, values)


def test_wrap_boundaries():
    assert wrap(np.pi) == pytest.approx(np.pi)
    assert wrap(-np.pi) == pytest.approx(np.pi)
    assert wrap(0.0) == 0.0
    assert isinstance(wrap(1.0), float)


def test_wrap_periodicity():
    values = np.linspace(-3, 3, 25)
    for k in (-3, -1, 1, 4):
        assert wrapped_equal(wrap(values + 2 * np.pi * k), values)
    # already wrapped values are unchanged
    assert np.allclose(wrap(values), values)


def test_wrap_dataarray_lazy():
    data = xr.DataArray(np.linspace(-10, 10, 40).reshape(4, 10), dims=('y', 'x'), name='phase').chunk({'y': 2})
    wrapped = wrap(data)
    assert isinstance(wrapped.data, dask.array.Array)
    assert wrapped.name == 'phase'
    assert wrapped.dims == ('y', 'x')
    assert np.allclose(wrapped.values, wrap(data.values))


def test_wrap_dataarray_numpy():
    data = xr.DataArray(np.array([[-np.pi, 4.0], [0.5, 7.0]]), dims=('y', 'x'))
    assert np.allclose(wrap(data).values, wrap(data.values))


def test_curl_of_scalar_field_vanishes():
    rng = np.random.default_rng(1)
    field = rng.normal(size=(7, 5))
    assert np.allclose(curl(np.diff(field, axis=0), np.diff(field, axis=1)), 0)


def test_curl_single_cell():
    # circulation d1[0,1] - d1[0,0] - d2[1,0] + d2[0,0]
    d1 = np.array([[1.0, 3.0]])
    d2 = np.array([[2.0], [5.0]])
    assert curl(d1, d2).shape == (1, 1)
    assert curl(d1, d2)[0, 0] == (3.0 - 1.0) - (5.0 - 2.0)


def test_curl_shape_mismatch():
    with pytest.raises(AssertionError):
        curl(np.zeros((2, 3)), np.zeros((3, 3)))


def test_taper():
    assert np.array_equal(taper(4), [0.5, 1.0, 1.0, 0.5])
    assert np.array_equal(taper(2), [0.5, 0.5])

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
import pytest


def peaks(height, width, scale=1.0):
    """MATLAB-style peaks surface over [-3, 3] x [-3, 3]."""
    y, x = np.meshgrid(np.linspace(-3, 3, height), np.linspace(-3, 3, width), indexing='ij')
    z = 3 * (1 - x)**2 * np.exp(-x**2 - (y + 1)**2) \
        - 10 * (x / 5 - x**3 - y**5) * np.exp(-x**2 - y**2) \
        - 1 / 3 * np.exp(-(x + 1)**2 - y**2)
    return scale * z


def wrapped_equal(a, b, atol=1e-9):
    """Compare phases modulo 2π."""
    return np.allclose(np.angle(np.exp(1j * (np.asarray(a) - np.asarray(b)))), 0, atol=atol)


@pytest.fixture
def ramp():
    """True phase ramp of 8x9 pixels crossing several 2π wraps with gradients below π."""
    y, x = np.mgrid[0:8, 0:9]
    return 0.9 * y + 1.3 * x - 2.0


@pytest.fixture
def peaks_surface():
    return peaks(64, 64, scale=1.0)


@pytest.fixture
def noisy():
    """Uniform random wrapped phase, dense in residues."""
    rng = np.random.default_rng(42)
    return rng.uniform(-np.pi, np.pi, (12, 12))


@pytest.fixture
def vortex():
    """Wrapped phase of a single phase vortex centred in cell (2, 2) of a 6x6 grid."""
    y, x = np.mgrid[0:6, 0:6]
    return np.arctan2(y - 2.5, x - 2.5)

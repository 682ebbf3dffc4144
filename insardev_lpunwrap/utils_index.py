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
from .errors import DimensionMismatchError

class GridIndex():
    """
    Bijection between 2D grid coordinates and flat row-major indices.

    The block occupies the flat range [offset, offset + size) of a longer
    vector, which allows several grids to be stacked in one LP variable vector.

    Parameters
    ----------
    shape : tuple
        Grid shape (rows, cols).
    offset : int, optional
        Position of the first grid element in the stacked vector. Default is 0.
    """

    def __init__(self, shape, offset=0):
        rows, cols = (int(n) for n in shape)
        assert rows >= 0 and cols >= 0, f'ERROR: invalid grid shape {shape}'
        self.shape = (rows, cols)
        self.offset = int(offset)

    def __repr__(self):
        return f'GridIndex(shape={self.shape}, offset={self.offset})'

    @property
    def size(self):
        return self.shape[0] * self.shape[1]

    @property
    def stop(self):
        return self.offset + self.size

    def ravel(self, i, j):
        """Local flat index of grid position(s) (i, j), without the block offset."""
        i = np.asarray(i, dtype=np.int64)
        j = np.asarray(j, dtype=np.int64)
        rows, cols = self.shape
        if np.any((i < 0) | (i >= rows) | (j < 0) | (j >= cols)):
            raise IndexError(f'grid position outside of {self.shape} grid')
        return i * cols + j

    def unravel(self, k):
        """Grid position(s) (i, j) of local flat index(es) k."""
        k = np.asarray(k, dtype=np.int64)
        if np.any((k < 0) | (k >= self.size)):
            raise IndexError(f'flat index outside of {self.shape} grid')
        return k // self.shape[1], k % self.shape[1]

    def take(self, vector):
        """Extract this block from a stacked vector and reshape it to the grid."""
        vector = np.asarray(vector)
        if vector.ndim != 1 or vector.size < self.stop:
            raise DimensionMismatchError(f'vector of length {vector.size} does not contain block {self}')
        return vector[self.offset:self.stop].reshape(self.shape)

    def after(self, shape):
        """New block of the given shape placed right after this one."""
        return GridIndex(shape, self.stop)

class EdgeVariableIndex():
    """
    Layout of the Costantini LP for an (R, C) phase grid.

    Constraint rows are the (R-1, C-1) interior cells. Variable columns are
    four consecutive blocks: positive and negative flow on the (R-1, C) edges
    along axis 0 (s1p, s1m) and on the (R, C-1) edges along axis 1 (s2p, s2m).

    Parameters
    ----------
    shape : tuple
        Phase grid shape (R, C).
    """

    def __init__(self, shape):
        height, width = (int(n) for n in shape)
        self.shape = (height, width)
        self.cells = GridIndex((height - 1, width - 1))
        self.s1p = GridIndex((height - 1, width))
        self.s1m = self.s1p.after((height - 1, width))
        self.s2p = self.s1m.after((height, width - 1))
        self.s2m = self.s2p.after((height, width - 1))

    def __repr__(self):
        return f'EdgeVariableIndex(shape={self.shape}, cells={self.n_cells}, variables={self.size})'

    @property
    def blocks(self):
        return (self.s1p, self.s1m, self.s2p, self.s2m)

    @property
    def n_cells(self):
        return self.cells.size

    @property
    def size(self):
        return self.s2m.stop

    def incidence(self):
        """
        Row and column indices of the cell-to-edge incidence.

        Returns
        -------
        dict
            'row' : constraint row of every cell (i, j);
            'e1_j', 'e1_jp1' : local s1 columns of edges (i, j) and (i, j+1);
            'e2_i', 'e2_ip1' : local s2 columns of edges (i, j) and (i+1, j).
            All arrays are flat and aligned with each other.
        """
        i, j = np.indices(self.cells.shape)
        i = i.ravel()
        j = j.ravel()
        return {
            'row':    self.cells.ravel(i, j),
            'e1_j':   self.s1p.ravel(i, j),
            'e1_jp1': self.s1p.ravel(i, j + 1),
            'e2_i':   self.s2p.ravel(i, j),
            'e2_ip1': self.s2p.ravel(i + 1, j),
        }

    def split(self, vector):
        """Split a primal vector into (x1p, x1m, x2p, x2m) grids."""
        vector = np.asarray(vector, dtype=np.float64).ravel()
        if vector.size != self.size:
            raise DimensionMismatchError(f'LP solution has {vector.size} values, expected {self.size} '
                                         f'for {self.shape} grid')
        return tuple(block.take(vector) for block in self.blocks)

    def stack(self, g1, g2):
        """Stack grids for the s1 and s2 edges into one vector following the block order."""
        g1 = np.asarray(g1)
        g2 = np.asarray(g2)
        if g1.shape != self.s1p.shape or g2.shape != self.s2p.shape:
            raise DimensionMismatchError(f'edge grids {g1.shape} and {g2.shape} do not match '
                                         f'{self.s1p.shape} and {self.s2p.shape}')
        return np.concatenate([g1.ravel(), g1.ravel(), g2.ravel(), g2.ravel()])

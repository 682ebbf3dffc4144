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
from .errors import InvalidInputError

class Assembler():
    """
    Equality constraint matrix builder for the Costantini LP.

    Subclasses provide the matrix representation: `_incidence`, `_hstack`,
    `layout`, `nnz` and `toarray`. The block algebra is shared.
    """
    sparse = None

    def __repr__(self):
        return f'{type(self).__name__}()'

    def check(self, shape):
        """Raise InvalidInputError when the grid is too large for this representation."""
        pass

    def assemble(self, index):
        """
        Build Aeq = [S1p | S1m | S2p | S2m] for the given EdgeVariableIndex.

        S1p links cell (i, j) to the axis-0 edges (i, j+1) with +1 and (i, j) with -1,
        S2p links it to the axis-1 edges (i+1, j) with -1 and (i, j) with +1,
        S1m and S2m are the negated blocks for the negative flow parts.

        Parameters
        ----------
        index : EdgeVariableIndex
            LP layout of the phase grid.

        Returns
        -------
        matrix
            (n_cells, n_variables) constraint matrix in the native representation.
        """
        self.check(index.shape)
        inc = index.incidence()
        n_cells = index.n_cells
        n_s1 = index.s1p.size
        n_s2 = index.s2p.size

        S1p = self._incidence(n_cells, n_s1, inc['row'], inc['e1_jp1']) \
            - self._incidence(n_cells, n_s1, inc['row'], inc['e1_j'])
        S1m = -S1p
        S2p = -self._incidence(n_cells, n_s2, inc['row'], inc['e2_ip1']) \
            + self._incidence(n_cells, n_s2, inc['row'], inc['e2_i'])
        S2m = -S2p

        return self._hstack([S1p, S1m, S2p, S2m])

    def _incidence(self, n_rows, n_cols, rows, cols):
        raise NotImplementedError

    def _hstack(self, blocks):
        raise NotImplementedError

    def layout(self, matrix):
        """Convert the matrix into the column layout expected by the LP solvers."""
        raise NotImplementedError

    def nnz(self, matrix):
        raise NotImplementedError

    def toarray(self, matrix):
        raise NotImplementedError

class DenseAssembler(Assembler):
    """
    Dense numpy constraint matrix.

    Memory grows as O((R*C)^2): a 30x30 grid already needs a 841x3480 matrix
    and 512x512 would need 261121x1046528. Use it as a reference for small grids.

    Parameters
    ----------
    max_pixels : int, optional
        Largest accepted grid size R*C. Default is 1024 (32x32).
    """
    sparse = False

    def __init__(self, max_pixels=1024):
        if max_pixels is None or int(max_pixels) < 4:
            raise ValueError(f'max_pixels should be an integer >= 4, got {max_pixels}')
        self.max_pixels = int(max_pixels)

    def __repr__(self):
        return f'DenseAssembler(max_pixels={self.max_pixels})'

    def check(self, shape):
        n_pixels = int(np.prod(shape))
        if n_pixels > self.max_pixels:
            raise InvalidInputError(f'Dense constraint matrix is limited to {self.max_pixels} pixels, '
                                    f'got {shape} grid ({n_pixels} pixels). Use the sparse assembler instead.')

    def _incidence(self, n_rows, n_cols, rows, cols):
        matrix = np.zeros((n_rows, n_cols), dtype=np.float64)
        matrix[rows, cols] = 1.0
        return matrix

    def _hstack(self, blocks):
        return np.hstack(blocks)

    def layout(self, matrix):
        return np.ascontiguousarray(matrix, dtype=np.float64)

    def nnz(self, matrix):
        return int(np.count_nonzero(matrix))

    def toarray(self, matrix):
        return np.asarray(matrix)

class SparseAssembler(Assembler):
    """Sparse scipy constraint matrix, CSR blocks converted to CSC for the solvers."""
    sparse = True

    def _incidence(self, n_rows, n_cols, rows, cols):
        from scipy import sparse
        data = np.ones(len(rows), dtype=np.float64)
        return sparse.csr_matrix((data, (rows, cols)), shape=(n_rows, n_cols))

    def _hstack(self, blocks):
        from scipy import sparse
        return sparse.hstack(blocks, format='csr')

    def layout(self, matrix):
        return matrix.tocsc()

    def nnz(self, matrix):
        # block subtraction never overlaps in one row, but drop explicit zeros anyway
        matrix = matrix.copy()
        matrix.eliminate_zeros()
        return int(matrix.nnz)

    def toarray(self, matrix):
        return matrix.toarray()

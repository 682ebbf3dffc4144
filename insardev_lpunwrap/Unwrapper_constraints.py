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
from .Unwrapper_gradient import Unwrapper_gradient
from .utils_index import EdgeVariableIndex
from .utils_phase import curl
from .errors import DimensionMismatchError
import numpy as np

class Unwrapper_constraints(Unwrapper_gradient):

    @staticmethod
    def _beq(psi1, psi2):
        """
        Flow conservation right-hand side: residues of the wrapped gradient field.

        The circulation of wrapped gradients around a cell is a multiple of 2π,
        the rounded negative cycle count is the integer flow the jump
        corrections must carry out of the cell.

        Returns
        -------
        np.ndarray
            (R-1)*(C-1) flat vector of integer-valued floats in cell order.
        """
        return np.round(-curl(psi1, psi2) / (2 * np.pi)).ravel()

    def constraints(self, psi1, psi2):
        """
        Build the equality constraints of the Costantini LP.

        Parameters
        ----------
        psi1 : np.ndarray
            (R-1, C) wrapped differences along rows.
        psi2 : np.ndarray
            (R, C-1) wrapped differences along columns.

        Returns
        -------
        Aeq : np.ndarray or scipy.sparse matrix
            (n_cells, n_variables) constraint matrix from the configured assembler.
        beq : np.ndarray
            Right-hand side, one value per interior cell.
        index : EdgeVariableIndex
            Layout used to build Aeq, needed to decode the LP solution.
        """
        psi1 = np.asarray(psi1)
        psi2 = np.asarray(psi2)
        index = EdgeVariableIndex((psi2.shape[0], psi1.shape[1]))
        if psi1.shape != index.s1p.shape or psi2.shape != index.s2p.shape:
            raise DimensionMismatchError(f'Gradient fields {psi1.shape} and {psi2.shape} do not describe one grid')

        beq = self._beq(psi1, psi2)
        Aeq = self.assembler.assemble(index)
        if Aeq.shape != (index.n_cells, index.size) or beq.size != index.n_cells:
            raise DimensionMismatchError(f'Constraint matrix {Aeq.shape} and beq ({beq.size}) '
                                         f'do not match {index}')
        return Aeq, beq, index

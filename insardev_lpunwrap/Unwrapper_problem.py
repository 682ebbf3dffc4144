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
from .Unwrapper_constraints import Unwrapper_constraints
from .Problem import LPProblem
from .utils_phase import taper
import numpy as np

class Unwrapper_problem(Unwrapper_constraints):

    @staticmethod
    def _weight(shape):
        """Bilinear boundary taper: 0.5 on the border rows and columns, 0.25 in the corners."""
        height, width = shape
        return np.outer(taper(height), taper(width))

    @staticmethod
    def _cost(index):
        """
        LP cost vector for the S1+, S1-, S2+, S2- blocks.

        Positive and negative flow parts share the same weight so the objective
        is the weighted L1 norm of the jump corrections.
        """
        height, width = index.shape
        weight = Unwrapper_problem._weight(index.shape)
        return index.stack(weight[:height - 1, :], weight[:, :width - 1])

    def _setup(self, phase):
        import time

        t0 = time.time()
        psi1, psi2 = self.gradients(phase)
        Aeq, beq, index = self.constraints(psi1, psi2)
        problem = LPProblem(self.assembler.layout(Aeq), beq, self._cost(index))
        if self.debug:
            n_residues = int(np.count_nonzero(beq))
            print(f'DEBUG: LP {index.shape} grid, {problem.n_unknowns} constraints, {problem.n_observations} variables, '
                  f'{self.assembler.nnz(Aeq)} non-zeros, {n_residues} residues ({time.time() - t0:.2f}s)')
        return problem, psi1, psi2, index

    def problem(self, phase):
        """
        Build the Costantini linear program for a wrapped phase grid.

        Parameters
        ----------
        phase : np.ndarray
            (R, C) wrapped phase in radians.

        Returns
        -------
        LPProblem
            Constraint matrix in the solver layout, flat beq and flat cost.

        Examples
        --------
        >>> problem = Unwrapper(sparse=False).problem(np.zeros((5, 5)))
        >>> problem.shape
        (16, 80)
        """
        return self._setup(phase)[0]

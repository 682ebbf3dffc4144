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

class LPProblem():
    """
    Equality constrained linear program: minimize cost @ x subject to A_eq @ x = b_eq, x >= 0.

    Parameters
    ----------
    A_eq : np.ndarray or scipy.sparse matrix
        (n_unknowns, n_observations) constraint matrix in the solver layout.
    b_eq : array_like
        Right-hand side, one value per constraint row.
    cost : array_like
        Non-negative cost, one value per variable column.
    """

    def __init__(self, A_eq, b_eq, cost):
        b_eq = np.asarray(b_eq, dtype=np.float64).ravel()
        cost = np.asarray(cost, dtype=np.float64).ravel()
        n_unknowns, n_observations = A_eq.shape
        if n_unknowns != b_eq.size:
            raise DimensionMismatchError(f'Constraint matrix has {n_unknowns} rows but b_eq has {b_eq.size} values')
        if n_observations != cost.size:
            raise DimensionMismatchError(f'Constraint matrix has {n_observations} columns but cost has {cost.size} values')
        self.A_eq = A_eq
        self.b_eq = b_eq
        self.cost = cost

    def __repr__(self):
        return f'LPProblem(constraints={self.n_unknowns}, variables={self.n_observations})'

    @property
    def shape(self):
        return self.A_eq.shape

    @property
    def n_unknowns(self):
        return self.A_eq.shape[0]

    @property
    def n_observations(self):
        return self.A_eq.shape[1]

class LPSolution():
    """
    Primal solution returned by a Solver.

    Parameters
    ----------
    x : array_like
        Primal variable values, one per problem column.
    objective : float, optional
        Objective value at the solution.
    iterations : int, optional
        Number of solver iterations.
    status : int or str, optional
        Solver-specific status.
    """

    def __init__(self, x, objective=None, iterations=None, status=None):
        self.x = np.asarray(x, dtype=np.float64).ravel()
        self.objective = objective
        self.iterations = iterations
        self.status = status

    def __repr__(self):
        return f'LPSolution(variables={self.x.size}, nonzero={np.count_nonzero(self.x)}, objective={self.objective})'

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
from .Unwrapper_problem import Unwrapper_problem
import numpy as np

class Unwrapper_integrate(Unwrapper_problem):

    @staticmethod
    def _round_jumps(k, tol):
        """
        Integer jump corrections from the LP relaxation.

        Values within `tol` of an integer are snapped to it, the rest are floored.

        Returns
        -------
        k : np.ndarray
            Integer-valued jump corrections.
        n_fractional : int
            Number of floored fractional values.
        """
        nearest = np.round(k)
        fractional = np.abs(k - nearest) > tol
        return np.where(fractional, np.floor(k), nearest), int(np.count_nonzero(fractional))

    def jumps(self, solution, index):
        """
        Decode the LP primal solution into jump corrections.

        Parameters
        ----------
        solution : LPSolution
            Primal solution of the problem built for `index`.
        index : EdgeVariableIndex
            LP layout of the phase grid.

        Returns
        -------
        k1 : np.ndarray
            (R-1, C) cycle corrections along rows.
        k2 : np.ndarray
            (R, C-1) cycle corrections along columns.

        Notes
        -----
        The constraint matrix is totally unimodular so simplex vertices are
        integral. Fractional values can only come from a non-vertex or inexact
        solution; with `round_jumps` they are floored, which favours a
        deterministic integer result over exact reconstruction, and the count
        is reported as a RuntimeWarning.
        """
        import warnings

        x1p, x1m, x2p, x2m = index.split(solution.x)
        k1 = x1p - x1m
        k2 = x2p - x2m
        if not self.round_jumps:
            return k1, k2

        k1, n1 = self._round_jumps(k1, self.tol)
        k2, n2 = self._round_jumps(k2, self.tol)
        if n1 + n2 > 0:
            warnings.warn(f'LP solution has {n1 + n2} fractional jump corrections, floored to integers', RuntimeWarning)
        if self.debug:
            print(f'DEBUG: jumps {int(np.count_nonzero(k1))} along rows, {int(np.count_nonzero(k2))} along columns, '
                  f'{n1 + n2} floored')
        return k1, k2

    @staticmethod
    def _integrate(k1, k2, psi1, psi2):
        """
        Integrate corrected gradients along the top row and then down every column.

        The path is a spanning tree of the grid; the result is path independent
        only when the corrected gradient field has zero curl.

        Returns
        -------
        np.ndarray
            (R, C) unwrapped phase in cycles, zero at the top-left pixel.
        """
        d1 = k1 + psi1 / (2 * np.pi)
        d2 = k2 + psi2 / (2 * np.pi)
        top = np.cumsum(np.concatenate([[0.0], d2[0, :]]))
        return np.cumsum(np.vstack([top, d1]), axis=0)

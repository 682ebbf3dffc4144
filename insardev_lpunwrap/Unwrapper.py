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
from .Unwrapper_integrate import Unwrapper_integrate
from .Assembler import DenseAssembler, SparseAssembler
from .Solver import LinprogSolver
from .errors import InvalidInputError
from .utils_phase import wrap
import numpy as np

class Unwrapper(Unwrapper_integrate):
    """
    Phase unwrapping by linear programming (Costantini algorithm).

    The wrapped gradients define integer residues at every 2x2 cell. The LP
    finds non-negative edge flows with minimum weighted L1 norm that cancel
    all residues, the flows become integer cycle corrections of the gradients
    and the corrected gradients are integrated into the unwrapped phase.

    Parameters
    ----------
    sparse : bool, optional
        Use the sparse scipy constraint matrix (default). The dense matrix is
        a reference implementation for small grids only.
    round_jumps : bool, optional
        Convert the LP solution to integer jump corrections. Default is True.
    tol : float, optional
        Solver feasibility tolerance, also used to detect fractional jumps. Default is 1e-4.
    max_iter : int, optional
        Maximum number of solver iterations. Default is 10000.
    solver : Solver, optional
        LP solver strategy. Default is LinprogSolver() (scipy HiGHS dual simplex).
    assembler : Assembler, optional
        Constraint matrix strategy, overrides `sparse` when provided.
    max_pixels : int, optional
        Largest grid accepted by the dense assembler. Default is 1024.
    debug : bool, optional
        If True, print diagnostic information. Default is False.

    References
    ----------
    M. Costantini, "A novel phase unwrapping method based on network
    programming," IEEE Trans. Geosci. Remote Sens., vol. 36, no. 3,
    pp. 813-821, 1998.

    Examples
    --------
    Unwrap a 2D grid with the default sparse assembler and HiGHS solver:
    >>> unwrapped = Unwrapper().unwrap(phase)

    Use the dense reference assembler and OR-Tools GLOP:
    >>> unwrapped = Unwrapper(sparse=False, solver=GlopSolver()).unwrap(phase)

    Unwrap every pair of an interferogram stack (pair, y, x):
    >>> unwrapped = Unwrapper(debug=True).unwrap(intfs)
    """

    def __init__(self, sparse=True, round_jumps=True, tol=1e-4, max_iter=10000,
                 solver=None, assembler=None, max_pixels=1024, debug=False):
        if not tol > 0:
            raise ValueError(f'tol should be positive, got {tol}')
        if int(max_iter) < 1:
            raise ValueError(f'max_iter should be a positive integer, got {max_iter}')
        self.round_jumps = bool(round_jumps)
        self.tol = float(tol)
        self.max_iter = int(max_iter)
        self.solver = solver if solver is not None else LinprogSolver()
        if assembler is None:
            assembler = SparseAssembler() if sparse else DenseAssembler(max_pixels=max_pixels)
        self.assembler = assembler
        self.debug = debug

    def __repr__(self):
        return (f'Unwrapper(assembler={self.assembler!r}, solver={self.solver!r}, round_jumps={self.round_jumps}, '
                f'tol={self.tol}, max_iter={self.max_iter})')

    @property
    def sparse(self):
        return self.assembler.sparse

    def _unwrap_2d(self, phase):
        """Unwrap a single 2D grid, anchored to the wrapped value of the top-left pixel."""
        import time

        phase = self._validate(phase)
        problem, psi1, psi2, index = self._setup(phase)

        t0 = time.time()
        solution = self.solver.solve(problem, tol=self.tol, max_iter=self.max_iter, debug=self.debug)
        if self.debug:
            print(f'DEBUG: LP solved by {self.solver!r} ({time.time() - t0:.2f}s), objective {solution.objective}')

        k1, k2 = self.jumps(solution, index)
        cycles = self._integrate(k1, k2, psi1, psi2)
        return 2 * np.pi * cycles + wrap(phase[0, 0])

    def unwrap(self, phase):
        """
        Unwrap wrapped phase.

        Parameters
        ----------
        phase : np.ndarray or xarray.DataArray
            2D wrapped phase in radians, or a 3D DataArray stack with spatial
            dimensions `y` and `x` in any order. Every (y, x) slice is unwrapped independently.

        Returns
        -------
        np.ndarray or xarray.DataArray
            Unwrapped phase in radians, same shape and coordinates as the input.
            Wrapping it gives back the input phase.

        Raises
        ------
        InvalidInputError
            Input is not a 2D grid of at least 2x2 finite values, or a 3D DataArray
            without `y` and `x` dimensions.
        SolverError
            The LP solver did not converge within `max_iter` or failed.
        """
        import xarray as xr

        if isinstance(phase, xr.DataArray):
            return self._unwrap_dataarray(phase)
        return self._unwrap_2d(phase)

    def _unwrap_dataarray(self, phase):
        import xarray as xr

        if phase.ndim == 2:
            return xr.DataArray(self._unwrap_2d(phase.values), coords=phase.coords, dims=phase.dims,
                                name=phase.name, attrs=phase.attrs)
        if phase.ndim != 3:
            raise InvalidInputError(f'Input must be 2D or 3D (stack, y, x) DataArray, got dims {phase.dims}')

        ydim, xdim = 'y', 'x'
        if ydim not in phase.dims or xdim not in phase.dims:
            raise InvalidInputError(f'3D DataArray must have {ydim} and {xdim} dimensions, got dims {phase.dims}')
        stackvar = [dim for dim in phase.dims if dim not in (ydim, xdim)][0]
        if phase.chunks is not None:
            # rechunk to single chunk per y,x for processing
            phase = phase.chunk({stackvar: 1, ydim: -1, xdim: -1})

        unwrapped = xr.apply_ufunc(
            self._unwrap_2d,
            phase,
            input_core_dims=[[ydim, xdim]],
            output_core_dims=[[ydim, xdim]],
            vectorize=True,
            dask='parallelized',
            output_dtypes=[np.float64],
        )
        return unwrapped.transpose(*phase.dims).rename(phase.name)

def unwrap(phase, sparse=True, round_jumps=True, tol=1e-4, max_iter=10000,
           solver=None, assembler=None, max_pixels=1024, debug=False):
    """
    Unwrap phase by linear programming (Costantini algorithm).

    Convenience wrapper for Unwrapper(...).unwrap(phase), see Unwrapper for the parameters.

    Examples
    --------
    >>> unwrapped = unwrap(phase)
    >>> unwrapped = unwrap(phase, sparse=False, tol=1e-6)
    """
    return Unwrapper(sparse=sparse, round_jumps=round_jumps, tol=tol, max_iter=max_iter,
                     solver=solver, assembler=assembler, max_pixels=max_pixels, debug=debug).unwrap(phase)

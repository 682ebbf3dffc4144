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
from .Problem import LPSolution
from .errors import SolverError

class Solver():
    """
    Equality constrained LP solver interface.

    Implementations return a vertex (basic) optimal solution of
    min cost @ x subject to A_eq @ x = b_eq, x >= 0 or raise SolverError.
    """

    def __repr__(self):
        return f'{type(self).__name__}()'

    def solve(self, problem, tol=1e-4, max_iter=10000, debug=False):
        """
        Solve the linear program.

        Parameters
        ----------
        problem : LPProblem
            Constraint matrix, right-hand side and cost.
        tol : float, optional
            Primal and dual feasibility tolerance. Default is 1e-4.
        max_iter : int, optional
            Maximum number of simplex iterations. Default is 10000.
        debug : bool, optional
            If True, print solver diagnostics. Default is False.

        Returns
        -------
        LPSolution
            Primal solution.
        """
        raise NotImplementedError

class LinprogSolver(Solver):
    """
    scipy.optimize.linprog solver using HiGHS simplex.

    Parameters
    ----------
    method : str, optional
        'highs-ds' for HiGHS dual simplex (default) or 'highs' for automatic choice.
        Interior point is not accepted, its solutions are not vertices.
    max_time : float, optional
        Solver time limit in seconds. Default is None (no limit).
    """

    def __init__(self, method='highs-ds', max_time=None):
        if method not in ('highs-ds', 'highs'):
            raise ValueError(f"Unsupported linprog method: '{method}'. Use 'highs-ds' or 'highs'.")
        if max_time is not None and max_time <= 0:
            raise ValueError(f'max_time should be positive, got {max_time}')
        self.method = method
        self.max_time = max_time

    def __repr__(self):
        return f"LinprogSolver(method='{self.method}', max_time={self.max_time})"

    def solve(self, problem, tol=1e-4, max_iter=10000, debug=False):
        from scipy.optimize import linprog
        import time

        options = {
            'maxiter': int(max_iter),
            'primal_feasibility_tolerance': float(tol),
            'dual_feasibility_tolerance': float(tol),
        }
        if self.max_time is not None:
            options['time_limit'] = float(self.max_time)

        t0 = time.time()
        result = linprog(problem.cost, A_eq=problem.A_eq, b_eq=problem.b_eq,
                         bounds=(0, None), method=self.method, options=options)
        if debug:
            print(f'DEBUG: linprog {self.method} status {result.status} after {result.nit} iterations '
                  f'({time.time() - t0:.2f}s): {result.message}')

        # 0 is success, 1 iteration or time limit, 2 infeasible, 3 unbounded, 4 numerical difficulties
        if result.status != 0 or result.x is None:
            raise SolverError(f'linprog {self.method} failed with status {result.status}: {result.message}',
                              status=result.status)
        return LPSolution(result.x, objective=result.fun, iterations=result.nit, status=result.status)

class GlopSolver(Solver):
    """
    OR-Tools GLOP primal/dual simplex solver.

    Parameters
    ----------
    max_time : float, optional
        Solver time limit in seconds. Default is None (no limit).
    """

    def __init__(self, max_time=None):
        if max_time is not None and max_time <= 0:
            raise ValueError(f'max_time should be positive, got {max_time}')
        self.max_time = max_time

    def __repr__(self):
        return f'GlopSolver(max_time={self.max_time})'

    def solve(self, problem, tol=1e-4, max_iter=10000, debug=False):
        from ortools.linear_solver import pywraplp, linear_solver_pb2
        from scipy import sparse
        import time

        t0 = time.time()
        solver = pywraplp.Solver.CreateSolver('GLOP')
        if solver is None:
            raise SolverError('OR-Tools GLOP solver is not available')

        # model proto filled row by row from CSR slices, upper bounds default to infinity
        A = sparse.csr_matrix(problem.A_eq)
        model = linear_solver_pb2.MPModelProto()
        for cost in problem.cost.tolist():
            model.variable.add(lower_bound=0.0, objective_coefficient=cost)
        for row, b in enumerate(problem.b_eq.tolist()):
            start, stop = A.indptr[row], A.indptr[row + 1]
            model.constraint.add(lower_bound=b, upper_bound=b,
                                 var_index=A.indices[start:stop].tolist(),
                                 coefficient=A.data[start:stop].tolist())
        error = solver.LoadModelFromProto(model)
        if error:
            raise SolverError(f'GLOP model loading failed: {error}')

        if not solver.SetSolverSpecificParametersAsString(f'max_number_of_iterations: {int(max_iter)}'):
            raise SolverError(f'GLOP rejected iteration limit {max_iter}')
        if self.max_time is not None:
            solver.SetTimeLimit(int(self.max_time * 1000))
        params = pywraplp.MPSolverParameters()
        params.SetDoubleParam(pywraplp.MPSolverParameters.PRIMAL_TOLERANCE, float(tol))
        params.SetDoubleParam(pywraplp.MPSolverParameters.DUAL_TOLERANCE, float(tol))
        if debug:
            print(f'DEBUG: GLOP model {solver.NumConstraints()} constraints, {solver.NumVariables()} variables '
                  f'({time.time() - t0:.2f}s)')

        t0 = time.time()
        status = solver.Solve(params)
        if debug:
            print(f'DEBUG: GLOP status {status} after {solver.iterations()} iterations ({time.time() - t0:.2f}s)')

        if status != pywraplp.Solver.OPTIMAL:
            raise SolverError(f'GLOP failed with status {status}', status=status)
        response = linear_solver_pb2.MPSolutionResponse()
        solver.FillSolutionResponseProto(response)
        x = np.array(response.variable_value, dtype=np.float64)
        return LPSolution(x, objective=solver.Objective().Value(), iterations=solver.iterations(), status=status)

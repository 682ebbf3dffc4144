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
from scipy import sparse

from insardev_lpunwrap import Unwrapper, LPProblem, LinprogSolver, GlopSolver, SolverError


def small_problem():
    # min x0 + 2 x1 subject to x0 - x1 = 1, x >= 0
    return LPProblem(np.array([[1.0, -1.0]]), [1.0], [1.0, 2.0])


def infeasible_problem():
    # x0 = -1 with x0 >= 0
    return LPProblem(np.array([[1.0]]), [-1.0], [1.0])


@pytest.mark.parametrize('method', ['highs-ds', 'highs'])
def test_linprog_small(method):
    solution = LinprogSolver(method=method).solve(small_problem())
    assert np.allclose(solution.x, [1.0, 0.0])
    assert solution.objective == pytest.approx(1.0)
    assert solution.status == 0


def test_linprog_sparse_input():
    problem = small_problem()
    problem = LPProblem(sparse.csc_matrix(problem.A_eq), problem.b_eq, problem.cost)
    assert np.allclose(LinprogSolver().solve(problem).x, [1.0, 0.0])


def test_linprog_infeasible():
    with pytest.raises(SolverError) as excinfo:
        LinprogSolver().solve(infeasible_problem())
    assert excinfo.value.status not in (None, 0)


def test_linprog_arguments():
    with pytest.raises(ValueError):
        LinprogSolver(method='interior-point')
    with pytest.raises(ValueError):
        LinprogSolver(max_time=0)


def test_linprog_debug(capsys):
    LinprogSolver().solve(small_problem(), debug=True)
    assert 'DEBUG: linprog highs-ds status 0' in capsys.readouterr().out


def test_glop_small():
    pytest.importorskip('ortools')
    solution = GlopSolver().solve(small_problem())
    assert np.allclose(solution.x, [1.0, 0.0])
    assert solution.objective == pytest.approx(1.0)


def test_glop_infeasible():
    pytest.importorskip('ortools')
    with pytest.raises(SolverError):
        GlopSolver().solve(infeasible_problem())


def test_glop_arguments():
    with pytest.raises(ValueError):
        GlopSolver(max_time=-1)


def test_glop_matches_linprog(noisy):
    pytest.importorskip('ortools')
    problem = Unwrapper().problem(noisy)
    assert np.count_nonzero(problem.b_eq) > 0
    highs = LinprogSolver().solve(problem)
    glop = GlopSolver().solve(problem)
    assert glop.objective == pytest.approx(highs.objective, abs=1e-6)
    # same constraints satisfied
    assert np.allclose(problem.A_eq @ glop.x, problem.b_eq, atol=1e-6)


def test_dense_and_sparse_same_optimum(noisy):
    dense = Unwrapper(sparse=False).problem(noisy)
    sparse_problem = Unwrapper(sparse=True).problem(noisy)
    assert LinprogSolver().solve(dense).objective == \
        pytest.approx(LinprogSolver().solve(sparse_problem).objective, abs=1e-6)


def test_glop_rejected_iteration_limit(monkeypatch):
    pywraplp = pytest.importorskip('ortools.linear_solver.pywraplp')
    monkeypatch.setattr(pywraplp.Solver, 'SetSolverSpecificParametersAsString', lambda self, parameters: False)
    with pytest.raises(SolverError, match='iteration limit'):
        GlopSolver().solve(small_problem())


def test_glop_debug(capsys):
    pytest.importorskip('ortools')
    GlopSolver().solve(small_problem(), debug=True)
    out = capsys.readouterr().out
    assert 'DEBUG: GLOP model 1 constraints, 2 variables' in out

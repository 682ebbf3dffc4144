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
__version__ = '2025.1.0'

from .Unwrapper import Unwrapper, unwrap
from .Assembler import Assembler, DenseAssembler, SparseAssembler
from .Solver import Solver, LinprogSolver, GlopSolver
from .Problem import LPProblem, LPSolution
from .utils_index import GridIndex, EdgeVariableIndex
from .utils_phase import wrap, curl
from .errors import InvalidInputError, DimensionMismatchError, SolverError

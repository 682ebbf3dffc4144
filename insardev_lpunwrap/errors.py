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

class InvalidInputError(ValueError):
    """Wrapped phase grid cannot be unwrapped (not 2D, smaller than 2x2, non-finite, too large for dense path)."""
    pass

class DimensionMismatchError(AssertionError):
    """Block sizes of the LP system disagree with each other or with the solver output."""
    pass

class SolverError(RuntimeError):
    """
    LP solver failed to return an optimal solution.

    Parameters
    ----------
    message : str
        Solver message.
    status : int or str, optional
        Solver-specific status code.
    """
    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status

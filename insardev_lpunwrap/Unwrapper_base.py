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
from .errors import InvalidInputError
import numpy as np

class Unwrapper_base():

    @staticmethod
    def _validate(phase):
        """
        Check the wrapped phase grid and return it as a float64 array.

        Raises
        ------
        InvalidInputError
            If the input is not a 2D grid of at least 2x2 finite values.
        """
        try:
            phase = np.asarray(phase, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f'Input must be a 2D array of real numbers: {e}') from e
        if phase.ndim != 2:
            raise InvalidInputError(f'Input must be 2D array, got {phase.ndim}D array of shape {phase.shape}')
        if phase.shape[0] < 2 or phase.shape[1] < 2:
            raise InvalidInputError(f'Size of input must be at least 2x2, got {phase.shape}')
        if not np.all(np.isfinite(phase)):
            raise InvalidInputError(f'Input contains {np.count_nonzero(~np.isfinite(phase))} non-finite values')
        return phase

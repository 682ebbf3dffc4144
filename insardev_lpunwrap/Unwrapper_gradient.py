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
from .Unwrapper_base import Unwrapper_base
from .utils_phase import wrap

class Unwrapper_gradient(Unwrapper_base):

    @staticmethod
    def gradients(phase):
        """
        Wrapped phase differences between neighbouring pixels.

        Parameters
        ----------
        phase : np.ndarray
            (R, C) wrapped phase in radians.

        Returns
        -------
        psi1 : np.ndarray
            (R-1, C) wrapped differences along rows, phase[i+1, j] - phase[i, j].
        psi2 : np.ndarray
            (R, C-1) wrapped differences along columns, phase[i, j+1] - phase[i, j].
        """
        phase = Unwrapper_gradient._validate(phase)
        psi1 = wrap(phase[1:, :] - phase[:-1, :])
        psi2 = wrap(phase[:, 1:] - phase[:, :-1])
        return psi1, psi2

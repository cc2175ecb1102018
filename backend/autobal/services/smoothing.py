"""
Spectral Smoothing

Fixed-kernel Savitzky-Golay smoother (window 5, polynomial order 3) applied
to a flux curve before normalization. The kernel is the classic
(-3, 12, 17, 12, -3) / 35 local cubic least-squares filter.

Edge policy: the first two and last two samples are not recomputed; they are
passed through from the input unchanged. This is not an edge-corrected filter
and the trough metrics downstream depend on it.
"""

from typing import Sequence, Union

import numpy as np
from scipy import signal

from autobal.core.constants import SAVGOL_POLYORDER, SAVGOL_WINDOW


SAVGOL_KERNEL: np.ndarray = signal.savgol_coeffs(SAVGOL_WINDOW, SAVGOL_POLYORDER)

ArrayLike = Union[Sequence[float], np.ndarray]


def savgol_smooth(flux: ArrayLike) -> np.ndarray:
    """
    Smooth a flux curve with the fixed 5-point cubic kernel.

    Args:
        flux: Input flux values

    Returns:
        New array of the same length. Inputs shorter than the window are
        returned unchanged (as a copy).
    """
    flux = np.array(flux, dtype=float)

    if len(flux) < SAVGOL_WINDOW:
        return flux

    half = SAVGOL_WINDOW // 2
    smoothed = flux.copy()
    smoothed[half:-half] = np.convolve(flux, SAVGOL_KERNEL, mode="valid")

    return smoothed

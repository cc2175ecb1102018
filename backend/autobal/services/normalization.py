"""Continuum normalization: smoothed flux to transmission."""

import numpy as np

from autobal.core.exceptions import InvalidContinuumError


def normalize_flux(smoothed_flux: np.ndarray, continuum: np.ndarray) -> np.ndarray:
    """
    Divide smoothed flux by the continuum model.

    Returns the transmission curve: 1.0 means no absorption, 0.0 total
    absorption.

    Raises:
        InvalidContinuumError: if any continuum sample is non-positive or
            non-finite. The continuum is never repaired here.
    """
    continuum = np.asarray(continuum, dtype=float)

    bad = ~np.isfinite(continuum) | (continuum <= 0)
    if np.any(bad):
        idx = int(np.argmax(bad))
        raise InvalidContinuumError(
            f"Continuum must be strictly positive and finite; "
            f"got {continuum[idx]!r} at index {idx} ({int(bad.sum())} bad samples)"
        )

    return np.asarray(smoothed_flux, dtype=float) / continuum

"""Shared synthetic-spectrum builders for the test suite."""

from typing import Iterable, Tuple

import numpy as np
import pytest

from autobal.core.constants import C_IV_WAVELENGTH

WAVELENGTH_MIN = 1400.0
WAVELENGTH_MAX = 1700.0
GRID_STEP = 0.5
FLAT_CONTINUUM = 10.0


def make_grid(
    wl_min: float = WAVELENGTH_MIN,
    wl_max: float = WAVELENGTH_MAX,
    step: float = GRID_STEP,
) -> np.ndarray:
    """Rest-frame grid with both endpoints included."""
    return np.arange(wl_min, wl_max + step / 2, step)


def power_law_continuum(
    wavelength: np.ndarray,
    amplitude: float = 10.0,
    alpha: float = -1.5,
) -> np.ndarray:
    """Power-law continuum plus a C IV emission bump."""
    continuum = amplitude * (wavelength / 1450.0) ** alpha
    emission = 6.0 * np.exp(-0.5 * ((wavelength - C_IV_WAVELENGTH) / 12.0) ** 2)
    return continuum + emission


def gaussian_absorption(
    wavelength: np.ndarray,
    troughs: Iterable[Tuple[float, float, float]],
) -> np.ndarray:
    """
    Multiplicative transmission for Gaussian troughs.

    Args:
        troughs: (center, sigma, depth) tuples in Angstroms
    """
    transmission = np.ones_like(wavelength)
    for center, sigma, depth in troughs:
        tau = depth * np.exp(-0.5 * ((wavelength - center) / sigma) ** 2)
        transmission *= 1.0 - tau
    return transmission


@pytest.fixture
def grid() -> np.ndarray:
    return make_grid()


@pytest.fixture
def flat_continuum(grid) -> np.ndarray:
    return np.full_like(grid, FLAT_CONTINUUM)


@pytest.fixture
def continuum(grid) -> np.ndarray:
    return power_law_continuum(grid)

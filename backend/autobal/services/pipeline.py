"""
Epoch Analysis Pipeline

Engine entry point. Runs one epoch's flux/continuum pair through:

1. Savitzky-Golay smoothing
2. Continuum normalization
3. Trough segmentation
4. Component metrics
5. Epoch aggregation

Every step is a pure function of its inputs; inputs are never mutated.
"""

import logging
import math
from typing import Optional, Sequence, Union

import numpy as np

from autobal.core.config import EngineConfig
from autobal.core.constants import GRID_STEP_RTOL, SAVGOL_WINDOW
from autobal.core.exceptions import (
    InvalidContinuumError,
    InvalidGridError,
    ShapeMismatchError,
)
from autobal.models.epoch import EpochInput, EpochMetrics
from autobal.services.aggregation import aggregate_components
from autobal.services.components import extract_components
from autobal.services.normalization import normalize_flux
from autobal.services.smoothing import savgol_smooth

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]


def validate_shapes(wavelength: np.ndarray, flux: np.ndarray, continuum: np.ndarray) -> None:
    """Reject unequal lengths and grids shorter than the smoothing window."""
    lengths = (len(wavelength), len(flux), len(continuum))
    if len(set(lengths)) != 1:
        raise ShapeMismatchError(
            f"Wavelength, flux and continuum must have the same length; got {lengths}"
        )
    if lengths[0] < SAVGOL_WINDOW:
        raise ShapeMismatchError(
            f"At least {SAVGOL_WINDOW} samples are required; got {lengths[0]}"
        )


def grid_step(wavelength: np.ndarray) -> float:
    """
    Return the constant step of a wavelength grid.

    Raises:
        InvalidGridError: if the grid is not strictly increasing or its
            spacing is not constant
    """
    diffs = np.diff(wavelength)
    if not np.all(diffs > 0):
        raise InvalidGridError("Wavelength grid must be strictly increasing")

    step = float(diffs[0])
    if not np.allclose(diffs, step, rtol=GRID_STEP_RTOL, atol=0.0):
        raise InvalidGridError(
            f"Wavelength grid must have a constant step; "
            f"steps range from {diffs.min():.6g} to {diffs.max():.6g}"
        )

    return step


def analyze_epoch(
    wavelength: ArrayLike,
    flux: ArrayLike,
    continuum: ArrayLike,
    epoch: str,
    source_id: str,
    mjd: float,
    *,
    continuum_amplitude: Optional[float] = None,
    spectral_index: Optional[float] = None,
    config: Optional[EngineConfig] = None,
) -> EpochMetrics:
    """
    Extract BAL trough metrics from one epoch.

    Args:
        wavelength: Rest-frame wavelength grid (Angstroms), constant step
        flux: Observed flux per grid point
        continuum: Continuum model per grid point (strictly positive)
        epoch: Epoch label
        source_id: Object identifier
        mjd: Modified Julian date
        continuum_amplitude: Power-law amplitude, passed through
        spectral_index: Power-law index, passed through
        config: Engine parameters (defaults to the fixed constants)

    Returns:
        EpochMetrics (zero-valued aggregates when nothing is detected)

    Raises:
        ShapeMismatchError: unequal lengths or fewer than 5 samples
        InvalidGridError: non-increasing or non-uniform grid
        InvalidContinuumError: non-positive or non-finite continuum
            or continuum amplitude
    """
    config = config or EngineConfig()

    wavelength = np.asarray(wavelength, dtype=float)
    flux = np.asarray(flux, dtype=float)
    continuum = np.asarray(continuum, dtype=float)

    validate_shapes(wavelength, flux, continuum)
    step = grid_step(wavelength)
    if continuum_amplitude is not None and not (
        math.isfinite(continuum_amplitude) and continuum_amplitude > 0
    ):
        raise InvalidContinuumError(
            f"Continuum amplitude must be positive and finite; got {continuum_amplitude}"
        )

    smoothed = savgol_smooth(flux)
    transmission = normalize_flux(smoothed, continuum)
    components = extract_components(wavelength, transmission, step, config)

    metrics = aggregate_components(
        components,
        epoch=epoch,
        source_id=source_id,
        mjd=mjd,
        continuum_amplitude=continuum_amplitude,
        spectral_index=spectral_index,
    )

    logger.debug(
        f"Epoch {epoch} ({source_id}): {metrics.trough_count} troughs, "
        f"EW={metrics.ew} A, depth={metrics.depth}, v={metrics.velocity} km/s"
    )

    return metrics


def analyze_epoch_input(
    epoch_input: EpochInput,
    config: Optional[EngineConfig] = None,
) -> EpochMetrics:
    """Run :func:`analyze_epoch` on an EpochInput record."""
    return analyze_epoch(
        epoch_input.wavelength,
        epoch_input.flux,
        epoch_input.continuum,
        epoch=epoch_input.epoch,
        source_id=epoch_input.source_id,
        mjd=epoch_input.mjd,
        continuum_amplitude=epoch_input.continuum_amplitude,
        spectral_index=epoch_input.spectral_index,
        config=config,
    )

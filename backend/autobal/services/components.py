"""
Trough Component Metrics

Turns candidate runs into absorption components with physical properties:
- Equivalent width (Angstroms)
- Depth (1 - minimum transmission)
- Centroid wavelength and velocity (at the trough bottom)
- Velocity extent (km/s)

Velocities are Doppler offsets from the reference line, positive for
blueshifted (outflowing) absorption.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from autobal.core.config import EngineConfig
from autobal.core.constants import C_IV_WAVELENGTH, GRID_STEP_RTOL, LIGHT_SPEED
from autobal.services.segmentation import CandidateRun, segment_troughs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TroughComponent:
    """An accepted absorption component."""

    start: int
    end: int  # exclusive
    depth: float
    equivalent_width: float  # Angstroms
    centroid_wavelength: float  # Angstroms
    centroid_velocity: float  # km/s
    velocity_extent: float  # km/s

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "start": self.start,
            "end": self.end,
            "depth": self.depth,
            "equivalent_width": self.equivalent_width,
            "centroid_wavelength": self.centroid_wavelength,
            "centroid_velocity": self.centroid_velocity,
            "velocity_extent": self.velocity_extent,
        }


def doppler_velocity(
    wavelength: float,
    reference_line: float = C_IV_WAVELENGTH,
    light_speed: float = LIGHT_SPEED,
) -> float:
    """Velocity (km/s) of a wavelength relative to the reference line."""
    return light_speed * (reference_line - wavelength) / reference_line


def measure_component(
    run: CandidateRun,
    wavelength: np.ndarray,
    transmission: np.ndarray,
    step: float,
    config: Optional[EngineConfig] = None,
) -> Optional[TroughComponent]:
    """
    Measure a candidate run.

    Args:
        run: Closed candidate run
        wavelength: Wavelength grid (Angstroms)
        transmission: Transmission curve the run was found in
        step: Fixed grid step (Angstroms)
        config: Engine parameters

    Returns:
        TroughComponent, or None if the run is not wider than the
        minimum trough width
    """
    config = config or EngineConfig()

    # Tolerate float rounding in the grid step: a run of exactly the
    # minimum width is rejected
    width = run.n_samples * step
    if width <= config.min_trough_width or math.isclose(
        width, config.min_trough_width, rel_tol=GRID_STEP_RTOL
    ):
        return None

    # Rectangle rule with the fixed step
    ew = float(np.sum(1.0 - transmission[run.start:run.end]) * step)

    centroid_wavelength = float(wavelength[run.min_index])
    v_centroid = doppler_velocity(
        centroid_wavelength, config.reference_line, config.light_speed
    )

    v_first = doppler_velocity(
        float(wavelength[run.start]), config.reference_line, config.light_speed
    )
    v_last = doppler_velocity(
        float(wavelength[run.end - 1]), config.reference_line, config.light_speed
    )

    return TroughComponent(
        start=run.start,
        end=run.end,
        depth=1.0 - run.min_value,
        equivalent_width=ew,
        centroid_wavelength=centroid_wavelength,
        centroid_velocity=v_centroid,
        velocity_extent=abs(v_first - v_last),
    )


def extract_components(
    wavelength: np.ndarray,
    transmission: np.ndarray,
    step: float,
    config: Optional[EngineConfig] = None,
) -> List[TroughComponent]:
    """
    Segment a transmission curve and measure every accepted run.

    Returns:
        Accepted components in scan order
    """
    config = config or EngineConfig()

    components = []
    for run in segment_troughs(transmission, config.absorption_threshold):
        component = measure_component(run, wavelength, transmission, step, config)
        if component is None:
            logger.debug(
                f"Rejected run [{run.start}, {run.end}): "
                f"{run.n_samples * step:.2f} A <= {config.min_trough_width} A"
            )
            continue
        components.append(component)

    return components

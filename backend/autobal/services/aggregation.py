"""Combine accepted components into one EpochMetrics record."""

import math
from typing import Optional, Sequence

from autobal.core.constants import (
    CONTINUUM_DECIMALS,
    DEPTH_DECIMALS,
    EW_DECIMALS,
    LUMINOSITY_DECIMALS,
    LUMINOSITY_ZERO_POINT,
    SPECTRAL_INDEX_DECIMALS,
    VELOCITY_DECIMALS,
)
from autobal.models.epoch import EpochMetrics
from autobal.services.components import TroughComponent


def _round_optional(value: Optional[float], decimals: int) -> Optional[float]:
    return None if value is None else round(value, decimals)


def aggregate_components(
    components: Sequence[TroughComponent],
    epoch: str,
    source_id: str,
    mjd: float,
    continuum_amplitude: Optional[float] = None,
    spectral_index: Optional[float] = None,
) -> EpochMetrics:
    """
    Reduce an epoch's components to summary metrics.

    Depth and velocity come from the single deepest component; on exact
    ties the first component in scan order wins. EW and width are sums over
    all components. Values are rounded once, after accumulation.
    """
    total_ew = 0.0
    total_width = 0.0
    max_depth = 0.0
    deepest_velocity = 0.0

    for component in components:
        total_ew += component.equivalent_width
        total_width += component.velocity_extent
        if component.depth > max_depth:
            max_depth = component.depth
            deepest_velocity = component.centroid_velocity

    luminosity = None
    if continuum_amplitude is not None:
        luminosity = LUMINOSITY_ZERO_POINT + math.log10(continuum_amplitude)

    return EpochMetrics(
        epoch=epoch,
        source_id=source_id,
        mjd=mjd,
        ew=round(total_ew, EW_DECIMALS),
        depth=round(max_depth, DEPTH_DECIMALS),
        width=round(total_width, VELOCITY_DECIMALS),
        velocity=round(deepest_velocity, VELOCITY_DECIMALS),
        continuum_flux=_round_optional(continuum_amplitude, CONTINUUM_DECIMALS),
        spectral_index=_round_optional(spectral_index, SPECTRAL_INDEX_DECIMALS),
        luminosity=_round_optional(luminosity, LUMINOSITY_DECIMALS),
        trough_count=len(components),
    )

"""Pydantic models for per-epoch engine input and output."""

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class EpochInput(BaseModel):
    """One epoch's rest-frame spectrum and continuum model."""

    wavelength: List[float] = Field(..., description="Rest-frame wavelength grid in Angstroms")
    flux: List[float] = Field(..., description="Observed flux, one value per grid point")
    continuum: List[float] = Field(..., description="Continuum model flux, strictly positive")
    epoch: str = Field(..., description="Epoch label")
    source_id: str = Field(..., description="Identifier of the observed object")
    mjd: float = Field(..., description="Modified Julian date of the observation")
    continuum_amplitude: Optional[float] = Field(
        None, gt=0, description="Power-law continuum amplitude (passed through)"
    )
    spectral_index: Optional[float] = Field(
        None, description="Power-law continuum spectral index alpha (passed through)"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "wavelength": [1500.0, 1500.5, 1501.0, 1501.5, 1502.0, 1502.5],
                "flux": [10.1, 9.8, 7.2, 6.9, 8.8, 10.0],
                "continuum": [10.0, 10.0, 10.0, 10.0, 10.0, 10.0],
                "epoch": "spec-4055-55359-0596.fits",
                "sourceId": "SDSS J4055-0596",
                "mjd": 55359,
                "continuumAmplitude": 10.0,
                "spectralIndex": -1.5,
            }
        }


class EpochMetrics(BaseModel):
    """Trough summary for one epoch. Immutable once produced."""

    epoch: str = Field(..., description="Epoch label")
    source_id: str = Field(..., description="Identifier of the observed object")
    mjd: float = Field(..., description="Modified Julian date")
    ew: float = Field(..., description="Total equivalent width (Angstroms)")
    depth: float = Field(..., description="Depth of the deepest trough")
    width: float = Field(..., description="Total velocity width of all troughs (km/s)")
    velocity: float = Field(..., description="Centroid velocity of the deepest trough (km/s)")
    continuum_flux: Optional[float] = Field(None, description="Continuum amplitude")
    spectral_index: Optional[float] = Field(None, description="Continuum spectral index")
    luminosity: Optional[float] = Field(None, description="log(L_bol)")
    trough_count: int = Field(..., ge=0, description="Number of accepted absorption components")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        json_schema_extra = {
            "example": {
                "epoch": "spec-4055-55359-0596.fits",
                "sourceId": "SDSS J4055-0596",
                "mjd": 55359,
                "ew": 12.48,
                "depth": 0.612,
                "width": 4310,
                "velocity": 8123,
                "continuumFlux": 10.0,
                "spectralIndex": -1.5,
                "luminosity": 47.0,
                "troughCount": 2,
            }
        }


class EpochError(BaseModel):
    """Why an epoch could not be analyzed."""

    error: str = Field(..., description="Error code (shape_mismatch, invalid_grid, invalid_continuum)")
    message: str = Field(..., description="Human-readable error message")


class EpochResult(BaseModel):
    """Outcome of one epoch within a batch."""

    epoch: str
    source_id: str
    status: str = Field(..., description="'ok' or 'failed'")
    metrics: Optional[EpochMetrics] = None
    error: Optional[EpochError] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class BatchRequest(BaseModel):
    """Request model for batch analysis."""

    epochs: List[EpochInput] = Field(..., min_length=1, description="Epochs to analyze")


class BatchResponse(BaseModel):
    """Response model for batch analysis."""

    results: List[EpochResult] = Field(..., description="Per-epoch results in input order")
    total: int = Field(..., description="Number of epochs submitted")
    failed: int = Field(..., description="Number of epochs that could not be analyzed")

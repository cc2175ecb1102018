"""Pydantic models module."""

from autobal.models.epoch import (
    BatchRequest,
    BatchResponse,
    EpochError,
    EpochInput,
    EpochMetrics,
    EpochResult,
)

__all__ = [
    "BatchRequest",
    "BatchResponse",
    "EpochError",
    "EpochInput",
    "EpochMetrics",
    "EpochResult",
]

"""API router for epoch trough analysis."""

from fastapi import APIRouter, HTTPException

from autobal.core.config import settings
from autobal.core.exceptions import EngineInputError
from autobal.models.epoch import BatchRequest, BatchResponse, EpochInput, EpochMetrics
from autobal.services.batch import analyze_batch
from autobal.services.pipeline import analyze_epoch_input

router = APIRouter()


@router.post("/analyze", response_model=EpochMetrics)
def analyze(epoch: EpochInput):
    """
    Extract trough metrics from a single epoch.

    Returns HTTP 400 with an error code when the curves have mismatched
    shapes, the grid is not uniform, or the continuum is not strictly
    positive.
    """
    try:
        return analyze_epoch_input(epoch, settings.engine_config())
    except EngineInputError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": e.error_code, "message": str(e)},
        )


@router.post("/batch", response_model=BatchResponse)
def analyze_many(request: BatchRequest):
    """
    Extract trough metrics from many epochs.

    Epochs are independent: failed epochs are reported per result and do
    not fail the request.
    """
    outcomes = analyze_batch(
        request.epochs,
        config=settings.engine_config(),
        max_workers=settings.BATCH_MAX_WORKERS,
    )

    return BatchResponse(
        results=[o.to_result() for o in outcomes],
        total=len(outcomes),
        failed=sum(1 for o in outcomes if not o.ok),
    )

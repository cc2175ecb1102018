"""
Batch Epoch Analysis

Runs many independent epochs through the pipeline. Epochs share nothing but
the read-only engine configuration, so they are dispatched to a thread pool
with no coordination. A bad epoch is recorded as a failed outcome and never
aborts the rest of the batch.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from autobal.core.config import EngineConfig
from autobal.core.exceptions import EngineInputError
from autobal.models.epoch import EpochError, EpochInput, EpochMetrics, EpochResult
from autobal.services.pipeline import analyze_epoch_input

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EpochOutcome:
    """Result of one epoch: metrics on success, the input error otherwise."""

    epoch: str
    source_id: str
    metrics: Optional[EpochMetrics] = None
    error: Optional[EngineInputError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_result(self) -> EpochResult:
        """Convert to the API result model."""
        error = None
        if self.error is not None:
            error = EpochError(error=self.error.error_code, message=str(self.error))
        return EpochResult(
            epoch=self.epoch,
            source_id=self.source_id,
            status="ok" if self.ok else "failed",
            metrics=self.metrics,
            error=error,
        )


def _run_one(epoch_input: EpochInput, config: EngineConfig) -> EpochOutcome:
    try:
        metrics = analyze_epoch_input(epoch_input, config)
    except EngineInputError as e:
        logger.warning(f"Epoch {epoch_input.epoch} ({epoch_input.source_id}) failed: {e}")
        return EpochOutcome(epoch_input.epoch, epoch_input.source_id, error=e)
    return EpochOutcome(epoch_input.epoch, epoch_input.source_id, metrics=metrics)


def analyze_batch(
    epochs: Sequence[EpochInput],
    config: Optional[EngineConfig] = None,
    max_workers: Optional[int] = None,
) -> List[EpochOutcome]:
    """
    Analyze epochs in parallel.

    Args:
        epochs: Epoch inputs
        config: Engine parameters shared by all epochs
        max_workers: Thread pool size (None = executor default)

    Returns:
        One EpochOutcome per input, in input order
    """
    config = config or EngineConfig()

    if not epochs:
        return []

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        outcomes = list(executor.map(lambda e: _run_one(e, config), epochs))

    failed = sum(1 for o in outcomes if not o.ok)
    logger.info(f"Analyzed {len(outcomes)} epochs ({failed} failed)")

    return outcomes


def metrics_to_dataframe(metrics: Iterable[EpochMetrics]):
    """
    Convert epoch metrics to a pandas DataFrame, one row per epoch.

    Columns use the camelCase field names (sourceId, troughCount, ...) so
    downstream consumers can group by ``sourceId``.
    """
    import pandas as pd

    columns = list(EpochMetrics.model_json_schema(by_alias=True)["properties"])
    return pd.DataFrame(
        [m.model_dump(by_alias=True) for m in metrics],
        columns=columns,
    )

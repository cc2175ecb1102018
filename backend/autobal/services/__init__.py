"""Spectral feature extraction services."""

from autobal.services.batch import EpochOutcome, analyze_batch, metrics_to_dataframe
from autobal.services.pipeline import analyze_epoch, analyze_epoch_input

__all__ = [
    "EpochOutcome",
    "analyze_batch",
    "analyze_epoch",
    "analyze_epoch_input",
    "metrics_to_dataframe",
]

"""
Trough Segmentation

Scans a transmission curve once, left to right, and yields every maximal
contiguous run of samples below the absorption threshold.

The scan is a two-state automaton:

    OUTSIDE --(T[i] < threshold)--> INSIDE      open run at i
    INSIDE  --(T[i] < threshold)--> INSIDE      track running minimum
    INSIDE  --(T[i] >= threshold)-> OUTSIDE     close run, end = i
    INSIDE  --(end of grid)-------> OUTSIDE     close run, end = N

A run still open when the grid ends is closed at N and evaluated like any
other run, so troughs touching the edge of the sampled range are never
dropped.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List

import numpy as np

from autobal.core.constants import ABSORPTION_THRESHOLD


class ScanState(Enum):
    """Segmenter states."""
    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass(frozen=True)
class CandidateRun:
    """A closed below-threshold run [start, end) and its trough bottom."""

    start: int
    end: int  # exclusive
    min_value: float  # lowest transmission in the run
    min_index: int  # first index where min_value occurs

    @property
    def n_samples(self) -> int:
        return self.end - self.start


def segment_troughs(
    transmission: np.ndarray,
    threshold: float = ABSORPTION_THRESHOLD,
) -> Iterator[CandidateRun]:
    """
    Yield candidate absorption runs in scan order.

    Args:
        transmission: Normalized transmission curve
        threshold: Samples strictly below this value are absorbed

    Yields:
        CandidateRun for every maximal below-threshold run
    """
    state = ScanState.OUTSIDE
    start = 0
    min_value = 1.0
    min_index = 0

    for i, value in enumerate(transmission):
        absorbed = value < threshold

        if state is ScanState.OUTSIDE:
            if absorbed:
                state = ScanState.INSIDE
                start, min_value, min_index = i, float(value), i
        elif absorbed:
            # Strict less-than: ties keep the earlier index
            if value < min_value:
                min_value, min_index = float(value), i
        else:
            state = ScanState.OUTSIDE
            yield CandidateRun(start, i, min_value, min_index)

    if state is ScanState.INSIDE:
        yield CandidateRun(start, len(transmission), min_value, min_index)


def find_candidate_runs(
    transmission: np.ndarray,
    threshold: float = ABSORPTION_THRESHOLD,
) -> List[CandidateRun]:
    """Collect all candidate runs into a list."""
    return list(segment_troughs(transmission, threshold))

"""Input errors raised by the extraction engine.

All errors are local to a single epoch. Callers processing batches catch
:class:`EngineInputError` per epoch and decide whether to skip or surface it.
"""


class EngineInputError(ValueError):
    """Base class for invalid engine input."""

    error_code = "invalid_input"


class ShapeMismatchError(EngineInputError):
    """Curves have unequal lengths or are shorter than the smoothing window."""

    error_code = "shape_mismatch"


class InvalidGridError(ShapeMismatchError):
    """Wavelength grid is not strictly increasing with a constant step."""

    error_code = "invalid_grid"


class InvalidContinuumError(EngineInputError):
    """Continuum model has a non-positive or non-finite sample."""

    error_code = "invalid_continuum"

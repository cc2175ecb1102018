"""Tests for continuum normalization."""

import numpy as np
import pytest

from autobal.core.exceptions import EngineInputError, InvalidContinuumError, ShapeMismatchError
from autobal.services.normalization import normalize_flux


class TestNormalizeFlux:
    """Tests for normalize_flux."""

    def test_elementwise_division(self):
        """Transmission is flux divided by continuum."""
        flux = np.array([5.0, 9.0, 2.0])
        continuum = np.array([10.0, 10.0, 4.0])

        np.testing.assert_allclose(normalize_flux(flux, continuum), [0.5, 0.9, 0.5])

    @pytest.mark.parametrize("bad", [0.0, -1.0, np.nan, np.inf])
    def test_invalid_continuum_rejected(self, bad):
        """Non-positive or non-finite continuum samples are rejected."""
        continuum = np.array([1.0, 1.0, bad, 1.0])

        with pytest.raises(InvalidContinuumError, match="index 2"):
            normalize_flux(np.ones(4), continuum)

    def test_continuum_error_is_distinct_from_shape_error(self):
        """Continuum errors are not shape errors."""
        with pytest.raises(InvalidContinuumError) as exc_info:
            normalize_flux(np.ones(3), np.zeros(3))

        assert not isinstance(exc_info.value, ShapeMismatchError)
        assert isinstance(exc_info.value, EngineInputError)
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.error_code == "invalid_continuum"

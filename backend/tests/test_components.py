"""Tests for trough component metrics."""

import numpy as np
import pytest

from autobal.core.config import EngineConfig
from autobal.core.constants import C_IV_WAVELENGTH, LIGHT_SPEED
from autobal.services.components import (
    doppler_velocity,
    extract_components,
    measure_component,
)
from autobal.services.pipeline import grid_step
from autobal.services.segmentation import CandidateRun

STEP = 0.5


def make_wavelength(n, start=1500.0):
    return start + STEP * np.arange(n)


class TestDopplerVelocity:
    """Tests for the velocity transform."""

    def test_reference_line_is_zero(self):
        """The reference line itself has zero velocity."""
        assert doppler_velocity(C_IV_WAVELENGTH) == 0.0

    def test_blueshift_is_positive(self):
        """Wavelengths blueward of the reference line are outflows."""
        v = doppler_velocity(1520.0)

        assert v > 0
        assert v == pytest.approx(LIGHT_SPEED * 29.0 / 1549.0)

    def test_redshift_is_negative(self):
        """Wavelengths redward of the reference line have negative velocity."""
        assert doppler_velocity(1600.0) < 0


class TestMeasureComponent:
    """Tests for measure_component."""

    def test_width_at_minimum_is_rejected(self):
        """A run exactly 2.0 A wide is rejected."""
        transmission = np.array([1.0, 0.5, 0.4, 0.5, 0.6, 1.0])
        run = CandidateRun(start=1, end=5, min_value=0.4, min_index=2)

        assert measure_component(run, make_wavelength(6), transmission, STEP) is None

    def test_width_above_minimum_is_accepted(self):
        """A run wider than 2.0 A is accepted."""
        transmission = np.array([1.0, 0.5, 0.4, 0.5, 0.6, 0.8, 1.0])
        run = CandidateRun(start=1, end=6, min_value=0.4, min_index=2)

        assert measure_component(run, make_wavelength(7), transmission, STEP) is not None

    def test_width_at_minimum_on_inexact_grid(self):
        """A 2.0 A run is rejected even when the step carries rounding error."""
        wavelength = 1000.0 + 0.1 * np.arange(200)
        step = grid_step(wavelength)
        assert 20 * step > 2.0
        transmission = np.ones(200)
        transmission[50:71] = 0.5

        narrow = CandidateRun(start=50, end=70, min_value=0.5, min_index=50)
        wide = CandidateRun(start=50, end=71, min_value=0.5, min_index=50)

        assert measure_component(narrow, wavelength, transmission, step) is None
        assert measure_component(wide, wavelength, transmission, step) is not None

    def test_metrics(self):
        """EW, depth, centroid and velocity extent follow their definitions."""
        wavelength = make_wavelength(8)
        transmission = np.array([1.0, 0.8, 0.6, 0.3, 0.6, 0.7, 0.85, 1.0])
        run = CandidateRun(start=1, end=7, min_value=0.3, min_index=3)

        component = measure_component(run, wavelength, transmission, STEP)

        expected_ew = (0.2 + 0.4 + 0.7 + 0.4 + 0.3 + 0.15) * STEP
        assert component.equivalent_width == pytest.approx(expected_ew)
        assert component.depth == pytest.approx(0.7)
        assert component.centroid_wavelength == 1501.5
        assert component.centroid_velocity == pytest.approx(doppler_velocity(1501.5))
        expected_extent = abs(doppler_velocity(wavelength[6]) - doppler_velocity(wavelength[1]))
        assert component.velocity_extent == pytest.approx(expected_extent)
        assert (component.start, component.end) == (1, 7)

    def test_ew_uses_fixed_step(self):
        """EW uses the supplied step, not the local grid spacing."""
        wavelength = make_wavelength(7)
        transmission = np.array([1.0, 0.5, 0.5, 0.5, 0.5, 0.5, 1.0])
        run = CandidateRun(start=1, end=6, min_value=0.5, min_index=1)

        component = measure_component(run, wavelength, transmission, step=1.0)

        assert component.equivalent_width == pytest.approx(2.5)

    def test_velocity_extent_redward_of_line(self):
        """Extent is an absolute difference on either side of the line."""
        wavelength = make_wavelength(8, start=1600.0)
        transmission = np.array([1.0, 0.5, 0.5, 0.5, 0.5, 0.5, 0.5, 1.0])
        run = CandidateRun(start=1, end=7, min_value=0.5, min_index=1)

        component = measure_component(run, wavelength, transmission, STEP)

        assert component.velocity_extent == pytest.approx(LIGHT_SPEED * 2.5 / C_IV_WAVELENGTH)
        assert component.centroid_velocity < 0

    def test_custom_config(self):
        """Minimum width and reference line come from the config."""
        wavelength = make_wavelength(6)
        transmission = np.array([1.0, 0.5, 0.4, 0.5, 0.6, 1.0])
        run = CandidateRun(start=1, end=5, min_value=0.4, min_index=2)
        config = EngineConfig(min_trough_width=1.0, reference_line=1501.0)

        component = measure_component(run, wavelength, transmission, STEP, config)

        assert component is not None
        assert component.centroid_velocity == pytest.approx(0.0)

    def test_to_dict(self):
        """Components serialize to plain dictionaries."""
        transmission = np.array([1.0, 0.5, 0.4, 0.5, 0.6, 0.8, 1.0])
        run = CandidateRun(start=1, end=6, min_value=0.4, min_index=2)

        data = measure_component(run, make_wavelength(7), transmission, STEP).to_dict()

        assert data["start"] == 1
        assert data["end"] == 6
        assert data["depth"] == pytest.approx(0.6)
        assert data["centroid_wavelength"] == 1501.0


class TestExtractComponents:
    """Tests for extract_components."""

    def test_rejects_narrow_and_keeps_wide(self):
        """Only runs wider than the minimum width become components."""
        transmission = np.ones(30)
        transmission[3:6] = 0.5  # 1.5 A, rejected
        transmission[10:20] = 0.4  # 5.0 A, accepted
        wavelength = make_wavelength(30)

        components = extract_components(wavelength, transmission, STEP)

        assert len(components) == 1
        assert (components[0].start, components[0].end) == (10, 20)
        assert components[0].equivalent_width == pytest.approx(10 * 0.6 * STEP)

    def test_scan_order(self):
        """Components are returned in scan order."""
        transmission = np.ones(40)
        transmission[5:12] = 0.3
        transmission[25:35] = 0.6
        wavelength = make_wavelength(40)

        components = extract_components(wavelength, transmission, STEP)

        assert [c.start for c in components] == [5, 25]

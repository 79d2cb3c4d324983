"""
Tests for mesh construction.
"""

import pytest
import numpy as np

from exact_pricing.exceptions import ConfigurationError
from exact_pricing.mesh import create_mesh


class TestCreateMesh:

    def test_inclusive_end(self):
        np.testing.assert_array_equal(create_mesh(99, 101, 1), [99.0, 100.0, 101.0])

    def test_fractional_step(self):
        np.testing.assert_allclose(create_mesh(0.0, 1.0, 0.25), [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_rounding_drift_keeps_end(self):
        """0.1 * 3 > 0.3 in binary; the end point must still be there."""
        mesh = create_mesh(0.0, 0.3, 0.1)
        assert len(mesh) == 4

    def test_end_off_grid(self):
        np.testing.assert_allclose(create_mesh(0.0, 1.0, 0.4), [0.0, 0.4, 0.8])

    def test_single_point(self):
        np.testing.assert_array_equal(create_mesh(5.0, 5.0, 1.0), [5.0])

    def test_monotonic(self):
        mesh = create_mesh(10.0, 50.0, 0.5)
        assert np.all(np.diff(mesh) > 0)
        assert mesh[0] == 10.0 and mesh[-1] == pytest.approx(50.0)

    @pytest.mark.parametrize("step", [0.0, -1.0])
    def test_bad_step(self, step):
        with pytest.raises(ConfigurationError):
            create_mesh(0.0, 1.0, step)

    def test_reversed_bounds(self):
        with pytest.raises(ConfigurationError):
            create_mesh(10.0, 5.0, 1.0)

    def test_non_finite(self):
        with pytest.raises(ConfigurationError):
            create_mesh(0.0, float("inf"), 1.0)

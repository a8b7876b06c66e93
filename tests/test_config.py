"""Tests for quantum_tensors.config."""

import numpy as np
import pytest

from quantum_tensors import config
from quantum_tensors.config import (
    Tolerances,
    get_backend,
    set_backend,
    get_backend_name,
    to_numpy,
    get_tolerances,
    set_tolerances,
    reset_tolerances,
)
from quantum_tensors.core.coords import coords_from_indices


# ═══════════════════════════════════════════════════════════════════════════
# 1. Array backend
# ═══════════════════════════════════════════════════════════════════════════

class TestBackend:
    def setup_method(self):
        set_backend("numpy")

    def teardown_method(self):
        set_backend("numpy")

    def test_default_is_numpy(self):
        assert get_backend() is np

    def test_unknown_backend_keeps_current(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            set_backend("tensorflow")
        assert get_backend_name() == "numpy"

    def test_failed_import_keeps_current(self, monkeypatch):
        monkeypatch.setitem(config._BACKEND_MODULES, "cupy", "quantum_tensors_missing_gpu")
        with pytest.raises(ImportError):
            set_backend("cupy")
        assert get_backend_name() == "numpy"

    def test_switch_logs(self, monkeypatch, caplog):
        monkeypatch.setitem(config._BACKEND_MODULES, "jax", "numpy")
        with caplog.at_level("INFO", logger="quantum_tensors.config"):
            set_backend("jax")
        assert "switched from numpy to jax" in caplog.text

    def test_batch_coords_follow_backend(self, monkeypatch):
        monkeypatch.setitem(config._BACKEND_MODULES, "jax", "numpy")
        set_backend("jax")
        coords = coords_from_indices([5, 0], [2, 3])
        assert isinstance(coords, np.ndarray)
        np.testing.assert_array_equal(coords, [[1, 2], [0, 0]])

    def test_cupy_batch_coords(self):
        pytest.importorskip("cupy")
        set_backend("cupy")
        coords = coords_from_indices([5], [2, 3])
        assert isinstance(to_numpy(coords), np.ndarray)
        np.testing.assert_array_equal(coords, [[1, 2]])


# ═══════════════════════════════════════════════════════════════════════════
# 2. Tolerances
# ═══════════════════════════════════════════════════════════════════════════

class TestTolerances:
    def teardown_method(self):
        reset_tolerances()

    def test_defaults(self):
        tol = get_tolerances()
        assert tol.close_eps == 1e-6
        assert tol.almost_zero == 1e-12

    def test_set_and_reset(self):
        updated = set_tolerances(close_eps=1e-9)
        assert updated.close_eps == 1e-9
        assert updated.almost_zero == 1e-12
        assert config.get_tolerances() is updated
        assert reset_tolerances() == Tolerances()

    def test_non_positive_rejected(self):
        with pytest.raises(ValueError, match="close_eps must be positive"):
            set_tolerances(close_eps=0.0)
        assert get_tolerances().close_eps == 1e-6

    def test_unknown_tolerance_rejected(self):
        with pytest.raises(ValueError, match="Unknown tolerance"):
            set_tolerances(angle_eps=1e-3)

    def test_update_logs(self, caplog):
        with caplog.at_level("INFO", logger="quantum_tensors.config"):
            set_tolerances(almost_zero=1e-10)
        assert "Tolerances updated" in caplog.text

"""
Infrastructure tests.

Tests that the development infrastructure is working:
- Taichi initialization and backend selection
- Package exports
"""

import pytest
import taichi as ti

import gridpair
from gridpair.config import get_backend
from gridpair.core import DTYPE


class TestTaichiInit:
    """Test Taichi initialization and configuration."""

    def test_taichi_initialized(self, taichi_init):
        """Verify Taichi is initialized."""
        test_field = ti.field(dtype=DTYPE, shape=(2,))
        test_field[0] = 1.5
        assert test_field[0] == 1.5

    def test_default_dtype(self):
        """Kernels compare distances in double precision."""
        assert DTYPE == ti.f64

    def test_backend_from_env(self, monkeypatch):
        monkeypatch.setenv("GRIDPAIR_BACKEND", "CPU")
        assert get_backend() == "cpu"

    def test_backend_detection(self, monkeypatch):
        """Auto-detection returns a valid backend."""
        monkeypatch.setenv("GRIDPAIR_BACKEND", "auto")
        assert get_backend() in ("cuda", "vulkan", "cpu")

    def test_invalid_backend(self, monkeypatch):
        monkeypatch.setenv("GRIDPAIR_BACKEND", "tpu")
        with pytest.raises(ValueError, match="Invalid GRIDPAIR_BACKEND"):
            get_backend()


class TestPackage:
    """Top-level exports."""

    def test_version(self):
        assert gridpair.__version__ == "0.1.0"

    def test_exports(self):
        for name in gridpair.__all__:
            assert hasattr(gridpair, name)

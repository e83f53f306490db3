import importlib

import jax.numpy as jnp
import pytest

import skyframes.config
from skyframes.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that change the dtype (e.g. test_config.py, which resets to
    float32) must not leak their setting into later tests.
    """
    set_dtype(jnp.float64)


@pytest.fixture
def default_config():
    """Reload the config module so the test sees the import-time defaults."""
    importlib.reload(skyframes.config)
    yield
    set_dtype(jnp.float64)

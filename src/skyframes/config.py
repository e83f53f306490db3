"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
for every conversion matrix and column vector built by skyframes.  The
default is ``jnp.float64``, which keeps catalog round trips within
1e-9 rad; JAX's 64-bit mode (``jax_enable_x64``) is enabled on import.
Lower precisions are available for batched accelerator workloads.

Call ``set_dtype`` **before** building any frame graph.  Matrices already
stored on a :class:`~skyframes.graph.FrameGraph` keep the dtype they were
created with.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float64
jax.config.update("jax_enable_x64", True)


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for skyframes.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def get_angle_tolerance() -> float:
    """Return the dtype-adaptive tolerance for angle comparisons.

    The tolerance scales with the precision of the configured float dtype:

    - ``float64``:  1e-12 rad
    - ``float32``:  1e-6 rad
    - ``float16``:  1e-3 rad
    - ``bfloat16``: 1e-3 rad

    Returns:
        float: Absolute tolerance in radians.
    """
    if _dtype == jnp.float64:
        return 1e-12
    if _dtype == jnp.float32:
        return 1e-6
    # float16 and bfloat16
    return 1e-3

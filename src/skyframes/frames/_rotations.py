import jax.numpy as jnp

from skyframes.config import get_dtype


def Rx(angle: float) -> jnp.ndarray:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation in radians, as
            viewed looking back along the postive direction of the rotation
            axis.  Callers holding an :class:`~skyframes.units.Angle` pass
            ``angle.to_radians()``.

    Returns:
        jnp.ndarray: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0,  0.0,  0.0],
                      [0.0,   +c,   +s],
                      [0.0,   -s,   +c]], dtype=get_dtype())

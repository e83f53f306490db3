"""
skyframes converts celestial coordinates between Horizon, Equatorial, Ecliptic and Galactic frames, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    RAD2AS,
    OBLIQUITY_J2000,
    GALACTIC_POLE_RA,
    GALACTIC_POLE_DEC,
    GALACTIC_NCP_LON,
)

from .config import set_dtype, get_dtype, get_angle_tolerance
from .units import Angle, AngleUnit, as_angle

from .representation import (
    SphericalRepresentation,
    column_vector,
    spherical_from_vector,
)

from .frames import (
    OBLIQUITY_J2000_RAD,
    rotation_hadec_to_horizon,
    rotation_horizon_to_hadec,
    rotation_hadec_to_radec,
    rotation_radec_to_hadec,
    rotation_radec_to_ecliptic,
    rotation_ecliptic_to_radec,
    rotation_radec_to_galactic,
    rotation_galactic_to_radec,
)

from .graph import (
    Frame,
    Edge,
    FramePath,
    FrameGraph,
    resolve_path,
    apply_path,
    iter_path_transforms,
    FrameConversionError,
    FrameNotFoundError,
    UnknownFrameError,
    DuplicateFrameError,
    UnreachablePathError,
    EdgeMissingError,
)

from .conversion import (
    FrameName,
    build_reference_graph,
    convert,
    convert_representation,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "RAD2AS",
    "OBLIQUITY_J2000",
    "GALACTIC_POLE_RA",
    "GALACTIC_POLE_DEC",
    "GALACTIC_NCP_LON",
    # Config
    "set_dtype",
    "get_dtype",
    "get_angle_tolerance",
    # Units
    "Angle",
    "AngleUnit",
    "as_angle",
    # Representation
    "SphericalRepresentation",
    "column_vector",
    "spherical_from_vector",
    # Frames
    "OBLIQUITY_J2000_RAD",
    "rotation_hadec_to_horizon",
    "rotation_horizon_to_hadec",
    "rotation_hadec_to_radec",
    "rotation_radec_to_hadec",
    "rotation_radec_to_ecliptic",
    "rotation_ecliptic_to_radec",
    "rotation_radec_to_galactic",
    "rotation_galactic_to_radec",
    # Graph
    "Frame",
    "Edge",
    "FramePath",
    "FrameGraph",
    "resolve_path",
    "apply_path",
    "iter_path_transforms",
    # Errors
    "FrameConversionError",
    "FrameNotFoundError",
    "UnknownFrameError",
    "DuplicateFrameError",
    "UnreachablePathError",
    "EdgeMissingError",
    # Conversion
    "FrameName",
    "build_reference_graph",
    "convert",
    "convert_representation",
]

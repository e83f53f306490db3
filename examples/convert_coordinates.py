# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "skyframes"]
#
# [tool.uv.sources]
# skyframes = { path = ".." }
# ///
"""Convert a point between celestial reference frames.

Builds the reference frame graph for the given observer latitude, local
sidereal time and obliquity, resolves the path between the two frames,
and prints every intermediate step followed by the result.

Requires skyframes to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/convert_coordinates.py [OPTIONS]

Examples:
    # Altitude 30 deg, azimuth 45 deg seen from latitude 51.5 deg, to HA/Dec
    uv run examples/convert_coordinates.py --src Horizon --dest Equatorial_HA_Dec \\
        --lat 30 --lon 45 --phi 51.5

    # Same point all the way to galactic coordinates
    uv run examples/convert_coordinates.py --src Horizon --dest Galactic \\
        --lat 30 --lon 45 --phi 51.5 --sidereal-time 120 --obliquity 23.44
"""

import logging
from typing import Annotated

import typer

from skyframes import (
    Angle,
    AngleUnit,
    FrameConversionError,
    FrameName,
    SphericalRepresentation,
    build_reference_graph,
    column_vector,
    iter_path_transforms,
    resolve_path,
    spherical_from_vector,
)


def main(
    src: Annotated[FrameName, typer.Option(help="Frame the point is given in")] = FrameName.HORIZON,
    dest: Annotated[FrameName, typer.Option(help="Frame to convert to")] = FrameName.EQUATORIAL_RA_DEC,
    lat: Annotated[float, typer.Option(help="Latitude of the point")] = 30.0,
    lon: Annotated[float, typer.Option(help="Longitude of the point")] = 45.0,
    dist: Annotated[float, typer.Option(help="Distance of the point")] = 1.0,
    phi: Annotated[float, typer.Option(help="Observer latitude")] = 51.5,
    sidereal_time: Annotated[float, typer.Option(help="Local sidereal time as an angle")] = 0.0,
    obliquity: Annotated[float, typer.Option(help="Obliquity of the ecliptic")] = 23.44,
    degrees: Annotated[bool, typer.Option(help="Angles are in degrees (else radians)")] = True,
    verbose: Annotated[bool, typer.Option(help="Enable debug logging")] = False,
) -> None:
    """Convert a (lat, lon, dist) point from one celestial frame to another."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    unit = AngleUnit.DEGREES if degrees else AngleUnit.RADIANS

    point = SphericalRepresentation(Angle(lat, unit), Angle(lon, unit), dist)
    graph = build_reference_graph(Angle(phi, unit), Angle(sidereal_time, unit), Angle(obliquity, unit))

    try:
        path = resolve_path(graph, src, dest)
    except FrameConversionError as err:
        print(f"Error: {err}")
        raise typer.Exit(code=1) from err

    print(f"Path ({path.hops} hop(s)): {' -> '.join(path.names())}")

    vector = column_vector(point)
    print(f"  {src}: {vector}")
    for edge, vector in iter_path_transforms(graph, path, vector):
        print(f"  {edge.target}: {vector}")

    result = spherical_from_vector(vector, unit)
    print(
        f"\nResult in {dest}: lat={float(result.lat.value):.9f} {unit.value}, "
        f"lon={float(result.lon.value):.9f} {unit.value}, dist={float(result.dist):.9f}"
    )


if __name__ == "__main__":
    typer.run(main)

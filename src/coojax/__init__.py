"""
coojax converts the state of gravitationally bound bodies between Cartesian frames and orbital elements, implemented in JAX.
"""

__version__ = "2019.3.0"

from .constants import (
    DEG2RAD,
    RAD2DEG,
    PI,
    PI2,
    PI_SQ,
    GAUSS_K,
    GAUSS_K2,
)

from .config import set_dtype, get_dtype

from .vectors import (
    Vector3,
    Vector4,
)

from .orbits import (
    kepler_solve,
    anomaly_eccentric_to_mean,
    anomaly_mean_to_eccentric,
)

from .bodies import (
    Body,
    CartesianState,
    CoordinateType,
    DelaunayElements,
    KeplerianElements,
    Population,
    RegularizedState,
)

from .coordinates import (
    state_heliocentric_to_keplerian,
    state_keplerian_to_heliocentric,
)

from .frames import (
    barycenter,
    recenter,
    total_mass,
)

from .conversions import (
    ConversionMode,
    ConversionResult,
    convert,
    barycentric_to_heliocentric,
    heliocentric_to_barycentric,
    heliocentric_to_keplerian,
    keplerian_to_heliocentric,
)

from .io import (
    read_bodies,
    read_population,
    format_bodies,
    write_bodies,
)


def version_info() -> tuple[int, int]:
    """Return the ``(major, minor)`` library version."""
    major, minor, _ = __version__.split(".")
    return int(major), int(minor)


__all__ = [
    "__version__",
    "version_info",
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "PI",
    "PI2",
    "PI_SQ",
    "GAUSS_K",
    "GAUSS_K2",
    # Config
    "set_dtype",
    "get_dtype",
    # Vectors
    "Vector3",
    "Vector4",
    # Orbits
    "kepler_solve",
    "anomaly_eccentric_to_mean",
    "anomaly_mean_to_eccentric",
    # Bodies
    "Body",
    "CartesianState",
    "CoordinateType",
    "DelaunayElements",
    "KeplerianElements",
    "Population",
    "RegularizedState",
    # Coordinates
    "state_heliocentric_to_keplerian",
    "state_keplerian_to_heliocentric",
    # Frames
    "barycenter",
    "recenter",
    "total_mass",
    # Conversions
    "ConversionMode",
    "ConversionResult",
    "convert",
    "barycentric_to_heliocentric",
    "heliocentric_to_barycentric",
    "heliocentric_to_keplerian",
    "keplerian_to_heliocentric",
    # I/O
    "read_bodies",
    "read_population",
    "format_bodies",
    "write_bodies",
]

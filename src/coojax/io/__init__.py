"""Reading and writing body tables.

Tables are plain text with one body per line.  Angles are radians unless
``use_degrees=True`` is passed, in which case the conversion happens here
and never inside the numerical kernels.
"""

from coojax.io._formatters import format_bodies, write_bodies
from coojax.io._parsers import parse_line, read_bodies, read_population

__all__ = [
    "format_bodies",
    "parse_line",
    "read_bodies",
    "read_population",
    "write_bodies",
]

"""Formatters writing body tables.

Every line starts with the body's index, followed by the representation's
values in two groups (position-like, then velocity-like).  Masses are not
written.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import TextIO

from coojax.bodies import Body, CoordinateType

from ._layout import record_to_values, record_width

logger = logging.getLogger(__name__)

_FORMAT_6 = "%2u   %+.15e %+.15e %+.15e   %+.15e %+.15e %+.15e\n"
_FORMAT_8 = "%2u   %+.15e %+.15e %+.15e %+.15e   %+.15e %+.15e %+.15e %+.15e\n"


def format_bodies(
    bodies: Sequence[Body],
    kind: CoordinateType,
    use_degrees: bool = False,
) -> str:
    """Format one representation of every body as a table.

    Args:
        bodies: Bodies to format.
        kind: Representation to write.
        use_degrees: If ``True``, Keplerian and Delaunay angles are written
            in degrees.

    Returns:
        The table text, one newline-terminated line per body.

    Raises:
        ValueError: If *kind* is not a single representation.

    Examples:
        ```python
        from coojax.bodies import Body, CoordinateType
        from coojax.io import format_bodies
        print(format_bodies([Body(mass=1.0)], CoordinateType.HELIOCENTRIC))
        ```
    """
    fmt = _FORMAT_8 if record_width(kind) == 8 else _FORMAT_6
    return "".join(
        fmt % (i, *record_to_values(kind, body.get(kind), use_degrees))
        for i, body in enumerate(bodies)
    )


def write_bodies(
    dest: str | PathLike | TextIO,
    bodies: Sequence[Body],
    kind: CoordinateType,
    use_degrees: bool = False,
) -> None:
    """Write a body table to a file path or an open text stream.

    Args:
        dest: Path to create or overwrite, or a writable text stream.
        bodies: Bodies to write.
        kind: Representation to write.
        use_degrees: If ``True``, angles are written in degrees.
    """
    text = format_bodies(bodies, kind, use_degrees)
    if isinstance(dest, (str, PathLike)):
        Path(dest).write_text(text)
    else:
        dest.write(text)
    logger.info("Wrote %d %s records", len(bodies), kind.name.lower())

"""Parsers for whitespace-separated body tables.

Each data line describes one body: the representation's values followed by
the body's mass.  Tokens beyond the mass are ignored, which lets tables
carry trailing identifiers or comments.  Blank lines and lines whose first
non-blank character is ``#`` are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from coojax.bodies import Body, CoordinateType, Population

from ._layout import record_width, values_to_record

logger = logging.getLogger(__name__)


def parse_line(line: str, kind: CoordinateType, lineno: int = 0) -> tuple[list[float], float]:
    """Split one data line into representation values and mass.

    Args:
        line: The data line.
        kind: Representation stored on the line.
        lineno: 1-based line number, used in error messages.

    Returns:
        Tuple ``(values, mass)``.

    Raises:
        ValueError: If the line has too few tokens or a token is not a
            number.
    """
    width = record_width(kind)
    tokens = line.split()
    if len(tokens) < width + 1:
        raise ValueError(
            f"Line {lineno}: expected {width + 1} numbers for "
            f"{kind.name.lower()}, got {len(tokens)}: {line.strip()!r}"
        )
    try:
        numbers = [float(t) for t in tokens[: width + 1]]
    except ValueError:
        raise ValueError(f"Line {lineno}: invalid number in {line.strip()!r}") from None
    return numbers[:width], numbers[width]


def _lines(source: str | PathLike | Iterable[str]) -> Iterable[str]:
    if isinstance(source, (str, PathLike)):
        with open(Path(source)) as f:
            yield from f
    else:
        yield from source


def read_bodies(
    source: str | PathLike | Iterable[str],
    kind: CoordinateType,
    use_degrees: bool = False,
    max_bodies: int | None = None,
) -> list[Body]:
    """Read a body table into new :class:`Body` records.

    Args:
        source: Path to a table file, or an iterable of lines (an open
            text file, a list of strings).
        kind: Representation stored in the table.  The values are written
            to that field of each body and its flag is set in
            ``Body.written``.
        use_degrees: If ``True``, Keplerian and Delaunay angles in the
            table are in degrees.
        max_bodies: Stop after this many bodies (default: read all).

    Returns:
        Bodies in table order.

    Raises:
        FileNotFoundError: If *source* is a path that does not exist.
        ValueError: If *kind* is not a single representation or a data line
            is malformed.

    Examples:
        ```python
        from coojax.bodies import CoordinateType
        from coojax.io import read_bodies
        bodies = read_bodies("planets.hel", CoordinateType.KEPLERIAN, use_degrees=True)
        ```
    """
    record_width(kind)
    bodies: list[Body] = []

    for lineno, line in enumerate(_lines(source), start=1):
        if max_bodies is not None and len(bodies) >= max_bodies:
            break
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        values, mass = parse_line(line, kind, lineno)
        body = Body(mass=mass)
        body.set(kind, values_to_record(kind, values, use_degrees))
        bodies.append(body)

    logger.info("Read %d %s records", len(bodies), kind.name.lower())
    return bodies


def read_population(
    source: str | PathLike | Iterable[str],
    kind: CoordinateType,
    center: int = 0,
    use_degrees: bool = False,
    max_bodies: int | None = None,
) -> Population:
    """Read a body table into a :class:`Population`.

    Args:
        source: Path or iterable of lines, as for :func:`read_bodies`.
        kind: Representation stored in the table.
        center: Index of the central body.
        use_degrees: If ``True``, table angles are in degrees.
        max_bodies: Stop after this many bodies.

    Returns:
        A validated population.

    Raises:
        ValueError: On a malformed table, an empty table, or a center index
            outside the table.
    """
    population = Population(
        read_bodies(source, kind, use_degrees=use_degrees, max_bodies=max_bodies),
        center=center,
    )
    population.validate()
    return population

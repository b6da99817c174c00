# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "coojax"]
#
# [tool.uv.sources]
# coojax = { path = ".." }
# ///
"""Convert a body table from one representation to another.

Reads a whitespace-separated table (one body per line, values then mass),
applies one elementary conversion to the whole population and prints the
converted table.  Bodies that fail validation are reported on stderr.

Requires coojax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/convert_table.py INPUT MODE [OPTIONS]

Examples:
    # Heliocentric Cartesian coordinates to Keplerian elements in degrees
    uv run examples/convert_table.py planets.hco hco2hel --degrees

    # Keplerian elements (degrees) to heliocentric coordinates, Sun at index 0
    uv run examples/convert_table.py planets.hel hel2hco --degrees --center 0
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from coojax import ConversionMode, CoordinateType, convert
from coojax.io import read_population, write_bodies

# ── Representation read and written by each mode ─────────────────────────────

_KINDS = {
    ConversionMode.BARYCENTRIC_TO_HELIOCENTRIC: (
        CoordinateType.BARYCENTRIC,
        CoordinateType.HELIOCENTRIC,
    ),
    ConversionMode.HELIOCENTRIC_TO_BARYCENTRIC: (
        CoordinateType.HELIOCENTRIC,
        CoordinateType.BARYCENTRIC,
    ),
    ConversionMode.HELIOCENTRIC_TO_KEPLERIAN: (
        CoordinateType.HELIOCENTRIC,
        CoordinateType.KEPLERIAN,
    ),
    ConversionMode.KEPLERIAN_TO_HELIOCENTRIC: (
        CoordinateType.KEPLERIAN,
        CoordinateType.HELIOCENTRIC,
    ),
}


def main(
    input_path: Annotated[Path, typer.Argument(help="Input body table")],
    mode: Annotated[ConversionMode, typer.Argument(help="Conversion to apply")],
    center: Annotated[int, typer.Option(help="Index of the central body")] = 0,
    degrees: Annotated[bool, typer.Option(help="Angles in degrees")] = False,
    verbose: Annotated[bool, typer.Option(help="Log progress to stderr")] = False,
) -> None:
    """Convert a body table and print the result."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if mode not in _KINDS:
        print(f"ERROR: mode {mode.value!r} performs no conversion.", file=sys.stderr)
        sys.exit(1)
    source, target = _KINDS[mode]

    population = read_population(input_path, source, center=center, use_degrees=degrees)
    result = convert(population, mode)

    if not result.success:
        if result.failed:
            print(f"WARNING: bodies {list(result.failed)} failed conversion.", file=sys.stderr)
        else:
            print("ERROR: conversion failed for the whole population.", file=sys.stderr)
            sys.exit(1)

    write_bodies(sys.stdout, population.bodies, target, use_degrees=degrees)


if __name__ == "__main__":
    typer.run(main)

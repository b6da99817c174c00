"""Single entry point selecting an elementary conversion by mode."""

from __future__ import annotations

import logging
from collections.abc import Callable

from coojax.bodies import Population

from ._types import ConversionMode, ConversionResult
from .heliocentric import barycentric_to_heliocentric, heliocentric_to_barycentric
from .keplerian import heliocentric_to_keplerian, keplerian_to_heliocentric

logger = logging.getLogger(__name__)

_CONVERTERS: dict[ConversionMode, Callable[[Population], ConversionResult]] = {
    ConversionMode.BARYCENTRIC_TO_HELIOCENTRIC: barycentric_to_heliocentric,
    ConversionMode.HELIOCENTRIC_TO_BARYCENTRIC: heliocentric_to_barycentric,
    ConversionMode.HELIOCENTRIC_TO_KEPLERIAN: heliocentric_to_keplerian,
    ConversionMode.KEPLERIAN_TO_HELIOCENTRIC: keplerian_to_heliocentric,
}


def convert(population: Population, mode: ConversionMode | str) -> ConversionResult:
    """Apply the elementary conversion named by *mode* to a population.

    Args:
        population: Bodies to convert in place.
        mode: A :class:`ConversionMode` or its short name
            (``"bco2hco"``, ``"hco2bco"``, ``"hco2hel"``, ``"hel2hco"``).

    Returns:
        The selected converter's :class:`ConversionResult`.

    Raises:
        ValueError: If *mode* is ``NONE`` or unknown, or the population is
            invalid.

    Examples:
        ```python
        from coojax.conversions import convert
        convert(population, "hco2hel")
        ```
    """
    try:
        mode = ConversionMode(mode)
    except ValueError:
        raise ValueError(f"Unknown conversion mode: {mode!r}") from None

    converter = _CONVERTERS.get(mode)
    if converter is None:
        raise ValueError(f"No conversion for mode {mode.name}")

    logger.debug("Dispatching conversion %s", mode.value)
    return converter(population)

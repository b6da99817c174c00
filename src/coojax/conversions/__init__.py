"""Whole-population coordinate conversions.

Four elementary converters rewrite one representation of every body from
another, and :func:`convert` selects one of them by mode.  Argument errors
raise :class:`ValueError`; per-body physical failures are reported through
the returned :class:`ConversionResult`.
"""

from ._types import ConversionMode, ConversionResult
from .dispatch import convert
from .heliocentric import barycentric_to_heliocentric, heliocentric_to_barycentric
from .keplerian import heliocentric_to_keplerian, keplerian_to_heliocentric

__all__ = [
    "ConversionMode",
    "ConversionResult",
    "barycentric_to_heliocentric",
    "convert",
    "heliocentric_to_barycentric",
    "heliocentric_to_keplerian",
    "keplerian_to_heliocentric",
]

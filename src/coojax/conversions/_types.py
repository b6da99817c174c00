"""Type definitions for population conversions.

- :class:`ConversionMode`: which elementary conversion to apply.
- :class:`ConversionResult`: outcome of a whole-population conversion.
"""

from __future__ import annotations

import enum
from typing import NamedTuple


class ConversionMode(str, enum.Enum):
    """Elementary conversions between body representations.

    The string values are short ``<source>2<target>`` names and can be
    passed to :func:`~coojax.conversions.convert` directly.
    """

    NONE = "none"
    BARYCENTRIC_TO_HELIOCENTRIC = "bco2hco"
    HELIOCENTRIC_TO_BARYCENTRIC = "hco2bco"
    HELIOCENTRIC_TO_KEPLERIAN = "hco2hel"
    KEPLERIAN_TO_HELIOCENTRIC = "hel2hco"


class ConversionResult(NamedTuple):
    """Outcome of converting a population.

    Every body is processed; bodies that fail physical-domain validation are
    listed in ``failed`` and keep the values the kernel produced for them.
    A whole-call failure (for instance a population without positive total
    mass) has ``success=False`` and an empty ``failed`` tuple, and leaves
    every body untouched.

    Attributes:
        success: ``True`` if every body converted.
        failed: Sorted indices of the bodies that failed validation.
    """

    success: bool
    failed: tuple[int, ...] = ()

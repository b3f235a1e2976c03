# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_illuminant.py — Chromaticities, observers and illuminants.

Reference whites are tabulated XYZ triples normalised to Y = 1 (ASTM E308 /
CIE 15:2004), one per standard observer. Spectral integration against the
colour-matching functions is out of scope; custom illuminants are built from
a chromaticity or an explicit white.
"""

import enum
import numpy as np
from dataclasses import dataclass
from typing import Final, Tuple, Optional

from tincture_matrix import ArrayFloat

__all__ = [
    "Triple",
    "Chromaticity",
    "Uv",
    "Upvp",
    "Observer",
    "Illuminant",
    "ILLUMINANT_A",
    "ILLUMINANT_C",
    "ILLUMINANT_D50",
    "ILLUMINANT_D55",
    "ILLUMINANT_D65",
    "ILLUMINANT_D75",
    "ILLUMINANT_E",
    "ILLUMINANT_F2",
    "ILLUMINANT_F7",
    "ILLUMINANT_F11",
    "ILLUMINANTS",
    "illuminant_by_name",
]

Triple = Tuple[float, float, float]


# =============================================================================
# 1. CHROMATICITY
# =============================================================================

@dataclass(frozen=True, slots=True)
class Chromaticity:
    """
    CIE 1931 (x, y) chromaticity coordinates.

    Attributes:
        x: Fraction of X in X + Y + Z.
        y: Fraction of Y in X + Y + Z.
    """
    x: float
    y: float

    @property
    def z(self) -> float:
        return 1.0 - self.x - self.y

    def to_xyz(self, luminance: float = 1.0) -> ArrayFloat:
        """
        Lifts the chromaticity to a tristimulus value of the given luminance.

        A chromaticity with y = 0 carries no luminance information and maps
        to black (0, 0, 0).
        """
        if self.y == 0.0:
            return np.zeros(3, dtype=np.float64)
        scale = luminance / self.y
        return np.array([self.x * scale, luminance, self.z * scale], dtype=np.float64)

    @classmethod
    def from_xyz(cls, xyz: ArrayFloat) -> "Chromaticity":
        """Projects XYZ onto the chromaticity plane; (0, 0) for a zero sum."""
        x, y, z = (float(c) for c in xyz)
        total = x + y + z
        if total == 0.0:
            return cls(0.0, 0.0)
        return cls(x / total, y / total)

    def to_uv(self) -> "Uv":
        """CIE 1960 UCS coordinates; (0, 0) where the projection is undefined."""
        denom = -2.0 * self.x + 12.0 * self.y + 3.0
        if denom == 0.0:
            return Uv(0.0, 0.0)
        return Uv(4.0 * self.x / denom, 6.0 * self.y / denom)

    def to_upvp(self) -> "Upvp":
        """CIE 1976 UCS (u', v') coordinates."""
        denom = -2.0 * self.x + 12.0 * self.y + 3.0
        if denom == 0.0:
            return Upvp(0.0, 0.0)
        return Upvp(4.0 * self.x / denom, 9.0 * self.y / denom)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Uv:
    """CIE 1960 UCS chromaticity (u, v), the space Planckian-locus searches work in."""
    u: float
    v: float

    def to_xy(self) -> Chromaticity:
        denom = 2.0 * self.u - 8.0 * self.v + 4.0
        if denom == 0.0:
            return Chromaticity(0.0, 0.0)
        return Chromaticity(3.0 * self.u / denom, 2.0 * self.v / denom)

    def to_upvp(self) -> "Upvp":
        return Upvp(self.u, self.v * 1.5)

    def to_xyz(self, luminance: float = 1.0) -> ArrayFloat:
        return self.to_xy().to_xyz(luminance)


@dataclass(frozen=True, slots=True)
class Upvp:
    """CIE 1976 UCS chromaticity (u', v'), the chromaticity plane of CIELUV."""
    u: float
    v: float

    def to_xy(self) -> Chromaticity:
        denom = 6.0 * self.u - 16.0 * self.v + 12.0
        if denom == 0.0:
            return Chromaticity(0.0, 0.0)
        return Chromaticity(9.0 * self.u / denom, 4.0 * self.v / denom)

    def to_uv(self) -> Uv:
        return Uv(self.u, self.v * (2.0 / 3.0))

    def to_xyz(self, luminance: float = 1.0) -> ArrayFloat:
        return self.to_xy().to_xyz(luminance)


# =============================================================================
# 2. OBSERVERS
# =============================================================================

class Observer(enum.Enum):
    """Standard colorimetric observers."""
    CIE1931_2 = "CIE 1931 2°"
    CIE1964_10 = "CIE 1964 10°"


# =============================================================================
# 3. ILLUMINANTS
# =============================================================================

@dataclass(frozen=True, slots=True)
class Illuminant:
    """
    Named light source with a reference white per standard observer.

    Attributes:
        name: Display name ("D65", "A", ...).
        white_2: XYZ white for the CIE 1931 2° observer, Y = 1.
        white_10: XYZ white for the CIE 1964 10° observer, Y = 1.
    """
    name: str
    white_2: Triple
    white_10: Triple

    def white(self, observer: Observer = Observer.CIE1931_2) -> ArrayFloat:
        """Reference white for ``observer`` as a (3,) array."""
        return np.array(self.white_tuple(observer), dtype=np.float64)

    def white_tuple(self, observer: Observer = Observer.CIE1931_2) -> Triple:
        if observer is Observer.CIE1964_10:
            return self.white_10
        return self.white_2

    def chromaticity(self, observer: Observer = Observer.CIE1931_2) -> Chromaticity:
        return Chromaticity.from_xyz(self.white(observer))

    @classmethod
    def custom(cls, name: str, white: Triple, white_10: Optional[Triple] = None) -> "Illuminant":
        """
        Builds an illuminant from an explicit XYZ white.

        The 10° white defaults to the 2° one when not given.
        """
        w2 = tuple(float(c) for c in white)
        if len(w2) != 3:
            raise ValueError(f"White must have 3 components, got {len(w2)}")
        w10 = w2 if white_10 is None else tuple(float(c) for c in white_10)
        return cls(name, w2, w10)  # type: ignore[arg-type]

    @classmethod
    def from_chromaticity(cls, name: str, xy: Chromaticity | Tuple[float, float]) -> "Illuminant":
        """Builds an illuminant from an (x, y) chromaticity normalised to Y = 1."""
        if not isinstance(xy, Chromaticity):
            xy = Chromaticity(float(xy[0]), float(xy[1]))
        if xy.y <= 0.0:
            raise ValueError(f"Illuminant chromaticity needs y > 0, got {xy.y}")
        white = tuple(float(c) for c in xy.to_xyz(1.0))
        return cls(name, white, white)  # type: ignore[arg-type]


# Values: ASTM E308-01 / CIE 15:2004 tables, Y normalised to 1.
ILLUMINANT_A: Final = Illuminant("A", (1.09850, 1.0, 0.35585), (1.11144, 1.0, 0.35200))
ILLUMINANT_C: Final = Illuminant("C", (0.98074, 1.0, 1.18232), (0.97285, 1.0, 1.16145))
ILLUMINANT_D50: Final = Illuminant("D50", (0.96422, 1.0, 0.82521), (0.96720, 1.0, 0.81427))
ILLUMINANT_D55: Final = Illuminant("D55", (0.95682, 1.0, 0.92149), (0.95799, 1.0, 0.90926))
ILLUMINANT_D65: Final = Illuminant("D65", (0.95047, 1.0, 1.08883), (0.94811, 1.0, 1.07304))
ILLUMINANT_D75: Final = Illuminant("D75", (0.94972, 1.0, 1.22638), (0.94416, 1.0, 1.20641))
ILLUMINANT_E: Final = Illuminant("E", (1.0, 1.0, 1.0), (1.0, 1.0, 1.0))
ILLUMINANT_F2: Final = Illuminant("F2", (0.99187, 1.0, 0.67395), (1.03280, 1.0, 0.69026))
ILLUMINANT_F7: Final = Illuminant("F7", (0.95044, 1.0, 1.08755), (0.95792, 1.0, 1.07687))
ILLUMINANT_F11: Final = Illuminant("F11", (1.00966, 1.0, 0.64370), (1.03866, 1.0, 0.65627))

ILLUMINANTS: Final[dict[str, Illuminant]] = {
    ill.name: ill for ill in (
        ILLUMINANT_A, ILLUMINANT_C, ILLUMINANT_D50, ILLUMINANT_D55, ILLUMINANT_D65,
        ILLUMINANT_D75, ILLUMINANT_E, ILLUMINANT_F2, ILLUMINANT_F7, ILLUMINANT_F11,
    )
}

def illuminant_by_name(name: str) -> Illuminant:
    """
    Looks up a standard illuminant, case-insensitively.

    Raises:
        KeyError: If the name is not in the catalog.
    """
    key = name.strip().upper()
    if key not in ILLUMINANTS:
        raise KeyError(f"Unknown illuminant '{name}'. Available: {', '.join(ILLUMINANTS)}")
    return ILLUMINANTS[key]

# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cylindrical.py — HSL, HSV, HWB and HSI re-parameterisations of RGB.

These are purely geometric reshapings of the encoded RGB cube, so they live
in the same RGB space as the Rgb they come from and convert to it directly.
Hue is in degrees [0, 360); the other components are 0..1.
"""

import math
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from tincture_adaptation import ViewingContext
from tincture_rgbspec import RgbSpace, SpaceLike, resolve_space

from .base import FixedContextModel, normalize_hue, register_direct
from .cie import Xyz
from .rgb import Rgb

__all__ = ["Hsl", "Hsv", "Hsb", "Hwb", "Hsi"]

HUE_SECTOR = 60.0


def _hue_and_extrema(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Returns (hue°, max, min) of an RGB triple; hue is 0 for grays."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    if delta == 0.0:
        return 0.0, cmax, cmin
    if cmax == r:
        h = HUE_SECTOR * (((g - b) / delta) % 6.0)
    elif cmax == g:
        h = HUE_SECTOR * ((b - r) / delta + 2.0)
    else:
        h = HUE_SECTOR * ((r - g) / delta + 4.0)
    return normalize_hue(h), cmax, cmin

def _sector(h: float, c: float, x: float) -> Tuple[float, float, float]:
    """Chroma placement for the hexcone sector containing ``h``."""
    h = h % 360.0
    if h < 60.0:
        return c, x, 0.0
    if h < 120.0:
        return x, c, 0.0
    if h < 180.0:
        return 0.0, c, x
    if h < 240.0:
        return 0.0, x, c
    if h < 300.0:
        return x, 0.0, c
    return c, 0.0, x


class _RgbFamily(FixedContextModel):
    """Shared plumbing of models that reshape an encoded RGB space."""
    __slots__ = ()

    space: SpaceLike

    @property
    def context(self) -> ViewingContext:
        return resolve_space(self.space).context

    def _conversion_kwargs(self) -> Dict[str, Any]:
        return {"space": self.space}

    @abstractmethod
    def to_rgb(self) -> Rgb:
        """The color as an Rgb in its own space."""

    def to_xyz(self) -> Xyz:
        return self.to_rgb().to_xyz()


# =============================================================================
# HSL
# =============================================================================

@dataclass(frozen=True, slots=True)
class Hsl(_RgbFamily):
    """Hue, saturation, lightness."""
    h: float
    s: float
    l: float
    space: SpaceLike = RgbSpace.SRGB
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    HUE_INDEX: ClassVar[Optional[int]] = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> "Hsl":
        h, cmax, cmin = _hue_and_extrema(rgb.r, rgb.g, rgb.b)
        delta = cmax - cmin
        l = (cmax + cmin) / 2.0
        denom = 1.0 - abs(2.0 * l - 1.0)
        s = 0.0 if delta == 0.0 or denom == 0.0 else delta / denom
        return cls(h, s, l, space=rgb.space, alpha=rgb.alpha)

    def to_rgb(self) -> Rgb:
        c = (1.0 - abs(2.0 * self.l - 1.0)) * self.s
        x = c * (1.0 - abs(((self.h / HUE_SECTOR) % 2.0) - 1.0))
        m = self.l - c / 2.0
        r, g, b = _sector(self.h, c, x)
        return Rgb(r + m, g + m, b + m, space=self.space, alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: Xyz, space: SpaceLike = RgbSpace.SRGB, **kwargs: Any) -> "Hsl":
        return cls.from_rgb(Rgb.from_xyz(xyz, space=space))


# =============================================================================
# HSV / HSB
# =============================================================================

@dataclass(frozen=True, slots=True)
class Hsv(_RgbFamily):
    """Hue, saturation, value (a.k.a. HSB)."""
    h: float
    s: float
    v: float
    space: SpaceLike = RgbSpace.SRGB
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("h", "s", "v")
    HUE_INDEX: ClassVar[Optional[int]] = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> "Hsv":
        h, cmax, cmin = _hue_and_extrema(rgb.r, rgb.g, rgb.b)
        delta = cmax - cmin
        s = 0.0 if delta == 0.0 or cmax == 0.0 else delta / cmax
        return cls(h, s, cmax, space=rgb.space, alpha=rgb.alpha)

    def to_rgb(self) -> Rgb:
        c = self.v * self.s
        x = c * (1.0 - abs(((self.h / HUE_SECTOR) % 2.0) - 1.0))
        m = self.v - c
        r, g, b = _sector(self.h, c, x)
        return Rgb(r + m, g + m, b + m, space=self.space, alpha=self.alpha)

    def to_hwb(self) -> "Hwb":
        return Hwb(self.h, (1.0 - self.s) * self.v, 1.0 - self.v, space=self.space, alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: Xyz, space: SpaceLike = RgbSpace.SRGB, **kwargs: Any) -> "Hsv":
        return cls.from_rgb(Rgb.from_xyz(xyz, space=space))


Hsb = Hsv


# =============================================================================
# HWB
# =============================================================================

@dataclass(frozen=True, slots=True)
class Hwb(_RgbFamily):
    """
    Hue, whiteness, blackness.

    When whiteness + blackness >= 1 the color is the gray w / (w + b).
    """
    h: float
    w: float
    b: float
    space: SpaceLike = RgbSpace.SRGB
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("h", "w", "b")
    HUE_INDEX: ClassVar[Optional[int]] = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> "Hwb":
        h, cmax, cmin = _hue_and_extrema(rgb.r, rgb.g, rgb.b)
        return cls(h, cmin, 1.0 - cmax, space=rgb.space, alpha=rgb.alpha)

    def to_hsv(self) -> Hsv:
        total = self.w + self.b
        if total >= 1.0:
            return Hsv(self.h, 0.0, self.w / total, space=self.space, alpha=self.alpha)
        v = 1.0 - self.b
        s = 0.0 if v == 0.0 else 1.0 - self.w / v
        return Hsv(self.h, s, v, space=self.space, alpha=self.alpha)

    def to_rgb(self) -> Rgb:
        return self.to_hsv().to_rgb()

    @classmethod
    def from_xyz(cls, xyz: Xyz, space: SpaceLike = RgbSpace.SRGB, **kwargs: Any) -> "Hwb":
        return cls.from_rgb(Rgb.from_xyz(xyz, space=space))


# =============================================================================
# HSI
# =============================================================================

@dataclass(frozen=True, slots=True)
class Hsi(_RgbFamily):
    """
    Hue, saturation, intensity (Gonzalez & Woods).

    Intensity is the channel mean and saturation 1 - min / intensity, so the
    model is a cone over the RGB cube's gray axis rather than a hexcone.
    """
    h: float
    s: float
    i: float
    space: SpaceLike = RgbSpace.SRGB
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("h", "s", "i")
    HUE_INDEX: ClassVar[Optional[int]] = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> "Hsi":
        r, g, b = rgb.r, rgb.g, rgb.b
        i = (r + g + b) / 3.0
        if i <= 0.0:
            return cls(0.0, 0.0, 0.0, space=rgb.space, alpha=rgb.alpha)
        s = 1.0 - min(r, g, b) / i
        den = math.sqrt((r - g) ** 2 + (r - b) * (g - b))
        if den == 0.0:
            return cls(0.0, s, i, space=rgb.space, alpha=rgb.alpha)
        cos_theta = max(-1.0, min(1.0, 0.5 * ((r - g) + (r - b)) / den))
        theta = math.degrees(math.acos(cos_theta))
        h = 360.0 - theta if b > g else theta
        return cls(h, s, i, space=rgb.space, alpha=rgb.alpha)

    def to_rgb(self) -> Rgb:
        i, s = self.i, self.s
        if s <= 0.0 or i <= 0.0:
            level = max(i, 0.0)
            return Rgb(level, level, level, space=self.space, alpha=self.alpha)

        def lead(offset: float) -> float:
            h = math.radians(self.h - offset)
            return i * (1.0 + s * math.cos(h) / math.cos(math.pi / 3.0 - h))

        low = i * (1.0 - s)
        if self.h < 120.0:
            r = lead(0.0)
            g, b = 3.0 * i - r - low, low
        elif self.h < 240.0:
            g = lead(120.0)
            r, b = low, 3.0 * i - low - g
        else:
            b = lead(240.0)
            r, g = 3.0 * i - low - b, low
        return Rgb(r, g, b, space=self.space, alpha=self.alpha)

    @classmethod
    def from_xyz(cls, xyz: Xyz, space: SpaceLike = RgbSpace.SRGB, **kwargs: Any) -> "Hsi":
        return cls.from_rgb(Rgb.from_xyz(xyz, space=space))


# --- Direct converters (same RGB space only) ---

def _same_space(color: Any, space: Optional[SpaceLike]) -> bool:
    return space is None or space == color.space

def _register_rgb_family(model: Any) -> None:
    @register_direct(Rgb, model)
    def _from_rgb(color: Rgb, space: Optional[SpaceLike] = None, **kwargs: Any) -> Any:
        return model.from_rgb(color) if _same_space(color, space) else None

    @register_direct(model, Rgb)
    def _to_rgb(color: Any, space: Optional[SpaceLike] = None, **kwargs: Any) -> Optional[Rgb]:
        return color.to_rgb() if _same_space(color, space) else None

for _model in (Hsl, Hsv, Hwb, Hsi):
    _register_rgb_family(_model)

@register_direct(Hsv, Hwb)
def _hsv_to_hwb(color: Hsv, space: Optional[SpaceLike] = None, **kwargs: Any) -> Optional[Hwb]:
    return color.to_hwb() if _same_space(color, space) else None

@register_direct(Hwb, Hsv)
def _hwb_to_hsv(color: Hwb, space: Optional[SpaceLike] = None, **kwargs: Any) -> Optional[Hsv]:
    return color.to_hsv() if _same_space(color, space) else None

# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: subtractive.py — Naive (profile-free) CMYK.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Tuple

from tincture_rgbspec import RgbSpace, SpaceLike

from .base import register_direct
from .cie import Xyz
from .cylindrical import _RgbFamily, _same_space
from .rgb import Rgb

__all__ = ["Cmyk"]


def _clamp01(v: float) -> float:
    return min(max(v, 0.0), 1.0)


@dataclass(frozen=True, slots=True)
class Cmyk(_RgbFamily):
    """
    Cyan, magenta, yellow, key as the complement of an encoded RGB space.

    No ink model or ICC profile is involved; this is the device-independent
    textbook mapping, with maximal gray-component replacement.
    """
    c: float
    m: float
    y: float
    k: float
    space: SpaceLike = RgbSpace.SRGB
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("c", "m", "y", "k")

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> "Cmyk":
        r, g, b = (_clamp01(v) for v in rgb.components)
        k = 1.0 - max(r, g, b)
        if k >= 1.0:
            return cls(0.0, 0.0, 0.0, 1.0, space=rgb.space, alpha=rgb.alpha)
        denom = 1.0 - k
        return cls((1.0 - r - k) / denom, (1.0 - g - k) / denom, (1.0 - b - k) / denom, k,
                   space=rgb.space, alpha=rgb.alpha)

    def to_rgb(self) -> Rgb:
        key = 1.0 - _clamp01(self.k)
        return Rgb(
            (1.0 - _clamp01(self.c)) * key,
            (1.0 - _clamp01(self.m)) * key,
            (1.0 - _clamp01(self.y)) * key,
            space=self.space,
            alpha=self.alpha,
        )

    @classmethod
    def from_xyz(cls, xyz: Xyz, space: SpaceLike = RgbSpace.SRGB, **kwargs: Any) -> "Cmyk":
        return cls.from_rgb(Rgb.from_xyz(xyz, space=space))


@register_direct(Rgb, Cmyk)
def _rgb_to_cmyk(color: Rgb, space: Optional[SpaceLike] = None, **kwargs: Any) -> Optional[Cmyk]:
    return Cmyk.from_rgb(color) if _same_space(color, space) else None

@register_direct(Cmyk, Rgb)
def _cmyk_to_rgb(color: Cmyk, space: Optional[SpaceLike] = None, **kwargs: Any) -> Optional[Rgb]:
    return color.to_rgb() if _same_space(color, space) else None

# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: hpluv.py — HPLuv, a pastel HSL over CIE LCh(uv).

Saturation 100 is the radius of the largest circle, centred on the neutral
axis of the u*v* plane, that stays inside the sRGB gamut at a given
lightness. Every hue at every saturation is therefore displayable, at the
cost of never reaching the most saturated sRGB colors.
"""

import math
from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional, Tuple

from tincture_adaptation import D65_CONTEXT, ViewingContext
from tincture_colorengine import LAB_EPSILON, LAB_KAPPA
from tincture_rgbspec import RgbSpace

from .base import FixedContextModel, normalize_hue
from .cie import Lchuv, Xyz

__all__ = ["HPLUV_CONTEXT", "Hpluv", "max_safe_chroma_for_l"]

HPLUV_CONTEXT = D65_CONTEXT

_L_WHITE = 99.9999999
_L_BLACK = 1e-8


def _gamut_bounds(l: float) -> List[Tuple[float, float]]:
    """The six sRGB channel-limit lines in the u*v* plane at lightness ``l``, as (slope, intercept)."""
    sub1 = (l + 16.0) ** 3 / 1560896.0
    sub2 = sub1 if sub1 > LAB_EPSILON else l / LAB_KAPPA
    lines = []
    for m1, m2, m3 in RgbSpace.SRGB.inverse_xyz_matrix:
        for t in (0.0, 1.0):
            top1 = (284517.0 * m1 - 94839.0 * m3) * sub2
            top2 = (838422.0 * m3 + 769860.0 * m2 + 731718.0 * m1) * l * sub2 - 769860.0 * t * l
            bottom = (632260.0 * m3 - 126452.0 * m2) * sub2 + 126452.0 * t
            lines.append((top1 / bottom, top2 / bottom))
    return lines


def max_safe_chroma_for_l(l: float) -> float:
    """Largest LCh(uv) chroma that stays inside sRGB for every hue at lightness ``l``."""
    return min(
        abs(intercept) / math.sqrt(slope * slope + 1.0)
        for slope, intercept in _gamut_bounds(l)
    )


@dataclass(frozen=True, slots=True)
class Hpluv(FixedContextModel):
    """
    HPLuv coordinates, defined under D65.

    Attributes:
        h: Hue in degrees, shared with LCh(uv).
        s: Saturation, 0..100 of the hue-independent sRGB-safe chroma.
        l: CIE lightness L*, 0..100.
    """
    h: float
    s: float
    l: float
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    HUE_INDEX: ClassVar[Optional[int]] = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    @property
    def context(self) -> ViewingContext:
        return HPLUV_CONTEXT

    def to_lchuv(self) -> Lchuv:
        if self.l > _L_WHITE:
            return Lchuv(100.0, 0.0, self.h, alpha=self.alpha, context=HPLUV_CONTEXT)
        if self.l < _L_BLACK:
            return Lchuv(0.0, 0.0, self.h, alpha=self.alpha, context=HPLUV_CONTEXT)
        c = self.s / 100.0 * max_safe_chroma_for_l(self.l)
        return Lchuv(self.l, c, self.h, alpha=self.alpha, context=HPLUV_CONTEXT)

    @classmethod
    def from_lchuv(cls, lchuv: Lchuv) -> "Hpluv":
        """Reads D65 LCh(uv) coordinates; other whites must be adapted first."""
        if lchuv.l > _L_WHITE:
            return cls(lchuv.h, 0.0, 100.0, alpha=lchuv.alpha)
        if lchuv.l < _L_BLACK:
            return cls(lchuv.h, 0.0, 0.0, alpha=lchuv.alpha)
        s = lchuv.c / max_safe_chroma_for_l(lchuv.l) * 100.0
        return cls(lchuv.h, s, lchuv.l, alpha=lchuv.alpha)

    def to_xyz(self) -> Xyz:
        return self.to_lchuv().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: Xyz, **kwargs: Any) -> "Hpluv":
        return cls.from_lchuv(Lchuv.from_xyz(xyz, context=HPLUV_CONTEXT))

# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: perceptual.py — The Ok* family.

    Oklab   perceptually uniform opponent space (D65)
    Oklch   polar Oklab
    Okhsv   hue / saturation / value relative to the sRGB gamut boundary
    Okhsl   hue / saturation / lightness relative to the sRGB gamut boundary
    Okhwb   hue / whiteness / blackness, derived from Okhsv

All members are defined under D65 and adapt incoming XYZ into it. Members
convert among themselves through Oklab without touching XYZ, and to sRGB-
primaried RGB spaces through the analytic linear-sRGB matrices.
"""

import numpy as np
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Tuple, Type, TypeVar

import tincture_gamut as gamut
from tincture_adaptation import D65_CONTEXT, ViewingContext, adapt_xyz
from tincture_rgbspec import RgbSpace, SpaceLike, resolve_space

from .base import FixedContextModel, normalize_hue, register_direct
from .cie import Xyz
from .rgb import Rgb

__all__ = ["OKLAB_CONTEXT", "Oklab", "Oklch", "Okhsv", "Okhsl", "Okhwb"]

OKLAB_CONTEXT = D65_CONTEXT

_O = TypeVar("_O", bound="_OkFamily")


class _OkFamily(FixedContextModel):
    __slots__ = ()

    @property
    def context(self) -> ViewingContext:
        return OKLAB_CONTEXT

    @abstractmethod
    def to_oklab(self) -> "Oklab":
        """The color as Oklab coordinates."""

    @classmethod
    @abstractmethod
    def from_oklab(cls: Type[_O], oklab: "Oklab") -> _O:
        """Builds the color from Oklab coordinates."""

    def to_xyz(self) -> Xyz:
        return self.to_oklab().to_xyz()

    @classmethod
    def from_xyz(cls: Type[_O], xyz: Xyz, **kwargs: Any) -> _O:
        return cls.from_oklab(Oklab.from_xyz(xyz))


# =============================================================================
# OKLAB / OKLCH
# =============================================================================

@dataclass(frozen=True, slots=True)
class Oklab(_OkFamily):
    """
    Oklab coordinates.

    Attributes:
        l: Perceived lightness, 0..1.
        a: Green (-) to red (+).
        b: Blue (-) to yellow (+).
    """
    l: float
    a: float
    b: float
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("l", "a", "b")

    def to_oklab(self) -> "Oklab":
        return self

    @classmethod
    def from_oklab(cls, oklab: "Oklab") -> "Oklab":
        return oklab

    def to_xyz(self) -> Xyz:
        x, y, z = gamut.oklab_to_xyz(self.l, self.a, self.b)
        return Xyz(float(x), float(y), float(z), alpha=self.alpha, context=OKLAB_CONTEXT)

    @classmethod
    def from_xyz(cls, xyz: Xyz, **kwargs: Any) -> "Oklab":
        values = adapt_xyz(xyz.to_array(), xyz.context, OKLAB_CONTEXT)
        l, a, b = gamut.xyz_to_oklab(*values)
        return cls(float(l), float(a), float(b), alpha=xyz.alpha)

    @classmethod
    def from_linear_srgb(cls, r: float, g: float, b: float, alpha: float = 1.0) -> "Oklab":
        l, a, b_ = gamut.linear_srgb_to_oklab(r, g, b)
        return cls(float(l), float(a), float(b_), alpha=alpha)

    def to_linear_srgb(self) -> Tuple[float, float, float]:
        r, g, b = gamut.oklab_to_linear_srgb(float(self.l), float(self.a), float(self.b))
        return (float(r), float(g), float(b))

    @property
    def chroma(self) -> float:
        return float(np.hypot(self.a, self.b))

    def to_oklch(self) -> "Oklch":
        return Oklch.from_oklab(self)

    def to_okhsv(self) -> "Okhsv":
        return Okhsv.from_oklab(self)

    def to_okhsl(self) -> "Okhsl":
        return Okhsl.from_oklab(self)

    def to_okhwb(self) -> "Okhwb":
        return Okhwb.from_oklab(self)


@dataclass(frozen=True, slots=True)
class Oklch(_OkFamily):
    """Polar Oklab: lightness, chroma, hue in degrees."""
    l: float
    c: float
    h: float
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    HUE_INDEX: ClassVar[Optional[int]] = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    def to_oklab(self) -> Oklab:
        h_rad = np.radians(self.h)
        return Oklab(self.l, float(self.c * np.cos(h_rad)), float(self.c * np.sin(h_rad)),
                     alpha=self.alpha)

    @classmethod
    def from_oklab(cls, oklab: Oklab) -> "Oklch":
        h = float(np.degrees(np.arctan2(oklab.b, oklab.a)))
        return cls(oklab.l, oklab.chroma, h, alpha=oklab.alpha)


# =============================================================================
# CONE FORMS
# =============================================================================

@dataclass(frozen=True, slots=True)
class Okhsv(_OkFamily):
    """
    Hue (degrees), saturation and value, 0..1 each, relative to the sRGB
    gamut: s = 1 lies on the gamut boundary, v = 0 is black.
    """
    h: float
    s: float
    v: float
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("h", "s", "v")
    HUE_INDEX: ClassVar[Optional[int]] = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    def to_oklab(self) -> Oklab:
        l, a, b = gamut.okhsv_to_oklab(self.h, float(self.s), float(self.v))
        return Oklab(float(l), float(a), float(b), alpha=self.alpha)

    @classmethod
    def from_oklab(cls, oklab: Oklab) -> "Okhsv":
        h, s, v = gamut.oklab_to_okhsv(float(oklab.l), float(oklab.a), float(oklab.b))
        return cls(float(h), float(s), float(v), alpha=oklab.alpha)

    def to_okhwb(self) -> "Okhwb":
        h, w, b = gamut.okhsv_to_okhwb(self.h, float(self.s), float(self.v))
        return Okhwb(float(h), float(w), float(b), alpha=self.alpha)


@dataclass(frozen=True, slots=True)
class Okhsl(_OkFamily):
    """
    Hue (degrees), saturation and lightness, 0..1 each. Chroma below 1e-4
    reads as saturation 0.
    """
    h: float
    s: float
    l: float
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    HUE_INDEX: ClassVar[Optional[int]] = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    def to_oklab(self) -> Oklab:
        l, a, b = gamut.okhsl_to_oklab(self.h, float(self.s), float(self.l))
        return Oklab(float(l), float(a), float(b), alpha=self.alpha)

    @classmethod
    def from_oklab(cls, oklab: Oklab) -> "Okhsl":
        h, s, l = gamut.oklab_to_okhsl(float(oklab.l), float(oklab.a), float(oklab.b))
        return cls(float(h), float(s), float(l), alpha=oklab.alpha)


@dataclass(frozen=True, slots=True)
class Okhwb(_OkFamily):
    """Hue (degrees), whiteness and blackness derived from Okhsv."""
    h: float
    w: float
    b: float
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("h", "w", "b")
    HUE_INDEX: ClassVar[Optional[int]] = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    def to_okhsv(self) -> Okhsv:
        h, s, v = gamut.okhwb_to_okhsv(self.h, float(self.w), float(self.b))
        return Okhsv(float(h), float(s), float(v), alpha=self.alpha)

    def to_oklab(self) -> Oklab:
        return self.to_okhsv().to_oklab()

    @classmethod
    def from_oklab(cls, oklab: Oklab) -> "Okhwb":
        return Okhsv.from_oklab(oklab).to_okhwb()


# --- Direct converters ---

_FAMILY = (Oklab, Oklch, Okhsv, Okhsl, Okhwb)

def _is_srgb_gamut(space: SpaceLike) -> bool:
    """True for spaces sharing the sRGB primaries and D65 white."""
    spec = resolve_space(space)
    srgb = RgbSpace.SRGB.spec
    return spec.primaries == srgb.primaries and spec.context.white_tuple == srgb.context.white_tuple

def _register_family(source: Any, target: Any) -> None:
    @register_direct(source, target)
    def _via_oklab(color: Any, **kwargs: Any) -> Any:
        return target.from_oklab(color.to_oklab())

def _register_rgb(model: Any) -> None:
    @register_direct(model, Rgb)
    def _to_rgb(color: Any, space: SpaceLike = RgbSpace.SRGB, **kwargs: Any) -> Optional[Rgb]:
        if not _is_srgb_gamut(space):
            return None
        oklab = color.to_oklab()
        return Rgb.from_linear(*oklab.to_linear_srgb(), space=space, alpha=oklab.alpha)

    @register_direct(Rgb, model)
    def _from_rgb(color: Rgb, **kwargs: Any) -> Any:
        if not _is_srgb_gamut(color.space):
            return None
        return model.from_oklab(Oklab.from_linear_srgb(*color.to_linear(), alpha=color.alpha))

for _src in _FAMILY:
    _register_rgb(_src)
    for _dst in _FAMILY:
        if _src is not _dst:
            _register_family(_src, _dst)

@register_direct(Okhsv, Okhwb)
def _okhsv_to_okhwb(color: Okhsv, **kwargs: Any) -> Okhwb:
    return color.to_okhwb()

@register_direct(Okhwb, Okhsv)
def _okhwb_to_okhsv(color: Okhwb, **kwargs: Any) -> Okhsv:
    return color.to_okhsv()

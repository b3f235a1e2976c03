# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cie.py — Device-independent CIE models.

    Xyz     CIE 1931 tristimulus (the conversion pivot)
    Xyy     chromaticity + luminance
    Lab     CIE 1976 L*a*b*
    Lch     polar L*a*b*
    Luv     CIE 1976 L*u*v*
    Lchuv   polar L*u*v*

All of them carry a viewing context; the reference white of that context is
the white L*a*b* / L*u*v* are relative to. ``from_xyz`` keeps the incoming
context unless ``context=`` asks for adaptation.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Sequence, Tuple, Union

from tincture_adaptation import ViewingContext, adapt_xyz
from tincture_colorengine import ColorSpaceEngine
from tincture_config import get_default_context
from tincture_illuminant import Chromaticity
from tincture_matrix import ArrayFloat

from .base import ColorModel, normalize_hue, register_direct

__all__ = ["Xyz", "Xyy", "Lab", "Lch", "Luv", "Lchuv"]


def _row(*values: float) -> ArrayFloat:
    return np.array([values], dtype=np.float64)

def _floats(row: ArrayFloat) -> Tuple[float, float, float]:
    return (float(row[0]), float(row[1]), float(row[2]))


# =============================================================================
# XYZ
# =============================================================================

@dataclass(frozen=True, slots=True)
class Xyz(ColorModel):
    """
    CIE 1931 XYZ tristimulus values, relative (reference white Y = 1).

    Attributes:
        x, y, z: Tristimulus components.
        alpha: Opacity, 0..1.
        context: Viewing context the values are expressed in.
    """
    x: float
    y: float
    z: float
    alpha: float = 1.0
    context: ViewingContext = field(default_factory=get_default_context)

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    def to_xyz(self) -> "Xyz":
        return self

    @classmethod
    def from_xyz(cls, xyz: "Xyz", context: Optional[ViewingContext] = None, **kwargs: Any) -> "Xyz":
        if context is not None:
            return xyz.adapt_to(context)
        return xyz

    @classmethod
    def from_array(cls, values: Union[ArrayFloat, Sequence[float]], alpha: float = 1.0,
                   context: Optional[ViewingContext] = None) -> "Xyz":
        x, y, z = (float(v) for v in values)
        return cls(x, y, z, alpha, context if context is not None else get_default_context())

    @classmethod
    def reference_white(cls, context: Optional[ViewingContext] = None) -> "Xyz":
        """The white point of ``context`` (default context when omitted)."""
        ctx = context if context is not None else get_default_context()
        return cls(*ctx.white_tuple, context=ctx)

    def adapt_to(self, context: ViewingContext) -> "Xyz":
        """
        Chromatically adapts into ``context`` using its CAT. Identical
        reference whites only relabel the context.
        """
        values = adapt_xyz(self.to_array(), self.context, context)
        return Xyz(*_floats(values), alpha=self.alpha, context=context)

    def chromaticity(self) -> Chromaticity:
        return Chromaticity.from_xyz(self.to_array())

    @property
    def luminance(self) -> float:
        return self.y

    def scaled(self, luminance: float) -> "Xyz":
        """Same chromaticity at a different luminance Y; black stays black."""
        if self.y == 0.0:
            return self
        k = luminance / self.y
        return Xyz(self.x * k, luminance, self.z * k, self.alpha, self.context)


# =============================================================================
# xyY
# =============================================================================

@dataclass(frozen=True, slots=True)
class Xyy(ColorModel):
    """
    Chromaticity (x, y) plus luminance Y.

    Black (X + Y + Z = 0) takes the chromaticity of the reference white.
    """
    x: float
    y: float
    Y: float
    alpha: float = 1.0
    context: ViewingContext = field(default_factory=get_default_context)

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("x", "y", "Y")

    def to_xyz(self) -> Xyz:
        xyz = ColorSpaceEngine._xyY_to_xyz_raw(_row(self.x, self.y, self.Y))[0]
        return Xyz(*_floats(xyz), alpha=self.alpha, context=self.context)

    @classmethod
    def from_xyz(cls, xyz: Xyz, context: Optional[ViewingContext] = None, **kwargs: Any) -> "Xyy":
        if context is not None:
            xyz = xyz.adapt_to(context)
        xyY = ColorSpaceEngine._xyz_to_xyY_raw(_row(*xyz.components), xyz.context.reference_white)[0]
        return cls(*_floats(xyY), alpha=xyz.alpha, context=xyz.context)

    @property
    def luminance(self) -> float:
        return self.Y

    def chromaticity(self) -> Chromaticity:
        return Chromaticity(self.x, self.y)


# =============================================================================
# L*a*b* / LCh(ab)
# =============================================================================

@dataclass(frozen=True, slots=True)
class Lab(ColorModel):
    """
    CIE 1976 L*a*b*.

    Attributes:
        l: Lightness, 0..100.
        a: Green (-) to red (+).
        b: Blue (-) to yellow (+).
    """
    l: float
    a: float
    b: float
    alpha: float = 1.0
    context: ViewingContext = field(default_factory=get_default_context)

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("l", "a", "b")

    def to_xyz(self) -> Xyz:
        xyz = ColorSpaceEngine._lab_to_xyz_raw(_row(self.l, self.a, self.b),
                                               self.context.reference_white)[0]
        return Xyz(*_floats(xyz), alpha=self.alpha, context=self.context)

    @classmethod
    def from_xyz(cls, xyz: Xyz, context: Optional[ViewingContext] = None, **kwargs: Any) -> "Lab":
        if context is not None:
            xyz = xyz.adapt_to(context)
        lab = ColorSpaceEngine._xyz_to_lab_raw(_row(*xyz.components), xyz.context.reference_white)[0]
        return cls(*_floats(lab), alpha=xyz.alpha, context=xyz.context)

    def to_lch(self) -> "Lch":
        lch = ColorSpaceEngine._to_polar_raw(_row(self.l, self.a, self.b))[0]
        return Lch(*_floats(lch), alpha=self.alpha, context=self.context)


@dataclass(frozen=True, slots=True)
class Lch(ColorModel):
    """Polar L*a*b*: lightness, chroma and hue angle in degrees."""
    l: float
    c: float
    h: float
    alpha: float = 1.0
    context: ViewingContext = field(default_factory=get_default_context)

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    HUE_INDEX: ClassVar[Optional[int]] = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    def to_lab(self) -> Lab:
        lab = ColorSpaceEngine._to_rect_raw(_row(self.l, self.c, self.h))[0]
        return Lab(*_floats(lab), alpha=self.alpha, context=self.context)

    def to_xyz(self) -> Xyz:
        return self.to_lab().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: Xyz, context: Optional[ViewingContext] = None, **kwargs: Any) -> "Lch":
        return Lab.from_xyz(xyz, context=context).to_lch()


# =============================================================================
# L*u*v* / LCh(uv)
# =============================================================================

@dataclass(frozen=True, slots=True)
class Luv(ColorModel):
    """CIE 1976 L*u*v*."""
    l: float
    u: float
    v: float
    alpha: float = 1.0
    context: ViewingContext = field(default_factory=get_default_context)

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("l", "u", "v")

    def to_xyz(self) -> Xyz:
        xyz = ColorSpaceEngine._luv_to_xyz_raw(_row(self.l, self.u, self.v),
                                               self.context.reference_white)[0]
        return Xyz(*_floats(xyz), alpha=self.alpha, context=self.context)

    @classmethod
    def from_xyz(cls, xyz: Xyz, context: Optional[ViewingContext] = None, **kwargs: Any) -> "Luv":
        if context is not None:
            xyz = xyz.adapt_to(context)
        luv = ColorSpaceEngine._xyz_to_luv_raw(_row(*xyz.components), xyz.context.reference_white)[0]
        return cls(*_floats(luv), alpha=xyz.alpha, context=xyz.context)

    def to_lchuv(self) -> "Lchuv":
        lch = ColorSpaceEngine._to_polar_raw(_row(self.l, self.u, self.v))[0]
        return Lchuv(*_floats(lch), alpha=self.alpha, context=self.context)


@dataclass(frozen=True, slots=True)
class Lchuv(ColorModel):
    """Polar L*u*v*: lightness, chroma and hue angle in degrees."""
    l: float
    c: float
    h: float
    alpha: float = 1.0
    context: ViewingContext = field(default_factory=get_default_context)

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("l", "c", "h")
    HUE_INDEX: ClassVar[Optional[int]] = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "h", normalize_hue(self.h))

    def to_luv(self) -> Luv:
        luv = ColorSpaceEngine._to_rect_raw(_row(self.l, self.c, self.h))[0]
        return Luv(*_floats(luv), alpha=self.alpha, context=self.context)

    def to_xyz(self) -> Xyz:
        return self.to_luv().to_xyz()

    @classmethod
    def from_xyz(cls, xyz: Xyz, context: Optional[ViewingContext] = None, **kwargs: Any) -> "Lchuv":
        return Luv.from_xyz(xyz, context=context).to_lchuv()


# --- Direct converters ---

def _relabelled(color: ColorModel, context: Optional[ViewingContext]) -> bool:
    return context is not None and context != color.context

@register_direct(Lab, Lch)
def _lab_to_lch(color: Lab, context: Optional[ViewingContext] = None, **kwargs: Any) -> Optional[Lch]:
    return None if _relabelled(color, context) else color.to_lch()

@register_direct(Lch, Lab)
def _lch_to_lab(color: Lch, context: Optional[ViewingContext] = None, **kwargs: Any) -> Optional[Lab]:
    return None if _relabelled(color, context) else color.to_lab()

@register_direct(Luv, Lchuv)
def _luv_to_lchuv(color: Luv, context: Optional[ViewingContext] = None, **kwargs: Any) -> Optional[Lchuv]:
    return None if _relabelled(color, context) else color.to_lchuv()

@register_direct(Lchuv, Luv)
def _lchuv_to_luv(color: Lchuv, context: Optional[ViewingContext] = None, **kwargs: Any) -> Optional[Luv]:
    return None if _relabelled(color, context) else color.to_luv()

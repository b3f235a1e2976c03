# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: rgb.py — Encoded RGB in a named or custom RGB space.

Components are normalised encoded values (nominally 0..1, out-of-gamut values
are kept). The viewing context is the space's own; ``from_xyz`` adapts the
incoming XYZ into it before applying the inverse matrix and transfer curve.
"""

import string
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Tuple

from tincture_adaptation import ViewingContext, adapt_xyz
from tincture_errors import InvalidHexCharacterError, InvalidHexLengthError
from tincture_rgbspec import RgbSpace, RgbSpec, SpaceLike, resolve_space

from .base import FixedContextModel
from .cie import Xyz

__all__ = ["Rgb", "parse_hex", "format_hex"]

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex(text: str) -> Tuple[int, int, int]:
    """
    Parses "#RGB", "RGB", "#RRGGBB" or "RRGGBB" into 8-bit channels.

    Raises:
        InvalidHexLengthError: If the digits are neither 3 nor 6 long.
        InvalidHexCharacterError: If a non-hexadecimal character is present.
    """
    digits = text[1:] if text.startswith("#") else text
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    elif len(digits) != 6:
        raise InvalidHexLengthError(text, len(digits))
    if not all(ch in _HEX_DIGITS for ch in digits):
        raise InvalidHexCharacterError(text)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

def format_hex(r: int, g: int, b: int) -> str:
    """Formats 8-bit channels as "#RRGGBB"."""
    return f"#{r:02X}{g:02X}{b:02X}"

def _to_8bit(value: float) -> int:
    return int(round(min(max(value, 0.0), 1.0) * 255.0))


@dataclass(frozen=True, slots=True)
class Rgb(FixedContextModel):
    """
    Encoded RGB color.

    Attributes:
        r, g, b: Encoded channel values, nominally 0..1.
        space: ``RgbSpace`` member or custom ``RgbSpec``.
        alpha: Opacity, 0..1.
    """
    r: float
    g: float
    b: float
    space: SpaceLike = RgbSpace.SRGB
    alpha: float = 1.0

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("r", "g", "b")

    @property
    def spec(self) -> RgbSpec:
        return resolve_space(self.space)

    @property
    def context(self) -> ViewingContext:
        return self.spec.context

    def _conversion_kwargs(self) -> Dict[str, Any]:
        return {"space": self.space}

    # --- Pivot ---

    def to_xyz(self) -> Xyz:
        spec = self.spec
        x, y, z = spec.linear_to_xyz(spec.decode(self.to_array()))
        return Xyz(float(x), float(y), float(z), alpha=self.alpha, context=spec.context)

    @classmethod
    def from_xyz(cls, xyz: Xyz, space: SpaceLike = RgbSpace.SRGB, **kwargs: Any) -> "Rgb":
        spec = resolve_space(space)
        values = adapt_xyz(xyz.to_array(), xyz.context, spec.context)
        r, g, b = spec.encode(spec.xyz_to_linear(values))
        return cls(float(r), float(g), float(b), space=space, alpha=xyz.alpha)

    # --- Linear light ---

    def to_linear(self) -> Tuple[float, float, float]:
        r, g, b = self.spec.decode(self.to_array())
        return (float(r), float(g), float(b))

    @classmethod
    def from_linear(cls, r: float, g: float, b: float, space: SpaceLike = RgbSpace.SRGB,
                    alpha: float = 1.0) -> "Rgb":
        er, eg, eb = resolve_space(space).encode((r, g, b))
        return cls(float(er), float(eg), float(eb), space=space, alpha=alpha)

    def to_space(self, space: SpaceLike) -> "Rgb":
        """Same color expressed in another RGB space (adapting whites if needed)."""
        return self.convert(Rgb, space=space)

    # --- 8-bit and hex ---

    @classmethod
    def from_8bit(cls, red: int, green: int, blue: int, space: SpaceLike = RgbSpace.SRGB,
                  alpha: float = 1.0) -> "Rgb":
        return cls(red / 255.0, green / 255.0, blue / 255.0, space=space, alpha=alpha)

    @classmethod
    def from_hex(cls, text: str, space: SpaceLike = RgbSpace.SRGB) -> "Rgb":
        """Parses "#F84" / "FF8040" style codes. See ``parse_hex``."""
        return cls.from_8bit(*parse_hex(text), space=space)

    @property
    def red(self) -> int:
        return _to_8bit(self.r)

    @property
    def green(self) -> int:
        return _to_8bit(self.g)

    @property
    def blue(self) -> int:
        return _to_8bit(self.b)

    def to_8bit(self) -> Tuple[int, int, int]:
        """Channels clamped to 0..1 and quantised to 0..255."""
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return format_hex(*self.to_8bit())

    # --- Gamut ---

    def in_gamut(self, tolerance: float = 1e-9) -> bool:
        return all(-tolerance <= c <= 1.0 + tolerance for c in self.components)

    def clipped(self) -> "Rgb":
        """Channels clamped to [0, 1]."""
        r, g, b = (min(max(c, 0.0), 1.0) for c in self.components)
        return Rgb(r, g, b, space=self.space, alpha=self.alpha)
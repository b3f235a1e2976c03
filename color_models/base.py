# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: base.py — Base class for color models.

Every model is an immutable, slotted dataclass that converts to and from the
CIE XYZ pivot. ``convert`` prefers a registered direct converter (Lab -> Lch,
Rgb -> Hsl, Oklab -> Okhsv, ...) and otherwise routes through XYZ, carrying
alpha and viewing context across the hop.

Subclasses provide:
    COMPONENTS   names of the color components, in order
    HUE_INDEX    position of a hue component (degrees) or None
    to_xyz()     conversion to the pivot
    from_xyz()   classmethod conversion from the pivot
"""

import dataclasses
import numpy as np
from abc import ABC, abstractmethod
from typing import (
    Any, Callable, ClassVar, Dict, List, Optional, Tuple, Type, TypeVar, TYPE_CHECKING,
)

from tincture_adaptation import ViewingContext
from tincture_illuminant import Chromaticity
from tincture_matrix import ArrayFloat

if TYPE_CHECKING:
    from .cie import Xyz

__all__ = [
    "ColorModel",
    "FixedContextModel",
    "register_direct",
    "normalize_hue",
    "mix",
    "gradient",
]

M = TypeVar("M", bound="ColorModel")
DirectConverter = Callable[..., Optional["ColorModel"]]

_DIRECT_CONVERTERS: Dict[Tuple[type, type], DirectConverter] = {}


def register_direct(source: type, target: type) -> Callable[[DirectConverter], DirectConverter]:
    """
    Registers a shortcut used by ``convert`` from ``source`` to ``target``.

    The converter receives the source color plus the keyword arguments given
    to ``convert``; returning None declines and falls back to the XYZ pivot.
    """
    def decorator(func: DirectConverter) -> DirectConverter:
        _DIRECT_CONVERTERS[(source, target)] = func
        return func
    return decorator

def normalize_hue(h: float) -> float:
    """Wraps a hue angle into [0, 360)."""
    h = float(h) % 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if h == 360.0 else h


class ColorModel(ABC):
    """
    Capability interface shared by all color models.

    Concrete models are frozen dataclasses; every "modifier" returns a new
    instance.
    """
    __slots__ = ()

    COMPONENTS: ClassVar[Tuple[str, ...]] = ()
    HUE_INDEX: ClassVar[Optional[int]] = None

    alpha: float
    context: ViewingContext

    # --- Pivot ---

    @abstractmethod
    def to_xyz(self) -> "Xyz":
        """Converts to CIE XYZ, keeping alpha and expressed in ``self.context``."""

    @classmethod
    @abstractmethod
    def from_xyz(cls: Type[M], xyz: "Xyz", **kwargs: Any) -> M:
        """Builds an instance of this model from CIE XYZ."""

    def _conversion_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments reproducing this model's parameterisation (e.g. RGB space)."""
        return {}

    # --- Accessors ---

    @property
    def components(self) -> Tuple[float, ...]:
        return tuple(getattr(self, name) for name in self.COMPONENTS)

    def to_array(self) -> ArrayFloat:
        """Components as a float64 array (alpha excluded)."""
        return np.array(self.components, dtype=np.float64)

    def chromaticity(self) -> Chromaticity:
        return Chromaticity.from_xyz(self.to_xyz().to_array())

    @property
    def luminance(self) -> float:
        """Relative luminance Y (reference white Y = 1)."""
        return self.to_xyz().y

    # --- Conversion ---

    def convert(self, target: Type[M], **kwargs: Any) -> M:
        """
        Converts to another model.

        Args:
            target: Model class to convert to.
            **kwargs: Target parameters, e.g. ``space=RgbSpace.DISPLAY_P3``
                for RGB-family targets or ``context=...`` for CIE targets.
        """
        if type(self) is target and (not kwargs or kwargs == self._conversion_kwargs()):
            return self  # type: ignore[return-value]
        direct = _DIRECT_CONVERTERS.get((type(self), target))
        if direct is not None:
            result = direct(self, **kwargs)
            if result is not None:
                return result  # type: ignore[return-value]
        return target.from_xyz(self.to_xyz(), **kwargs)

    def adapt_to(self: M, context: ViewingContext) -> M:
        """
        Re-renders this color under another viewing context.

        Contexts sharing this color's reference white only relabel it; the
        components are returned unchanged.
        """
        if not self.context.needs_adaptation(context):
            return self.with_context(context)
        return type(self).from_xyz(self.to_xyz().adapt_to(context), **self._conversion_kwargs())

    # --- Non-mutating modifiers ---

    def replace(self: M, **changes: Any) -> M:
        """Copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)  # type: ignore[type-var]

    def with_alpha(self: M, alpha: float) -> M:
        return dataclasses.replace(self, alpha=float(alpha))  # type: ignore[type-var]

    def with_context(self: M, context: ViewingContext) -> M:
        """Relabels the color with ``context`` without adapting its values."""
        return dataclasses.replace(self, context=context)  # type: ignore[type-var]

    # --- Comparison and interpolation ---

    def isclose(self, other: "ColorModel", abs_tol: float = 1e-9) -> bool:
        """Component-wise comparison with hue wrap-around; types must match."""
        if type(other) is not type(self) or self._conversion_kwargs() != other._conversion_kwargs():
            return False
        for i, (a, b) in enumerate(zip(self.components, other.components)):
            diff = abs(a - b)
            if i == self.HUE_INDEX:
                diff = min(diff, 360.0 - diff)
            if diff > abs_tol:
                return False
        return abs(self.alpha - other.alpha) <= abs_tol and self.context == other.context

    def mix(self: M, other: "ColorModel", t: float = 0.5) -> M:
        """
        Linear interpolation towards ``other`` in this model's coordinates.

        ``other`` is first converted into this model (and context). Hue
        components travel along the shorter arc.

        Args:
            other: Color to mix with.
            t: 0 returns ``self``, 1 returns ``other``.
        """
        peer = other.convert(type(self), **self._conversion_kwargs())
        if peer.context != self.context:
            peer = peer.adapt_to(self.context)

        changes: Dict[str, float] = {}
        for i, name in enumerate(self.COMPONENTS):
            a, b = getattr(self, name), getattr(peer, name)
            if i == self.HUE_INDEX:
                delta = ((b - a + 180.0) % 360.0) - 180.0
                changes[name] = normalize_hue(a + t * delta)
            else:
                changes[name] = a + t * (b - a)
        changes["alpha"] = self.alpha + t * (peer.alpha - self.alpha)
        return dataclasses.replace(self, **changes)  # type: ignore[type-var]

    def gradient(self: M, other: "ColorModel", steps: int) -> List[M]:
        """``steps`` evenly spaced mixes from ``self`` to ``other`` inclusive."""
        if steps < 2:
            raise ValueError(f"A gradient needs at least 2 steps, got {steps}")
        return [self.mix(other, i / (steps - 1)) for i in range(steps)]


def mix(a: M, b: ColorModel, t: float = 0.5) -> M:
    """Mixes ``b`` into ``a`` in ``a``'s model. See ``ColorModel.mix``."""
    return a.mix(b, t)

def gradient(a: M, b: ColorModel, steps: int) -> List[M]:
    """Evenly spaced colors from ``a`` to ``b`` in ``a``'s model."""
    return a.gradient(b, steps)


class FixedContextModel(ColorModel):
    """
    Models whose viewing context is implied by their definition: an RGB
    space's white, or D65 for the Ok* family. ``context`` is a property.
    """
    __slots__ = ()

    def adapt_to(self: M, context: ViewingContext) -> M:
        """The equivalent color in its own context is the color itself."""
        return self

    def with_context(self: M, context: ViewingContext) -> M:
        raise TypeError(
            f"{type(self).__name__} is bound to {self.context.illuminant.name}; "
            "use adapt_to() or convert() to move it to another context"
        )

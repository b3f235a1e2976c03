# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: physiological.py — Cone-response (LMS) model.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Tuple

from tincture_adaptation import ViewingContext
from tincture_config import get_default_context

from .base import ColorModel
from .cie import Xyz

__all__ = ["Lms"]


@dataclass(frozen=True, slots=True)
class Lms(ColorModel):
    """
    Long / medium / short cone responses.

    The cone space is the one defined by the context's chromatic adaptation
    transform, so the same XYZ yields different LMS under Bradford and CAT16.
    """
    l: float
    m: float
    s: float
    alpha: float = 1.0
    context: ViewingContext = field(default_factory=get_default_context)

    COMPONENTS: ClassVar[Tuple[str, ...]] = ("l", "m", "s")

    def to_xyz(self) -> Xyz:
        x, y, z = self.context.cat.from_lms(self.to_array())
        return Xyz(float(x), float(y), float(z), alpha=self.alpha, context=self.context)

    @classmethod
    def from_xyz(cls, xyz: Xyz, context: Optional[ViewingContext] = None, **kwargs: Any) -> "Lms":
        if context is not None:
            xyz = xyz.adapt_to(context)
        l, m, s = xyz.context.cat.to_lms(xyz.to_array())
        return cls(float(l), float(m), float(s), alpha=xyz.alpha, context=xyz.context)

# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Color model classes. Importing the package registers every direct converter.
"""

from .base import ColorModel, FixedContextModel, gradient, mix, normalize_hue, register_direct
from .cie import Lab, Lch, Lchuv, Luv, Xyy, Xyz
from .physiological import Lms
from .rgb import Rgb, format_hex, parse_hex
from .cylindrical import Hsb, Hsi, Hsl, Hsv, Hwb
from .subtractive import Cmyk
from .perceptual import OKLAB_CONTEXT, Okhsl, Okhsv, Okhwb, Oklab, Oklch
from .hpluv import HPLUV_CONTEXT, Hpluv, max_safe_chroma_for_l

__all__ = [
    "ColorModel",
    "FixedContextModel",
    "register_direct",
    "normalize_hue",
    "mix",
    "gradient",
    "Xyz",
    "Xyy",
    "Lab",
    "Lch",
    "Luv",
    "Lchuv",
    "Lms",
    "Rgb",
    "parse_hex",
    "format_hex",
    "Hsl",
    "Hsv",
    "Hsb",
    "Hwb",
    "Hsi",
    "Cmyk",
    "OKLAB_CONTEXT",
    "Oklab",
    "Oklch",
    "Okhsv",
    "Okhsl",
    "Okhwb",
    "HPLUV_CONTEXT",
    "Hpluv",
    "max_safe_chroma_for_l",
]

# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_errors.py — Exception hierarchy.

All exceptions derive from ``TinctureError``. Those signalling bad input also
derive from ``ValueError`` so callers catching the builtin keep working.
"""

__all__ = [
    "TinctureError",
    "DegenerateMatrixError",
    "InvalidHexError",
    "InvalidHexLengthError",
    "InvalidHexCharacterError",
]


class TinctureError(Exception):
    """Root of every error raised by Tincture."""


class DegenerateMatrixError(TinctureError, ValueError):
    """Raised when a 3x3 matrix with a (numerically) zero determinant is inverted."""

    def __init__(self, determinant: float) -> None:
        self.determinant = determinant
        super().__init__(
            f"Matrix is singular (determinant {determinant:.3e}); "
            "check for collinear primaries or a degenerate cone transform."
        )


class InvalidHexError(TinctureError, ValueError):
    """Base class for hexadecimal color parse failures."""

    def __init__(self, text: str, message: str) -> None:
        self.text = text
        super().__init__(message)


class InvalidHexLengthError(InvalidHexError):
    def __init__(self, text: str, length: int) -> None:
        self.length = length
        super().__init__(text, f"invalid hex length {length} for '{text}', expected 3 or 6")


class InvalidHexCharacterError(InvalidHexError):
    def __init__(self, text: str) -> None:
        super().__init__(text, f"invalid hex character in '{text}'")

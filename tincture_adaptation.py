# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_adaptation.py — Chromatic adaptation and viewing contexts.

A viewing context fixes the illuminant, the standard observer and the
chromatic adaptation transform (CAT). Moving a tristimulus value between two
contexts re-renders it under the new white in a von Kries fashion:

    lms      = M · xyz
    gain_i   = (M · W_dst)_i / (M · W_src)_i
    xyz'     = M⁻¹ · (lms ∘ gain)

where M is the cone-response matrix of the *target* context's CAT. The three
steps are folded into one composite matrix M⁻¹ · diag(gain) · M, memoised per
(CAT, source white, destination white).

References:
    - Lam, K. M. (1985). Metamerism and colour constancy (Bradford).
    - CIE 159:2004 (CAT02); Li et al. (2017) (CAT16).
    - Fairchild, M. D. Color Appearance Models, 3rd ed.
"""

import dataclasses
import functools
import warnings
import numpy as np
from dataclasses import dataclass
from typing import Final, Tuple, Union, Sequence

import tincture_config
from tincture_illuminant import (
    Illuminant, Observer, Triple, ILLUMINANT_D50, ILLUMINANT_D65,
)
from tincture_matrix import (
    ArrayFloat, as_vec3, mat3_diag, mat3_inverse, mat3_mul, mat3_mul_vec,
)

__all__ = [
    "ChromaticAdaptationTransform",
    "BRADFORD",
    "CAT02",
    "CAT16",
    "CMC_CAT97",
    "CMC_CAT2000",
    "FAIRCHILD",
    "HUNT_POINTER_ESTEVEZ",
    "SHARP",
    "VON_KRIES",
    "XYZ_SCALING",
    "CATS",
    "ViewingContext",
    "D65_CONTEXT",
    "D50_CONTEXT",
    "adapt_xyz",
]

Matrix3 = Tuple[Triple, Triple, Triple]

# Source-white cone responses below this are treated as zero.
_ZERO_CONE_RESPONSE: Final[float] = 1e-12


# =============================================================================
# 1. CACHED WORKERS
# =============================================================================

@functools.lru_cache(maxsize=32)
def _get_cached_cone_matrices(matrix: Matrix3) -> Tuple[ArrayFloat, ArrayFloat]:
    """Forward and inverse cone matrices, frozen against accidental writes."""
    forward = np.array(matrix, dtype=np.float64)
    inverse = mat3_inverse(forward)
    forward.flags.writeable = False
    inverse.flags.writeable = False
    return forward, inverse

@functools.lru_cache(maxsize=64)
def _get_cached_adaptation_matrix(
    matrix: Matrix3, src_white: Triple, dst_white: Triple
) -> Tuple[ArrayFloat, Tuple[int, ...]]:
    """
    Cached worker for the composite adaptation matrix.

    Derivation:
        M_composite = M_inv · diag(gain) · M

    Returns:
        The composite matrix and the indices of cone channels whose source
        response was zero (passed through with gain 1).
    """
    m, m_inv = _get_cached_cone_matrices(matrix)
    src_lms = mat3_mul_vec(m, src_white)
    dst_lms = mat3_mul_vec(m, dst_white)

    gains = np.ones(3, dtype=np.float64)
    degenerate = []
    for i in range(3):
        if abs(src_lms[i]) < _ZERO_CONE_RESPONSE:
            degenerate.append(i)
        else:
            gains[i] = dst_lms[i] / src_lms[i]

    composite = mat3_mul(m_inv, mat3_mul(mat3_diag(gains), m))
    composite.flags.writeable = False
    return composite, tuple(degenerate)


# =============================================================================
# 2. CHROMATIC ADAPTATION TRANSFORMS
# =============================================================================

@dataclass(frozen=True, slots=True)
class ChromaticAdaptationTransform:
    """
    A cone-response matrix mapping XYZ to a (sharpened) LMS space.

    Attributes:
        name: Display name.
        matrix: Row-major 3x3 XYZ -> LMS matrix as nested tuples, so the
            transform is hashable and can key the adaptation cache.
    """
    name: str
    matrix: Matrix3

    @property
    def cone_matrix(self) -> ArrayFloat:
        """XYZ -> LMS matrix (read-only array)."""
        return _get_cached_cone_matrices(self.matrix)[0]

    @property
    def inverse_cone_matrix(self) -> ArrayFloat:
        """LMS -> XYZ matrix (read-only array)."""
        return _get_cached_cone_matrices(self.matrix)[1]

    def to_lms(self, xyz: Union[ArrayFloat, Sequence[float]]) -> ArrayFloat:
        return mat3_mul_vec(self.cone_matrix, xyz)

    def from_lms(self, lms: Union[ArrayFloat, Sequence[float]]) -> ArrayFloat:
        return mat3_mul_vec(self.inverse_cone_matrix, lms)

    def adaptation_matrix(self, src_white: Sequence[float], dst_white: Sequence[float]) -> ArrayFloat:
        """
        Composite XYZ -> XYZ matrix re-rendering ``src_white`` as ``dst_white``.

        Args:
            src_white: Source reference white (XYZ).
            dst_white: Destination reference white (XYZ).

        Returns:
            Read-only 3x3 matrix for column vectors.
        """
        composite, degenerate = _get_cached_adaptation_matrix(
            self.matrix, _to_hashable(src_white), _to_hashable(dst_white)
        )
        if degenerate and tincture_config.cat_warnings_enabled():
            warnings.warn(
                f"{self.name}: source white has zero cone response in channel(s) "
                f"{list(degenerate)}; those channels are not adapted.",
                RuntimeWarning,
                stacklevel=3,
            )
        return composite

    def adapt(self, xyz: Union[ArrayFloat, Sequence[float]],
              src_white: Sequence[float], dst_white: Sequence[float]) -> ArrayFloat:
        """
        Adapts one XYZ value from ``src_white`` to ``dst_white``.

        Args:
            xyz: Tristimulus value, shape (3,).
            src_white: Source reference white.
            dst_white: Destination reference white.

        Returns:
            Adapted XYZ, shape (3,).
        """
        return mat3_mul_vec(self.adaptation_matrix(src_white, dst_white), xyz)

    def adapt_array(self, xyz: ArrayFloat,
                    src_white: Sequence[float], dst_white: Sequence[float]) -> ArrayFloat:
        """Batch variant of ``adapt`` for (N, 3) arrays (row vectors)."""
        m = self.adaptation_matrix(src_white, dst_white)
        return np.dot(np.asarray(xyz, dtype=np.float64), m.T)


def _to_hashable(obj: Union[ArrayFloat, Sequence[float]]) -> Triple:
    """Helper to ensure white points are hashable tuples for caching."""
    v = as_vec3(obj)
    return (float(v[0]), float(v[1]), float(v[2]))


BRADFORD: Final = ChromaticAdaptationTransform("Bradford", (
    (0.8951, 0.2664, -0.1614),
    (-0.7502, 1.7135, 0.0367),
    (0.0389, -0.0685, 1.0296),
))
CAT02: Final = ChromaticAdaptationTransform("CAT02", (
    (0.7328, 0.4296, -0.1624),
    (-0.7036, 1.6975, 0.0061),
    (0.0030, 0.0136, 0.9834),
))
CAT16: Final = ChromaticAdaptationTransform("CAT16", (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
))
# CMC CAT97 shares the Bradford cone matrix.
CMC_CAT97: Final = ChromaticAdaptationTransform("CMC CAT97", BRADFORD.matrix)
CMC_CAT2000: Final = ChromaticAdaptationTransform("CMC CAT2000", (
    (0.7982, 0.3389, -0.1371),
    (-0.5918, 1.5512, 0.0406),
    (0.0008, 0.0239, 0.9753),
))
FAIRCHILD: Final = ChromaticAdaptationTransform("Fairchild", (
    (0.8562, 0.3372, -0.1934),
    (-0.8360, 1.8327, 0.0033),
    (0.0357, -0.0469, 1.0112),
))
HUNT_POINTER_ESTEVEZ: Final = ChromaticAdaptationTransform("Hunt-Pointer-Estévez", (
    (0.38971, 0.68898, -0.07868),
    (-0.22981, 1.18340, 0.04641),
    (0.0, 0.0, 1.0),
))
SHARP: Final = ChromaticAdaptationTransform("Sharp", (
    (1.2694, -0.0988, -0.1706),
    (-0.8364, 1.8006, 0.0357),
    (0.0297, -0.0315, 1.0018),
))
VON_KRIES: Final = ChromaticAdaptationTransform("Von Kries", (
    (0.40024, 0.7076, -0.08081),
    (-0.2263, 1.16532, 0.0457),
    (0.0, 0.0, 0.91822),
))
XYZ_SCALING: Final = ChromaticAdaptationTransform("XYZ Scaling", (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
))

CATS: Final[dict[str, ChromaticAdaptationTransform]] = {
    cat.name: cat for cat in (
        BRADFORD, CAT02, CAT16, CMC_CAT97, CMC_CAT2000, FAIRCHILD,
        HUNT_POINTER_ESTEVEZ, SHARP, VON_KRIES, XYZ_SCALING,
    )
}


# =============================================================================
# 3. VIEWING CONTEXT
# =============================================================================

@dataclass(frozen=True, slots=True)
class ViewingContext:
    """
    The conditions a color is expressed under.

    Attributes:
        illuminant: Light source defining the reference white.
        observer: Standard observer selecting which tabulated white applies.
        cat: Transform used when adapting *into* this context.
    """
    illuminant: Illuminant = ILLUMINANT_D65
    observer: Observer = Observer.CIE1931_2
    cat: ChromaticAdaptationTransform = BRADFORD

    @property
    def reference_white(self) -> ArrayFloat:
        """XYZ of the illuminant for this observer, Y = 1."""
        return self.illuminant.white(self.observer)

    @property
    def white_tuple(self) -> Triple:
        return self.illuminant.white_tuple(self.observer)

    def needs_adaptation(self, other: "ViewingContext") -> bool:
        """True unless both contexts share a numerically identical white."""
        return self.white_tuple != other.white_tuple

    def with_illuminant(self, illuminant: Illuminant) -> "ViewingContext":
        return dataclasses.replace(self, illuminant=illuminant)

    def with_observer(self, observer: Observer) -> "ViewingContext":
        return dataclasses.replace(self, observer=observer)

    def with_cat(self, cat: ChromaticAdaptationTransform) -> "ViewingContext":
        return dataclasses.replace(self, cat=cat)


D65_CONTEXT: Final = ViewingContext()
D50_CONTEXT: Final = ViewingContext(ILLUMINANT_D50)


def adapt_xyz(xyz: Union[ArrayFloat, Sequence[float]],
              source: ViewingContext, target: ViewingContext) -> ArrayFloat:
    """
    Re-renders a tristimulus value from ``source`` into ``target``.

    When both contexts share the same reference white the value is returned
    unchanged (as a fresh array); only the context label differs.

    Args:
        xyz: Tristimulus value, shape (3,).
        source: Context ``xyz`` is expressed in.
        target: Context to adapt into; its CAT is used.

    Returns:
        Adapted XYZ, shape (3,).
    """
    values = np.array(as_vec3(xyz), dtype=np.float64)
    if not source.needs_adaptation(target):
        return values
    return target.cat.adapt(values, source.white_tuple, target.white_tuple)

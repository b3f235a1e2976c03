# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_rgbspec.py — RGB color space specifications.

An RGB space is fully determined by three primary chromaticities, a reference
white and a transfer function. The linear RGB -> XYZ matrix is derived as:

    P    = [XYZ(red) | XYZ(green) | XYZ(blue)]     (primaries lifted to Y = 1)
    s    = P⁻¹ · W
    M    = P · diag(s)

so that RGB (1, 1, 1) lands exactly on W. The pair (M, M⁻¹) is computed once
per RgbSpec and stored in a write-once cell guarded by a lock.

Transfer functions (encoded <-> linear):
    LINEAR    identity
    GAMMA     V^γ (mirrored for negative values)
    SRGB      IEC 61966-2-1
    BT709     ITU-R BT.709 / BT.2020 OETF
    BT601     ITU-R BT.601 (same curve as BT.709)
    PQ        SMPTE ST 2084, linear in cd/m² (0..10000)
    HLG       ITU-R BT.2100 Hybrid Log-Gamma
    PROPHOTO  ROMM RGB (ISO 22028-2)
    ACESCCT   ACEScct log encoding (S-2016-001), linear segment near black
"""

import enum
import threading
import numpy as np
from dataclasses import dataclass, field
from numba import njit
from typing import Final, Optional, Tuple, Union

from tincture_adaptation import ViewingContext
from tincture_config import get_logger
from tincture_illuminant import (
    Chromaticity, Illuminant, ILLUMINANT_C, ILLUMINANT_D50, ILLUMINANT_D65, ILLUMINANT_E,
)
from tincture_matrix import ArrayFloat, as_vec3, mat3_diag, mat3_inverse, mat3_mul, mat3_mul_vec

__all__ = [
    "TransferKind",
    "TransferFunction",
    "RgbPrimaries",
    "RgbSpec",
    "RgbSpace",
    "SpaceLike",
    "resolve_space",
    "RgChromaticity",
]

_logger = get_logger("rgbspec")


# =============================================================================
# 1. TRANSFER FUNCTIONS
# =============================================================================

class TransferKind(enum.IntEnum):
    """Transfer curve families. Integer values are the kernel dispatch codes."""
    LINEAR = 0
    GAMMA = 1
    SRGB = 2
    BT709 = 3
    BT601 = 4
    PQ = 5
    HLG = 6
    PROPHOTO = 7
    ACESCCT = 8


# sRGB (IEC 61966-2-1)
_SRGB_ALPHA: Final[float] = 0.055
_SRGB_ENC_THRESHOLD: Final[float] = 0.04045
_SRGB_LIN_THRESHOLD: Final[float] = 0.0031308
_SRGB_SLOPE: Final[float] = 12.92
_SRGB_GAMMA: Final[float] = 2.4

# ITU-R BT.709 / BT.601
_BT_ALPHA: Final[float] = 0.099
_BT_ENC_THRESHOLD: Final[float] = 0.081
_BT_LIN_THRESHOLD: Final[float] = 0.018
_BT_SLOPE: Final[float] = 4.5
_BT_EXPONENT: Final[float] = 0.45

# SMPTE ST 2084 (exact rational definitions)
_PQ_M1: Final[float] = 2610.0 / 16384.0
_PQ_M2: Final[float] = 2523.0 / 4096.0 * 128.0
_PQ_C1: Final[float] = 3424.0 / 4096.0
_PQ_C2: Final[float] = 2413.0 / 4096.0 * 32.0
_PQ_C3: Final[float] = 2392.0 / 4096.0 * 32.0
_PQ_PEAK: Final[float] = 10000.0

# ITU-R BT.2100 HLG
_HLG_A: Final[float] = 0.17883277
_HLG_B: Final[float] = 0.28466892
_HLG_C: Final[float] = 0.55991073

# ROMM RGB
_PROPHOTO_ENC_THRESHOLD: Final[float] = 16.0 / 512.0
_PROPHOTO_LIN_THRESHOLD: Final[float] = 1.0 / 512.0
_PROPHOTO_SLOPE: Final[float] = 16.0
_PROPHOTO_GAMMA: Final[float] = 1.8

# ACEScct (S-2016-001)
_ACESCCT_A: Final[float] = 10.5402377416545
_ACESCCT_B: Final[float] = 0.0729055341958355
_ACESCCT_LIN_BREAK: Final[float] = 0.0078125
_ACESCCT_ENC_BREAK: Final[float] = 0.155251141552511
_ACESCCT_LOG_OFFSET: Final[float] = 9.72
_ACESCCT_LOG_SCALE: Final[float] = 17.52
_ACESCCT_HALF_MAX: Final[float] = 65504.0


@njit(cache=True)
def _decode_scalar(v: float, kind: int, gamma: float) -> float:
    """Encoded -> linear for one channel value."""
    if kind == 1:
        if v < 0.0:
            return -((-v) ** gamma)
        return v ** gamma
    if kind == 2:
        if v <= _SRGB_ENC_THRESHOLD:
            return v / _SRGB_SLOPE
        return ((v + _SRGB_ALPHA) / (1.0 + _SRGB_ALPHA)) ** _SRGB_GAMMA
    if kind == 3 or kind == 4:
        if v < _BT_ENC_THRESHOLD:
            return v / _BT_SLOPE
        return ((v + _BT_ALPHA) / (1.0 + _BT_ALPHA)) ** (1.0 / _BT_EXPONENT)
    if kind == 5:
        if v <= 0.0:
            return 0.0
        p = v ** (1.0 / _PQ_M2)
        num = p - _PQ_C1
        if num < 0.0:
            num = 0.0
        return _PQ_PEAK * (num / (_PQ_C2 - _PQ_C3 * p)) ** (1.0 / _PQ_M1)
    if kind == 6:
        if v <= 0.0:
            return 0.0
        if v <= 0.5:
            return v * v / 3.0
        return (np.exp((v - _HLG_C) / _HLG_A) + _HLG_B) / 12.0
    if kind == 7:
        if v < _PROPHOTO_ENC_THRESHOLD:
            return v / _PROPHOTO_SLOPE
        return v ** _PROPHOTO_GAMMA
    if kind == 8:
        if v <= _ACESCCT_ENC_BREAK:
            return (v - _ACESCCT_B) / _ACESCCT_A
        return min(2.0 ** (v * _ACESCCT_LOG_SCALE - _ACESCCT_LOG_OFFSET), _ACESCCT_HALF_MAX)
    return v

@njit(cache=True)
def _encode_scalar(v: float, kind: int, gamma: float) -> float:
    """Linear -> encoded for one channel value."""
    if kind == 1:
        if v < 0.0:
            return -((-v) ** (1.0 / gamma))
        return v ** (1.0 / gamma)
    if kind == 2:
        if v <= _SRGB_LIN_THRESHOLD:
            return v * _SRGB_SLOPE
        return (1.0 + _SRGB_ALPHA) * v ** (1.0 / _SRGB_GAMMA) - _SRGB_ALPHA
    if kind == 3 or kind == 4:
        if v < _BT_LIN_THRESHOLD:
            return v * _BT_SLOPE
        return (1.0 + _BT_ALPHA) * v ** _BT_EXPONENT - _BT_ALPHA
    if kind == 5:
        if v <= 0.0:
            return 0.0
        y = (v / _PQ_PEAK) ** _PQ_M1
        return ((_PQ_C1 + _PQ_C2 * y) / (1.0 + _PQ_C3 * y)) ** _PQ_M2
    if kind == 6:
        if v <= 0.0:
            return 0.0
        if v <= 1.0 / 12.0:
            return np.sqrt(3.0 * v)
        return _HLG_A * np.log(12.0 * v - _HLG_B) + _HLG_C
    if kind == 7:
        if v < _PROPHOTO_LIN_THRESHOLD:
            return v * _PROPHOTO_SLOPE
        return v ** (1.0 / _PROPHOTO_GAMMA)
    if kind == 8:
        if v <= _ACESCCT_LIN_BREAK:
            return _ACESCCT_A * v + _ACESCCT_B
        return (np.log2(v) + _ACESCCT_LOG_OFFSET) / _ACESCCT_LOG_SCALE
    return v

@njit(cache=True)
def _transfer_kernel(values: ArrayFloat, kind: int, gamma: float, encode: bool) -> ArrayFloat:
    """
    Applies a transfer curve element-wise.

    Performance Note:
        Explicit ravel loop instead of ``np.where`` to avoid allocating
        boolean masks for each branch.
    """
    out = np.empty_like(values)
    in_flat = values.ravel()
    out_flat = out.ravel()
    for i in range(values.size):
        if encode:
            out_flat[i] = _encode_scalar(in_flat[i], kind, gamma)
        else:
            out_flat[i] = _decode_scalar(in_flat[i], kind, gamma)
    return out


@dataclass(frozen=True, slots=True)
class TransferFunction:
    """
    Component-wise mapping between encoded and linear-light RGB values.

    Attributes:
        kind: Curve family.
        gamma: Exponent, only meaningful for ``TransferKind.GAMMA``.
    """
    kind: TransferKind
    gamma: float = 1.0

    def __post_init__(self) -> None:
        if self.kind is TransferKind.GAMMA and not self.gamma > 0.0:
            raise ValueError(f"Gamma must be positive, got {self.gamma}")

    @classmethod
    def power(cls, gamma: float) -> "TransferFunction":
        return cls(TransferKind.GAMMA, float(gamma))

    def decode(self, encoded: Union[float, ArrayFloat]) -> Union[float, ArrayFloat]:
        """Encoded -> linear. Scalars in, scalars out."""
        if np.ndim(encoded) == 0:
            return float(_decode_scalar(float(encoded), int(self.kind), self.gamma))
        arr = np.ascontiguousarray(encoded, dtype=np.float64)
        return _transfer_kernel(arr, int(self.kind), self.gamma, False)

    def encode(self, linear: Union[float, ArrayFloat]) -> Union[float, ArrayFloat]:
        """Linear -> encoded. Scalars in, scalars out."""
        if np.ndim(linear) == 0:
            return float(_encode_scalar(float(linear), int(self.kind), self.gamma))
        arr = np.ascontiguousarray(linear, dtype=np.float64)
        return _transfer_kernel(arr, int(self.kind), self.gamma, True)


LINEAR: Final = TransferFunction(TransferKind.LINEAR)
SRGB_TRANSFER: Final = TransferFunction(TransferKind.SRGB)
BT709_TRANSFER: Final = TransferFunction(TransferKind.BT709)
BT601_TRANSFER: Final = TransferFunction(TransferKind.BT601)
PQ_TRANSFER: Final = TransferFunction(TransferKind.PQ)
HLG_TRANSFER: Final = TransferFunction(TransferKind.HLG)
PROPHOTO_TRANSFER: Final = TransferFunction(TransferKind.PROPHOTO)
ACESCCT_TRANSFER: Final = TransferFunction(TransferKind.ACESCCT)


# =============================================================================
# 2. PRIMARIES AND MATRIX DERIVATION
# =============================================================================

@dataclass(frozen=True, slots=True)
class RgbPrimaries:
    """Chromaticities of the red, green and blue primaries."""
    red: Chromaticity
    green: Chromaticity
    blue: Chromaticity

    @classmethod
    def from_xy(cls, red: Tuple[float, float], green: Tuple[float, float],
                blue: Tuple[float, float]) -> "RgbPrimaries":
        return cls(Chromaticity(*red), Chromaticity(*green), Chromaticity(*blue))

    def primary_matrix(self) -> ArrayFloat:
        """Unscaled matrix whose columns are the primaries lifted to Y = 1."""
        columns = [p.to_xyz(1.0) for p in (self.red, self.green, self.blue)]
        return np.ascontiguousarray(np.column_stack(columns))

    def xyz_matrix(self, white: Union[ArrayFloat, Tuple[float, float, float]]) -> ArrayFloat:
        """
        Linear RGB -> XYZ matrix for the given reference white.

        Args:
            white: Reference white XYZ.

        Returns:
            3x3 matrix M with M · (1, 1, 1) == white.

        Raises:
            DegenerateMatrixError: If the primaries are collinear.
        """
        p = self.primary_matrix()
        scale = mat3_mul_vec(mat3_inverse(p), as_vec3(white))
        return mat3_mul(p, mat3_diag(scale))


class _MatrixCell:
    """
    Write-once holder for a (forward, inverse) matrix pair.

    Double-checked locking: readers take the lock only while the cell is
    empty. The stored arrays are read-only.
    """
    __slots__ = ("_lock", "_value")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: Optional[Tuple[ArrayFloat, ArrayFloat]] = None

    def get(self, spec: "RgbSpec") -> Tuple[ArrayFloat, ArrayFloat]:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                forward = spec.primaries.xyz_matrix(spec.context.white_tuple)
                inverse = mat3_inverse(forward)
                forward.flags.writeable = False
                inverse.flags.writeable = False
                self._value = (forward, inverse)
                _logger.debug("Derived RGB<->XYZ matrices for %s", spec.label)
            return self._value


@dataclass(frozen=True, slots=True)
class RgbSpec:
    """
    Complete description of an RGB color space.

    Attributes:
        label: Display name.
        primaries: Primary chromaticities.
        context: Viewing context; its reference white is the space's white.
        transfer: Encoded <-> linear transfer function.
    """
    label: str
    primaries: RgbPrimaries
    context: ViewingContext
    transfer: TransferFunction
    _matrices: _MatrixCell = field(
        default_factory=_MatrixCell, init=False, compare=False, repr=False
    )

    @property
    def xyz_matrix(self) -> ArrayFloat:
        """Linear RGB -> XYZ (read-only)."""
        return self._matrices.get(self)[0]

    @property
    def inverse_xyz_matrix(self) -> ArrayFloat:
        """XYZ -> linear RGB (read-only)."""
        return self._matrices.get(self)[1]

    @property
    def white(self) -> ArrayFloat:
        return self.context.reference_white

    def linear_to_xyz(self, linear: Union[ArrayFloat, Tuple[float, float, float]]) -> ArrayFloat:
        return mat3_mul_vec(self.xyz_matrix, linear)

    def xyz_to_linear(self, xyz: Union[ArrayFloat, Tuple[float, float, float]]) -> ArrayFloat:
        return mat3_mul_vec(self.inverse_xyz_matrix, xyz)

    def decode(self, encoded: Union[ArrayFloat, Tuple[float, float, float]]) -> ArrayFloat:
        return self.transfer.decode(np.asarray(encoded, dtype=np.float64))

    def encode(self, linear: Union[ArrayFloat, Tuple[float, float, float]]) -> ArrayFloat:
        return self.transfer.encode(np.asarray(linear, dtype=np.float64))

    @classmethod
    def custom(cls, label: str, red: Tuple[float, float], green: Tuple[float, float],
               blue: Tuple[float, float], illuminant: Illuminant,
               transfer: TransferFunction = LINEAR) -> "RgbSpec":
        """Convenience constructor for user-defined spaces (2° observer, Bradford)."""
        return cls(label, RgbPrimaries.from_xy(red, green, blue),
                   ViewingContext(illuminant), transfer)


def _spec(label: str, red: Tuple[float, float], green: Tuple[float, float],
          blue: Tuple[float, float], illuminant: Illuminant,
          transfer: TransferFunction) -> RgbSpec:
    return RgbSpec.custom(label, red, green, blue, illuminant, transfer)


_SRGB_PRIMARIES = ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06))
_P3_PRIMARIES = ((0.680, 0.320), (0.265, 0.690), (0.150, 0.060))
_REC2020_PRIMARIES = ((0.708, 0.292), (0.170, 0.797), (0.131, 0.046))
_AP1_PRIMARIES = ((0.713, 0.293), (0.165, 0.830), (0.128, 0.044))
_GAMMA_22 = TransferFunction.power(2.2)


# =============================================================================
# 3. CATALOG
# =============================================================================

class RgbSpace(enum.Enum):
    """
    Named RGB spaces. Each member's value is its ``RgbSpec``; every API that
    accepts a member also accepts a custom ``RgbSpec``.
    """
    SRGB = _spec("sRGB", *_SRGB_PRIMARIES, ILLUMINANT_D65, SRGB_TRANSFER)
    LINEAR_SRGB = _spec("Linear sRGB", *_SRGB_PRIMARIES, ILLUMINANT_D65, LINEAR)
    DISPLAY_P3 = _spec("Display P3", *_P3_PRIMARIES, ILLUMINANT_D65, SRGB_TRANSFER)
    DCI_P3 = _spec("DCI-P3", *_P3_PRIMARIES, ILLUMINANT_D65, TransferFunction.power(2.6))
    ADOBE_RGB = _spec("Adobe RGB (1998)", (0.64, 0.33), (0.21, 0.71), (0.15, 0.06),
                      ILLUMINANT_D65, TransferFunction.power(2.19921875))
    APPLE_RGB = _spec("Apple RGB", (0.625, 0.340), (0.280, 0.595), (0.155, 0.070),
                      ILLUMINANT_D65, TransferFunction.power(1.8))
    PROPHOTO_RGB = _spec("ProPhoto RGB", (0.734699, 0.265301), (0.159597, 0.840403),
                         (0.036598, 0.000105), ILLUMINANT_D50, PROPHOTO_TRANSFER)
    REC601 = _spec("Rec. 601", (0.630, 0.340), (0.310, 0.595), (0.155, 0.070),
                   ILLUMINANT_D65, BT601_TRANSFER)
    REC709 = _spec("Rec. 709", *_SRGB_PRIMARIES, ILLUMINANT_D65, BT709_TRANSFER)
    REC2020 = _spec("Rec. 2020", *_REC2020_PRIMARIES, ILLUMINANT_D65, BT709_TRANSFER)
    REC2100_PQ = _spec("Rec. 2100 PQ", *_REC2020_PRIMARIES, ILLUMINANT_D65, PQ_TRANSFER)
    REC2100_HLG = _spec("Rec. 2100 HLG", *_REC2020_PRIMARIES, ILLUMINANT_D65, HLG_TRANSFER)
    WIDE_GAMUT_RGB = _spec("Wide Gamut RGB", (0.7347, 0.2653), (0.1152, 0.8264),
                           (0.1566, 0.0177), ILLUMINANT_D50, TransferFunction.power(2.2))
    ACES_2065_1 = _spec("ACES 2065-1", (0.7347, 0.2653), (0.0, 1.0), (0.0001, -0.0770),
                        ILLUMINANT_D65, LINEAR)
    CIE_RGB = _spec("CIE RGB", (0.7347, 0.2653), (0.2738, 0.7174), (0.1666, 0.0089),
                    ILLUMINANT_E, LINEAR)
    NTSC = _spec("NTSC (1953)", (0.67, 0.33), (0.21, 0.71), (0.14, 0.08),
                 ILLUMINANT_C, BT709_TRANSFER)
    PAL_SECAM = _spec("PAL/SECAM", (0.64, 0.33), (0.29, 0.60), (0.15, 0.06),
                      ILLUMINANT_D65, BT709_TRANSFER)
    COLORMATCH_RGB = _spec("ColorMatch RGB", (0.630, 0.340), (0.295, 0.605), (0.150, 0.075),
                           ILLUMINANT_D50, TransferFunction.power(1.8))
    BRUCE_RGB = _spec("Bruce RGB", (0.64, 0.33), (0.28, 0.65), (0.15, 0.06),
                      ILLUMINANT_D65, TransferFunction.power(2.2))
    ECI_RGB_V2 = _spec("ECI RGB v2", (0.67, 0.33), (0.21, 0.71), (0.14, 0.08),
                       ILLUMINANT_D50, LINEAR)
    BEST_RGB = _spec("Best RGB", (0.7347, 0.2653), (0.2150, 0.7750), (0.1300, 0.0350),
                     ILLUMINANT_D50, _GAMMA_22)
    BETA_RGB = _spec("Beta RGB", (0.6888, 0.3112), (0.1986, 0.7551), (0.1265, 0.0352),
                     ILLUMINANT_D50, _GAMMA_22)
    DON_RGB_4 = _spec("Don RGB 4", (0.6960, 0.3000), (0.2150, 0.7650), (0.1300, 0.0350),
                      ILLUMINANT_D50, _GAMMA_22)
    EKTASPACE_PS5 = _spec("EktaSpace PS5", (0.6950, 0.3050), (0.2600, 0.7000), (0.1100, 0.0050),
                          ILLUMINANT_D50, _GAMMA_22)

    # Camera and grading gamuts
    ACESCCT = _spec("ACEScct", *_AP1_PRIMARIES, ILLUMINANT_D65, ACESCCT_TRANSFER)
    ARRI_WIDE_GAMUT_3 = _spec("ARRI Wide Gamut 3", (0.6840, 0.3130), (0.2210, 0.8480),
                              (0.0861, -0.1020), ILLUMINANT_D65, LINEAR)
    ARRI_WIDE_GAMUT_4 = _spec("ARRI Wide Gamut 4", (0.7347, 0.2653), (0.1424, 0.8576),
                              (0.0991, -0.0308), ILLUMINANT_D65, LINEAR)
    BLACKMAGIC_WIDE_GAMUT = _spec("Blackmagic Wide Gamut", (0.7177, 0.3171), (0.2280, 0.8616),
                                  (0.1006, -0.0820), ILLUMINANT_D65, LINEAR)
    CANON_CINEMA_GAMUT = _spec("Canon Cinema Gamut", (0.740, 0.270), (0.170, 1.140),
                               (0.080, -0.100), ILLUMINANT_D65, LINEAR)
    DAVINCI_WIDE_GAMUT = _spec("DaVinci Wide Gamut", (0.8000, 0.3130), (0.1682, 0.9877),
                               (0.0790, -0.1155), ILLUMINANT_D65, LINEAR)
    FILMLIGHT_E_GAMUT = _spec("FilmLight E-Gamut", (0.8000, 0.3177), (0.1800, 0.9000),
                              (0.0650, -0.0805), ILLUMINANT_D65, LINEAR)
    PANASONIC_V_GAMUT = _spec("Panasonic V-Gamut", (0.730, 0.280), (0.165, 0.840),
                              (0.100, -0.030), ILLUMINANT_D65, LINEAR)
    RED_WIDE_GAMUT = _spec("RED Wide Gamut RGB", (0.780308, 0.304253), (0.121595, 1.493994),
                           (0.095612, -0.084589), ILLUMINANT_D65, LINEAR)
    SONY_S_GAMUT3 = _spec("Sony S-Gamut3", (0.730, 0.280), (0.140, 0.855),
                          (0.100, -0.050), ILLUMINANT_D65, LINEAR)
    SONY_S_GAMUT3_CINE = _spec("Sony S-Gamut3.Cine", (0.766, 0.275), (0.225, 0.800),
                               (0.089, -0.087), ILLUMINANT_D65, LINEAR)

    @property
    def spec(self) -> RgbSpec:
        return self.value

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def context(self) -> ViewingContext:
        return self.value.context

    @property
    def transfer(self) -> TransferFunction:
        return self.value.transfer

    @property
    def xyz_matrix(self) -> ArrayFloat:
        return self.value.xyz_matrix

    @property
    def inverse_xyz_matrix(self) -> ArrayFloat:
        return self.value.inverse_xyz_matrix


SpaceLike = Union[RgbSpace, RgbSpec]

def resolve_space(space: SpaceLike) -> RgbSpec:
    """Accepts an ``RgbSpace`` member or a custom ``RgbSpec``."""
    if isinstance(space, RgbSpace):
        return space.value
    if isinstance(space, RgbSpec):
        return space
    raise TypeError(f"Expected RgbSpace or RgbSpec, got {type(space).__name__}")


# =============================================================================
# 4. RG CHROMATICITY
# =============================================================================

@dataclass(frozen=True, slots=True)
class RgChromaticity:
    """
    Normalised linear RGB of a space: r = R / (R + G + B), likewise g.

    The implied blue share is 1 - r - g. A zero channel sum maps to (0, 0).
    """
    r: float
    g: float
    space: SpaceLike = RgbSpace.SRGB

    @property
    def b(self) -> float:
        return 1.0 - self.r - self.g

    @classmethod
    def from_linear(cls, r: float, g: float, b: float,
                    space: SpaceLike = RgbSpace.SRGB) -> "RgChromaticity":
        total = r + g + b
        if total == 0.0:
            return cls(0.0, 0.0, space)
        return cls(r / total, g / total, space)

    @classmethod
    def from_xy(cls, xy: Chromaticity, space: SpaceLike = RgbSpace.SRGB) -> "RgChromaticity":
        linear = resolve_space(space).xyz_to_linear(xy.to_xyz(1.0))
        return cls.from_linear(float(linear[0]), float(linear[1]), float(linear[2]), space)

    def to_xy(self) -> Chromaticity:
        xyz = resolve_space(self.space).linear_to_xyz((self.r, self.g, self.b))
        return Chromaticity.from_xyz(xyz)

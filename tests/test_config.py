# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Tests for runtime configuration and package logging.
"""

import logging

import pytest

import tincture_config
from color_models import Lab, Rgb, Xyz
from tincture_adaptation import CAT16, D50_CONTEXT, D65_CONTEXT
from tincture_rgbspec import RgbSpec
from tincture_illuminant import ILLUMINANT_D65


@pytest.fixture
def default_context():
    yield
    tincture_config.set_default_context(None)


def test_builtin_default_is_d65():
    assert tincture_config.get_default_context() is D65_CONTEXT
    assert Lab(50.0, 0.0, 0.0).context is D65_CONTEXT

def test_default_context_applies_to_new_cie_colors(default_context):
    tincture_config.set_default_context(D50_CONTEXT)
    assert Lab(50.0, 0.0, 0.0).context is D50_CONTEXT
    assert Xyz.reference_white().components == D50_CONTEXT.white_tuple
    # RGB stays bound to its space
    assert Rgb(0.5, 0.5, 0.5).context.illuminant is ILLUMINANT_D65

def test_default_context_is_restored(default_context):
    tincture_config.set_default_context(D65_CONTEXT.with_cat(CAT16))
    tincture_config.set_default_context(None)
    assert tincture_config.get_default_context() is D65_CONTEXT

def test_context_change_is_logged(default_context, caplog):
    with caplog.at_level(logging.DEBUG, logger="tincture"):
        tincture_config.set_default_context(D50_CONTEXT)
    assert any(r.name == "tincture.config" for r in caplog.records)

def test_matrix_derivation_is_logged(caplog):
    spec = RgbSpec.custom("Logged", (0.66, 0.32), (0.28, 0.65), (0.15, 0.07), ILLUMINANT_D65)
    with caplog.at_level(logging.DEBUG, logger="tincture"):
        spec.xyz_matrix
        spec.xyz_matrix
    derived = [r for r in caplog.records if r.name == "tincture.rgbspec"]
    assert len(derived) == 1

def test_logger_names():
    assert tincture_config.get_logger("metrics").name == "tincture.metrics"
    handlers = logging.getLogger("tincture").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)

def test_cat_warning_toggle():
    assert tincture_config.cat_warnings_enabled()
    tincture_config.set_cat_warnings(False)
    try:
        assert not tincture_config.cat_warnings_enabled()
    finally:
        tincture_config.set_cat_warnings(True)

def test_metadata_summary():
    import tincture_about
    summary = tincture_about.metadata_summary()
    assert summary["title"] == "Tincture"
    assert summary["version"] == tincture_about.__version__
    assert summary["license"] == "LGPL-3.0-or-later"

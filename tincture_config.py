# -*- coding: utf-8 -*-
"""
Tincture: Colorimetric transformations across device and perceptual models
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tincture_config.py — Process-wide runtime configuration.

Toggle at runtime via:
    import tincture_config as cfg
    cfg.set_default_context(ViewingContext(ILLUMINANT_D50))  # new models default to D50
    cfg.set_default_context(None)                           # back to D65 / 2° / Bradford
    cfg.set_cat_warnings(False)                             # silence adaptation guards

Library modules log under the ``tincture`` logger hierarchy. No handler is
installed besides a ``NullHandler``; applications configure output.
"""

import logging
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from tincture_adaptation import ViewingContext

__all__ = [
    "LOGGER_NAME",
    "get_logger",
    "set_default_context",
    "get_default_context",
    "set_cat_warnings",
    "cat_warnings_enabled",
]

LOGGER_NAME = "tincture"
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

def get_logger(name: str) -> logging.Logger:
    """Child logger of the package logger, e.g. ``get_logger("rgbspec")``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


# --- Runtime Configuration ---
# None means "use the built-in D65 / CIE 1931 2° / Bradford context".
_DEFAULT_CONTEXT: Optional["ViewingContext"] = None
_CAT_WARNINGS: bool = True

def set_default_context(context: Optional["ViewingContext"] = None) -> None:
    """
    Sets the viewing context given to CIE models constructed without one.

    Args:
        context: New default, or None to restore D65 / 2° / Bradford.
    """
    global _DEFAULT_CONTEXT
    _DEFAULT_CONTEXT = context
    get_logger("config").debug("Default viewing context set to %r", context)

def get_default_context() -> "ViewingContext":
    """Returns the current default viewing context."""
    if _DEFAULT_CONTEXT is not None:
        return _DEFAULT_CONTEXT
    from tincture_adaptation import D65_CONTEXT
    return D65_CONTEXT

def set_cat_warnings(enabled: bool = True) -> None:
    """
    Toggles the RuntimeWarning emitted when a source white has a zero cone
    response and the affected channel is passed through unscaled.
    """
    global _CAT_WARNINGS
    _CAT_WARNINGS = bool(enabled)

def cat_warnings_enabled() -> bool:
    return _CAT_WARNINGS

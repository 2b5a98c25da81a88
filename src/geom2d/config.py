# MIT License (see LICENSE)
"""
Runtime configuration read from the environment.

Only the comparison tolerance is configurable. It is looked up on every call
so a changed environment is honoured without reloading the package.
"""
from __future__ import annotations
import logging
import math
import os

from .constants import DEFAULT_EPS, EPS_ENV_VAR

logger = logging.getLogger(__name__)


def eps() -> float:
    """
    Effective tolerance for boundary comparisons.

    Reads ``GEOM2D_EPS`` when set. Values that are not positive finite
    floats are ignored with a warning and the default is used.
    """
    raw = os.environ.get(EPS_ENV_VAR)
    if raw is None or raw == "":
        return DEFAULT_EPS
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", EPS_ENV_VAR, raw)
        return DEFAULT_EPS
    if not math.isfinite(value) or value <= 0.0:
        logger.warning("Ignoring %s=%r: must be a positive finite float", EPS_ENV_VAR, raw)
        return DEFAULT_EPS
    return value

# MIT License (see LICENSE)
"""
Numeric constants shared by the geometry predicates.

Containment and intersection tests compare floating point values against
boundaries, so an absolute tolerance is applied instead of exact equality.
"""
from __future__ import annotations

# Absolute tolerance for on-boundary comparisons (distances, cross products
# normalised by segment length, determinant checks).
DEFAULT_EPS: float = 1e-9

# Environment variable that overrides DEFAULT_EPS, see geom2d.config.eps().
EPS_ENV_VAR: str = "GEOM2D_EPS"

"""Configuration package.

This package exposes only:
  - module level defaults (bath parameters, quadrature settings)
  - supported options
  - parameter validation helpers

The YAML loader lives in ``qopenbase.config.create_bath_obj`` and is
re-exported from the top-level package (``qopenbase.load_bath``); it is not
imported here because the bath models themselves read the defaults below.
"""

from __future__ import annotations

from ..utils.constants import HBAR, BOLTZMANN
from .bath_system import (
    BATH_TYPE,
    BATH_COUPLING,
    BATH_CUTOFF_GHZ,
    BATH_TEMP_MK,
    BATH_MRT_WIDTH_MK,
    TAU_B_HORIZON,
    COARSE_GRAIN_DIVISOR,
)
from .quadrature import (
    QUAD_RTOL,
    QUAD_ATOL,
    QUAD_LIMIT,
    PV_EXCLUSION_RADIUS,
    PV_CHECK_FACTORS,
    ULINDBLAD_ATOL,
    ULINDBLAD_RTOL,
    BOHR_FREQ_TOL,
)
from .supported import SUPPORTED_BATHS, CALLABLE_BATHS, SUPPORTED_UNITS
from .validation import validate_defaults, validate

__all__ = [
    # constants
    "HBAR",
    "BOLTZMANN",
    # bath defaults
    "BATH_TYPE",
    "BATH_COUPLING",
    "BATH_CUTOFF_GHZ",
    "BATH_TEMP_MK",
    "BATH_MRT_WIDTH_MK",
    "TAU_B_HORIZON",
    "COARSE_GRAIN_DIVISOR",
    # quadrature defaults
    "QUAD_RTOL",
    "QUAD_ATOL",
    "QUAD_LIMIT",
    "PV_EXCLUSION_RADIUS",
    "PV_CHECK_FACTORS",
    "ULINDBLAD_ATOL",
    "ULINDBLAD_RTOL",
    "BOHR_FREQ_TOL",
    # supported options
    "SUPPORTED_BATHS",
    "CALLABLE_BATHS",
    "SUPPORTED_UNITS",
    # validation
    "validate_defaults",
    "validate",
]

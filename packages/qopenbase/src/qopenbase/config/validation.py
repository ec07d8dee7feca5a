"""Validation and sanity checks for qopenbase."""

import warnings

import numpy as np

from ..errors import ConfigurationError
from .bath_system import (
    BATH_TYPE,
    BATH_COUPLING,
    BATH_CUTOFF_GHZ,
    BATH_TEMP_MK,
    BATH_MRT_WIDTH_MK,
    TAU_B_HORIZON,
)
from .quadrature import QUAD_RTOL, QUAD_ATOL, QUAD_LIMIT, PV_EXCLUSION_RADIUS
from .supported import SUPPORTED_BATHS, CALLABLE_BATHS


def _as_float_list(value, name: str) -> list[float]:
    values = np.atleast_1d(np.asarray(value, dtype=float))
    if values.ndim != 1:
        raise ConfigurationError(f"{name} must be a number or a flat list of numbers")
    return [float(v) for v in values]


# VALIDATION AND SANITY CHECKS
def validate(params: dict) -> None:
    """Validate that a bath parameter dictionary is consistent and sensible.

    Keys follow the ``bath:`` section of the YAML config; missing keys fall
    back to the module defaults.
    """
    bath_type = params.get("bath_type", BATH_TYPE)

    # Validate bath type
    if bath_type in CALLABLE_BATHS:
        raise ConfigurationError(
            f"bath_type '{bath_type}' needs user callables and cannot be configured from data"
        )
    if bath_type not in SUPPORTED_BATHS:
        raise ConfigurationError(f"bath_type '{bath_type}' not in {SUPPORTED_BATHS}")

    # Ohmic family
    if bath_type in ("ohmic", "hybrid_ohmic"):
        coupling = float(params.get("coupling", BATH_COUPLING))
        if not coupling > 0:
            raise ConfigurationError("bath.coupling must be > 0")
        if "omega_c" in params:
            if not float(params["omega_c"]) > 0:
                raise ConfigurationError("bath.omega_c must be > 0")
        elif not float(params.get("cutoff", BATH_CUTOFF_GHZ)) > 0:
            raise ConfigurationError("bath.cutoff must be > 0")
        if "beta" in params:
            beta = float(params["beta"])
            if not beta > 0:
                raise ConfigurationError("bath.beta must be > 0")
            if bath_type == "hybrid_ohmic" and np.isinf(beta):
                raise ConfigurationError("hybrid_ohmic bath needs a finite beta")
        elif not float(params.get("temperature", BATH_TEMP_MK)) > 0:
            raise ConfigurationError("bath.temperature must be > 0")

    if bath_type == "hybrid_ohmic":
        width = float(params.get("W", params.get("mrt_width", BATH_MRT_WIDTH_MK)))
        if not width > 0:
            raise ConfigurationError("bath.mrt_width (W) must be > 0")

    # Telegraph noise
    if bath_type in ("rtn", "ensemble_fluctuator"):
        if "b" not in params or "nu" not in params:
            raise ConfigurationError(f"bath_type '{bath_type}' needs 'b' and 'nu'")
        b = _as_float_list(params["b"], "bath.b")
        nu = _as_float_list(params["nu"], "bath.nu")
        if bath_type == "rtn" and (len(b) != 1 or len(nu) != 1):
            raise ConfigurationError("rtn bath takes a single 'b' and 'nu'; use ensemble_fluctuator")
        if len(b) != len(nu):
            raise ConfigurationError(f"bath.b ({len(b)}) and bath.nu ({len(nu)}) differ in length")
        if any(not x > 0 for x in nu):
            raise ConfigurationError("all bath.nu must be > 0")
        if any(x == 0 for x in b):
            warnings.warn("bath.b contains zero amplitudes (fluctuator without effect)", stacklevel=2)

    # Quadrature settings
    rtol = float(params.get("rtol", QUAD_RTOL))
    atol = float(params.get("atol", QUAD_ATOL))
    limit = int(params.get("limit", QUAD_LIMIT))
    radius = float(params.get("pv_radius", PV_EXCLUSION_RADIUS))
    horizon = float(params.get("tau_b_horizon", TAU_B_HORIZON))
    if not rtol > 0:
        raise ConfigurationError("rtol must be > 0")
    if not atol > 0:
        raise ConfigurationError("atol must be > 0")
    if limit <= 0:
        raise ConfigurationError("limit must be > 0")
    if not radius > 0:
        raise ConfigurationError("pv_radius must be > 0")
    if not horizon > 0:
        raise ConfigurationError("tau_b_horizon must be > 0")


def validate_defaults():
    """Validate that all default values are consistent and sensible."""
    validate({})

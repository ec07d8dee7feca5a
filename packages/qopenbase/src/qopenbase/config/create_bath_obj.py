"""Configuration → bath factory.

Purpose:
    Load a YAML config (or fall back to defaults) and build one of the
    data-configurable bath models.

Usage:
    from qopenbase import load_bath
    bath = load_bath("scripts/config.yaml")  # or None for defaults

YAML schema (all keys optional, defaults from ``qopenbase.config.bath_system``)::

    bath:
      bath_type: ohmic        # ohmic | hybrid_ohmic | rtn | ensemble_fluctuator
      coupling: 1.0e-4        # Ohmic η
      cutoff: 4.0             # fc [GHz]
      temperature: 16.0       # T [mK]
      mrt_width: 5.0          # W [mK] (hybrid_ohmic only)
      b: [1.0, 2.0]           # fluctuator amplitudes (rtn / ensemble_fluctuator)
      nu: [2.0, 1.0]          # switching rates [1/ns]

Angular-unit keys ``omega_c`` [2π GHz], ``beta`` [ns] and, for the hybrid
bath, ``W`` [2π GHz] take precedence over the physical-unit keys; this is
the form written by ``extract_bath_parameters``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import numpy as np
import yaml

from ..core.bath_system import (
    EnsembleFluctuator,
    HybridOhmic,
    HybridOhmicBath,
    Ohmic,
    OhmicBath,
    SymmetricRTN,
)
from ..core.bath_system.base import AbstractBath
from ..errors import ConfigurationError
from ..utils.constants import TWOPI, temperature_2_beta, temperature_2_freq
from ..utils.logging_setup import get_logger
from .bath_system import BATH_COUPLING, BATH_CUTOFF_GHZ, BATH_MRT_WIDTH_MK, BATH_TEMP_MK, BATH_TYPE
from .validation import validate

__all__ = ["create_bath", "load_bath"]

logger = get_logger(__name__)


# HELPERS
def _read_yaml(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, Mapping):
        raise ConfigurationError("Top-level YAML must be a mapping/dict")
    return data


def _get_section(cfg: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    sec = cfg.get(name, {})
    if sec is None:
        return {}
    if not isinstance(sec, Mapping):
        raise ConfigurationError(f"YAML section '{name}' must be a mapping/dict")
    return sec


def _angular_ohmic(params: Mapping[str, Any]) -> tuple[float, float, float]:
    """(eta, omega_c, beta) with angular keys taking precedence."""
    eta = float(params.get("coupling", BATH_COUPLING))
    omega_c = float(params.get("omega_c", TWOPI * float(params.get("cutoff", BATH_CUTOFF_GHZ))))
    beta = float(params.get("beta", temperature_2_beta(float(params.get("temperature", BATH_TEMP_MK)))))
    return eta, omega_c, beta


def create_bath(params: Optional[Mapping[str, Any]] = None) -> AbstractBath:
    """Build a bath from a parameter mapping (the ``bath:`` YAML section).

    Raises
    ------
    ConfigurationError
        Unknown / callable-only ``bath_type`` or invalid parameters.
    """
    params = dict(params or {})
    # YAML 1.1 reads "1e-4" as a string; normalize numeric strings
    for key, value in params.items():
        if isinstance(value, str) and key != "bath_type":
            try:
                params[key] = float(value)
            except ValueError as exc:
                raise ConfigurationError(f"bath.{key} must be numeric, got {value!r}") from exc

    validate(params)
    bath_type = str(params.get("bath_type", BATH_TYPE))
    angular = "omega_c" in params or "beta" in params

    if bath_type == "ohmic":
        if angular:
            bath = OhmicBath(*_angular_ohmic(params))
        else:
            bath = Ohmic(
                float(params.get("coupling", BATH_COUPLING)),
                float(params.get("cutoff", BATH_CUTOFF_GHZ)),
                float(params.get("temperature", BATH_TEMP_MK)),
            )
    elif bath_type == "hybrid_ohmic":
        mrt_width = float(params.get("mrt_width", BATH_MRT_WIDTH_MK))
        if angular or "W" in params:
            W = float(params.get("W", TWOPI * temperature_2_freq(mrt_width)))
            bath = HybridOhmicBath(W, *_angular_ohmic(params))
        else:
            bath = HybridOhmic(
                mrt_width,
                float(params.get("coupling", BATH_COUPLING)),
                float(params.get("cutoff", BATH_CUTOFF_GHZ)),
                float(params.get("temperature", BATH_TEMP_MK)),
            )
    elif bath_type == "rtn":
        bath = SymmetricRTN(float(np.ravel(params["b"])[0]), float(np.ravel(params["nu"])[0]))
    else:  # ensemble_fluctuator, enforced by validate
        bath = EnsembleFluctuator(
            [float(x) for x in np.atleast_1d(params["b"])],
            [float(x) for x in np.atleast_1d(params["nu"])],
        )

    logger.debug("created %s", bath)
    return bath


def load_bath(path: Optional[str | Path] = None) -> AbstractBath:
    """Load a bath from the ``bath:`` section of a YAML file, or defaults."""
    # LOAD / FALLBACK
    if path is None:
        cfg_root = {}
    else:
        cfg_root = _read_yaml(Path(path))
    return create_bath(_get_section(cfg_root, "bath"))

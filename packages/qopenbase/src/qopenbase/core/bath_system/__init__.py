"""
Bath system module for qopenbase package.

This module provides the noise-bath models used in open quantum system
dynamics together with a uniform evaluation contract:

- Ohmic bath: oscillator bath with exponential cutoff
- Hybrid Ohmic bath: Ohmic bath broadened by low-frequency Gaussian noise
- Random telegraph noise: single fluctuator and fluctuator ensembles
- Custom bath: user supplied correlation / spectrum closures
- Correlated bath: spectrum matrix over pairs of system operators

The registry turns any bath into (matrices of) closures for dissipator
construction, and the timescale estimator checks Markovian validity.
"""

# BATH MODELS

from .base import AbstractBath
from .ohmic import OhmicBath, Ohmic
from .hybrid_ohmic import HybridOhmicBath, HybridOhmic
from .fluctuators import SymmetricRTN, EnsembleFluctuator
from .custom import CustomBath, from_environment
from .correlated import CorrelatedBath

# REGISTRY

from .registry import (
    BathFunctionMatrix,
    TwoTimeCorrelation,
    register_builders,
    registered_tags,
    build_correlation,
    build_spectrum,
    build_lamb_shift,
)

# TIMESCALES

from .timescales import tau_SB, tau_B, coarse_grain_timescale

# FUNCTIONAL API

from .bath_fcts import (
    correlation,
    spectrum,
    gamma,
    S,
    bath_to_rates,
    bath_to_decay_rates,
    bath_to_dephasing_rate,
    dephasing_rate_to_eta,
    decay_rate_to_eta,
    extract_bath_parameters,
)


# PUBLIC API

__all__ = [
    # bath models
    "AbstractBath",
    "OhmicBath",
    "Ohmic",
    "HybridOhmicBath",
    "HybridOhmic",
    "SymmetricRTN",
    "EnsembleFluctuator",
    "CustomBath",
    "from_environment",
    "CorrelatedBath",
    # registry
    "BathFunctionMatrix",
    "TwoTimeCorrelation",
    "register_builders",
    "registered_tags",
    "build_correlation",
    "build_spectrum",
    "build_lamb_shift",
    # timescales
    "tau_SB",
    "tau_B",
    "coarse_grain_timescale",
    # functional API
    "correlation",
    "spectrum",
    "gamma",
    "S",
    "bath_to_rates",
    "bath_to_decay_rates",
    "bath_to_dephasing_rate",
    "dephasing_rate_to_eta",
    "decay_rate_to_eta",
    "extract_bath_parameters",
]

"""
qopenbase - bath and Hamiltonian core for open quantum system dynamics

A Python package providing the numeric core that master equation drivers
call into:

- Bath models (Ohmic, hybrid Ohmic, telegraph noise, custom, correlated)
  with correlation, spectrum and Lamb-shift kernels
- A registry of bath closures for dissipator construction
- Correlation timescales for Markovian validity checks
- Time-dependent dense Hamiltonians with an in-place derivative action
- Lindblad, unitary-frame Lindblad and Davies dissipators

Units: frequencies in GHz at the user surface (2π GHz internally), times in
ns, temperatures in mK.

Main subpackages:
- config: Defaults, validation and the YAML bath loader
- core: Bath models, registry, timescales, Hamiltonians, dissipators
- utils: Constants, unit conversions, quadrature, logging
"""

__version__ = "0.1.0"
__author__ = "Leopold"
__email__ = ""


# EXPLICIT IMPORTS ONLY (no lazy imports)

from .errors import ConfigurationError, NumericalError

# Core exports
from .core import (
    OhmicBath,
    Ohmic,
    HybridOhmicBath,
    HybridOhmic,
    SymmetricRTN,
    EnsembleFluctuator,
    CustomBath,
    from_environment,
    CorrelatedBath,
    build_correlation,
    build_spectrum,
    build_lamb_shift,
    tau_SB,
    tau_B,
    coarse_grain_timescale,
    correlation,
    spectrum,
    gamma,
    S,
    UnitTime,
    AffineOperator,
    DenseHamiltonian,
    p_copy,
    eigen_decomp,
    LindbladDissipator,
    ULindblad,
    DaviesDissipator,
)

# Config exports (loader imported after core to avoid partial init)
from .config import validate
from .config.create_bath_obj import create_bath, load_bath


# PUBLIC API - MOST COMMONLY USED
__all__ = [
    # Errors
    "ConfigurationError",
    "NumericalError",
    # Bath models
    "OhmicBath",
    "Ohmic",
    "HybridOhmicBath",
    "HybridOhmic",
    "SymmetricRTN",
    "EnsembleFluctuator",
    "CustomBath",
    "from_environment",
    "CorrelatedBath",
    # Registry
    "build_correlation",
    "build_spectrum",
    "build_lamb_shift",
    # Timescales
    "tau_SB",
    "tau_B",
    "coarse_grain_timescale",
    # Bath functions
    "correlation",
    "spectrum",
    "gamma",
    "S",
    # Hamiltonians
    "UnitTime",
    "AffineOperator",
    "DenseHamiltonian",
    "p_copy",
    "eigen_decomp",
    # Dissipators
    "LindbladDissipator",
    "ULindblad",
    "DaviesDissipator",
    # Configuration
    "validate",
    "create_bath",
    "load_bath",
]

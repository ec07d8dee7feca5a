"""
Core module for qopenbase package.

This module provides the building blocks for open quantum system dynamics:
- Bath models with correlation / spectrum / Lamb-shift kernels
- A registry turning any bath into closures for dissipator construction
- Correlation timescale estimates (Markovian validity checks)
- Time-dependent dense Hamiltonians with an in-place derivative action
- Lindblad-type dissipators sharing the same derivative contract
"""

# BATH SYSTEMS
from .bath_system import (
    AbstractBath,
    OhmicBath,
    Ohmic,
    HybridOhmicBath,
    HybridOhmic,
    SymmetricRTN,
    EnsembleFluctuator,
    CustomBath,
    from_environment,
    CorrelatedBath,
    BathFunctionMatrix,
    register_builders,
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
    bath_to_rates,
    extract_bath_parameters,
)


# HAMILTONIANS
from .hamiltonian import (
    UnitTime,
    AffineOperator,
    DenseHamiltonian,
    p_copy,
    eigen_decomp,
)


# DISSIPATORS
from .opensys import (
    lindblad_term,
    LindbladDissipator,
    ULindblad,
    DaviesDissipator,
)


# PUBLIC API

__all__ = [
    # Bath models
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
    # Registry
    "BathFunctionMatrix",
    "register_builders",
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
    "bath_to_rates",
    "extract_bath_parameters",
    # Hamiltonians
    "UnitTime",
    "AffineOperator",
    "DenseHamiltonian",
    "p_copy",
    "eigen_decomp",
    # Dissipators
    "lindblad_term",
    "LindbladDissipator",
    "ULindblad",
    "DaviesDissipator",
]

"""Utility helpers for qopenbase (simple explicit re-exports)."""

from __future__ import annotations

from .constants import (
    HBAR,
    BOLTZMANN,
    PLANCK,
    BOLTZMANN_SI,
    TWOPI,
    temperature_2_freq,
    temperature_2_beta,
    beta_2_temperature,
    is_qutip_qobj,
    as_dense_matrix,
)
from .logging_setup import get_logger
from .quadrature import (
    integrate,
    integrate_matrix,
    fourier_transform,
    principal_value,
)

__all__ = [
    # constants
    "HBAR",
    "BOLTZMANN",
    "PLANCK",
    "BOLTZMANN_SI",
    "TWOPI",
    "temperature_2_freq",
    "temperature_2_beta",
    "beta_2_temperature",
    "is_qutip_qobj",
    "as_dense_matrix",
    # logging
    "get_logger",
    # quadrature
    "integrate",
    "integrate_matrix",
    "fourier_transform",
    "principal_value",
]

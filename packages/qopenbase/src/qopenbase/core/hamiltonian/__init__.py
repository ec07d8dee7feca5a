"""
Hamiltonian module for qopenbase package.

Time-dependent Hamiltonians of the affine form H(t) = Σ_k f_k(t) M_k with an
in-place evaluation buffer, the derivative action used by ODE drivers, and
eigen-decomposition for adiabatic-frame analysis.
"""

from .time_units import UnitTime
from .affine_operator import AffineOperator, unit_scale
from .dense_hamiltonian import DenseHamiltonian, p_copy, eigen_decomp


# PUBLIC API

__all__ = [
    "UnitTime",
    "AffineOperator",
    "unit_scale",
    "DenseHamiltonian",
    "p_copy",
    "eigen_decomp",
]

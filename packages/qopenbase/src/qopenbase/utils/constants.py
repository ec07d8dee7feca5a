"""Core physical constants and unit conversion helpers.

Lightweight module: safe to import from any layer without triggering
expensive or circular imports. Keep ONLY primitive constants and pure
functions here.

Unit convention of the package:
    frequencies  -> GHz (linear) at the user surface, 2π GHz (angular) internally
    times        -> ns
    temperatures -> mK
"""

from __future__ import annotations

from typing import Any, Sequence
import numpy as np

__all__ = [
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
]


# FUNDAMENTAL CONSTANTS (natural units inside project)

HBAR: float = 1.0  # Reduced Planck constant
BOLTZMANN: float = 1.0  # Boltzmann constant

PLANCK: float = 6.62607015e-34  # [J s]
BOLTZMANN_SI: float = 1.380649e-23  # [J / K]
TWOPI: float = 2 * np.pi

_MK_TO_K: float = 1e-3
_HZ_TO_GHZ: float = 1e-9


def temperature_2_freq(T: float) -> float:
    """Convert a temperature in mK to the thermal frequency k_B T / h in GHz."""
    return BOLTZMANN_SI * T * _MK_TO_K / PLANCK * _HZ_TO_GHZ


def temperature_2_beta(T: float) -> float:
    """Convert a temperature in mK to the inverse temperature β = ħ / (k_B T) in ns.

    β pairs with angular frequencies [2π GHz] in every bath formula.
    """
    return 1 / (TWOPI * temperature_2_freq(T))


def beta_2_temperature(beta: float) -> float:
    """Inverse of :func:`temperature_2_beta` (ns -> mK)."""
    return PLANCK / (BOLTZMANN_SI * TWOPI * beta * _MK_TO_K * _HZ_TO_GHZ)


def is_qutip_qobj(x: Any) -> bool:
    """Return True if ``x`` looks like a QuTiP ``Qobj`` without importing qutip.

    Detection is done via duck-typing on class name and module path.
    """
    cls = x.__class__
    mod = getattr(cls, "__module__", "")
    return getattr(cls, "__name__", "") == "Qobj" and mod.startswith("qutip")


def as_dense_matrix(obj: Any) -> np.ndarray:
    """Return a fresh complex 2D ``ndarray`` copy of ``obj``.

    Supported inputs:
    - numpy.ndarray (copied)
    - QuTiP Qobj (via ``.full()``)
    - nested sequences of numbers
    """
    if is_qutip_qobj(obj):
        return np.array(obj.full(), dtype=complex)
    if isinstance(obj, np.ndarray):
        return np.array(obj, dtype=complex, copy=True)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        return np.array(obj, dtype=complex)
    raise TypeError(f"Unsupported matrix type: {type(obj)!r}")

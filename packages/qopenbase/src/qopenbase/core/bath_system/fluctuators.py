"""Random telegraph noise (RTN) baths.

A symmetric telegraph fluctuator with amplitude b and switching rate ν::

    C(τ) = b² exp(-ν|τ|)
    γ(ω) = 2 b² ν / (ν² + ω²)

An ensemble of independent fluctuators sums the single-fluctuator terms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

import numpy as np
from numpy.typing import ArrayLike

from ...errors import ConfigurationError
from .base import AbstractBath, require_positive

__all__ = ["SymmetricRTN", "EnsembleFluctuator"]


def _rtn_correlation(tau: np.ndarray, b: float, nu: float) -> np.ndarray:
    return b**2 * np.exp(-nu * np.abs(tau))


def _rtn_spectrum(w: np.ndarray, b: float, nu: float) -> np.ndarray:
    return 2 * b**2 * nu / (w**2 + nu**2)


@dataclass(frozen=True)
class SymmetricRTN(AbstractBath):
    """Single symmetric random telegraph fluctuator."""

    b: float
    nu: float

    tag: ClassVar[str] = "rtn"

    def __post_init__(self) -> None:
        require_positive(nu=self.nu)

    def correlation(self, t1: float | ArrayLike, t2: float | ArrayLike | None = None):
        tau = np.asarray(t1 if t2 is None else np.subtract(t1, t2), dtype=float)
        result = _rtn_correlation(tau, self.b, self.nu)
        return result.item() if tau.ndim == 0 else result

    def spectrum(self, w: float | ArrayLike):
        w = np.asarray(w, dtype=float)
        result = _rtn_spectrum(w, self.b, self.nu)
        return result.item() if w.ndim == 0 else result

    def _correlation(self, tau: float) -> float:
        return self.correlation(tau)

    def _spectrum(self, w: float) -> float:
        return self.spectrum(w)

    def summary(self) -> str:
        return f"SymmetricRTN [rtn]: b = {self.b:.4g} | ν = {self.nu:.4g}"


@dataclass(frozen=True)
class EnsembleFluctuator(AbstractBath):
    """Ensemble of independent symmetric telegraph fluctuators.

    Attributes
    ----------
    b : tuple[float, ...]
        Coupling amplitudes b_i.
    nu : tuple[float, ...]
        Switching rates ν_i, same length as ``b``.
    """

    b: Sequence[float]
    nu: Sequence[float]

    tag: ClassVar[str] = "ensemble_fluctuator"

    def __post_init__(self) -> None:
        object.__setattr__(self, "b", tuple(float(x) for x in self.b))
        object.__setattr__(self, "nu", tuple(float(x) for x in self.nu))
        if len(self.b) == 0:
            raise ConfigurationError("EnsembleFluctuator needs at least one fluctuator")
        if len(self.b) != len(self.nu):
            raise ConfigurationError(
                f"b ({len(self.b)}) and nu ({len(self.nu)}) must have the same length"
            )
        for i, nu_i in enumerate(self.nu):
            require_positive(**{f"nu[{i}]": nu_i})

    @property
    def n_fluctuators(self) -> int:
        return len(self.b)

    def correlation(self, t1: float | ArrayLike, t2: float | ArrayLike | None = None):
        tau = np.asarray(t1 if t2 is None else np.subtract(t1, t2), dtype=float)
        result = np.zeros_like(tau)
        for b_i, nu_i in zip(self.b, self.nu):
            result = result + _rtn_correlation(tau, b_i, nu_i)
        return result.item() if tau.ndim == 0 else result

    def spectrum(self, w: float | ArrayLike):
        w = np.asarray(w, dtype=float)
        result = np.zeros_like(w)
        for b_i, nu_i in zip(self.b, self.nu):
            result = result + _rtn_spectrum(w, b_i, nu_i)
        return result.item() if w.ndim == 0 else result

    def _correlation(self, tau: float) -> float:
        return self.correlation(tau)

    def _spectrum(self, w: float) -> float:
        return self.spectrum(w)

    def summary(self) -> str:
        return f"EnsembleFluctuator [ensemble_fluctuator]: {self.n_fluctuators} fluctuators"

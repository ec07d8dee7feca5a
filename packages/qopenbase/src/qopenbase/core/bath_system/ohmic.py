"""Ohmic oscillator bath.

Spectral density (rate kernel) in angular units::

    γ(ω) = 2π η ω exp(-|ω|/ωc) / (1 - exp(-βω))

with the ω → 0 limit γ(0) = 2π η / β taken analytically. The correlation
function is the closed form of the inverse Fourier transform::

    C(τ) = η/β² [ψ'(1 + 1/(βωc) - iτ/β) + ψ'(1/(βωc) + iτ/β)]

where ψ' = ζ(2, ·) is the trigamma function (Hurwitz zeta via mpmath).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from numpy.typing import ArrayLike
from mpmath import mp

from ...utils.constants import TWOPI, temperature_2_beta
from .base import AbstractBath, require_positive

__all__ = ["OhmicBath", "Ohmic"]


@dataclass(frozen=True)
class OhmicBath(AbstractBath):
    """Ohmic bath with exponential cutoff.

    Attributes
    ----------
    eta : float
        Dimensionless coupling strength η.
    omega_c : float
        Cutoff frequency ωc [2π GHz].
    beta : float
        Inverse temperature β [ns]; ``np.inf`` for zero temperature.
    """

    eta: float
    omega_c: float
    beta: float

    tag: ClassVar[str] = "ohmic"

    def __post_init__(self) -> None:
        require_positive(eta=self.eta, omega_c=self.omega_c, beta=self.beta)

    @property
    def zero_temperature(self) -> bool:
        return bool(np.isinf(self.beta))

    def spectrum(self, w: float | ArrayLike) -> float | np.ndarray:
        """γ(ω); compatible with scalar and array inputs."""
        w = np.asarray(w, dtype=float)
        result = np.zeros_like(w)

        zero_mask = w == 0
        pos_mask = w > 0
        neg_mask = w < 0

        w_pos = w[pos_mask]
        w_neg = np.abs(w[neg_mask])
        if self.zero_temperature:
            result[zero_mask] = 0.0
            result[pos_mask] = TWOPI * self.eta * w_pos * np.exp(-w_pos / self.omega_c)
            # no absorption at T = 0
        else:
            # analytic limit, never 0/0
            result[zero_mask] = 2 * np.pi * self.eta / self.beta
            result[pos_mask] = (
                TWOPI
                * self.eta
                * w_pos
                * np.exp(-w_pos / self.omega_c)
                / (-np.expm1(-self.beta * w_pos))
            )
            # detailed balance form of ω/(1 - e^{-βω}) for ω < 0 (no overflow)
            result[neg_mask] = (
                TWOPI
                * self.eta
                * w_neg
                * np.exp(-w_neg / self.omega_c - self.beta * w_neg)
                / (-np.expm1(-self.beta * w_neg))
            )

        return result.item() if w.ndim == 0 else result

    def _spectrum(self, w: float) -> float:
        return self.spectrum(w)

    def _correlation(self, tau: float) -> complex:
        if self.zero_temperature:
            return self.eta / (1 / self.omega_c + 1j * tau) ** 2
        x2 = 1 / self.beta / self.omega_c
        x1 = 1j * tau / self.beta
        trigamma = mp.zeta(2, 1 + x2 - x1) + mp.zeta(2, x2 + x1)
        return self.eta * complex(trigamma) / self.beta**2

    def summary(self) -> str:
        return (
            f"OhmicBath [ohmic]: η = {self.eta:.3e} | "
            f"ωc = {self.omega_c:.4g} 2πGHz | β = {self.beta:.4g} ns"
        )


def Ohmic(eta: float, fc: float, T: float) -> OhmicBath:
    """Build an :class:`OhmicBath` from physical units.

    Parameters
    ----------
    eta : float
        Dimensionless coupling strength.
    fc : float
        Cutoff frequency [GHz].
    T : float
        Temperature [mK].
    """
    require_positive(fc=fc, T=T)
    return OhmicBath(eta, TWOPI * fc, temperature_2_beta(T))

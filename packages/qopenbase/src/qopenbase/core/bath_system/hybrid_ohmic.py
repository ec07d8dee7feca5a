"""Hybrid bath: low-frequency (MRT) Gaussian noise on top of an Ohmic bath.

The low-frequency part broadens the Ohmic high-frequency part::

    G_L(ω) = sqrt(π/2)/W · exp(-(ω - 4ε_L)² / (8W²)),   ε_L = W²β/2
    G_H(ω) = γ_ohmic(ω) / (ω² + γ_ohmic(0)² / 4)
    γ(ω)   = (1/2π) ∫ G_L(ω - x) G_H(x) dx

In the time domain the convolution becomes a product, and the Gaussian
factor is available in closed form::

    C(τ) = exp(-4iε_L τ - 2W²τ²) · C_H(τ)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from ...config.quadrature import QUAD_ATOL, QUAD_LIMIT, QUAD_RTOL
from ...errors import ConfigurationError
from ...utils.constants import TWOPI, temperature_2_beta, temperature_2_freq
from ...utils.quadrature import fourier_transform, integrate
from .base import AbstractBath, require_positive
from .ohmic import OhmicBath

__all__ = ["HybridOhmicBath", "HybridOhmic"]

# Gaussian window half-width in units of its standard deviation (2W)
_GAUSS_WINDOW_SIGMAS: float = 10.0


@dataclass(frozen=True)
class HybridOhmicBath(AbstractBath):
    """Ohmic bath with additional low-frequency Gaussian broadening.

    Attributes
    ----------
    W : float
        MRT width of the low-frequency noise [2π GHz].
    eta, omega_c, beta : float
        Parameters of the underlying :class:`OhmicBath`.
    """

    W: float
    eta: float
    omega_c: float
    beta: float

    _ohmic: OhmicBath = field(init=False, repr=False, compare=False)

    tag: ClassVar[str] = "hybrid_ohmic"

    def __post_init__(self) -> None:
        require_positive(W=self.W)
        if np.isinf(self.beta):
            raise ConfigurationError("hybrid bath needs a finite beta (T > 0)")
        object.__setattr__(self, "_ohmic", OhmicBath(self.eta, self.omega_c, self.beta))

    @property
    def eps_l(self) -> float:
        """Reorganization energy of the low-frequency noise, ε_L = W²β/2."""
        return self.W**2 * self.beta / 2

    def G_L(self, w: float) -> float:
        return np.sqrt(np.pi / 2) / self.W * np.exp(-((w - 4 * self.eps_l) ** 2) / (8 * self.W**2))

    def G_H(self, w: float) -> float:
        # Lorentzian of half-width γ(0)/2, area 2π around ω = 0
        gamma_0 = self._ohmic.spectrum(0.0)
        return self._ohmic.spectrum(w) / (w**2 + gamma_0**2 / 4)

    def _spectrum(self, w: float) -> float:
        center = w - 4 * self.eps_l
        half_width = _GAUSS_WINDOW_SIGMAS * 2 * self.W
        a, b = center - half_width, center + half_width
        points = [0.0] if a < 0.0 < b else None

        def integrand(x: float) -> float:
            return self.G_L(w - x) * self.G_H(x)

        value, _ = integrate(
            integrand,
            a,
            b,
            QUAD_RTOL,
            QUAD_ATOL,
            QUAD_LIMIT,
            points=points,
            label=f"hybrid spectrum at w={w}",
        )
        return value / TWOPI

    def _correlation(self, tau: float) -> complex:
        c_h, _ = fourier_transform(
            self.G_H, tau, QUAD_RTOL, QUAD_ATOL, QUAD_LIMIT, label="hybrid high-frequency correlation"
        )
        return np.exp(-4j * self.eps_l * tau - 2 * self.W**2 * tau**2) * c_h

    def summary(self) -> str:
        return (
            f"HybridOhmicBath [hybrid_ohmic]: W = {self.W:.4g} 2πGHz | ε_L = {self.eps_l:.4g} | "
            f"η = {self.eta:.3e} | ωc = {self.omega_c:.4g} 2πGHz | β = {self.beta:.4g} ns"
        )


def HybridOhmic(W: float, eta: float, fc: float, T: float) -> HybridOhmicBath:
    """Build a :class:`HybridOhmicBath` from physical units.

    Parameters
    ----------
    W : float
        MRT width [mK].
    eta : float
        Ohmic coupling strength.
    fc : float
        Ohmic cutoff frequency [GHz].
    T : float
        Temperature [mK].
    """
    require_positive(W=W, fc=fc, T=T)
    return HybridOhmicBath(TWOPI * temperature_2_freq(W), eta, TWOPI * fc, temperature_2_beta(T))

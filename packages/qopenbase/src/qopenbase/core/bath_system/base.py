"""Common evaluation contract of all bath models.

Every bath is an immutable (frozen) dataclass that provides

- ``correlation(t1, t2=None)``: bath correlation function. The two-time form
  is *defined* through the time difference, ``C(t1, t2) = C(t1 - t2)``.
- ``spectrum(w)`` / ``gamma(w)``: one-sided power spectral density (the rate
  kernel used by dissipators).
- ``S(w)``: principal-value Hilbert transform of ``gamma`` (Lamb shift).

Subclasses implement the scalar kernels ``_correlation`` and ``_spectrum``;
vectorization over numpy arrays is handled here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar

import numpy as np

from ...config.quadrature import PV_EXCLUSION_RADIUS, QUAD_ATOL, QUAD_LIMIT, QUAD_RTOL
from ...errors import ConfigurationError
from ...utils.quadrature import principal_value

__all__ = ["AbstractBath", "map_scalar", "require_positive"]


def map_scalar(fn: Callable[[float], Any], x: Any, dtype: type = float) -> Any:
    """Apply a scalar kernel to a scalar or element-wise to an array.

    Scalars in -> Python scalar out; arrays in -> ndarray of ``dtype`` out.
    """
    if np.ndim(x) == 0:
        return fn(float(x))
    arr = np.asarray(x, dtype=float)
    out = np.empty(arr.shape, dtype=dtype)
    for idx, val in np.ndenumerate(arr):
        out[idx] = fn(float(val))
    return out


def require_positive(**params: float) -> None:
    """Raise ConfigurationError unless every given parameter is > 0 (NaN rejected)."""
    for name, value in params.items():
        if not value > 0:
            raise ConfigurationError(f"{name} must be > 0, got {value!r}")


@dataclass(frozen=True)
class AbstractBath:
    """Base class; subclasses set ``tag`` and the scalar kernels."""

    tag: ClassVar[str] = ""

    # --- scalar kernels (override) --------------------------------------------
    def _correlation(self, tau: float) -> complex:
        raise ConfigurationError(f"{type(self).__name__} defines no correlation function")

    def _spectrum(self, w: float) -> float:
        raise ConfigurationError(f"{type(self).__name__} defines no scalar spectrum")

    # --- public evaluation contract -------------------------------------------
    def correlation(self, t1: float | np.ndarray, t2: float | np.ndarray | None = None):
        """Correlation function C(τ); with two arguments C(t1, t2) = C(t1 - t2)."""
        tau = t1 if t2 is None else np.subtract(t1, t2)
        return map_scalar(self._correlation, tau, dtype=complex)

    def spectrum(self, w: float | np.ndarray):
        """One-sided power spectral density γ(ω)."""
        return map_scalar(self._spectrum, w)

    def gamma(self, w: float | np.ndarray):
        """Rate kernel; identical to :meth:`spectrum`."""
        return self.spectrum(w)

    def S(
        self,
        w: float | np.ndarray,
        rtol: float = QUAD_RTOL,
        atol: float = QUAD_ATOL,
        limit: int = QUAD_LIMIT,
        radius: float = PV_EXCLUSION_RADIUS,
    ):
        """Principal value ``(1/2π) P.V. ∫ γ(x)/(ω - x) dx``.

        Raises
        ------
        NumericalError
            If the quadrature does not converge or γ is not integrable at ω.
        """

        def kernel(x: float) -> float:
            return principal_value(self._spectrum, x, rtol, atol, limit, radius)[0]

        return map_scalar(kernel, w)

    def summary(self) -> str:
        return f"{type(self).__name__} [{self.tag}]"

    def __str__(self) -> str:
        return self.summary()

"""Adaptive quadrature helpers built on :mod:`scipy.integrate`.

All helpers return ``(value, error_bound)`` and convert every QUADPACK
warning into :class:`~qopenbase.errors.NumericalError`; a result that did not
reach the requested tolerance is never handed back silently.
"""

from __future__ import annotations

import warnings
from typing import Callable, Sequence

import numpy as np
from scipy.integrate import IntegrationWarning, quad, quad_vec

from ..config.quadrature import (
    PV_EXCLUSION_RADIUS,
    PV_CHECK_FACTORS,
    QUAD_ATOL,
    QUAD_LIMIT,
    QUAD_RTOL,
)
from ..errors import NumericalError
from .constants import TWOPI
from .logging_setup import get_logger

__all__ = [
    "integrate",
    "integrate_matrix",
    "fourier_transform",
    "principal_value",
]

logger = get_logger(__name__)


def integrate(
    fn: Callable[[float], float],
    a: float,
    b: float,
    rtol: float = QUAD_RTOL,
    atol: float = QUAD_ATOL,
    limit: int = QUAD_LIMIT,
    points: Sequence[float] | None = None,
    weight: str | None = None,
    wvar: float | None = None,
    label: str = "integral",
) -> tuple[float, float]:
    """Integrate a real scalar function with ``scipy.integrate.quad``.

    Parameters
    ----------
    fn : callable
        Real valued integrand.
    a, b : float
        Integration limits (``±np.inf`` allowed).
    rtol, atol : float
        Relative / absolute tolerance.
    limit : int
        Maximum number of subintervals.
    points : sequence of float, optional
        Breakpoints (finite intervals only).
    weight, wvar : optional
        Passed through to ``quad`` (e.g. ``weight="cos"`` for Fourier integrals).
    label : str
        Name used in error messages.

    Returns
    -------
    tuple[float, float]
        (value, absolute error estimate)
    """
    kwargs = {"epsabs": atol, "epsrel": rtol, "limit": limit}
    if points is not None:
        kwargs["points"] = points
    if weight is not None:
        kwargs["weight"] = weight
        kwargs["wvar"] = wvar

    with warnings.catch_warnings():
        warnings.simplefilter("error", IntegrationWarning)
        try:
            value, err = quad(fn, a, b, **kwargs)
        except IntegrationWarning as exc:
            raise NumericalError(
                f"{label} on [{a}, {b}] did not converge: {exc}", tolerance=rtol, limit=limit
            ) from exc

    if not (np.isfinite(value) and np.isfinite(err)):
        raise NumericalError(
            f"{label} on [{a}, {b}] is not finite (value={value}, error={err})",
            tolerance=rtol,
            limit=limit,
        )
    logger.debug("%s on [%s, %s] = %.12g ± %.3g", label, a, b, value, err)
    return value, err


def integrate_matrix(
    fn: Callable[[float], np.ndarray],
    a: float,
    b: float,
    rtol: float,
    atol: float,
    label: str = "matrix integral",
) -> tuple[np.ndarray, float]:
    """Integrate an array valued function with ``scipy.integrate.quad_vec``."""
    if a == b:
        shape = np.shape(fn(a))
        return np.zeros(shape, dtype=complex), 0.0

    res, err, info = quad_vec(fn, a, b, epsabs=atol, epsrel=rtol, full_output=True)
    if not info.success:
        raise NumericalError(
            f"{label} on [{a}, {b}] did not converge: {info.message}", tolerance=rtol
        )
    return res, err


def fourier_transform(
    fn: Callable[[float], float],
    t: float,
    rtol: float = QUAD_RTOL,
    atol: float = QUAD_ATOL,
    limit: int = QUAD_LIMIT,
    label: str = "Fourier integral",
) -> tuple[complex, float]:
    """Return ``(1/2π) ∫ fn(w) exp(-i w t) dw`` over the real line.

    The integrand is split into its even and odd parts on ``[0, ∞)`` so that
    QUADPACK's oscillatory (QAWF) routine handles the tails.
    """

    def even(w: float) -> float:
        return fn(w) + fn(-w)

    def odd(w: float) -> float:
        return fn(w) - fn(-w)

    if t == 0:
        re, err = integrate(even, 0.0, np.inf, rtol, atol, limit, label=label)
        return complex(re / TWOPI), err / TWOPI

    tau = abs(t)
    re, err_re = integrate(even, 0.0, np.inf, rtol, atol, limit, weight="cos", wvar=tau, label=label)
    im, err_im = integrate(odd, 0.0, np.inf, rtol, atol, limit, weight="sin", wvar=tau, label=label)
    im = im if t > 0 else -im
    return complex(re, -im) / TWOPI, (err_re + err_im) / TWOPI


def principal_value(
    fn: Callable[[float], float],
    w: float,
    rtol: float = QUAD_RTOL,
    atol: float = QUAD_ATOL,
    limit: int = QUAD_LIMIT,
    radius: float = PV_EXCLUSION_RADIUS,
) -> tuple[float, float]:
    """Cauchy principal value ``(1/2π) P.V. ∫ fn(x) / (w - x) dx``.

    The half-lines left and right of the pole are folded onto ``u > 0``::

        P.V. ∫ fn(x)/(w - x) dx = ∫_0^∞ [fn(w - u) - fn(w + u)] / u du

    so the singular parts of the two halves cancel analytically. The
    neighborhood ``(0, radius)`` of the pole is integrated separately from
    ``(radius, ∞)``. Before integrating, the residue ``u * folded(u)`` is
    sampled at shrinking ``u``; if it does not vanish the singular parts did not
    cancel and the principal value does not exist.
    """

    def folded(u: float) -> float:
        return (fn(w - u) - fn(w + u)) / u

    residues = [abs(f * radius * folded(f * radius)) for f in PV_CHECK_FACTORS]
    if not all(np.isfinite(residues)) or (residues[-1] > atol and residues[-1] >= residues[0]):
        raise NumericalError(
            f"principal value at w={w}: singular parts do not cancel (residues {residues})",
            tolerance=atol,
            limit=limit,
        )

    label = f"principal value at w={w}"
    inner, err_inner = integrate(folded, 0.0, radius, rtol, atol, limit, label=label)
    outer, err_outer = integrate(folded, radius, np.inf, rtol, atol, limit, label=label)
    return (inner + outer) / TWOPI, (err_inner + err_outer) / TWOPI

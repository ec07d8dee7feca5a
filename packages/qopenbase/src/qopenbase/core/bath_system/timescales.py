"""Correlation timescales of a bath.

Diagnostics for the validity of Markovian / coarse-grained master equations::

    τ_SB = 1 / ∫_0^∞ |C(t)| dt                 system-bath interaction time
    τ_B  = τ_SB · ∫_0^lim t |C(t)| dt           bath correlation time
    τ_c  = sqrt(τ_SB · τ_B / 5)                 coarse-graining time

Every estimator returns ``(estimate, error)`` where ``error`` is the
propagated quadrature error bound.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ...config.bath_system import COARSE_GRAIN_DIVISOR, TAU_B_HORIZON
from ...config.quadrature import QUAD_ATOL, QUAD_LIMIT, QUAD_RTOL
from ...errors import NumericalError
from ...utils.logging_setup import get_logger
from ...utils.quadrature import integrate

__all__ = ["tau_SB", "tau_B", "coarse_grain_timescale"]

logger = get_logger(__name__)


def _abs_correlation(bath: Any):
    def fn(t: float) -> float:
        return abs(bath.correlation(t))

    return fn


def tau_SB(
    bath: Any,
    rtol: float = QUAD_RTOL,
    atol: float = QUAD_ATOL,
    limit: int = QUAD_LIMIT,
) -> tuple[float, float]:
    """System-bath interaction timescale ``1 / ∫_0^∞ |C(t)| dt``.

    Returns
    -------
    tuple[float, float]
        (τ_SB, error) with ``error = err_I / I²``.

    Raises
    ------
    NumericalError
        If the integral does not converge or vanishes.
    """
    value, err = integrate(_abs_correlation(bath), 0.0, np.inf, rtol, atol, limit, label="tau_SB")
    if value == 0:
        raise NumericalError("tau_SB: ∫|C(t)| dt vanished", tolerance=rtol, limit=limit)
    return 1 / value, err / value**2


def tau_B(
    bath: Any,
    lim: float,
    tau_sb: float,
    rtol: float = QUAD_RTOL,
    atol: float = QUAD_ATOL,
    limit: int = QUAD_LIMIT,
) -> tuple[float, float]:
    """Bath correlation timescale ``τ_SB · ∫_0^lim t |C(t)| dt``.

    Parameters
    ----------
    bath : AbstractBath
        Bath with a correlation function.
    lim : float
        Upper integration limit (horizon) of the first moment [ns].
    tau_sb : float
        System-bath timescale from :func:`tau_SB`.
    """
    abs_c = _abs_correlation(bath)

    def moment(t: float) -> float:
        return t * abs_c(t)

    value, err = integrate(moment, 0.0, lim, rtol, atol, limit, label="tau_B")
    return tau_sb * value, tau_sb * err


def coarse_grain_timescale(
    bath: Any,
    lim: float = TAU_B_HORIZON,
    rtol: float = QUAD_RTOL,
    atol: float = QUAD_ATOL,
    limit: int = QUAD_LIMIT,
) -> tuple[float, float]:
    """Coarse-graining timescale ``sqrt(τ_SB · τ_B / 5)``.

    ``lim`` is the horizon passed on to :func:`tau_B`; the divisor is fixed.
    The error is propagated to first order from both estimates.
    """
    t_sb, err_sb = tau_SB(bath, rtol, atol, limit)
    t_b, err_b = tau_B(bath, lim, t_sb, rtol, atol, limit)
    t_c = np.sqrt(t_sb * t_b / COARSE_GRAIN_DIVISOR)
    err = (err_sb * t_b + t_sb * err_b) / (2 * COARSE_GRAIN_DIVISOR) / t_c
    logger.debug(
        "timescales of %s: tau_SB=%.6g tau_B=%.6g tau_c=%.6g", bath.tag, t_sb, t_b, t_c
    )
    return t_c, err

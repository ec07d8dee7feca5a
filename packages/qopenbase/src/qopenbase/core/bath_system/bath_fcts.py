from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from ...errors import ConfigurationError
from ...utils.constants import TWOPI, beta_2_temperature
from .ohmic import OhmicBath

"""
Functional access to the bath models.

The bath is always the LAST positional argument, so that

    correlation(tau, bath), correlation(t1, t2, bath)
    spectrum(w, bath), gamma(w, bath), S(w, bath)

read like the formulas they evaluate. The rate helpers convert a bath into
master-equation rates and back, mirroring the QuTiP environment helpers.
"""


# BATH FUNCTIONS


def correlation(*args: Any):
    """
    Bath correlation function.

    correlation(tau, bath)      -> C(tau)
    correlation(t1, t2, bath)   -> C(t1 - t2)
    """
    if len(args) == 2:
        tau, bath = args
        return bath.correlation(tau)
    if len(args) == 3:
        t1, t2, bath = args
        return bath.correlation(t1, t2)
    raise TypeError(f"correlation expects (tau, bath) or (t1, t2, bath), got {len(args)} arguments")


def spectrum(w: float | ArrayLike, bath: Any) -> float | np.ndarray:
    """
    One-sided power spectral density γ(ω) of ``bath``.
    Compatible with scalar and array inputs.
    """
    return bath.spectrum(w)


def gamma(w: float | ArrayLike, bath: Any) -> float | np.ndarray:
    """Rate kernel γ(ω); alias of :func:`spectrum`."""
    return bath.gamma(w)


def S(w: float | ArrayLike, bath: Any, **kwargs: Any) -> float | np.ndarray:
    """
    Principal-value Hilbert transform of γ (Lamb shift kernel).

    Keyword arguments (rtol, atol, limit, radius) are passed on to the
    quadrature.
    """
    return bath.S(w, **kwargs)


# Convert bath to ME rates and vice versa
def bath_to_rates(bath: Any, w: float = None, mode: str = "decay") -> tuple[float, float] | float:
    """
    Wrapper to convert a bath into master equation rates.
    Args:
        bath: Bath instance.
        w: System transition frequency [2π GHz] (required for decay mode).
        mode: 'decay' for decay rates, 'deph' for dephasing rate.
    Returns:
        Decay rates (emission_rate, absorption_rate) or dephasing rate.
    """
    if mode == "decay":
        if w is None:
            raise ConfigurationError("System frequency w must be provided for decay mode.")
        return bath_to_decay_rates(bath, w)
    elif mode == "deph":
        return bath_to_dephasing_rate(bath)
    else:
        raise ConfigurationError("Invalid mode. Use 'decay' or 'deph'.")


def bath_to_decay_rates(bath: Any, w: float) -> tuple[float, float]:
    """
    Args:
        bath: Bath instance.
        w: System frequency.
    Returns:
        emission_rate: γ(+ω), relaxation.
        absorption_rate: γ(-ω), thermal excitation.
    """
    return bath.spectrum(w), bath.spectrum(-w)


def bath_to_dephasing_rate(bath: Any) -> float:
    """Pure dephasing rate γ(0)."""
    return bath.spectrum(0.0)


def dephasing_rate_to_eta(deph_rate: float, bath: OhmicBath) -> float:
    """
    Invert γ(0) = 2π η / β for the Ohmic coupling strength.
    Args:
        deph_rate: Pure dephasing rate.
        bath: OhmicBath providing β.
    Returns:
        eta: Coupling strength that produces ``deph_rate``.
    """
    if bath.zero_temperature:
        raise ConfigurationError("The dephasing rate of a zero temperature Ohmic bath is always 0.")
    return deph_rate * bath.beta / TWOPI


def decay_rate_to_eta(emission_rate: float, bath: OhmicBath, w: float) -> float:
    """
    Invert the Ohmic emission rate γ(ω) for the coupling strength.
    Args:
        emission_rate: Relaxation rate γ(+ω).
        bath: OhmicBath providing ωc and β.
        w: System frequency.
    Returns:
        eta: Coupling strength that produces ``emission_rate``.
    """
    # γ is linear in η, so the rate of the unit-coupling bath fixes η
    if w <= 0:
        raise ConfigurationError("w must be > 0 to determine eta from an emission rate.")
    unit_bath = OhmicBath(1.0, bath.omega_c, bath.beta)
    return emission_rate / unit_bath.spectrum(w)


def extract_bath_parameters(bath: Any, w0: float = None) -> dict:
    """
    Extract parameters from a bath instance for serialization / logging.

    The result contains a ``bath_type`` key and, for baths built from plain
    numbers, the fields ``create_bath`` needs to rebuild the instance.

    Args:
        bath: Bath instance.
        w0: Optional system frequency; adds γ(w0).

    Returns:
        dict: Dictionary containing the extractable bath parameters
    """
    params = {"bath_type": bath.tag}
    if bath.tag in ("ohmic", "hybrid_ohmic"):
        # angular units; "temperature" [mK] is informational
        params.update({"coupling": bath.eta, "omega_c": bath.omega_c, "beta": bath.beta})
        if not np.isinf(bath.beta):
            params["temperature"] = beta_2_temperature(bath.beta)
        if bath.tag == "hybrid_ohmic":
            params["W"] = bath.W
    elif bath.tag == "rtn":
        params.update({"b": bath.b, "nu": bath.nu})
    elif bath.tag == "ensemble_fluctuator":
        params.update({"b": list(bath.b), "nu": list(bath.nu)})
    elif bath.tag == "correlated":
        params.update({"pairs": [list(p) for p in bath.pairs]})

    if bath.tag != "correlated":
        params["gamma(0)"] = _spectrum_or_none(bath, 0.0)
        if w0 is not None:
            params["gamma(w0)"] = _spectrum_or_none(bath, w0)

    # Remove None values to keep dict clean
    return {k: v for k, v in params.items() if v is not None}


def _spectrum_or_none(bath: Any, w: float) -> float | None:
    if bath.tag == "custom" and bath.spectrum_fn is None:
        return None
    return bath.spectrum(w)

"""Tests for the bath models.

Covers:
- OhmicBath (analytic zero-frequency limit, detailed balance, Lamb shift,
  closed-form correlation vs. Fourier transform of the spectrum)
- HybridOhmicBath (construction checks, Gaussian broadening)
- CustomBath (pass-through, missing closures, qutip environments)
- SymmetricRTN / EnsembleFluctuator (closed forms)
- CorrelatedBath (pair bookkeeping)
"""

import numpy as np
import pytest

from qopenbase import ConfigurationError, NumericalError
from qopenbase.core.bath_system import (
    CorrelatedBath,
    CustomBath,
    EnsembleFluctuator,
    HybridOhmic,
    HybridOhmicBath,
    Ohmic,
    OhmicBath,
    SymmetricRTN,
    S,
    bath_to_decay_rates,
    bath_to_dephasing_rate,
    bath_to_rates,
    correlation,
    decay_rate_to_eta,
    dephasing_rate_to_eta,
    from_environment,
    gamma,
    spectrum,
)
from qopenbase.utils import TWOPI, beta_2_temperature, fourier_transform, temperature_2_beta


# =============================
# Helpers
# =============================

ETA = 1e-4
OMEGA_C = 8 * np.pi
BETA = 1 / 2.23


def _ohmic() -> OhmicBath:
    return OhmicBath(ETA, OMEGA_C, BETA)


def _step_spectrum(w):
    return 1.0 if w >= 0 else 0.0


# =============================
# OhmicBath
# =============================


def test_ohmic_two_time_correlation_is_stationary():
    bath = _ohmic()
    assert correlation(0.02, 0.01, bath) == correlation(0.01, bath)
    for t1, t2 in [(0.5, 0.2), (-1.0, 3.0), (2.0, 2.0)]:
        assert correlation(t1, t2, bath) == correlation(t1 - t2, bath)


def test_ohmic_zero_frequency_is_analytic_limit():
    bath = _ohmic()
    assert gamma(0.0, bath) == 2 * np.pi * ETA / BETA
    assert spectrum(0.0, bath) == 2 * np.pi * ETA / BETA


def test_ohmic_zero_frequency_is_continuous():
    bath = _ohmic()
    eps = 1e-7
    assert bath.spectrum(eps) == pytest.approx(bath.spectrum(0.0), rel=1e-5)
    assert bath.spectrum(-eps) == pytest.approx(bath.spectrum(0.0), rel=1e-5)


def test_ohmic_detailed_balance():
    bath = _ohmic()
    w = np.array([0.1, 1.0, 5.0, 30.0])
    np.testing.assert_allclose(bath.spectrum(-w), np.exp(-BETA * w) * bath.spectrum(w), rtol=1e-12)


def test_ohmic_scalar_and_array_agree():
    bath = _ohmic()
    w = np.linspace(-40, 40, 81)
    values = bath.spectrum(w)
    assert isinstance(bath.spectrum(1.0), float)
    assert values.shape == w.shape
    for wi, vi in zip(w, values):
        assert bath.spectrum(float(wi)) == pytest.approx(vi, rel=1e-14)


def test_ohmic_no_overflow_far_in_the_tail():
    bath = OhmicBath(ETA, OMEGA_C, 1e3)
    assert bath.spectrum(-1e3) == 0.0
    assert np.isfinite(bath.spectrum(1e3))


def test_ohmic_zero_temperature():
    bath = OhmicBath(ETA, OMEGA_C, np.inf)
    assert bath.zero_temperature
    assert bath.spectrum(0.0) == 0.0
    assert bath.spectrum(-1.0) == 0.0
    assert bath.spectrum(1.0) == pytest.approx(TWOPI * ETA * np.exp(-1.0 / OMEGA_C))
    assert bath.correlation(0.0) == pytest.approx(ETA * OMEGA_C**2)


def test_ohmic_lamb_shift_at_zero():
    bath = _ohmic()
    assert S(0.0, bath) == pytest.approx(-0.0025132734115775254, abs=1e-6)
    # γ(-u) - γ(u) = -2πηu e^{-u/ωc} makes S(0) = -η ωc exactly
    assert S(0.0, bath) == pytest.approx(-ETA * OMEGA_C, rel=1e-5)


def test_ohmic_correlation_is_hermitian_in_time():
    bath = _ohmic()
    for tau in [0.05, 0.3, 2.0]:
        assert bath.correlation(-tau) == pytest.approx(np.conj(bath.correlation(tau)), rel=1e-10)


def test_ohmic_correlation_matches_fourier_transform_of_spectrum():
    bath = _ohmic()
    tau = 0.3
    c_numeric, _ = fourier_transform(bath.spectrum, tau, rtol=1e-10, atol=1e-10)
    assert c_numeric == pytest.approx(bath.correlation(tau), rel=1e-5)


def test_ohmic_from_physical_units():
    bath = Ohmic(ETA, 4, 16)
    assert bath.omega_c == TWOPI * 4
    assert bath.beta == temperature_2_beta(16)
    # 16 mK correspond to ~0.333 GHz, i.e. 1/β = 2π · 0.333 GHz
    assert 1 / bath.beta == pytest.approx(TWOPI * 0.333386, rel=1e-5)
    assert beta_2_temperature(bath.beta) == pytest.approx(16.0, rel=1e-12)


@pytest.mark.parametrize(
    "eta, omega_c, beta",
    [(0.0, 1.0, 1.0), (-1e-4, 1.0, 1.0), (1e-4, 0.0, 1.0), (1e-4, 1.0, -2.0), (1e-4, 1.0, np.nan)],
)
def test_ohmic_rejects_non_positive_parameters(eta, omega_c, beta):
    with pytest.raises(ConfigurationError):
        OhmicBath(eta, omega_c, beta)


def test_ohmic_factory_rejects_non_positive_temperature():
    with pytest.raises(ConfigurationError):
        Ohmic(ETA, 4, 0.0)


def test_baths_are_immutable():
    bath = _ohmic()
    with pytest.raises(AttributeError):
        bath.eta = 1.0


# =============================
# HybridOhmicBath
# =============================


def test_hybrid_reorganization_energy():
    bath = HybridOhmicBath(0.5, 0.01, TWOPI * 4, 4.0)
    assert bath.eps_l == pytest.approx(0.5**2 * 4.0 / 2)


def test_hybrid_reference_values():
    bath = HybridOhmic(5, 0.01, 4, 12.5)
    assert spectrum(0.0, bath) == pytest.approx(1.7045312175373621, rel=1e-6)
    assert S(0.0, bath) == pytest.approx(-0.2872777516270734, rel=1e-5)


def test_hybrid_detailed_balance():
    bath = HybridOhmic(5, 0.01, 4, 12.5)
    w = 1.5
    assert bath.spectrum(-w) == pytest.approx(np.exp(-bath.beta * w) * bath.spectrum(w), rel=1e-6)


def test_hybrid_requires_finite_temperature_and_width():
    with pytest.raises(ConfigurationError):
        HybridOhmicBath(0.5, 0.01, TWOPI * 4, np.inf)
    with pytest.raises(ConfigurationError):
        HybridOhmicBath(0.0, 0.01, TWOPI * 4, 4.0)
    with pytest.raises(ConfigurationError):
        HybridOhmic(-1.0, 0.01, 4, 12.5)


# =============================
# CustomBath
# =============================


def test_custom_bath_passes_through():
    bath = CustomBath(correlation=lambda t: np.exp(-abs(t)), spectrum=lambda w: 2 / (1 + w**2))
    assert correlation(1, bath) == pytest.approx(np.exp(-1))
    assert correlation(2, 1, bath) == correlation(1, bath)
    assert spectrum(0, bath) == pytest.approx(2)
    np.testing.assert_allclose(bath.spectrum(np.array([0.0, 1.0])), [2.0, 1.0])


def test_custom_bath_lorentzian_lamb_shift():
    # Hilbert transform of 2/(1+x²) is 2x/(1+x²) · (1/2π) · π
    bath = CustomBath(spectrum=lambda w: 2 / (1 + w**2))
    for w in [0.0, 0.5, 2.0]:
        assert bath.S(w) == pytest.approx(w / (1 + w**2), abs=1e-7)


def test_custom_bath_missing_closures():
    with pytest.raises(ConfigurationError):
        CustomBath()
    with pytest.raises(ConfigurationError):
        CustomBath(correlation=1.0)
    bath = CustomBath(spectrum=lambda w: 1.0)
    with pytest.raises(ConfigurationError):
        bath.correlation(0.0)


def test_lamb_shift_of_discontinuous_spectrum_fails():
    bath = CustomBath(spectrum=_step_spectrum)
    with pytest.raises(NumericalError) as excinfo:
        bath.S(0.0)
    assert excinfo.value.tolerance is not None
    assert excinfo.value.limit is not None


def test_from_environment_wraps_qutip_environment():
    import qutip

    env = qutip.DrudeLorentzEnvironment(T=1.0, lam=0.1, gamma=1.0)
    bath = from_environment(env)
    assert isinstance(bath, CustomBath)
    assert bath.spectrum(0.7) == pytest.approx(float(np.real(env.power_spectrum(0.7))))
    assert bath.correlation(0.2) == pytest.approx(complex(env.correlation_function(0.2)))


def test_from_environment_rejects_other_objects():
    with pytest.raises(ConfigurationError):
        from_environment(_ohmic())


# =============================
# Random telegraph noise
# =============================


def test_single_fluctuator_closed_forms():
    rtn = SymmetricRTN(2.0, 2.0)
    assert correlation(3, rtn) == pytest.approx(4 * np.exp(-2 * 3), rel=1e-14)
    assert spectrum(2, rtn) == 2 * 4 * 2 / (4 + 4)
    assert correlation(5, 2, rtn) == correlation(3, rtn)


def test_ensemble_fluctuator_sums_members():
    ensemble = EnsembleFluctuator([1.0, 2.0], [2.0, 1.0])
    assert ensemble.n_fluctuators == 2
    assert correlation(3, ensemble) == pytest.approx(np.exp(-2 * 3) + 4 * np.exp(-3), rel=1e-14)
    assert spectrum(3, ensemble) == pytest.approx(2 * 2 / (9 + 4) + 2 * 4 / (9 + 1), rel=1e-14)


def test_ensemble_fluctuator_array_input():
    ensemble = EnsembleFluctuator([1.0, 2.0], [2.0, 1.0])
    t = np.array([0.0, 1.0, 3.0])
    expected = np.exp(-2 * t) + 4 * np.exp(-t)
    np.testing.assert_allclose(ensemble.correlation(t), expected, rtol=1e-14)


def test_fluctuator_validation():
    with pytest.raises(ConfigurationError):
        SymmetricRTN(1.0, 0.0)
    with pytest.raises(ConfigurationError):
        EnsembleFluctuator([1.0, 2.0], [1.0])
    with pytest.raises(ConfigurationError):
        EnsembleFluctuator([], [])
    with pytest.raises(ConfigurationError):
        EnsembleFluctuator([1.0], [-1.0])


# =============================
# CorrelatedBath
# =============================


def test_correlated_bath_pairs_and_size():
    bath = CorrelatedBath([(0, 1), (1, 0)], spectrum={(0, 1): _step_spectrum, (1, 0): _step_spectrum})
    assert bath.pairs == ((0, 1), (1, 0))
    assert bath.n_ops == 2


def test_correlated_bath_has_no_scalar_kernels():
    bath = CorrelatedBath([(0, 0)], spectrum=[[_step_spectrum]])
    with pytest.raises(ConfigurationError):
        bath.spectrum(0.0)
    with pytest.raises(ConfigurationError):
        bath.S(0.0)


def test_correlated_bath_validation():
    with pytest.raises(ConfigurationError):
        CorrelatedBath([], spectrum={})
    with pytest.raises(ConfigurationError):
        CorrelatedBath([(0, -1)], spectrum={(0, -1): _step_spectrum})
    with pytest.raises(ConfigurationError):
        CorrelatedBath([(0, 1)], spectrum={(1, 0): _step_spectrum})
    with pytest.raises(ConfigurationError):
        CorrelatedBath([(0, 0)], spectrum={(0, 0): 1.0})


# =============================
# Rate helpers
# =============================


def test_bath_to_rates_modes():
    bath = _ohmic()
    w = 2.0
    emission, absorption = bath_to_rates(bath, w)
    assert (emission, absorption) == bath_to_decay_rates(bath, w)
    assert emission == bath.spectrum(w)
    assert absorption == pytest.approx(np.exp(-BETA * w) * emission, rel=1e-12)
    assert bath_to_rates(bath, mode="deph") == bath_to_dephasing_rate(bath) == bath.spectrum(0.0)


def test_bath_to_rates_rejects_bad_input():
    bath = _ohmic()
    with pytest.raises(ConfigurationError):
        bath_to_rates(bath)
    with pytest.raises(ConfigurationError):
        bath_to_rates(bath, 1.0, mode="relax")


def test_rates_invert_to_coupling():
    bath = _ohmic()
    assert dephasing_rate_to_eta(bath_to_dephasing_rate(bath), bath) == pytest.approx(ETA, rel=1e-12)
    assert decay_rate_to_eta(bath.spectrum(3.0), bath, 3.0) == pytest.approx(ETA, rel=1e-12)
    with pytest.raises(ConfigurationError):
        dephasing_rate_to_eta(1.0, OhmicBath(ETA, OMEGA_C, np.inf))

"""Tests for the bath registry (build_correlation / build_spectrum / build_lamb_shift)."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
import pytest

from qopenbase import ConfigurationError
from qopenbase.core.bath_system import (
    BathFunctionMatrix,
    CorrelatedBath,
    CustomBath,
    EnsembleFluctuator,
    OhmicBath,
    SymmetricRTN,
    build_correlation,
    build_lamb_shift,
    build_spectrum,
    correlation,
    register_builders,
    registered_tags,
)
from qopenbase.core.bath_system.base import AbstractBath


# =============================
# Helpers
# =============================

ETA = 1e-4
OMEGA_C = 8 * np.pi
BETA = 1 / 2.23


def _gamma_step(w):
    return 1.0 if w >= 0 else np.exp(-0.5)


def _cross_coupled_bath() -> CorrelatedBath:
    return CorrelatedBath(
        ((0, 1), (1, 0)),
        spectrum=[[lambda w: 0, _gamma_step], [_gamma_step, lambda w: 0]],
    )


@dataclass(frozen=True)
class _FlatBath(AbstractBath):
    level: float

    tag: ClassVar[str] = "flat_test"

    def _spectrum(self, w):
        return self.level


# =============================
# Single-operator baths
# =============================


def test_ohmic_builders_are_one_by_one():
    bath = OhmicBath(ETA, OMEGA_C, BETA)
    cfun = build_correlation(bath)
    gfun = build_spectrum(bath)

    assert cfun.shape == (1, 1)
    assert gfun.shape == (1, 1)
    assert cfun[0, 0](0.02, 0.01) == correlation(0.01, bath)
    assert cfun[0, 0](0.01) == correlation(0.01, bath)
    assert gfun(0.0) == 2 * np.pi * ETA / BETA
    assert gfun[0, 0](0.0) == gfun(0.0)


@pytest.mark.parametrize(
    "bath",
    [
        SymmetricRTN(2.0, 2.0),
        EnsembleFluctuator([1.0, 2.0], [2.0, 1.0]),
        CustomBath(correlation=lambda t: np.exp(-abs(t)), spectrum=lambda w: 2 / (1 + w**2)),
    ],
)
def test_builders_agree_with_bath_methods(bath):
    cfun = build_correlation(bath)
    gfun = build_spectrum(bath)
    for t in [0.0, 0.5, 3.0]:
        assert cfun(t) == bath.correlation(t)
        assert cfun(t + 1.0, 1.0) == bath.correlation((t + 1.0) - 1.0)
    for w in [-1.0, 0.0, 2.0]:
        assert gfun(w) == bath.spectrum(w)


def test_lamb_shift_builder():
    bath = CustomBath(spectrum=lambda w: 2 / (1 + w**2))
    sfun = build_lamb_shift(bath)
    assert sfun.shape == (1, 1)
    assert sfun(0.5) == pytest.approx(0.5 / 1.25, abs=1e-7)


# =============================
# Correlated bath
# =============================


def test_correlated_spectrum_matrix():
    gm = build_spectrum(_cross_coupled_bath())
    assert gm.shape == (2, 2)
    for w in [-1.0, 0.0, 0.5, 3.0]:
        assert gm[0, 0](w) == 0
        assert gm[1, 1](w) == 0
    assert gm[0, 1](0.5) == 1.0
    assert gm[1, 0](0.5) == 1.0
    assert gm[0, 1](-0.5) == np.exp(-0.5)


def test_correlated_matrix_needs_indices():
    gm = build_spectrum(_cross_coupled_bath())
    with pytest.raises(TypeError):
        gm(0.5)
    with pytest.raises(IndexError):
        gm[2, 0]


def test_correlated_correlation_matrix():
    bath = CorrelatedBath(
        [(0, 0), (1, 1)],
        spectrum={(0, 0): _gamma_step, (1, 1): _gamma_step},
        correlation={(0, 0): lambda t: np.exp(-abs(t)), (1, 1): lambda t: 2 * np.exp(-abs(t))},
    )
    cm = build_correlation(bath)
    assert cm[0, 0](2.0, 1.0) == pytest.approx(np.exp(-1))
    assert cm[1, 1](1.0) == pytest.approx(2 * np.exp(-1))
    assert cm[0, 1](1.0) == 0.0


def test_correlated_without_correlation_or_lamb_shift():
    bath = _cross_coupled_bath()
    with pytest.raises(ConfigurationError):
        build_correlation(bath)
    with pytest.raises(ConfigurationError):
        build_lamb_shift(bath)


# =============================
# Registration
# =============================


def test_unknown_bath_is_rejected():
    with pytest.raises(ConfigurationError):
        build_spectrum(object())


def test_register_new_bath_kind():
    def spectrum_builder(bath):
        return BathFunctionMatrix({(0, 0): bath.spectrum}, 1)

    def unsupported(bath):
        raise ConfigurationError("not available")

    register_builders(_FlatBath.tag, unsupported, spectrum_builder, unsupported)
    assert "flat_test" in registered_tags()
    assert build_spectrum(_FlatBath(0.25))(3.0) == 0.25
    with pytest.raises(ConfigurationError):
        build_correlation(_FlatBath(0.25))

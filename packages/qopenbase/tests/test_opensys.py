"""Tests for the dissipators (LindbladDissipator, ULindblad, DaviesDissipator).

Covers:
- constant-rate Lindblad decay of a qubit
- ULindblad jump operator against a closed-form integral
- Davies generator: relaxation of the excited state, thermal fixed point,
  trace preservation with the Lamb shift
- Bohr frequency grouping
"""

import numpy as np
import pytest

from qopenbase import ConfigurationError
from qopenbase.core.bath_system import CorrelatedBath, CustomBath, OhmicBath, SymmetricRTN
from qopenbase.core.hamiltonian import DenseHamiltonian
from qopenbase.core.opensys import (
    DaviesDissipator,
    LindbladDissipator,
    ULindblad,
    bohr_frequency_groups,
    lindblad_term,
)
from qopenbase.utils import TWOPI


# =============================
# Helpers
# =============================

SX = np.array([[0, 1], [1, 0]], dtype=complex)
SY = np.array([[0, -1j], [1j, 0]], dtype=complex)
SZ = np.array([[1, 0], [0, -1]], dtype=complex)
SM = np.array([[0, 1], [0, 0]], dtype=complex)  # |0><1|

GROUND = np.diag([1.0, 0.0]).astype(complex)
EXCITED = np.diag([0.0, 1.0]).astype(complex)

W0 = TWOPI * 1.0  # qubit splitting [2π GHz]
OHMIC = OhmicBath(1e-4, 8 * np.pi, 1 / 2.23)


def _qubit_hamiltonian() -> DenseHamiltonian:
    # H = diag(0, ω0), already angular
    return DenseHamiltonian([lambda t: W0], [EXCITED], unit="hbar")


def _x_rotation(t: float) -> np.ndarray:
    # U(t) = exp(-i t σx)
    return np.cos(t) * np.eye(2) - 1j * np.sin(t) * SX


# =============================
# LindbladDissipator
# =============================


def test_lindblad_decay_of_excited_state():
    rate = 0.3
    diss = LindbladDissipator([SM], rate)
    du = np.zeros((2, 2), dtype=complex)
    diss.apply(du, EXCITED, 2.0, 0.0)
    np.testing.assert_allclose(du, 2.0 * rate * (GROUND - EXCITED), atol=1e-15)


def test_lindblad_term_is_traceless():
    rho = np.array([[0.6, 0.2 - 0.1j], [0.2 + 0.1j, 0.4]])
    for L in [SM, SX, SZ + 0.5 * SY]:
        assert np.trace(lindblad_term(L, rho)) == pytest.approx(0.0, abs=1e-15)


def test_lindblad_rates_are_checked():
    with pytest.raises(ConfigurationError):
        LindbladDissipator([SM], -1.0)
    with pytest.raises(ConfigurationError):
        LindbladDissipator([SM, SZ], [1.0])
    with pytest.raises(ConfigurationError):
        LindbladDissipator([], 1.0)


# =============================
# ULindblad
# =============================


def test_ulindblad_matches_closed_form():
    # ∫_0^5 U†σz U dτ = σz sin(10)/2 + σy (1 - cos 10)/2   for U = exp(-iτσx)
    t = 5.0
    L = SZ * np.sin(10) / 2 + SY * (1 - np.cos(10)) / 2
    plus = np.array([1.0, 1.0], dtype=complex) / np.sqrt(2)
    rho = np.outer(plus, plus.conj())

    ule = ULindblad([SZ], lambda tau: 1.0, _x_rotation, atol=1e-6, rtol=1e-6)
    np.testing.assert_allclose(ule.jump_operators(t)[0], L, atol=1e-6)

    du = np.zeros((2, 2), dtype=complex)
    ule.apply(du, rho, 1.0, t)
    expected = L @ rho @ L.conj().T - 0.5 * (L.conj().T @ L @ rho + rho @ L.conj().T @ L)
    np.testing.assert_allclose(du, expected, atol=1e-6, rtol=1e-6)


def test_ulindblad_vanishes_at_initial_time():
    ule = ULindblad([SZ], lambda tau: 1.0, _x_rotation)
    np.testing.assert_array_equal(ule.jump_operators(0.0)[0], np.zeros((2, 2)))


def test_ulindblad_broadcasts_single_bath():
    ule = ULindblad([SZ, SX], SymmetricRTN(1.0, 2.0), _x_rotation)
    assert ule.cfun.shape == (2, 2)
    assert ule.cfun[0, 0](1.0) == ule.cfun[1, 1](1.0)
    assert ule.cfun[0, 1](1.0) == 0.0


def test_ulindblad_rejects_mismatched_correlation():
    bath = CorrelatedBath(
        [(0, 0), (1, 1)],
        spectrum={(0, 0): lambda w: 1.0, (1, 1): lambda w: 1.0},
        correlation={(0, 0): lambda t: 1.0, (1, 1): lambda t: 1.0},
    )
    with pytest.raises(ConfigurationError):
        ULindblad([SZ, SX, SY], bath, _x_rotation)
    with pytest.raises(ConfigurationError):
        ULindblad([SZ], 1.0, _x_rotation)


# =============================
# DaviesDissipator
# =============================


def test_davies_relaxation_of_excited_state():
    davies = DaviesDissipator(_qubit_hamiltonian(), [SX], OHMIC)
    du = np.zeros((2, 2), dtype=complex)
    davies.apply(du, EXCITED, 1.0, 0.0)
    np.testing.assert_allclose(du, OHMIC.spectrum(W0) * (GROUND - EXCITED), rtol=1e-10, atol=1e-14)


def test_davies_thermal_state_is_stationary():
    davies = DaviesDissipator(_qubit_hamiltonian(), [SX], OHMIC)
    p = np.array([1.0, np.exp(-OHMIC.beta * W0)])
    rho = np.diag(p / p.sum()).astype(complex)
    np.testing.assert_allclose(davies.generator(rho, 0.0), np.zeros((2, 2)), atol=1e-12)


def test_davies_does_not_touch_driver_buffer():
    h = _qubit_hamiltonian()
    buffer = h(0.0)
    before = buffer.copy()
    davies = DaviesDissipator(h, [SX], OHMIC)
    assert davies.hamiltonian.u_cache is not h.u_cache
    davies.generator(EXCITED, 0.0)
    np.testing.assert_array_equal(h.u_cache, before)


def test_davies_with_lamb_shift_preserves_trace_and_hermiticity():
    bath = CustomBath(spectrum=lambda w: 2 / (1 + w**2))
    h = DenseHamiltonian([lambda t: 1.0, lambda t: 0.3], [EXCITED, SX], unit="hbar")
    davies = DaviesDissipator(h, [SZ], bath, lamb_shift=True)
    rho = np.array([[0.7, 0.1 + 0.2j], [0.1 - 0.2j, 0.3]])
    out = davies.generator(rho, 0.0)
    assert np.trace(out) == pytest.approx(0.0, abs=1e-10)
    np.testing.assert_allclose(out, out.conj().T, atol=1e-10)


def test_davies_rejects_wrong_operator_size():
    with pytest.raises(ConfigurationError):
        DaviesDissipator(_qubit_hamiltonian(), [np.eye(3)], OHMIC)


# =============================
# Bohr frequencies
# =============================


def test_bohr_frequency_groups_partition_all_pairs():
    groups = bohr_frequency_groups(np.array([0.0, 1.0, 2.0]), tol=1e-8)
    freqs = [w for w, _ in groups]
    np.testing.assert_allclose(freqs, [-2.0, -1.0, 0.0, 1.0, 2.0])

    total = sum(mask.astype(int) for _, mask in groups)
    np.testing.assert_array_equal(total, np.ones((3, 3), dtype=int))

    mask_one = dict((round(w), m) for w, m in groups)[1]
    assert mask_one[0, 1] and mask_one[1, 2]
    assert mask_one.sum() == 2


def test_bohr_frequency_groups_merge_within_tolerance():
    groups = bohr_frequency_groups(np.array([0.0, 1e-12]), tol=1e-8)
    assert len(groups) == 1

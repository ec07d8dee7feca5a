"""Lindblad-type dissipators for master equation drivers.

All dissipators follow the derivative contract of
:meth:`~qopenbase.core.hamiltonian.DenseHamiltonian.apply`::

    term.apply(du, rho, p, t)     # du += p * D_t[rho], never overwrites du

so a driver can accumulate the coherent part and any number of dissipators
into one derivative buffer.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from ...config.quadrature import ULINDBLAD_ATOL, ULINDBLAD_RTOL
from ...errors import ConfigurationError
from ...utils.constants import as_dense_matrix
from ...utils.quadrature import integrate_matrix
from ..bath_system.registry import BathFunctionMatrix, TwoTimeCorrelation, build_correlation

__all__ = ["lindblad_term", "LindbladDissipator", "ULindblad"]


def lindblad_term(L: np.ndarray, rho: np.ndarray, LdL: np.ndarray | None = None) -> np.ndarray:
    """``L ρ L† - ½ (L†L ρ + ρ L†L)``."""
    Ld = L.conj().T
    if LdL is None:
        LdL = Ld @ L
    return L @ rho @ Ld - 0.5 * (LdL @ rho + rho @ LdL)


def _dense_ops(ops: Sequence[Any], what: str) -> list[np.ndarray]:
    """Dense copies of ``ops``, all square and of one shape."""
    dense = []
    for k, op in enumerate(ops):
        try:
            arr = as_dense_matrix(op)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"{what} #{k}: {exc}") from exc
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ConfigurationError(f"{what} #{k} is not square: shape {arr.shape}")
        if dense and arr.shape != dense[0].shape:
            raise ConfigurationError(
                f"{what} #{k} has shape {arr.shape}, expected {dense[0].shape}"
            )
        dense.append(arr)
    if not dense:
        raise ConfigurationError(f"at least one {what} is required")
    return dense


class LindbladDissipator:
    """Constant-rate Lindblad dissipator ``Σ_k γ_k (L_k ρ L_k† - ½{L_k†L_k, ρ})``.

    Parameters
    ----------
    ops : sequence of matrices
        Jump operators L_k (ndarray or qutip ``Qobj``).
    rates : float or sequence of float
        Non-negative rates γ_k [1/ns]; a single float applies to every operator.
    """

    def __init__(self, ops: Sequence[Any], rates: float | Sequence[float]):
        self.ops = _dense_ops(ops, "jump operator")
        if np.ndim(rates) == 0:
            rates = [rates] * len(self.ops)
        rates = [float(r) for r in rates]
        if len(rates) != len(self.ops):
            raise ConfigurationError(f"got {len(rates)} rates for {len(self.ops)} jump operators")
        for k, r in enumerate(rates):
            if not r >= 0:
                raise ConfigurationError(f"rate #{k} must be >= 0, got {r!r}")
        self.rates = tuple(rates)
        self._LdL = [L.conj().T @ L for L in self.ops]

    def apply(self, du: np.ndarray, rho: np.ndarray, p: float, t: float) -> None:
        for L, LdL, r in zip(self.ops, self._LdL, self.rates):
            du += (p * r) * lindblad_term(L, rho, LdL)

    def __repr__(self) -> str:
        return f"LindbladDissipator(ops={len(self.ops)}, rates={self.rates})"


class ULindblad:
    """Lindblad dissipator of the unitary-frame (ULE) master equation.

    For every coupling operator A_k the jump operator is built on the fly::

        L_k(t) = ∫_0^t J_kk(t, τ) U(τ)† A_k U(τ) dτ

    by matrix valued adaptive quadrature, and the term
    ``L_k ρ L_k† - ½{L_k†L_k, ρ}`` is accumulated.

    Parameters
    ----------
    coupling_ops : sequence of matrices
        System coupling operators A_k.
    jump_correlation : bath, BathFunctionMatrix or callable
        Jump correlation J. A bath is turned into its correlation matrix via
        the registry; a plain callable ``J(tau)`` is used for every operator.
    unitary : callable
        ``U(t)`` -> ndarray, the closed-system propagator.
    atol, rtol : float
        Tolerances of the matrix quadrature.
    """

    def __init__(
        self,
        coupling_ops: Sequence[Any],
        jump_correlation: Any,
        unitary: Callable[[float], Any],
        atol: float = ULINDBLAD_ATOL,
        rtol: float = ULINDBLAD_RTOL,
    ):
        self.ops = _dense_ops(coupling_ops, "coupling operator")
        if not callable(unitary):
            raise ConfigurationError(f"unitary must be callable, got {type(unitary)!r}")
        self.unitary = unitary
        self.atol = atol
        self.rtol = rtol
        self.cfun = self._correlation_matrix(jump_correlation)

    def _correlation_matrix(self, jump_correlation: Any) -> BathFunctionMatrix:
        if isinstance(jump_correlation, BathFunctionMatrix):
            cfun = jump_correlation
        elif hasattr(jump_correlation, "tag"):
            cfun = build_correlation(jump_correlation)
        elif callable(jump_correlation):
            return BathFunctionMatrix(
                {(k, k): TwoTimeCorrelation(jump_correlation) for k in range(len(self.ops))},
                len(self.ops),
            )
        else:
            raise ConfigurationError(
                f"jump_correlation must be a bath, a BathFunctionMatrix or a callable, "
                f"got {type(jump_correlation)!r}"
            )
        if cfun.shape == (1, 1) and len(self.ops) > 1:
            return BathFunctionMatrix({(k, k): cfun[0, 0] for k in range(len(self.ops))}, len(self.ops))
        if cfun.shape[0] != len(self.ops):
            raise ConfigurationError(
                f"correlation matrix of shape {cfun.shape} for {len(self.ops)} coupling operators"
            )
        return cfun

    def jump_operators(self, t: float) -> list[np.ndarray]:
        """The jump operators L_k(t)."""
        result = []
        for k, A in enumerate(self.ops):
            J = self.cfun[k, k]

            def integrand(tau: float, A=A, J=J) -> np.ndarray:
                U = as_dense_matrix(self.unitary(tau))
                return J(t, tau) * (U.conj().T @ A @ U)

            L, _ = integrate_matrix(
                integrand, 0.0, t, self.rtol, self.atol, label=f"ULindblad jump operator #{k}"
            )
            result.append(L)
        return result

    def apply(self, du: np.ndarray, rho: np.ndarray, p: float, t: float) -> None:
        for L in self.jump_operators(t):
            du += p * lindblad_term(L, rho)

    def __repr__(self) -> str:
        return f"ULindblad(ops={len(self.ops)}, atol={self.atol:g}, rtol={self.rtol:g})"

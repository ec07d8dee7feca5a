"""Davies (secular, adiabatic) master equation generator.

In the instantaneous eigenbasis ``H(t)|a> = E_a|a>`` the coupling operators
are split by Bohr frequency ``ω = E_b - E_a``::

    A_α(ω) = Σ_{E_b - E_a = ω} |a><a| A_α |b><b|

and the dissipator reads::

    D[ρ] = Σ_ω Σ_{αβ} γ_αβ(ω) (A_β(ω) ρ A_α(ω)† - ½{A_α(ω)† A_β(ω), ρ})

with an optional Lamb shift ``-i[H_LS, ρ]``, ``H_LS = Σ_ω Σ_{αβ} S_αβ(ω) A_α(ω)† A_β(ω)``.
Positive ω lower the energy, so γ(+ω) is the relaxation rate.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from ...config.quadrature import BOHR_FREQ_TOL
from ...errors import ConfigurationError
from ...utils.constants import TWOPI
from ...utils.logging_setup import get_logger
from ..bath_system.registry import BathFunctionMatrix, build_lamb_shift, build_spectrum
from ..hamiltonian.dense_hamiltonian import DenseHamiltonian
from .lindblad import _dense_ops

__all__ = ["DaviesDissipator", "bohr_frequency_groups"]

logger = get_logger(__name__)


def bohr_frequency_groups(energies: np.ndarray, tol: float = BOHR_FREQ_TOL) -> list[tuple[float, np.ndarray]]:
    """Group the Bohr frequencies ``E_b - E_a`` within ``tol``.

    Returns
    -------
    list of (float, ndarray[bool])
        Mean frequency of each group and the (a, b) mask selecting it.
    """
    omega = energies[None, :] - energies[:, None]
    flat = omega.ravel()
    order = np.argsort(flat, kind="stable")
    labels = np.empty(flat.size, dtype=int)
    group = 0
    labels[order[0]] = group
    for prev, cur in zip(order[:-1], order[1:]):
        if flat[cur] - flat[prev] > tol:
            group += 1
        labels[cur] = group
    labels = labels.reshape(omega.shape)

    groups = []
    for g in range(group + 1):
        mask = labels == g
        groups.append((float(omega[mask].mean()), mask))
    return groups


def _per_operator(fmat: BathFunctionMatrix, n_ops: int) -> BathFunctionMatrix:
    """Broadcast a 1x1 bath function matrix to independent baths per operator."""
    if fmat.shape == (1, 1) and n_ops > 1:
        return BathFunctionMatrix({(k, k): fmat[0, 0] for k in range(n_ops)}, n_ops)
    if fmat.shape[0] != n_ops:
        raise ConfigurationError(
            f"bath function matrix of shape {fmat.shape} for {n_ops} coupling operators"
        )
    return fmat


class DaviesDissipator:
    """Davies generator in the instantaneous eigenbasis of ``hamiltonian``.

    Parameters
    ----------
    hamiltonian : DenseHamiltonian
        System Hamiltonian. A private copy (:meth:`~DenseHamiltonian.p_copy`)
        is evaluated, so the driver's buffer is never touched.
    coupling_ops : sequence of matrices
        System coupling operators A_α.
    bath : bath instance
        Any registered bath; a single-operator bath couples independently
        to every operator.
    lamb_shift : bool
        Include the Lamb-shift Hamiltonian (principal value integrals).
    tol : float
        Bohr frequencies closer than ``tol`` [2π GHz] are treated as degenerate.
    """

    def __init__(
        self,
        hamiltonian: DenseHamiltonian,
        coupling_ops: Sequence[Any],
        bath: Any,
        lamb_shift: bool = False,
        tol: float = BOHR_FREQ_TOL,
    ):
        self.hamiltonian = hamiltonian.p_copy()
        self.ops = _dense_ops(coupling_ops, "coupling operator")
        if self.ops[0].shape != (hamiltonian.dimension, hamiltonian.dimension):
            raise ConfigurationError(
                f"coupling operators of shape {self.ops[0].shape} for a "
                f"{hamiltonian.dimension}-dimensional Hamiltonian"
            )
        n_ops = len(self.ops)
        self.gamma = _per_operator(build_spectrum(bath), n_ops)
        self.S = _per_operator(build_lamb_shift(bath), n_ops) if lamb_shift else None
        self.tol = tol
        logger.debug("Davies generator: %d operators, lamb_shift=%s, bath=%s", n_ops, lamb_shift, bath)

    def _pairs(self) -> list[tuple[int, int]]:
        n = len(self.ops)
        return [(a, b) for a in range(n) for b in range(n)]

    def generator(self, rho: np.ndarray, t: float) -> np.ndarray:
        """D_t[ρ] (including the Lamb shift, if enabled) in the original basis."""
        dim = self.hamiltonian.dimension
        energies, v = self.hamiltonian.eigen_decomp(t, level=dim)
        energies = energies * TWOPI
        vd = v.conj().T

        rho_e = vd @ rho @ v
        ops_e = [vd @ A @ v for A in self.ops]
        out = np.zeros_like(rho_e, dtype=complex)
        h_ls = np.zeros_like(rho_e, dtype=complex) if self.S is not None else None

        for w, mask in bohr_frequency_groups(energies, self.tol):
            parts = [np.where(mask, A, 0.0) for A in ops_e]
            if not any(np.any(P) for P in parts):
                continue
            for a, b in self._pairs():
                g = self.gamma[a, b](w)
                Ad_B = parts[a].conj().T @ parts[b]
                if g != 0:
                    out += g * (parts[b] @ rho_e @ parts[a].conj().T - 0.5 * (Ad_B @ rho_e + rho_e @ Ad_B))
                if h_ls is not None:
                    s = self.S[a, b](w)
                    if s != 0:
                        h_ls += s * Ad_B

        if h_ls is not None:
            out += -1j * (h_ls @ rho_e - rho_e @ h_ls)
        return v @ out @ vd

    def apply(self, du: np.ndarray, rho: np.ndarray, p: float, t: float) -> None:
        du += p * self.generator(rho, t)

    def __repr__(self) -> str:
        return f"DaviesDissipator(ops={len(self.ops)}, lamb_shift={self.S is not None})"

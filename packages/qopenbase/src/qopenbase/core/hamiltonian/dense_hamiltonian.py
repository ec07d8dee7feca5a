"""Dense time-dependent Hamiltonian with an in-place evaluation buffer.

``DenseHamiltonian`` is called by an external ODE driver many times per
trajectory. Every call overwrites the single scratch buffer ``u_cache`` and
returns it; callers must not keep the returned array across calls.

A Hamiltonian instance must not be shared between concurrently integrated
trajectories. Use :func:`p_copy` once per worker: copies share the
(read-only) operator but own a fresh buffer.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from ...errors import ConfigurationError, NumericalError
from ...utils.constants import TWOPI
from .affine_operator import AffineOperator
from .time_units import UnitTime

__all__ = ["DenseHamiltonian", "p_copy", "eigen_decomp"]

# tolerance of the Hermiticity check in eigen_decomp
_HERMITIAN_ATOL: float = 1e-10


class DenseHamiltonian:
    """``H(t) = Σ_k f_k(t) M_k`` evaluated into a reusable dense buffer.

    Parameters
    ----------
    funcs : sequence of callables
        Scalar time functions.
    mats : sequence of matrices
        Constant matrices of identical square shape (ndarray or qutip ``Qobj``).
    unit : {"h", "hbar"}
        ``"h"`` (default): matrices in GHz, scaled by 2π at construction.
        ``"hbar"``: matrices already in angular frequency.

    Examples
    --------
    >>> H = DenseHamiltonian([lambda s: 1 - s, lambda s: s], [-sx, -sz])
    >>> du = np.zeros_like(rho)
    >>> H.apply(du, rho, 1.0, 0.5)     # du += -i [H(0.5), rho]
    """

    def __init__(
        self,
        funcs: Sequence[Callable[[float], Any]],
        mats: Sequence[Any],
        unit: str = "h",
    ):
        self.op = AffineOperator(funcs, mats, unit=unit)
        self.u_cache = np.zeros(self.op.shape, dtype=complex)

    @classmethod
    def _from_operator(cls, op: AffineOperator) -> "DenseHamiltonian":
        h = cls.__new__(cls)
        h.op = op
        h.u_cache = np.zeros(op.shape, dtype=complex)
        return h

    # --- properties -----------------------------------------------------------
    @property
    def dimension(self) -> int:
        return self.op.shape[0]

    @property
    def unit(self) -> str:
        return self.op.unit

    # --- evaluation -------------------------------------------------------------
    def __call__(self, t: float) -> np.ndarray:
        """H(t) in angular units; returns the scratch buffer."""
        return self.op.evaluate(t, out=self.u_cache)

    def evaluate(self, t: float, tf: UnitTime | float | None = None) -> np.ndarray:
        """Evaluate under a time-unit convention.

        - ``tf is None``: ``H(t)``
        - ``tf`` is :class:`UnitTime`: ``t`` is absolute, returns ``H(t / tf)``
        - ``tf`` is a real number: ``t`` is dimensionless, returns ``tf · H(t)``
        """
        if tf is None:
            return self(t)
        if isinstance(tf, UnitTime):
            return self(tf(t))
        H = self(t)
        H *= tf
        return H

    def apply(self, du: np.ndarray, u: np.ndarray, p: float, t: float) -> None:
        """Accumulate the coherent part of the derivative into ``du``.

        State vector:    ``du += -i p H(t) u``
        Density matrix:  ``du += -i p H(t) u``, then ``du += i p u H(t)``
        """
        H = self(t)
        if u.ndim == 1:
            du += (-1j * p) * (H @ u)
        elif u.ndim == 2:
            du += (-1j * p) * (H @ u)
            du += (1j * p) * (u @ H)
        else:
            raise ConfigurationError(f"state must be a vector or a matrix, got ndim={u.ndim}")

    # --- spectral analysis -----------------------------------------------------
    def eigen_decomp(self, t: float, level: int = 2) -> tuple[np.ndarray, np.ndarray]:
        """Lowest ``level`` eigenpairs of H(t).

        Eigenvalues are returned in GHz (the 2π of the angular convention
        divided out), sorted ascending; eigenvectors are the columns.

        Raises
        ------
        NumericalError
            If H(t) contains NaN/Inf, is not Hermitian, or LAPACK fails.
        """
        if not 1 <= level <= self.dimension:
            raise ConfigurationError(f"level must be in [1, {self.dimension}], got {level}")
        H = self(t)
        if not np.all(np.isfinite(H)):
            raise NumericalError(f"H({t}) contains NaN or Inf entries")
        if not np.allclose(H, H.conj().T, rtol=0.0, atol=_HERMITIAN_ATOL * max(1.0, np.abs(H).max())):
            raise NumericalError(f"H({t}) is not Hermitian", tolerance=_HERMITIAN_ATOL)
        try:
            w, v = np.linalg.eigh(H)
        except np.linalg.LinAlgError as exc:
            raise NumericalError(f"eigen-decomposition of H({t}) failed: {exc}") from exc
        return w[:level] / TWOPI, v[:, :level]

    def p_copy(self) -> "DenseHamiltonian":
        """Independent Hamiltonian sharing the operator, with its own buffer."""
        return type(self)._from_operator(self.op)

    # --- interop ------------------------------------------------------------------
    def to_qobjevo(self):
        """Export as ``qutip.QobjEvo`` (angular units) for qutip solvers."""
        from qutip import Qobj, QobjEvo

        return QobjEvo([[Qobj(m), _as_coefficient(f)] for f, m in zip(self.op.funcs, self.op.mats)])

    def __repr__(self) -> str:
        return f"DenseHamiltonian(dimension={self.dimension}, terms={len(self.op)}, unit={self.unit!r})"


def _as_coefficient(f: Callable[[float], Any]) -> Callable[[float], complex]:
    # qutip inspects the signature; plain f(t) keeps args out of the call
    def coefficient(t):
        return complex(f(t))

    return coefficient


def p_copy(h: DenseHamiltonian) -> DenseHamiltonian:
    """Functional form of :meth:`DenseHamiltonian.p_copy`."""
    return h.p_copy()


def eigen_decomp(h: DenseHamiltonian, t: float, level: int = 2) -> tuple[np.ndarray, np.ndarray]:
    """Functional form of :meth:`DenseHamiltonian.eigen_decomp`."""
    return h.eigen_decomp(t, level=level)

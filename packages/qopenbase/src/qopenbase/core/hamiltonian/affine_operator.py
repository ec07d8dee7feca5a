"""Affine time-dependent operator ``H(t) = Σ_k f_k(t) M_k``."""

from __future__ import annotations

import warnings
from typing import Any, Callable, Sequence

import numpy as np

from ...config.supported import SUPPORTED_UNITS
from ...errors import ConfigurationError
from ...utils.constants import TWOPI, as_dense_matrix

__all__ = ["AffineOperator", "unit_scale"]


def unit_scale(unit: str) -> float:
    """Factor applied once to the matrices at construction."""
    if unit not in SUPPORTED_UNITS:
        raise ConfigurationError(f"unit must be one of {SUPPORTED_UNITS}, got {unit!r}")
    return TWOPI if unit == "h" else 1.0


class AffineOperator:
    """Sum of constant matrices weighted by scalar time functions.

    The operator owns read-only, pre-scaled copies of the matrices, so it
    can be shared between Hamiltonians without copying.

    Parameters
    ----------
    funcs : sequence of callables
        Scalar time functions ``f_k(t)``.
    mats : sequence of matrices
        Constant matrices (ndarray, nested lists or qutip ``Qobj``); all of
        one square shape.
    unit : {"h", "hbar"}
        ``"h"``: matrices in GHz, scaled by 2π. ``"hbar"``: already angular.
    """

    def __init__(
        self,
        funcs: Sequence[Callable[[float], Any]],
        mats: Sequence[Any],
        unit: str = "h",
    ):
        funcs = list(funcs)
        mats = list(mats)
        if len(funcs) != len(mats):
            raise ConfigurationError(
                f"got {len(funcs)} time functions but {len(mats)} matrices"
            )
        if not mats:
            raise ConfigurationError("at least one (function, matrix) pair is required")
        for k, f in enumerate(funcs):
            if not callable(f):
                raise ConfigurationError(f"time function #{k} is not callable: {f!r}")

        scale = unit_scale(unit)
        dense = []
        for k, m in enumerate(mats):
            try:
                arr = as_dense_matrix(m)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"matrix #{k}: {exc}") from exc
            if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
                raise ConfigurationError(f"matrix #{k} is not square: shape {arr.shape}")
            dense.append(arr)

        shape = dense[0].shape
        for k, arr in enumerate(dense[1:], start=1):
            if arr.shape != shape:
                raise ConfigurationError(
                    f"matrix #{k} has shape {arr.shape}, expected {shape} (as matrix #0)"
                )

        for k, arr in enumerate(dense):
            if not np.allclose(arr, arr.conj().T):
                warnings.warn(
                    f"matrix #{k} is not Hermitian; H(t) is Hermitian only for suitable f_k",
                    stacklevel=2,
                )
            arr *= scale
            arr.setflags(write=False)

        self.funcs = tuple(funcs)
        self.mats = tuple(dense)
        self.unit = unit

    @property
    def shape(self) -> tuple[int, int]:
        return self.mats[0].shape

    def __len__(self) -> int:
        return len(self.mats)

    def evaluate(self, t: float, out: np.ndarray | None = None) -> np.ndarray:
        """Write ``Σ f_k(t) M_k`` into ``out`` (zeroed first) and return it."""
        if out is None:
            out = np.zeros(self.shape, dtype=complex)
        else:
            out.fill(0.0)
        for f, m in zip(self.funcs, self.mats):
            out += f(t) * m
        return out

    def __repr__(self) -> str:
        return f"AffineOperator(terms={len(self)}, shape={self.shape}, unit={self.unit!r})"

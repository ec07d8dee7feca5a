"""Time-unit conventions for Hamiltonian evaluation.

Drivers call the Hamiltonian in one of two conventions:

- ``UnitTime(tf)``: ``t`` is absolute time in ns; the Hamiltonian is defined
  on dimensionless time ``s = t / tf``.
- a plain real ``tf``: ``t`` is already the dimensionless time ``s`` and the
  generator ``tf · H(s)`` is returned (Schrödinger equation in ``s``).
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["UnitTime"]


@dataclass(frozen=True)
class UnitTime:
    """Annealing / total time ``tf`` [ns] marking ``t`` as absolute time."""

    tf: float

    def __post_init__(self) -> None:
        if not self.tf > 0:
            raise ValueError(f"tf must be > 0, got {self.tf!r}")

    def __call__(self, t: float) -> float:
        """Dimensionless time ``t / tf``."""
        return t / self.tf

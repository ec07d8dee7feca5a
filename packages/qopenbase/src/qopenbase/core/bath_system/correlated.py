"""Baths shared by (or cross-correlated between) several system operators.

A ``CorrelatedBath`` carries a spectrum (and optionally a correlation)
function per operator pair (i, j). Diagonal pairs describe
self-correlation, off-diagonal pairs cross-correlation. Pairs that are not
listed are the zero function.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Mapping, Sequence

from ...errors import ConfigurationError
from .base import AbstractBath

__all__ = ["CorrelatedBath"]

Pair = tuple[int, int]


def _entries_for_pairs(
    pairs: tuple[Pair, ...], fns: Mapping[Pair, Callable] | Sequence[Sequence[Callable]], what: str
) -> dict[Pair, Callable]:
    """Pick the functions belonging to ``pairs`` from a mapping or a nested matrix."""
    entries: dict[Pair, Callable] = {}
    for i, j in pairs:
        try:
            fn = fns[(i, j)] if isinstance(fns, Mapping) else fns[i][j]
        except (KeyError, IndexError) as exc:
            raise ConfigurationError(f"no {what} function given for operator pair ({i}, {j})") from exc
        if not callable(fn):
            raise ConfigurationError(f"{what} for pair ({i}, {j}) must be callable, got {type(fn)!r}")
        entries[(i, j)] = fn
    return entries


@dataclass(frozen=True, init=False)
class CorrelatedBath(AbstractBath):
    """Multi-operator bath defined by a spectrum matrix.

    Parameters
    ----------
    pairs : sequence of (int, int)
        Operator index pairs (0-based) with non-zero correlation.
    spectrum : mapping or nested sequence of callables
        ``spectrum[(i, j)]`` or ``spectrum[i][j]`` gives γ_ij(ω).
    correlation : mapping or nested sequence of callables, optional
        ``correlation[(i, j)]`` or ``correlation[i][j]`` gives C_ij(τ).
    """

    pairs: tuple[Pair, ...]
    spectrum_fns: dict[Pair, Callable] = field(compare=False)
    correlation_fns: dict[Pair, Callable] | None = field(compare=False)

    tag: ClassVar[str] = "correlated"

    def __init__(
        self,
        pairs: Sequence[Sequence[int]],
        spectrum: Mapping[Pair, Callable] | Sequence[Sequence[Callable]],
        correlation: Mapping[Pair, Callable] | Sequence[Sequence[Callable]] | None = None,
    ):
        normalized: list[Pair] = []
        for pair in pairs:
            if len(pair) != 2:
                raise ConfigurationError(f"operator pair must have two indices, got {pair!r}")
            i, j = int(pair[0]), int(pair[1])
            if i < 0 or j < 0:
                raise ConfigurationError(f"operator indices must be >= 0, got ({i}, {j})")
            normalized.append((i, j))
        if not normalized:
            raise ConfigurationError("CorrelatedBath needs at least one operator pair")
        pairs_t = tuple(normalized)

        object.__setattr__(self, "pairs", pairs_t)
        object.__setattr__(self, "spectrum_fns", _entries_for_pairs(pairs_t, spectrum, "spectrum"))
        object.__setattr__(
            self,
            "correlation_fns",
            None if correlation is None else _entries_for_pairs(pairs_t, correlation, "correlation"),
        )

    @property
    def n_ops(self) -> int:
        """Number of coupled system operators (1 + largest index)."""
        return 1 + max(max(i, j) for i, j in self.pairs)

    def correlation(self, *args: Any):
        raise ConfigurationError(
            "CorrelatedBath has no scalar correlation; use build_correlation(bath)[i, j]"
        )

    def spectrum(self, *args: Any):
        raise ConfigurationError("CorrelatedBath has no scalar spectrum; use build_spectrum(bath)[i, j]")

    def S(self, *args: Any, **kwargs: Any):
        raise ConfigurationError("CorrelatedBath has no Lamb shift kernel")

    def summary(self) -> str:
        return f"CorrelatedBath [correlated]: {self.n_ops} operators, pairs = {list(self.pairs)}"

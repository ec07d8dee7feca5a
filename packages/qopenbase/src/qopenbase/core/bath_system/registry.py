"""Bath registry: uniform builder functions for every bath variant.

Dissipator construction code calls

    cfun = build_correlation(bath)   # cfun[i, j](t1, t2) or cfun[i, j](tau)
    gfun = build_spectrum(bath)      # gfun[i, j](w)
    sfun = build_lamb_shift(bath)    # sfun[i, j](w)

without branching on the bath type. Single-operator baths yield a 1x1
matrix which is also directly callable (``gfun(w) == gfun[0, 0](w)``).

Dispatch goes through a table keyed by ``bath.tag``; new bath kinds hook
in with :func:`register_builders`.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, NamedTuple

from ...errors import ConfigurationError
from .base import AbstractBath

__all__ = [
    "BathFunctionMatrix",
    "TwoTimeCorrelation",
    "register_builders",
    "registered_tags",
    "build_correlation",
    "build_spectrum",
    "build_lamb_shift",
]


def _zero(*args: Any) -> float:
    return 0.0


class TwoTimeCorrelation:
    """Stationary correlation callable accepting ``(tau)`` or ``(t1, t2)``."""

    __slots__ = ("fn",)

    def __init__(self, fn: Callable[[float], complex]):
        self.fn = fn

    def __call__(self, *times: float) -> complex:
        if len(times) == 1:
            return self.fn(times[0])
        if len(times) == 2:
            return self.fn(times[0] - times[1])
        raise TypeError(f"expected (tau) or (t1, t2), got {len(times)} arguments")


class BathFunctionMatrix:
    """Read-only matrix of callables indexed by operator pair ``[i, j]``.

    Entries not present are the zero function.
    """

    def __init__(self, entries: Mapping[tuple[int, int], Callable], n: int):
        self._entries = dict(entries)
        self._n = n

    @property
    def shape(self) -> tuple[int, int]:
        return (self._n, self._n)

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, key: tuple[int, int]) -> Callable:
        i, j = key
        if not (0 <= i < self._n and 0 <= j < self._n):
            raise IndexError(f"operator pair ({i}, {j}) out of range for shape {self.shape}")
        return self._entries.get((i, j), _zero)

    def __call__(self, *args: Any) -> Any:
        if self._n != 1:
            raise TypeError(
                f"{self._n}x{self._n} bath function matrix must be indexed with [i, j] before calling"
            )
        return self[0, 0](*args)

    def __repr__(self) -> str:
        return f"BathFunctionMatrix(shape={self.shape}, pairs={sorted(self._entries)})"


class _Builders(NamedTuple):
    correlation: Callable[[Any], BathFunctionMatrix]
    spectrum: Callable[[Any], BathFunctionMatrix]
    lamb_shift: Callable[[Any], BathFunctionMatrix]


_REGISTRY: dict[str, _Builders] = {}


def register_builders(
    tag: str,
    correlation: Callable[[Any], BathFunctionMatrix],
    spectrum: Callable[[Any], BathFunctionMatrix],
    lamb_shift: Callable[[Any], BathFunctionMatrix],
) -> None:
    """Register the builder functions for baths carrying ``tag``."""
    _REGISTRY[tag] = _Builders(correlation, spectrum, lamb_shift)


def registered_tags() -> list[str]:
    return sorted(_REGISTRY)


def _lookup(bath: Any) -> _Builders:
    tag = getattr(bath, "tag", None)
    try:
        return _REGISTRY[tag]
    except KeyError:
        raise ConfigurationError(
            f"no builders registered for bath {type(bath).__name__!r} (tag={tag!r}); "
            f"known: {registered_tags()}"
        ) from None


def build_correlation(bath: Any) -> BathFunctionMatrix:
    """Correlation closures ``(t1, t2) -> C`` (also ``(tau) -> C``) per operator pair."""
    return _lookup(bath).correlation(bath)


def build_spectrum(bath: Any) -> BathFunctionMatrix:
    """Spectrum closures ``w -> γ(w)`` per operator pair."""
    return _lookup(bath).spectrum(bath)


def build_lamb_shift(bath: Any) -> BathFunctionMatrix:
    """Lamb-shift closures ``w -> S(w)`` per operator pair."""
    return _lookup(bath).lamb_shift(bath)


# BUILDERS FOR SINGLE-OPERATOR BATHS


def _single_correlation(bath: AbstractBath) -> BathFunctionMatrix:
    return BathFunctionMatrix({(0, 0): TwoTimeCorrelation(bath.correlation)}, 1)


def _single_spectrum(bath: AbstractBath) -> BathFunctionMatrix:
    return BathFunctionMatrix({(0, 0): bath.spectrum}, 1)


def _single_lamb_shift(bath: AbstractBath) -> BathFunctionMatrix:
    return BathFunctionMatrix({(0, 0): bath.S}, 1)


# BUILDERS FOR MULTI-OPERATOR BATHS


def _correlated_correlation(bath: Any) -> BathFunctionMatrix:
    if bath.correlation_fns is None:
        raise ConfigurationError("CorrelatedBath was built without correlation functions")
    entries = {pair: TwoTimeCorrelation(fn) for pair, fn in bath.correlation_fns.items()}
    return BathFunctionMatrix(entries, bath.n_ops)


def _correlated_spectrum(bath: Any) -> BathFunctionMatrix:
    return BathFunctionMatrix(bath.spectrum_fns, bath.n_ops)


def _correlated_lamb_shift(bath: Any) -> BathFunctionMatrix:
    raise ConfigurationError("Lamb shift is not available for CorrelatedBath")


for _tag in ("ohmic", "hybrid_ohmic", "custom", "rtn", "ensemble_fluctuator"):
    register_builders(_tag, _single_correlation, _single_spectrum, _single_lamb_shift)

register_builders("correlated", _correlated_correlation, _correlated_spectrum, _correlated_lamb_shift)

"""User supplied baths.

``CustomBath`` passes evaluation through to user closures. No relation
between the correlation and spectrum closures is checked; keeping them
consistent is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar

from ...errors import ConfigurationError
from .base import AbstractBath

__all__ = ["CustomBath", "from_environment"]


@dataclass(frozen=True, init=False)
class CustomBath(AbstractBath):
    """Bath defined by a correlation closure C(τ) and/or a spectrum closure γ(ω).

    Usage::

        bath = CustomBath(correlation=lambda t: np.exp(-abs(t)),
                          spectrum=lambda w: 2 / (1 + w**2))
    """

    correlation_fn: Callable[[float], complex] | None
    spectrum_fn: Callable[[float], float] | None

    tag: ClassVar[str] = "custom"

    def __init__(
        self,
        correlation: Callable[[float], complex] | None = None,
        spectrum: Callable[[float], float] | None = None,
    ):
        if correlation is None and spectrum is None:
            raise ConfigurationError("CustomBath needs a correlation and/or a spectrum function")
        for name, fn in (("correlation", correlation), ("spectrum", spectrum)):
            if fn is not None and not callable(fn):
                raise ConfigurationError(f"CustomBath {name} must be callable, got {type(fn)!r}")
        object.__setattr__(self, "correlation_fn", correlation)
        object.__setattr__(self, "spectrum_fn", spectrum)

    def _correlation(self, tau: float) -> complex:
        if self.correlation_fn is None:
            raise ConfigurationError("CustomBath was built without a correlation function")
        return self.correlation_fn(tau)

    def _spectrum(self, w: float) -> float:
        if self.spectrum_fn is None:
            raise ConfigurationError("CustomBath was built without a spectrum function")
        return self.spectrum_fn(w)

    def summary(self) -> str:
        parts = [
            name
            for name, fn in (("correlation", self.correlation_fn), ("spectrum", self.spectrum_fn))
            if fn is not None
        ]
        return f"CustomBath [custom]: user supplied {' + '.join(parts)}"


def from_environment(env: Any) -> CustomBath:
    """Wrap a QuTiP ``BosonicEnvironment`` as a :class:`CustomBath`.

    Uses ``env.correlation_function`` and ``env.power_spectrum``. Note that
    QuTiP works in angular units with ħ = 1; the wrapped closures are used
    as they are.
    """
    from qutip.core.environment import BosonicEnvironment

    if not isinstance(env, BosonicEnvironment):
        raise ConfigurationError(f"expected a qutip BosonicEnvironment, got {type(env)!r}")
    return CustomBath(correlation=env.correlation_function, spectrum=env.power_spectrum)

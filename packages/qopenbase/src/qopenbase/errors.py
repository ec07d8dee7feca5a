"""Error types raised by qopenbase.

Two families only:

- ``ConfigurationError``: bad construction parameters (non-positive physical
  constants, mismatched matrix shapes, unknown options). Subclasses
  ``ValueError`` so callers that already guard configuration code with
  ``except ValueError`` keep working.
- ``NumericalError``: a quadrature or eigen-decomposition that did not
  produce a trustworthy result. The attempted tolerance / subdivision limit
  travel with the exception so the caller can retry with relaxed settings.
"""

from __future__ import annotations

__all__ = ["ConfigurationError", "NumericalError"]


class ConfigurationError(ValueError):
    """Invalid construction parameters."""


class NumericalError(ArithmeticError):
    """Numerical routine failed to converge or received unusable input.

    Parameters
    ----------
    message : str
        Human readable description.
    tolerance : float | None
        Requested tolerance of the failed routine (if any).
    limit : int | None
        Subdivision / iteration limit of the failed routine (if any).
    """

    def __init__(self, message: str, tolerance: float | None = None, limit: int | None = None):
        details = []
        if tolerance is not None:
            details.append(f"tolerance={tolerance:g}")
        if limit is not None:
            details.append(f"limit={limit}")
        if details:
            message = f"{message} ({', '.join(details)})"
        super().__init__(message)
        self.tolerance = tolerance
        self.limit = limit

"""Quadrature defaults for qopenbase."""

# === ADAPTIVE QUADRATURE ===
QUAD_RTOL = 1e-8  # relative tolerance of scipy.integrate.quad
QUAD_ATOL = 1e-8  # absolute tolerance of scipy.integrate.quad
QUAD_LIMIT = 200  # max. number of subintervals (refinements) per integral

# === PRINCIPAL VALUE (Hilbert transform S(w)) ===
PV_EXCLUSION_RADIUS = 1.0  # symmetric neighborhood around the pole [2π GHz]
PV_CHECK_FACTORS = (1e-6, 1e-8)  # sample points (x radius) for the cancellation check

# === MATRIX VALUED QUADRATURE (unitary-frame Lindblad) ===
ULINDBLAD_ATOL = 1e-8
ULINDBLAD_RTOL = 1e-6

# === DAVIES GENERATOR ===
BOHR_FREQ_TOL = 1e-8  # Bohr frequencies closer than this are degenerate [2π GHz]

__all__ = [
    "QUAD_RTOL",
    "QUAD_ATOL",
    "QUAD_LIMIT",
    "PV_EXCLUSION_RADIUS",
    "PV_CHECK_FACTORS",
    "ULINDBLAD_ATOL",
    "ULINDBLAD_RTOL",
    "BOHR_FREQ_TOL",
]

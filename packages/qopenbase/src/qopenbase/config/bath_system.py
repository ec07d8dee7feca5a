"""
Bath system defaults for qopenbase.

Physical-unit parameters (fc in GHz, T in mK) as used by the
``Ohmic`` / ``HybridOhmic`` factories.
"""

# === BATH SYSTEM DEFAULTS ===
BATH_TYPE = "ohmic"
BATH_COUPLING = 1e-4  # dimensionless Ohmic coupling η
BATH_CUTOFF_GHZ = 4.0  # cutoff frequency fc [GHz], ωc = 2π fc
BATH_TEMP_MK = 16.0  # temperature T [mK]
BATH_MRT_WIDTH_MK = 5.0  # low-frequency (MRT) width W of the hybrid bath [mK]

# === TIMESCALE ESTIMATOR ===
TAU_B_HORIZON = 100.0  # upper integration limit for tau_B [ns]
COARSE_GRAIN_DIVISOR = 5  # τ_c = sqrt(τ_SB τ_B / COARSE_GRAIN_DIVISOR)

__all__ = [
    "BATH_TYPE",
    "BATH_COUPLING",
    "BATH_CUTOFF_GHZ",
    "BATH_TEMP_MK",
    "BATH_MRT_WIDTH_MK",
    "TAU_B_HORIZON",
    "COARSE_GRAIN_DIVISOR",
]

"""
Supported options for qopenbase.
"""

# bath models that can be built from plain numbers (YAML / dict)
SUPPORTED_BATHS = ["ohmic", "hybrid_ohmic", "rtn", "ensemble_fluctuator"]

# bath models that need user supplied callables
CALLABLE_BATHS = ["custom", "correlated"]

# "h": matrices given in linear frequency (GHz) -> scaled by 2π at construction
# "hbar": matrices already in angular frequency (2π GHz)
SUPPORTED_UNITS = ["h", "hbar"]

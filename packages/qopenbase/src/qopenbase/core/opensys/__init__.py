"""
Open-system module for qopenbase package.

Dissipator terms sharing the ``apply(du, rho, p, t)`` derivative contract:

- LindbladDissipator: constant rates
- ULindblad: unitary-frame Lindblad equation from a jump correlation
- DaviesDissipator: secular generator from bath spectra
"""

from .lindblad import lindblad_term, LindbladDissipator, ULindblad
from .davies import DaviesDissipator, bohr_frequency_groups


# PUBLIC API

__all__ = [
    "lindblad_term",
    "LindbladDissipator",
    "ULindblad",
    "DaviesDissipator",
    "bohr_frequency_groups",
]

"""
Registry services.

Services for loading the MCNS table and answering lookups against it.
"""

from .loader import TableLoader
from .registry import ParticleRegistry
from .arrays import (
    particle_names_array,
    particle_codes_array,
    particle_names_awkward,
    particle_codes_awkward,
)

__all__ = [
    "TableLoader",
    "ParticleRegistry",
    "particle_names_array",
    "particle_codes_array",
    "particle_names_awkward",
    "particle_codes_awkward",
]

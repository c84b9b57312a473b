"""
Converts Monte Carlo Numbering Scheme (MCNS) particle codes into particle
names and vice versa.

    >>> from mcns import particle_name, particle_code
    >>> particle_name(511)
    'B0'
    >>> particle_code("D*0")
    423
"""

from .domain import ParticleEntry, RegistryConfig, RegistryDataError
from .services import ParticleRegistry, TableLoader
from .lookup import (
    particle_name,
    particle_code,
    find_particle_name,
    find_particle_code,
    build_registry,
    get_registry,
    reset_registry,
)

__version__ = "1.0.0"

__all__ = [
    "particle_name",
    "particle_code",
    "find_particle_name",
    "find_particle_code",
    "build_registry",
    "get_registry",
    "reset_registry",
    "ParticleRegistry",
    "ParticleEntry",
    "RegistryConfig",
    "RegistryDataError",
    "TableLoader",
]

"""
Domain models for the MCNS particle registry.

Pure data structures with validation, no lookup logic.
"""

from .particle import ParticleEntry
from .config import RegistryConfig
from .errors import RegistryDataError

__all__ = [
    "ParticleEntry",
    "RegistryConfig",
    "RegistryDataError",
]

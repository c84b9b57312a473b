"""
Process-wide particle lookups.

The default registry is built from the bundled table on first use and shared
by every caller afterwards. Construction happens under a lock, so concurrent
first callers all observe one fully built registry.
"""

import threading
from typing import Optional

from mcns.domain.config import RegistryConfig
from mcns.services.loader import TableLoader
from mcns.services.registry import ParticleRegistry

_lock = threading.Lock()
_registry: Optional[ParticleRegistry] = None
_config = RegistryConfig()


def build_registry(config: Optional[RegistryConfig] = None) -> ParticleRegistry:
    """Load the table described by ``config`` into a new registry."""
    config = config or RegistryConfig()
    entries = TableLoader(config.data_path).load()
    return ParticleRegistry(entries, reject_collisions=config.reject_collisions)


def get_registry() -> ParticleRegistry:
    """Return the shared registry, building it on first call."""
    global _registry
    registry = _registry
    if registry is None:
        with _lock:
            if _registry is None:
                _registry = build_registry(_config)
            registry = _registry
    return registry


def reset_registry(config: Optional[RegistryConfig] = None):
    """
    Drop the shared registry so the next lookup rebuilds it.

    Args:
        config: Configuration used for the rebuild (default: bundled table)
    """
    global _registry, _config
    with _lock:
        _config = config or RegistryConfig()
        _registry = None


def particle_name(code=None) -> str:
    """
    Particle name for an MCNS code.

    Unknown codes are echoed back as text (``particle_name(999999) == "999999"``),
    and a missing code gives "".
    """
    return get_registry().name(code)


def particle_code(name=None) -> int:
    """
    MCNS code for a particle name, matched ignoring case.

    Unknown or missing names give 0, which is also the code of the "-"
    placeholder entry; see ``find_particle_code`` to tell them apart.
    """
    return get_registry().code(name)


def find_particle_name(code) -> Optional[str]:
    """Particle name for ``code``, or None if it is not in the table."""
    return get_registry().find_name(code)


def find_particle_code(name) -> Optional[int]:
    """MCNS code for ``name``, or None if no entry matches."""
    return get_registry().find_code(name)

"""
Particle domain model.

Immutable row of the MCNS code <-> name table.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParticleEntry:
    """A single MCNS code and its display name."""

    code: int
    name: str

    def __post_init__(self):
        """Validate particle entry."""
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise ValueError(f"code must be an int, got {self.code!r}")
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"name must be a non-empty string, got {self.name!r}")
        if not self.name.isascii():
            raise ValueError(f"name must be ASCII, got {self.name!r}")

    @property
    def folded_name(self) -> str:
        """Lower-cased name used for case-insensitive matching."""
        return self.name.lower()

    @classmethod
    def from_dict(cls, row: dict) -> 'ParticleEntry':
        """Create ParticleEntry from a ``{"code": ..., "name": ...}`` row."""
        return cls(code=row["code"], name=row["name"])

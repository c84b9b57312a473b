"""
ParticleRegistry service - Immutable MCNS code <-> name table.

Single responsibility: Answer code -> name and name -> code queries.

Both lenient queries are total: an unknown code is echoed back as text and an
unknown name gives 0. Note that 0 is also the stored code of the placeholder
particle "-", so ``code()`` alone cannot tell a miss from a hit on "-";
use ``find_code()`` when that matters.
"""

import logging
import operator
import re
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from mcns.domain.errors import RegistryDataError
from mcns.domain.particle import ParticleEntry

_DECIMAL_CODE = re.compile(r"-?(0|[1-9][0-9]*)")


def _as_code(value) -> Optional[int]:
    """Integer value of ``value`` if it names an MCNS code, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return int(value) if _DECIMAL_CODE.fullmatch(value) else None
    try:
        return operator.index(value)
    except TypeError:
        return None


class ParticleRegistry:
    """
    Read-only table of particle entries.

    Built once from an ordered sequence of entries and never mutated.
    Name lookups go through a lower-cased name index; when several entries
    share a lower-cased name, an exact-case match wins, otherwise the entry
    listed first in the table.
    """

    def __init__(self, entries: Iterable[ParticleEntry], reject_collisions: bool = False):
        """
        Initialize registry.

        Args:
            entries: Table rows in table order
            reject_collisions: Raise instead of warn when two names are equal
                ignoring case

        Raises:
            RegistryDataError: On a repeated code, or on a case-folding
                collision when ``reject_collisions`` is set
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self._entries = tuple(entries)

        by_code: dict[int, ParticleEntry] = {}
        by_folded: dict[str, list[ParticleEntry]] = {}
        for entry in self._entries:
            if entry.code in by_code:
                raise RegistryDataError(f"Duplicate code {entry.code} ({entry.name!r})")
            by_code[entry.code] = entry
            by_folded.setdefault(entry.folded_name, []).append(entry)

        self._by_code = MappingProxyType(by_code)
        self._names = MappingProxyType({code: entry.name for code, entry in by_code.items()})
        self._by_folded = MappingProxyType(
            {folded: tuple(group) for folded, group in by_folded.items()}
        )

        collisions = self.collisions()
        if collisions:
            described = ", ".join(
                "/".join(f"{e.name}={e.code}" for e in group) for group in collisions
            )
            if reject_collisions:
                raise RegistryDataError(f"Names collide ignoring case: {described}")
            self.logger.warning(f"{len(collisions)} names collide ignoring case: {described}")

    # ------------------------------------------------------------------
    # Lenient queries
    # ------------------------------------------------------------------

    def name(self, code=None) -> str:
        """
        Particle name for an MCNS code.

        Args:
            code: MCNS code; numpy integers and decimal strings are accepted

        Returns:
            The name, ``str(code)`` for an unknown code, "" when code is None
        """
        if code is None:
            return ""
        found = self.find_name(code)
        return found if found is not None else str(code)

    def code(self, name=None) -> int:
        """
        MCNS code for a particle name, matched ignoring case.

        Returns:
            The code, or 0 when the name is unknown or None
        """
        found = self.find_code(name)
        return found if found is not None else 0

    # ------------------------------------------------------------------
    # Strict queries
    # ------------------------------------------------------------------

    def find_name(self, code) -> Optional[str]:
        """Particle name for ``code``, or None if it is not in the table."""
        key = _as_code(code)
        if key is None:
            return None
        return self._names.get(key)

    def find_code(self, name) -> Optional[int]:
        """MCNS code for ``name`` (ignoring case), or None if no entry matches."""
        entry = self.resolve(name)
        return entry.code if entry is not None else None

    def resolve(self, name) -> Optional[ParticleEntry]:
        """Entry matching ``name`` under the case-folding rules."""
        if name is None:
            return None
        name = str(name)
        candidates = self._by_folded.get(name.lower())
        if not candidates:
            return None
        for candidate in candidates:
            if candidate.name == name:
                return candidate
        return candidates[0]

    # ------------------------------------------------------------------
    # Table access
    # ------------------------------------------------------------------

    @property
    def entries(self) -> tuple[ParticleEntry, ...]:
        return self._entries

    @property
    def names(self) -> MappingProxyType:
        """Read-only code -> name mapping."""
        return self._names

    def get(self, code) -> Optional[ParticleEntry]:
        key = _as_code(code)
        if key is None:
            return None
        return self._by_code.get(key)

    def collisions(self) -> tuple[tuple[ParticleEntry, ...], ...]:
        """Groups of entries whose names are equal ignoring case."""
        return tuple(group for group in self._by_folded.values() if len(group) > 1)

    def search(self, fragment: str) -> tuple[ParticleEntry, ...]:
        """Entries whose name contains ``fragment``, ignoring case."""
        folded = fragment.lower()
        return tuple(entry for entry in self._entries if folded in entry.folded_name)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code) -> bool:
        return self.find_name(code) is not None

    def __iter__(self) -> Iterator[ParticleEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} particles)"

"""
TableLoader service - Loads the particle table from disk.

Single responsibility: Read and validate the JSON table file.
"""

import json
import logging
import os
from typing import Optional

from mcns.domain.errors import RegistryDataError
from mcns.domain.particle import ParticleEntry

DEFAULT_TABLE_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "data",
    "particles.json",
)


class TableLoader:
    """
    Service for loading the MCNS table from a JSON data file.

    The file holds ``{"scheme": "MCNS", "version": ..., "particles": [...]}``
    with one ``{"code": int, "name": str}`` object per row, in table order.
    """

    def __init__(self, table_path: Optional[str] = None):
        """
        Initialize table loader.

        Args:
            table_path: Path to table file (default: bundled data file)
        """
        self.table_path = table_path or DEFAULT_TABLE_PATH
        self.version: Optional[str] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    def load(self) -> tuple[ParticleEntry, ...]:
        """
        Load table rows from disk.

        Returns:
            Tuple of entries in file order

        Raises:
            RegistryDataError: If the file is missing, malformed, or repeats a code
        """
        if not os.path.exists(self.table_path):
            raise RegistryDataError(f"Particle table not found: {self.table_path}")

        try:
            with open(self.table_path, "r", encoding="ascii") as f:
                document = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, IOError) as e:
            raise RegistryDataError(f"Failed to read particle table {self.table_path}: {e}") from e

        rows = self._extract_rows(document)
        entries = []
        seen_codes = set()

        for index, row in enumerate(rows):
            entry = self._parse_row(index, row)
            if entry.code in seen_codes:
                raise RegistryDataError(
                    f"Duplicate code {entry.code} at row {index} of {self.table_path}"
                )
            seen_codes.add(entry.code)
            entries.append(entry)

        self.logger.info(
            f"Loaded {len(entries)} particles (version {self.version}) from {self.table_path}"
        )
        return tuple(entries)

    def _extract_rows(self, document) -> list:
        """Check the top-level layout and return the row list."""
        if not isinstance(document, dict):
            raise RegistryDataError(f"Particle table must be a JSON object: {self.table_path}")

        scheme = document.get("scheme")
        if scheme != "MCNS":
            raise RegistryDataError(f"Unsupported numbering scheme {scheme!r} in {self.table_path}")

        rows = document.get("particles")
        if not isinstance(rows, list):
            raise RegistryDataError(f"'particles' must be a list in {self.table_path}")

        self.version = document.get("version")
        return rows

    def _parse_row(self, index: int, row) -> ParticleEntry:
        if not isinstance(row, dict) or "code" not in row or "name" not in row:
            raise RegistryDataError(f"Malformed row {index} in {self.table_path}: {row!r}")
        try:
            return ParticleEntry.from_dict(row)
        except ValueError as e:
            raise RegistryDataError(f"Invalid row {index} in {self.table_path}: {e}") from e

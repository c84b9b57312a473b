"""
Tests for the process-wide lookup functions.

Checks the bundled table end to end through particle_name / particle_code.
"""

import json
import threading

import pytest

from mcns import (
    RegistryConfig,
    find_particle_code,
    find_particle_name,
    get_registry,
    particle_code,
    particle_name,
    reset_registry,
)
from mcns.services.loader import DEFAULT_TABLE_PATH


def _table_rows():
    with open(DEFAULT_TABLE_PATH) as f:
        return [(row["code"], row["name"]) for row in json.load(f)["particles"]]


TABLE_ROWS = _table_rows()


class TestKnownParticles:
    """Concrete lookups against the bundled table."""

    @pytest.mark.parametrize("code, name", [
        (11, "e-"),
        (-11, "e+"),
        (511, "B0"),
        (521, "B+"),
        (423, "D*0"),
        (-5122, "anti-Lambda_b0"),
        (310, "K_S0"),
        (0, "-"),
    ])
    def test_particle_name(self, code, name):
        """Test code -> name for well-known particles."""
        assert particle_name(code) == name

    def test_particle_code(self):
        """Test name -> code for well-known particles."""
        assert particle_code("B+") == 521
        assert particle_code("d*0") == 423
        assert particle_code("E-") == 11

    def test_unknown_code_is_echoed(self):
        """Test that an unknown code comes back as text."""
        assert particle_name(999999) == "999999"
        assert particle_name(-999999) == "-999999"

    def test_unknown_name_is_zero(self):
        """Test that an unknown name gives 0."""
        assert particle_code("not-a-particle") == 0

    def test_missing_arguments(self):
        """Test the no-argument fallbacks."""
        assert particle_name() == ""
        assert particle_code() == 0

    def test_strict_variants(self):
        """Test that strict lookups report misses as None."""
        assert find_particle_name(511) == "B0"
        assert find_particle_name(999999) is None
        assert find_particle_code("-") == 0
        assert find_particle_code("not-a-particle") is None

    def test_collision_pairs_resolve_by_exact_case(self):
        """Test the names that collide ignoring case in the bundled table."""
        assert particle_code("b_10") == 10113
        assert particle_code("B_10") == 10513
        assert particle_code("b_1+") == 10213
        assert particle_code("B_1+") == 10523
        assert particle_code("b_1-") == -10213
        assert particle_code("B_1-") == -10523


class TestTableProperties:
    """Properties that hold for every authored row."""

    def test_every_code_maps_to_its_name(self):
        """Test particle_name for every row."""
        mismatches = [(code, name) for code, name in TABLE_ROWS if particle_name(code) != name]
        assert mismatches == []

    def test_every_name_maps_back_to_its_code(self):
        """Test particle_code round trip for every row."""
        mismatches = [
            (code, name) for code, name in TABLE_ROWS
            if particle_code(particle_name(code)) != code
        ]
        assert mismatches == []

    def test_case_insensitive_match_for_every_row(self):
        """Test that lower- and upper-cased names still resolve to a matching row."""
        for code, name in TABLE_ROWS:
            for query in (name.lower(), name.upper()):
                assert particle_name(particle_code(query)).lower() == name.lower()

    def test_unknown_codes_are_echoed(self):
        """Test echo-back for codes absent from the table."""
        known = {code for code, _ in TABLE_ROWS}
        for code in (19, -19, 999999, 10**12, -(10**12)):
            assert code not in known
            assert particle_name(code) == str(code)


class TestSharedRegistry:
    """Tests for building and replacing the shared registry."""

    def test_registry_is_shared(self):
        """Test that repeated calls return the same registry."""
        assert get_registry() is get_registry()
        assert len(get_registry()) == len(TABLE_ROWS)

    def test_concurrent_first_use_builds_once(self, restore_default_registry):
        """Test that threads racing on first use observe one registry."""
        reset_registry()
        seen = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            seen.append(get_registry())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(seen) == 8
        assert all(registry is seen[0] for registry in seen)

    def test_reset_with_custom_table(self, write_table, restore_default_registry):
        """Test switching the shared registry to another table."""
        path = write_table([{"code": 11, "name": "electron"}])
        reset_registry(RegistryConfig(data_path=path))

        assert particle_name(11) == "electron"
        assert particle_name(-11) == "-11"
        assert particle_code("ELECTRON") == 11


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Registry error types.
"""


class RegistryDataError(ValueError):
    """The particle table could not be loaded or violates a table invariant."""

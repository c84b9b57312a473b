"""
Array lookups - Vectorised code <-> name translation for columnar event data.

Each distinct value is looked up once through the scalar lenient queries, so
element-wise results are identical to ``ParticleRegistry.name``/``code``:
non-integer codes are echoed back and missing values give "" or 0.
"""

import awkward as ak
import numpy as np

from mcns.services.registry import ParticleRegistry


def _lookup_each(flat: list, query) -> list:
    """Apply ``query`` once per distinct value of ``flat``."""
    cache = {}
    results = []
    for value in flat:
        # 11 == 11.0 == True, but only the int is a code
        key = (type(value), value)
        if key not in cache:
            cache[key] = query(value)
        results.append(cache[key])
    return results


def particle_names_array(registry: ParticleRegistry, codes) -> np.ndarray:
    """
    Translate an array of MCNS codes into names.

    Args:
        registry: Registry to query
        codes: Array-like of codes, any shape

    Returns:
        Object array of names with the input shape
    """
    codes = np.asarray(codes)
    names = np.empty(codes.size, dtype=object)
    names[:] = _lookup_each(codes.ravel().tolist(), registry.name)
    return names.reshape(codes.shape)


def particle_codes_array(registry: ParticleRegistry, names) -> np.ndarray:
    """
    Translate an array of particle names into MCNS codes.

    Args:
        registry: Registry to query
        names: String array-like of any shape

    Returns:
        int64 array of codes with the input shape (0 for unknown names)
    """
    names = np.asarray(names, dtype=object)
    if names.size == 0:
        return np.zeros(names.shape, dtype=np.int64)
    codes = _lookup_each(names.ravel().tolist(), registry.code)
    return np.array(codes, dtype=np.int64).reshape(names.shape)


def _split_layout(array: ak.Array):
    """Flatten a flat or singly-jagged array; returns (values, counts or None)."""
    if array.ndim == 1:
        return ak.to_list(array), None
    if array.ndim == 2:
        return ak.to_list(ak.flatten(array, axis=1)), ak.num(array, axis=1)
    raise ValueError(f"Only flat or singly-jagged arrays are supported, got ndim={array.ndim}")


def particle_names_awkward(registry: ParticleRegistry, codes: ak.Array) -> ak.Array:
    """Translate a flat or jagged awkward array of codes, keeping its list structure."""
    values, counts = _split_layout(ak.Array(codes))
    names = ak.Array(_lookup_each(values, registry.name))
    return names if counts is None else ak.unflatten(names, counts)


def particle_codes_awkward(registry: ParticleRegistry, names: ak.Array) -> ak.Array:
    """Translate a flat or jagged awkward array of names, keeping its list structure."""
    values, counts = _split_layout(ak.Array(names))
    codes = ak.Array(np.array(_lookup_each(values, registry.code), dtype=np.int64))
    return codes if counts is None else ak.unflatten(codes, counts)

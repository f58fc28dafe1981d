# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, TypeAlias, TypeVar
import numpy as np
import array_api_compat as api
from array_api_compat import to_device, device

ArrayLike: TypeAlias = Any
ArrayNamespace: TypeAlias = Any

T = TypeVar("T", bound=ArrayLike)


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj)

def namespace_of_arrays(*arrays: T) -> ArrayNamespace:
    return api.array_namespace(*arrays)

def to_host(array: ArrayLike) -> np.ndarray:
    """Host numpy view of an array of any supported namespace."""
    if isinstance(array, np.ndarray):
        return array
    if api.is_numpy_array(array):
        return np.asarray(array)
    if not api.is_array_api_obj(array):
        raise TypeError(f"Unsupported input type {type(array).__name__}, expected an array.")
    return np.asarray(to_device(array, "cpu"))

def from_host(values: np.ndarray, like: T) -> T:
    """Move host values into the namespace and onto the device of ``like``."""
    if api.is_numpy_array(like):
        return values  # type: ignore
    xp = namespace_of_arrays(like)
    return xp.asarray(values, device=device(like))

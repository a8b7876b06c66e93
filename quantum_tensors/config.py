"""Process-wide settings: array backend and numeric tolerances.

Usage:
    from quantum_tensors.config import get_backend, set_backend, set_tolerances

    xp = get_backend()                 # numpy-like module for batch index maths
    set_backend("cupy")                # requires cupy installed
    set_tolerances(close_eps=1e-9)     # default eps for Complex.is_close_to
    reset_tolerances()
"""

from __future__ import annotations

import dataclasses
import importlib
import logging
from dataclasses import dataclass
from types import ModuleType

import numpy as np

logger = logging.getLogger(__name__)

# Backend name -> module exposing the numpy array API.
_BACKEND_MODULES = {
    "numpy": "numpy",
    "cupy": "cupy",
    "jax": "jax.numpy",
}
_current_backend: str = "numpy"


# ---------------------------------------------------------------------------
# Array backend
# ---------------------------------------------------------------------------

def get_backend() -> ModuleType:
    """Array module used by the batch coordinate functions."""
    return importlib.import_module(_BACKEND_MODULES[_current_backend])


def set_backend(name: str) -> None:
    """Select 'numpy', 'cupy' or 'jax'; the module is imported eagerly.

    A failed import leaves the current backend in place.
    """
    global _current_backend
    if name not in _BACKEND_MODULES:
        raise ValueError(
            f"Unknown backend: {name!r}. Must be one of {sorted(_BACKEND_MODULES)}"
        )
    importlib.import_module(_BACKEND_MODULES[name])
    if name != _current_backend:
        logger.info("Array backend switched from %s to %s", _current_backend, name)
    _current_backend = name


def get_backend_name() -> str:
    return _current_backend


def to_numpy(arr) -> np.ndarray:
    """Bring a backend array back to host memory as an ndarray."""
    if isinstance(arr, np.ndarray):
        return arr
    # cupy arrays copy device -> host through .get()
    if hasattr(arr, "get"):
        return arr.get()
    return np.asarray(arr)


# ---------------------------------------------------------------------------
# Tolerances
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Tolerances:
    """Default tolerances used by Complex predicates.

    - close_eps: Euclidean distance bound for is_close_to (strict <)
    - almost_zero: squared-magnitude bound for is_almost_zero (strict <)
    """

    close_eps: float = 1e-6
    almost_zero: float = 1e-12

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if not value > 0:
                raise ValueError(f"{f.name} must be positive, got {value}")


_tolerances = Tolerances()


def get_tolerances() -> Tolerances:
    return _tolerances


def set_tolerances(**changes: float) -> Tolerances:
    """Replace selected tolerances, e.g. ``set_tolerances(close_eps=1e-9)``."""
    global _tolerances
    try:
        updated = dataclasses.replace(_tolerances, **changes)
    except TypeError as exc:
        raise ValueError(f"Unknown tolerance in {sorted(changes)}") from exc
    logger.info("Tolerances updated: %s", updated)
    _tolerances = updated
    return updated


def reset_tolerances() -> Tolerances:
    global _tolerances
    _tolerances = Tolerances()
    return _tolerances

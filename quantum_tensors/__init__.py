"""quantum_tensors — complex scalars and coordinate algebra for amplitude tensors.

Public API:
  - Complex: Complex, cx, to_array, from_array
  - Coordinates: coords_from_index, coords_to_index, check_coords_sizes_compatibility,
    coords_from_indices, coords_to_indices, is_permutation, indices_complement,
    CoordsJoiner, join_coords_func
  - Helpers: hsl_to_hex, weighted_random_int, starting_polarization, starting_direction
  - Errors: TensorKernelError and its subclasses
  - Settings: quantum_tensors.config
"""

from quantum_tensors.core import *  # noqa: F401,F403
from quantum_tensors.core import __all__ as _core_all

__version__ = "0.3.0"

__all__ = [*_core_all, "__version__"]

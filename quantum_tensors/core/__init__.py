"""Core kernel: complex scalar type, coordinate algebra, and small helpers."""

from quantum_tensors.core.errors import (
    TensorKernelError,
    LengthMismatchError,
    OutOfBoundsError,
    NotAPermutationError,
    DivisionByZeroError,
    ZeroMagnitudeError,
    UnsupportedFormatError,
)
from quantum_tensors.core.complex import Complex, cx, to_array, from_array, TAU
from quantum_tensors.core.coords import (
    coords_from_index,
    coords_to_index,
    check_coords_sizes_compatibility,
    coords_from_indices,
    coords_to_indices,
    is_permutation,
    indices_complement,
    CoordsJoiner,
    join_coords_func,
)
from quantum_tensors.core.colors import hsl_to_hex
from quantum_tensors.core.sampling import weighted_random_int
from quantum_tensors.core.directions import (
    Polarization,
    Direction,
    starting_polarization,
    starting_direction,
)

__all__ = [
    # Errors
    "TensorKernelError", "LengthMismatchError", "OutOfBoundsError",
    "NotAPermutationError", "DivisionByZeroError", "ZeroMagnitudeError",
    "UnsupportedFormatError",
    # Complex
    "Complex", "cx", "to_array", "from_array", "TAU",
    # Coordinates
    "coords_from_index", "coords_to_index", "check_coords_sizes_compatibility",
    "coords_from_indices", "coords_to_indices",
    "is_permutation", "indices_complement", "CoordsJoiner", "join_coords_func",
    # Helpers
    "hsl_to_hex", "weighted_random_int",
    "Polarization", "Direction", "starting_polarization", "starting_direction",
]

"""Coordinate kernel — linear index ↔ multi-index arithmetic.

Linear indices are big-endian mixed radix: the first dimension varies
slowest (numpy C order). For sizes [2, 3]:

    index   0      1      2      3      4      5
    coords  [0,0]  [0,1]  [0,2]  [1,0]  [1,1]  [1,2]

This ordering is part of the external contract of stored tensors and must
not change.
"""

from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass
from typing import Sequence, Self

import numpy as np

from quantum_tensors import config
from quantum_tensors.core.errors import (
    LengthMismatchError,
    NotAPermutationError,
    OutOfBoundsError,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Index ↔ coordinates
# ---------------------------------------------------------------------------

def coords_from_index(index: int, sizes: Sequence[int]) -> list[int]:
    """Turn a linear index into coordinates, one per dimension.

    Raises OutOfBoundsError unless 0 <= index < product(sizes).
    """
    total = math.prod(sizes)
    if not 0 <= index < total:
        raise OutOfBoundsError(
            f"Index {index} out of range for sizes {list(sizes)} (total {total})."
        )
    i = index
    coords = []
    for dim_size in reversed(sizes):
        coords.append(i % dim_size)
        i //= dim_size
    coords.reverse()
    return coords


def coords_to_index(coords: Sequence[int], sizes: Sequence[int]) -> int:
    """Turn coordinates into a linear index, inverse of coords_from_index."""
    if len(coords) != len(sizes):
        raise LengthMismatchError(
            f"Coordinates {list(coords)} and sizes {list(sizes)} are of different lengths."
        )
    factor = 1
    index = 0
    for coord, dim_size in zip(reversed(coords), reversed(sizes)):
        index += factor * coord
        factor *= dim_size
    return index


def check_coords_sizes_compatibility(coords: Sequence[int], sizes: Sequence[int]) -> None:
    """Ensure 0 <= coords[i] < sizes[i] for every dimension."""
    if len(coords) != len(sizes):
        raise LengthMismatchError(
            f"Coordinates {list(coords)} incompatible with sizes {list(sizes)}."
        )
    for dim, (c, s) in enumerate(zip(coords, sizes)):
        if c < 0 or c >= s:
            raise OutOfBoundsError(
                f"Coordinates {list(coords)} incompatible with sizes {list(sizes)} "
                f"(dimension {dim}: {c} not in [0, {s}))."
            )


# ---------------------------------------------------------------------------
# Batch forms (array backend)
# ---------------------------------------------------------------------------

def coords_from_indices(indices, sizes: Sequence[int]) -> np.ndarray:
    """Vectorised coords_from_index: k indices → (k, n) int64 array."""
    xp = config.get_backend()
    idx = xp.asarray(indices, dtype=xp.int64).reshape(-1)
    total = math.prod(sizes)
    if idx.size and (int(idx.min()) < 0 or int(idx.max()) >= total):
        raise OutOfBoundsError(
            f"Indices out of range for sizes {list(sizes)} (total {total})."
        )
    if len(sizes) == 0:
        return np.zeros((int(idx.size), 0), dtype=np.int64)
    coords = xp.stack(xp.unravel_index(idx, tuple(sizes)), axis=-1)
    return config.to_numpy(coords).astype(np.int64)


def coords_to_indices(coords, sizes: Sequence[int]) -> np.ndarray:
    """Vectorised coords_to_index: (k, n) coordinates → k linear indices.

    Unlike coords_to_index, every coordinate is bounds-checked.
    """
    xp = config.get_backend()
    arr = xp.asarray(coords, dtype=xp.int64)
    if arr.ndim == 1:
        # a bare [] is an empty batch, anything else a single coordinate row
        arr = arr.reshape(1, -1) if arr.size else arr.reshape(0, len(sizes))
    if arr.ndim != 2 or arr.shape[1] != len(sizes):
        raise LengthMismatchError(
            f"Coordinates of shape {tuple(arr.shape)} incompatible with sizes {list(sizes)}."
        )
    if arr.shape[1] == 0:
        return np.zeros(arr.shape[0], dtype=np.int64)
    bounds = xp.asarray(sizes, dtype=xp.int64)
    if bool(xp.any(arr < 0)) or bool(xp.any(arr >= bounds)):
        raise OutOfBoundsError(f"Coordinates incompatible with sizes {list(sizes)}.")
    indices = xp.ravel_multi_index(tuple(arr.T), tuple(sizes))
    return config.to_numpy(indices).astype(np.int64)


# ---------------------------------------------------------------------------
# Permutations and complements
# ---------------------------------------------------------------------------

def is_permutation(array: Sequence[int], n: int | None = None) -> bool:
    """True if array consists of 0, 1, ..., n - 1 in any order."""
    if n is None:
        n = len(array)
    if len(array) != n:
        return False
    counts = [0] * n
    for x in array:
        if isinstance(x, (bool, np.bool_)):
            return False
        try:
            x = operator.index(x)
        except TypeError:
            return False
        if not 0 <= x < n:
            return False
        counts[x] += 1
    return all(counts)


def indices_complement(indices: Sequence[int], n: int) -> list[int]:
    """Sorted indices of range(n) missing from indices.

    >>> indices_complement([3, 1], 5)
    [0, 2, 4]
    """
    present = set(indices)
    res = [i for i in range(n) if i not in present]
    if not is_permutation(list(indices) + res, n):
        raise NotAPermutationError(
            f"Indices {list(indices)} are not unique integers between 0 and {n - 1}."
        )
    return res


# ---------------------------------------------------------------------------
# Joining coordinates along an axis partition
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CoordsJoiner:
    """Merge coordinates split into selected axes and the remaining axes.

    With selected=(3, 1) and complement=(0, 2, 4):

        joiner([2, 3, 5], [7, 11]) -> [2, 11, 3, 7, 5]
        joiner.split([2, 11, 3, 7, 5]) -> ([2, 3, 5], [7, 11])

    The partition is validated once here; calls do not re-check it.
    """

    selected: tuple[int, ...]
    complement: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "selected", tuple(self.selected))
        object.__setattr__(self, "complement", tuple(self.complement))
        if not is_permutation(self.selected + self.complement):
            raise NotAPermutationError(
                f"Selected {list(self.selected)} and complement {list(self.complement)} "
                f"do not partition range({self.size})."
            )
        logger.debug("CoordsJoiner selected=%s complement=%s", self.selected, self.complement)

    @classmethod
    def for_axes(cls, selected: Sequence[int], n: int) -> Self:
        """Joiner for the given selected axes of an n-dimensional tuple."""
        return cls(tuple(selected), tuple(indices_complement(selected, n)))

    @property
    def size(self) -> int:
        return len(self.selected) + len(self.complement)

    def __call__(self, group: Sequence[int], selected_coords: Sequence[int]) -> list[int]:
        if len(group) != len(self.complement) or len(selected_coords) != len(self.selected):
            raise LengthMismatchError(
                f"Expected {len(self.complement)} group and {len(self.selected)} selected "
                f"coordinates, got {len(group)} and {len(selected_coords)}."
            )
        coord = [0] * self.size
        for c, dim in zip(group, self.complement):
            coord[dim] = c
        for c, dim in zip(selected_coords, self.selected):
            coord[dim] = c
        return coord

    def split(self, full: Sequence[int]) -> tuple[list[int], list[int]]:
        """Project a full coordinate tuple into (group, selected) parts."""
        if len(full) != self.size:
            raise LengthMismatchError(
                f"Coordinates {list(full)} have {len(full)} dimensions, expected {self.size}."
            )
        return [full[d] for d in self.complement], [full[d] for d in self.selected]


def join_coords_func(selected: Sequence[int], complement: Sequence[int]) -> CoordsJoiner:
    """Build the merge function for a selected / complement axis partition."""
    return CoordsJoiner(tuple(selected), tuple(complement))

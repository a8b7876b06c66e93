"""Starting polarization and direction tags for a laser source."""

from __future__ import annotations

from enum import Enum


class Polarization(str, Enum):
    H = "H"
    V = "V"


class Direction(str, Enum):
    RIGHT = ">"
    UP = "^"
    LEFT = "<"
    DOWN = "v"


_POLARIZATIONS = {
    0: Polarization.H,
    180: Polarization.H,
    90: Polarization.V,
    270: Polarization.V,
}

_DIRECTIONS = {
    0: Direction.RIGHT,
    90: Direction.UP,
    180: Direction.LEFT,
    270: Direction.DOWN,
}


def starting_polarization(polarization: int) -> Polarization:
    """Polarization tag for an angle in degrees (0/180 → H, 90/270 → V)."""
    try:
        return _POLARIZATIONS[polarization]
    except KeyError:
        raise ValueError(f"Wrong starting polarization: {polarization}") from None


def starting_direction(rotation: int) -> Direction:
    """Direction tag for a rotation in degrees, counter-clockwise from →."""
    try:
        return _DIRECTIONS[rotation]
    except KeyError:
        raise ValueError(f"Wrong starting direction: {rotation}") from None

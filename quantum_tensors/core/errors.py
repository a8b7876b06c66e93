"""Tensor kernel exception hierarchy."""

from __future__ import annotations


class TensorKernelError(Exception):
    """Base exception for all coordinate-kernel and complex-number errors."""


class LengthMismatchError(TensorKernelError, ValueError):
    """Coordinate and size tuples have different lengths."""


class OutOfBoundsError(TensorKernelError, IndexError):
    """A coordinate (or linear index) lies outside its dimension size."""


class NotAPermutationError(TensorKernelError, ValueError):
    """Index set has duplicates, omissions or out-of-range values."""


class DivisionByZeroError(TensorKernelError, ZeroDivisionError):
    """Complex division by a zero-magnitude divisor."""


class ZeroMagnitudeError(TensorKernelError, ValueError):
    """Normalization of a zero-length complex number."""


class UnsupportedFormatError(TensorKernelError, ValueError):
    """Unknown complex rendering format."""

"""Core services operating on domain models."""

from .crystal_tools import (
    cartesian_coordinates,
    fractional_coordinates,
    set_fractional_coordinates,
)

__all__ = [
    "cartesian_coordinates",
    "fractional_coordinates",
    "set_fractional_coordinates",
]

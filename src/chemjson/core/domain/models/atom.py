#!/usr/bin/env python3
# src/chemjson/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular structure.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class Atom:
    """Represents an atom in a molecular structure."""

    index: int
    atomic_number: int
    position_3d: Optional[Tuple[float, float, float]] = None
    position_2d: Optional[Tuple[float, float]] = None

    @property
    def has_position_3d(self) -> bool:
        return self.position_3d is not None

    @property
    def has_position_2d(self) -> bool:
        return self.position_2d is not None

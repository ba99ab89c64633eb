#!/usr/bin/env python3
# src/chemjson/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass


@dataclass
class Bond:
    """Represents a chemical bond between two atoms, addressed by atom index."""

    index: int
    atom1: int
    atom2: int
    order: int = 1

    @property
    def pair(self) -> tuple:
        return (self.atom1, self.atom2)

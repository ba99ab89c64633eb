#!/usr/bin/env python3
# src/chemjson/core/domain/models/basis_set.py

"""
Quantum-chemistry basis set representations attached to a molecule.
"""

from dataclasses import dataclass
from enum import Enum, auto


class ScfType(Enum):
    """Enumeration of self-consistent field calculation types."""

    RHF = auto()
    ROHF = auto()
    UHF = auto()
    RKS = auto()
    ROKS = auto()
    UKS = auto()
    UNKNOWN = auto()


@dataclass
class BasisSet:
    """Base class for basis set representations."""

    name: str = ""
    electron_count: int = 0


@dataclass
class GaussianSet(BasisSet):
    """Basis set built from Gaussian-type orbitals."""

    scf_type: ScfType = ScfType.RHF


@dataclass
class SlaterSet(BasisSet):
    """Basis set built from Slater-type orbitals."""

"""Domain model classes."""

from .atom import Atom
from .bond import Bond
from .basis_set import BasisSet, GaussianSet, SlaterSet, ScfType
from .unit_cell import UnitCell
from .molecular_graph import MolecularGraph

__all__ = [
    "Atom",
    "Bond",
    "BasisSet",
    "GaussianSet",
    "SlaterSet",
    "ScfType",
    "UnitCell",
    "MolecularGraph",
]

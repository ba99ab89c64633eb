#!/usr/bin/env python3
# src/chemjson/core/domain/models/molecular_graph.py

"""
Domain model representing a molecular structure as a graph.
"""

from typing import Any, Dict, Iterator, List, Optional, Sequence
import networkx as nx
import numpy as np

from .atom import Atom
from .bond import Bond
from .basis_set import BasisSet
from .unit_cell import UnitCell


class MolecularGraph:
    """Graph representation of a molecular structure."""

    def __init__(self):
        """
        Initialize an empty MolecularGraph.

        Atoms are nodes keyed by their index, bonds are edges carrying
        the bond index and order.
        """
        self.graph = nx.Graph()
        self._atoms: List[Atom] = []
        self._bonds: List[Bond] = []
        self._data: Dict[str, Any] = {}
        self.unit_cell: Optional[UnitCell] = None
        self.basis_set: Optional[BasisSet] = None

    def __repr__(self) -> str:
        return (
            f"MolecularGraph(atoms={self.atom_count}, bonds={self.bond_count}, "
            f"unit_cell={self.unit_cell is not None})"
        )

    # Atoms

    @property
    def atom_count(self) -> int:
        return len(self._atoms)

    @property
    def atoms(self) -> Iterator[Atom]:
        return iter(self._atoms)

    def atom(self, index: int) -> Atom:
        """Get the atom at a given index, raising IndexError when out of range."""
        if not 0 <= index < len(self._atoms):
            raise IndexError(f"Atom index {index} out of range for {len(self._atoms)} atoms")
        return self._atoms[index]

    def add_atom(self, atomic_number: int) -> Atom:
        """
        Append a new atom.

        Args:
            atomic_number: Atomic number of the new atom

        Returns:
            The created Atom, whose index equals the previous atom count
        """
        atom = Atom(index=len(self._atoms), atomic_number=atomic_number)
        self._atoms.append(atom)
        self.graph.add_node(atom.index, atomic_number=atomic_number)
        return atom

    def atomic_numbers(self) -> List[int]:
        return [atom.atomic_number for atom in self._atoms]

    # Positions

    def has_positions_3d(self) -> bool:
        """True when there is at least one atom and every atom has a 3D position."""
        return bool(self._atoms) and all(atom.has_position_3d for atom in self._atoms)

    def has_positions_2d(self) -> bool:
        """True when there is at least one atom and every atom has a 2D position."""
        return bool(self._atoms) and all(atom.has_position_2d for atom in self._atoms)

    def atom_positions_3d(self) -> Optional[np.ndarray]:
        """Get 3D positions of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3), or None unless every atom
            has a 3D position
        """
        if not self.has_positions_3d():
            return None
        return np.array([atom.position_3d for atom in self._atoms], dtype=float)

    def atom_positions_2d(self) -> Optional[np.ndarray]:
        """Get 2D positions of all atoms as an (n_atoms, 2) array, or None."""
        if not self.has_positions_2d():
            return None
        return np.array([atom.position_2d for atom in self._atoms], dtype=float)

    def set_atom_positions_3d(self, positions: Sequence[Sequence[float]]) -> None:
        """Set the 3D position of every atom from an (n_atoms, 3) array-like."""
        positions = np.asarray(positions, dtype=float)
        if positions.shape != (len(self._atoms), 3):
            raise ValueError(
                f"Expected positions of shape ({len(self._atoms)}, 3), got {positions.shape}"
            )
        for atom, (x, y, z) in zip(self._atoms, positions):
            atom.position_3d = (float(x), float(y), float(z))

    def set_atom_positions_2d(self, positions: Sequence[Sequence[float]]) -> None:
        """Set the 2D position of every atom from an (n_atoms, 2) array-like."""
        positions = np.asarray(positions, dtype=float)
        if positions.shape != (len(self._atoms), 2):
            raise ValueError(
                f"Expected positions of shape ({len(self._atoms)}, 2), got {positions.shape}"
            )
        for atom, (x, y) in zip(self._atoms, positions):
            atom.position_2d = (float(x), float(y))

    # Bonds

    @property
    def bond_count(self) -> int:
        return len(self._bonds)

    @property
    def bonds(self) -> Iterator[Bond]:
        return iter(self._bonds)

    def bond(self, index: int) -> Bond:
        """Get the bond at a given index, raising IndexError when out of range."""
        if not 0 <= index < len(self._bonds):
            raise IndexError(f"Bond index {index} out of range for {len(self._bonds)} bonds")
        return self._bonds[index]

    def add_bond(self, atom1: int, atom2: int, order: int = 1) -> Bond:
        """
        Append a bond between two existing atoms.

        Args:
            atom1: Index of the first atom
            atom2: Index of the second atom
            order: Bond order

        Returns:
            The created Bond

        Raises:
            IndexError: If either atom index does not exist
            ValueError: If both indices refer to the same atom
        """
        self.atom(atom1)
        self.atom(atom2)
        if atom1 == atom2:
            raise ValueError(f"Cannot bond atom {atom1} to itself")
        bond = Bond(index=len(self._bonds), atom1=atom1, atom2=atom2, order=order)
        self._bonds.append(bond)
        self.graph.add_edge(atom1, atom2, index=bond.index, order=order)
        return bond

    def set_bond_order(self, index: int, order: int) -> None:
        bond = self.bond(index)
        bond.order = order
        self.graph.edges[bond.atom1, bond.atom2]["order"] = order

    def neighbors(self, index: int) -> List[int]:
        """Indices of atoms bonded to the given atom."""
        self.atom(index)
        return sorted(self.graph.neighbors(index))

    # Free-form data

    def set_data(self, key: str, value: Any) -> None:
        self._data[key] = value

    def data(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def has_data(self, key: str) -> bool:
        return key in self._data

    def data_keys(self) -> List[str]:
        return list(self._data.keys())

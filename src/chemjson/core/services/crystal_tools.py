"""Conversions between Cartesian and fractional coordinates of a crystal."""

from typing import Sequence
import logging
import numpy as np

from ..domain.models.molecular_graph import MolecularGraph
from ..domain.models.unit_cell import UnitCell

logger = logging.getLogger(__name__)


def fractional_coordinates(cell: UnitCell, positions: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Convert Cartesian positions to fractional coordinates of a cell.

    Args:
        cell: Unit cell defining the lattice
        positions: Cartesian positions, shape (n_atoms, 3)

    Returns:
        numpy array of shape (n_atoms, 3)
    """
    positions = np.asarray(positions, dtype=float).reshape(-1, 3)
    return cell.to_fractional(positions)


def cartesian_coordinates(cell: UnitCell, fcoords: Sequence[Sequence[float]]) -> np.ndarray:
    """Convert fractional coordinates of a cell to Cartesian positions, shape (n_atoms, 3)."""
    fcoords = np.asarray(fcoords, dtype=float).reshape(-1, 3)
    return cell.to_cartesian(fcoords)


def set_fractional_coordinates(
    molecule: MolecularGraph, fcoords: Sequence[Sequence[float]], first: int = 0
) -> None:
    """
    Set Cartesian positions from fractional coordinates of the molecule's cell.

    Coordinates are applied to the atoms from index ``first`` to the end of
    the molecule, so a block of atoms appended to a populated molecule can
    be placed without touching the atoms before it.

    Args:
        molecule: Molecule with a unit cell
        fcoords: Fractional coordinates, shape (n_atoms - first, 3)
        first: Index of the first atom to place

    Raises:
        ValueError: If the molecule has no unit cell or the atom count differs
    """
    if molecule.unit_cell is None:
        raise ValueError("Cannot set fractional coordinates on a molecule without a unit cell")
    fcoords = np.asarray(fcoords, dtype=float).reshape(-1, 3)
    expected = molecule.atom_count - first
    if first < 0 or len(fcoords) != expected:
        raise ValueError(
            f"Expected {expected} fractional coordinates, got {len(fcoords)}"
        )
    positions = cartesian_coordinates(molecule.unit_cell, fcoords)
    for i, (x, y, z) in enumerate(positions):
        molecule.atom(first + i).position_3d = (float(x), float(y), float(z))
    logger.debug(f"Converted {len(fcoords)} fractional coordinates to Cartesian")

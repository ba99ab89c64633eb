#!/usr/bin/env python3
# src/chemjson/io/cjson_writer.py

"""
Encoding of a MolecularGraph as a Chemical JSON document.
"""

from dataclasses import dataclass
import json
import logging
from typing import Any, Dict, List, Optional

from ..core.domain.models.basis_set import GaussianSet, ScfType
from ..core.domain.models.molecular_graph import MolecularGraph
from ..core.exceptions import SerializationError
from ..core.services.crystal_tools import fractional_coordinates

logger = logging.getLogger(__name__)

SCF_TYPE_TAGS = {
    ScfType.RHF: "rhf",
    ScfType.ROHF: "rohf",
    ScfType.UHF: "uhf",
}
UNKNOWN_SCF_TAG = "unknown"
GAUSSIAN_BASIS_TYPE = "GTO"


@dataclass
class WriterConfig:
    """Layout options for the serialized document."""

    indent: str = "  "
    sort_keys: bool = False
    ensure_ascii: bool = False


class CjsonWriter:
    """Writes a molecule as Chemical JSON text."""

    def __init__(self, config: Optional[WriterConfig] = None):
        self.config = config or WriterConfig()
        self.warnings: List[str] = []

    def write(self, molecule: MolecularGraph) -> str:
        """
        Encode a molecule.

        Optional data the format cannot carry is dropped with a warning
        recorded in ``warnings``.

        Args:
            molecule: Molecule to encode

        Returns:
            The document text, terminated by a newline

        Raises:
            SerializationError: If the document holds non-finite numbers
        """
        self.warnings = []
        root = self.to_document(molecule)
        try:
            text = json.dumps(
                root,
                indent=self.config.indent,
                sort_keys=self.config.sort_keys,
                ensure_ascii=self.config.ensure_ascii,
                allow_nan=False,
            )
        except ValueError as e:
            raise SerializationError(f"Error writing JSON: {e}") from e
        return text + "\n"

    def to_document(self, molecule: MolecularGraph) -> Dict[str, Any]:
        """Build the JSON tree for a molecule without serializing it."""
        root: Dict[str, Any] = {"chemical json": 0}

        for key in ("name", "inchi"):
            value = molecule.data(key)
            if isinstance(value, str):
                root[key] = value

        if molecule.unit_cell is not None:
            cell = molecule.unit_cell
            alpha, beta, gamma = cell.angles_degrees()
            root["unit cell"] = {
                "a": float(cell.a),
                "b": float(cell.b),
                "c": float(cell.c),
                "alpha": alpha,
                "beta": beta,
                "gamma": gamma,
            }

        if molecule.basis_set is not None:
            basis = self._basis_set_block(molecule)
            if basis is not None:
                root["basisSet"] = basis

        if molecule.atom_count:
            root["atoms"] = self._atoms_block(molecule)

        if molecule.bond_count:
            connections: List[int] = []
            orders: List[int] = []
            for bond in molecule.bonds:
                connections.extend(bond.pair)
                orders.append(int(bond.order))
            root["bonds"] = {"connections": {"index": connections}, "order": orders}

        logger.debug(
            f"Encoded {molecule.atom_count} atoms and {molecule.bond_count} bonds"
        )
        return root

    def _basis_set_block(self, molecule: MolecularGraph) -> Optional[Dict[str, str]]:
        basis = molecule.basis_set
        if not isinstance(basis, GaussianSet):
            self._warn(
                f"Basis set of type {type(basis).__name__} is not supported and was not written."
            )
            return None
        return {
            "basisType": GAUSSIAN_BASIS_TYPE,
            "scfType": SCF_TYPE_TAGS.get(basis.scf_type, UNKNOWN_SCF_TAG),
        }

    def _atoms_block(self, molecule: MolecularGraph) -> Dict[str, Any]:
        atoms: Dict[str, Any] = {
            "elements": {"number": [int(n) for n in molecule.atomic_numbers()]}
        }
        coords: Dict[str, List[float]] = {}

        positions_3d = molecule.atom_positions_3d()
        if positions_3d is not None:
            if molecule.unit_cell is not None:
                fcoords = fractional_coordinates(molecule.unit_cell, positions_3d)
                coords["3d fractional"] = [float(v) for v in fcoords.ravel()]
            else:
                coords["3d"] = [float(v) for v in positions_3d.ravel()]
        else:
            self._warn_partial(molecule, "3D", sum(a.has_position_3d for a in molecule.atoms))

        positions_2d = molecule.atom_positions_2d()
        if positions_2d is not None:
            coords["2d"] = [float(v) for v in positions_2d.ravel()]
        else:
            self._warn_partial(molecule, "2D", sum(a.has_position_2d for a in molecule.atoms))

        if coords:
            atoms["coords"] = coords
        return atoms

    def _warn_partial(self, molecule: MolecularGraph, label: str, count: int) -> None:
        # Only a partial set of positions counts as dropped data.
        if count:
            self._warn(
                f"Warning: only {count} of {molecule.atom_count} atoms have {label} "
                f"positions; {label} coordinates were not written."
            )

    def _warn(self, message: str) -> None:
        self.warnings.append(message)
        logger.warning(message)

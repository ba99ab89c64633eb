#!/usr/bin/env python3
# src/chemjson/io/cjson_reader.py

"""
Decoding of Chemical JSON documents into a MolecularGraph.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import numpy as np

from ..core.domain.models.molecular_graph import MolecularGraph
from ..core.domain.models.unit_cell import UnitCell
from ..core.exceptions import (
    ConsistencyError,
    FormatMismatchError,
    MalformedInputError,
    SchemaError,
)
from ..core.services.crystal_tools import set_fractional_coordinates
from ..core.utils.json_fields import (
    ARRAY,
    OBJECT,
    finite_float,
    get_field,
    is_number,
    json_kind,
    number_list,
    require_field,
    to_uint8,
)

logger = logging.getLogger(__name__)

MARKER_KEY = "chemical json"
METADATA_KEYS = ("name", "inchi")
CELL_KEYS = ("a", "b", "c", "alpha", "beta", "gamma")
NO_BONDS_WARNING = "Warning, no bonding information found."


def _reject_constant(name: str) -> None:
    raise MalformedInputError(f"Error parsing JSON: {name} is not a valid JSON value")


class CjsonReader:
    """Reads Chemical JSON text into a molecule, one document per call."""

    def __init__(self):
        self.warnings: List[str] = []

    def read(self, text: str, molecule: MolecularGraph) -> None:
        """
        Decode a document and populate the molecule.

        Steps run in document order and stop at the first violation. The
        molecule may be partially populated when an error is raised.

        Args:
            text: Chemical JSON text
            molecule: Molecule to populate

        Raises:
            MalformedInputError: If the text is not valid JSON
            FormatMismatchError: If the document is not Chemical JSON
            SchemaError: If a required key is missing or mistyped
            ConsistencyError: If array lengths or indices disagree
        """
        self.warnings = []
        root = self._parse(text)

        self._read_metadata(root, molecule)
        has_cell = self._read_unit_cell(root, molecule)
        first_atom = molecule.atom_count
        atom_count = self._read_atoms(root, molecule, has_cell)
        self._read_bonds(root, molecule, first_atom, atom_count)

        logger.debug(
            f"Read {molecule.atom_count} atoms and {molecule.bond_count} bonds"
        )

    @staticmethod
    def _parse(text: str) -> Dict[str, Any]:
        try:
            root = json.loads(text, parse_constant=_reject_constant)
        except MalformedInputError:
            raise
        except (ValueError, RecursionError) as e:
            # JSONDecodeError, and integer literals over the digit limit
            raise MalformedInputError(f"Error parsing JSON: {e}") from e

        if not isinstance(root, dict):
            raise FormatMismatchError("Error: Input is not a JSON object.")
        if MARKER_KEY not in root:
            raise FormatMismatchError(f'Error: no "{MARKER_KEY}" key found.')
        return root

    @staticmethod
    def _read_metadata(root: Dict[str, Any], molecule: MolecularGraph) -> None:
        # Non-string values are ignored rather than rejected.
        for key in METADATA_KEYS:
            value = root.get(key)
            if isinstance(value, str):
                molecule.set_data(key, value)

    @staticmethod
    def _read_unit_cell(root: Dict[str, Any], molecule: MolecularGraph) -> bool:
        """Read the optional unit cell block, returning whether one was present."""
        invalid = (
            "Invalid unit cell specification: a, b, c, alpha, beta, gamma"
            " must be present and numeric."
        )
        try:
            field = get_field(root, "unit cell", OBJECT, "unit cell")
        except SchemaError as e:
            raise SchemaError(invalid) from e
        if not field.present:
            return False

        cell = field.value
        if not all(is_number(cell.get(key)) for key in CELL_KEYS):
            raise SchemaError(invalid)

        params = [finite_float(cell[key], f"unit cell.{key}") for key in CELL_KEYS]
        try:
            molecule.unit_cell = UnitCell.from_degrees(*params)
        except ValueError as e:
            raise SchemaError(f"Invalid unit cell specification: {e}") from e
        return True

    def _read_atoms(
        self, root: Dict[str, Any], molecule: MolecularGraph, has_cell: bool
    ) -> int:
        """Add one atom per element entry, then apply coordinates. Returns the atom count."""
        atoms = require_field(root, "atoms", OBJECT, "atoms")
        elements = require_field(atoms, "elements", OBJECT, "atoms.elements")
        numbers = require_field(elements, "number", ARRAY, "atoms.elements.number")

        first = molecule.atom_count
        for value in numbers:
            molecule.add_atom(to_uint8(value))
        atom_count = len(numbers)

        coords = get_field(atoms, "coords", OBJECT, "atoms.coords")
        if coords.present:
            self._read_coordinates(coords.value, molecule, first, atom_count, has_cell)
        return atom_count

    @staticmethod
    def _coordinate_array(
        coords: Dict[str, Any], key: str, width: int, atom_count: int, label: str
    ) -> Optional[np.ndarray]:
        """
        Fetch a flat coordinate array and reshape it to (atom_count, width).

        Returns None when the key is absent, null or an empty array.
        """
        ctx = f"atoms.coords.{key}"
        field = get_field(coords, key, ARRAY, ctx)
        if not field.present or len(field.value) == 0:
            return None
        values = number_list(field.value, ctx)
        if len(values) != width * atom_count:
            raise ConsistencyError(
                f"Error: number of elements != number of {label} coordinates "
                f"(expected {width * atom_count} values, got {len(values)})."
            )
        return np.array(values, dtype=float).reshape(atom_count, width)

    def _read_coordinates(
        self,
        coords: Dict[str, Any],
        molecule: MolecularGraph,
        first: int,
        atom_count: int,
        has_cell: bool,
    ) -> None:
        positions_3d = self._coordinate_array(coords, "3d", 3, atom_count, "3D")
        if positions_3d is not None:
            for i, (x, y, z) in enumerate(positions_3d):
                molecule.atom(first + i).position_3d = (float(x), float(y), float(z))

        positions_2d = self._coordinate_array(coords, "2d", 2, atom_count, "2D")
        if positions_2d is not None:
            for i, (x, y) in enumerate(positions_2d):
                molecule.atom(first + i).position_2d = (float(x), float(y))

        fractional = get_field(coords, "3d fractional", ARRAY, "atoms.coords.3d fractional")
        if not fractional.present or len(fractional.value) == 0:
            return
        if not has_cell:
            raise ConsistencyError(
                "Cannot interpret fractional coordinates without unit cell."
            )
        fcoords = self._coordinate_array(
            coords, "3d fractional", 3, atom_count, "fractional"
        )
        set_fractional_coordinates(molecule, fcoords, first=first)

    def _read_bonds(
        self, root: Dict[str, Any], molecule: MolecularGraph, first_atom: int, atom_count: int
    ) -> None:
        bonds = get_field(root, "bonds", OBJECT, "bonds")
        if not bonds.present:
            return

        connections = require_field(bonds.value, "connections", OBJECT, "bonds.connections")
        index = get_field(connections, "index", ARRAY, "bonds.connections.index")

        first_bond = molecule.bond_count
        bond_count = 0
        if index.present:
            pairs = index.value
            if len(pairs) % 2 != 0:
                raise ConsistencyError(
                    f'Error: "bonds.connections.index" has odd length {len(pairs)}.'
                )
            for i, atom_index in enumerate(pairs):
                if not isinstance(atom_index, int) or isinstance(atom_index, bool):
                    raise SchemaError(
                        f'Error: "bonds.connections.index[{i}]" is not of type integer, '
                        f"got {json_kind(atom_index)}"
                    )
                if not 0 <= atom_index < atom_count:
                    raise ConsistencyError(
                        f"Error: bond references atom index {atom_index}, "
                        f"but there are {atom_count} atoms."
                    )
            for i in range(0, len(pairs), 2):
                if pairs[i] == pairs[i + 1]:
                    raise ConsistencyError(
                        f"Error: bond {i // 2} connects atom {pairs[i]} to itself."
                    )
                molecule.add_bond(first_atom + pairs[i], first_atom + pairs[i + 1])
            bond_count = len(pairs) // 2
        else:
            self.warnings.append(NO_BONDS_WARNING)
            logger.warning(NO_BONDS_WARNING)

        order = get_field(bonds.value, "order", ARRAY, "bonds.order")
        if not order.present:
            return
        if len(order.value) != bond_count:
            raise ConsistencyError(
                f"Error: number of bonds != number of bond orders "
                f"({bond_count} bonds, {len(order.value)} orders)."
            )
        for i, value in enumerate(order.value):
            molecule.set_bond_order(first_bond + i, to_uint8(value, default=1))

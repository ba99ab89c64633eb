import json

import numpy as np
import pytest

from chemjson.core.domain.models.basis_set import GaussianSet, ScfType, SlaterSet
from chemjson.core.domain.models.molecular_graph import MolecularGraph
from chemjson.core.domain.models.unit_cell import UnitCell
from chemjson.core.exceptions import SerializationError
from chemjson.io.cjson_writer import CjsonWriter, WriterConfig


@pytest.fixture
def methanol():
    """Methanol with 3D positions and bonds, no cell."""
    mol = MolecularGraph()
    for number in (6, 8, 1, 1, 1, 1):
        mol.add_atom(number)
    mol.set_atom_positions_3d(
        [
            [-0.0465, 0.6646, 0.0],
            [-0.0465, -0.7516, 0.0],
            [-1.0867, 0.9929, 0.0],
            [0.4366, 1.0762, 0.8921],
            [0.4366, 1.0762, -0.8921],
            [0.8782, -1.0551, 0.0],
        ]
    )
    for a, b in [(0, 1), (0, 2), (0, 3), (0, 4), (1, 5)]:
        mol.add_bond(a, b)
    mol.set_data("name", "methanol")
    return mol


def to_doc(mol, config=None):
    writer = CjsonWriter(config)
    return json.loads(writer.write(mol)), writer


def test_empty_molecule_writes_only_marker():
    doc, writer = to_doc(MolecularGraph())
    assert doc == {"chemical json": 0}
    assert writer.warnings == []


def test_metadata_only_when_string():
    mol = MolecularGraph()
    mol.set_data("name", "benzene")
    mol.set_data("inchi", 12)
    mol.set_data("comment", "not part of the format")
    doc, _ = to_doc(mol)
    assert doc["name"] == "benzene"
    assert "inchi" not in doc
    assert "comment" not in doc


def test_atoms_bonds_and_cartesian_coordinates(methanol):
    doc, writer = to_doc(methanol)
    assert doc["atoms"]["elements"]["number"] == [6, 8, 1, 1, 1, 1]
    coords = doc["atoms"]["coords"]
    assert set(coords) == {"3d"}
    assert len(coords["3d"]) == 18
    assert coords["3d"][:3] == [-0.0465, 0.6646, 0.0]
    assert doc["bonds"]["connections"]["index"] == [0, 1, 0, 2, 0, 3, 0, 4, 1, 5]
    assert doc["bonds"]["order"] == [1, 1, 1, 1, 1]
    assert writer.warnings == []


def test_unit_cell_is_written_in_degrees():
    mol = MolecularGraph()
    mol.unit_cell = UnitCell.from_degrees(3.0, 4.0, 5.0, 80.0, 95.5, 110.25)
    doc, _ = to_doc(mol)
    cell = doc["unit cell"]
    assert cell["a"] == 3.0
    assert cell["b"] == 4.0
    assert cell["c"] == 5.0
    assert cell["alpha"] == pytest.approx(80.0)
    assert cell["beta"] == pytest.approx(95.5)
    assert cell["gamma"] == pytest.approx(110.25)


def test_cell_prefers_fractional_coordinates(methanol):
    methanol.unit_cell = UnitCell.from_degrees(10.0, 10.0, 10.0, 90.0, 90.0, 90.0)
    doc, _ = to_doc(methanol)
    coords = doc["atoms"]["coords"]
    assert "3d" not in coords
    fractional = np.array(coords["3d fractional"]).reshape(-1, 3)
    np.testing.assert_allclose(fractional * 10.0, methanol.atom_positions_3d(), atol=1e-12)


def test_2d_is_written_alongside_3d(methanol):
    methanol.set_atom_positions_2d([[float(i), 0.5 * i] for i in range(6)])
    doc, _ = to_doc(methanol)
    coords = doc["atoms"]["coords"]
    assert set(coords) == {"3d", "2d"}
    assert coords["2d"][:4] == [0.0, 0.0, 1.0, 0.5]


def test_partial_positions_are_dropped_with_warning():
    mol = MolecularGraph()
    mol.add_atom(1)
    mol.add_atom(1)
    mol.atom(0).position_3d = (0.0, 0.0, 0.0)
    doc, writer = to_doc(mol)
    assert "coords" not in doc["atoms"]
    assert len(writer.warnings) == 1
    assert "1 of 2 atoms have 3D positions" in writer.warnings[0]


def test_bond_orders_are_written(methanol):
    methanol.set_bond_order(0, 2)
    doc, _ = to_doc(methanol)
    assert doc["bonds"]["order"][0] == 2


@pytest.mark.parametrize(
    "scf_type,tag",
    [
        (ScfType.RHF, "rhf"),
        (ScfType.ROHF, "rohf"),
        (ScfType.UHF, "uhf"),
        (ScfType.RKS, "unknown"),
        (ScfType.UNKNOWN, "unknown"),
    ],
)
def test_gaussian_basis_set(scf_type, tag):
    mol = MolecularGraph()
    mol.basis_set = GaussianSet(name="6-31G*", scf_type=scf_type)
    doc, writer = to_doc(mol)
    assert doc["basisSet"] == {"basisType": "GTO", "scfType": tag}
    assert writer.warnings == []


def test_other_basis_sets_are_skipped():
    mol = MolecularGraph()
    mol.basis_set = SlaterSet(name="DZP")
    doc, writer = to_doc(mol)
    assert "basisSet" not in doc
    assert "SlaterSet" in writer.warnings[0]


def test_default_layout_uses_two_space_indent(methanol):
    text = CjsonWriter().write(methanol)
    lines = text.splitlines()
    assert lines[0] == "{"
    assert lines[1] == '  "chemical json": 0,'
    assert text.endswith("}\n")


def test_indent_and_key_order_are_configurable(methanol):
    config = WriterConfig(indent="    ", sort_keys=True)
    text = CjsonWriter(config).write(methanol)
    lines = text.splitlines()
    assert lines[1] == '    "atoms": {'
    assert json.loads(text)["name"] == "methanol"


def test_non_ascii_strings_are_kept_by_default():
    mol = MolecularGraph()
    mol.set_data("name", "α-pinene")
    assert "α-pinene" in CjsonWriter().write(mol)
    assert "\\u03b1" in CjsonWriter(WriterConfig(ensure_ascii=True)).write(mol)


def test_non_finite_positions_cannot_be_serialized():
    mol = MolecularGraph()
    mol.add_atom(1)
    mol.atom(0).position_3d = (float("nan"), 0.0, 0.0)
    with pytest.raises(SerializationError):
        CjsonWriter().write(mol)

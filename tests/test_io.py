"""Tests for PDB reading and writing."""

import numpy as np
import pytest

from pdbrecords.core.structures import Record
from pdbrecords.core.selection import select_atoms
from pdbrecords.io.pdb_parser import read_pdb_file, read_records_from_array
from pdbrecords.io.pdb_writer import format_record, write_pdb


class TestParser:
    """Test read_pdb_file."""

    def test_reads_all_atoms_in_order(self, dipeptide_pdb_file):
        pdb = read_pdb_file(dipeptide_pdb_file)
        assert len(pdb) == 10
        assert [r.atnam.strip() for r in pdb] == [
            "N", "CA", "C", "O", "CB", "N", "H", "CA", "C", "O"
        ]

    def test_fields(self, dipeptide_pdb_file):
        pdb = read_pdb_file(dipeptide_pdb_file)
        cb = list(pdb)[4]
        assert cb.atnam == "CB  "
        assert cb.atnam_raw == " CB "
        assert cb.atnum == 5
        assert cb.resnam == "ALA"
        assert cb.chain == "A"
        assert cb.resnum == 1
        assert cb.record_type == "ATOM  "
        assert cb.element == "C"
        assert cb.bval == pytest.approx(10.0)
        assert np.allclose(cb.coords, [2.0, -1.0, 0.5], atol=1e-3)

    def test_list_is_owned_and_terminated(self, dipeptide_pdb_file):
        pdb = read_pdb_file(dipeptide_pdb_file)
        assert pdb.tail.next is None
        assert all(pdb.owns(r) for r in pdb)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_pdb_file(tmp_path / "missing.pdb")

    def test_read_records_from_array(self):
        coords = np.array([[0.0, 0.0, 0.0], [1.0, 2.0, 3.0]])
        pdb = read_records_from_array(coords, ["N", "CA"], resnums=[7, 7])
        assert len(pdb) == 2
        assert pdb.head.atnam == "N   "
        assert pdb.tail.atnam == "CA  "
        assert pdb.tail.resnum == 7
        assert pdb.tail.atnum == 2


class TestWriter:
    """Test PDB output."""

    def test_format_record_columns(self):
        record = Record(
            coords=[1.5, -2.25, 10.0],
            atnam="CA  ",
            atnum=12,
            resnam="GLY",
            chain="B",
            resnum=42,
            occ=0.5,
            bval=20.0,
            element="C",
        )
        line = format_record(record)
        assert line[0:6] == "ATOM  "
        assert line[6:11] == "   12"
        assert line[12:16] == " CA "
        assert line[17:20] == "GLY"
        assert line[21] == "B"
        assert line[22:26] == "  42"
        assert float(line[30:38]) == pytest.approx(1.5)
        assert float(line[38:46]) == pytest.approx(-2.25)
        assert float(line[46:54]) == pytest.approx(10.0)
        assert float(line[54:60]) == pytest.approx(0.5)
        assert float(line[60:66]) == pytest.approx(20.0)
        assert line[76:78] == " C"

    def test_hetatm(self):
        record = Record(coords=[0, 0, 0], atnam="ZN  ", atnam_raw="ZN  ", record_type="HETATM")
        line = format_record(record)
        assert line.startswith("HETATM")
        assert line[12:16] == "ZN  "

    def test_write_selection_and_read_back(self, dipeptide_pdb_file, tmp_path):
        pdb = read_pdb_file(dipeptide_pdb_file)
        selected, natom = select_atoms(pdb, ["CA  "])

        out = tmp_path / "ca.pdb"
        write_pdb(out, selected)

        text = out.read_text().splitlines()
        assert text[-1] == "END"
        assert len([l for l in text if l.startswith("ATOM")]) == natom

        reread = read_pdb_file(out)
        assert [r.resnum for r in reread] == [1, 2]
        assert np.allclose(reread.tail.coords, [4.0, 2.7, 0.0], atol=1e-3)

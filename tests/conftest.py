"""Pytest configuration and fixtures for pdbrecords tests."""

import numpy as np
import pytest

from pdbrecords.core.structures import Record, RecordList


# (resnum, resnam, atom name, element, coords)
DIPEPTIDE_ATOMS = [
    (1, "ALA", "N", "N", [0.0, 0.0, 0.0]),
    (1, "ALA", "CA", "C", [1.5, 0.0, 0.0]),
    (1, "ALA", "C", "C", [2.0, 1.4, 0.0]),
    (1, "ALA", "O", "O", [1.3, 2.4, 0.0]),
    (1, "ALA", "CB", "C", [2.0, -1.0, 0.5]),
    (2, "GLY", "N", "N", [3.3, 1.4, 0.0]),
    (2, "GLY", "H", "H", [3.5, 0.5, 0.0]),
    (2, "GLY", "CA", "C", [4.0, 2.7, 0.0]),
    (2, "GLY", "C", "C", [5.5, 2.7, 0.0]),
    (2, "GLY", "O", "O", [6.2, 1.7, 0.0]),
]


def make_list(coords, names=None, resnums=None):
    """Build a RecordList directly from coordinates."""
    pdb = RecordList()
    for i, coord in enumerate(coords):
        pdb.append(
            Record(
                coords=np.array(coord, dtype=np.float64),
                atnam=names[i] if names else "CA  ",
                atnum=i + 1,
                resnum=resnums[i] if resnums else i + 1,
            )
        )
    return pdb


def snapshot(pdb):
    """Capture node identity and field values of every record in a list."""
    return [
        (
            id(r),
            r.atnam,
            r.atnum,
            r.resnam,
            r.chain,
            r.resnum,
            r.element,
            tuple(r.coords),
        )
        for r in pdb
    ]


class CountingAllocator:
    """Record allocator that runs out of memory on its Nth call."""

    def __init__(self, fail_at=None):
        self.fail_at = fail_at
        self.calls = 0
        self.allocated = []

    def __call__(self):
        self.calls += 1
        if self.fail_at is not None and self.calls >= self.fail_at:
            raise MemoryError("simulated exhaustion")
        record = Record.blank()
        self.allocated.append(record)
        return record


@pytest.fixture
def dipeptide():
    """Ala-Gly dipeptide with full backbone, a CB and one amide hydrogen."""
    pdb = RecordList()
    for i, (resnum, resnam, name, element, coords) in enumerate(DIPEPTIDE_ATOMS):
        pdb.append(
            Record(
                coords=np.array(coords),
                atnam=name.ljust(4),
                atnum=i + 1,
                atnam_raw=f" {name:<3}",
                resnam=resnam,
                chain="A",
                resnum=resnum,
                element=element,
            )
        )
    return pdb


@pytest.fixture
def dipeptide_pdb_file(tmp_path):
    """The dipeptide written as a PDB file."""
    lines = []
    for i, (resnum, resnam, name, element, (x, y, z)) in enumerate(DIPEPTIDE_ATOMS):
        lines.append(
            f"ATOM  {i + 1:>5d}  {name:<3} {resnam:<3} A{resnum:>4d}    "
            f"{x:>8.3f}{y:>8.3f}{z:>8.3f}{1.0:>6.2f}{10.0:>6.2f}"
            f"          {element:>2}"
        )
    lines.append("END")

    path = tmp_path / "dipeptide.pdb"
    path.write_text("\n".join(lines) + "\n")
    return path

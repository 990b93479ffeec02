"""
PDB file writer.
"""

from pathlib import Path
from typing import TextIO, Union

from pdbrecords.core.structures import Record, RecordList, head_of, iter_records


def write_pdb(
    filename: Union[str, Path],
    pdb: Union[RecordList, Record, None],
) -> None:
    """
    Write a RecordList to PDB format.

    Args:
        filename: Output file path
        pdb: List (or its first record) to write
    """
    with open(filename, "w") as f:
        write_pdb_records(f, pdb)


def write_pdb_records(f: TextIO, pdb: Union[RecordList, Record, None]) -> int:
    """
    Write ATOM/HETATM lines and a closing END to an open file.

    Returns:
        Number of records written
    """
    natom = 0
    for record in iter_records(head_of(pdb)):
        f.write(format_record(record) + "\n")
        natom += 1

    f.write("END\n")
    return natom


def format_record(record: Record) -> str:
    """
    Format a single ATOM/HETATM line in strict PDB format.

    PDB format specification:
    COLUMNS        DATA TYPE       CONTENTS
    --------------------------------------------------------------------------------
     1 -  6        Record name     "ATOM  " or "HETATM"
     7 - 11        Integer         Atom serial number
    13 - 16        Atom            Atom name
    17             Character       Alternate location indicator
    18 - 20        Residue name    Residue name
    22             Character       Chain identifier
    23 - 26        Integer         Residue sequence number
    27             AChar           Code for insertion of residues
    31 - 38        Real(8.3)       X coordinate
    39 - 46        Real(8.3)       Y coordinate
    47 - 54        Real(8.3)       Z coordinate
    55 - 60        Real(6.2)       Occupancy
    61 - 66        Real(6.2)       Temperature factor
    77 - 78        LString(2)      Element symbol
    """
    # Prefer the name as read, if it still fits cols 13-16
    if len(record.atnam_raw) == 4:
        atom_name_fmt = record.atnam_raw
    else:
        name = record.atnam.strip()
        if len(name) < 4:
            # Standard atoms (N, CA, CB, etc.): leading space, left-justify rest
            atom_name_fmt = f" {name:<3}"
        else:
            atom_name_fmt = f"{name:<4}"

    element = record.element.strip()
    if not element:
        name = record.atnam.strip()
        element = name[0] if name else "X"

    # fmt: off
    line = (
        f"{record.record_type:<6.6}"             # 1-6:   Record name
        f"{record.atnum:>5d} "                   # 7-11:  Serial number + col 12 space
        f"{atom_name_fmt}"                       # 13-16: Atom name
        f"{record.altpos or ' ':1.1}"            # 17:    AltLoc
        f"{record.resnam.strip():<3.3} "         # 18-20: ResName + col 21 space
        f"{record.chain or ' ':1.1}"             # 22:    Chain ID
        f"{record.resnum:>4d}"                   # 23-26: Residue sequence number
        f"{record.insert or ' ':1.1}"            # 27:    Insertion code
        f"   "                                   # 28-30: Blank
        f"{record.x:>8.3f}"                      # 31-38: X coordinate
        f"{record.y:>8.3f}"                      # 39-46: Y coordinate
        f"{record.z:>8.3f}"                      # 47-54: Z coordinate
        f"{record.occ:>6.2f}"                    # 55-60: Occupancy
        f"{record.bval:>6.2f}"                   # 61-66: Temperature factor
        f"          "                            # 67-76: Blank
        f"{element:>2.2}"                        # 77-78: Element symbol
    )
    # fmt: on

    return line

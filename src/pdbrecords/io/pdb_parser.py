"""
PDB file parser using BioPython.

Converts a parsed structure into a RecordList in file order.
"""

from pathlib import Path
from typing import Optional, Sequence, Union
import numpy as np

from Bio.PDB import PDBParser
from Bio.PDB.Structure import Structure

from pdbrecords.core.constants import RECORD_ATOM, RECORD_HETATM
from pdbrecords.core.selection import pad_atom_name
from pdbrecords.core.structures import Record, RecordList


def read_pdb_file(
    filename: Union[str, Path],
    model_id: int = 0,
) -> RecordList:
    """
    Read a PDB file into a RecordList.

    Args:
        filename: Path to PDB file
        model_id: Which model to read (0 = first model)

    Returns:
        RecordList holding every atom of the model, in file order
    """
    parser = PDBParser(QUIET=True)
    structure = parser.get_structure("pdb", str(filename))

    return _convert_biopython_structure(structure, model_id)


def _convert_biopython_structure(
    structure: Structure,
    model_id: int = 0,
) -> RecordList:
    """
    Convert BioPython Structure to a RecordList.

    Args:
        structure: BioPython Structure object
        model_id: Which model to use

    Returns:
        RecordList
    """
    pdb = RecordList()

    models = list(structure.get_models())
    if not models:
        return pdb
    if model_id >= len(models):
        model_id = 0
    model = models[model_id]

    for chain in model:
        for bio_residue in chain:
            hetfield, res_num, insertion_code = bio_residue.get_id()
            record_type = RECORD_ATOM if hetfield == " " else RECORD_HETATM

            for bio_atom in bio_residue:
                pdb.append(
                    Record(
                        coords=np.array(bio_atom.get_coord(), dtype=np.float64),
                        atnam=pad_atom_name(bio_atom.get_name()),
                        atnum=bio_atom.get_serial_number() or 0,
                        record_type=record_type,
                        atnam_raw=bio_atom.get_fullname(),
                        altpos=bio_atom.get_altloc() or " ",
                        resnam=bio_residue.get_resname(),
                        chain=chain.get_id(),
                        resnum=res_num,
                        insert=insertion_code or " ",
                        occ=float(bio_atom.get_occupancy() or 0.0),
                        bval=float(bio_atom.get_bfactor() or 0.0),
                        element=bio_atom.element or "",
                    )
                )

    return pdb


def read_records_from_array(
    coords: np.ndarray,
    names: Sequence[str],
    resnums: Optional[Sequence[int]] = None,
    resnam: str = "UNK",
    chain_id: str = "A",
) -> RecordList:
    """
    Create a RecordList from raw coordinates and atom names.

    Args:
        coords: Array of coordinates, shape (N, 3)
        names: Atom name for each row (padded automatically)
        resnums: Residue number for each row. Defaults to 1 for every atom.
        resnam: Residue name given to every record
        chain_id: Chain identifier

    Returns:
        RecordList with one record per row
    """
    pdb = RecordList()
    if resnums is None:
        resnums = [1] * len(names)

    for i, (coord, name, resnum) in enumerate(zip(coords, names, resnums)):
        pdb.append(
            Record(
                coords=np.array(coord, dtype=np.float64),
                atnam=pad_atom_name(name),
                atnum=i + 1,
                resnam=resnam,
                chain=chain_id,
                resnum=int(resnum),
            )
        )

    return pdb

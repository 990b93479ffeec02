"""Core data structures and algorithms."""

from pdbrecords.core.structures import (
    Record,
    RecordList,
    RecordListBuilder,
    iter_records,
    iter_range,
)
from pdbrecords.core.stringlist import StringList
from pdbrecords.core.exceptions import AllocationError
from pdbrecords.core.constants import (
    NULL_COORD,
    ATOM_NAME_WIDTH,
    BACKBONE_ATOMS,
    CALPHA_ATOM,
)
from pdbrecords.core.selection import (
    pad_atom_name,
    make_selection,
    select_atoms,
    select_ca,
    select_backbone,
    strip_hydrogens,
    atom_names,
)
from pdbrecords.core.geometry import (
    get_cofg,
    get_cofg_range,
    get_cofg_range_count,
    find_cofg_sidechain_range,
    find_next_residue,
    iter_residue_ranges,
    get_residue_centroids,
)

__all__ = [
    "Record",
    "RecordList",
    "RecordListBuilder",
    "iter_records",
    "iter_range",
    "StringList",
    "AllocationError",
    "NULL_COORD",
    "ATOM_NAME_WIDTH",
    "BACKBONE_ATOMS",
    "CALPHA_ATOM",
    "pad_atom_name",
    "make_selection",
    "select_atoms",
    "select_ca",
    "select_backbone",
    "strip_hydrogens",
    "atom_names",
    "get_cofg",
    "get_cofg_range",
    "get_cofg_range_count",
    "find_cofg_sidechain_range",
    "find_next_residue",
    "iter_residue_ranges",
    "get_residue_centroids",
]

"""
Atom selection on RecordLists.

All selections are non-destructive: they return a new list of freshly
allocated copies and never modify, relink or free the input list.
"""

from typing import Callable, Iterable, List, Optional, Tuple, Union

from pdbrecords.core.constants import ATOM_NAME_WIDTH, BACKBONE_ATOMS, CALPHA_ATOM
from pdbrecords.core.exceptions import AllocationError
from pdbrecords.core.stringlist import StringList
from pdbrecords.core.structures import (
    Allocator,
    Record,
    RecordList,
    RecordListBuilder,
    head_of,
    iter_records,
)

PDBInput = Union[RecordList, Record, None]


def pad_atom_name(name: str) -> str:
    """
    Convert an atom name to the fixed-width token used for matching.

    Args:
        name: Atom name, e.g. "CA" or " CA "

    Returns:
        Left-justified name padded to ATOM_NAME_WIDTH, e.g. "CA  "
    """
    return name.strip().ljust(ATOM_NAME_WIDTH)[:ATOM_NAME_WIDTH]


def make_selection(*names: str) -> List[str]:
    """Build a selection set from bare atom names: make_selection("N", "CA")."""
    return [pad_atom_name(name) for name in names]


def _copy_where(
    pdbin: PDBInput,
    keep: Callable[[Record], bool],
    allocator: Optional[Allocator],
) -> Tuple[Optional[RecordList], int]:
    """Copy the records accepted by keep into a new list, rolling back on failure."""
    try:
        with RecordListBuilder(allocator) as builder:
            for record in iter_records(head_of(pdbin)):
                if keep(record):
                    builder.append_copy(record)
    except AllocationError:
        return None, 0

    return builder.result, len(builder.result)


def select_atoms(
    pdbin: PDBInput,
    selection: Iterable[str],
    allocator: Optional[Allocator] = None,
) -> Tuple[Optional[RecordList], int]:
    """
    Copy the records whose atom name is in the selection set.

    Names are compared over ATOM_NAME_WIDTH characters, case-sensitively,
    so tokens must be padded ("CA  ", not "CA"). See make_selection().

    Args:
        pdbin: Input list (or its first record). Never modified.
        selection: Atom name tokens to keep
        allocator: Optional node allocator, see RecordList.alloc_next

    Returns:
        Tuple of:
        - New RecordList in input order. Empty when the selection is empty
          or nothing matches. None if allocation failed.
        - Number of records copied (0 on failure)
    """
    tokens = [token[:ATOM_NAME_WIDTH] for token in selection]

    def keep(record: Record) -> bool:
        atnam = record.atnam[:ATOM_NAME_WIDTH]
        for token in tokens:
            if atnam == token:
                return True
        return False

    return _copy_where(pdbin, keep, allocator)


def select_ca(
    pdbin: PDBInput, allocator: Optional[Allocator] = None
) -> Tuple[Optional[RecordList], int]:
    """Copy only the C-alpha records."""
    return select_atoms(pdbin, [CALPHA_ATOM], allocator)


def select_backbone(
    pdbin: PDBInput, allocator: Optional[Allocator] = None
) -> Tuple[Optional[RecordList], int]:
    """Copy only the N, CA, C and O records."""
    return select_atoms(pdbin, BACKBONE_ATOMS, allocator)


def strip_hydrogens(
    pdbin: PDBInput, allocator: Optional[Allocator] = None
) -> Tuple[Optional[RecordList], int]:
    """
    Copy every record except hydrogens (and deuteriums).

    Same return convention as select_atoms().
    """
    return _copy_where(pdbin, lambda record: not record.is_hydrogen, allocator)


def atom_names(pdbin: PDBInput) -> StringList:
    """Distinct atom names in order of first appearance."""
    names = StringList()
    for record in iter_records(head_of(pdbin)):
        if record.atnam not in names:
            names.store(record.atnam)
    return names

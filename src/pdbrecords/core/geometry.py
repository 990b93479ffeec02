"""
Centre of geometry calculations over RecordLists.

A range is given as a pair of records from the same list: start
(inclusive) and stop (exclusive, usually the first record of the next
residue). A stop of None means "to the end of the list".

Records at the unknown-position sentinel are skipped. When no record in
the range counts, the division by zero is not trapped: the result is an
array of NaN. Check np.isfinite() on the result, or use
get_cofg_range_count(), to detect this.
"""

from typing import Iterator, Optional, Tuple, Union
import numpy as np

from pdbrecords.core.constants import ATOM_NAME_WIDTH, CALPHA_ATOM, SIDECHAIN_EXCLUDE
from pdbrecords.core.structures import Record, RecordList, head_of, iter_range


def _mean(total: np.ndarray, natom: int) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        return total / np.float64(natom)


def get_cofg_range_count(
    start: Optional[Record], stop: Optional[Record] = None
) -> Tuple[np.ndarray, int]:
    """
    Find the centre of geometry of a range and the number of atoms used.

    Args:
        start: First record of the range
        stop: Record ending the range (exclusive), or None

    Returns:
        Tuple of:
        - [x, y, z] centre of geometry (NaN if no atom was counted)
        - Number of atoms that contributed
    """
    total = np.zeros(3)
    natom = 0

    for record in iter_range(start, stop):
        if record.has_coords:
            total += record.coords
            natom += 1

    return _mean(total, natom), natom


def get_cofg_range(start: Optional[Record], stop: Optional[Record] = None) -> np.ndarray:
    """
    Find the centre of geometry of a range, ignoring unknown coordinates.

    An empty range, or one where every record is at the sentinel, gives
    NaN in all three components rather than raising.

    Args:
        start: First record of the range
        stop: Record ending the range (exclusive), or None

    Returns:
        [x, y, z] centre of geometry
    """
    return get_cofg_range_count(start, stop)[0]


def get_cofg(pdb: Union[RecordList, Record, None]) -> np.ndarray:
    """Centre of geometry of a whole list."""
    return get_cofg_range(head_of(pdb), None)


def find_cofg_sidechain_range(
    start: Optional[Record], stop: Optional[Record] = None
) -> np.ndarray:
    """
    Find the centre of geometry of the sidechain atoms in a range.

    Backbone atoms (and OXT) are ignored. For a range with no sidechain
    atoms, such as glycine, the C-alpha position is used instead.

    Args:
        start: First record of the range
        stop: Record ending the range (exclusive), or None

    Returns:
        [x, y, z] sidechain centre (NaN if there is neither a sidechain
        nor a C-alpha)
    """
    total = np.zeros(3)
    natom = 0
    ca = None

    for record in iter_range(start, stop):
        atnam = record.atnam[:ATOM_NAME_WIDTH]
        if atnam == CALPHA_ATOM and ca is None:
            ca = record
        if atnam in SIDECHAIN_EXCLUDE:
            continue
        if record.has_coords:
            total += record.coords
            natom += 1

    if natom == 0 and ca is not None and ca.has_coords:
        return ca.coords.copy()

    return _mean(total, natom)


def find_next_residue(record: Optional[Record]) -> Optional[Record]:
    """
    Find the first record of the residue following the one record is in.

    Returns:
        First record of the next residue, or None at the end of the list
    """
    if record is None:
        return None

    residue_id = record.residue_id
    p = record.next
    while p is not None and p.residue_id == residue_id:
        p = p.next
    return p


def iter_residue_ranges(
    pdb: Union[RecordList, Record, None]
) -> Iterator[Tuple[Record, Optional[Record]]]:
    """Yield a (start, stop) pair for every residue in the list."""
    start = head_of(pdb)
    while start is not None:
        stop = find_next_residue(start)
        yield start, stop
        start = stop


def get_residue_centroids(
    pdb: Union[RecordList, Record, None], sidechain: bool = False
) -> np.ndarray:
    """
    Centre of geometry of every residue.

    Args:
        pdb: Input list
        sidechain: Use sidechain centres (find_cofg_sidechain_range)

    Returns:
        (N, 3) numpy array, one row per residue
    """
    centre = find_cofg_sidechain_range if sidechain else get_cofg_range
    centroids = [centre(start, stop) for start, stop in iter_residue_ranges(pdb)]
    return np.array(centroids, dtype=np.float64).reshape(-1, 3)

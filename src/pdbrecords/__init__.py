"""
pdbrecords - linked-list storage and selection of PDB atom records

Non-destructive atom selection and centre of geometry calculations over
singly-linked lists of macromolecular atom records.
"""

__version__ = "1.0.0"

from pdbrecords.core.structures import Record, RecordList
from pdbrecords.core.stringlist import StringList
from pdbrecords.core.exceptions import AllocationError
from pdbrecords.core.selection import select_atoms
from pdbrecords.core.geometry import get_cofg_range

__all__ = [
    "Record",
    "RecordList",
    "StringList",
    "AllocationError",
    "select_atoms",
    "get_cofg_range",
    "__version__",
]

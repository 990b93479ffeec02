"""
Core data structures for PDB atom records.

A RecordList is a singly-linked chain of Record nodes. Each list owns its
nodes exclusively: a node carries a reference to the list it belongs to and
can only be linked into one list at a time. Copies always allocate fresh
nodes.
"""

from dataclasses import dataclass, field, fields
from typing import Callable, Iterable, Iterator, Optional, Union
import numpy as np

from pdbrecords.core.constants import (
    NULL_COORD,
    RECORD_ATOM,
    BACKBONE_ATOMS,
    ATOM_NAME_WIDTH,
    HYDROGEN_ELEMENTS,
)
from pdbrecords.core.exceptions import AllocationError


@dataclass(eq=False)
class Record:
    """
    A single ATOM/HETATM entry.

    Records compare by identity so that range ends can be tested with `is`
    and `==` alike.
    """

    coords: np.ndarray  # [x, y, z] coordinates
    atnam: str  # Fixed-width atom name (e.g., "CA  ", "N   ")
    atnum: int = 0  # Atom serial number
    record_type: str = RECORD_ATOM  # "ATOM  " or "HETATM"
    atnam_raw: str = ""  # Atom name as written in columns 13-16
    altpos: str = " "  # Alternate location indicator
    resnam: str = "UNK"  # Residue name
    chain: str = "A"  # Chain identifier
    resnum: int = 0  # Residue number
    insert: str = " "  # Insertion code
    occ: float = 1.0  # Occupancy
    bval: float = 0.0  # Temperature factor
    element: str = ""  # Element symbol
    next: Optional["Record"] = field(default=None, repr=False)
    _owner: Optional["RecordList"] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        """Ensure coords is a float numpy array."""
        if not isinstance(self.coords, np.ndarray) or self.coords.dtype != np.float64:
            self.coords = np.array(self.coords, dtype=np.float64)

    @classmethod
    def blank(cls) -> "Record":
        """Allocate an empty record, ready to be filled by copy_from()."""
        return cls(coords=np.zeros(3), atnam=" " * ATOM_NAME_WIDTH)

    @property
    def x(self) -> float:
        return self.coords[0]

    @x.setter
    def x(self, value: float):
        self.coords[0] = value

    @property
    def y(self) -> float:
        return self.coords[1]

    @y.setter
    def y(self, value: float):
        self.coords[1] = value

    @property
    def z(self) -> float:
        return self.coords[2]

    @z.setter
    def z(self, value: float):
        self.coords[2] = value

    @property
    def has_coords(self) -> bool:
        """
        True unless the coordinates are the unknown-position sentinel.

        The test is applied per axis: a record counts as placed if ANY axis
        is below NULL_COORD. A record such as (9999.0, 0.0, 0.0) is
        therefore treated as placed.
        """
        return self.x < NULL_COORD or self.y < NULL_COORD or self.z < NULL_COORD

    @property
    def is_backbone(self) -> bool:
        return self.atnam[:ATOM_NAME_WIDTH] in BACKBONE_ATOMS

    @property
    def is_hydrogen(self) -> bool:
        element = self.element.strip().upper()
        if element:
            return element in HYDROGEN_ELEMENTS
        return self.atnam.strip()[:1] in HYDROGEN_ELEMENTS

    @property
    def residue_id(self) -> tuple:
        """(chain, resnum, insert) triple identifying the residue."""
        return (self.chain, self.resnum, self.insert)

    def copy_from(self, src: "Record"):
        """
        Copy every field of src into this record.

        The coordinates are copied, not shared, and the successor reference
        is cleared. List ownership is left untouched.
        """
        for name in _DOMAIN_FIELDS:
            setattr(self, name, getattr(src, name))
        self.coords = src.coords.copy()
        self.next = None

    def copy(self) -> "Record":
        """Create a detached copy of this record."""
        new = Record.blank()
        new.copy_from(self)
        return new


_DOMAIN_FIELDS = tuple(
    f.name for f in fields(Record) if f.name not in ("coords", "next", "_owner")
)

Allocator = Callable[[], Record]


def iter_records(start: Optional[Record]) -> Iterator[Record]:
    """Walk from start to the end of its list."""
    p = start
    while p is not None:
        yield p
        p = p.next


def iter_range(start: Optional[Record], stop: Optional[Record] = None) -> Iterator[Record]:
    """
    Walk the half-open range [start, stop).

    Args:
        start: First record of the range (inclusive)
        stop: Record ending the range (exclusive). None runs to the end
            of the list.

    Yields:
        Records in list order. Nothing if start is None or start is stop.
    """
    p = start
    while p is not None and p is not stop:
        yield p
        p = p.next


class RecordList:
    """
    An ordered, singly-linked list of Records that owns its nodes.

    Example usage:
        >>> pdb = RecordList()
        >>> node = pdb.alloc_next()
        >>> node.copy_from(other_record)
        >>> for record in pdb:
        ...     print(record.atnam)
    """

    def __init__(self):
        self.head: Optional[Record] = None
        self.tail: Optional[Record] = None
        self._count = 0

    @classmethod
    def from_records(
        cls, records: Iterable[Record], allocator: Optional[Allocator] = None
    ) -> "RecordList":
        """
        Build a list holding copies of the given records.

        Raises:
            AllocationError: If a node cannot be allocated. Nothing built so
                far survives.
        """
        with RecordListBuilder(allocator) as builder:
            for record in records:
                builder.append_copy(record)
        return builder.result

    def __iter__(self) -> Iterator[Record]:
        return iter_records(self.head)

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"RecordList(natoms={self._count})"

    def owns(self, record: Record) -> bool:
        """True if record is a node of this list."""
        return record._owner is self

    def append(self, record: Record) -> Record:
        """
        Link a new node at the tail of the list.

        The node must be detached: not owned by any list and without a
        successor.

        Raises:
            ValueError: If the node is already linked into a list
        """
        if record._owner is not None:
            raise ValueError("record already belongs to a list")
        if record.next is not None:
            raise ValueError("record is still linked to a successor")

        record._owner = self
        if self.tail is None:
            self.head = record
        else:
            self.tail.next = record
        self.tail = record
        self._count += 1
        return record

    def alloc_next(self, allocator: Optional[Allocator] = None) -> Record:
        """
        Allocate a blank node and link it at the tail.

        Args:
            allocator: Callable returning a new blank Record. Defaults to
                Record.blank. A MemoryError from it signals exhaustion.

        Returns:
            The newly linked node

        Raises:
            AllocationError: If the allocator is exhausted
        """
        allocator = allocator or Record.blank
        try:
            record = allocator()
        except MemoryError as e:
            raise AllocationError("unable to allocate a PDB record") from e
        return self.append(record)

    def append_copy(self, src: Record, allocator: Optional[Allocator] = None) -> Record:
        """Allocate a node at the tail and copy src into it."""
        node = self.alloc_next(allocator)
        node.copy_from(src)
        return node

    def free(self):
        """Release every node in the list, leaving it empty."""
        p = self.head
        while p is not None:
            nxt = p.next
            p.next = None
            p._owner = None
            p = nxt
        self.head = None
        self.tail = None
        self._count = 0


class RecordListBuilder:
    """
    Builds a RecordList, committing it only if construction completes.

    If the with-block raises, every node built so far is released and the
    exception propagates. On success the list is available as `result`.

    Example usage:
        >>> with RecordListBuilder() as builder:
        ...     for record in source:
        ...         builder.append_copy(record)
        >>> new_list = builder.result
    """

    def __init__(self, allocator: Optional[Allocator] = None):
        self.allocator = allocator
        self.result: Optional[RecordList] = None
        self._pending = RecordList()

    def __enter__(self) -> "RecordListBuilder":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            self._pending.free()
        else:
            self.result = self._pending
        return False

    def __len__(self) -> int:
        return len(self._pending)

    def append_copy(self, src: Record) -> Record:
        return self._pending.append_copy(src, self.allocator)


def head_of(pdb: Union[RecordList, Record, None]) -> Optional[Record]:
    """Return the first record of a RecordList, or pass a bare node through."""
    if isinstance(pdb, RecordList):
        return pdb.head
    return pdb

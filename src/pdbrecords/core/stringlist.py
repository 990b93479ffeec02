"""
Linked list of strings.

Used to collect names (residue names, chain labels, atom names) while
walking a RecordList, and to check whether a name has been seen before.
"""

from typing import Callable, Iterator, Optional

from pdbrecords.core.exceptions import AllocationError


class StringNode:
    """One link of a StringList, owning its copy of the string."""

    __slots__ = ("string", "next")

    def __init__(self, string: str):
        self.string = string
        self.next: Optional["StringNode"] = None


class StringList:
    """
    An ordered, singly-linked list of strings.

    Duplicates are allowed; use `in` to check for an existing entry before
    storing if uniqueness is wanted.

    Example usage:
        >>> seen = StringList()
        >>> for record in pdb:
        ...     if record.resnam not in seen:
        ...         seen.store(record.resnam)
    """

    def __init__(self, allocator: Optional[Callable[[str], StringNode]] = None):
        self.head: Optional[StringNode] = None
        self.tail: Optional[StringNode] = None
        self._allocator = allocator or StringNode
        self._count = 0

    def __iter__(self) -> Iterator[str]:
        p = self.head
        while p is not None:
            yield p.string
            p = p.next

    def __len__(self) -> int:
        return self._count

    def __contains__(self, string: str) -> bool:
        return self.contains(string)

    def store(self, string: str) -> "StringList":
        """
        Append a copy of string at the tail of the list.

        Returns:
            The list itself, so that calls can be chained

        Raises:
            AllocationError: If the node cannot be allocated. The list is
                left unchanged.
        """
        try:
            node = self._allocator(str(string))
        except MemoryError as e:
            raise AllocationError("unable to allocate a string list entry") from e

        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._count += 1
        return self

    def contains(self, string: str) -> bool:
        """Case-sensitive exact match against every entry."""
        for entry in self:
            if entry == string:
                return True
        return False

    def free(self):
        """Release every entry and its string."""
        p = self.head
        while p is not None:
            nxt = p.next
            p.next = None
            p.string = None
            p = nxt
        self.head = None
        self.tail = None
        self._count = 0

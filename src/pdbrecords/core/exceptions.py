"""Exceptions raised by the record and string list primitives."""


class AllocationError(MemoryError):
    """A new list node could not be allocated."""

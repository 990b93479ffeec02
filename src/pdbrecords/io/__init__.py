"""PDB I/O module."""

from pdbrecords.io.pdb_parser import read_pdb_file, read_records_from_array
from pdbrecords.io.pdb_writer import write_pdb, write_pdb_records, format_record

__all__ = [
    "read_pdb_file",
    "read_records_from_array",
    "write_pdb",
    "write_pdb_records",
    "format_record",
]

"""
Constants for PDB record handling.
"""

# Coordinate value marking an atom whose position is unknown
NULL_COORD = 9999.0

# Atom names are compared as fixed-width tokens
ATOM_NAME_WIDTH = 4

# Record types
RECORD_ATOM = "ATOM  "
RECORD_HETATM = "HETATM"

# Backbone atom names, padded to ATOM_NAME_WIDTH
BACKBONE_ATOMS = ["N   ", "CA  ", "C   ", "O   "]
CALPHA_ATOM = "CA  "

# Atoms left out of a sidechain centre of geometry
SIDECHAIN_EXCLUDE = BACKBONE_ATOMS + ["OXT "]

# Element symbols treated as hydrogen
HYDROGEN_ELEMENTS = ("H", "D")

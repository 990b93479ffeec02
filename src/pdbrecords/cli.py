"""
Command-line interface for pdbrecords.

Provides the `pdbrecords` command with `select` and `centroid` subcommands.
"""

import sys
from pathlib import Path

import click
import numpy as np

from pdbrecords import __version__


def _fail(e: Exception, verbose: bool):
    click.echo(f"Error: {e}", err=True)
    if verbose:
        import traceback

        traceback.print_exc()
    sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="pdbrecords")
def main():
    """
    pdbrecords: select atoms from, and find centres of, PDB structures.

    Example usage:

        pdbrecords select input.pdb -a CA -O ca_only.pdb

        pdbrecords centroid --per-residue --sidechain input.pdb
    """


@main.command()
@click.argument("pdb_file", type=click.Path(exists=True))
@click.option(
    "-a", "--atom", "atoms", multiple=True, required=True, help="Atom name to keep (repeatable)"
)
@click.option("-O", "--output", type=click.Path(), help="Output file path")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def select(pdb_file, atoms, output, verbose):
    """Write a copy of PDB_FILE holding only the named atoms."""
    from pdbrecords.core.selection import atom_names, make_selection, select_atoms
    from pdbrecords.io.pdb_parser import read_pdb_file
    from pdbrecords.io.pdb_writer import write_pdb, write_pdb_records

    if output is None:
        output = str(Path(pdb_file).stem) + ".sel.pdb"

    try:
        pdb = read_pdb_file(pdb_file)
        selection = make_selection(*atoms)

        if verbose:
            click.echo(f"pdbrecords v{__version__}", err=True)
            click.echo(f"Input: {pdb_file} ({len(pdb)} atoms)", err=True)
            present = atom_names(pdb)
            for token in selection:
                if token not in present:
                    click.echo(f"Warning: no atoms named '{token.strip()}'", err=True)

        selected, natom = select_atoms(pdb, selection)
        if selected is None:
            raise MemoryError("ran out of memory while copying atoms")

        if output == "-":
            write_pdb_records(sys.stdout, selected)
        else:
            write_pdb(output, selected)

        if verbose:
            click.echo(f"Selected {natom} atoms -> {output}", err=True)

    except Exception as e:
        _fail(e, verbose)


@main.command()
@click.argument("pdb_file", type=click.Path(exists=True))
@click.option("-r", "--per-residue", is_flag=True, help="One centre per residue")
@click.option("-s", "--sidechain", is_flag=True, help="Use sidechain atoms only (with --per-residue)")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def centroid(pdb_file, per_residue, sidechain, verbose):
    """Print the centre of geometry of PDB_FILE."""
    from pdbrecords.core.geometry import (
        find_cofg_sidechain_range,
        get_cofg_range_count,
        iter_residue_ranges,
    )
    from pdbrecords.io.pdb_parser import read_pdb_file

    try:
        pdb = read_pdb_file(pdb_file)

        if not per_residue:
            cg, natom = get_cofg_range_count(pdb.head)
            if verbose:
                click.echo(f"Atoms counted: {natom}", err=True)
            click.echo(_format_point(cg))
            return

        for start, stop in iter_residue_ranges(pdb):
            if sidechain:
                cg = find_cofg_sidechain_range(start, stop)
            else:
                cg = get_cofg_range_count(start, stop)[0]
            label = f"{start.chain}{start.resnum}{start.insert.strip()} {start.resnam}"
            click.echo(f"{label:<12} {_format_point(cg)}")

    except Exception as e:
        _fail(e, verbose)


def _format_point(point: np.ndarray) -> str:
    return " ".join(f"{v:8.3f}" for v in point)


if __name__ == "__main__":
    main()

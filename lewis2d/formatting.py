"""
Formatting Module
=================

Human-readable text for the info panel shown next to the drawing.
"""

from .pubchem import pubchem_url


def format_weight(weight):
    """Format a molecular weight as ``MW: 18.02 g/mol`` (empty if unknown)."""
    if weight is None:
        return ''
    return f"MW: {float(weight):.2f} g/mol"


def format_charge(charge):
    return f"+{charge}" if charge > 0 else str(charge)


def format_properties(molecule):
    """
    Build the property rows of the info panel.

    Rows for values the record does not carry are left out, and the
    charge row only appears for charged species.

    Args:
        molecule (Molecule): Molecule with its metadata

    Returns:
        list: (label, value, title) tuples; title is None when there is no tooltip
    """
    rows = [
        ('Atoms', str(len(molecule.atoms)), None),
        ('Bonds', str(len(molecule.bonds)), None),
    ]
    if molecule.charge:
        rows.append(('Charge', format_charge(molecule.charge), None))
    if molecule.exact_mass:
        rows.append(('Exact Mass', f"{float(molecule.exact_mass):.4f}", None))
    if molecule.xlogp is not None:
        rows.append(('LogP', f"{molecule.xlogp:.2f}",
                     'Octanol-water partition coefficient (lipophilicity)'))
    if molecule.tpsa is not None:
        rows.append(('TPSA', f"{molecule.tpsa:.1f} Å²", 'Topological Polar Surface Area'))
    if molecule.hbond_donors is not None:
        rows.append(('H-Donors', str(molecule.hbond_donors), 'Hydrogen bond donors'))
    if molecule.hbond_acceptors is not None:
        rows.append(('H-Acceptors', str(molecule.hbond_acceptors), 'Hydrogen bond acceptors'))
    if molecule.rotatable_bonds is not None:
        rows.append(('Rotatable', str(molecule.rotatable_bonds), 'Rotatable bonds (flexibility)'))
    if molecule.complexity is not None:
        rows.append(('Complexity', str(round(molecule.complexity)), 'Molecular complexity score'))
    return rows


def format_info_text(molecule):
    """Description, IUPAC name and structure notes, one paragraph per line."""
    lines = []
    if molecule.description:
        lines.append(molecule.description)
    if molecule.iupac_name and molecule.iupac_name != molecule.name:
        lines.append('')
        lines.append(f"IUPAC: {molecule.iupac_name}")
    if molecule.is_2d:
        lines.append('')
        lines.append('(2D structure - 3D not available)')
    if molecule.cid:
        lines.append('')
        lines.append(f"PubChem: {pubchem_url(molecule.cid)}")
    return '\n'.join(lines)

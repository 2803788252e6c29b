"""
Valence Module
==============

Lone-pair and electron-domain estimation from a fixed valence table.
This is the VSEPR heuristic the layout and the lone-pair dots rely on;
it is not a chemical validator, so hypervalent atoms simply end up
with zero lone pairs.
"""

from dataclasses import dataclass

from .model import bond_order


# Valence electrons for common elements
VALENCE_ELECTRONS = {
    'H': 1, 'C': 4, 'N': 5, 'O': 6, 'F': 7, 'Cl': 7, 'Br': 7, 'I': 7,
    'S': 6, 'P': 5, 'B': 3, 'Si': 4,
}
DEFAULT_VALENCE = 4


@dataclass(frozen=True)
class AtomInfo:
    element: str
    valence: int
    bond_count: int
    bonded_electrons: int
    lone_pairs: int
    total_domains: int


def valence_electrons(element):
    """Return the valence electron count of an element (4 when unknown)."""
    return VALENCE_ELECTRONS.get(element, DEFAULT_VALENCE)


def estimate_atom_info(molecule, neighbors, bond_orders):
    """
    Compute lone pairs and electron domains for every atom.

    Args:
        molecule (Molecule): Molecule being drawn
        neighbors (list): Neighbor index lists, as from ``build_adjacency``
        bond_orders (dict): Symmetric ``(i, j) -> order`` lookup

    Returns:
        list: One AtomInfo per atom, in atom order
    """
    infos = []
    for i, atom in enumerate(molecule.atoms):
        valence = valence_electrons(atom.element)
        bonded = sum(bond_order(bond_orders.get((i, j))) for j in neighbors[i])
        lone_pairs = max(0, (valence - bonded) // 2)
        bond_count = len(neighbors[i])
        infos.append(AtomInfo(
            element=atom.element,
            valence=valence,
            bond_count=bond_count,
            bonded_electrons=bonded,
            lone_pairs=lone_pairs,
            total_domains=bond_count + lone_pairs,
        ))
    return infos

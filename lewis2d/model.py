"""
Model Module
============

Molecular graph shared by the layout engine: atoms, bonds and the
molecule record handed over by the structure loaders, plus the adjacency
helpers every later stage starts from.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Atom:
    """An atom with its 3D coordinates (used by the 3D view only)."""
    element: str
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Point2D:
    """An externally supplied 2D coordinate."""
    x: float
    y: float


@dataclass(frozen=True)
class Bond:
    """A bond between two atom indices. An ``order`` of None or 0 counts as single."""
    begin: int
    end: int
    order: Optional[int] = 1


@dataclass
class Molecule:
    """Atoms, bonds and the descriptive metadata shown next to the drawing.

    ``atoms2d`` is a list parallel to ``atoms``; it is only used when its
    length matches the atom count.
    """
    atoms: List[Atom] = field(default_factory=list)
    bonds: List[Bond] = field(default_factory=list)
    atoms2d: Optional[List[Point2D]] = None
    cid: Optional[int] = None
    name: Optional[str] = None
    iupac_name: Optional[str] = None
    formula: Optional[str] = None
    weight: Optional[float] = None
    exact_mass: Optional[float] = None
    charge: Optional[int] = None
    xlogp: Optional[float] = None
    tpsa: Optional[float] = None
    hbond_donors: Optional[int] = None
    hbond_acceptors: Optional[int] = None
    rotatable_bonds: Optional[int] = None
    complexity: Optional[float] = None
    smiles: Optional[str] = None
    inchi: Optional[str] = None
    description: Optional[str] = None
    is_2d: bool = False

    def valid_bonds(self):
        """Yield the bonds whose endpoints are both valid atom indices."""
        count = len(self.atoms)
        for bond in self.bonds:
            if 0 <= bond.begin < count and 0 <= bond.end < count:
                yield bond

    def has_2d_coords(self):
        return self.atoms2d is not None and len(self.atoms2d) == len(self.atoms)


def bond_order(order):
    """Return the order of a bond, treating a missing or zero value as single."""
    return order or 1


def build_adjacency(molecule):
    """
    Build neighbor lists and a symmetric bond-order lookup.

    Args:
        molecule (Molecule): Molecule to index

    Returns:
        tuple: (neighbors, bond_orders) where ``neighbors[i]`` lists the
        neighbor indices of atom i in bond order, and ``bond_orders`` maps
        both ``(i, j)`` and ``(j, i)`` to the bond's order
    """
    neighbors = [[] for _ in molecule.atoms]
    bond_orders = {}
    for bond in molecule.valid_bonds():
        neighbors[bond.begin].append(bond.end)
        neighbors[bond.end].append(bond.begin)
        bond_orders[(bond.begin, bond.end)] = bond.order
        bond_orders[(bond.end, bond.begin)] = bond.order
    return neighbors, bond_orders

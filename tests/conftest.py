"""Shared fixtures: small molecules and MOL blocks."""

import pytest

from lewis2d.model import Atom, Bond, Molecule


def mol_block(atoms, bonds, name='test'):
    """Write a V2000 MOL block for (element, x, y, z) atoms and (a, b, order) bonds."""
    lines = [name, '  lewis2d', '']
    lines.append(f"{len(atoms):3d}{len(bonds):3d}  0  0  0  0  0  0  0  0999 V2000")
    for element, x, y, z in atoms:
        lines.append(f"{x:10.4f}{y:10.4f}{z:10.4f} {element:<3} 0  0  0  0  0  0  0  0  0  0  0  0")
    for a, b, order in bonds:
        lines.append(f"{a:3d}{b:3d}{order:3d}  0  0  0  0")
    lines.append('M  END')
    return '\n'.join(lines) + '\n'


WATER_3D = mol_block(
    [('O', 0.0, 0.0, 0.1), ('H', 0.9572, 0.0, 0.2), ('H', -0.24, 0.9266, -0.3)],
    [(1, 2, 1), (1, 3, 1)],
    name='962',
)

WATER_2D = mol_block(
    [('O', 2.5369, -0.155, 0.0), ('H', 3.0739, 0.155, 0.0), ('H', 2.0, 0.155, 0.0)],
    [(1, 2, 1), (1, 3, 1)],
    name='962',
)


@pytest.fixture
def water():
    return Molecule(
        atoms=[Atom('O'), Atom('H'), Atom('H')],
        bonds=[Bond(0, 1, 1), Bond(0, 2, 1)],
    )


@pytest.fixture
def carbon_dioxide():
    return Molecule(
        atoms=[Atom('O'), Atom('C'), Atom('O')],
        bonds=[Bond(0, 1, 2), Bond(1, 2, 2)],
    )


@pytest.fixture
def two_fragments():
    return Molecule(
        atoms=[Atom('C'), Atom('O'), Atom('N'), Atom('H')],
        bonds=[Bond(0, 1, 1), Bond(2, 3, 1)],
    )

"""
Layout Module
=============

Turns a molecular graph into 2D drawing coordinates.

Positions come either straight from the 2D coordinates supplied with the
molecule (PubChem's depiction, already laid out for display) or, when
those are missing, from a breadth-first VSEPR placement. Either way the
result is then scaled and centered onto the drawing surface.
"""

import logging
import math
from collections import deque

from .geometry import closest_angle_index, direction, optimal_angles


log = logging.getLogger(__name__)

BOND_LENGTH = 35
PADDING = 25
ORIGIN = (0.0, 0.0)


def direct_positions(molecule):
    """Use the supplied 2D coordinates, flipping y to screen orientation."""
    return [(p.x, -p.y) for p in molecule.atoms2d]


def find_seed_atom(molecule, neighbors):
    """Return the first non-hydrogen atom with the most neighbors (0 if none)."""
    seed = 0
    max_connections = -1
    for i, atom in enumerate(molecule.atoms):
        if atom.element != 'H' and len(neighbors[i]) > max_connections:
            max_connections = len(neighbors[i])
            seed = i
    return seed


def vsepr_positions(molecule, neighbors, atom_info, bond_length=BOND_LENGTH):
    """
    Place atoms breadth-first at evenly spaced electron-domain angles.

    Each dequeued atom gets ``max(total_domains, neighbor_count)`` candidate
    angles. Neighbors already placed reserve the candidate closest to their
    actual direction; the rest take the remaining candidates in order, one
    bond length away. Atoms not reachable from the seed stay at the origin.

    Args:
        molecule (Molecule): Molecule to lay out
        neighbors (list): Neighbor index lists
        atom_info (list): AtomInfo per atom
        bond_length (float): Distance between bonded atoms

    Returns:
        list: One (x, y) tuple per atom
    """
    if not molecule.atoms:
        return []

    seed = find_seed_atom(molecule, neighbors)
    log.debug("VSEPR layout seeded at atom %d (%s)", seed, molecule.atoms[seed].element)

    positions = [None] * len(molecule.atoms)
    positions[seed] = ORIGIN
    visited = {seed}
    queue = deque([seed])

    while queue:
        current = queue.popleft()
        pos = positions[current]
        current_neighbors = neighbors[current]
        candidates = optimal_angles(max(atom_info[current].total_domains, len(current_neighbors)))

        placed = [n for n in current_neighbors if n in visited]
        unplaced = [n for n in current_neighbors if n not in visited]

        used = set()
        for n in placed:
            idx = closest_angle_index(candidates, direction(pos, positions[n]), used)
            if idx is not None:
                used.add(idx)

        angle_idx = 0
        for n in unplaced:
            if n in visited:
                # listed twice through a duplicated bond
                continue
            while angle_idx < len(candidates) and angle_idx in used:
                angle_idx += 1
            if angle_idx >= len(candidates):
                break
            angle = candidates[angle_idx]
            used.add(angle_idx)
            positions[n] = (pos[0] + math.cos(angle) * bond_length,
                            pos[1] + math.sin(angle) * bond_length)
            visited.add(n)
            queue.append(n)

    unreachable = [i for i, p in enumerate(positions) if p is None]
    if unreachable:
        log.debug("%d atom(s) unreachable from seed, placed at origin", len(unreachable))
    return [ORIGIN if p is None else p for p in positions]


def resolve_positions(molecule, neighbors, atom_info, **options):
    """
    Compute unscaled 2D positions for every atom.

    Args:
        molecule (Molecule): Molecule to lay out
        neighbors (list): Neighbor index lists
        atom_info (list): AtomInfo per atom
        **options: Options:
            - use_2d_coords (bool): Use supplied 2D coordinates (default: True)
            - bond_length (float): VSEPR bond length (default: 35)

    Returns:
        list: One (x, y) tuple per atom
    """
    if options.get('use_2d_coords', True) and molecule.has_2d_coords():
        log.debug("Using supplied 2D coordinates for %d atoms", len(molecule.atoms))
        return direct_positions(molecule)
    return vsepr_positions(molecule, neighbors, atom_info,
                           bond_length=options.get('bond_length', BOND_LENGTH))


def normalize_positions(positions, width, height, padding=PADDING):
    """
    Scale and center positions onto a ``width`` x ``height`` surface.

    A single scale factor is used for both axes so the drawing keeps its
    proportions. A zero extent on an axis counts as 1.

    Args:
        positions (list): (x, y) tuples
        width (float): Surface width
        height (float): Surface height
        padding (float): Margin kept free on every side

    Returns:
        list: Remapped (x, y) tuples
    """
    if not positions:
        return []

    xs = [p[0] for p in positions]
    ys = [p[1] for p in positions]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    range_x = (max_x - min_x) or 1
    range_y = (max_y - min_y) or 1
    scale = min((width - padding * 2) / range_x, (height - padding * 2) / range_y)

    center_x = width / 2
    center_y = height / 2
    mid_x = (min_x + max_x) / 2
    mid_y = (min_y + max_y) / 2

    return [(center_x + (x - mid_x) * scale, center_y + (y - mid_y) * scale)
            for x, y in positions]

"""
Render Module
=============

Builds the drawing commands of a Lewis structure: bond lines, lone-pair
dot pairs and element labels. The commands are plain frozen dataclasses
so any backend (SVG here, a canvas in a GUI) can replay them in ``z``
order.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .geometry import closest_angle_index, direction, optimal_angles
from .layout import PADDING, normalize_positions, resolve_positions
from .model import bond_order, build_adjacency
from .valence import estimate_atom_info


CANVAS_WIDTH = 300
CANVAS_HEIGHT = 250

BOND_COLOR = '#aaaaaa'
BOND_LINE_WIDTH = 2
BOND_SPACING = 3
MAX_DRAWN_ORDER = 3

DOT_RADIUS = 2
DOT_DISTANCE = 14
DOT_SPREAD = 3
# A bond within this angle of a domain slot occupies it
LONE_PAIR_TOLERANCE = math.pi / 4
NO_DOTS_ELEMENTS = {'C', 'H'}

LABEL_RADIUS = 10
LABEL_BACKGROUND = '#1a1a2e'
LABEL_FONT_FAMILY = 'Arial'
LABEL_FONT_SIZE = 12
LABEL_FONT_WEIGHT = 'bold'

ELEMENT_COLORS = {
    'C': '#888888', 'H': '#ffffff', 'O': '#ff4444', 'N': '#4444ff',
    'S': '#ffff00', 'P': '#ff8800', 'F': '#00ff00', 'Cl': '#00dd00',
    'Br': '#884400', 'I': '#6600bb',
}
DEFAULT_COLOR = '#ffffff'

Z_BOND = 0
Z_LONE_PAIR = 1
Z_LABEL_BACKGROUND = 2
Z_LABEL_TEXT = 3


@dataclass(frozen=True)
class LineOp:
    p1: Tuple[float, float]
    p2: Tuple[float, float]
    width: float
    color: str
    z: int = Z_BOND


@dataclass(frozen=True)
class CircleOp:
    center: Tuple[float, float]
    radius: float
    fill: str
    z: int = Z_LONE_PAIR
    atom_index: Optional[int] = None


@dataclass(frozen=True)
class TextOp:
    position: Tuple[float, float]
    text: str
    color: str
    font_family: str = LABEL_FONT_FAMILY
    font_size: float = LABEL_FONT_SIZE
    font_weight: str = LABEL_FONT_WEIGHT
    z: int = Z_LABEL_TEXT
    atom_index: Optional[int] = None


def element_color(element):
    return ELEMENT_COLORS.get(element, DEFAULT_COLOR)


def sort_ops(ops):
    """Stable sort by layer, keeping emission order inside a layer."""
    return [op for _, op in sorted(enumerate(ops), key=lambda item: (item[1].z, item[0]))]


def bond_ops(p1, p2, order):
    """Parallel segments for one bond, symmetric about its centerline."""
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    length = math.hypot(dx, dy) or 1
    perp_x = -dy / length * BOND_SPACING
    perp_y = dx / length * BOND_SPACING

    count = min(bond_order(order), MAX_DRAWN_ORDER)
    ops = []
    for i in range(count):
        offset = i - (count - 1) / 2
        ops.append(LineOp(
            p1=(p1[0] + perp_x * offset, p1[1] + perp_y * offset),
            p2=(p2[0] + perp_x * offset, p2[1] + perp_y * offset),
            width=BOND_LINE_WIDTH,
            color=BOND_COLOR,
        ))
    return ops


def bond_angles_by_atom(molecule, positions):
    """Directions of every bond as seen from each of its two atoms."""
    angles = [[] for _ in molecule.atoms]
    for bond in molecule.valid_bonds():
        p1 = positions[bond.begin]
        p2 = positions[bond.end]
        angles[bond.begin].append(direction(p1, p2))
        angles[bond.end].append(direction(p2, p1))
    return angles


def lone_pair_angles(info, bond_angles):
    """
    Pick the domain angles that should carry lone-pair dots.

    Every bond claims the closest free domain slot within
    ``LONE_PAIR_TOLERANCE``; the free slots left over hold lone pairs, in
    allocation order and at most ``info.lone_pairs`` of them.

    Args:
        info (AtomInfo): Domain counts for the atom
        bond_angles (list): Actual bond directions at the atom

    Returns:
        list: Angles in radians
    """
    if info.lone_pairs <= 0 or info.element in NO_DOTS_ELEMENTS:
        return []
    candidates = optimal_angles(info.total_domains)
    used = set()
    for angle in bond_angles:
        idx = closest_angle_index(candidates, angle, used, tolerance=LONE_PAIR_TOLERANCE)
        if idx is not None:
            used.add(idx)
    free = [a for idx, a in enumerate(candidates) if idx not in used]
    return free[:info.lone_pairs]


def lone_pair_ops(atom_index, position, angles, color):
    """Two small dots per angle, side by side across the radial direction."""
    ops = []
    for angle in angles:
        cx = position[0] + math.cos(angle) * DOT_DISTANCE
        cy = position[1] + math.sin(angle) * DOT_DISTANCE
        perp_x = -math.sin(angle) * DOT_SPREAD
        perp_y = math.cos(angle) * DOT_SPREAD
        for sign in (1, -1):
            ops.append(CircleOp(
                center=(cx + sign * perp_x, cy + sign * perp_y),
                radius=DOT_RADIUS,
                fill=color,
                atom_index=atom_index,
            ))
    return ops


def label_ops(atom_index, position, element):
    """Background disc and element symbol, drawn above bonds and dots."""
    return [
        CircleOp(center=position, radius=LABEL_RADIUS, fill=LABEL_BACKGROUND,
                 z=Z_LABEL_BACKGROUND, atom_index=atom_index),
        TextOp(position=position, text=element, color=element_color(element),
               atom_index=atom_index),
    ]


def build_lewis_ops(molecule, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, **options):
    """
    Lay out a molecule and return the drawing commands of its Lewis structure.

    Args:
        molecule (Molecule): Molecule to draw; None or no atoms draws nothing
        width (float): Drawing surface width
        height (float): Drawing surface height
        **options: Options:
            - padding (float): Margin around the drawing (default: 25)
            - use_2d_coords (bool): Use supplied 2D coordinates (default: True)
            - bond_length (float): VSEPR bond length (default: 35)

    Returns:
        list: LineOp, CircleOp and TextOp commands sorted by layer
    """
    if molecule is None or not molecule.atoms:
        return []

    neighbors, bond_orders = build_adjacency(molecule)
    atom_info = estimate_atom_info(molecule, neighbors, bond_orders)
    raw = resolve_positions(molecule, neighbors, atom_info, **options)
    positions = normalize_positions(raw, width, height, options.get('padding', PADDING))
    bond_angles = bond_angles_by_atom(molecule, positions)

    ops = []
    for bond in molecule.valid_bonds():
        ops.extend(bond_ops(positions[bond.begin], positions[bond.end], bond.order))

    for i, info in enumerate(atom_info):
        angles = lone_pair_angles(info, bond_angles[i])
        ops.extend(lone_pair_ops(i, positions[i], angles, element_color(info.element)))
        ops.extend(label_ops(i, positions[i], info.element))

    return sort_ops(ops)

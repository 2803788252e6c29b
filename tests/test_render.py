"""Tests for the Lewis drawing commands."""

import math

import pytest

from lewis2d.geometry import angle_diff
from lewis2d.model import Atom, Bond, Molecule, Point2D
from lewis2d.render import (
    BOND_SPACING,
    DOT_DISTANCE,
    LABEL_BACKGROUND,
    CircleOp,
    LineOp,
    TextOp,
    Z_LONE_PAIR,
    bond_ops,
    build_lewis_ops,
    element_color,
    lone_pair_angles,
)
from lewis2d.valence import AtomInfo


def _lines(ops):
    return [op for op in ops if isinstance(op, LineOp)]


def _texts(ops):
    return [op for op in ops if isinstance(op, TextOp)]


def _dots(ops, atom_index=None):
    return [op for op in ops
            if isinstance(op, CircleOp) and op.z == Z_LONE_PAIR
            and (atom_index is None or op.atom_index == atom_index)]


def _pair_angles(ops, atom_index):
    """Radial angle of each dot pair around its atom label."""
    label = next(op for op in _texts(ops) if op.atom_index == atom_index)
    dots = _dots(ops, atom_index)
    angles = []
    for first, second in zip(dots[::2], dots[1::2]):
        mx = (first.center[0] + second.center[0]) / 2
        my = (first.center[1] + second.center[1]) / 2
        assert math.hypot(mx - label.position[0], my - label.position[1]) == pytest.approx(DOT_DISTANCE)
        angles.append(math.atan2(my - label.position[1], mx - label.position[0]))
    return angles


def test_empty_or_missing_molecule_draws_nothing():
    assert build_lewis_ops(None) == []
    assert build_lewis_ops(Molecule()) == []


def test_water(water):
    ops = build_lewis_ops(water)
    assert len(_lines(ops)) == 2
    assert [t.text for t in _texts(ops)] == ['O', 'H', 'H']
    # bonds go up and right, the two lone pairs take down and left
    assert len(_dots(ops)) == 4
    assert len(_dots(ops, 0)) == 4
    angles = _pair_angles(ops, 0)
    assert len(angles) == 2
    assert angle_diff(angles[0], math.pi / 2) == pytest.approx(0, abs=1e-9)
    assert angle_diff(angles[1], math.pi) == pytest.approx(0, abs=1e-9)


def test_water_with_depiction_coords(water):
    water.atoms2d = [Point2D(2.5369, -0.155), Point2D(3.0739, 0.155), Point2D(2.0, 0.155)]
    ops = build_lewis_ops(water)
    assert len(_dots(ops, 0)) == 4
    assert _dots(ops, 1) == [] and _dots(ops, 2) == []


def test_carbon_dioxide(carbon_dioxide):
    ops = build_lewis_ops(carbon_dioxide)
    assert len(_lines(ops)) == 4
    assert _dots(ops, 1) == []
    assert len(_dots(ops, 0)) == 4
    assert len(_dots(ops, 2)) == 4


def test_lone_fluorine_draws_three_pairs():
    ops = build_lewis_ops(Molecule(atoms=[Atom('F')]), width=300, height=250)
    texts = _texts(ops)
    assert len(texts) == 1
    assert texts[0].position == (150.0, 125.0)
    assert len(_dots(ops)) == 6
    angles = _pair_angles(ops, 0)
    expected = [-math.pi / 2, math.pi / 6, 5 * math.pi / 6]
    assert angles == pytest.approx(expected)


@pytest.mark.parametrize("element", ['C', 'H'])
def test_carbon_and_hydrogen_get_no_dots(element):
    ops = build_lewis_ops(Molecule(atoms=[Atom(element)]))
    assert _dots(ops) == []
    assert len(_texts(ops)) == 1


@pytest.mark.parametrize("order, expected", [(1, 1), (2, 2), (3, 3), (5, 3), (None, 1), (0, 1)])
def test_bond_line_count(order, expected):
    assert len(bond_ops((0.0, 0.0), (10.0, 0.0), order)) == expected


def test_double_bond_lines_are_symmetric():
    first, second = bond_ops((0.0, 0.0), (10.0, 0.0), 2)
    assert first.p1 == pytest.approx((0.0, -BOND_SPACING / 2))
    assert second.p1 == pytest.approx((0.0, BOND_SPACING / 2))
    assert first.p2 == pytest.approx((10.0, -BOND_SPACING / 2))


def test_triple_bond_middle_line_on_centerline():
    lines = bond_ops((0.0, 0.0), (0.0, 10.0), 3)
    assert lines[1].p1 == pytest.approx((0.0, 0.0))
    assert lines[0].p1[0] == pytest.approx(BOND_SPACING)
    assert lines[2].p1[0] == pytest.approx(-BOND_SPACING)


def test_zero_length_bond_does_not_fail():
    lines = bond_ops((5.0, 5.0), (5.0, 5.0), 2)
    assert len(lines) == 2


def test_labels_drawn_last(water):
    ops = build_lewis_ops(water)
    first_label = min(i for i, op in enumerate(ops) if isinstance(op, TextOp)
                      or (isinstance(op, CircleOp) and op.fill == LABEL_BACKGROUND))
    assert all(not isinstance(op, LineOp) and op.z != Z_LONE_PAIR for op in ops[first_label:])


def test_label_colors():
    ops = build_lewis_ops(Molecule(atoms=[Atom('O'), Atom('Zz')], bonds=[Bond(0, 1)]))
    colors = {t.text: t.color for t in _texts(ops)}
    assert colors == {'O': element_color('O'), 'Zz': '#ffffff'}


def test_invalid_bonds_are_skipped():
    molecule = Molecule(atoms=[Atom('O')], bonds=[Bond(0, 5, 1)])
    ops = build_lewis_ops(molecule)
    assert _lines(ops) == []
    assert len(_dots(ops)) == 6


def test_disconnected_fragments(two_fragments):
    ops = build_lewis_ops(two_fragments)
    assert len(_texts(ops)) == 4
    assert len(_lines(ops)) == 2
    for op in ops:
        points = [op.p1, op.p2] if isinstance(op, LineOp) else [getattr(op, 'center', None) or op.position]
        assert all(math.isfinite(c) for p in points for c in p)


def test_rendering_is_repeatable(carbon_dioxide):
    assert build_lewis_ops(carbon_dioxide) == build_lewis_ops(carbon_dioxide)


def test_lone_pair_angles_skip_slots_taken_by_bonds():
    info = AtomInfo(element='O', valence=6, bond_count=2, bonded_electrons=2,
                    lone_pairs=2, total_domains=4)
    angles = lone_pair_angles(info, [-math.pi / 2 + 0.2, 0.1])
    assert angles == pytest.approx([math.pi / 2, math.pi])


def test_lone_pair_angles_bond_far_from_any_slot():
    info = AtomInfo(element='N', valence=5, bond_count=1, bonded_electrons=3,
                    lone_pairs=1, total_domains=2)
    # candidates are up and down; a bond pointing right claims neither
    assert lone_pair_angles(info, [0.0]) == pytest.approx([-math.pi / 2])


def test_lone_pair_angles_capped_by_lone_pairs():
    info = AtomInfo(element='O', valence=6, bond_count=2, bonded_electrons=2,
                    lone_pairs=1, total_domains=4)
    assert len(lone_pair_angles(info, [-math.pi / 2, 0.0])) == 1

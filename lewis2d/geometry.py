"""
Geometry Module
===============

Angle helpers shared by the layout and the lone-pair placement.

Electron domains are spread evenly around an atom starting straight up
(screen coordinates, y pointing down). Both the position resolver and the
renderer match actual bond directions against those candidate angles
with ``closest_angle_index`` so they agree on which slots are taken.
"""

import math


TWO_PI = 2 * math.pi


def optimal_angles(n):
    """
    Return ``n`` evenly spaced angles in radians, starting at -pi/2.

    Args:
        n (int): Number of electron domains

    Returns:
        list: Angles ``-pi/2 + 2*pi*i/n``; empty when ``n <= 0``
    """
    if n <= 0:
        return []
    start = -math.pi / 2
    return [start + TWO_PI * i / n for i in range(n)]


def angle_diff(a, b):
    """Minimal absolute difference between two angles, in [0, pi]."""
    d = abs(a - b) % TWO_PI
    return TWO_PI - d if d > math.pi else d


def direction(p1, p2):
    """Angle of the vector from p1 to p2."""
    return math.atan2(p2[1] - p1[1], p2[0] - p1[0])


def closest_angle_index(candidates, angle, used=(), tolerance=None):
    """
    Find the unused candidate angle closest to ``angle``.

    Args:
        candidates (list): Candidate angles, as from ``optimal_angles``
        angle (float): Angle to match
        used (set): Candidate indices already taken
        tolerance (float): If given, matches must be strictly closer than this

    Returns:
        int: Index into ``candidates``, or None if nothing matches
    """
    best_idx = None
    best_diff = math.inf
    for idx, candidate in enumerate(candidates):
        if idx in used:
            continue
        d = angle_diff(candidate, angle)
        if d < best_diff:
            best_diff = d
            best_idx = idx
    if best_idx is None:
        return None
    if tolerance is not None and best_diff >= tolerance:
        return None
    return best_idx

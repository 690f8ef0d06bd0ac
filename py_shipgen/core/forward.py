"""Canonical orientation of a ship, chosen by a symmetry heuristic."""

from typing import List, Sequence, Tuple

import structlog

from ..utils.random import RandomSource
from ..utils.vector import Vector2
from .edges import Edge

logger = structlog.get_logger()


def symmetry_score(candidate: Vector2, group: Sequence[Vector2], own_index: int) -> int:
    """
    Imbalance of the group around the axis through the origin and ``candidate``.

    Other members are counted on the non-negative or negative side of the
    axis by the sign of the cross product; 0 means perfectly balanced.
    """
    left = 0
    right = 0
    for i, other in enumerate(group):
        if i == own_index:
            continue
        if candidate.cross(other) >= 0:
            left += 1
        else:
            right += 1
    return abs(left - right)


def select_forward(vertices: Sequence[Vector2],
                   hull: Sequence[int],
                   hull_edges: Sequence[Edge],
                   centre: Vector2,
                   random: RandomSource) -> Vector2:
    """
    Pick the forward unit vector.

    Candidates are the hull vertices and the hull edge midpoints, taken
    relative to the centre and scored within their own group. The most
    symmetric candidate across both groups wins; ties are broken at random.

    Args:
        vertices: All ship vertices
        hull: Hull indices
        hull_edges: Hull boundary edges
        centre: Hull centroid
        random: Source of every random draw

    Returns:
        Normalised direction from the centre to the chosen candidate
    """
    corners = [vertices[i] - centre for i in hull]
    midpoints = [
        (vertices[edge.start_index] + vertices[edge.end_index]) * 0.5 - centre
        for edge in hull_edges
    ]

    scored: List[Tuple[int, Vector2]] = []
    for group in (corners, midpoints):
        for i, candidate in enumerate(group):
            if candidate.is_zero():
                continue
            scored.append((symmetry_score(candidate, group, i), candidate))

    best_score = min(score for score, _ in scored)
    tied = [candidate for score, candidate in scored if score == best_score]
    chosen = random.choice(tied)

    logger.info("Forward selected", score=best_score, tied=len(tied))
    return chosen.normalise()

"""Hull boundary edges and internal connectivity edges."""

from enum import Enum
from typing import List, NamedTuple, Sequence, Tuple

import numpy as np
import structlog

from ..utils.random import RandomSource
from ..utils.vector import Vector2
from .hull import vertices_to_array
from .vertices import RingLevel, level_ranks

logger = structlog.get_logger()

# Points sampled exactly on a ring can land a rounding error outside it
DISTANCE_TOLERANCE = 1e-9


class EdgeKind(str, Enum):
    """Role of an edge in the ship graph."""

    HULL = "hull"
    INTERNAL = "internal"


class Edge(NamedTuple):
    """Connection between two vertex indices."""
    start_index: int
    end_index: int
    kind: EdgeKind


def build_hull_edges(hull: Sequence[int]) -> Tuple[Edge, ...]:
    """Connect consecutive hull indices and close the cycle."""
    n = len(hull)
    return tuple(Edge(hull[i], hull[(i + 1) % n], EdgeKind.HULL) for i in range(n))


def find_edge_candidates(vertices: Sequence[Vector2],
                         ring_levels: Sequence[RingLevel],
                         hull: Sequence[int]) -> List[Tuple[int, int]]:
    """
    List every admissible internal edge as an (i, j) pair with i < j.

    A pair is admitted when it does not join two hull vertices, its ring
    levels are equal or adjacent, and the two vertices are no further apart
    than the ring distance of either one.

    Args:
        vertices: All ship vertices
        ring_levels: Levels sorted by distance
        hull: Hull indices

    Returns:
        Candidate pairs in lexicographic order
    """
    n = len(vertices)
    points = vertices_to_array(vertices)
    ranks = np.array(level_ranks(ring_levels, n))
    reach = np.array([ring_levels[r].distance for r in ranks])
    on_hull = np.zeros(n, dtype=bool)
    on_hull[list(hull)] = True

    deltas = points[:, None, :] - points[None, :, :]
    distances = np.sqrt((deltas ** 2).sum(axis=2))
    within = (distances <= reach[:, None] + DISTANCE_TOLERANCE) | \
             (distances <= reach[None, :] + DISTANCE_TOLERANCE)
    adjacent_levels = np.abs(ranks[:, None] - ranks[None, :]) <= 1
    not_hull_pair = ~(on_hull[:, None] & on_hull[None, :])

    admitted = within & adjacent_levels & not_hull_pair
    rows, cols = np.nonzero(np.triu(admitted, k=1))
    return [(int(i), int(j)) for i, j in zip(rows, cols)]


def build_internal_edges(vertices: Sequence[Vector2],
                         ring_levels: Sequence[RingLevel],
                         hull: Sequence[int],
                         interior: Sequence[int],
                         random: RandomSource) -> Tuple[Edge, ...]:
    """
    Select internal edges from the candidate pool in two passes.

    The connectivity pass gives every interior vertex but the last (in index
    order) one random candidate touching it, if any remain. The extra-join
    pass then draws a join count up to the remaining pool size and commits
    that many random candidates.

    Args:
        vertices: All ship vertices
        ring_levels: Levels sorted by distance
        hull: Hull indices
        interior: Interior indices in ascending order
        random: Source of every random draw

    Returns:
        Committed internal edges, connectivity pass first
    """
    pool = find_edge_candidates(vertices, ring_levels, hull)
    candidate_count = len(pool)
    committed: List[Tuple[int, int]] = []

    for vertex in interior[:-1]:
        touching = [k for k, (i, j) in enumerate(pool) if i == vertex or j == vertex]
        if not touching:
            continue
        k = random.choice(touching)
        committed.append(pool.pop(k))
    connectivity_count = len(committed)

    joins = random.next_int_range(0, len(pool))
    while joins > 0 and pool:
        committed.append(random.pop_random(pool))
        joins -= 1

    logger.info("Internal edges built",
                candidates=candidate_count,
                connectivity=connectivity_count,
                extra=len(committed) - connectivity_count)
    return tuple(Edge(i, j, EdgeKind.INTERNAL) for i, j in committed)

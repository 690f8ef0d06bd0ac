"""Vertex sampling on the rings and grouping into ring levels."""

import math
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, NamedTuple, Tuple

import structlog

from ..utils.random import RandomSource
from ..utils.vector import Vector2, ZERO
from .rings import Ring

logger = structlog.get_logger()

TWO_PI = math.pi * 2


@dataclass(frozen=True)
class RingLevel:
    """Vertices sharing one ring distance. Level 0 holds only the origin."""
    distance: float
    indices: FrozenSet[int]


class VertexSet(NamedTuple):
    """Output of vertex generation."""
    vertices: Tuple[Vector2, ...]
    ring_levels: Tuple[RingLevel, ...]
    rings: Tuple[Ring, ...]


def generate_vertices(rings: List[Ring], random: RandomSource) -> VertexSet:
    """
    Sample vertices on every ring.

    Vertex 0 is the origin. Each ring draws ``num_nodes`` angles; an angle
    equal to one already kept on the same ring is dropped, so the ring's
    node count is rewritten to what was actually kept.

    Args:
        rings: Rings in generation order
        random: Source of every random draw

    Returns:
        VertexSet with vertices, ring levels sorted by distance and the
        rings with their kept node counts
    """
    vertices: List[Vector2] = [ZERO]
    levels: Dict[float, List[int]] = {0.0: [0]}
    kept_rings: List[Ring] = []

    for ring in rings:
        thetas: List[float] = []
        for _ in range(ring.num_nodes):
            theta = random.next_float_range(0, TWO_PI)
            if theta in thetas:
                continue
            thetas.append(theta)
            point = Vector2(ring.centre_distance * math.sin(theta),
                            ring.centre_distance * math.cos(theta))
            levels.setdefault(ring.centre_distance, []).append(len(vertices))
            vertices.append(point)

        if len(thetas) != ring.num_nodes:
            logger.debug("Duplicate angles dropped",
                         distance=ring.centre_distance,
                         requested=ring.num_nodes, kept=len(thetas))
        kept_rings.append(ring.with_nodes(len(thetas)))

    ring_levels = tuple(
        RingLevel(distance, frozenset(indices))
        for distance, indices in sorted(levels.items())
    )

    logger.info("Vertices generated", vertices=len(vertices), ring_levels=len(ring_levels))
    return VertexSet(tuple(vertices), ring_levels, tuple(kept_rings))


def level_ranks(ring_levels: Tuple[RingLevel, ...], n_vertices: int) -> List[int]:
    """Rank (position in the sorted level list) of every vertex."""
    ranks = [-1] * n_vertices
    for rank, level in enumerate(ring_levels):
        for index in level.indices:
            ranks[index] = rank
    return ranks

"""Concentric ring generation, the first stage of a ship."""

from dataclasses import dataclass, replace
from typing import List

import structlog

from ..utils.random import RandomSource
from .settings import ShipSettings

logger = structlog.get_logger()

OUTER_RING_NODES = 3


@dataclass(frozen=True)
class Ring:
    """Circle around the origin that vertices are sampled from."""
    centre_distance: float
    num_nodes: int = 0

    def with_nodes(self, num_nodes: int) -> "Ring":
        return replace(self, num_nodes=num_nodes)


def collapse_duplicate_rings(rings: List[Ring]) -> List[Ring]:
    """Keep the first ring of every distinct distance, preserving order."""
    seen = set()
    unique = []
    for ring in rings:
        if ring.centre_distance not in seen:
            seen.add(ring.centre_distance)
            unique.append(ring)
    return unique


def outer_ring_index(rings: List[Ring]) -> int:
    """Index of the ring with the greatest distance (first one on a tie)."""
    best = 0
    for i, ring in enumerate(rings):
        if ring.centre_distance > rings[best].centre_distance:
            best = i
    return best


def generate_rings(settings: ShipSettings, random: RandomSource) -> List[Ring]:
    """
    Draw the rings of a ship.

    The ring count and every distance are drawn from the settings bounds,
    rings sharing a distance are collapsed, the outer ring gets three nodes
    and a drawn number of extra nodes is spread over random rings.

    Args:
        settings: Generation bounds
        random: Source of every random draw

    Returns:
        Rings in generation order with their node counts
    """
    count = random.next_int_range(settings.min_circles, settings.max_circles)
    rings = [
        Ring(random.next_float_range(settings.min_circle_distance, settings.max_circle_distance))
        for _ in range(count)
    ]
    rings = collapse_duplicate_rings(rings)

    outer = outer_ring_index(rings)
    rings[outer] = rings[outer].with_nodes(OUTER_RING_NODES)

    extra_nodes = random.next_int_range(settings.min_extra_nodes, settings.max_extra_nodes)
    for _ in range(extra_nodes):
        index = random.next_int_range(0, len(rings) - 1)
        rings[index] = rings[index].with_nodes(rings[index].num_nodes + 1)

    logger.info("Rings generated",
                drawn=count, kept=len(rings), extra_nodes=extra_nodes,
                outer_distance=rings[outer].centre_distance)
    return rings

"""Directional thrust points anchored on the hull."""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import structlog

from ..utils.random import RandomSource
from ..utils.vector import Vector2
from .edges import Edge
from .settings import ShipSettings

logger = structlog.get_logger()

PRIMARY_THRUSTERS = 2


@dataclass(frozen=True)
class Thruster:
    """Point force on a hull edge.

    ``weight`` is the fraction of the available angular range the thrust is
    turned away from the inward radial, 0 pushing straight at the centre and
    1 running along the edge.
    """
    position: Vector2
    direction: Vector2
    weight: float
    hull_edge: Edge


def place_thruster(vertices: Sequence[Vector2],
                   hull_edges: Sequence[Edge],
                   centre: Vector2,
                   random: RandomSource,
                   target_weight: Optional[float] = None) -> Thruster:
    """
    Place one thruster on a random hull edge.

    The outward radial at the anchor point is rotated toward one of the two
    edge directions, which split the half-turn into two ranges. With a
    target weight the rotation is that fraction of the chosen range,
    otherwise it is drawn uniformly. The thrust points against the rotated
    radial.

    Args:
        vertices: All ship vertices
        hull_edges: Hull boundary edges
        centre: Hull centroid
        random: Source of every random draw
        target_weight: Fixed weight in [0, 1], or None for a random one

    Returns:
        The placed Thruster
    """
    edge = random.choice(hull_edges)
    start = vertices[edge.start_index]
    end = vertices[edge.end_index]
    fraction = random.next_float_range(0.0, 1.0)
    position = start + (end - start) * fraction

    radial = (position - centre).normalise()
    along = (end - start).normalise()
    forward_range = radial.angle_to(along)
    ranges = (forward_range, math.pi - forward_range)

    side = random.next_int_range(0, 1)
    toward = along if side == 0 else -along
    span = ranges[side]
    sign = 1.0 if radial.cross(toward) >= 0 else -1.0

    if target_weight is not None:
        weight = target_weight
        angle = target_weight * span
    else:
        angle = random.next_float_range(0.0, span)
        weight = angle / span if span > 0 else 0.0

    direction = -radial.rotate(sign * angle)
    return Thruster(position=position, direction=direction, weight=weight, hull_edge=edge)


def generate_thrusters(vertices: Sequence[Vector2],
                       hull_edges: Sequence[Edge],
                       centre: Vector2,
                       settings: ShipSettings,
                       random: RandomSource) -> List[Thruster]:
    """
    Place the primary pair and the extra thrusters.

    The second primary takes the complementary weight of the first, so the
    pair together spans the whole angular range.

    Args:
        vertices: All ship vertices
        hull_edges: Hull boundary edges
        centre: Hull centroid
        settings: Generation bounds
        random: Source of every random draw

    Returns:
        Thrusters, primaries first
    """
    first = place_thruster(vertices, hull_edges, centre, random)
    second = place_thruster(vertices, hull_edges, centre, random, target_weight=1.0 - first.weight)
    thrusters = [first, second]

    extra = random.next_int_range(settings.min_extra_thrusters, settings.max_extra_thrusters)
    for _ in range(extra):
        thrusters.append(place_thruster(vertices, hull_edges, centre, random))

    logger.info("Thrusters placed", primary=PRIMARY_THRUSTERS, extra=extra,
                first_weight=round(first.weight, 4))
    return thrusters

"""Pure transforms that re-express a blueprint in the ship's own frame."""

from dataclasses import replace

import structlog

from ..utils.vector import UP, ZERO, Vector2
from .blueprint import ShipBlueprint

logger = structlog.get_logger()


def translate_centre(blueprint: ShipBlueprint) -> ShipBlueprint:
    """
    Shift the ship so its centre sits on the origin.

    Vertices, the centre and thruster positions move by -centre; directions
    and the forward vector are unchanged.
    """
    offset = blueprint.centre

    def shift(p: Vector2) -> Vector2:
        return p - offset

    thrusters = tuple(replace(t, position=shift(t.position)) for t in blueprint.thrusters)
    logger.debug("Translated to centre", offset=offset.to_tuple())
    return replace(
        blueprint,
        vertices=tuple(shift(v) for v in blueprint.vertices),
        centre=ZERO,
        thrusters=thrusters,
        transforms=blueprint.transforms + ("translate_centre",),
    )


def rotate_forward(blueprint: ShipBlueprint) -> ShipBlueprint:
    """
    Rotate the ship about the origin so forward points up (0, 1).

    Every vertex, the centre, the forward vector and each thruster's
    position and direction are rotated by the same signed angle.
    """
    angle = blueprint.forward.signed_angle_to(UP)
    thrusters = tuple(
        replace(t, position=t.position.rotate(angle), direction=t.direction.rotate(angle))
        for t in blueprint.thrusters
    )
    logger.debug("Rotated to forward", angle=angle)
    return replace(
        blueprint,
        vertices=tuple(v.rotate(angle) for v in blueprint.vertices),
        centre=blueprint.centre.rotate(angle),
        forward=blueprint.forward.rotate(angle),
        thrusters=thrusters,
        transforms=blueprint.transforms + ("rotate_forward",),
    )


def align(blueprint: ShipBlueprint) -> ShipBlueprint:
    """Translate to the centre, then rotate forward onto the up axis."""
    return rotate_forward(translate_centre(blueprint))

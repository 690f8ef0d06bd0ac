"""
Ship generation pipeline.

Runs every stage in order, each one drawing from the same RandomSource:

    rings -> vertices -> hull -> edges -> centre -> forward -> thrusters -> keys

The result is an immutable ShipBlueprint. A failing stage raises and no
blueprint is produced.
"""

from typing import Optional

import structlog

from ..utils.random import RandomSource, Seed
from .blueprint import ShipBlueprint
from .edges import build_hull_edges, build_internal_edges
from .forward import select_forward
from .hull import analyze_hull, hull_centre
from .keys import assign_keys
from .rings import generate_rings
from .settings import ShipSettings
from .thrusters import generate_thrusters
from .vertices import generate_vertices

logger = structlog.get_logger()


class ShipGenerator:
    """
    Generates ship blueprints from settings and a random source.

    The generator owns nothing but its inputs, so separate generators can
    run side by side without sharing state.
    """

    def __init__(self, settings: Optional[ShipSettings] = None,
                 random: Optional[RandomSource] = None):
        """
        Initialize the generator.

        Args:
            settings: Generation bounds (defaults when omitted)
            random: Random source (seed 0 when omitted)
        """
        self.settings = settings if settings is not None else ShipSettings()
        self.random = random if random is not None else RandomSource(0)

    @classmethod
    def from_seed(cls, seed: Seed, settings: Optional[ShipSettings] = None) -> "ShipGenerator":
        return cls(settings, RandomSource(seed))

    def generate(self) -> ShipBlueprint:
        """Run the full pipeline once."""
        settings = self.settings
        random = self.random
        log = logger.bind(seed=random.seed)
        log.info("Generating ship")

        rings = generate_rings(settings, random)
        vertex_set = generate_vertices(rings, random)
        vertices = vertex_set.vertices

        hull, interior = analyze_hull(vertices)
        hull_edges = build_hull_edges(hull)
        internal_edges = build_internal_edges(
            vertices, vertex_set.ring_levels, hull, interior, random
        )

        centre = hull_centre(vertices, hull)
        forward = select_forward(vertices, hull, hull_edges, centre, random)

        thrusters = generate_thrusters(vertices, hull_edges, centre, settings, random)
        keys = assign_keys(thrusters, settings, random)

        blueprint = ShipBlueprint(
            settings=settings,
            seed=random.seed,
            rings=vertex_set.rings,
            ring_levels=vertex_set.ring_levels,
            vertices=vertices,
            hull=hull,
            interior=interior,
            hull_edges=hull_edges,
            internal_edges=internal_edges,
            centre=centre,
            forward=forward,
            thrusters=tuple(thrusters),
            keys=keys,
        )
        log.info("Ship generated",
                 draws=random.call_count,
                 vertices=len(vertices),
                 thrusters=len(thrusters),
                 keys=len(keys))
        return blueprint


def generate(settings: ShipSettings, random_source: RandomSource) -> ShipBlueprint:
    """Generate one blueprint from ``settings`` using ``random_source``."""
    return ShipGenerator(settings, random_source).generate()

"""Immutable result of one generation pass."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..utils.vector import Vector2
from .edges import Edge
from .keys import KeyBinding
from .rings import Ring
from .settings import ShipSettings
from .thrusters import Thruster
from .vertices import RingLevel


@dataclass(frozen=True)
class ShipBlueprint:
    """Everything a renderer or physics consumer needs to build a ship.

    Blueprints are never modified; the transform functions return new ones.
    """
    # Inputs
    settings: ShipSettings
    seed: Any

    # Skeleton
    rings: Tuple[Ring, ...]
    ring_levels: Tuple[RingLevel, ...]
    vertices: Tuple[Vector2, ...]
    hull: Tuple[int, ...]
    interior: Tuple[int, ...]
    hull_edges: Tuple[Edge, ...]
    internal_edges: Tuple[Edge, ...]

    # Orientation
    centre: Vector2
    forward: Vector2

    # Control
    thrusters: Tuple[Thruster, ...]
    keys: Tuple[KeyBinding, ...]

    # Set by the transform pipeline
    transforms: Tuple[str, ...] = field(default=())

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Hull edges followed by internal edges."""
        return self.hull_edges + self.internal_edges

    def thrusters_for_key(self, key: str) -> Tuple[Thruster, ...]:
        for binding in self.keys:
            if binding.key == key:
                return tuple(self.thrusters[i] for i in binding.thrusters)
        raise KeyError(key)

    def ring_level_of(self, index: int) -> Optional[RingLevel]:
        for level in self.ring_levels:
            if index in level.indices:
                return level
        return None

    def summary(self) -> Dict[str, Any]:
        """Counts of every stage, for logs and the command line."""
        return {
            "seed": self.seed,
            "rings": len(self.rings),
            "vertices": len(self.vertices),
            "hull": len(self.hull),
            "interior": len(self.interior),
            "hull_edges": len(self.hull_edges),
            "internal_edges": len(self.internal_edges),
            "thrusters": len(self.thrusters),
            "keys": len(self.keys),
            "transforms": list(self.transforms),
        }

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation of every stage."""
        return {
            "seed": self.seed,
            "settings": self.settings.get(),
            "rings": [
                {"centre_distance": r.centre_distance, "num_nodes": r.num_nodes}
                for r in self.rings
            ],
            "ring_levels": [
                {"distance": level.distance, "indices": sorted(level.indices)}
                for level in self.ring_levels
            ],
            "vertices": [list(v.to_tuple()) for v in self.vertices],
            "hull": list(self.hull),
            "interior": list(self.interior),
            "hull_edges": [[e.start_index, e.end_index] for e in self.hull_edges],
            "internal_edges": [[e.start_index, e.end_index] for e in self.internal_edges],
            "centre": list(self.centre.to_tuple()),
            "forward": list(self.forward.to_tuple()),
            "thrusters": [
                {
                    "position": list(t.position.to_tuple()),
                    "direction": list(t.direction.to_tuple()),
                    "weight": t.weight,
                    "hull_edge": [t.hull_edge.start_index, t.hull_edge.end_index],
                }
                for t in self.thrusters
            ],
            "keys": [
                {"key": b.key, "thrusters": list(b.thrusters), "baseline": b.baseline}
                for b in self.keys
            ],
            "transforms": list(self.transforms),
        }

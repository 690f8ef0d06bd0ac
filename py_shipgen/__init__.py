"""
Procedural 2D ship generation.

A seed and a set of numeric bounds become an immutable ShipBlueprint: ring
vertices, a convex hull, internal edges, a forward vector, thrusters and the
keys that fire them.
"""

from .core import (
    ShipBlueprint,
    ShipGenerator,
    ShipSettings,
    generate,
    rotate_forward,
    translate_centre,
)
from .errors import ConfigurationError, GeometryDegenerateError, RangeError, ShipGenerationError
from .utils.random import RandomSource
from .utils.vector import Vector2

__version__ = "0.1.0"

__all__ = ['ShipBlueprint', 'ShipGenerator', 'ShipSettings', 'generate', 'rotate_forward',
           'translate_centre', 'ConfigurationError', 'GeometryDegenerateError', 'RangeError',
           'ShipGenerationError', 'RandomSource', 'Vector2']

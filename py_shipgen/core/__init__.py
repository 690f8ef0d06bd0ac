"""
Core ship generation functionality.
"""

from ..errors import ShipGenerationError, ConfigurationError, RangeError, GeometryDegenerateError
from .settings import ShipSettings
from .rings import Ring, generate_rings
from .vertices import RingLevel, generate_vertices
from .hull import analyze_hull, hull_centre
from .edges import Edge, EdgeKind, build_hull_edges, build_internal_edges
from .forward import select_forward
from .thrusters import Thruster, generate_thrusters, place_thruster
from .keys import KeyBinding, assign_keys
from .blueprint import ShipBlueprint
from .transform import translate_centre, rotate_forward, align
from .ship_generator import ShipGenerator, generate

__all__ = ['ShipGenerationError', 'ConfigurationError', 'RangeError', 'GeometryDegenerateError',
           'ShipSettings', 'Ring', 'generate_rings', 'RingLevel', 'generate_vertices',
           'analyze_hull', 'hull_centre', 'Edge', 'EdgeKind', 'build_hull_edges',
           'build_internal_edges', 'select_forward', 'Thruster', 'generate_thrusters',
           'place_thruster', 'KeyBinding', 'assign_keys', 'ShipBlueprint',
           'translate_centre', 'rotate_forward', 'align', 'ShipGenerator', 'generate']

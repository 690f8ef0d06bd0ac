"""
Shared utilities: seeded randomness and 2D vectors.
"""

from .random import AleaPRNG, RandomSource
from .vector import Vector2

__all__ = ['AleaPRNG', 'RandomSource', 'Vector2']

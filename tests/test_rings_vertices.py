"""Tests for ring and vertex generation."""

import math

import pytest

from py_shipgen.core.rings import Ring, collapse_duplicate_rings, generate_rings, outer_ring_index
from py_shipgen.core.settings import ShipSettings
from py_shipgen.core.vertices import generate_vertices, level_ranks
from py_shipgen.utils.random import RandomSource

SEEDS = [0, 1, 2, 3, 7, 42, "alpha", "bravo"]


class ScriptedRandom:
    """Random source replaying fixed float draws."""

    def __init__(self, floats):
        self.floats = list(floats)

    def next_float_range(self, lo, hi):
        return self.floats.pop(0)


class TestRingHelpers:
    """Test ring collapsing and outer ring lookup."""

    def test_collapse_keeps_first(self):
        """Test that the first ring of each distance survives."""
        rings = [Ring(1.0, 1), Ring(2.0), Ring(1.0, 5)]
        assert collapse_duplicate_rings(rings) == [Ring(1.0, 1), Ring(2.0)]

    def test_outer_ring(self):
        """Test finding the ring with the largest distance."""
        rings = [Ring(1.5), Ring(2.5), Ring(0.5)]
        assert outer_ring_index(rings) == 1


class TestRingGeneration:
    """Test ring generation from settings."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_distances_distinct(self, seed):
        """Test that no two rings share a distance."""
        rings = generate_rings(ShipSettings(), RandomSource(seed))
        distances = [ring.centre_distance for ring in rings]
        assert len(distances) == len(set(distances))

    @pytest.mark.parametrize("seed", SEEDS)
    def test_outer_ring_has_three_nodes(self, seed):
        """Test that the outer ring always gets at least three nodes."""
        rings = generate_rings(ShipSettings(), RandomSource(seed))
        outer = max(rings, key=lambda ring: ring.centre_distance)
        assert outer.num_nodes >= 3

    @pytest.mark.parametrize("seed", SEEDS)
    def test_node_total(self, seed):
        """Test that the node total is three plus the extra nodes."""
        settings = ShipSettings()
        rings = generate_rings(settings, RandomSource(seed))
        total = sum(ring.num_nodes for ring in rings)
        assert 3 + settings.min_extra_nodes <= total <= 3 + settings.max_extra_nodes

    @pytest.mark.parametrize("seed", SEEDS)
    def test_counts_within_bounds(self, seed):
        """Test ring count and distances against the settings."""
        settings = ShipSettings()
        rings = generate_rings(settings, RandomSource(seed))
        assert 1 <= len(rings) <= settings.max_circles
        for ring in rings:
            assert settings.min_circle_distance <= ring.centre_distance <= settings.max_circle_distance

    def test_equal_distances_collapse(self):
        """Test that two rings drawn at one fixed distance collapse to one."""
        settings = ShipSettings.from_dict({
            "minCircles": 2, "maxCircles": 2,
            "minCircleDistance": 1, "maxCircleDistance": 1,
        })
        rings = generate_rings(settings, RandomSource(0))
        assert len(rings) == 1
        assert rings[0].centre_distance == 1.0
        assert 3 + settings.min_extra_nodes <= rings[0].num_nodes <= 3 + settings.max_extra_nodes

    def test_no_extra_nodes(self):
        """Test that without extra nodes only the outer ring has nodes."""
        settings = ShipSettings().with_changes(minExtraNodes=0, maxExtraNodes=0)
        rings = generate_rings(settings, RandomSource(5))
        outer = outer_ring_index(rings)
        for i, ring in enumerate(rings):
            assert ring.num_nodes == (3 if i == outer else 0)


class TestVertexGeneration:
    """Test vertex sampling on rings."""

    @pytest.fixture
    def vertex_set(self):
        rings = generate_rings(ShipSettings(), RandomSource("vertices"))
        return generate_vertices(rings, RandomSource("vertices-angles"))

    def test_origin_first(self, vertex_set):
        """Test that vertex 0 is the origin in level 0."""
        assert vertex_set.vertices[0].is_zero()
        assert vertex_set.ring_levels[0].distance == 0
        assert vertex_set.ring_levels[0].indices == frozenset({0})

    def test_every_vertex_in_one_level(self, vertex_set):
        """Test that ring levels partition the vertex indices."""
        seen = []
        for level in vertex_set.ring_levels:
            seen.extend(level.indices)
        assert sorted(seen) == list(range(len(vertex_set.vertices)))

    def test_levels_sorted(self, vertex_set):
        """Test that ring levels ascend by distance."""
        distances = [level.distance for level in vertex_set.ring_levels]
        assert distances == sorted(distances)
        assert len(distances) == len(set(distances))

    def test_vertices_on_their_ring(self, vertex_set):
        """Test that every vertex lies on its level's circle."""
        for level in vertex_set.ring_levels:
            for index in level.indices:
                assert vertex_set.vertices[index].magnitude() == pytest.approx(level.distance)

    def test_ring_counts_rewritten(self, vertex_set):
        """Test that ring node counts match the kept vertices."""
        assert 1 + sum(ring.num_nodes for ring in vertex_set.rings) == len(vertex_set.vertices)

    def test_level_ranks(self, vertex_set):
        """Test that every vertex gets the rank of its level."""
        ranks = level_ranks(vertex_set.ring_levels, len(vertex_set.vertices))
        for rank, level in enumerate(vertex_set.ring_levels):
            for index in level.indices:
                assert ranks[index] == rank

    def test_polar_convention(self):
        """Test that an angle maps to (d sin, d cos)."""
        vertex_set = generate_vertices([Ring(2.0, 1)], ScriptedRandom([math.pi / 2]))
        point = vertex_set.vertices[1]
        assert point.x == pytest.approx(2.0)
        assert point.y == pytest.approx(0.0, abs=1e-12)

    def test_exact_duplicate_angle_dropped(self):
        """Test that a repeated angle on one ring is dropped."""
        rings = [Ring(1.0, 3)]
        vertex_set = generate_vertices(rings, ScriptedRandom([0.5, 0.5, 1.0]))
        assert len(vertex_set.vertices) == 3
        assert vertex_set.rings[0].num_nodes == 2

    def test_same_angle_on_different_rings_kept(self):
        """Test that duplicate rejection is per ring."""
        rings = [Ring(1.0, 1), Ring(2.0, 1)]
        vertex_set = generate_vertices(rings, ScriptedRandom([0.5, 0.5]))
        assert len(vertex_set.vertices) == 3
        assert [ring.num_nodes for ring in vertex_set.rings] == [1, 1]

    def test_empty_ring_has_no_level(self):
        """Test that a ring without nodes creates no level."""
        rings = [Ring(1.0, 0), Ring(2.0, 3)]
        vertex_set = generate_vertices(rings, ScriptedRandom([0.1, 2.0, 4.0]))
        assert [level.distance for level in vertex_set.ring_levels] == [0.0, 2.0]

"""Tests for the end-to-end generation pipeline."""

import json

import pytest

from py_shipgen import ShipGenerator, ShipSettings, generate
from py_shipgen.core.edges import EdgeKind
from py_shipgen.utils.random import RandomSource

SEEDS = [0, 1, 2, 3, 5, 8, 13, 21, 34, 55, "ship", "hull"]


@pytest.fixture(params=SEEDS)
def blueprint(request):
    return ShipGenerator.from_seed(request.param).generate()


class TestDeterminism:
    """Test that generation repeats exactly."""

    @pytest.mark.parametrize("seed", [0, 42, "alpha"])
    def test_same_seed_same_blueprint(self, seed):
        """Test equal seeds and settings give equal blueprints."""
        a = ShipGenerator.from_seed(seed).generate()
        b = ShipGenerator.from_seed(seed).generate()
        assert a == b
        assert a.to_dict() == b.to_dict()

    def test_different_seeds_differ(self):
        """Test that different seeds give different ships."""
        a = ShipGenerator.from_seed(1).generate()
        b = ShipGenerator.from_seed(2).generate()
        assert a.vertices != b.vertices

    def test_module_function_matches_class(self):
        """Test that generate() is the class pipeline."""
        assert generate(ShipSettings(), RandomSource(8)) == ShipGenerator.from_seed(8).generate()

    def test_generators_independent(self):
        """Test that one generator does not disturb another."""
        expected = ShipGenerator.from_seed(4).generate()
        first = ShipGenerator.from_seed(4)
        other = ShipGenerator.from_seed(99)
        other.generate()
        assert first.generate() == expected

    def test_default_generator(self):
        """Test that a bare generator uses default settings and seed 0."""
        assert ShipGenerator().generate() == ShipGenerator.from_seed(0).generate()


class TestBlueprintInvariants:
    """Test structural guarantees across seeds."""

    def test_origin_vertex(self, blueprint):
        """Test that vertex 0 is the origin."""
        assert blueprint.vertices[0].is_zero()
        assert blueprint.ring_level_of(0).distance == 0

    def test_hull_and_interior_partition(self, blueprint):
        """Test that hull and interior cover every vertex once."""
        assert len(blueprint.hull) >= 3
        assert sorted(blueprint.hull + blueprint.interior) == list(range(len(blueprint.vertices)))

    def test_edges(self, blueprint):
        """Test edge kinds and the hull-to-hull rule."""
        on_hull = set(blueprint.hull)
        assert len(blueprint.hull_edges) == len(blueprint.hull)
        assert blueprint.edges == blueprint.hull_edges + blueprint.internal_edges
        for edge in blueprint.internal_edges:
            assert edge.kind == EdgeKind.INTERNAL
            assert not (edge.start_index in on_hull and edge.end_index in on_hull)

    def test_forward_unit(self, blueprint):
        """Test that forward is a unit vector."""
        assert blueprint.forward.magnitude() == pytest.approx(1.0)

    def test_thrusters(self, blueprint):
        """Test thruster count, anchoring and weights."""
        settings = blueprint.settings
        extra = len(blueprint.thrusters) - 2
        assert settings.min_extra_thrusters <= extra <= settings.max_extra_thrusters
        assert blueprint.thrusters[0].weight + blueprint.thrusters[1].weight == pytest.approx(1.0)
        for thruster in blueprint.thrusters:
            assert thruster.hull_edge in blueprint.hull_edges
            assert 0.0 <= thruster.weight <= 1.0
            assert thruster.direction.magnitude() == pytest.approx(1.0)

    def test_keys_cover_thrusters(self, blueprint):
        """Test that every thruster has a key and keys are unique."""
        bound = {i for binding in blueprint.keys for i in binding.thrusters}
        assert bound == set(range(len(blueprint.thrusters)))
        keys = [binding.key for binding in blueprint.keys]
        assert len(keys) == len(set(keys))

    def test_thrusters_for_key(self, blueprint):
        """Test looking up the thrusters fired by a key."""
        binding = blueprint.keys[0]
        assert blueprint.thrusters_for_key(binding.key) == (blueprint.thrusters[0],)
        with pytest.raises(KeyError):
            blueprint.thrusters_for_key("not-a-key")

    def test_json_ready(self, blueprint):
        """Test that to_dict serialises to JSON."""
        data = json.loads(json.dumps(blueprint.to_dict()))
        assert len(data["vertices"]) == len(blueprint.vertices)
        assert data["settings"]["maxCircles"] == blueprint.settings.max_circles
        assert data["transforms"] == []

    def test_summary(self, blueprint):
        """Test stage counts in the summary."""
        summary = blueprint.summary()
        assert summary["vertices"] == len(blueprint.vertices)
        assert summary["thrusters"] == len(blueprint.thrusters)
        assert summary["keys"] == len(blueprint.keys)


class TestScenarios:
    """Test particular setting combinations."""

    def test_single_fixed_ring(self):
        """Test that two rings at one fixed distance become one ring."""
        settings = ShipSettings.from_dict({
            "minCircles": 2, "maxCircles": 2,
            "minCircleDistance": 1, "maxCircleDistance": 1,
        })
        blueprint = ShipGenerator.from_seed(0, settings).generate()
        assert len(blueprint.rings) == 1
        assert len(blueprint.vertices) == 1 + blueprint.rings[0].num_nodes
        for vertex in blueprint.vertices[1:]:
            assert vertex.magnitude() == pytest.approx(1.0)

    @pytest.mark.parametrize("seed", range(6))
    def test_many_rings(self, seed):
        """Test a larger ship."""
        settings = ShipSettings().with_changes(
            minCircles=4, maxCircles=8, maxExtraNodes=12, minExtraThrusters=2
        )
        blueprint = ShipGenerator.from_seed(seed, settings).generate()
        assert len(blueprint.thrusters) >= 4
        assert len(blueprint.rings) <= 8

#!/usr/bin/env python3
"""
Demo script showing ship generation and alignment.
"""

import numpy as np
from py_shipgen import ShipGenerator, ShipSettings
from py_shipgen.core import align


def main():
    """Demonstrate ship generation."""
    print("Py-ShipGen Demo")
    print("=" * 40)

    presets = {
        'scout': ShipSettings().with_changes(maxCircles=2, maxExtraNodes=2, maxExtraThrusters=1),
        'default': ShipSettings(),
        'freighter': ShipSettings().with_changes(
            minCircles=4, maxCircles=7, minExtraNodes=6, maxExtraNodes=12,
            minExtraThrusters=3, maxExtraThrusters=6, maxThrusterKeyOverlap=4
        ),
    }

    for name, settings in presets.items():
        print(f"\n{name.upper()}:")
        print("-" * 30)

        blueprint = align(ShipGenerator.from_seed(f"{name}_demo", settings).generate())

        points = np.array([v.to_tuple() for v in blueprint.vertices])
        width, height = np.ptp(points, axis=0)

        print(f"  Rings: {len(blueprint.rings)}")
        print(f"  Vertices: {len(blueprint.vertices)} ({len(blueprint.hull)} on hull)")
        print(f"  Edges: {len(blueprint.hull_edges)} hull, {len(blueprint.internal_edges)} internal")
        print(f"  Extent: {width:.2f} x {height:.2f}")

        for binding in blueprint.keys:
            weights = ", ".join(f"{blueprint.thrusters[i].weight:.2f}" for i in binding.thrusters)
            marker = "*" if binding.baseline else " "
            print(f"  {marker} [{binding.key}] thrusters {list(binding.thrusters)} weights {weights}")

    print("\nDemo completed!")


if __name__ == "__main__":
    main()

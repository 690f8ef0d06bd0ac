"""
Input key assignment for thrusters.

Every thruster ends up reachable from at least one key. The two primary
thrusters always get a key of their own, a balanced primary pair also gets a
joint key, and the remaining thrusters are grouped under fresh keys. A few
groups are then widened with thrusters borrowed from other keys so that some
thrusters answer to more than one key.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import structlog

from ..utils.random import RandomSource
from .settings import ShipSettings
from .thrusters import Thruster

logger = structlog.get_logger()


@dataclass(frozen=True)
class KeyBinding:
    """A key symbol and the thrusters (by index) it fires."""
    key: str
    thrusters: Tuple[int, ...]
    baseline: bool = False


def random_subset(items: Sequence[int], random: RandomSource) -> List[int]:
    """Non-empty random subset of ``items``, in draw order."""
    pool = list(items)
    size = random.next_int_range(1, len(pool))
    return [random.pop_random(pool) for _ in range(size)]


def assign_keys(thrusters: Sequence[Thruster],
                settings: ShipSettings,
                random: RandomSource) -> Tuple[KeyBinding, ...]:
    """
    Bind key symbols to groups of thrusters.

    Args:
        thrusters: Placed thrusters; the first two are the primary pair
        settings: Generation bounds, including the available key pool
        random: Source of every random draw

    Returns:
        Key bindings; baseline bindings first, widened groups last
    """
    keys = list(settings.thruster_available_keys)
    bindings: List[KeyBinding] = [
        KeyBinding(random.pop_random(keys), (0,), baseline=True),
        KeyBinding(random.pop_random(keys), (1,), baseline=True),
    ]

    balance = abs(thrusters[0].weight - 0.5)
    if balance <= settings.thruster_key_join_weight_threshold:
        bindings.append(KeyBinding(random.pop_random(keys), (0, 1), baseline=True))

    # Group the unassigned thrusters under fresh keys
    remaining = list(range(2, len(thrusters)))
    while remaining and keys:
        size = random.next_int_range(1, len(remaining))
        group = sorted(random.pop_random(remaining) for _ in range(size))
        bindings.append(KeyBinding(random.pop_random(keys), tuple(group)))

    if remaining:
        logger.warning("Key pool exhausted before every thruster was bound",
                       unbound=len(remaining))

    overlap = random.next_int_range(settings.min_thruster_key_overlap,
                                    settings.max_thruster_key_overlap)
    injected = 0
    for _ in range(overlap):
        targets = [b for b in bindings if not b.baseline]
        if not targets:
            break
        source = random.choice(bindings)
        target = random.choice(targets)
        bindings.remove(target)

        borrowed = random_subset(source.thrusters, random)
        widened = target.thrusters + tuple(t for t in borrowed if t not in target.thrusters)
        bindings.append(KeyBinding(target.key, widened))
        injected += 1

    logger.info("Keys assigned", keys=len(bindings),
                baseline=sum(1 for b in bindings if b.baseline),
                overlap=injected)
    return tuple(bindings)

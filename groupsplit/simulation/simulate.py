# groupsplit/simulation/simulate.py
"""
Simulation script: creates fake participants, splits them repeatedly and
reports which group size layouts came out.

Uses the service directly (no HTTP calls). Run from project root:
    python -m groupsplit.simulation.simulate
"""

import logging
import random
from collections import Counter

from faker import Faker

from groupsplit.config.logging import configure_logging
from groupsplit.domain.grouping import GroupingOptions, SizingDirective
from groupsplit.services.group_service import GroupService

logger = logging.getLogger(__name__)

NUM_PARTICIPANTS = 23
ROUNDS = 50


def fake_participants(n: int, seed: int = None) -> list:
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    names = []
    seen = set()
    while len(names) < n:
        name = fake.first_name() + " " + fake.last_name()
        if name.lower() in seen:
            continue
        seen.add(name.lower())
        names.append(name)
    return names


def run_simulation(num_participants=NUM_PARTICIPANTS, directive=None, rounds=ROUNDS, seed=None):
    """
    Returns a Counter of size layouts, e.g. {(4, 4, 4, 4, 4, 3): 50}.
    The layout never changes between rounds; only who lands where does.
    """
    directive = directive or SizingDirective.fixed(4)
    participants = fake_participants(num_participants, seed)
    service = GroupService(rng=random.Random(seed))

    layouts = Counter()
    for _ in range(rounds):
        result = service.generate(GroupingOptions(participants=participants, directive=directive))
        layouts[tuple(g.size for g in result.groups)] += 1

    logger.info("Simulated %d rounds: %s", rounds, dict(layouts))
    return layouts


if __name__ == "__main__":
    configure_logging()
    for d in (SizingDirective.fixed(4), SizingDirective.fixed(5), SizingDirective.target(6)):
        layouts = run_simulation(directive=d, seed=1)
        for layout, count in layouts.items():
            print(f"{d.kind}({d.value}): {list(layout)} x{count}")

import logging
import random
from typing import List, Optional

from groupsplit.config.settings import settings
from groupsplit.domain.group_generator import generate_groups, plan_group_sizes
from groupsplit.domain.grouping import GenerationResult, GroupingOptions, SizingDirective

logger = logging.getLogger(__name__)


def _people(n: int) -> str:
    return "person" if n == 1 else "people"


def _groups(n: int) -> str:
    return "group" if n == 1 else "groups"


class GroupService:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random(settings.RANDOM_SEED)

    @staticmethod
    def parse_participants(text: str) -> List[str]:
        """One name per line; surrounding whitespace and blank lines are dropped."""
        return [line.strip() for line in text.splitlines() if line.strip()]

    def generate(self, options: GroupingOptions) -> GenerationResult:
        if options.constraints or options.avoid_recent_pairings:
            logger.debug(
                "Ignoring %d constraint(s), avoid_recent_pairings=%s",
                len(options.constraints), options.avoid_recent_pairings,
            )

        rng = self.rng
        if options.random_seed is not None:
            rng = random.Random(options.random_seed)

        result = generate_groups(options.participants, options.directive, rng)
        logger.info(
            "Generated %d groups for %d participants (%s=%d, variation=%d)",
            result.metadata.group_count,
            result.metadata.total_participants,
            options.directive.kind,
            options.directive.value,
            result.metadata.size_variation,
        )
        return result

    def preview(self, total: int, directive: SizingDirective) -> str:
        """
        Describe the split without picking anyone, e.g.
        "2 groups of 3 people, 1 group of 2 people".
        """
        sizes = plan_group_sizes(total, directive)

        # sizes come out in runs of equal length; keep that order
        runs = []
        for size in sizes:
            if runs and runs[-1][0] == size:
                runs[-1][1] += 1
            else:
                runs.append([size, 1])

        if len(runs) == 1:
            size, count = runs[0]
            if count == 1:
                return f"1 group of {size} {_people(size)}"
            return f"{count} groups of {size} {_people(size)} each"
        return ", ".join(f"{count} {_groups(count)} of {size} {_people(size)}" for size, count in runs)

    @staticmethod
    def export_text(result: GenerationResult) -> str:
        return "\n".join(
            f"Group {group.id}: {', '.join(group.members)}"
            for group in result.groups
        )

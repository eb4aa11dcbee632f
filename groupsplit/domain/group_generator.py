# groupsplit/domain/group_generator.py
"""
Pure domain logic for splitting participants into groups.

This module contains only pure functions operating on plain Python data
(sequences of names, dataclasses from groupsplit.domain.grouping). Randomness
comes from an injected random.Random; nothing here reads global random state.

Functions included:
- validate_participants
- validate_directive
- shuffle_participants
- plan_group_sizes
- generate_groups
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence
import random

from groupsplit.domain.grouping import (
    FIXED,
    TARGET,
    Group,
    GenerationMetadata,
    GenerationResult,
    InvalidInput,
    SizingDirective,
)

MAX_PARTICIPANTS = 100
MAX_GROUP_SIZE = 10


def validate_participants(participants: Sequence[str]) -> None:
    if not participants:
        raise InvalidInput("no participants")
    if len(participants) > MAX_PARTICIPANTS:
        raise InvalidInput("too many participants")

    for name in participants:
        if not isinstance(name, str) or not name.strip():
            raise InvalidInput("empty name")

    seen = set()
    for name in participants:
        key = name.strip().lower()
        if key in seen:
            raise InvalidInput("duplicate name")
        seen.add(key)


def validate_directive(total: int, directive: SizingDirective) -> None:
    """
    Check the directive against the participant count.
    Order matters: the first violated rule decides the reason.
    """
    if directive.value <= 0:
        raise InvalidInput("non-positive size")

    if directive.kind == FIXED:
        if directive.value > total:
            raise InvalidInput("fixed size too large")
        if directive.value > MAX_GROUP_SIZE:
            raise InvalidInput("exceeds max group size")
    elif directive.kind == TARGET:
        if directive.value > total:
            raise InvalidInput("target group count too large")


def shuffle_participants(participants: Sequence[str], rng: random.Random) -> List[str]:
    """
    Fisher-Yates shuffle on a copy; the caller's sequence is left untouched.

    Example:
    >>> shuffle_participants(["a", "b", "c"], random.Random(1))  # doctest: +SKIP
    ['b', 'c', 'a']
    """
    shuffled = list(participants)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def _fixed_sizes(total: int, size: int) -> List[int]:
    complete = total // size
    remainder = total % size

    sizes = [size] * complete
    if remainder == 1 and sizes:
        # a lone leftover joins the last group instead of standing alone
        sizes[-1] += 1
    elif remainder > 0:
        sizes.append(remainder)
    return sizes


def _target_sizes(total: int, count: int) -> List[int]:
    base = total // count
    extra = total % count  # first 'extra' groups get 1 more
    return [base + (1 if i < extra else 0) for i in range(count)]


def plan_group_sizes(total: int, directive: SizingDirective) -> List[int]:
    """
    Group sizes, in emission order, that generate_groups produces for
    `total` participants under `directive`.

    Example:
    >>> plan_group_sizes(8, SizingDirective.fixed(3))
    [3, 3, 2]
    >>> plan_group_sizes(5, SizingDirective.target(2))
    [3, 2]
    """
    if total > MAX_PARTICIPANTS:
        raise InvalidInput("too many participants")
    validate_directive(total, directive)
    if directive.kind == FIXED:
        return _fixed_sizes(total, directive.value)
    return _target_sizes(total, directive.value)


def _average(total: int, count: int) -> float:
    # exact halves round up: 17 / 8 -> 2.13
    return float((Decimal(total) / Decimal(count)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def generate_groups(
    participants: Sequence[str],
    directive: SizingDirective,
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    """
    Randomly split participants into size-balanced groups.

    Raises InvalidInput before doing any work if the participants or the
    directive are invalid. Group ids start at 1 in emission order.
    """
    validate_participants(participants)
    sizes = plan_group_sizes(len(participants), directive)

    shuffled = shuffle_participants(participants, rng or random.Random())

    groups = []
    idx = 0
    for i, size in enumerate(sizes):
        groups.append(Group(id=i + 1, members=tuple(shuffled[idx: idx + size])))
        idx += size

    total = len(participants)
    group_sizes = [g.size for g in groups]
    metadata = GenerationMetadata(
        total_participants=total,
        group_count=len(groups),
        average_group_size=_average(total, len(groups)),
        size_variation=max(group_sizes) - min(group_sizes),
    )
    return GenerationResult(groups=tuple(groups), metadata=metadata)

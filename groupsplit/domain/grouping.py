# groupsplit/domain/grouping.py

from typing import List, Optional, Sequence, Tuple, Any
from dataclasses import dataclass, field

FIXED = "fixed"
TARGET = "target"


class InvalidInput(ValueError):
    """Raised when participants or the sizing directive fail validation."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class SizingDirective:
    """Either a fixed per-group size or a target number of groups."""
    kind: str
    value: int

    def __post_init__(self):
        if self.kind not in (FIXED, TARGET):
            raise InvalidInput("unknown directive")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidInput("unknown directive")

    @classmethod
    def fixed(cls, size: int) -> "SizingDirective":
        return cls(FIXED, size)

    @classmethod
    def target(cls, count: int) -> "SizingDirective":
        return cls(TARGET, count)


@dataclass(frozen=True)
class Group:
    id: int
    members: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.members)


@dataclass(frozen=True)
class GenerationMetadata:
    total_participants: int
    group_count: int
    average_group_size: float
    size_variation: int


@dataclass(frozen=True)
class GenerationResult:
    groups: Tuple[Group, ...]
    metadata: GenerationMetadata


@dataclass
class GroupingOptions:
    participants: Sequence[str]
    directive: SizingDirective
    # Not consulted by the generator; constraint-aware partitioning is future work.
    constraints: List[Any] = field(default_factory=list)
    avoid_recent_pairings: bool = False
    random_seed: Optional[int] = None

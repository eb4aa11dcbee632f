from pydantic import BaseModel, Field, field_validator
from typing import List, Dict, Any, Literal

from groupsplit.domain.grouping import GenerationResult, GroupingOptions, SizingDirective

MAX_NAME_LENGTH = 50


class DirectiveDTO(BaseModel):
    type: Literal["fixed", "target"]
    value: int

    def to_domain(self) -> SizingDirective:
        return SizingDirective(self.type, self.value)


class GenerateGroupsRequest(BaseModel):
    participants: List[str] = Field(default_factory=list)
    directive: DirectiveDTO
    # accepted for compatibility with saved lists, never consulted
    constraints: List[Dict[str, Any]] = Field(default_factory=list)
    avoid_recent_pairings: bool = False

    @field_validator("participants")
    @classmethod
    def trim_names(cls, names: List[str]) -> List[str]:
        trimmed = [n.strip() for n in names]
        for n in trimmed:
            if len(n) > MAX_NAME_LENGTH:
                raise ValueError(f"participant names must be {MAX_NAME_LENGTH} characters or less")
        return trimmed

    def to_options(self) -> GroupingOptions:
        return GroupingOptions(
            participants=self.participants,
            directive=self.directive.to_domain(),
            constraints=self.constraints,
            avoid_recent_pairings=self.avoid_recent_pairings,
        )


class ParseRequest(BaseModel):
    text: str = ""


class ParseResponse(BaseModel):
    participants: List[str]


class GroupDTO(BaseModel):
    id: int
    members: List[str] = Field(default_factory=list)
    size: int


class MetadataDTO(BaseModel):
    totalParticipants: int
    groupCount: int
    averageGroupSize: float
    sizeVariation: int


class GenerationResultDTO(BaseModel):
    groups: List[GroupDTO]
    metadata: MetadataDTO

    @classmethod
    def from_result(cls, result: GenerationResult) -> "GenerationResultDTO":
        meta = result.metadata
        return cls(
            groups=[GroupDTO(id=g.id, members=list(g.members), size=g.size) for g in result.groups],
            metadata=MetadataDTO(
                totalParticipants=meta.total_participants,
                groupCount=meta.group_count,
                averageGroupSize=meta.average_group_size,
                sizeVariation=meta.size_variation,
            ),
        )


class PreviewResponse(BaseModel):
    total: int
    directive: DirectiveDTO
    sizes: List[int]
    summary: str

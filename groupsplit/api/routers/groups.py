# groupsplit/api/routers/groups.py
"""
Group endpoints: parse a pasted participant list, preview a split,
generate groups (JSON or plain text).
"""
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from groupsplit.config.settings import settings
from groupsplit.domain.grouping import InvalidInput, SizingDirective
from groupsplit.domain.models import (
    DirectiveDTO,
    GenerateGroupsRequest,
    GenerationResultDTO,
    ParseRequest,
    ParseResponse,
    PreviewResponse,
)
from groupsplit.domain.group_generator import plan_group_sizes
from groupsplit.services.group_service import GroupService

router = APIRouter()

_service = GroupService()


def get_group_service() -> GroupService:
    return _service


@router.post("/parse", response_model=ParseResponse, summary="Split pasted text into participant names")
def parse_participants(req: ParseRequest, service: GroupService = Depends(get_group_service)):
    return ParseResponse(participants=service.parse_participants(req.text))


@router.get("/preview", response_model=PreviewResponse, summary="Preview group sizes for a participant count")
def preview(
    total: int = Query(..., ge=0),
    type: Literal["fixed", "target"] = "fixed",
    value: Optional[int] = None,
    service: GroupService = Depends(get_group_service),
):
    directive = SizingDirective(type, value if value is not None else settings.GROUP_SIZE_DEFAULT)
    try:
        sizes = plan_group_sizes(total, directive)
        summary = service.preview(total, directive)
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=e.reason)
    return PreviewResponse(
        total=total,
        directive=DirectiveDTO(type=directive.kind, value=directive.value),
        sizes=sizes,
        summary=summary,
    )


@router.post("/generate", response_model=GenerationResultDTO, summary="Randomly split participants into groups")
def generate(req: GenerateGroupsRequest, service: GroupService = Depends(get_group_service)):
    try:
        result = service.generate(req.to_options())
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=e.reason)
    return GenerationResultDTO.from_result(result)


@router.post("/generate/text", response_class=PlainTextResponse, summary="Generate groups as copyable text")
def generate_text(req: GenerateGroupsRequest, service: GroupService = Depends(get_group_service)):
    try:
        result = service.generate(req.to_options())
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=e.reason)
    return service.export_text(result)

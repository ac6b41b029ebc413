from typing import Any

import httpx
from fastapi import APIRouter, Body, Depends, Response, status

from app.api.v1.schemas import ContactUpdateRequest, ProfileImportRequest, ProfileImportResponse
from app.core.context import get_request_id
from app.core.exceptions import LLMError, ValidationError
from app.core.logging import get_logger
from app.domain.profile.constants import SectionKey
from app.domain.profile.extraction import apply_extracted_profile
from app.domain.profile.repository import ProfileRepository, get_profile_repository
from app.domain.profile.schemas import ProfileDocument, ProfileItem
from app.domain.profile.sections import get_section_items
from app.domain.profile.service import (
    add_item,
    new_profile,
    remove_item,
    update_contact,
    update_item,
)
from app.infra.llm.client import LLM_CALL_ERRORS, extract_profile_from_cv

router = APIRouter(prefix="/profiles", tags=["profiles"])
logger = get_logger(__name__)


@router.get("/{user_id}", response_model=ProfileDocument)
async def get_profile(
    user_id: str,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> ProfileDocument:
    return await repository.get_or_raise(user_id)


@router.put("/{user_id}", response_model=ProfileDocument)
async def put_profile(
    user_id: str,
    request: ContactUpdateRequest,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> ProfileDocument:
    """연락처/요약 수정, 프로필이 없으면 생성"""
    doc = await repository.get(user_id)
    if doc is None:
        logger.info("프로필 생성 user_id=%s", user_id)
        doc = new_profile(user_id)

    doc = update_contact(doc, **request.model_dump(exclude_unset=True))
    await repository.save(doc)
    return doc


@router.post("/{user_id}/import", response_model=ProfileImportResponse)
async def import_cv(
    user_id: str,
    request: ProfileImportRequest,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> ProfileImportResponse:
    """CV 텍스트에서 추출한 정보 반영, 프로필이 없으면 생성"""
    doc = await repository.get(user_id)
    if doc is None:
        logger.info("프로필 생성 user_id=%s", user_id)
        doc = new_profile(user_id)

    try:
        extracted = await extract_profile_from_cv(request.cv_text, session_id=get_request_id())
    except httpx.HTTPStatusError as e:
        raise LLMError(detail=f"HTTP {e.response.status_code}") from e
    except LLM_CALL_ERRORS as e:
        raise LLMError(detail=str(e)) from e
    except (ValueError, KeyError, TypeError) as e:
        raise LLMError(detail=str(e)) from e

    doc, imported = apply_extracted_profile(doc, extracted)
    await repository.save(doc)
    return ProfileImportResponse(
        profile=doc,
        imported_sections=[key.value for key in imported],
    )


@router.post("/{user_id}/{section}", status_code=status.HTTP_201_CREATED)
async def create_item(
    user_id: str,
    section: SectionKey,
    item: dict[str, Any] = Body(...),
    repository: ProfileRepository = Depends(get_profile_repository),
) -> dict:
    doc = await repository.get_or_raise(user_id)
    try:
        doc = add_item(doc, section, item)
    except ValueError as e:
        raise ValidationError(detail=str(e)) from e

    await repository.save(doc)
    created: ProfileItem = get_section_items(doc, section)[-1]
    return created.model_dump(by_alias=True)


@router.put("/{user_id}/{section}/{item_id}")
async def put_item(
    user_id: str,
    section: SectionKey,
    item_id: str,
    changes: dict[str, Any] = Body(...),
    repository: ProfileRepository = Depends(get_profile_repository),
) -> dict:
    doc = await repository.get_or_raise(user_id)
    try:
        doc = update_item(doc, section, item_id, changes)
    except ValueError as e:
        raise ValidationError(detail=str(e)) from e

    await repository.save(doc)
    updated = next(item for item in get_section_items(doc, section) if item.id == item_id)
    return updated.model_dump(by_alias=True)


@router.delete("/{user_id}/{section}/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    user_id: str,
    section: SectionKey,
    item_id: str,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> Response:
    doc = await repository.get_or_raise(user_id)
    doc = remove_item(doc, section, item_id)
    await repository.save(doc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""프로필 편집 연산.

모든 연산은 입력 문서를 수정하지 않고 새 문서를 반환한다.
컬렉션 편집은 section_order를 건드리지 않는다.
"""

from typing import Any

from app.core.exceptions import ItemNotFoundError
from app.core.logging import get_logger
from app.domain.profile.constants import SECTION_FIELDS, SectionKey
from app.domain.profile.schemas import CONTACT_FIELDS, ProfileDocument, ProfileItem
from app.domain.profile.sections import ITEM_MODELS, get_section_items

logger = get_logger(__name__)

EDITABLE_FIELDS = frozenset(CONTACT_FIELDS) | {"summary"}


def new_profile(user_id: str) -> ProfileDocument:
    """빈 프로필 생성"""
    return ProfileDocument(id=user_id)


def _coerce_item(key: SectionKey, item: ProfileItem | dict) -> ProfileItem:
    model = ITEM_MODELS[key]
    if isinstance(item, model):
        return item
    if isinstance(item, ProfileItem):
        raise ValueError(f"{key.value} 섹션에 {type(item).__name__} 항목을 추가할 수 없습니다")
    return model.model_validate(item)


def _replace_items(doc: ProfileDocument, key: SectionKey, items: list) -> ProfileDocument:
    return doc.model_copy(update={SECTION_FIELDS[key]: items})


def update_contact(doc: ProfileDocument, **fields: Any) -> ProfileDocument:
    """연락처/요약 필드 수정"""
    unknown = set(fields) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"수정할 수 없는 필드: {', '.join(sorted(unknown))}")

    data = doc.model_dump()
    data.update(fields)
    return ProfileDocument.model_validate(data)


def add_item(doc: ProfileDocument, key: SectionKey, item: ProfileItem | dict) -> ProfileDocument:
    """컬렉션 끝에 항목 추가"""
    new_item = _coerce_item(key, item)
    items = list(get_section_items(doc, key))
    if any(existing.id == new_item.id for existing in items):
        raise ValueError(f"이미 존재하는 항목 ID: {new_item.id}")

    items.append(new_item)
    logger.debug("항목 추가 section=%s item_id=%s", key.value, new_item.id)
    return _replace_items(doc, key, items)


def _normalize_changes(model: type[ProfileItem], changes: dict[str, Any]) -> dict[str, Any]:
    """camelCase 별칭 키를 필드명으로 변환, id는 제외"""
    aliases = {info.alias: name for name, info in model.model_fields.items() if info.alias}
    normalized = {aliases.get(k, k): v for k, v in changes.items()}
    normalized.pop("id", None)
    return normalized


def update_item(
    doc: ProfileDocument,
    key: SectionKey,
    item_id: str,
    changes: dict[str, Any],
) -> ProfileDocument:
    """항목 수정 - id와 컬렉션 내 위치는 유지"""
    items = list(get_section_items(doc, key))
    for idx, existing in enumerate(items):
        if existing.id == item_id:
            model = ITEM_MODELS[key]
            data = existing.model_dump()
            data.update(_normalize_changes(model, changes))
            items[idx] = model.model_validate(data)
            logger.debug("항목 수정 section=%s item_id=%s", key.value, item_id)
            return _replace_items(doc, key, items)

    raise ItemNotFoundError(detail=f"{key.value}/{item_id}")


def remove_item(doc: ProfileDocument, key: SectionKey, item_id: str) -> ProfileDocument:
    """항목 삭제 - 섹션 순서는 재정렬하지 않음"""
    items = list(get_section_items(doc, key))
    remaining = [item for item in items if item.id != item_id]
    if len(remaining) == len(items):
        raise ItemNotFoundError(detail=f"{key.value}/{item_id}")

    logger.debug("항목 삭제 section=%s item_id=%s", key.value, item_id)
    return _replace_items(doc, key, remaining)


def set_section_order(doc: ProfileDocument, order: list[SectionKey]) -> ProfileDocument:
    """보정된 섹션 순서 반영"""
    return doc.model_copy(update={"section_order": list(order)})

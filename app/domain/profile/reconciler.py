"""섹션 순서 보정

외부(LLM) 제안 순서는 신뢰하지 않는다. 제안에서 유효한 부분의 상대 순서는 유지하고,
빠진 섹션은 기본 우선순위로 채워 항상 사용 가능한 섹션의 순열을 반환한다.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from app.core.logging import get_logger
from app.domain.profile.constants import DEFAULT_SECTION_ORDER, SectionKey
from app.domain.profile.schemas import ProfileDocument
from app.domain.profile.sections import non_empty_sections

logger = get_logger(__name__)


def to_section_key(token: Any) -> SectionKey | None:
    """토큰을 SectionKey로 변환, 알 수 없는 토큰이면 None"""
    if isinstance(token, SectionKey):
        return token
    if not isinstance(token, str):
        return None
    try:
        return SectionKey(token)
    except ValueError:
        return None


def default_order_for(available: Iterable[SectionKey]) -> list[SectionKey]:
    """기본 우선순위 순서를 사용 가능한 섹션으로 필터링"""
    keys = {to_section_key(k) for k in available}
    return [key for key in DEFAULT_SECTION_ORDER if key in keys]


def reconcile_section_order(
    proposed: Sequence[Any] | None,
    available: Iterable[SectionKey],
) -> list[SectionKey]:
    """제안 순서를 사용 가능한 섹션의 유효한 순열로 보정.

    Args:
        proposed: 제안된 순서 (누락/중복/알 수 없는 토큰 허용)
        available: 반드시 포함해야 하는 섹션 집합

    Returns:
        available의 원소를 정확히 한 번씩 포함하는 순서
    """
    available_keys = {key for key in (to_section_key(k) for k in available) if key}
    if not available_keys:
        return []

    filtered: list[SectionKey] = []
    for token in proposed or []:
        key = to_section_key(token)
        if key is not None and key in available_keys and key not in filtered:
            filtered.append(key)

    missing = available_keys.difference(filtered)
    if missing:
        filtered.extend(key for key in DEFAULT_SECTION_ORDER if key in missing)

    if len(filtered) != len(available_keys) or len(set(filtered)) != len(filtered):
        logger.warning(
            "섹션 순서 검증 실패, 기본 순서 사용 result=%s available=%d",
            filtered,
            len(available_keys),
        )
        return default_order_for(available_keys)

    return filtered


def resolve_section_order(
    doc: ProfileDocument,
    proposed: Sequence[Any] | None = None,
) -> list[SectionKey]:
    """문서의 현재 내용 기준으로 렌더링 순서 결정

    proposed가 없으면 저장된 section_order를 보정해서 사용한다.
    """
    if proposed is None:
        proposed = doc.section_order
    return reconcile_section_order(proposed, non_empty_sections(doc))

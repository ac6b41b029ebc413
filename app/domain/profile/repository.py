from abc import ABC, abstractmethod

from app.core.exceptions import ProfileNotFoundError
from app.core.logging import get_logger
from app.domain.profile.schemas import ProfileDocument

logger = get_logger(__name__)


class ProfileRepository(ABC):
    """프로필 저장소 추상 클래스 - 사용자 ID별 전체 스냅샷 저장"""

    @abstractmethod
    async def get(self, user_id: str) -> ProfileDocument | None:
        """프로필 조회, 없으면 None"""
        pass

    @abstractmethod
    async def save(self, doc: ProfileDocument) -> None:
        """프로필 전체 스냅샷 저장"""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """프로필 삭제, 삭제 여부 반환"""
        pass

    async def get_or_raise(self, user_id: str) -> ProfileDocument:
        doc = await self.get(user_id)
        if doc is None:
            raise ProfileNotFoundError(detail=f"user_id={user_id}")
        return doc


class InMemoryProfileRepository(ProfileRepository):
    """JSON 스냅샷을 메모리에 보관하는 저장소 - 단일 프로세스용"""

    def __init__(self):
        self._snapshots: dict[str, str] = {}

    async def get(self, user_id: str) -> ProfileDocument | None:
        snapshot = self._snapshots.get(user_id)
        if snapshot is None:
            return None
        return ProfileDocument.model_validate_json(snapshot)

    async def save(self, doc: ProfileDocument) -> None:
        self._snapshots[doc.id] = doc.model_dump_json(by_alias=True)
        logger.debug("프로필 저장 user_id=%s", doc.id)

    async def delete(self, user_id: str) -> bool:
        return self._snapshots.pop(user_id, None) is not None


_repository: ProfileRepository | None = None


def get_profile_repository() -> ProfileRepository:
    """프로필 저장소 반환 - FastAPI 의존성"""
    global _repository

    if _repository is None:
        _repository = InMemoryProfileRepository()
        logger.info("인메모리 프로필 저장소 초기화")

    return _repository


def reset_repository() -> None:
    """저장소 캐시 초기화 - 테스트용"""
    global _repository
    _repository = None

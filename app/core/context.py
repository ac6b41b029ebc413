"""요청 단위 컨텍스트

요청 하나에 request_id와 대상 프로필(user_id)을 묶어 두고,
LLM 호출의 Langfuse 세션 id와 로그 필드로 같이 사용한다.
"""

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

REQUEST_ID_LENGTH = 8


@dataclass(frozen=True)
class RequestContext:
    request_id: str
    user_id: str | None = None


_context_var: ContextVar[RequestContext | None] = ContextVar("request_context", default=None)


def new_request_id() -> str:
    return uuid.uuid4().hex[:REQUEST_ID_LENGTH]


def current_context() -> RequestContext | None:
    return _context_var.get()


def get_request_id() -> str | None:
    """현재 요청 id, 요청 밖에서는 None"""
    ctx = _context_var.get()
    return ctx.request_id if ctx else None


def get_user_id() -> str | None:
    """현재 요청이 다루는 프로필 id"""
    ctx = _context_var.get()
    return ctx.user_id if ctx else None


@contextmanager
def request_context(
    request_id: str | None = None,
    user_id: str | None = None,
) -> Iterator[RequestContext]:
    """블록 안에서만 유효한 요청 컨텍스트 설정

    request_id가 없으면 새로 만들고, 블록을 나가면 이전 컨텍스트로 복원한다.
    """
    ctx = RequestContext(request_id=request_id or new_request_id(), user_id=user_id)
    token = _context_var.set(ctx)
    try:
        yield ctx
    finally:
        _context_var.reset(token)

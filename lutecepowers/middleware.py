"""langchain 에이전트용 LUTECE_CONTEXT 주입 미들웨어.

EventRouter를 langchain AgentMiddleware 훅에 연결합니다:
- before_agent: 세션 시작 알림 (레퍼런스 프로비저닝 + 프로젝트 규칙 동기화)
- wrap_model_call: 모든 모델 호출 전에 시스템 프롬프트 끝에 블록 추가

블록 구성은 EventRouter.transform_system과 같은 경로를 사용하므로,
OpenCode 호스트와 langchain 에이전트가 동일한 컨텍스트를 받습니다.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from langchain.agents.middleware.types import (
    AgentMiddleware,
    AgentState,
    ModelRequest,
    ModelResponse,
)
from langgraph.runtime import Runtime

from lutecepowers.events import EventRouter, SessionCreated


class _SystemOutput:
    """transform_system에 전달하는 출력 컨테이너."""

    def __init__(self) -> None:
        self.system: list[str] = []


class LuteceContextMiddleware(AgentMiddleware):
    """Lutece 컨텍스트를 시스템 프롬프트에 주입하는 미들웨어.

    Args:
        router: 프로비저닝 게이트와 스킬 카탈로그가 연결된 라우터.
    """

    def __init__(self, router: EventRouter) -> None:
        self.router = router

    def before_agent(self, state: AgentState, runtime: Runtime) -> dict[str, Any] | None:
        """에이전트 실행 전에 세션 시작 처리를 수행합니다.

        프로비저닝은 게이트가 한 번만 성공시키고, 규칙 동기화는 매번 실행됩니다.
        상태는 변경하지 않습니다.
        """
        self.router.dispatch(SessionCreated())
        return None

    async def abefore_agent(
        self, state: AgentState, runtime: Runtime
    ) -> dict[str, Any] | None:
        """(비동기) 세션 시작 처리를 워커 스레드에서 수행합니다.

        스크립트 실행이 최대 제한 시간 동안 블로킹되므로 이벤트 루프를 막지 않도록
        asyncio.to_thread로 넘깁니다.
        """
        await asyncio.to_thread(self.router.dispatch, SessionCreated())
        return None

    def _apply_context(self, request: ModelRequest) -> ModelRequest:
        output = _SystemOutput()
        self.router.transform_system(request, output)
        if not output.system:
            return request

        fragments = [request.system_prompt] if request.system_prompt else []
        fragments.extend(output.system)
        return request.override(system_prompt="\n\n".join(fragments))

    def wrap_model_call(
        self,
        request: ModelRequest,
        handler: Callable[[ModelRequest], ModelResponse],
    ) -> ModelResponse:
        """시스템 프롬프트에 LUTECE_CONTEXT 블록을 추가합니다.

        부트스트랩 스킬이 없으면 요청을 그대로 전달합니다.
        """
        return handler(self._apply_context(request))

    async def awrap_model_call(
        self,
        request: ModelRequest,
        handler: Callable[[ModelRequest], Awaitable[ModelResponse]],
    ) -> ModelResponse:
        """(비동기) 시스템 프롬프트에 LUTECE_CONTEXT 블록을 추가합니다."""
        return await handler(self._apply_context(request))

"""호스트 알림을 프로비저닝 게이트와 프롬프트 구성으로 라우팅합니다.

호스트 알림 종류:
- SessionCreated: 세션 시작. 레퍼런스 프로비저닝 후 프로젝트 규칙 동기화
- SystemTransform: 시스템 프롬프트 구성 훅. LUTECE_CONTEXT 블록을 출력에 추가
- UnknownEvent: 그 외 모든 알림. 무시
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lutecepowers.composer import compose_prompt_block
from lutecepowers.prompts import TOOL_MAPPING
from lutecepowers.provisioning import ProvisioningGate
from lutecepowers.skills.load import SkillCatalog

logger = logging.getLogger(__name__)

SESSION_CREATED = "session.created"


@dataclass(frozen=True)
class SessionCreated:
    directory: str | Path | None = None
    """활성 프로젝트 디렉토리. None이면 라우터의 기본 디렉토리 사용."""


@dataclass(frozen=True)
class SystemTransform:
    input: Any
    output: Any
    """`system` 목록을 가진 객체 또는 매핑."""


@dataclass(frozen=True)
class UnknownEvent:
    type: str | None = None


HostEvent = SessionCreated | SystemTransform | UnknownEvent


def parse_event(payload: Mapping[str, Any]) -> HostEvent:
    """`type` 키로 호스트 이벤트 페이로드를 알림 종류로 변환합니다."""
    event_type = payload.get("type")
    if event_type == SESSION_CREATED:
        return SessionCreated(directory=payload.get("directory"))
    return UnknownEvent(type=event_type)


def _system_fragments(output: Any) -> list[str]:
    """출력 객체의 `system` 목록을 반환합니다. 없으면 새로 만듭니다."""
    if isinstance(output, MutableMapping):
        fragments = output.get("system")
        if fragments is None:
            fragments = output["system"] = []
        return fragments

    fragments = getattr(output, "system", None)
    if fragments is None:
        fragments = []
        output.system = fragments
    return fragments


class EventRouter:
    """호스트 알림을 처리하는 라우터.

    Args:
        catalog: 스킬 카탈로그.
        gate: 레퍼런스 프로비저닝 게이트.
        bootstrap_skill: 본문이 블록에 포함되는 스킬 이름.
        directory: 세션 알림에 디렉토리가 없을 때 사용할 프로젝트 디렉토리.
        tool_mapping: 블록 끝에 붙는 도구 매핑 텍스트.
    """

    def __init__(
        self,
        *,
        catalog: SkillCatalog,
        gate: ProvisioningGate,
        bootstrap_skill: str,
        directory: str | Path | None = None,
        tool_mapping: str = TOOL_MAPPING,
    ) -> None:
        self.catalog = catalog
        self.gate = gate
        self.bootstrap_skill = bootstrap_skill
        self.directory = Path(directory) if directory is not None else Path.cwd()
        self.tool_mapping = tool_mapping

    def dispatch(self, event: HostEvent) -> None:
        if isinstance(event, SessionCreated):
            self.on_session_created(event)
        elif isinstance(event, SystemTransform):
            self.transform_system(event.input, event.output)
        else:
            logger.debug("처리하지 않는 이벤트 무시: %s", event)

    def on_event(self, payload: Mapping[str, Any]) -> None:
        """호스트 이벤트 페이로드를 받아 처리합니다."""
        self.dispatch(parse_event(payload))

    def on_session_created(self, event: SessionCreated) -> None:
        self.gate.ensure_ready()
        directory = event.directory if event.directory is not None else self.directory
        self.gate.sync_project(directory)

    def build_prompt_block(self) -> str | None:
        """현재 스킬 상태로 LUTECE_CONTEXT 블록을 만듭니다.

        부트스트랩 스킬이 없으면 목록을 읽지 않고 None을 반환합니다.
        """
        bootstrap_body = self.catalog.load_body(self.bootstrap_skill)
        if bootstrap_body is None:
            logger.debug("부트스트랩 스킬 '%s' 없음: 주입 건너뜀", self.bootstrap_skill)
            return None

        return compose_prompt_block(
            bootstrap_body, self.catalog.list_skills(), self.tool_mapping
        )

    def transform_system(self, input: Any, output: Any) -> None:
        """블록이 있으면 output.system 끝에 추가합니다. 기존 항목은 유지됩니다."""
        block = self.build_prompt_block()
        if block is None:
            return
        _system_fragments(output).append(block)

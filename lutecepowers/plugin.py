"""설정에서 라우터와 미들웨어를 조립합니다.

통합 구성:
1. SkillCatalog: {plugin_root}/skills/ 에서 스킬 발견
2. ProvisioningGate: ~/.lutece-references/ 준비 상태 관리
3. EventRouter: 세션 시작과 시스템 프롬프트 훅 처리
"""

from __future__ import annotations

from pathlib import Path

from lutecepowers.config import LutecepowersConfig
from lutecepowers.events import EventRouter
from lutecepowers.middleware import LuteceContextMiddleware
from lutecepowers.provisioning import ProvisioningGate
from lutecepowers.skills.load import SkillCatalog


def create_router(
    config: LutecepowersConfig | None = None,
    directory: str | Path | None = None,
) -> EventRouter:
    """설정으로 EventRouter를 생성합니다.

    Args:
        config: 플러그인 설정. None이면 환경 변수 기반 기본 설정.
        directory: 활성 프로젝트 디렉토리. None이면 현재 작업 디렉토리.
    """
    config = config or LutecepowersConfig.from_env()
    catalog = SkillCatalog(config.skills_dir, manifest_filename=config.manifest_filename)
    gate = ProvisioningGate(config)
    return EventRouter(
        catalog=catalog,
        gate=gate,
        bootstrap_skill=config.bootstrap_skill,
        directory=directory,
    )


def create_middleware(
    config: LutecepowersConfig | None = None,
    directory: str | Path | None = None,
) -> LuteceContextMiddleware:
    """langchain 에이전트용 LuteceContextMiddleware를 생성합니다."""
    return LuteceContextMiddleware(create_router(config, directory))

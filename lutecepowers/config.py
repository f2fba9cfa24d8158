"""lutecepowers 설정.

플러그인 루트, 스킬 디렉토리, 레퍼런스 저장소 위치와 스크립트 타임아웃을
한 곳에서 관리합니다. 프롬프트 템플릿과 도구 매핑 텍스트는 설정 대상이
아니며 `lutecepowers.prompts`의 상수로 고정됩니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

PLUGIN_ROOT = Path(__file__).resolve().parent.parent

PLUGIN_ROOT_ENV = "LUTECEPOWERS_PLUGIN_ROOT"
REFERENCES_DIR_ENV = "LUTECE_REFERENCES_DIR"


def _default_references_dir() -> Path:
    return Path.home() / ".lutece-references"


@dataclass
class LutecepowersConfig:
    """lutecepowers 플러그인 설정."""

    plugin_root: Path = PLUGIN_ROOT
    """플러그인 설치 루트. skills/와 scripts/가 이 아래에 위치."""

    references_dir: Path = field(default_factory=_default_references_dir)
    """레퍼런스 저장소가 클론되는 디렉토리. 기본값 ~/.lutece-references."""

    marker_repository: str = "lutece-core"
    """존재 여부로 프로비저닝 완료를 판단하는 레퍼런스 저장소 이름."""

    bootstrap_skill: str = "lutece-patterns"
    """본문 전체가 프롬프트 블록에 포함되는 부트스트랩 스킬 이름."""

    manifest_filename: str = "SKILL.md"
    """각 스킬 디렉토리의 매니페스트 파일 이름."""

    setup_timeout: float = 120.0
    """setup-references.sh 실행 제한 시간 (초)."""

    sync_timeout: float = 5.0
    """lutece-rules-setup.sh 실행 제한 시간 (초)."""

    plugin_root_env_var: str = "CLAUDE_PLUGIN_ROOT"
    """규칙 동기화 스크립트에 플러그인 루트를 전달하는 환경 변수 이름."""

    @property
    def skills_dir(self) -> Path:
        return self.plugin_root / "skills"

    @property
    def scripts_dir(self) -> Path:
        return self.plugin_root / "scripts"

    @property
    def setup_script(self) -> Path:
        return self.scripts_dir / "setup-references.sh"

    @property
    def rules_script(self) -> Path:
        return self.scripts_dir / "lutece-rules-setup.sh"

    @property
    def reference_marker(self) -> Path:
        """레퍼런스 저장소의 .git 디렉토리. 프로세스 재시작 후에도 유지되는 유일한 준비 신호."""
        return self.references_dir / self.marker_repository / ".git"

    @classmethod
    def from_env(cls) -> LutecepowersConfig:
        """환경 변수로 경로를 오버라이드한 설정을 생성합니다.

        - LUTECEPOWERS_PLUGIN_ROOT: 플러그인 루트
        - LUTECE_REFERENCES_DIR: 레퍼런스 저장소 디렉토리
        """
        config = cls()
        plugin_root = os.environ.get(PLUGIN_ROOT_ENV)
        if plugin_root:
            config.plugin_root = Path(plugin_root).expanduser().resolve()
        references_dir = os.environ.get(REFERENCES_DIR_ENV)
        if references_dir:
            config.references_dir = Path(references_dir).expanduser()
        return config

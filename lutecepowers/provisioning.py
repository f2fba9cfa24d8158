"""레퍼런스 저장소 프로비저닝과 프로젝트 규칙 동기화.

## 동작 원리

1. 생성 시 ~/.lutece-references/lutece-core/.git 존재 여부로 준비 상태 결정
2. 준비되지 않았으면 세션 시작마다 setup-references.sh 실행 (최대 120초)
3. 성공하면 프로세스가 끝날 때까지 준비 상태 유지, 실패하면 다음 세션에 재시도
4. lutece-rules-setup.sh는 준비 상태와 무관하게 세션 시작마다 실행 (최대 5초)

스크립트 실패는 세션을 막지 않습니다. 모든 실패는 ScriptResult로 변환되어
로그만 남기고 상태를 그대로 둡니다.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from lutecepowers.config import LutecepowersConfig

logger = logging.getLogger(__name__)


@dataclass
class ReferenceState:
    """레퍼런스 저장소 준비 상태. False -> True 전이만 허용."""

    ready: bool = False

    @classmethod
    def from_marker(cls, marker: Path) -> ReferenceState:
        return cls(ready=marker.exists())

    def mark_ready(self) -> None:
        self.ready = True


@dataclass
class ScriptResult:
    """외부 스크립트 실행 결과."""

    success: bool
    """종료 코드 0으로 제한 시간 안에 끝났는지 여부."""

    returncode: int | None = None
    """프로세스 종료 코드. 실행되지 못했거나 시간 초과면 None."""

    error: str | None = None
    """실패 사유 (시간 초과, 실행 오류, stderr 요약)."""


ScriptRunner = Callable[..., ScriptResult]


def run_script(
    script: Path,
    *,
    timeout: float,
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> ScriptResult:
    """bash로 스크립트를 실행하고 결과를 반환합니다.

    시간 초과 시 subprocess.run이 자식 프로세스를 종료시키며 실패로 처리됩니다.
    예외는 발생시키지 않습니다.
    """
    try:
        completed = subprocess.run(
            ["bash", str(script)],
            capture_output=True,
            text=True,
            timeout=timeout,
            cwd=cwd,
            env=dict(env) if env is not None else None,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return ScriptResult(success=False, error=f"{timeout}초 제한 시간 초과")
    except (subprocess.SubprocessError, OSError) as e:
        return ScriptResult(success=False, error=str(e))

    if completed.returncode != 0:
        stderr = (completed.stderr or "").strip()
        return ScriptResult(
            success=False,
            returncode=completed.returncode,
            error=stderr[-500:] or None,
        )
    return ScriptResult(success=True, returncode=0)


class ProvisioningGate:
    """레퍼런스 저장소 프로비저닝을 프로세스당 최대 한 번 성공시키는 게이트.

    Args:
        config: 스크립트 경로, 마커 경로, 타임아웃 설정.
        state: 준비 상태. None이면 마커 경로로 초기화.
        runner: 스크립트 실행 함수 (테스트에서 교체 가능).
    """

    def __init__(
        self,
        config: LutecepowersConfig,
        state: ReferenceState | None = None,
        runner: ScriptRunner = run_script,
    ) -> None:
        self.config = config
        self.state = state if state is not None else ReferenceState.from_marker(
            config.reference_marker
        )
        self._runner = runner

    @property
    def ready(self) -> bool:
        return self.state.ready

    def ensure_ready(self) -> None:
        """준비되지 않았으면 setup-references.sh를 실행합니다."""
        if self.state.ready:
            return

        script = self.config.setup_script
        if not script.exists():
            logger.debug("%s 없음: 레퍼런스 프로비저닝 건너뜀", script)
            return

        result = self._runner(script, timeout=self.config.setup_timeout)
        if result.success:
            self.state.mark_ready()
            logger.info("레퍼런스 저장소 준비 완료: %s", self.config.references_dir)
        else:
            logger.warning(
                "레퍼런스 프로비저닝 실패 (종료 코드 %s): %s. 다음 세션에 재시도",
                result.returncode,
                result.error,
            )

    def sync_project(self, directory: str | Path) -> None:
        """프로젝트 디렉토리에서 lutece-rules-setup.sh를 실행합니다."""
        script = self.config.rules_script
        if not script.exists():
            logger.debug("%s 없음: 규칙 동기화 건너뜀", script)
            return

        env = {
            **os.environ,
            self.config.plugin_root_env_var: str(self.config.plugin_root),
        }
        result = self._runner(
            script,
            timeout=self.config.sync_timeout,
            cwd=directory,
            env=env,
        )
        if not result.success:
            logger.warning(
                "%s 규칙 동기화 실패 (종료 코드 %s): %s",
                directory,
                result.returncode,
                result.error,
            )

"""스킬 디렉토리에서 SKILL.md 매니페스트를 찾아 읽는 스킬 로더.

스킬 구조:
skills/
├── lutece-patterns/
│   └── SKILL.md        # 부트스트랩 스킬: 본문 전체가 프롬프트에 포함
├── lutece-dao/
│   ├── SKILL.md        # 필수: 프론트매터 + 지침
│   └── examples.md     # 선택: 지원 파일
└── notes/              # SKILL.md가 없으므로 목록에서 제외

목록 조회와 본문 조회는 매번 파일시스템을 다시 읽습니다. 캐시가 없으므로
세션 도중 외부에서 스킬을 수정해도 다음 호출에 그대로 반영됩니다.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypedDict

from lutecepowers.skills.frontmatter import extract_description, parse_frontmatter

logger = logging.getLogger(__name__)

SKILL_FILENAME = "SKILL.md"


class SkillMetadata(TypedDict):
    """스킬 목록 항목."""

    name: str
    """스킬 이름 (디렉토리 이름)."""

    description: str
    """프론트매터의 description. 선언되지 않았으면 빈 문자열."""


def _read_manifest(manifest_path: Path) -> str | None:
    try:
        return manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("%s 읽기 오류: %s", manifest_path, e)
        return None


def _is_plain_name(name: str) -> bool:
    """스킬 이름이 단일 경로 요소인지 확인합니다."""
    if not name or name in (".", ".."):
        return False
    return Path(name).name == name and "\\" not in name


def list_skills(
    skills_dir: str | Path,
    *,
    manifest_filename: str = SKILL_FILENAME,
) -> list[SkillMetadata]:
    """스킬 디렉토리의 모든 스킬을 나열합니다.

    매니페스트가 있는 하위 디렉토리마다 하나의 항목을 만들며, 결과는
    디렉토리 이름순으로 정렬됩니다. 매니페스트가 없는 디렉토리와
    파일은 조용히 건너뜁니다.

    Args:
        skills_dir: 스킬 디렉토리 경로
        manifest_filename: 매니페스트 파일 이름

    Returns:
        name, description이 있는 스킬 메타데이터 목록
    """
    skills_dir = Path(skills_dir).expanduser()
    if not skills_dir.is_dir():
        return []

    skills: list[SkillMetadata] = []

    for skill_dir in sorted(skills_dir.iterdir(), key=lambda p: p.name):
        if not skill_dir.is_dir():
            continue

        manifest_path = skill_dir / manifest_filename
        if not manifest_path.is_file():
            continue

        content = _read_manifest(manifest_path)
        if content is None:
            continue

        header, _ = parse_frontmatter(content)
        skills.append(
            SkillMetadata(name=skill_dir.name, description=extract_description(header))
        )

    return skills


def load_skill_body(
    skills_dir: str | Path,
    name: str,
    *,
    manifest_filename: str = SKILL_FILENAME,
) -> str | None:
    """스킬 하나의 본문(프론트매터 제외)을 반환합니다.

    매니페스트가 없으면 None을 반환하며, 호출자는 이를 보고 프롬프트 구성을
    건너뜁니다.
    """
    if not _is_plain_name(name):
        logger.warning("잘못된 스킬 이름 무시: %r", name)
        return None

    manifest_path = Path(skills_dir).expanduser() / name / manifest_filename
    if not manifest_path.is_file():
        return None

    content = _read_manifest(manifest_path)
    if content is None:
        return None

    _, body = parse_frontmatter(content)
    return body


class SkillCatalog:
    """하나의 스킬 디렉토리에 묶인 스킬 카탈로그.

    Args:
        skills_dir: 스킬 디렉토리 경로.
        manifest_filename: 각 스킬의 매니페스트 파일 이름.
    """

    def __init__(
        self,
        skills_dir: str | Path,
        *,
        manifest_filename: str = SKILL_FILENAME,
    ) -> None:
        self.skills_dir = Path(skills_dir).expanduser()
        self.manifest_filename = manifest_filename

    def list_skills(self) -> list[SkillMetadata]:
        return list_skills(self.skills_dir, manifest_filename=self.manifest_filename)

    def load_body(self, name: str) -> str | None:
        return load_skill_body(
            self.skills_dir, name, manifest_filename=self.manifest_filename
        )

"""lutecepowers용 Skills 모듈.

1. skills/ 아래 SKILL.md가 있는 디렉토리를 스킬로 발견
2. 프론트매터에서 description만 추출해 스킬 목록 구성
3. 부트스트랩 스킬은 본문 전체를 읽어 프롬프트 블록에 포함

공개 API:
- SkillCatalog: 스킬 디렉토리에 묶인 목록/본문 조회
- list_skills, load_skill_body: 함수형 조회
- parse_frontmatter, extract_description: 매니페스트 파서
- SkillMetadata: 스킬 목록 항목용 TypedDict
"""

from lutecepowers.skills.frontmatter import extract_description, parse_frontmatter
from lutecepowers.skills.load import (
    SKILL_FILENAME,
    SkillCatalog,
    SkillMetadata,
    list_skills,
    load_skill_body,
)

__all__ = [
    "SKILL_FILENAME",
    "SkillCatalog",
    "SkillMetadata",
    "extract_description",
    "list_skills",
    "load_skill_body",
    "parse_frontmatter",
]

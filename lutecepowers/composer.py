"""부트스트랩 스킬 본문과 스킬 목록으로 프롬프트 블록을 구성합니다.

구성은 순수 함수입니다. 같은 입력이면 항상 바이트 단위로 같은 블록을
반환하므로, 매 턴 다시 계산해도 주입되는 컨텍스트가 흔들리지 않습니다.
"""

from __future__ import annotations

from collections.abc import Sequence

from lutecepowers.prompts import (
    LUTECE_CONTEXT_CLOSE,
    LUTECE_CONTEXT_OPEN,
    LUTECE_CONTEXT_TEMPLATE,
    LUTECE_PREAMBLE,
    SKILLS_HEADING,
    SKILLS_INSTRUCTION,
    TOOL_MAPPING,
)
from lutecepowers.skills.load import SkillMetadata


def format_skills_list(skills: Sequence[SkillMetadata]) -> str:
    """스킬 목록을 한 줄에 하나씩 `- **name**: description` 형식으로 포맷팅합니다."""
    return "\n".join(f"- **{skill['name']}**: {skill['description']}" for skill in skills)


def compose_prompt_block(
    bootstrap_body: str | None,
    skills: Sequence[SkillMetadata],
    tool_mapping: str = TOOL_MAPPING,
) -> str | None:
    """시스템 프롬프트에 주입할 LUTECE_CONTEXT 블록을 생성합니다.

    Args:
        bootstrap_body: 부트스트랩 스킬 본문. None이면 블록을 만들지 않음.
        skills: 카탈로그 순서의 스킬 목록. 비어 있어도 제목은 유지됨.
        tool_mapping: 블록 끝에 붙는 도구 매핑 텍스트.

    Returns:
        완성된 블록, 부트스트랩 본문이 없으면 None
    """
    if bootstrap_body is None:
        return None

    return LUTECE_CONTEXT_TEMPLATE.format(
        open_marker=LUTECE_CONTEXT_OPEN,
        preamble=LUTECE_PREAMBLE,
        bootstrap_body=bootstrap_body,
        skills_heading=SKILLS_HEADING,
        skills_list=format_skills_list(skills),
        skills_instruction=SKILLS_INSTRUCTION,
        tool_mapping=tool_mapping,
        close_marker=LUTECE_CONTEXT_CLOSE,
    )


def unwrap_prompt_block(text: str) -> str | None:
    """두 마커 줄 사이의 내용을 반환합니다. 마커가 없으면 None."""
    lines = text.splitlines()
    try:
        start = lines.index(LUTECE_CONTEXT_OPEN)
        end = len(lines) - 1 - lines[::-1].index(LUTECE_CONTEXT_CLOSE)
    except ValueError:
        return None
    if end <= start:
        return None
    return "\n".join(lines[start + 1 : end])

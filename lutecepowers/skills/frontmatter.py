"""SKILL.md 프론트매터 파서.

SKILL.md 구조 예시:
```markdown
---
name: lutece-patterns
description: "Lutece 8 CDI 패턴과 규칙"
---

# Lutece 8 Patterns
...
```

헤더는 문서 첫 줄이 정확히 `---`이고 이후 다시 `---` 줄이 나올 때만 인식합니다.
그 외의 문서는 헤더 없이 전체가 본문으로 취급됩니다. 어떤 입력에도 예외를
발생시키지 않습니다.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import yaml

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"

# 필드 줄: `key: value` 또는 `key: "value"`. 큰따옴표만 벗기고 값은 해석하지 않음
_FIELD_LINE_PATTERN = re.compile(r'^([A-Za-z0-9_-]+):\s*"?(.*?)"?\s*$')

# description은 YAML 해석 없이 항상 줄 단위 문법으로 읽는 필드
_LITERAL_FIELDS = ("description",)


def _is_delimiter(line: str) -> bool:
    return line.rstrip("\r\n") == FRONTMATTER_DELIMITER


def _parse_field_lines(lines: list[str]) -> dict[str, Any]:
    """줄 단위 문법으로 헤더 필드를 파싱합니다. 같은 키는 첫 줄이 우선."""
    fields: dict[str, Any] = {}
    for line in lines:
        match = _FIELD_LINE_PATTERN.match(line.rstrip("\r\n"))
        if match:
            fields.setdefault(match.group(1), match.group(2))
    return fields


def _parse_header(lines: list[str]) -> dict[str, Any]:
    """헤더 블록을 매핑으로 변환합니다.

    YAML 매핑으로 읽히면 그 결과를 사용하고, YAML 오류이거나 매핑이 아니면
    줄 단위 문법으로 대체합니다. description은 어느 경우든 원문 줄에서
    읽으므로 `#`, 작은따옴표, `yes`, `~` 같은 값도 그대로 유지됩니다.
    """
    header_text = "".join(lines)
    if not header_text.strip():
        return {}

    line_fields = _parse_field_lines(lines)

    try:
        data = yaml.safe_load(header_text)
    except yaml.YAMLError as e:
        logger.debug("YAML 헤더 파싱 실패, 줄 단위 파싱으로 대체: %s", e)
        return line_fields

    if not isinstance(data, dict):
        return line_fields

    fields = {str(key): value for key, value in data.items()}
    for key in _LITERAL_FIELDS:
        if key in line_fields:
            fields[key] = line_fields[key]
        else:
            fields.pop(key, None)
    return fields


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """문서에서 헤더를 분리합니다.

    Args:
        content: SKILL.md 원문

    Returns:
        (header, body) 튜플. 헤더가 없으면 header는 빈 딕셔너리이고
        body는 앞뒤 공백을 제거한 문서 전체.
    """
    lines = content.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        return {}, content.strip()

    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            header = _parse_header(lines[1:index])
            body = "".join(lines[index + 1 :])
            return header, body.strip()

    # 닫는 구분자 없음
    return {}, content.strip()


def extract_description(header: dict[str, Any]) -> str:
    """헤더의 description 필드를 문자열로 반환합니다. 없으면 빈 문자열."""
    description = header.get("description")
    if description is None:
        return ""
    return str(description).strip()

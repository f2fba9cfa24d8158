"""Lutece 8 프로젝트용 코딩 어시스턴트 컨텍스트 플러그인.

## 구성 요소

1. **Skills** (`skills/`)
   - skills/<name>/SKILL.md 매니페스트 발견
   - 프론트매터에서 description 추출, 본문 분리

2. **Prompt Composer** (`composer.py`, `prompts.py`)
   - 부트스트랩 스킬(lutece-patterns) 본문 + 스킬 목록 + 도구 매핑
   - `<LUTECE_CONTEXT>` 블록으로 고정된 순서로 구성

3. **Provisioning** (`provisioning.py`)
   - 첫 세션에 setup-references.sh로 레퍼런스 저장소 클론
   - 매 세션 lutece-rules-setup.sh로 프로젝트 규칙 동기화

4. **Events** (`events.py`)
   - session.created → 프로비저닝 + 규칙 동기화
   - 시스템 프롬프트 훅 → 블록을 output.system에 추가

5. **Middleware** (`middleware.py`)
   - langchain 에이전트에 같은 블록을 주입하는 AgentMiddleware

## 사용 예시

```python
from lutecepowers import create_router

router = create_router(directory="/path/to/lutece-project")
router.on_event({"type": "session.created"})

output = {"system": []}
router.transform_system(None, output)
```
"""

__version__ = "0.1.0"

from lutecepowers.composer import compose_prompt_block, unwrap_prompt_block
from lutecepowers.config import LutecepowersConfig
from lutecepowers.events import (
    EventRouter,
    SessionCreated,
    SystemTransform,
    UnknownEvent,
    parse_event,
)
from lutecepowers.middleware import LuteceContextMiddleware
from lutecepowers.plugin import create_middleware, create_router
from lutecepowers.provisioning import ProvisioningGate, ReferenceState, ScriptResult
from lutecepowers.skills import SkillCatalog, SkillMetadata, list_skills

__all__ = [
    "create_router",
    "create_middleware",
    "LutecepowersConfig",
    "EventRouter",
    "SessionCreated",
    "SystemTransform",
    "UnknownEvent",
    "parse_event",
    "LuteceContextMiddleware",
    "ProvisioningGate",
    "ReferenceState",
    "ScriptResult",
    "SkillCatalog",
    "SkillMetadata",
    "list_skills",
    "compose_prompt_block",
    "unwrap_prompt_block",
]

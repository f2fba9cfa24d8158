from collections.abc import Callable
from pathlib import Path

import pytest

from lutecepowers.config import LutecepowersConfig


@pytest.fixture
def skills_dir(tmp_path: Path) -> Path:
    path = tmp_path / "plugin" / "skills"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def make_skill(skills_dir: Path) -> Callable[[str, str], Path]:
    def _make_skill(name: str, content: str) -> Path:
        skill_dir = skills_dir / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        manifest = skill_dir / "SKILL.md"
        manifest.write_text(content, encoding="utf-8")
        return manifest

    return _make_skill


@pytest.fixture
def config(tmp_path: Path, skills_dir: Path) -> LutecepowersConfig:
    return LutecepowersConfig(
        plugin_root=skills_dir.parent,
        references_dir=tmp_path / "references",
    )

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, call

import pytest

from lutecepowers.composer import compose_prompt_block
from lutecepowers.events import (
    EventRouter,
    SessionCreated,
    SystemTransform,
    UnknownEvent,
    parse_event,
)
from lutecepowers.prompts import TOOL_MAPPING
from lutecepowers.skills.load import SkillCatalog

PATTERNS = '---\nname: lutece-patterns\ndescription: "Core patterns"\n---\n\n# Patterns\n'


class TestParseEvent:
    def test_session_created(self):
        event = parse_event({"type": "session.created", "directory": "/work/app"})

        assert event == SessionCreated(directory="/work/app")

    def test_session_created_without_directory(self):
        assert parse_event({"type": "session.created"}) == SessionCreated()

    @pytest.mark.parametrize("payload", [{"type": "session.idle"}, {"type": None}, {}])
    def test_other_types(self, payload):
        event = parse_event(payload)

        assert isinstance(event, UnknownEvent)
        assert event.type == payload.get("type")


class TestEventRouter:
    @pytest.fixture
    def gate(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def router(self, skills_dir: Path, gate: MagicMock, tmp_path: Path) -> EventRouter:
        return EventRouter(
            catalog=SkillCatalog(skills_dir),
            gate=gate,
            bootstrap_skill="lutece-patterns",
            directory=tmp_path,
        )

    def test_session_created_provisions_then_syncs(
        self, router: EventRouter, gate: MagicMock
    ):
        router.on_event({"type": "session.created", "directory": "/work/app"})

        assert gate.mock_calls == [call.ensure_ready(), call.sync_project("/work/app")]

    def test_session_created_defaults_to_router_directory(
        self, router: EventRouter, gate: MagicMock, tmp_path: Path
    ):
        router.dispatch(SessionCreated())

        gate.sync_project.assert_called_once_with(tmp_path)

    def test_unknown_events_are_ignored(self, router: EventRouter, gate: MagicMock):
        router.on_event({"type": "message.updated"})
        router.dispatch(UnknownEvent("file.edited"))

        assert gate.mock_calls == []

    def test_transform_appends_block(self, router: EventRouter, make_skill):
        make_skill("lutece-patterns", PATTERNS)
        make_skill("lutece-dao", "---\ndescription: DAO\n---\nd")
        output = SimpleNamespace(system=["existing prompt"])

        router.transform_system({"sessionID": "s1"}, output)

        expected = compose_prompt_block(
            "# Patterns",
            [
                {"name": "lutece-dao", "description": "DAO"},
                {"name": "lutece-patterns", "description": "Core patterns"},
            ],
            TOOL_MAPPING,
        )
        assert output.system == ["existing prompt", expected]

    def test_transform_creates_system_list(self, router: EventRouter, make_skill):
        make_skill("lutece-patterns", PATTERNS)
        attr_output = SimpleNamespace()
        dict_output: dict = {}

        router.transform_system(None, attr_output)
        router.transform_system(None, dict_output)

        assert len(attr_output.system) == 1
        assert len(dict_output["system"]) == 1
        assert attr_output.system == dict_output["system"]

    def test_transform_dict_with_none_system(self, router: EventRouter, make_skill):
        make_skill("lutece-patterns", PATTERNS)
        output = {"system": None}

        router.transform_system(None, output)

        assert len(output["system"]) == 1

    def test_transform_without_bootstrap_skill(self, router: EventRouter, make_skill):
        make_skill("lutece-dao", "---\ndescription: DAO\n---\nd")
        output = SimpleNamespace(system=["existing prompt"])

        router.transform_system(None, output)

        assert output.system == ["existing prompt"]

    def test_missing_bootstrap_skips_listing(self, gate: MagicMock):
        catalog = MagicMock()
        catalog.load_body.return_value = None
        router = EventRouter(catalog=catalog, gate=gate, bootstrap_skill="lutece-patterns")
        output = {"system": []}

        router.transform_system(None, output)

        catalog.load_body.assert_called_once_with("lutece-patterns")
        catalog.list_skills.assert_not_called()
        assert output == {"system": []}

    def test_appends_one_fragment_per_call(self, router: EventRouter, make_skill):
        make_skill("lutece-patterns", PATTERNS)
        output = {"system": []}

        router.dispatch(SystemTransform(input=None, output=output))
        router.dispatch(SystemTransform(input=None, output=output))

        assert len(output["system"]) == 2
        assert output["system"][0] == output["system"][1]

    def test_transform_does_not_touch_gate(
        self, router: EventRouter, gate: MagicMock, make_skill
    ):
        make_skill("lutece-patterns", PATTERNS)

        router.transform_system(None, {"system": []})

        assert gate.mock_calls == []

    def test_custom_tool_mapping(self, skills_dir: Path, gate: MagicMock, make_skill):
        make_skill("lutece-patterns", PATTERNS)
        router = EventRouter(
            catalog=SkillCatalog(skills_dir),
            gate=gate,
            bootstrap_skill="lutece-patterns",
            tool_mapping="CUSTOM TOOLS",
        )

        block = router.build_prompt_block()

        assert block is not None
        assert "CUSTOM TOOLS" in block
        assert TOOL_MAPPING not in block

    def test_default_directory_is_cwd(self, skills_dir: Path, gate: MagicMock):
        router = EventRouter(
            catalog=SkillCatalog(skills_dir), gate=gate, bootstrap_skill="x"
        )

        assert router.directory == Path.cwd()

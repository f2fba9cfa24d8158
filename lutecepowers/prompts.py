"""lutecepowers 프롬프트 템플릿과 고정 텍스트."""

LUTECE_CONTEXT_OPEN = "<LUTECE_CONTEXT>"
LUTECE_CONTEXT_CLOSE = "</LUTECE_CONTEXT>"

LUTECE_PREAMBLE = "You are working on a Lutece 8 (Jakarta EE / CDI) project."

SKILLS_HEADING = "## Available Skills"

SKILLS_INSTRUCTION = "Use OpenCode's native skill tool to load any skill when needed."

TOOL_MAPPING = """**Tool Mapping for OpenCode:**
When skills reference Claude Code tools, substitute OpenCode equivalents:
- `TodoWrite` -> `update_plan`
- `Task` tool with subagents -> Use OpenCode's subagent system (@mention)
- `Skill` tool -> OpenCode's native `skill` tool
- `Read`, `Write`, `Edit`, `Bash` -> Your native tools
- `Grep`, `Glob` -> Use `bash` with grep/find commands

**References:** Lutece v8 source repos are in `~/.lutece-references/` — use file read tools on these repos for real implementation examples."""

LUTECE_CONTEXT_TEMPLATE = """{open_marker}
{preamble}

{bootstrap_body}

{skills_heading}
{skills_list}

{skills_instruction}

{tool_mapping}
{close_marker}"""

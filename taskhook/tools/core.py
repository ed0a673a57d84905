"""MCP tool definitions for decoding, normalizing and building tasks."""

import json

from mcp.types import ToolAnnotations

from taskhook.builder import TaskBuilder
from taskhook.codec import decode_lines, decode_tasks, encode
from taskhook.enums import ResponseFormat
from taskhook.errors import MalformedJsonError, TaskHookError
from taskhook.models.inputs import BuildTaskInput, NormalizeTasksInput, ValidateTasksInput
from taskhook.models.options import CodecOptions
from taskhook.models.task import Task
from taskhook.server import mcp
from taskhook.utils.formatters import _format_tasks_concise, _format_tasks_markdown


def _decode_any(task_json: str, options: CodecOptions) -> list[Task]:
    """Decode an object, an array, or line-delimited objects."""
    try:
        return decode_tasks(task_json, options)
    except MalformedJsonError:
        lines = [line for line in task_json.splitlines() if line.strip()]
        if len(lines) < 2:
            raise
        return decode_lines(lines, options)


@mcp.tool(
    name="taskhook_validate",
    annotations=ToolAnnotations(
        title="Validate Task JSON",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskhook_validate(params: ValidateTasksInput) -> str:
    """
    Check that task JSON is well-formed and show what it decodes to.

    USE THIS WHEN:
    - Debugging a hook that Taskwarrior rejects
    - Checking that UDAs survive decoding

    Args:
        params: ValidateTasksInput containing task_json, depends_format and response_format

    Returns:
        The decoded tasks (concise, markdown or normalized JSON), or an error message
        naming the offending field
    """
    options = CodecOptions(depends_format=params.depends_format)
    try:
        tasks = _decode_any(params.task_json, options)
    except TaskHookError as e:
        return f"Error: {e}"

    if params.response_format == ResponseFormat.JSON:
        return encode(tasks, CodecOptions(depends_format=params.depends_format, indent=2))
    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, title="valid")
    return _format_tasks_markdown(tasks, title="Valid Tasks")


@mcp.tool(
    name="taskhook_normalize",
    annotations=ToolAnnotations(
        title="Normalize Task JSON",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskhook_normalize(params: NormalizeTasksInput) -> str:
    """
    Decode task JSON and encode it again in canonical field order.

    Unknown fields are kept as UDAs, duplicate tags collapse, and empty
    annotation arrays are dropped.

    Args:
        params: NormalizeTasksInput containing task_json, depends_format and indent

    Returns:
        Normalized JSON (object in, object out; array in, array out), or an error message
    """
    options = CodecOptions(depends_format=params.depends_format, indent=params.indent)
    try:
        data = json.loads(params.task_json)
    except json.JSONDecodeError as e:
        return f"Error: Failed to parse task JSON - {str(e)}"

    try:
        tasks = decode_tasks(params.task_json, options)
        return encode(tasks[0] if isinstance(data, dict) else tasks, options)
    except TaskHookError as e:
        return f"Error: {e}"


@mcp.tool(
    name="taskhook_build",
    annotations=ToolAnnotations(
        title="Build Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def taskhook_build(params: BuildTaskInput) -> str:
    """
    Assemble a new task and return its JSON, ready for `task import`.

    Args:
        params: BuildTaskInput containing description and optional attributes

    Returns:
        Task JSON object, or an error message

    Examples:
        - Simple task: params with description="Buy groceries"
        - Task with UDAs: params with description="Fix bug", udas={"estimate": 3}
    """
    builder = TaskBuilder().status(params.status).description(params.description)

    if params.uuid:
        builder.uuid(params.uuid)
    if params.entry:
        builder.entry(params.entry)
    if params.project:
        builder.project(params.project)
    if params.priority:
        builder.priority(params.priority)
    if params.due:
        builder.due(params.due)
    if params.tags:
        builder.tags(params.tags)
    if params.depends:
        builder.depends(params.depends)
    for text in params.annotations or []:
        builder.annotation(text)

    try:
        for name, value in (params.udas or {}).items():
            builder.uda(name, value)
        return encode(builder.build(), CodecOptions(indent=2))
    except (TaskHookError, TypeError, ValueError) as e:
        return f"Error: {e}"

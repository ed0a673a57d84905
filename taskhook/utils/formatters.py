"""Formatting utilities for task output."""

from taskhook.date import encode_date
from taskhook.models.task import Task

PRIORITY_NAMES = {"H": "High", "M": "Medium", "L": "Low"}


def _format_date(value) -> str:
    """Render a date as YYYY-MM-DD for display."""
    text = encode_date(value)
    return f"{text[0:4]}-{text[4:6]}-{text[6:8]}"


def _format_task_concise(task: Task) -> str:
    """
    Format a single task in concise format for hook feedback lines.

    Output: "a1b2c3d4: Description (H, due:2024-12-31, proj:work)"
    """
    task_ref = task.id if task.id else str(task.uuid)[:8]
    desc = task.description[:50]

    # Build compact metadata
    meta = []
    if task.priority:
        meta.append(task.priority.value)
    if task.due:
        meta.append(f"due:{_format_date(task.due)}")
    if task.project:
        meta.append(f"proj:{task.project}")
    if task.depends:
        meta.append(f"deps:{len(task.depends)}")

    if meta:
        return f"{task_ref}: {desc} ({', '.join(meta)})"
    return f"{task_ref}: {desc}"


def _format_tasks_concise(tasks: list[Task], title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | on-modify
    a1b2c3d4: Task one (H, due:2024-12-31)
    e5f67890: Task two (M)
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"
    lines = [header]

    for task in tasks:
        lines.append(_format_task_concise(task))

    return "\n".join(lines)


def _format_task_markdown(task: Task) -> str:
    """Format a single task as markdown."""
    lines = []

    task_ref = task.id if task.id else str(task.uuid)[:8]
    lines.append(f"### [{task_ref}] {task.description}")

    details = [f"**Status**: {task.status.value}"]
    if task.project:
        details.append(f"**Project**: {task.project}")
    if task.priority:
        details.append(f"**Priority**: {PRIORITY_NAMES[task.priority.value]}")
    if task.due:
        details.append(f"**Due**: {_format_date(task.due)}")
    if task.tags:
        details.append(f"**Tags**: {', '.join(task.tags)}")
    if task.urgency:
        details.append(f"**Urgency**: {task.urgency:.2f}")
    lines.append(" | ".join(details))

    if task.depends:
        lines.append(f"**Depends on**: {', '.join(str(u)[:8] for u in task.depends)}")

    if len(task.uda):
        lines.append("**UDAs:**")
        for name, value in task.uda.items():
            lines.append(f"  - {name}: {value!r}")

    # Annotations
    if task.annotations:
        lines.append("**Notes:**")
        for ann in task.annotations:
            lines.append(f"  - [{_format_date(ann.entry)}] {ann.description}")

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[Task], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    return "\n".join(lines)

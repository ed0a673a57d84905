"""MCP tools for taskhook."""

from taskhook.tools.core import taskhook_build, taskhook_normalize, taskhook_validate

__all__ = [
    "taskhook_validate",
    "taskhook_normalize",
    "taskhook_build",
]

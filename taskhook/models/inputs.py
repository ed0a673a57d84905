"""Input models for taskhook tools."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskhook.enums import DependsFormat, Priority, ResponseFormat, TaskStatus


class ValidateTasksInput(BaseModel):
    """Input model for validating task JSON."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_json: str = Field(
        ...,
        description="Task JSON: one object, an array of objects, or one object per line",
        min_length=1,
    )
    depends_format: DependsFormat = Field(
        default=DependsFormat.ARRAY,
        description="'array' for Taskwarrior 2.6+, 'string' for 2.5 and older",
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'concise', 'markdown' or 'json'",
    )


class NormalizeTasksInput(BaseModel):
    """Input model for re-encoding task JSON in canonical form."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_json: str = Field(..., description="Task JSON: one object or an array of objects", min_length=1)
    depends_format: DependsFormat = Field(
        default=DependsFormat.ARRAY,
        description="Wire form of `depends` for both input and output",
    )
    indent: int | None = Field(default=None, description="Indent for pretty output", ge=0, le=8)


class BuildTaskInput(BaseModel):
    """Input model for assembling a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    description: str = Field(..., description="Task description (required)", min_length=1, max_length=1000)
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Task status")
    uuid: str | None = Field(default=None, description="UUID to use; a random one is generated if omitted")
    entry: str | None = Field(default=None, description="Creation date as YYYYMMDDTHHMMSSZ; defaults to now")
    project: str | None = Field(default=None, description="Project name")
    priority: Priority | None = Field(default=None, description="Task priority: H (high), M (medium), L (low)")
    due: str | None = Field(default=None, description="Due date as YYYYMMDDTHHMMSSZ")
    tags: list[str] | None = Field(default=None, description="Tags to apply (without '+' prefix)", max_length=50)
    depends: list[str] | None = Field(default=None, description="UUIDs of tasks this task depends on")
    annotations: list[str] | None = Field(default=None, description="Annotation texts, stamped with the current time")
    udas: dict[str, Any] | None = Field(default=None, description="User-defined attributes, any JSON values")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Description cannot be empty")
        return v.strip()

"""Codec configuration."""

from pydantic import BaseModel, ConfigDict, Field

from taskhook.enums import DependsFormat


class CodecOptions(BaseModel):
    """Options controlling how tasks are read from and written to JSON."""

    model_config = ConfigDict(frozen=True)

    depends_format: DependsFormat = Field(
        default=DependsFormat.ARRAY,
        description="'array' for Taskwarrior 2.6+, 'string' for the comma-separated form of 2.5 and older",
    )
    indent: int | None = Field(default=None, description="Indent for pretty output, None for compact", ge=0)
    ensure_ascii: bool = Field(default=False, description="Escape non-ASCII characters in output")


DEFAULT_OPTIONS = CodecOptions()

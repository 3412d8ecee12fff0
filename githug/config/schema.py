# githug Configuration Schema
# Pydantic models for YAML configuration validation

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class InteractiveMode(str, Enum):
    """When prompts may be shown."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class OutputConfig(BaseModel):
    """Output configuration."""

    verbose: bool = Field(default=False, description="Enable verbose output")
    colored: bool = Field(default=True, description="Enable colored output")


class CommitConfig(BaseModel):
    """How commits are summarized in messages."""

    short_sha_length: int = Field(default=7, description="Characters of the SHA shown in hints")
    date_format: str = Field(default="%Y-%m-%d", description="strftime format for commit dates in hints")

    @field_validator("short_sha_length")
    @classmethod
    def check_sha_length(cls, v: int) -> int:
        """Keep abbreviations within a full SHA-1."""
        if not 4 <= v <= 40:
            raise ValueError("short_sha_length must be between 4 and 40")
        return v


class GithugConfig(BaseModel):
    """Root configuration model."""

    interactive: InteractiveMode = Field(
        default=InteractiveMode.AUTO,
        description="auto: prompt only when attached to a terminal",
    )
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")
    commit: CommitConfig = Field(default_factory=CommitConfig, description="Commit hint settings")

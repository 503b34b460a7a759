"""
Project models for resume_interview
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
MAX_ACHIEVEMENTS = 3


class ExtractionStrategy(str, Enum):
    """Which extraction tier produced a result."""

    LLM = "llm"
    PATTERN = "pattern"
    EMERGENCY = "emergency"
    NONE = "none"


class Project(BaseModel):
    """A single project pulled out of a resume."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Project title")
    description: str = Field(..., description="What the project is about")
    technologies: list[str] = Field(
        default_factory=list,
        description="Lowercase technology names, deduplicated"
    )
    duration: str | None = Field(default=None, description="Date range if stated")
    role: str | None = Field(default=None, description="Candidate's role if stated")
    achievements: list[str] = Field(
        default_factory=list,
        description="Up to three outcome sentences"
    )

    @field_validator("title", mode="before")
    @classmethod
    def _truncate_title(cls, value: str) -> str:
        return str(value).strip()[:TITLE_MAX_LENGTH]

    @field_validator("description", mode="before")
    @classmethod
    def _truncate_description(cls, value: str) -> str:
        return str(value).strip()[:DESCRIPTION_MAX_LENGTH]

    @field_validator("technologies", mode="before")
    @classmethod
    def _normalize_technologies(cls, value) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("technologies must be a list of names")
        seen: list[str] = []
        for tech in value:
            name = str(tech).strip().lower()
            if name and name not in seen:
                seen.append(name)
        return seen

    @field_validator("achievements", mode="before")
    @classmethod
    def _limit_achievements(cls, value) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("achievements must be a list of sentences")
        cleaned = [str(a).strip() for a in value if str(a).strip()]
        return cleaned[:MAX_ACHIEVEMENTS]


class ExtractionResult(BaseModel):
    """Projects found in one resume, plus the tier that found them."""

    model_config = ConfigDict(frozen=True)

    projects: list[Project] = Field(default_factory=list)
    strategy: ExtractionStrategy = ExtractionStrategy.NONE

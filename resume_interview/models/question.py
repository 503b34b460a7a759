"""
Question models for resume_interview
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QuestionCategory(str, Enum):
    """High-level question categories."""

    TECHNICAL = "technical"
    PROBLEM_SOLVING = "problem-solving"
    ARCHITECTURE = "architecture"
    BEHAVIORAL = "behavioral"

    @classmethod
    def parse(cls, value: object) -> "QuestionCategory":
        """Map loose labels ("Problem Solving", "system_design") to a category."""
        label = str(value or "").strip().lower().replace("_", "-").replace(" ", "-")
        aliases = {
            "problem": cls.PROBLEM_SOLVING,
            "design": cls.ARCHITECTURE,
            "system-design": cls.ARCHITECTURE,
            "behavior": cls.BEHAVIORAL,
            "behavioural": cls.BEHAVIORAL,
        }
        for category in cls:
            if category.value == label:
                return category
        return aliases.get(label, cls.TECHNICAL)


class InterviewQuestion(BaseModel):
    """A single interview question about one project."""

    model_config = ConfigDict(frozen=True)

    # Identification
    id: str = Field(..., description="Slug of the project title plus an ordinal")
    project_title: str

    # Content
    question_text: str
    category: QuestionCategory = QuestionCategory.TECHNICAL

    # Evaluation guidance
    expected_points: list[str] = Field(
        default_factory=list,
        description="Key points expected in a good answer"
    )

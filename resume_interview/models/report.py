"""
Report models for resume_interview

Defines the aggregate structures that feed the final feedback report.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SkillLevel(str, Enum):
    """Seniority estimate derived from the project set."""

    JUNIOR = "Junior"
    MID_LEVEL = "Mid-Level"
    SENIOR = "Senior"
    LEAD = "Lead"

    @property
    def years_band(self) -> str:
        """Expected experience for this level."""
        bands = {
            "Junior": "0-2 years",
            "Mid-Level": "2-5 years",
            "Senior": "5-8 years",
            "Lead": "8+ years",
        }
        return bands.get(self.value, "Unknown")


class OverallRating(str, Enum):
    """Session-level rating."""

    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"

    @property
    def description(self) -> str:
        descriptions = {
            "Excellent": "Answers were detailed, technical and backed by measurable outcomes.",
            "Good": "Solid answers with room for more depth or quantified results.",
            "Fair": "Answers covered the basics but lacked detail and concrete examples.",
            "Poor": "Answers were too brief to demonstrate project experience.",
        }
        return descriptions.get(self.value, "")


class SkillAssessment(BaseModel):
    """Seniority estimate for a candidate's project portfolio."""

    model_config = ConfigDict(frozen=True)

    level: SkillLevel
    years_estimate: str
    strengths: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class ComparisonData(BaseModel):
    """User score against industry reference figures for one dimension."""

    model_config = ConfigDict(frozen=True)

    category: str
    user_score: int = Field(..., ge=0, le=100)
    industry_average: int = Field(..., ge=0, le=100)
    top_performers: int = Field(..., ge=0, le=100)


class InterviewMetrics(BaseModel):
    """Aggregate of every answer analysis in one session."""

    model_config = ConfigDict(frozen=True)

    total_duration: float = Field(default=0.0, ge=0, description="Seconds")
    average_response_time: float = Field(default=0.0, ge=0, description="Seconds")
    words_per_minute: float = Field(default=0.0, ge=0)
    pause_count: int = Field(default=0, ge=0)

    confidence_level: int = Field(default=50, ge=0, le=100)
    technical_depth: int = Field(default=50, ge=0, le=100)
    communication_score: int = Field(default=50, ge=0, le=100)

    overall_rating: OverallRating = OverallRating.FAIR

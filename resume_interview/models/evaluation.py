"""
Evaluation models for resume_interview

Defines the structure produced when a single answer is scored.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sentiment(str, Enum):
    """Tone of an answer as reported by the sentiment classifier."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class Complexity(str, Enum):
    """Qualitative depth band derived from the score."""

    BASIC = "basic"            # score <= 50
    INTERMEDIATE = "intermediate"  # 51-70
    ADVANCED = "advanced"      # > 70


class AnswerAnalysis(BaseModel):
    """Complete analysis of a single answer."""

    model_config = ConfigDict(frozen=True)

    # Overall
    score: int = Field(..., ge=20, le=95)

    # Feedback
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)

    # Derived dimensions (0-100)
    technical_accuracy: int = Field(..., ge=0, le=100)
    communication_clarity: int = Field(..., ge=0, le=100)
    problem_solving_approach: int = Field(..., ge=0, le=100)
    industry_relevance: int = Field(..., ge=0, le=100)
    code_quality: int | None = Field(default=None, ge=0, le=100)

    # Sentiment (never feeds into the score)
    sentiment: Sentiment = Sentiment.NEUTRAL
    confidence: int = Field(default=50, ge=0, le=100)

    # Content signals
    keywords: list[str] = Field(default_factory=list)
    response_time: float = Field(
        default=0.0, ge=0,
        description="Estimated speaking time in seconds"
    )
    complexity: Complexity = Complexity.BASIC

    # Feature flags behind the score
    word_count: int = Field(default=0, ge=0)
    has_examples: bool = False
    has_technical_terms: bool = False
    has_metrics: bool = False

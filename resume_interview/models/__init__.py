"""
Data models and schemas for resume_interview

Contains Pydantic models for:
- Extracted projects
- Interview questions
- Answer analyses
- Skill assessment and report data
"""

from resume_interview.models.project import (
    ExtractionResult,
    ExtractionStrategy,
    Project,
)
from resume_interview.models.question import InterviewQuestion, QuestionCategory
from resume_interview.models.evaluation import AnswerAnalysis, Complexity, Sentiment
from resume_interview.models.report import (
    ComparisonData,
    InterviewMetrics,
    OverallRating,
    SkillAssessment,
    SkillLevel,
)

__all__ = [
    # Project
    "Project",
    "ExtractionResult",
    "ExtractionStrategy",
    # Question
    "InterviewQuestion",
    "QuestionCategory",
    # Evaluation
    "AnswerAnalysis",
    "Complexity",
    "Sentiment",
    # Report
    "ComparisonData",
    "InterviewMetrics",
    "OverallRating",
    "SkillAssessment",
    "SkillLevel",
]

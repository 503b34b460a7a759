"""
resume_interview - project extraction and interview answer scoring

Turns resume text into structured projects, generates interview
questions about them and scores free-text answers, with optional
Hugging Face inference and fully local fallbacks.
"""

from resume_interview.config.settings import IntegrationConfig
from resume_interview.core.answer_scorer import summarize_session
from resume_interview.core.feedback_composer import compose_feedback, industry_comparison
from resume_interview.core.pipeline import (
    InterviewPipeline,
    evaluate_answer,
    extract_projects,
    generate_questions,
    score_answer,
)
from resume_interview.core.skill_aggregator import assess_skill

__version__ = "0.1.0"

__all__ = [
    "IntegrationConfig",
    "InterviewPipeline",
    "assess_skill",
    "compose_feedback",
    "evaluate_answer",
    "extract_projects",
    "generate_questions",
    "industry_comparison",
    "score_answer",
    "summarize_session",
]

"""
Core business logic modules for resume_interview

Contains:
- Segmenter: candidate project blocks from raw text
- Project Extractor: tiered LLM / pattern / emergency extraction
- Question Synthesizer: per-project interview questions
- Answer Scorer: answer analysis and session metrics
- Skill Aggregator: seniority estimate
- Feedback Composer: industry comparison and final report
"""

from resume_interview.core.answer_scorer import AnswerScorer, summarize_session
from resume_interview.core.feedback_composer import compose_feedback, industry_comparison
from resume_interview.core.inference import InferenceClient, InferenceError
from resume_interview.core.pipeline import InterviewPipeline
from resume_interview.core.project_extractor import ProjectExtractor
from resume_interview.core.question_synthesizer import QuestionSynthesizer
from resume_interview.core.skill_aggregator import assess_skill

__all__ = [
    "AnswerScorer",
    "InferenceClient",
    "InferenceError",
    "InterviewPipeline",
    "ProjectExtractor",
    "QuestionSynthesizer",
    "assess_skill",
    "compose_feedback",
    "industry_comparison",
    "summarize_session",
]

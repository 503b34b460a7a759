"""
AI prompt templates for resume_interview

Contains structured prompts for:
- Project extraction
- Question generation
"""

from resume_interview.prompts.extractor import ExtractorPrompts
from resume_interview.prompts.interviewer import InterviewerPrompts

__all__ = [
    "ExtractorPrompts",
    "InterviewerPrompts",
]

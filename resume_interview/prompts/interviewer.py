"""
AI Interviewer Prompt Templates

Contains the prompt used to ask an inference endpoint for project
interview questions.
"""

from resume_interview.models.project import Project
from resume_interview.models.question import QuestionCategory


class InterviewerPrompts:
    """
    Prompt templates for the AI interviewer.

    Key principles:
    - Questions are about the candidate's own project
    - One question per category
    - Structured JSON output so replies can be validated
    """

    SYSTEM_CONTEXT = """You are an experienced software engineering interviewer.

Your role:
- Ask about the candidate's own project, not trivia
- Keep each question concise and open-ended
- Cover technical choices, challenges, architecture and reflection
"""

    QUESTION_COUNT = 4

    def generate_questions_prompt(self, project: Project) -> str:
        """Generate prompt for creating interview questions about a project."""
        technologies = ", ".join(project.technologies) or "not specified"
        categories = ", ".join(c.value for c in QuestionCategory)

        return f"""{self.SYSTEM_CONTEXT}
Generate {self.QUESTION_COUNT} concise interview questions for the following project. Return ONLY a JSON array of objects with keys: questionText, category, expectedPoints.
Use each of these categories once: {categories}.

Project: {project.title}
Description: {project.description}
Technologies: {technologies}"""

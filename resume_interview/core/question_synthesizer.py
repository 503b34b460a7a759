"""
Question Synthesizer for resume_interview

Generates four interview questions per project for the first three
projects. When question enhancement is enabled the inference endpoint
is asked first; otherwise, or on any failure, a fixed template set is
used.
"""

import asyncio
import logging
import re

from pydantic import ValidationError

from resume_interview.config.settings import IntegrationConfig
from resume_interview.core.inference import InferenceClient, InferenceError
from resume_interview.models.project import Project
from resume_interview.models.question import InterviewQuestion, QuestionCategory
from resume_interview.prompts.interviewer import InterviewerPrompts
from resume_interview.utils.json_parser import extract_json_array

logger = logging.getLogger(__name__)

MAX_PROJECTS = 3
QUESTIONS_PER_PROJECT = 4


def slugify(title: str) -> str:
    """Lowercase, hyphen-separated slug of a project title."""
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug or "project"


def question_id(title: str, ordinal: int) -> str:
    """Stable id for the ordinal-th question (1-based) about a project."""
    return f"{slugify(title)}-{ordinal}"


class QuestionSynthesizer:
    """
    Builds interview questions from extracted projects.

    Projects are processed concurrently under a semaphore sized by
    IntegrationConfig.max_concurrency; results keep the input order.
    """

    def __init__(
        self,
        config: IntegrationConfig | None = None,
        inference: InferenceClient | None = None,
    ):
        self.config = config or IntegrationConfig()
        self.inference = inference
        self.prompts = InterviewerPrompts()

    @property
    def enhancement_enabled(self) -> bool:
        return self.inference is not None and self.config.question_enhancement_enabled

    async def generate(self, projects: list[Project]) -> list[InterviewQuestion]:
        """
        Generate questions for up to MAX_PROJECTS projects.

        Returns:
            Exactly QUESTIONS_PER_PROJECT questions per processed project,
            grouped by project in input order, with unique ids
        """
        selected = list(projects[:MAX_PROJECTS])
        if not selected:
            return []

        semaphore = asyncio.Semaphore(self.config.max_concurrency)
        slugs = self._unique_slugs(selected)

        async def _bounded(project: Project, slug: str) -> list[InterviewQuestion]:
            async with semaphore:
                return await self._questions_for_project(project, slug)

        batches = await asyncio.gather(
            *(_bounded(project, slug) for project, slug in zip(selected, slugs))
        )

        questions = [q for batch in batches for q in batch]
        logger.info(f"Generated {len(questions)} questions for {len(selected)} projects")
        return questions

    def _unique_slugs(self, projects: list[Project]) -> list[str]:
        """Slug per project; repeated titles get a numeric suffix."""
        slugs: list[str] = []
        for project in projects:
            base = slugify(project.title)
            candidate, suffix = base, 1
            while candidate in slugs:
                suffix += 1
                candidate = f"{base}-{suffix}"
            slugs.append(candidate)
        return slugs

    async def _questions_for_project(self, project: Project, slug: str) -> list[InterviewQuestion]:
        if self.enhancement_enabled:
            try:
                questions = await self._generate_with_inference(project, slug)
                if questions:
                    return questions
                logger.warning(f"Unusable question reply for '{project.title}', using templates")
            except (InferenceError, ValueError) as e:
                logger.warning(f"Question generation failed for '{project.title}', using templates: {e}")
            except Exception as e:
                logger.error(f"Unexpected question generation error for '{project.title}': {e}")

        return self.generate_locally(project, slug)

    # =========================================================================
    # INFERENCE
    # =========================================================================

    async def _generate_with_inference(
        self,
        project: Project,
        slug: str,
    ) -> list[InterviewQuestion]:
        """Ask the endpoint for questions; empty list if the reply is short."""
        prompt = self.prompts.generate_questions_prompt(project)
        reply = await self.inference.complete(prompt, max_new_tokens=400, temperature=0.3)
        items = extract_json_array(reply)

        questions: list[InterviewQuestion] = []
        for item in items:
            if not isinstance(item, dict):
                continue
            text = str(item.get("questionText") or item.get("question") or "").strip()
            if not text:
                continue
            points = item.get("expectedPoints", item.get("points", []))
            if not isinstance(points, list):
                points = []
            try:
                questions.append(InterviewQuestion(
                    id=f"{slug}-{len(questions) + 1}",
                    project_title=project.title,
                    question_text=text,
                    category=QuestionCategory.parse(item.get("category")),
                    expected_points=[str(p) for p in points],
                ))
            except ValidationError as e:
                logger.debug(f"Skipping malformed question entry: {e}")
                continue
            if len(questions) == QUESTIONS_PER_PROJECT:
                return questions

        return []

    # =========================================================================
    # TEMPLATES
    # =========================================================================

    def generate_locally(self, project: Project, slug: str | None = None) -> list[InterviewQuestion]:
        """Four fixed-template questions, one per category."""
        slug = slug or slugify(project.title)
        title = project.title
        tech_list = ", ".join(project.technologies[:3]) or "the technologies used"

        templates = [
            (
                QuestionCategory.TECHNICAL,
                f"Can you walk me through {title}? What problem did it solve and why did you choose {tech_list}?",
                ["Problem statement", "Approach", "Tech choices"],
            ),
            (
                QuestionCategory.PROBLEM_SOLVING,
                f"What were the biggest challenges in {title} and how did you overcome them using {tech_list}?",
                ["Challenges", "Approach", "Outcome"],
            ),
            (
                QuestionCategory.ARCHITECTURE,
                f"How did you design the architecture for {title} around {tech_list}? What trade-offs did you consider?",
                ["Architecture", "Scaling", "Trade-offs"],
            ),
            (
                QuestionCategory.BEHAVIORAL,
                f"What did you learn from {title}, and what would you do differently with {tech_list} today?",
                ["Learnings", "Improvements", "Reflection"],
            ),
        ]

        return [
            InterviewQuestion(
                id=f"{slug}-{ordinal}",
                project_title=title,
                question_text=text,
                category=category,
                expected_points=points,
            )
            for ordinal, (category, text, points) in enumerate(templates, start=1)
        ]

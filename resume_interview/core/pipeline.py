"""
Pipeline entry points for resume_interview

Wires the core components together around one shared inference client
and exposes the operations the host application calls.
"""

import logging

import httpx

from resume_interview.config.settings import IntegrationConfig
from resume_interview.core.answer_scorer import AnswerScorer, summarize_session
from resume_interview.core.feedback_composer import compose_feedback, industry_comparison
from resume_interview.core.inference import InferenceClient
from resume_interview.core.project_extractor import ProjectExtractor
from resume_interview.core.question_synthesizer import QuestionSynthesizer
from resume_interview.core.skill_aggregator import assess_skill
from resume_interview.models.evaluation import AnswerAnalysis
from resume_interview.models.project import ExtractionResult, Project
from resume_interview.models.question import InterviewQuestion

logger = logging.getLogger(__name__)


class InterviewPipeline:
    """
    Extraction-and-scoring pipeline.

    An inference client is only created when the config carries a
    credential. Use as an async context manager, or call close().
    """

    def __init__(
        self,
        config: IntegrationConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize all components.

        Args:
            config: Integration settings; defaults to no integrations
            client: HTTP client for the inference endpoints
        """
        self.config = config or IntegrationConfig()

        self.inference: InferenceClient | None = None
        if self.config.inference_configured:
            self.inference = InferenceClient(self.config, client=client)
            logger.info("Inference endpoint configured")
        else:
            logger.info("No inference credential, using local parsing & analysis only")

        self.extractor = ProjectExtractor(self.config, self.inference)
        self.synthesizer = QuestionSynthesizer(self.config, self.inference)
        self.scorer = AnswerScorer(self.config, self.inference)

    async def __aenter__(self) -> "InterviewPipeline":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self):
        """Cleanup resources on shutdown."""
        if self.inference:
            await self.inference.close()

    async def extract_projects(self, resume_text: str) -> ExtractionResult:
        return await self.extractor.extract(resume_text)

    async def generate_questions(self, projects: list[Project]) -> list[InterviewQuestion]:
        return await self.synthesizer.generate(projects)

    async def score_answer(
        self,
        question: InterviewQuestion,
        answer_text: str,
        project: Project | None = None,
    ) -> AnswerAnalysis:
        return await self.scorer.score(question, answer_text, project)

    # Pure operations, exposed for convenience
    assess_skill = staticmethod(assess_skill)
    industry_comparison = staticmethod(industry_comparison)
    summarize_session = staticmethod(summarize_session)
    compose_feedback = staticmethod(compose_feedback)


# =============================================================================
# ONE-SHOT HELPERS
# =============================================================================

async def extract_projects(
    resume_text: str,
    config: IntegrationConfig | None = None,
) -> ExtractionResult:
    """Extract projects from a resume. Never raises."""
    async with InterviewPipeline(config) as pipeline:
        return await pipeline.extract_projects(resume_text)


async def generate_questions(
    projects: list[Project],
    config: IntegrationConfig | None = None,
) -> list[InterviewQuestion]:
    """Four questions for each of the first three projects."""
    async with InterviewPipeline(config) as pipeline:
        return await pipeline.generate_questions(projects)


async def score_answer(
    question: InterviewQuestion,
    answer_text: str,
    project: Project | None = None,
    config: IntegrationConfig | None = None,
) -> AnswerAnalysis:
    """Score one answer. Never raises."""
    async with InterviewPipeline(config) as pipeline:
        return await pipeline.score_answer(question, answer_text, project)


evaluate_answer = score_answer

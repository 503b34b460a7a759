"""
Project Extractor for resume_interview

Turns resume text into structured Project records using an ordered
chain of extraction tiers:

1. LLMTier       - inference endpoint returns a JSON array (optional)
2. PatternTier   - segmenter + vocabulary heuristics
3. EmergencyTier - paragraph scan for technology density

The extractor walks the chain and stops at the first tier that returns
projects. No tier failure ever reaches the caller.
"""

import logging
import re
from abc import ABC, abstractmethod

from pydantic import ValidationError

from resume_interview.config.settings import IntegrationConfig
from resume_interview.core.inference import InferenceClient, InferenceError
from resume_interview.core.segmenter import normalize_text, segment
from resume_interview.core.vocabulary import (
    ACHIEVEMENT_PATTERN,
    DURATION_PATTERN,
    EMERGENCY_PATTERN,
    LEADING_MARKER,
    OUTCOME_PATTERN,
    ROLE_PATTERN,
    SENTENCE_SPLIT,
    TECH_PATTERN,
    is_disqualified,
)
from resume_interview.models.project import (
    ExtractionResult,
    ExtractionStrategy,
    Project,
)
from resume_interview.prompts.extractor import ExtractorPrompts
from resume_interview.utils.json_parser import extract_json_array

logger = logging.getLogger(__name__)

MIN_MEANINGFUL_CHARS = 50

MAX_LLM_PROJECTS = 5
MAX_PATTERN_PROJECTS = 4
MAX_EMERGENCY_PROJECTS = 3
MAX_ACHIEVEMENTS = 3


# =============================================================================
# SHARED HELPERS
# =============================================================================

def find_technologies(text: str) -> list[str]:
    """Curated technologies mentioned in text, lowercase, first-seen order."""
    found: list[str] = []
    for match in TECH_PATTERN.findall(text):
        tech = match.lower()
        if tech not in found:
            found.append(tech)
    return found


def find_achievements(
    text: str,
    pattern: re.Pattern[str] = ACHIEVEMENT_PATTERN,
    min_length: int = 15,
) -> list[str]:
    """Sentences that describe an outcome, at most MAX_ACHIEVEMENTS."""
    achievements = []
    for sentence in SENTENCE_SPLIT.split(text):
        if len(sentence) > min_length and pattern.search(sentence):
            achievements.append(LEADING_MARKER.sub("", " ".join(sentence.split())).strip())
        if len(achievements) == MAX_ACHIEVEMENTS:
            break
    return achievements


def is_valid_project(project: Project) -> bool:
    """Reject short fragments and education / skills-section entries."""
    if len(project.title) < 3:
        return False
    if len(project.description) < 10:
        return False
    if is_disqualified(project.title) or is_disqualified(project.description):
        return False
    return True


def _find_duration(text: str) -> str | None:
    match = DURATION_PATTERN.search(text)
    return match.group(1).strip() if match else None


def _find_role(text: str) -> str | None:
    match = ROLE_PATTERN.search(text)
    if not match:
        return None
    role = (match.group(1) or match.group(2) or "").strip()
    return role or None


# =============================================================================
# TIERS
# =============================================================================

class ExtractionTier(ABC):
    """Base class for one step of the fallback chain."""

    strategy: ExtractionStrategy = ExtractionStrategy.NONE

    @abstractmethod
    async def extract(self, text: str) -> list[Project]:
        """Return projects found in text, or an empty list."""


class LLMTier(ExtractionTier):
    """Ask the inference endpoint for a JSON array of projects."""

    strategy = ExtractionStrategy.LLM

    def __init__(self, inference: InferenceClient):
        self.inference = inference
        self.prompts = ExtractorPrompts()

    async def extract(self, text: str) -> list[Project]:
        prompt = self.prompts.extract_projects_prompt(text)

        try:
            reply = await self.inference.complete(prompt, max_new_tokens=1024, temperature=0.1)
            items = extract_json_array(reply)
        except (InferenceError, ValueError) as e:
            logger.warning(f"LLM parsing failed: {e}")
            return []

        projects = []
        for item in items:
            project = self._to_project(item)
            if project is not None:
                projects.append(project)
            if len(projects) == MAX_LLM_PROJECTS:
                break
        return projects

    def _to_project(self, item: object) -> Project | None:
        if not isinstance(item, dict):
            return None
        title = item.get("title")
        description = item.get("description")
        if not isinstance(title, str) or not isinstance(description, str):
            return None
        if not title.strip() or not description.strip():
            return None

        def _optional_str(key: str) -> str | None:
            value = item.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
            return None

        try:
            return Project(
                title=title,
                description=description,
                technologies=item.get("technologies") or [],
                achievements=item.get("achievements") or [],
                duration=_optional_str("duration"),
                role=_optional_str("role"),
            )
        except ValidationError as e:
            logger.debug(f"Skipping malformed LLM project entry: {e}")
            return None


class PatternTier(ExtractionTier):
    """Segment the text and read each candidate block as a project."""

    strategy = ExtractionStrategy.PATTERN

    async def extract(self, text: str) -> list[Project]:
        return self.extract_sync(text)

    def extract_sync(self, text: str) -> list[Project]:
        projects: list[Project] = []
        seen_titles: set[str] = set()

        for block in segment(text):
            project = self.parse_block(block)
            if project is None or not is_valid_project(project):
                continue
            key = project.title.lower()
            if key in seen_titles:
                continue
            seen_titles.add(key)
            projects.append(project)
            if len(projects) == MAX_PATTERN_PROJECTS:
                break

        return projects

    @staticmethod
    def parse_block(block: str) -> Project | None:
        """First line is the title, the rest is the description."""
        lines = [line for line in block.split("\n") if line.strip()]
        if not lines:
            return None

        title = LEADING_MARKER.sub("", lines[0]).strip()
        body = [LEADING_MARKER.sub("", line).strip() for line in lines[1:]]
        description = " ".join(body).strip() or title

        return Project(
            title=title,
            description=description,
            technologies=find_technologies(description),
            achievements=find_achievements(description),
            duration=_find_duration(block),
            role=_find_role(block),
        )


class EmergencyTier(ExtractionTier):
    """Last resort: any paragraph dense with technology words."""

    strategy = ExtractionStrategy.EMERGENCY

    async def extract(self, text: str) -> list[Project]:
        return self.extract_sync(text)

    def extract_sync(self, text: str) -> list[Project]:
        projects: list[Project] = []
        paragraphs = [p for p in re.split(r"\n\s*\n", normalize_text(text)) if len(p) > 80]

        for paragraph in paragraphs:
            if len(projects) == MAX_EMERGENCY_PROJECTS:
                break

            technologies: list[str] = []
            for match in EMERGENCY_PATTERN.findall(paragraph):
                tech = match.lower()
                if tech not in technologies:
                    technologies.append(tech)
            if len(technologies) < 2:
                continue

            first_line = paragraph.split("\n")[0].strip()
            if len(first_line) > 10:
                title = first_line[:60]
            else:
                title = f"Project {len(projects) + 1}"
            if any(p.title == title.strip() for p in projects):
                continue

            project = Project(
                title=title,
                description=paragraph[:400],
                technologies=technologies,
                achievements=find_achievements(paragraph, OUTCOME_PATTERN, min_length=20),
            )
            if not is_valid_project(project):
                continue
            projects.append(project)

        return projects


# =============================================================================
# ORCHESTRATOR
# =============================================================================

class ProjectExtractor:
    """
    Runs the extraction tiers in priority order.

    Tier selection:
    - LLMTier only when the config carries a credential
    - PatternTier always
    - EmergencyTier always, reached only when everything before it is empty
    """

    def __init__(
        self,
        config: IntegrationConfig | None = None,
        inference: InferenceClient | None = None,
    ):
        """
        Initialize the extractor.

        Args:
            config: Integration settings; defaults to no integrations
            inference: Client used by the LLM tier
        """
        self.config = config or IntegrationConfig()
        self.tiers: list[ExtractionTier] = []

        if self.config.inference_configured and inference is not None:
            self.tiers.append(LLMTier(inference))
        self.tiers.append(PatternTier())
        self.tiers.append(EmergencyTier())

    async def extract(self, resume_text: str) -> ExtractionResult:
        """
        Extract projects from resume text.

        Never raises. Text with fewer than MIN_MEANINGFUL_CHARS characters
        returns an empty result without running any tier.
        """
        if not resume_text or len(resume_text.strip()) < MIN_MEANINGFUL_CHARS:
            return ExtractionResult()

        logger.info("Starting resume parsing...")

        for tier in self.tiers:
            try:
                projects = await tier.extract(resume_text)
            except Exception as e:
                logger.error(f"{tier.strategy.value} tier failed: {e}")
                projects = []

            if projects:
                logger.info(f"{tier.strategy.value} tier extracted {len(projects)} projects")
                return ExtractionResult(projects=projects, strategy=tier.strategy)

            logger.info(f"{tier.strategy.value} tier found no projects, falling back")

        return ExtractionResult()

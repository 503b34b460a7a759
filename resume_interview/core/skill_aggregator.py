"""
Skill Aggregator for resume_interview

Folds a set of projects into a seniority estimate. Pure function of the
project set: no inference, no state.
"""

import logging
from collections import Counter

from resume_interview.core.vocabulary import SENIORITY_PATTERN
from resume_interview.models.project import Project
from resume_interview.models.report import SkillAssessment, SkillLevel

logger = logging.getLogger(__name__)

TOP_TECHNOLOGIES = 5
MINIMAL_YEARS_BAND = "<1 year"

# (level, minimum distinct technologies, minimum average complexity), top-down
LEVEL_THRESHOLDS: list[tuple[SkillLevel, int, float]] = [
    (SkillLevel.LEAD, 20, 3.0),
    (SkillLevel.SENIOR, 10, 2.5),
    (SkillLevel.MID_LEVEL, 5, 1.5),
]

LEVEL_STRENGTHS: dict[SkillLevel, list[str]] = {
    SkillLevel.JUNIOR: [
        "Hands-on exposure to core development tools",
        "Foundation for building complete projects",
    ],
    SkillLevel.MID_LEVEL: [
        "Comfortable across several technologies",
        "Delivers projects with measurable outcomes",
    ],
    SkillLevel.SENIOR: [
        "Broad technical range across the stack",
        "Owns complex projects end to end",
    ],
    SkillLevel.LEAD: [
        "Extensive technology breadth",
        "Track record of leading complex initiatives",
    ],
}

LEVEL_RECOMMENDATIONS: dict[SkillLevel, list[str]] = {
    SkillLevel.JUNIOR: [
        "Build a project that goes beyond tutorials and deploy it",
        "Describe outcomes with concrete numbers",
    ],
    SkillLevel.MID_LEVEL: [
        "Take ownership of architecture decisions in your next project",
        "Highlight scalability and performance work",
    ],
    SkillLevel.SENIOR: [
        "Document the trade-offs behind your system designs",
        "Show mentoring or technical leadership experience",
    ],
    SkillLevel.LEAD: [
        "Emphasize business impact and cross-team influence",
        "Share how you set technical direction for a team",
    ],
}


def project_complexity(project: Project) -> int:
    """Base 1, +1 each for breadth, detail, outcomes and a senior role."""
    complexity = 1
    if len(project.technologies) > 5:
        complexity += 1
    if len(project.description) > 200:
        complexity += 1
    if project.achievements:
        complexity += 1
    if project.role and SENIORITY_PATTERN.search(project.role):
        complexity += 1
    return complexity


def _classify(distinct_tech: int, average_complexity: float) -> SkillLevel:
    for level, min_tech, min_complexity in LEVEL_THRESHOLDS:
        if distinct_tech >= min_tech and average_complexity >= min_complexity:
            return level
    return SkillLevel.JUNIOR


def assess_skill(projects: list[Project]) -> SkillAssessment:
    """
    Estimate seniority from a project set.

    Args:
        projects: Extracted projects

    Returns:
        SkillAssessment; an empty set yields Junior with minimal experience
    """
    if not projects:
        return SkillAssessment(
            level=SkillLevel.JUNIOR,
            years_estimate=MINIMAL_YEARS_BAND,
            strengths=[],
            recommendations=[
                "Add technical projects to your resume",
                "Describe the technologies and outcomes of each project",
            ],
        )

    frequency: Counter[str] = Counter()
    first_seen: dict[str, int] = {}
    for project in projects:
        for tech in project.technologies:
            frequency[tech] += 1
            first_seen.setdefault(tech, len(first_seen))

    distinct_tech = len(frequency)
    average_complexity = sum(project_complexity(p) for p in projects) / len(projects)
    level = _classify(distinct_tech, average_complexity)

    logger.info(
        f"Skill assessment: level={level.value}, distinct_tech={distinct_tech}, "
        f"avg_complexity={average_complexity:.2f}"
    )

    top_tech = sorted(frequency, key=lambda t: (-frequency[t], first_seen[t]))[:TOP_TECHNOLOGIES]
    strengths = [f"Experience with {tech}" for tech in top_tech] + LEVEL_STRENGTHS[level]

    recommendations = list(LEVEL_RECOMMENDATIONS[level])
    if len(projects) < 2:
        recommendations.append("Add more projects to demonstrate range")

    return SkillAssessment(
        level=level,
        years_estimate=level.years_band,
        strengths=strengths,
        recommendations=recommendations,
    )

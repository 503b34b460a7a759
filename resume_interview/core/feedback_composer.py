"""
Feedback Composer for resume_interview

Renders the end-of-interview report:
- Overall rating
- Skill level and experience band
- Technical / communication / confidence scores
- Strengths and recommendations
- Industry comparison

Formatting only: numbers are printed as received.
"""

import logging

from resume_interview.models.project import Project
from resume_interview.models.report import (
    ComparisonData,
    InterviewMetrics,
    SkillAssessment,
)

logger = logging.getLogger(__name__)


# (category, offset applied to the user score, industry average, top performers)
COMPARISON_CATEGORIES: list[tuple[str, int, int, int]] = [
    ("Overall", 0, 65, 90),
    ("Technical Accuracy", 5, 62, 92),
    ("Communication", 0, 68, 88),
    ("Problem Solving", -5, 60, 89),
]


def industry_comparison(score: int | float) -> list[ComparisonData]:
    """
    Compare a score against fixed industry reference figures.

    Returns:
        One entry per category in COMPARISON_CATEGORIES, user scores
        clamped to 0-100
    """
    return [
        ComparisonData(
            category=category,
            user_score=int(max(0, min(100, round(score + offset)))),
            industry_average=average,
            top_performers=top,
        )
        for category, offset, average, top in COMPARISON_CATEGORIES
    ]


def _communication_feedback(metrics: InterviewMetrics) -> str:
    """Generate feedback on communication style."""
    clarity = metrics.communication_score
    confidence = metrics.confidence_level

    if clarity >= 80 and confidence >= 80:
        return "Clear, confident delivery with well-structured answers."
    elif clarity >= 65 and confidence >= 65:
        return "Good communication overall with appropriate confidence."
    elif clarity >= 50 or confidence >= 50:
        return "Communication is adequate; structure answers around problem, approach and outcome."
    else:
        return "Communication needs work; organize your thoughts and expand on each point."


def _bullets(items: list[str], empty: str) -> list[str]:
    return [f"- {item}" for item in items] if items else [f"- {empty}"]


def compose_feedback(
    metrics: InterviewMetrics,
    comparisons: list[ComparisonData],
    assessment: SkillAssessment,
    projects: list[Project],
) -> str:
    """
    Render the interview feedback report.

    Args:
        metrics: Session aggregate
        comparisons: Industry comparison rows
        assessment: Skill assessment for the project set
        projects: Projects the interview covered

    Returns:
        Plain-text report with a fixed section layout
    """
    lines = [
        "Interview Feedback",
        "==================",
        f"Overall Rating: {metrics.overall_rating.value}",
        metrics.overall_rating.description,
        "",
        f"Level: {assessment.level.value} ({assessment.years_estimate})",
        f"Projects Analyzed: {len(projects)}",
    ]
    lines.extend(f"  * {project.title}" for project in projects)

    lines += [
        "",
        "Scores",
        "------",
        f"Technical Depth: {metrics.technical_depth}",
        f"Communication: {metrics.communication_score}",
        f"Confidence: {metrics.confidence_level}",
        f"Average Response Time: {metrics.average_response_time:.1f}s",
        f"Words Per Minute: {metrics.words_per_minute}",
        _communication_feedback(metrics),
        "",
        "Strengths",
        "---------",
    ]
    lines += _bullets(assessment.strengths, "Keep building projects to surface clear strengths")

    lines += ["", "Recommendations", "---------------"]
    lines += _bullets(assessment.recommendations, "Focus on projects and technical depth")

    lines += ["", "Comparison to Industry", "----------------------"]
    if comparisons:
        lines += [
            f"- {row.category}: {row.user_score} vs average {row.industry_average} "
            f"(top performers {row.top_performers})"
            for row in comparisons
        ]
    else:
        lines.append("- No comparison data")

    logger.debug(f"Composed feedback report for {len(projects)} projects")
    return "\n".join(lines)

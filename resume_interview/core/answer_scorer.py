"""
Answer Scorer for resume_interview

Handles scoring and feedback generation for candidate answers.
Scoring is a deterministic function of the answer text; the optional
sentiment classifier only fills the sentiment and confidence fields.
"""

import logging
from collections import Counter
from typing import Any

from resume_interview.config.settings import IntegrationConfig
from resume_interview.core.inference import InferenceClient, InferenceError
from resume_interview.core.vocabulary import (
    EXAMPLE_PATTERN,
    METRIC_PATTERN,
    STOPWORDS,
    TECHNICAL_TERMS_PATTERN,
    TOKEN_PATTERN,
)
from resume_interview.models.evaluation import AnswerAnalysis, Complexity, Sentiment
from resume_interview.models.project import Project
from resume_interview.models.question import InterviewQuestion, QuestionCategory
from resume_interview.models.report import InterviewMetrics, OverallRating

logger = logging.getLogger(__name__)

MIN_SCORE = 20
MAX_SCORE = 95
KEYWORD_COUNT = 8

DEFAULT_CONFIDENCE = 50
EMPTY_ANSWER_CONFIDENCE = 30


def clamp(value: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, round(value))))


def extract_keywords(text: str, limit: int = KEYWORD_COUNT) -> list[str]:
    """Most frequent content words (length > 2), ties in first-seen order."""
    tokens = [
        t.lower() for t in TOKEN_PATTERN.findall(text)
        if len(t) > 2 and t.lower() not in STOPWORDS
    ]
    counts = Counter(tokens)
    first_seen: dict[str, int] = {}
    for index, token in enumerate(tokens):
        first_seen.setdefault(token, index)
    ranked = sorted(counts, key=lambda t: (-counts[t], first_seen[t]))
    return ranked[:limit]


def empty_answer_analysis() -> AnswerAnalysis:
    """Baseline returned for blank answers, whatever the question."""
    return AnswerAnalysis(
        score=MIN_SCORE,
        strengths=[],
        weaknesses=["No answer was provided"],
        suggestions=["Describe your role, the approach you took and the outcome"],
        technical_accuracy=0,
        communication_clarity=0,
        problem_solving_approach=0,
        industry_relevance=0,
        code_quality=None,
        sentiment=Sentiment.NEUTRAL,
        confidence=EMPTY_ANSWER_CONFIDENCE,
        keywords=[],
        response_time=0.0,
        complexity=Complexity.BASIC,
        word_count=0,
    )


class AnswerScorer:
    """
    Central evaluation component for interview answers.

    Responsibilities:
    - Score individual answers
    - Generate strengths / weaknesses / suggestions
    - Attach sentiment when a classifier is configured
    - Aggregate a session into InterviewMetrics
    """

    def __init__(
        self,
        config: IntegrationConfig | None = None,
        inference: InferenceClient | None = None,
    ):
        """
        Initialize the scorer.

        Args:
            config: Integration settings; defaults to no integrations
            inference: Client used for sentiment classification
        """
        self.config = config or IntegrationConfig()
        self.inference = inference

    # =========================================================================
    # ANSWER SCORING
    # =========================================================================

    async def score(
        self,
        question: InterviewQuestion,
        answer: str,
        project: Project | None = None,
    ) -> AnswerAnalysis:
        """
        Score a single answer.

        Never raises. Blank answers return the fixed baseline; otherwise
        sentiment is looked up (when configured) and the deterministic
        analysis runs.
        """
        logger.info(f"Analyzing answer for question: {question.id}")

        if not answer or not answer.strip():
            return empty_answer_analysis()

        sentiment, confidence = await self._sentiment(answer)
        return self.analyze(question, answer, project, sentiment, confidence)

    async def _sentiment(self, answer: str) -> tuple[Sentiment, int]:
        if self.inference is None or not self.config.sentiment_enabled:
            return Sentiment.NEUTRAL, DEFAULT_CONFIDENCE

        try:
            return await self.inference.classify_sentiment(answer)
        except InferenceError as e:
            logger.warning(f"Sentiment analysis failed, using neutral default: {e}")
        except Exception as e:
            logger.error(f"Unexpected sentiment error, using neutral default: {e}")
        return Sentiment.NEUTRAL, DEFAULT_CONFIDENCE

    def analyze(
        self,
        question: InterviewQuestion,
        answer: str,
        project: Project | None = None,
        sentiment: Sentiment = Sentiment.NEUTRAL,
        confidence: int = DEFAULT_CONFIDENCE,
    ) -> AnswerAnalysis:
        """Deterministic analysis of a non-blank answer."""
        signals = self._analyze_answer(answer, project)
        score = signals["score"]
        strengths, weaknesses, suggestions = self._generate_feedback(signals, question)

        is_technical = question.category == QuestionCategory.TECHNICAL

        return AnswerAnalysis(
            score=score,
            strengths=strengths,
            weaknesses=weaknesses,
            suggestions=suggestions,
            technical_accuracy=clamp(score + 5),
            communication_clarity=clamp(score),
            problem_solving_approach=clamp(score - 5),
            industry_relevance=clamp(score + 10),
            code_quality=clamp(score + 15) if is_technical else None,
            sentiment=sentiment,
            confidence=clamp(confidence),
            keywords=extract_keywords(answer),
            response_time=min(60.0, signals["word_count"] / 2),
            complexity=self._complexity(score),
            word_count=signals["word_count"],
            has_examples=signals["has_examples"],
            has_technical_terms=signals["has_technical_terms"],
            has_metrics=signals["has_metrics"],
        )

    def _analyze_answer(self, answer: str, project: Project | None) -> dict[str, Any]:
        """Analyze answer text for scoring signals."""
        clean = answer.strip()
        word_count = len(clean.split())

        has_examples = bool(EXAMPLE_PATTERN.search(clean))
        has_technical_terms = bool(TECHNICAL_TERMS_PATTERN.search(clean))
        has_metrics = bool(METRIC_PATTERN.search(clean))

        lowered = clean.lower()
        stack_mentions = []
        if project is not None:
            answer_tokens = {t.lower() for t in TOKEN_PATTERN.findall(clean)}
            stack_mentions = [
                tech for tech in project.technologies
                if tech in answer_tokens or (" " in tech and tech in lowered)
            ]

        base = min(50, word_count)
        score = base
        score += 15 if has_technical_terms else 0
        score += 10 if has_examples else 0
        score += 10 if has_metrics else 0

        return {
            "word_count": word_count,
            "has_examples": has_examples,
            "has_technical_terms": has_technical_terms,
            "has_metrics": has_metrics,
            "stack_mentions": stack_mentions,
            "score": clamp(score, MIN_SCORE, MAX_SCORE),
        }

    def _generate_feedback(
        self,
        signals: dict[str, Any],
        question: InterviewQuestion,
    ) -> tuple[list[str], list[str], list[str]]:
        """Threshold rules for strengths, weaknesses and suggestions."""
        strengths = []
        weaknesses = []
        suggestions = []

        # Positive feedback
        if signals["word_count"] > 80:
            strengths.append("Comprehensive detail and elaboration")
        if signals["has_technical_terms"]:
            strengths.append("Used relevant technical vocabulary")
        if signals["has_examples"]:
            strengths.append("Provided concrete examples")
        if signals["has_metrics"]:
            strengths.append("Included measurable outcomes")
        if signals["stack_mentions"]:
            strengths.append(
                "Tied the answer to the project's stack ("
                + ", ".join(signals["stack_mentions"][:3]) + ")"
            )

        # Areas for improvement
        if signals["word_count"] < 40:
            weaknesses.append("Answer is brief; expand with specifics")
        if not signals["has_technical_terms"] and question.category == QuestionCategory.TECHNICAL:
            weaknesses.append("Add more technical depth and terminology")
        if not signals["has_examples"]:
            weaknesses.append("Include specific examples or scenarios")
        if not signals["has_metrics"]:
            suggestions.append("Quantify results or performance if possible")

        return strengths, weaknesses, suggestions

    def _complexity(self, score: int) -> Complexity:
        if score > 70:
            return Complexity.ADVANCED
        elif score > 50:
            return Complexity.INTERMEDIATE
        else:
            return Complexity.BASIC


# =============================================================================
# SESSION AGGREGATION
# =============================================================================

def _rating(average_score: float) -> OverallRating:
    if average_score >= 80:
        return OverallRating.EXCELLENT
    elif average_score >= 65:
        return OverallRating.GOOD
    elif average_score >= 45:
        return OverallRating.FAIR
    else:
        return OverallRating.POOR


def summarize_session(
    analyses: list[AnswerAnalysis],
    durations: list[float] | None = None,
    pause_count: int = 0,
) -> InterviewMetrics:
    """
    Aggregate every answer analysis in a session.

    Args:
        analyses: One analysis per answered question
        durations: Measured seconds per answer; estimated response
            times are used when omitted
        pause_count: Pauses recorded by the caller

    Negative durations and pause counts are treated as zero.

    Returns:
        InterviewMetrics for the feedback report
    """
    durations = [max(0.0, float(d)) for d in durations] if durations else None
    pause_count = max(0, pause_count)

    if not analyses:
        return InterviewMetrics(
            total_duration=float(sum(durations or [])),
            pause_count=pause_count,
            overall_rating=OverallRating.POOR,
        )

    times = list(durations) if durations else [a.response_time for a in analyses]
    total_duration = float(sum(times))
    average_response_time = total_duration / len(times) if times else 0.0

    total_words = sum(a.word_count for a in analyses)
    words_per_minute = total_words / (total_duration / 60) if total_duration > 0 else 0.0

    count = len(analyses)
    confidence = sum(a.confidence for a in analyses) / count
    technical = sum(a.technical_accuracy for a in analyses) / count
    communication = sum(a.communication_clarity for a in analyses) / count
    average_score = sum(a.score for a in analyses) / count

    return InterviewMetrics(
        total_duration=total_duration,
        average_response_time=average_response_time,
        words_per_minute=round(words_per_minute, 1),
        pause_count=pause_count,
        confidence_level=clamp(confidence),
        technical_depth=clamp(technical),
        communication_score=clamp(communication),
        overall_rating=_rating(average_score),
    )

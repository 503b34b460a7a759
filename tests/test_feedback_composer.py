"""Tests for industry comparison and the feedback report."""

from __future__ import annotations

import pytest

from resume_interview.core.feedback_composer import compose_feedback, industry_comparison
from resume_interview.core.skill_aggregator import assess_skill
from resume_interview.models.report import InterviewMetrics, OverallRating


class TestIndustryComparison:
    def test_categories_and_offsets(self):
        rows = industry_comparison(60)

        assert [r.category for r in rows] == [
            "Overall", "Technical Accuracy", "Communication", "Problem Solving",
        ]
        assert [r.user_score for r in rows] == [60, 65, 60, 55]
        assert [r.industry_average for r in rows] == [65, 62, 68, 60]
        assert [r.top_performers for r in rows] == [90, 92, 88, 89]

    @pytest.mark.parametrize("score", [0, 2, 98, 100])
    def test_user_scores_are_clamped(self, score):
        for row in industry_comparison(score):
            assert 0 <= row.user_score <= 100

    def test_is_deterministic(self):
        assert industry_comparison(73) == industry_comparison(73)


class TestComposeFeedback:
    @pytest.fixture
    def report(self, chat_project):
        metrics = InterviewMetrics(
            total_duration=120.0,
            average_response_time=40.0,
            words_per_minute=95.5,
            confidence_level=72,
            technical_depth=81,
            communication_score=70,
            overall_rating=OverallRating.GOOD,
        )
        assessment = assess_skill([chat_project])
        return compose_feedback(metrics, industry_comparison(70), assessment, [chat_project])

    def test_sections_in_order(self, report):
        headings = [
            "Interview Feedback",
            "Overall Rating: Good",
            "Level: Junior",
            "Projects Analyzed: 1",
            "Scores",
            "Strengths",
            "Recommendations",
            "Comparison to Industry",
        ]
        positions = [report.index(h) for h in headings]
        assert positions == sorted(positions)

    def test_numbers_printed_as_received(self, report):
        assert "Technical Depth: 81" in report
        assert "Communication: 70" in report
        assert "Confidence: 72" in report
        assert "Average Response Time: 40.0s" in report
        assert "Words Per Minute: 95.5" in report

    def test_lists_projects_and_strengths(self, report):
        assert "  * Chat App" in report
        assert "- Experience with node" in report
        assert "- Add more projects to demonstrate range" in report

    def test_comparison_rows(self, report):
        assert "- Overall: 70 vs average 65 (top performers 90)" in report
        assert "- Problem Solving: 65 vs average 60 (top performers 89)" in report

    def test_empty_inputs(self):
        report = compose_feedback(InterviewMetrics(), [], assess_skill([]), [])
        assert "Projects Analyzed: 0" in report
        assert "- No comparison data" in report
        assert "Level: Junior (<1 year)" in report

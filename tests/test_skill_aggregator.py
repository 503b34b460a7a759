"""Tests for the seniority estimate."""

from __future__ import annotations

from resume_interview.core.skill_aggregator import assess_skill, project_complexity
from resume_interview.models.project import Project
from resume_interview.models.report import SkillLevel


def _project(technologies: list[str], achievements=(), role=None, description="A project description") -> Project:
    return Project(
        title="Sample Project",
        description=description,
        technologies=technologies,
        achievements=list(achievements),
        role=role,
    )


TECH_NAMES = [f"tech{i}" for i in range(25)]


class TestProjectComplexity:
    def test_minimal_project(self):
        assert project_complexity(_project(["python"])) == 1

    def test_every_factor(self):
        project = _project(
            TECH_NAMES[:6],
            achievements=["Reduced latency by 40%"],
            role="Senior engineer",
            description="x" * 250,
        )
        assert project_complexity(project) == 5

    def test_non_senior_role_does_not_count(self):
        assert project_complexity(_project(["python"], role="developer")) == 1


class TestAssessSkill:
    def test_empty_input(self):
        assessment = assess_skill([])
        assert assessment.level == SkillLevel.JUNIOR
        assert assessment.years_estimate == "<1 year"
        assert assessment.strengths == []
        assert assessment.recommendations[0] == "Add technical projects to your resume"

    def test_junior(self):
        assessment = assess_skill([_project(["python", "flask"])])
        assert assessment.level == SkillLevel.JUNIOR
        assert assessment.years_estimate == "0-2 years"

    def test_mid_level(self):
        projects = [
            _project(["react", "node", "postgresql"], achievements=["Built it"], role="lead developer"),
            _project(["django", "docker", "aws", "jenkins"], achievements=["Deployed it"]),
        ]
        assessment = assess_skill(projects)
        assert assessment.level == SkillLevel.MID_LEVEL
        assert assessment.years_estimate == "2-5 years"

    def test_senior(self):
        projects = [
            _project(TECH_NAMES[:6], achievements=["Built it"]),
            _project(TECH_NAMES[6:12], achievements=["Shipped it"]),
        ]
        assessment = assess_skill(projects)
        assert assessment.level == SkillLevel.SENIOR
        assert assessment.years_estimate == "5-8 years"

    def test_lead(self):
        project = _project(TECH_NAMES[:20], achievements=["Scaled it"], role="Senior engineer")
        assessment = assess_skill([project])
        assert assessment.level == SkillLevel.LEAD
        assert assessment.years_estimate == "8+ years"

    def test_breadth_without_depth_is_not_lead(self):
        assessment = assess_skill([_project(TECH_NAMES[:20])])
        assert assessment.level != SkillLevel.LEAD

    def test_top_technologies_by_frequency(self):
        projects = [
            _project(["python", "react"]),
            _project(["react", "docker"]),
        ]
        assessment = assess_skill(projects)
        assert assessment.strengths[:3] == [
            "Experience with react",
            "Experience with python",
            "Experience with docker",
        ]

    def test_at_most_five_technology_strengths(self):
        assessment = assess_skill([_project(TECH_NAMES[:9])])
        tech_strengths = [s for s in assessment.strengths if s.startswith("Experience with")]
        assert len(tech_strengths) == 5

    def test_single_project_recommendation(self):
        single = assess_skill([_project(["python"])])
        pair = assess_skill([_project(["python"]), _project(["java"])])
        assert "Add more projects to demonstrate range" in single.recommendations
        assert "Add more projects to demonstrate range" not in pair.recommendations

    def test_deterministic(self):
        projects = [_project(["python", "react"]), _project(["docker"])]
        assert assess_skill(projects) == assess_skill(projects)

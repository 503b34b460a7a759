"""Shared test fixtures."""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from resume_interview.config.settings import IntegrationConfig
from resume_interview.models.project import Project
from resume_interview.models.question import InterviewQuestion, QuestionCategory

CHAT_APP_SENTENCE = (
    "Built a real-time chat app using Node, React and MongoDB for 500 "
    "concurrent users, reduced latency by 40%"
)

COMPLETION_MODEL = "mistralai/Mistral-7B-Instruct-v0.1"
SENTIMENT_MODEL = "cardiffnlp/twitter-roberta-base-sentiment-latest"


@pytest.fixture
def chat_app_resume() -> str:
    return f"""John Doe
Software Engineer | john.doe@example.com

PROJECTS
• {CHAT_APP_SENTENCE}

EDUCATION
B.Tech in Computer Science, State University, 2020
"""


@pytest.fixture
def multi_project_resume() -> str:
    return """Jane Smith
Full Stack Developer

Technical Projects

E-Commerce Platform (Jan 2022 - Jun 2022)
Developed a full-stack store with React, Node and PostgreSQL as the lead developer. Implemented Stripe payments and reduced checkout time by 30%.

Task Tracker
Created a Django and Docker based task manager for small teams. Deployed it on AWS with automated Jenkins builds.

Skills: Python, JavaScript, React, Node, Docker

Education
B.Tech, Computer Science, GPA 3.8
"""


@pytest.fixture
def stacked_projects_resume() -> str:
    """Two titled projects with no blank line between them."""
    return """Alex Kim

PROJECTS
Chat App
- Built a messaging backend with Node and MongoDB
- Added Redis caching that reduced latency by 40%
Inventory Manager
- Developed an inventory tracker using Django and PostgreSQL
- Deployed it to AWS with Docker containers

EDUCATION
B.Tech in Computer Science, State University, 2020
"""


@pytest.fixture
def unstructured_resume() -> str:
    return """i have been working on many things over the years and enjoy it a lot.

worked on a react frontend and a node backend with a mongodb database for an internal dashboard, built the api layer and deployed it with docker.
"""


@pytest.fixture
def education_only_resume() -> str:
    return """EDUCATION
Bachelor of Technology in Computer Science from State University with CGPA 8.9

SKILLS
Python, Java, React, Node, Docker, Kubernetes, AWS and SQL tools for backend development work
"""


@pytest.fixture
def chat_project() -> Project:
    return Project(
        title="Chat App",
        description=CHAT_APP_SENTENCE,
        technologies=["node", "react", "mongodb"],
        achievements=[CHAT_APP_SENTENCE],
    )


@pytest.fixture
def technical_question() -> InterviewQuestion:
    return InterviewQuestion(
        id="chat-app-1",
        project_title="Chat App",
        question_text="Can you walk me through Chat App?",
        category=QuestionCategory.TECHNICAL,
        expected_points=["Problem statement", "Approach", "Tech choices"],
    )


@pytest.fixture
def behavioral_question() -> InterviewQuestion:
    return InterviewQuestion(
        id="chat-app-4",
        project_title="Chat App",
        question_text="What did you learn from Chat App?",
        category=QuestionCategory.BEHAVIORAL,
        expected_points=["Learnings"],
    )


@pytest.fixture
def hf_config() -> IntegrationConfig:
    return IntegrationConfig(
        hf_api_key="test-key",
        ai_service="huggingface",
        inference_base_url="https://hf.test",
    )


@pytest.fixture
def make_client() -> Callable[[Callable], httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by handler."""

    def _make(handler: Callable) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url="https://hf.test",
        )

    return _make


@pytest.fixture
def generation_reply() -> Callable[[object], httpx.Response]:
    """Wrap a JSON-serialisable payload as a text-generation reply."""

    def _reply(payload: object) -> httpx.Response:
        return httpx.Response(200, json=[{"generated_text": json.dumps(payload)}])

    return _reply


def request_prompt(request: httpx.Request) -> str:
    return json.loads(request.content)["inputs"]


@pytest.fixture
def read_prompt() -> Callable[[httpx.Request], str]:
    return request_prompt

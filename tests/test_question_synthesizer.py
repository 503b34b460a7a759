"""Tests for interview question generation."""

from __future__ import annotations

import asyncio

import httpx

from resume_interview.config.settings import IntegrationConfig
from resume_interview.core.inference import InferenceClient
from resume_interview.core.question_synthesizer import (
    QuestionSynthesizer,
    question_id,
    slugify,
)
from resume_interview.models.project import Project
from resume_interview.models.question import QuestionCategory


def _project(title: str, *technologies: str) -> Project:
    return Project(
        title=title,
        description=f"Description of {title}",
        technologies=list(technologies),
    )


LLM_QUESTIONS = [
    {"questionText": "How did you scale the socket layer?", "category": "technical",
     "expectedPoints": ["Horizontal scaling", "Sticky sessions"]},
    {"questionText": "Which bug took longest to fix?", "category": "Problem Solving",
     "expectedPoints": ["Debugging"]},
    {"question": "How were messages persisted?", "category": "system_design",
     "points": ["Schema"]},
    {"questionText": "How did you work with the designer?", "category": "behavioural"},
]


class TestSlugs:
    def test_slugify(self):
        assert slugify("Real-Time Chat App!") == "real-time-chat-app"

    def test_slugify_falls_back_for_symbols(self):
        assert slugify("***") == "project"

    def test_question_id(self):
        assert question_id("Chat App", 2) == "chat-app-2"


class TestLocalGeneration:
    async def test_four_questions_one_per_category(self, chat_project):
        questions = await QuestionSynthesizer().generate([chat_project])

        assert len(questions) == 4
        assert [q.category for q in questions] == [
            QuestionCategory.TECHNICAL,
            QuestionCategory.PROBLEM_SOLVING,
            QuestionCategory.ARCHITECTURE,
            QuestionCategory.BEHAVIORAL,
        ]
        assert [q.id for q in questions] == [f"chat-app-{i}" for i in range(1, 5)]
        for question in questions:
            assert "Chat App" in question.question_text
            assert "node, react, mongodb" in question.question_text
            assert question.project_title == "Chat App"
            assert question.expected_points

    async def test_no_technologies_placeholder(self):
        questions = await QuestionSynthesizer().generate([_project("Garden Planner")])
        assert "the technologies used" in questions[0].question_text

    def test_top_three_technologies_only(self):
        project = _project("Data Lake", "python", "kafka", "aws", "docker")
        question = QuestionSynthesizer().generate_locally(project)[0]
        assert "python, kafka, aws" in question.question_text
        assert "docker" not in question.question_text

    async def test_caps_at_three_projects(self):
        projects = [_project(f"Project Number {i}") for i in range(5)]
        questions = await QuestionSynthesizer().generate(projects)

        assert len(questions) == 12
        assert {q.project_title for q in questions} == {
            "Project Number 0", "Project Number 1", "Project Number 2",
        }

    async def test_grouped_in_input_order(self):
        projects = [_project("Alpha Service"), _project("Beta Service")]
        questions = await QuestionSynthesizer().generate(projects)
        titles = [q.project_title for q in questions]
        assert titles == ["Alpha Service"] * 4 + ["Beta Service"] * 4

    async def test_empty_input(self):
        assert await QuestionSynthesizer().generate([]) == []

    async def test_duplicate_titles_get_unique_ids(self):
        projects = [_project("Chat App"), _project("Chat App"), _project("chat app")]
        questions = await QuestionSynthesizer().generate(projects)

        ids = [q.id for q in questions]
        assert len(ids) == len(set(ids))
        assert ids[0] == "chat-app-1"
        assert ids[4] == "chat-app-2-1"
        assert ids[8] == "chat-app-3-1"

    async def test_local_service_never_calls_inference(self, chat_project, make_client):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500)

        config = IntegrationConfig(hf_api_key="test-key", ai_service="local")
        async with make_client(handler) as client:
            synthesizer = QuestionSynthesizer(config, InferenceClient(config, client))
            questions = await synthesizer.generate([chat_project])

        assert not synthesizer.enhancement_enabled
        assert len(questions) == 4
        assert calls == []


class TestEnhancedGeneration:
    async def test_uses_inference_reply(self, hf_config, chat_project, make_client, generation_reply):
        def handler(request: httpx.Request) -> httpx.Response:
            return generation_reply(LLM_QUESTIONS)

        async with make_client(handler) as client:
            synthesizer = QuestionSynthesizer(hf_config, InferenceClient(hf_config, client))
            questions = await synthesizer.generate([chat_project])

        assert [q.question_text for q in questions] == [
            "How did you scale the socket layer?",
            "Which bug took longest to fix?",
            "How were messages persisted?",
            "How did you work with the designer?",
        ]
        assert [q.category for q in questions] == [
            QuestionCategory.TECHNICAL,
            QuestionCategory.PROBLEM_SOLVING,
            QuestionCategory.ARCHITECTURE,
            QuestionCategory.BEHAVIORAL,
        ]
        assert questions[0].expected_points == ["Horizontal scaling", "Sticky sessions"]
        assert questions[2].expected_points == ["Schema"]
        assert questions[3].expected_points == []
        assert [q.id for q in questions] == [f"chat-app-{i}" for i in range(1, 5)]

    async def test_prompt_describes_project(self, hf_config, chat_project, make_client, generation_reply, read_prompt):
        prompts = []

        def handler(request: httpx.Request) -> httpx.Response:
            prompts.append(read_prompt(request))
            return generation_reply(LLM_QUESTIONS)

        async with make_client(handler) as client:
            synthesizer = QuestionSynthesizer(hf_config, InferenceClient(hf_config, client))
            await synthesizer.generate([chat_project])

        assert "Project: Chat App" in prompts[0]
        assert "Technologies: node, react, mongodb" in prompts[0]

    async def test_short_reply_uses_templates(self, hf_config, chat_project, make_client, generation_reply):
        def handler(request: httpx.Request) -> httpx.Response:
            return generation_reply(LLM_QUESTIONS[:2])

        async with make_client(handler) as client:
            synthesizer = QuestionSynthesizer(hf_config, InferenceClient(hf_config, client))
            questions = await synthesizer.generate([chat_project])

        local = synthesizer.generate_locally(chat_project)
        assert questions == local

    async def test_failure_uses_templates(self, hf_config, chat_project, make_client):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="internal error")

        async with make_client(handler) as client:
            synthesizer = QuestionSynthesizer(hf_config, InferenceClient(hf_config, client))
            questions = await synthesizer.generate([chat_project])

        assert len(questions) == 4
        assert questions[0].question_text.startswith("Can you walk me through Chat App?")

    async def test_one_failure_does_not_affect_other_projects(self, hf_config, make_client, generation_reply, read_prompt):
        def handler(request: httpx.Request) -> httpx.Response:
            if "Project: Broken Service" in read_prompt(request):
                return httpx.Response(502)
            return generation_reply(LLM_QUESTIONS)

        projects = [_project("Broken Service"), _project("Working Service")]
        async with make_client(handler) as client:
            synthesizer = QuestionSynthesizer(hf_config, InferenceClient(hf_config, client))
            questions = await synthesizer.generate(projects)

        assert questions[0].question_text.startswith("Can you walk me through Broken Service?")
        assert questions[4].question_text == "How did you scale the socket layer?"

    async def test_order_preserved_when_replies_arrive_out_of_order(self, make_client, generation_reply, read_prompt):
        config = IntegrationConfig(
            hf_api_key="test-key",
            ai_service="huggingface",
            inference_base_url="https://hf.test",
            max_concurrency=3,
        )
        delays = {"Slow Service": 0.05, "Medium Service": 0.02, "Fast Service": 0.0}

        async def handler(request: httpx.Request) -> httpx.Response:
            prompt = read_prompt(request)
            for title, delay in delays.items():
                if f"Project: {title}" in prompt:
                    await asyncio.sleep(delay)
            return generation_reply(LLM_QUESTIONS)

        projects = [_project(title) for title in delays]
        async with make_client(handler) as client:
            synthesizer = QuestionSynthesizer(config, InferenceClient(config, client))
            questions = await synthesizer.generate(projects)

        assert [q.project_title for q in questions[::4]] == list(delays)

    async def test_concurrency_is_bounded(self, make_client, generation_reply):
        config = IntegrationConfig(
            hf_api_key="test-key",
            ai_service="huggingface",
            inference_base_url="https://hf.test",
            max_concurrency=1,
        )
        active = 0
        peak = 0

        async def handler(request: httpx.Request) -> httpx.Response:
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.01)
            active -= 1
            return generation_reply(LLM_QUESTIONS)

        projects = [_project(f"Service Number {i}") for i in range(3)]
        async with make_client(handler) as client:
            synthesizer = QuestionSynthesizer(config, InferenceClient(config, client))
            await synthesizer.generate(projects)

        assert peak == 1

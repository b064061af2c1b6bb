"""Shared test fixtures."""

from __future__ import annotations

import base64
from unittest.mock import AsyncMock

import pytest

from resume_insights.clients.llm_client import LLMClient, LLMResponse
from resume_insights.storage.record_store import RecordStore


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
jane@example.com | +1 555 0100 | linkedin.com/in/janedoe

Experience:
- Acme Cloud (2020 - present) - Senior Backend Engineer
  - Built Go services handling 50k requests/second
  - Led migration from a monolith to event-driven microservices on Kafka

- Initech (2017 - 2020) - Backend Engineer
  - Python/Django REST APIs, PostgreSQL tuning

Education:
- BS Computer Science, State University (2013 - 2017)

Skills: Go, Python, Kafka, PostgreSQL, Kubernetes, AWS
"""


@pytest.fixture
def sample_jd_text() -> str:
    return """Senior Backend Engineer (5+ years)

We are looking for an engineer to design and operate distributed systems.

Requirements:
- 5+ years building backend services in Go or Java
- Experience with Kafka or other message queues
- Kubernetes and AWS in production
"""


@pytest.fixture
def text_data_uri(sample_resume_text) -> str:
    encoded = base64.b64encode(sample_resume_text.encode("utf-8")).decode("ascii")
    return f"data:text/plain;base64,{encoded}"


@pytest.fixture
def entities_json() -> dict:
    return {
        "skills": ["Go", "Python", "Kafka"],
        "experience": ["Senior Backend Engineer, Acme Cloud (2020 - present)"],
        "education": ["BS Computer Science, State University"],
    }


@pytest.fixture
def scoring_json() -> dict:
    return {
        "fitScore": 0.82,
        "justification": "Strong Go and Kafka background matches the role.",
        "suggestedRoles": ["Backend Engineer", "Platform Engineer", "Site Reliability Engineer"],
        "improvementSuggestions": ["Quantify Kubernetes experience"],
    }


@pytest.fixture
def generation_form() -> dict:
    return {
        "fullName": "Jane Doe",
        "contactInfo": "jane@example.com",
        "skills": "Go, distributed systems",
        "experience": "5 years backend",
        "education": "BS CS",
        "tone": "technical",
    }


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value={})
    return client


@pytest.fixture
def record_store(tmp_path) -> RecordStore:
    return RecordStore(db_path=tmp_path / "records.db")

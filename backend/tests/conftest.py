import asyncio
import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure backend package is importable
backend_root = Path(__file__).resolve().parents[1]
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))


SAMPLE_RESUME_MD = """# JANE DOE
jane@example.com | (555) 010-0000 | Boston, MA

## PROFESSIONAL SUMMARY
Backend engineer with five years of Python and Go experience.

## EDUCATION
MIT, 2020
BS Computer Science

## TECHNICAL SKILLS
Languages: Python, Go, SQL

## PROFESSIONAL EXPERIENCE
Acme Corp, Remote | 2020 - Present
Software Engineer
- Built billing APIs
"""

TAILORED_RESUME = {
    "header": {"name": "Jane Doe", "contactLine": "jane@example.com | (555) 010-0000"},
    "summary": "Backend engineer focused on distributed systems.",
    "education": [{"institution": "MIT", "dates": "2020", "degree": "BS CS"}],
    "skills": [
        {"label": "Languages", "items": ["Go", "Python", "SQL"]},
        {"label": "Infrastructure", "items": ["Kubernetes", "Kafka"]},
    ],
    "experience": [
        {
            "company": "Acme Corp",
            "location": "Remote",
            "dates": "2020 - Present",
            "title": "Software Engineer",
            "bullets": ["Built billing APIs in Go", "Cut p99 latency by 40%"],
        },
        {
            "company": "Initech",
            "location": "Austin, TX",
            "dates": "2018 - 2020",
            "title": "Backend Intern",
            "bullets": ["Maintained job queue"],
        },
    ],
    "academicExperience": [
        {"title": "Raft KV Store", "tools": "Go, gRPC", "dates": "2019", "bullets": ["Implemented leader election"]},
        {"title": "Compiler Project", "tools": "", "dates": "2018", "bullets": []},
    ],
}


def output_payload(text):
    """Responses API body carrying ``text`` as the only output_text entry."""
    return {"output": [{"content": [{"type": "output_text", "text": text}]}]}


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("response body is not JSON")
        return self._payload


class FakeUpstream:
    """Scripted stand-in for the generation service."""

    def __init__(self):
        self.response = FakeResponse(payload=output_payload(json.dumps(TAILORED_RESUME)))
        self.error = None
        self.delay = 0.0
        self.calls = []
        self.cancelled = False
        self.client_kwargs = None


@pytest.fixture
def sample_resume():
    return json.loads(json.dumps(TAILORED_RESUME))


@pytest.fixture
def resume_file(tmp_path):
    path = tmp_path / "original-resume.md"
    path.write_text(SAMPLE_RESUME_MD, encoding="utf-8")
    return path


@pytest.fixture
def settings_env(resume_file, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("RESUME_PATH", str(resume_file))
    monkeypatch.setenv("CORS_ORIGINS", "*")
    for name in ("OPENAI_BASE_URL", "OPENAI_MODEL", "GENERATION_TIMEOUT_SECONDS", "STRICT_RESUME_SCHEMA"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def upstream(monkeypatch):
    """Replace httpx.AsyncClient used by the generator so no network is touched."""
    from tailor_app import generator

    fake = FakeUpstream()

    class FakeAsyncClient:
        def __init__(self, *args, **kwargs):
            fake.client_kwargs = kwargs

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def post(self, url, json=None, headers=None):
            fake.calls.append({"url": url, "json": json, "headers": headers})
            if fake.delay:
                try:
                    await asyncio.sleep(fake.delay)
                except asyncio.CancelledError:
                    fake.cancelled = True
                    raise
            if fake.error is not None:
                raise fake.error
            return fake.response

    monkeypatch.setattr(generator.httpx, "AsyncClient", FakeAsyncClient)
    return fake


@pytest.fixture
def client(settings_env):
    """FastAPI TestClient with env pointing at a temporary base resume."""
    from tailor_app.main import app

    return TestClient(app)

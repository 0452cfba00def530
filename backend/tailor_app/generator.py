"""
Resume generation against the OpenAI Responses API.
Loads the base resume, builds the schema-constrained request and turns the
model output back into a resume object.
"""
import asyncio
import json
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError as SchemaValidationError

from .config import Settings
from .errors import (
    ConfigurationError,
    GenerationTimeoutError,
    MalformedOutputError,
    UpstreamError,
    ValidationError,
)
from .prompts import build_prompt, build_request_payload
from .resume_source import extract_education_section, load_resume_text
from .schemas import TailoredResume

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant: {name}")


def extract_output_text(payload: Any) -> str:
    """Join the ``output_text`` entries of the first output item."""
    try:
        content = payload["output"][0]["content"] or []
    except (KeyError, IndexError, TypeError):
        return ""
    if not isinstance(content, list):
        return ""
    texts = [
        item["text"]
        for item in content
        if isinstance(item, dict) and item.get("type") == "output_text" and item.get("text")
    ]
    return "\n".join(str(t) for t in texts).strip()


class ResumeGenerator:
    """Single-attempt, deadline-bounded tailoring call."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def endpoint(self) -> str:
        return f"{self.settings.openai_base_url.rstrip('/')}/responses"

    async def generate(self, job_description: Optional[str]) -> Any:
        if not self.settings.openai_api_key:
            raise ConfigurationError("Missing OPENAI_API_KEY.")
        job_description = (job_description or "").strip()
        if not job_description:
            raise ValidationError("Job description is required.")

        resume_text = await asyncio.to_thread(load_resume_text, self.settings.resume_path)
        education = extract_education_section(resume_text)
        if not education:
            logger.info(f"No EDUCATION section found in {self.settings.resume_path}")
        prompt = build_prompt(resume_text, education)
        payload = build_request_payload(self.settings.model, prompt, job_description)

        logger.info(f"Requesting tailored resume from {self.endpoint} (model={self.settings.model})")
        data = await self._post(payload)
        text = extract_output_text(data)
        return self._parse(text)

    async def _post(self, payload: Dict[str, Any]) -> Any:
        headers = {
            "Authorization": f"Bearer {self.settings.openai_api_key}",
            "Content-Type": "application/json",
        }
        timeout = self.settings.request_timeout
        try:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
                # wait_for cancels the in-flight request once the deadline passes
                resp = await asyncio.wait_for(
                    client.post(self.endpoint, json=payload, headers=headers),
                    timeout=timeout,
                )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(f"Generation request timed out after {timeout}s")
            raise GenerationTimeoutError("Generation request timed out.") from e
        except httpx.HTTPError as e:
            logger.warning(f"Generation request failed: {e}")
            raise UpstreamError("Generation request failed.") from e

        if not 200 <= resp.status_code < 300:
            logger.warning(f"Generation service returned {resp.status_code}")
            raise UpstreamError(
                f"Generation service error: {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            return resp.json()
        except ValueError:
            # Treated like a response with no output text
            return {}

    def _parse(self, text: str) -> Any:
        try:
            parsed = json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            logger.warning(f"Model returned invalid JSON ({len(text)} chars)")
            raise MalformedOutputError("Model returned invalid JSON.", raw=text) from e

        if self.settings.strict_schema:
            try:
                TailoredResume.model_validate(parsed)
            except SchemaValidationError as e:
                logger.warning(f"Model output does not match resume schema: {e.error_count()} error(s)")
                raise MalformedOutputError("Model returned JSON that does not match the resume schema.", raw=text) from e

        logger.info("Tailored resume generated")
        return parsed

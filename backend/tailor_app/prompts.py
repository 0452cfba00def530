"""Prompt and request body for the schema-constrained resume generation call."""
from typing import Any, Dict

from .schemas import SCHEMA_NAME, TAILORED_RESUME_SCHEMA

INSTRUCTIONS = [
    "You are a resume assistant.",
    "Rewrite the resume to tailor it to the job description.",
    "Only change content that improves fit; leave other content as-is.",
    "Education must remain unchanged and must be included verbatim.",
    "Use only the same section headings and structure already present in the original resume; do not add new sections.",
    "Do not invent or embellish experience, skills, tools, dates, or outcomes. Be truthful to the original resume and only adjust wording to better match the job description.",
    "If a detail is missing (for example, a LinkedIn URL), leave it blank.",
    "Target a single-page resume by keeping content concise.",
    "Output must match the requested JSON schema exactly.",
    "Map sections: Professional Summary -> summary, Education -> education, Technical Skills -> skills, Professional Experience -> experience, Academic Experience -> academicExperience.",
    "Return JSON only.",
]


def build_prompt(resume_text: str, education: str) -> str:
    return "\n".join([
        *INSTRUCTIONS,
        "",
        "Original resume:",
        resume_text,
        "",
        "Education section to keep verbatim:",
        education,
    ])


def build_generation_input(prompt: str, job_description: str) -> str:
    # Job description always goes last
    return f"{prompt}\n\nJob Description:\n{job_description}"


def build_request_payload(model: str, prompt: str, job_description: str) -> Dict[str, Any]:
    return {
        "model": model,
        "input": build_generation_input(prompt, job_description),
        "text": {
            "format": {
                "name": SCHEMA_NAME,
                "type": "json_schema",
                "schema": TAILORED_RESUME_SCHEMA,
            },
        },
    }

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class _Closed(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ResumeHeader(_Closed):
    name: str
    contactLine: str


class EducationEntry(_Closed):
    institution: str
    dates: str
    degree: str


class SkillGroup(_Closed):
    label: str
    items: List[str]


class ExperienceEntry(_Closed):
    company: str
    location: str
    dates: str
    title: str
    bullets: List[str]


class AcademicEntry(_Closed):
    title: str
    tools: str
    dates: str
    bullets: List[str]


class TailoredResume(_Closed):
    header: ResumeHeader
    summary: str
    education: List[EducationEntry]
    skills: List[SkillGroup]
    experience: List[ExperienceEntry]
    academicExperience: List[AcademicEntry]


# Request/response bodies
class GenerateRequest(BaseModel):
    jobDescription: Optional[str] = None


class GenerateResponse(BaseModel):
    resume: Any


class RenderRequest(BaseModel):
    resume: Optional[Any] = None


class ErrorOut(BaseModel):
    error: str
    raw: Optional[str] = None


# JSON Schema sent to the generation service. Inline literal: no $defs, no titles.
_STRING = {"type": "string"}
_STRING_LIST = {"type": "array", "items": {"type": "string"}}


def _closed_object(properties: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "object",
        "additionalProperties": False,
        "required": list(properties),
        "properties": properties,
    }


def _array_of(properties: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "array", "items": _closed_object(properties)}


TAILORED_RESUME_SCHEMA: Dict[str, Any] = _closed_object({
    "header": _closed_object({"name": _STRING, "contactLine": _STRING}),
    "summary": _STRING,
    "education": _array_of({"institution": _STRING, "dates": _STRING, "degree": _STRING}),
    "skills": _array_of({"label": _STRING, "items": _STRING_LIST}),
    "experience": _array_of({
        "company": _STRING,
        "location": _STRING,
        "dates": _STRING,
        "title": _STRING,
        "bullets": _STRING_LIST,
    }),
    "academicExperience": _array_of({
        "title": _STRING,
        "tools": _STRING,
        "dates": _STRING,
        "bullets": _STRING_LIST,
    }),
})

SCHEMA_NAME = "tailored_resume"

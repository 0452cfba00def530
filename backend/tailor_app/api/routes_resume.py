import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from ..config import Settings, get_settings
from ..generator import ResumeGenerator
from ..renderer import render_resume
from ..schemas import ErrorOut, GenerateRequest, GenerateResponse, RenderRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["resume"])

DOWNLOAD_FILENAME = "tailored-resume.html"


def get_generator(settings: Settings = Depends(get_settings)) -> ResumeGenerator:
    return ResumeGenerator(settings)


@router.post(
    "/generate-resume",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}, 502: {"model": ErrorOut}, 504: {"model": ErrorOut}},
)
async def generate_resume(
    body: Optional[GenerateRequest] = None,
    generator: ResumeGenerator = Depends(get_generator),
):
    """Tailor the configured base resume to the posted job description."""
    resume = await generator.generate(body.jobDescription if body else None)
    return GenerateResponse(resume=resume)


@router.post(
    "/render-resume",
    response_class=HTMLResponse,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def render_resume_endpoint(body: Optional[RenderRequest] = None):
    """Render a tailored resume JSON into a downloadable HTML page."""
    html = render_resume(body.resume if body else None)
    return HTMLResponse(
        html,
        headers={"Content-Disposition": f"attachment; filename={DOWNLOAD_FILENAME}"},
    )

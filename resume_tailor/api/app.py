"""HTTP API for the presentation layer.

Two JSON endpoints:
- POST /api/scrape-job-posting  {"url"} -> {"text"}
- POST /api/tailor-resume       {"resumeText", "jobPosting", "currentExperiences"}
                                -> {"success": true, "tailoredResume"}

Failures answer with {"error": <message>} and a status reflecting the failure
category.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from resume_tailor import __version__
from resume_tailor.errors import (
    AcquisitionError,
    GenerationError,
    InvalidInputError,
    ValidationError,
)
from resume_tailor.intake.service import SourceAcquirer
from resume_tailor.tailoring.service import TailoringService

logger = logging.getLogger(__name__)


class ScrapeJobPostingRequest(BaseModel):
    url: str = ""


class ScrapeJobPostingResponse(BaseModel):
    text: str


class TailorResumeRequest(BaseModel):
    resume_text: str = Field(default="", alias="resumeText")
    job_posting: str = Field(default="", alias="jobPosting")
    current_experiences: str = Field(default="", alias="currentExperiences")


class TailorResumeResponse(BaseModel):
    success: bool = True
    tailored_resume: str = Field(..., serialization_alias="tailoredResume")


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def create_app(
    acquirer: SourceAcquirer | None = None,
    tailoring_service: TailoringService | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        acquirer: Source acquirer used for URL fetches.
        tailoring_service: Service used for tailoring runs.
    """
    app = FastAPI(title="Resume Tailor", version=__version__)

    # Services are built on first use and then reused.
    def get_acquirer() -> SourceAcquirer:
        nonlocal acquirer
        if acquirer is None:
            acquirer = SourceAcquirer()
        return acquirer

    def get_tailoring_service() -> TailoringService:
        nonlocal tailoring_service
        if tailoring_service is None:
            tailoring_service = TailoringService()
        return tailoring_service

    @app.post("/api/scrape-job-posting", response_model=ScrapeJobPostingResponse)
    async def scrape_job_posting(req: ScrapeJobPostingRequest):
        if not req.url.strip():
            return _error("URL is required", 400)

        try:
            text = await get_acquirer().fetch_job_posting(req.url)
        except InvalidInputError as e:
            return _error(e.message, 400)
        except AcquisitionError as e:
            return _error(e.message, 502)

        return ScrapeJobPostingResponse(text=text)

    @app.post("/api/tailor-resume")
    async def tailor_resume(req: TailorResumeRequest):
        if not (
            req.resume_text.strip()
            and req.job_posting.strip()
            and req.current_experiences.strip()
        ):
            return _error("Missing required fields", 400)

        try:
            result = await get_tailoring_service().tailor_composed(
                req.resume_text, req.job_posting, req.current_experiences
            )
        except ValidationError as e:
            return _error(e.message, 400)
        except GenerationError as e:
            return _error(e.message, 500)

        return TailorResumeResponse(tailored_resume=result.html).model_dump(
            by_alias=True
        )

    return app

"""HTTP API exposing job posting scraping and resume tailoring."""

from resume_tailor.api.app import create_app

__all__ = ["create_app"]

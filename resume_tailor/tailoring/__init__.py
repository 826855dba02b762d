"""Resume tailoring module.

This module provides functionality for:
- Modelling the new experience entry and the tailoring request/result
- Composing the tailoring prompt with its layout and content constraints
- Calling the LLM and packaging the generated HTML

Main Entry Point:
    TailoringService - Orchestrates a tailoring run

Example:
    from resume_tailor.tailoring import ExperienceRecord, TailoringService

    service = TailoringService()
    result = await service.tailor(resume_text, job_text, ExperienceRecord(...))
    print(result.html)
"""

from resume_tailor.tailoring.config import TailoringConfig, get_tailoring_config
from resume_tailor.tailoring.experience import load_experience
from resume_tailor.tailoring.llm import TailoringLLM
from resume_tailor.tailoring.models import (
    ExperienceRecord,
    TailoringRequest,
    TailoringResult,
)
from resume_tailor.tailoring.prompts import PromptComposer
from resume_tailor.tailoring.service import TailoringService

__all__ = [
    # Main service
    "TailoringService",
    # Configuration
    "TailoringConfig",
    "get_tailoring_config",
    # Collaborators
    "PromptComposer",
    "TailoringLLM",
    "load_experience",
    # Models
    "ExperienceRecord",
    "TailoringRequest",
    "TailoringResult",
]

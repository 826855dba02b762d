"""Main Tailoring Service.

Orchestrates a tailoring run from canonical resume and job posting text plus
an experience record to a finished TailoringResult.
"""

from __future__ import annotations

import logging

from resume_tailor.errors import GenerationError, ValidationError
from resume_tailor.tailoring.config import TailoringConfig, get_tailoring_config
from resume_tailor.tailoring.llm import TailoringLLM
from resume_tailor.tailoring.models import (
    ExperienceRecord,
    TailoringRequest,
    TailoringResult,
)
from resume_tailor.tailoring.prompts import PromptComposer

logger = logging.getLogger(__name__)


class TailoringService:
    """Main service for resume tailoring.

    Runs the pipeline:
    1. Validate the three inputs (before any external call)
    2. Render the experience record into the composed experience block
    3. Compose the tailoring prompt
    4. Call the LLM once, with a bounded output length
    5. Package the generated HTML as a TailoringResult

    Persisting the result is left to the caller (see HistoryStore).
    """

    def __init__(
        self,
        config: TailoringConfig | None = None,
        llm: TailoringLLM | None = None,
        composer: PromptComposer | None = None,
    ):
        """Initialize the tailoring service.

        Args:
            config: Optional TailoringConfig. Uses global config if not provided.
            llm: Optional LLM client (defaults to one built from config).
            composer: Optional prompt composer (defaults to one built from config).
        """
        self.config = config or get_tailoring_config()
        self.llm = llm or TailoringLLM(config=self.config)
        self.composer = composer or PromptComposer.from_config(self.config)

    async def tailor(
        self,
        resume_text: str,
        job_posting_text: str,
        experience: ExperienceRecord,
    ) -> TailoringResult:
        """Tailor a resume to a job posting, adding a new experience entry.

        Args:
            resume_text: Canonical text of the existing resume.
            job_posting_text: Canonical text of the job posting.
            experience: The new experience entry to insert first.

        Returns:
            The TailoringResult for this run.

        Raises:
            ValidationError: If any input is empty.
            GenerationError: If the LLM call fails or returns no text.
        """
        missing = []
        if not (resume_text or "").strip():
            missing.append("resume")
        if not (job_posting_text or "").strip():
            missing.append("job posting")
        if experience is None or experience.is_empty():
            missing.append("experiences")
        if missing:
            raise ValidationError(
                "Please fill in all fields: resume, job posting, and experiences "
                f"(missing: {', '.join(missing)})"
            )

        return await self.tailor_composed(
            resume_text, job_posting_text, experience.render()
        )

    async def tailor_composed(
        self,
        resume_text: str,
        job_posting_text: str,
        experience_text: str,
    ) -> TailoringResult:
        """Tailor using an already composed experience block.

        Raises:
            ValidationError: If any input is empty.
            GenerationError: If the LLM call fails or returns no text.
        """
        request = TailoringRequest.build(resume_text, job_posting_text, experience_text)
        prompt = self.composer.compose(request)

        label = job_posting_text.split("\n", 1)[0][:60]
        logger.info(f"Tailoring resume for: {label}")

        try:
            html = await self.llm.generate_text(
                prompt, max_tokens=self.config.max_output_tokens
            )
        except GenerationError as e:
            logger.error(f"Tailoring failed: {e}")
            raise

        result = TailoringResult.create(job_posting_text, html)
        logger.info(f"Tailoring completed ({len(html)} characters, id={result.id})")
        return result

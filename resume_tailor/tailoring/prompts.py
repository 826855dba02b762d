"""Prompt composition for resume tailoring.

The composed prompt is the only place the output constraints live: one page,
semantic HTML, the source resume's density, the new entry placed first, and
nothing but the document itself in the reply.
"""

from __future__ import annotations

from resume_tailor.errors import ValidationError
from resume_tailor.tailoring.config import TailoringConfig
from resume_tailor.tailoring.models import TailoringRequest

DEFAULT_REFERENCE_ENTRY = "the most recent existing role"
DEFAULT_CONDENSABLE_ENTRY = "the longest existing role"

TAILORING_PROMPT_TEMPLATE = """You are a professional resume writer and ATS (Applicant Tracking System) optimization expert.

Your task is to tailor the provided resume to match the job posting, while ensuring it passes ATS screening and optimizing for space.

CRITICAL INSTRUCTIONS FOR THIS JOB:

STYLING & FORMATTING:
1. The output resume MUST be formatted to fit on a SINGLE PAGE when printed as PDF
2. ANALYZE THE ORIGINAL RESUME'S VISUAL STRUCTURE:
   - Minimal line spacing between entries
   - Minimal margins and padding
   - Compact bullet formatting
   - Tight spacing between sections
   - Font sizes and bold/underline patterns
   - Name/contact info at top
   - Section headers style
   - Job title format with dates aligned right
   - Main bullet and sub-bullet indentation patterns
3. REPLICATE THIS EXACT FORMATTING in the output:
   - Use MINIMAL spacing/margins to ensure 1-page fit
   - Match all bold, underlines, and text styling
   - Keep the same visual structure and hierarchy
   - Do NOT add extra spacing - be as compact as the original
4. NEW EXPERIENCE FORMAT: Structure it EXACTLY like {reference_entry}:
   - Role title line: "{role_line}" with dates ({period}) aligned right
   - One description line below the title summarizing the role
   - Exactly {bullet_count} main bullets, each with optional sub-bullets underneath
   - Match indentation, spacing, and bolding patterns exactly

CONTENT OPTIMIZATION:
1. ANALYZE THE JOB POSTING: Identify the core required skills, technologies, and qualifications needed
2. NEW EXPERIENCE SECTION:
   - Insert it as the FIRST entry of the work experience section (before all other roles)
   - Build it only from the current experiences provided below
   - Naturally incorporate job posting keywords into its bullets
   - Give it a length similar to {reference_entry}
3. EXISTING EXPERIENCES:
   - Keep every existing role, in its original chronological order (most recent first)
   - For {condensable_entry}: KEEP all main bullet headers, but remove the sub-bullets least relevant to the job posting to free up space for the new experience
   - Do not invent employers, titles, dates, or accomplishments
4. Education and Skills sections: Keep complete but concise, ensure keywords from job posting are present if applicable

OUTPUT REQUIREMENTS:
- Produce a complete, self-contained HTML document with inline styles matching the original resume's appearance
- Use only semantic structural HTML tags (<h1>, <h2>, <h3>, <p>, <ul>, <li>, <strong>, <em>)
- Do NOT use tables, columns, images, graphics, headers/footers, scripts, or external stylesheets, fonts, or links to external resources
- Maintain chronological order for work experience (most recent first)
- CRITICAL - ONE PAGE CONSTRAINT: Resume MUST fit on exactly 1 page when printed as PDF
  * Use minimal line spacing (line-height: 1.1 or lower)
  * Use minimal margins/padding between sections
  * Use minimal bullet indentation
  * Remove ALL unnecessary whitespace
  * Condense bullet text if needed to fit
  * If content exceeds 1 page, further condense sub-bullets of {condensable_entry} or shorten descriptions
- Match the exact spacing, indentation, and formatting of the original resume

ORIGINAL RESUME:
{resume_text}

JOB POSTING:
{job_posting_text}

CURRENT EXPERIENCES TO INCORPORATE (USE TO CREATE THE NEW EXPERIENCE ENTRY):
{experience_text}

OPTIMIZATION STRATEGY:
- New experience: {bullet_count} strong, job-specific main bullets at the VERY TOP of work experience
- {condensable_entry}: Keep all main bullet headers; trim only sub-bullets that don't match the job requirements
- ONE-PAGE CONSTRAINT: Resume must fit on a single page PDF. Be aggressive with condensing where needed (shorter sub-bullets, minimal spacing)
- Visual style: Match the original resume's formatting, spacing, typography, and overall appearance

Produce the tailored resume in HTML that LOOKS IDENTICAL to the original resume while incorporating the job-specific tailoring.

IMPORTANT: Do NOT ask any clarifying questions. Do NOT request confirmation. Do NOT suggest alternatives. Do NOT refuse. Reply with the complete HTML resume only, with no preamble, explanation, or closing remarks."""


def _experience_field(experience_text: str, label: str) -> str:
    """Read a ``Label: value`` header line from a composed experience block."""
    prefix = f"{label}:"
    for line in experience_text.splitlines():
        if line.startswith(prefix):
            return line[len(prefix) :].strip()
    return ""


class PromptComposer:
    """Builds the tailoring instruction document from a TailoringRequest.

    Pure and deterministic: identical requests and settings always produce the
    identical prompt.
    """

    def __init__(
        self,
        new_entry_bullets: int = 3,
        reference_entry: str | None = None,
        condensable_entry: str | None = None,
    ) -> None:
        self.new_entry_bullets = new_entry_bullets
        self.reference_entry = reference_entry or DEFAULT_REFERENCE_ENTRY
        self.condensable_entry = condensable_entry or DEFAULT_CONDENSABLE_ENTRY

    @classmethod
    def from_config(cls, config: TailoringConfig) -> PromptComposer:
        return cls(
            new_entry_bullets=config.new_entry_bullets,
            reference_entry=config.reference_entry,
            condensable_entry=config.condensable_entry,
        )

    def compose(self, request: TailoringRequest) -> str:
        """Compose the prompt for a request.

        Args:
            request: A complete tailoring request.

        Returns:
            The instruction document, to be sent verbatim.

        Raises:
            ValidationError: If any request field is blank.
        """
        missing = request.missing_fields()
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        return TAILORING_PROMPT_TEMPLATE.format(
            reference_entry=self.reference_entry,
            condensable_entry=self.condensable_entry,
            bullet_count=self.new_entry_bullets,
            role_line=self._role_line(request.experience_text),
            period=_experience_field(request.experience_text, "Time") or "as given",
            resume_text=request.resume_text,
            job_posting_text=request.job_posting_text,
            experience_text=request.experience_text,
        )

    def _role_line(self, experience_text: str) -> str:
        parts = [
            _experience_field(experience_text, "Job Title"),
            _experience_field(experience_text, "Company"),
            _experience_field(experience_text, "Location"),
        ]
        filled = [part for part in parts if part]
        return ", ".join(filled) if filled else "[Title], [Company], [Location]"

"""Source intake: text, PDF and URL acquisition.

Public API:
    - SourceAcquirer: Turns any supported source into canonical text
    - SourceMode: The three acquisition modes
    - sanitize_html: Regex-based HTML to plain text conversion
    - extract_pdf_pages: Per-page PDF text extraction
    - IntakeConfig: Configuration settings for intake
"""

from resume_tailor.intake.config import IntakeConfig, get_intake_config
from resume_tailor.intake.pdf import extract_pdf_pages
from resume_tailor.intake.sanitizer import sanitize_html
from resume_tailor.intake.service import SourceAcquirer, SourceMode

__all__ = [
    "SourceAcquirer",
    "SourceMode",
    "sanitize_html",
    "extract_pdf_pages",
    "IntakeConfig",
    "get_intake_config",
]

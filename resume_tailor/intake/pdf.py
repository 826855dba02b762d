"""PDF page text extraction backed by pypdf."""

from __future__ import annotations

import io
import logging

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from resume_tailor.errors import DocumentExtractionError

logger = logging.getLogger(__name__)


def extract_pdf_pages(data: bytes) -> list[str]:
    """Extract plain text from each page of a PDF, in document order.

    pypdf only parses the file; embedded scripts, forms and attachments are
    never executed.

    Args:
        data: Raw PDF bytes.

    Returns:
        One string per page (possibly empty for image-only pages).

    Raises:
        DocumentExtractionError: If the data is not a readable PDF or has no pages.
    """
    if not data:
        raise DocumentExtractionError("Document is empty")

    try:
        reader = PdfReader(io.BytesIO(data))
        if reader.is_encrypted:
            # Owner-password-only PDFs open with an empty user password.
            reader.decrypt("")
        pages = [page.extract_text() or "" for page in reader.pages]
    except PyPdfError as e:
        raise DocumentExtractionError(f"Failed to read PDF: {e}", e) from e
    except Exception as e:
        raise DocumentExtractionError(
            f"Failed to extract text from PDF. Please ensure it's a valid PDF file: {e}",
            e,
        ) from e

    if not pages:
        raise DocumentExtractionError("PDF contains no pages")

    logger.debug(f"Extracted text from {len(pages)} PDF page(s)")
    return pages

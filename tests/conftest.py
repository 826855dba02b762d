"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from resume_tailor.config.settings import reset_settings
from resume_tailor.intake.config import reset_intake_config
from resume_tailor.tailoring.config import reset_tailoring_config
from resume_tailor.tailoring.models import ExperienceRecord
from resume_tailor.utils.logging import reset_logging


@pytest.fixture(autouse=True)
def reset_config_singletons():
    """Keep configuration singletons from leaking between tests."""
    reset_settings()
    reset_intake_config()
    reset_tailoring_config()
    yield
    reset_settings()
    reset_intake_config()
    reset_tailoring_config()
    reset_logging()


@pytest.fixture
def sample_job_url() -> str:
    """Sample job URL for testing."""
    return "https://example.com/jobs/123"


@pytest.fixture
def sample_resume_text() -> str:
    return (
        "Jane Smith | jane@example.com | Austin, TX\n"
        "EXPERIENCE\n"
        "Senior Consultant, Acme Consulting, Boston, MA 2019 - 2023\n"
        "• Led pricing transformation for Fortune 500 client\n"
        "EDUCATION\n"
        "MBA, State University"
    )


@pytest.fixture
def sample_job_posting() -> str:
    return (
        "Senior Engineer\n"
        "We are hiring a Senior Engineer to build data pipelines in Python."
    )


@pytest.fixture
def sample_experience() -> ExperienceRecord:
    return ExperienceRecord(
        company="Globex",
        title="Strategy Lead",
        location="Santa Clara, CA",
        period="Jan 2024 - Present",
        bullets=[
            "• Built GTM planning model adopted by 4 regions",
            "• Ran weekly pipeline reviews with sales leadership",
        ],
    )


def make_completion_response(content) -> MagicMock:
    """Build a LiteLLM-style completion response with the given content."""
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


def make_text_pdf(pages: list[str]) -> bytes:
    """Build a minimal, well-formed PDF with one line of Helvetica text per page."""
    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"",  # page tree, filled in below
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    kids = []
    for text in pages:
        escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        stream = f"BT /F1 12 Tf 72 712 Td ({escaped}) Tj ET".encode("latin-1")
        page_num = len(objects) + 1
        content_num = page_num + 1
        kids.append(f"{page_num} 0 R")
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                "/Resources << /Font << /F1 3 0 R >> >> "
                f"/Contents {content_num} 0 R >>"
            ).encode("latin-1")
        )
        objects.append(
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )
    objects[1] = f"<< /Type /Pages /Kids [{' '.join(kids)}] /Count {len(pages)} >>".encode(
        "latin-1"
    )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


@pytest.fixture
def pdf_factory():
    """Factory fixture producing PDF bytes from per-page text."""
    return make_text_pdf


@pytest.fixture
def completion_response():
    """Factory fixture producing LiteLLM-style completion responses."""
    return make_completion_response

"""Source acquisition for resume and job posting text.

Turns any of the three supported inputs (pasted text, PDF bytes, a job posting
URL) into one canonical plain-text value.
"""

from __future__ import annotations

import logging
from enum import Enum
from urllib.parse import urlparse

import httpx

from resume_tailor.errors import (
    DocumentExtractionError,
    InvalidInputError,
    RemoteFetchError,
)
from resume_tailor.intake.config import IntakeConfig, get_intake_config
from resume_tailor.intake.pdf import extract_pdf_pages
from resume_tailor.intake.sanitizer import sanitize_html

logger = logging.getLogger(__name__)


class SourceMode(str, Enum):
    """How a source document is supplied."""

    TEXT = "text"
    DOCUMENT = "document"
    REMOTE = "remote"


def is_valid_url(url: str) -> bool:
    """Return True for absolute http(s) URLs with a well-formed host and port."""
    try:
        parsed = httpx.URL(url)
        port = parsed.port
        hostname = urlparse(url).hostname or ""
    except (httpx.InvalidURL, ValueError):
        return False

    if parsed.scheme not in {"http", "https"} or not parsed.host:
        return False
    if any(ch.isspace() for ch in hostname):
        return False
    return port is None or 0 < port < 65536


class SourceAcquirer:
    """Acquires canonical text for the resume and job posting fields.

    Attributes:
        config: Intake configuration settings.
    """

    def __init__(
        self,
        config: IntakeConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the acquirer.

        Args:
            config: Intake configuration. Uses the global config if not provided.
            transport: Optional httpx transport (tests pass a MockTransport).
        """
        self.config = config or get_intake_config()
        self._transport = transport

    async def acquire_resume(self, mode: SourceMode | str, payload: str | bytes) -> str:
        """Acquire the resume text; empty results are rejected."""
        return await self.acquire(mode, payload, allow_empty=False)

    async def acquire_job_posting(
        self, mode: SourceMode | str, payload: str | bytes
    ) -> str:
        """Acquire the job posting text; empty results are rejected."""
        return await self.acquire(mode, payload, allow_empty=False)

    async def acquire(
        self,
        mode: SourceMode | str,
        payload: str | bytes,
        *,
        allow_empty: bool = True,
    ) -> str:
        """Acquire canonical text from a payload in the given mode.

        Args:
            mode: text (payload is plain text), document (payload is PDF bytes)
                or remote (payload is a URL).
            payload: Mode-specific input.
            allow_empty: If False, a result that is empty or whitespace only
                is rejected.

        Returns:
            Canonical plain text.

        Raises:
            InvalidInputError: Unknown mode, wrong payload type, empty input,
                or (when disallowed) a fetched page without text.
            DocumentExtractionError: The document could not be decoded, or
                (when disallowed) yields no text.
            RemoteFetchError: The remote page could not be fetched.
        """
        try:
            mode = SourceMode(mode)
        except ValueError as e:
            raise InvalidInputError(f"Unknown source mode: {mode}", e) from e

        if mode is SourceMode.TEXT:
            if not isinstance(payload, str):
                raise InvalidInputError("Text mode expects a string payload")
            if not allow_empty and not payload.strip():
                raise InvalidInputError("Text is required")
            return payload

        if mode is SourceMode.DOCUMENT:
            if not isinstance(payload, (bytes, bytearray)):
                raise InvalidInputError("Document mode expects binary payload")
            text = self.extract_document(bytes(payload))
            if not allow_empty and not text.strip():
                raise DocumentExtractionError("Document contains no extractable text")
            return text

        if not isinstance(payload, str):
            raise InvalidInputError("Remote mode expects a URL string")
        text = await self.fetch_job_posting(payload)
        if not allow_empty and not text.strip():
            raise InvalidInputError("Fetched page contains no text")
        return text

    def extract_document(self, data: bytes) -> str:
        """Extract text from PDF bytes, one line-separated block per page.

        Raises:
            DocumentExtractionError: If the PDF is unreadable or has no pages.
        """
        try:
            pages = extract_pdf_pages(data)
        except DocumentExtractionError as e:
            logger.error(f"PDF extraction failed: {e}")
            raise

        text = "\n".join(pages)
        logger.info(f"Extracted {len(text)} characters from {len(pages)} page(s)")
        return text

    async def fetch_job_posting(self, url: str) -> str:
        """Fetch a job posting URL and reduce the page to plain text.

        Exactly one request is made; failures are never retried here.

        Raises:
            InvalidInputError: If the URL is empty or malformed (no request made).
            RemoteFetchError: Transport failure or non-2xx response.
        """
        url = (url or "").strip()
        if not url:
            raise InvalidInputError("URL is required")
        if not is_valid_url(url):
            raise InvalidInputError(f"Invalid URL: {url}")

        logger.info(f"Fetching job posting from: {url}")
        try:
            async with httpx.AsyncClient(
                headers={"User-Agent": self.config.user_agent},
                timeout=self.config.fetch_timeout,
                follow_redirects=self.config.follow_redirects,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                if not response.is_success:
                    raise RemoteFetchError(
                        f"Failed to fetch URL: {response.status_code} "
                        f"{response.reason_phrase}".rstrip()
                    )
                html = response.text
        except RemoteFetchError as e:
            logger.error(f"Error fetching job posting from {url}: {e}")
            raise
        except httpx.InvalidURL as e:
            raise InvalidInputError(f"Invalid URL: {url}", e) from e
        except httpx.HTTPError as e:
            logger.error(f"Error fetching job posting from {url}: {e}")
            raise RemoteFetchError(f"Failed to fetch URL: {e}", e) from e

        text = sanitize_html(html)
        logger.info(f"Fetched {len(text)} characters of job posting text")
        return text

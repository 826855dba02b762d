"""Data models for the Tailoring module.

Contains Pydantic models for:
- ExperienceRecord: The new work experience entry to weave into the resume
- TailoringRequest: The validated unit of work handed to the prompt composer
- TailoringResult: A generated resume, as kept in the history
"""

from __future__ import annotations

import time
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from resume_tailor.errors import ValidationError

JOB_TITLE_MAX_LENGTH = 100


class ExperienceRecord(BaseModel):
    """A single work experience entry supplied by the user.

    Every field may be empty, but none is ever missing.
    """

    model_config = ConfigDict(frozen=True)

    company: str = Field(default="", description="Company name")
    title: str = Field(
        default="",
        description="Job title held",
        validation_alias=AliasChoices("title", "job_title"),
    )
    location: str = Field(default="", description="Location of the role")
    period: str = Field(
        default="",
        description="Free-form time period",
        validation_alias=AliasChoices("period", "time", "dates"),
    )
    bullets: list[str] = Field(
        default_factory=list,
        description="Experience bullet lines, in order",
        validation_alias=AliasChoices("bullets", "details"),
    )

    @field_validator("company", "title", "location", "period", mode="before")
    @classmethod
    def coerce_scalar_to_str(cls, v: object) -> object:
        if v is None:
            return ""
        # YAML reads bare years such as `period: 2024` as numbers
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("bullets", mode="before")
    @classmethod
    def split_bullet_block(cls, v: object) -> object:
        """Accept a pasted multi-line block as well as a list of lines."""
        if v is None:
            return []
        if isinstance(v, str):
            return [line.strip() for line in v.splitlines() if line.strip()]
        return v

    @classmethod
    def from_text(cls, details: str, **fields: str) -> ExperienceRecord:
        """Build a record from a pasted block of bullets, one per line."""
        bullets = [line.strip() for line in details.splitlines() if line.strip()]
        return cls(bullets=bullets, **fields)

    def is_empty(self) -> bool:
        """True when there are no experience details to incorporate."""
        return not any(bullet.strip() for bullet in self.bullets)

    def render(self) -> str:
        """Render the record into the composed experience block."""
        lines = [
            f"Company: {self.company}",
            f"Job Title: {self.title}",
            f"Location: {self.location}",
            f"Time: {self.period}",
            "Experience Details:",
            *self.bullets,
        ]
        return "\n".join(lines).strip()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExperienceRecord:
        """Deserialize from dictionary."""
        return cls.model_validate(data)


class TailoringRequest(BaseModel):
    """Canonical tailoring input; only constructed with all fields present."""

    model_config = ConfigDict(frozen=True)

    resume_text: str = Field(..., description="Canonical resume text")
    job_posting_text: str = Field(..., description="Canonical job posting text")
    experience_text: str = Field(..., description="Composed experience block")

    def missing_fields(self) -> list[str]:
        """Names of fields that are blank."""
        return [
            name
            for name in ("resume_text", "job_posting_text", "experience_text")
            if not getattr(self, name).strip()
        ]

    @classmethod
    def build(
        cls, resume_text: str, job_posting_text: str, experience_text: str
    ) -> TailoringRequest:
        """Build a request, rejecting blank fields.

        Raises:
            ValidationError: If any field is empty or whitespace only.
        """
        request = cls(
            resume_text=resume_text or "",
            job_posting_text=job_posting_text or "",
            experience_text=experience_text or "",
        )
        missing = request.missing_fields()
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        return request


def job_title_label(job_posting_text: str) -> str:
    """Short label for a job posting: its first line, capped at 100 characters.

    Truncation counts Unicode code points, so astral characters such as emoji
    are never split.
    """
    first_line = job_posting_text.split("\n", 1)[0]
    return first_line[:JOB_TITLE_MAX_LENGTH]


class _MonotonicClock:
    """Millisecond wall clock that never repeats or goes backwards."""

    def __init__(self) -> None:
        self._last = 0

    def now_ms(self) -> int:
        now = time.time_ns() // 1_000_000
        if now <= self._last:
            now = self._last + 1
        self._last = now
        return now


_clock = _MonotonicClock()


class TailoringResult(BaseModel):
    """A generated resume; immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier derived from creation time")
    job_title: str = Field(..., description="First line of the job posting")
    html: str = Field(..., description="Generated HTML resume")
    timestamp: int = Field(..., ge=0, description="Creation time, ms since epoch")

    @classmethod
    def create(cls, job_posting_text: str, html: str) -> TailoringResult:
        """Create a result stamped with the current time."""
        timestamp = _clock.now_ms()
        return cls(
            id=str(timestamp),
            job_title=job_title_label(job_posting_text),
            html=html,
            timestamp=timestamp,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TailoringResult:
        """Deserialize from dictionary."""
        return cls.model_validate(data)

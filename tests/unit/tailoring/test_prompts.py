"""Unit tests for the tailoring prompt composer."""

import pytest

from resume_tailor.errors import ValidationError
from resume_tailor.tailoring.config import TailoringConfig
from resume_tailor.tailoring.models import TailoringRequest
from resume_tailor.tailoring.prompts import (
    DEFAULT_CONDENSABLE_ENTRY,
    DEFAULT_REFERENCE_ENTRY,
    PromptComposer,
)


@pytest.fixture
def request_obj(sample_resume_text, sample_job_posting, sample_experience):
    return TailoringRequest.build(
        sample_resume_text, sample_job_posting, sample_experience.render()
    )


class TestPromptComposer:
    """Tests for PromptComposer.compose."""

    def test_embeds_all_three_inputs_verbatim(self, request_obj):
        prompt = PromptComposer().compose(request_obj)

        assert f"ORIGINAL RESUME:\n{request_obj.resume_text}\n" in prompt
        assert f"JOB POSTING:\n{request_obj.job_posting_text}\n" in prompt
        assert request_obj.experience_text in prompt

    def test_inputs_appear_in_fixed_order(self, request_obj):
        prompt = PromptComposer().compose(request_obj)

        resume_at = prompt.index("ORIGINAL RESUME:")
        job_at = prompt.index("JOB POSTING:")
        experience_at = prompt.index("CURRENT EXPERIENCES TO INCORPORATE")
        assert resume_at < job_at < experience_at

    def test_is_deterministic(self, request_obj):
        composer = PromptComposer()
        assert composer.compose(request_obj) == composer.compose(request_obj)

    def test_encodes_layout_constraints(self, request_obj):
        prompt = PromptComposer().compose(request_obj)

        assert "SINGLE PAGE" in prompt
        assert "<h1>, <h2>, <h3>, <p>, <ul>, <li>" in prompt
        assert "Do NOT use tables, columns, images" in prompt
        assert "line-height: 1.1 or lower" in prompt
        assert "inline styles" in prompt
        assert "external" in prompt

    def test_encodes_content_constraints(self, request_obj):
        prompt = PromptComposer().compose(request_obj)

        assert "FIRST entry of the work experience section" in prompt
        assert "Exactly 3 main bullets" in prompt
        assert "original chronological order (most recent first)" in prompt
        assert "KEEP all main bullet headers" in prompt

    def test_forbids_conversational_output(self, request_obj):
        prompt = PromptComposer().compose(request_obj)

        assert "Do NOT ask any clarifying questions" in prompt
        assert "Do NOT refuse" in prompt
        assert "no preamble" in prompt

    def test_role_line_built_from_experience_block(self, request_obj):
        prompt = PromptComposer().compose(request_obj)

        assert '"Strategy Lead, Globex, Santa Clara, CA"' in prompt
        assert "(Jan 2024 - Present)" in prompt

    def test_role_line_placeholder_when_metadata_missing(self):
        request = TailoringRequest.build(
            "resume", "job", "Company: \nJob Title: \nExperience Details:\n- x"
        )
        prompt = PromptComposer().compose(request)

        assert "[Title], [Company], [Location]" in prompt

    def test_default_entries(self, request_obj):
        prompt = PromptComposer().compose(request_obj)

        assert DEFAULT_REFERENCE_ENTRY in prompt
        assert DEFAULT_CONDENSABLE_ENTRY in prompt

    def test_configured_entries_and_bullet_count(self, request_obj):
        config = TailoringConfig(
            _env_file=None,
            new_entry_bullets=4,
            reference_entry="the Initech section",
            condensable_entry="the Acme Consulting section",
        )
        prompt = PromptComposer.from_config(config).compose(request_obj)

        assert "Exactly 4 main bullets" in prompt
        assert "EXACTLY like the Initech section" in prompt
        assert "For the Acme Consulting section: KEEP all main bullet headers" in prompt

    def test_braces_in_inputs_are_kept_literally(self):
        request = TailoringRequest.build("skills: {python}", "Job {id}", "exp {x}")
        prompt = PromptComposer().compose(request)

        assert "skills: {python}" in prompt
        assert "Job {id}" in prompt

    def test_blank_request_is_rejected(self):
        request = TailoringRequest(
            resume_text="resume", job_posting_text="", experience_text="exp"
        )
        with pytest.raises(ValidationError):
            PromptComposer().compose(request)

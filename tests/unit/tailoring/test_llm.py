"""Unit tests for the tailoring LLM client.

Tests for TailoringLLM model naming, the single completion call, and
text extraction from completion responses.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from litellm import Timeout

from resume_tailor.errors import GenerationError
from resume_tailor.tailoring.config import TailoringConfig
from resume_tailor.tailoring.llm import TailoringLLM, extract_text_content


def make_config(**overrides) -> TailoringConfig:
    values = {"llm_api_key": None, "llm_base_url": None}
    values.update(overrides)
    return TailoringConfig(_env_file=None, **values)


class TestModelName:
    """Tests for LiteLLM model name formatting."""

    @pytest.mark.parametrize(
        "provider, model, base_url, expected",
        [
            ("anthropic", "claude-3-5-haiku-20241022", None, "anthropic/claude-3-5-haiku-20241022"),
            ("openai", "gpt-4o", None, "gpt-4o"),
            ("openai", "llama3", "http://localhost:11434/v1", "openai/llama3"),
            ("groq", "llama3-70b", None, "groq/llama3-70b"),
            ("anthropic", "bedrock/claude-v2", None, "bedrock/claude-v2"),
        ],
    )
    def test_model_name_formatting(self, provider, model, base_url, expected):
        llm = TailoringLLM(
            config=make_config(llm_provider=provider, llm_model=model, llm_base_url=base_url)
        )
        assert llm._get_model_name() == expected


class TestGenerateText:
    """Tests for TailoringLLM.generate_text."""

    @pytest.mark.asyncio
    async def test_returns_text_from_single_call(self, completion_response):
        llm = TailoringLLM(config=make_config())

        with patch(
            "resume_tailor.tailoring.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = completion_response("<h1>Jane</h1>")
            text = await llm.generate_text("prompt body")

        assert text == "<h1>Jane</h1>"
        mock_completion.assert_awaited_once()
        kwargs = mock_completion.call_args.kwargs
        assert kwargs["model"] == "anthropic/claude-3-5-haiku-20241022"
        assert kwargs["messages"] == [{"role": "user", "content": "prompt body"}]
        assert kwargs["max_tokens"] == 3000
        assert kwargs["timeout"] == 180.0
        assert "api_key" not in kwargs

    @pytest.mark.asyncio
    async def test_explicit_max_tokens_and_api_key(self, completion_response):
        llm = TailoringLLM(config=make_config(llm_provider="openai", llm_api_key="sk-test"))

        with patch(
            "resume_tailor.tailoring.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = completion_response("ok")
            await llm.generate_text("prompt", max_tokens=500)

        kwargs = mock_completion.call_args.kwargs
        assert kwargs["max_tokens"] == 500
        assert kwargs["api_key"] == "sk-test"

    @pytest.mark.asyncio
    async def test_base_url_passed_for_openai_compatible(self, completion_response):
        llm = TailoringLLM(
            config=make_config(llm_provider="openai", llm_base_url="http://localhost:8080/v1")
        )

        with patch(
            "resume_tailor.tailoring.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = completion_response("ok")
            await llm.generate_text("prompt")

        assert mock_completion.call_args.kwargs["base_url"] == "http://localhost:8080/v1"

    @pytest.mark.asyncio
    async def test_provider_error_is_not_retried(self):
        llm = TailoringLLM(config=make_config())

        with patch(
            "resume_tailor.tailoring.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.side_effect = RuntimeError("529 overloaded")
            with pytest.raises(GenerationError, match="529 overloaded") as exc_info:
                await llm.generate_text("prompt")

        assert mock_completion.await_count == 1
        assert isinstance(exc_info.value.original_error, RuntimeError)

    @pytest.mark.asyncio
    async def test_timeout_raises_generation_error(self):
        llm = TailoringLLM(config=make_config())

        with patch(
            "resume_tailor.tailoring.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.side_effect = Timeout(
                message="timed out", model="claude", llm_provider="anthropic"
            )
            with pytest.raises(GenerationError, match="timed out"):
                await llm.generate_text("prompt")

        assert mock_completion.await_count == 1

    @pytest.mark.asyncio
    async def test_empty_content_raises_generation_error(self, completion_response):
        llm = TailoringLLM(config=make_config())

        with patch(
            "resume_tailor.tailoring.llm.acompletion", new_callable=AsyncMock
        ) as mock_completion:
            mock_completion.return_value = completion_response("")
            with pytest.raises(GenerationError, match="no text content"):
                await llm.generate_text("prompt")


class TestExtractTextContent:
    """Tests for extract_text_content."""

    def test_string_content(self, completion_response):
        assert extract_text_content(completion_response("<p>x</p>")) == "<p>x</p>"

    def test_first_text_block_of_list_content(self, completion_response):
        response = completion_response(
            [
                {"type": "thinking", "text": "hmm"},
                {"type": "text", "text": "<h1>First</h1>"},
                {"type": "text", "text": "<h1>Second</h1>"},
            ]
        )
        assert extract_text_content(response) == "<h1>First</h1>"

    def test_attribute_style_blocks(self, completion_response):
        block = MagicMock(type="text", text="<p>ok</p>")
        assert extract_text_content(completion_response([block])) == "<p>ok</p>"

    def test_list_without_text_block_raises(self, completion_response):
        response = completion_response([{"type": "image", "source": "x"}])
        with pytest.raises(GenerationError):
            extract_text_content(response)

    def test_whitespace_only_content_raises(self, completion_response):
        with pytest.raises(GenerationError):
            extract_text_content(completion_response("   \n"))

    def test_missing_choices_raises(self):
        response = MagicMock(choices=[])
        with pytest.raises(GenerationError, match="no choices"):
            extract_text_content(response)

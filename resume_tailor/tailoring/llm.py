"""LLM client for the Tailoring module.

Wraps LiteLLM's async completion API behind a single text-generation call.
Calls are never retried here; a failed generation is reported to the caller,
who decides whether to try again.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from litellm import Timeout, acompletion

from resume_tailor.errors import GenerationError
from resume_tailor.tailoring.config import TailoringConfig, get_tailoring_config

logger = logging.getLogger(__name__)


def extract_text_content(response: Any) -> str:
    """Return the first textual content block of a completion response.

    Handles both plain-string message content and a list of typed content
    blocks (``{"type": "text", "text": ...}``).

    Raises:
        GenerationError: If the response carries no non-empty text.
    """
    try:
        message = response.choices[0].message
    except (AttributeError, IndexError, TypeError) as e:
        raise GenerationError("LLM response contained no choices", e) from e

    content = getattr(message, "content", None)

    text: str | None = None
    if isinstance(content, str):
        text = content
    elif isinstance(content, list):
        for block in content:
            if isinstance(block, dict):
                block_type, block_text = block.get("type"), block.get("text")
            else:
                block_type = getattr(block, "type", None)
                block_text = getattr(block, "text", None)
            if block_type == "text" and isinstance(block_text, str):
                text = block_text
                break

    if not text or not text.strip():
        raise GenerationError("LLM returned no text content")
    return text


class TailoringLLM:
    """LLM client for tailoring operations."""

    def __init__(self, config: TailoringConfig | None = None):
        """Initialize the LLM client.

        Args:
            config: Optional TailoringConfig. Uses global config if not provided.
        """
        self.config = config or get_tailoring_config()
        self._setup_provider_env()

    def _setup_provider_env(self) -> None:
        """Export provider settings LiteLLM only reads from the environment.

        Anthropic takes a custom base URL via ANTHROPIC_BASE_URL rather than
        a call parameter.
        """
        if self.config.llm_base_url and self.config.llm_provider == "anthropic":
            # The Anthropic SDK appends /v1 itself
            base_url = self.config.llm_base_url.rstrip("/")
            if base_url.endswith("/v1"):
                base_url = base_url[:-3]
            os.environ["ANTHROPIC_BASE_URL"] = base_url
            if self.config.llm_api_key:
                os.environ["ANTHROPIC_API_KEY"] = self.config.llm_api_key

    def _get_model_name(self) -> str:
        """Get the model name formatted for LiteLLM.

        Returns:
            Model name with provider prefix if needed.
        """
        if "/" in self.config.llm_model:
            return self.config.llm_model

        if self.config.llm_provider == "anthropic":
            return f"anthropic/{self.config.llm_model}"

        # Custom base URLs (local models, proxies) speak the OpenAI protocol
        if self.config.llm_base_url:
            return f"openai/{self.config.llm_model}"

        if self.config.llm_provider == "openai":
            return self.config.llm_model

        return f"{self.config.llm_provider}/{self.config.llm_model}"

    async def generate_text(self, prompt: str, max_tokens: int | None = None) -> str:
        """Generate a plain text response for a single user prompt.

        Args:
            prompt: The full instruction document.
            max_tokens: Output bound; defaults to config.max_output_tokens.

        Returns:
            The first text block of the response.

        Raises:
            GenerationError: On transport failure, timeout, error status, or
                a response without text.
        """
        messages = [{"role": "user", "content": prompt}]
        try:
            response = await self._call_completion(
                messages=messages,
                max_tokens=max_tokens or self.config.max_output_tokens,
            )
        except Timeout as e:
            raise GenerationError(
                "LLM request timed out "
                f"(timeout={self.config.llm_timeout}s). Increase "
                "`TAILORING_LLM_TIMEOUT` or use a faster model.",
                e,
            ) from e
        except Exception as e:
            raise GenerationError(f"LLM call failed: {e}", e) from e

        return extract_text_content(response)

    async def _call_completion(self, messages: list[dict], max_tokens: int):
        """Make the actual LLM API call.

        Args:
            messages: List of message dictionaries.
            max_tokens: Maximum tokens to generate.

        Returns:
            LiteLLM completion response.
        """
        kwargs = {
            "model": self._get_model_name(),
            "messages": messages,
            "max_tokens": max_tokens,
            "timeout": self.config.llm_timeout,
        }

        if self.config.llm_api_key:
            kwargs["api_key"] = self.config.llm_api_key

        # Anthropic gets its base URL from the environment (see _setup_provider_env)
        if self.config.llm_base_url and self.config.llm_provider != "anthropic":
            kwargs["base_url"] = self.config.llm_base_url

        logger.debug(f"Calling {kwargs['model']} (max_tokens={max_tokens})")
        return await acompletion(**kwargs)

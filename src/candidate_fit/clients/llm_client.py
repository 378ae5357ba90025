"""Claude API wrapper used for the candidate fit analysis."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import anthropic

from candidate_fit.config import DEFAULT_MODEL
from candidate_fit.errors import MissingCredentialError
from candidate_fit.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "ANTHROPIC_API_KEY"


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int
    finish_reason: str | None = None
    model: str = DEFAULT_MODEL


class LLMClient:
    """Async Claude API client. Calls are made once; failures propagate."""

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        key = api_key or os.environ.get(API_KEY_ENV_VAR)
        if not key:
            raise MissingCredentialError(API_KEY_ENV_VAR)
        kwargs: dict = {"api_key": key}
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.2,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage."""
        logger.debug("LLM call: model=%s", model)
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system
        try:
            message = await self.client.messages.create(**kwargs)
        except Exception:
            logger.error("LLM call failed", exc_info=True)
            raise
        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))
        text = "".join(block.text for block in message.content if hasattr(block, "text"))
        return LLMResponse(
            text=text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            finish_reason=message.stop_reason,
            model=model,
        )

    async def generate_json(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.2,
        max_tokens: int = 4096,
    ) -> dict:
        """Send a prompt and parse the JSON object from the response."""
        response = await self.generate(
            prompt=prompt,
            system=system,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return extract_json(response.text)

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary

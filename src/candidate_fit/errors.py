"""Exception types shared by the clients, pipeline and HTTP proxy."""

from __future__ import annotations


class CandidateFitError(Exception):
    """Base class for all candidate-fit failures."""


class UnparseableAIResponse(CandidateFitError):
    """The text-generation reply did not contain a usable JSON object."""

    def __init__(self, raw_text: str):
        self.raw_text = raw_text
        preview = raw_text[:200]
        super().__init__(f"Could not extract JSON from AI response: {preview}...")


class MissingCredentialError(CandidateFitError):
    """The generation-service API key is not configured."""

    def __init__(self, env_var: str = "ANTHROPIC_API_KEY"):
        self.env_var = env_var
        super().__init__(
            f"Anthropic API key not configured. Set {env_var} environment variable."
        )


class UpstreamError(CandidateFitError):
    """A job-platform endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


PARSE_FAILURE_MESSAGE = "Failed to parse AI response. Please try again."


def user_message(exc: CandidateFitError) -> str:
    """Text safe to show in the UI; raw model replies stay in the logs."""
    if isinstance(exc, UnparseableAIResponse):
        return PARSE_FAILURE_MESSAGE
    return str(exc)

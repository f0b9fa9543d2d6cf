"""
Exception types raised by the claim pipeline.

Every error carries the envelope ``code`` and HTTP status the API layer
reports. Stages raise; the FastAPI exception handlers convert exactly once.
"""

from typing import Any


VALIDATION_ERROR = "VALIDATION_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"


class WritWayError(Exception):
    """Base class for all WritWay errors."""

    code: str = INTERNAL_ERROR
    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return error


class RequestValidationFailed(WritWayError):
    """Request body did not match its schema."""

    code = VALIDATION_ERROR
    status_code = 400


class HTTPError(WritWayError):
    """Routing-level failure: unknown path, wrong method."""

    CODES = {404: "NOT_FOUND", 405: "METHOD_NOT_ALLOWED"}

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.code = self.CODES.get(status_code, "HTTP_ERROR")


# =============================================================================
# LLM errors
# =============================================================================


class LLMError(WritWayError):
    """Failure talking to the LLM provider."""


class LLMNotConfiguredError(LLMError):
    def __init__(self, message: str = "OpenAI API key not configured"):
        super().__init__(message)


class LLMRateLimitError(LLMError):
    def __init__(
        self,
        message: str = "OpenAI rate limit exceeded. Please try again in a moment.",
    ):
        super().__init__(message)


class LLMAuthenticationError(LLMError):
    def __init__(self, message: str = "OpenAI API key invalid"):
        super().__init__(message)


class ExtractionError(LLMError):
    """The model reply could not be turned into an extraction payload."""


class DraftingError(LLMError):
    """Form 7A / Schedule A drafting failed."""


class QuestionGenerationError(LLMError):
    """Clarifying question generation failed."""


# =============================================================================
# Rendering errors
# =============================================================================


class DocumentGenerationError(WritWayError):
    """PDF or Word rendering failed; no partial result is returned."""

"""
LLM service for claim extraction, clarifying questions and drafting.

Wraps the OpenAI chat completions API. Calls run in a worker thread so the
request loop is never blocked.
"""

import asyncio
import json
from functools import lru_cache
from typing import Any

import openai
import structlog
from openai import OpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    wait_exponential,
)

from writway.claims.prompts import (
    DRAFTING_SYSTEM_PROMPT,
    DRAFTING_USER_PROMPT,
    EXTRACTION_SYSTEM_PROMPT,
    EXTRACTION_USER_PROMPT,
    QUESTION_SYSTEM_PROMPT,
    QUESTION_USER_PROMPT,
)
from writway.config import get_settings
from writway.errors import (
    DraftingError,
    ExtractionError,
    LLMAuthenticationError,
    LLMError,
    LLMNotConfiguredError,
    LLMRateLimitError,
    QuestionGenerationError,
)
from writway.models.api import ClarifyingQuestion, ExtractionResponse

logger = structlog.get_logger(__name__)


# Transport failures only; status errors (429, 401, ...) are never retried
TRANSIENT_ERRORS = (openai.APIConnectionError, openai.APITimeoutError)


def _stop_after_configured_attempts(retry_state) -> bool:
    service = retry_state.args[0]
    return retry_state.attempt_number >= service.settings.openai_max_retries


def map_openai_error(
    error: Exception,
    prefix: str,
    error_cls: type[LLMError] = LLMError,
) -> LLMError:
    """Translate a provider exception into a WritWay LLM error."""
    if isinstance(error, LLMError):
        return error
    status = getattr(error, "status_code", None)
    if isinstance(error, openai.RateLimitError) or status == 429:
        return LLMRateLimitError()
    if isinstance(error, openai.AuthenticationError) or status == 401:
        return LLMAuthenticationError()
    return error_cls(f"{prefix}: {error}")


class LLMService:
    """
    OpenAI-backed LLM service.

    The client is only created when ``OPENAI_API_KEY`` is set. Accessing
    ``openai`` without it raises ``LLMNotConfiguredError``.
    """

    def __init__(self):
        settings = get_settings()
        self.settings = settings
        self.model = settings.openai_model

        self._openai: OpenAI | None = None
        if settings.openai_enabled:
            # Retries are handled by tenacity on transport errors only
            self._openai = OpenAI(
                api_key=settings.openai_api_key,
                timeout=settings.openai_timeout,
                max_retries=0,
            )

    @property
    def openai(self) -> OpenAI:
        if not self._openai:
            raise LLMNotConfiguredError()
        return self._openai

    @property
    def is_configured(self) -> bool:
        return self._openai is not None

    def health_check(self) -> dict[str, bool]:
        """Report which providers are configured."""
        return {"openai": self.is_configured}

    # =========================================================================
    # Core LLM Call
    # =========================================================================

    @retry(
        stop=_stop_after_configured_attempts,
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        reraise=True,
    )
    def _call_openai(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        json_mode: bool = False,
    ) -> str:
        """Call the OpenAI chat completions API and return the reply text."""
        params: dict[str, Any] = {
            "model": self.model,
            "temperature": temperature,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        if json_mode:
            params["response_format"] = {"type": "json_object"}

        response = self.openai.chat.completions.create(**params)
        self._log_usage(response)
        return response.choices[0].message.content or ""

    def _log_usage(self, response: Any) -> None:
        usage = getattr(response, "usage", None)
        if usage is None:
            return
        prompt_tokens = usage.prompt_tokens or 0
        completion_tokens = usage.completion_tokens or 0
        cost = (
            prompt_tokens * self.settings.openai_prompt_cost_per_million
            + completion_tokens * self.settings.openai_completion_cost_per_million
        ) / 1_000_000
        logger.info(
            "llm_usage",
            model=self.model,
            total_tokens=usage.total_tokens,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            estimated_cost_usd=round(cost, 4),
        )

    async def _complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        json_mode: bool = False,
    ) -> str:
        return await asyncio.to_thread(
            self._call_openai, system_prompt, user_prompt, temperature, json_mode
        )

    # =========================================================================
    # Claim Extraction
    # =========================================================================

    async def extract_claim_data(self, description: str) -> ExtractionResponse:
        """
        Extract structured claim fields from a free-text description.

        Returns the model's ``{extracted, missing, ambiguous}`` reply as-is;
        normalization happens in the claim service.
        """
        prefix = "Failed to extract claim data"
        try:
            content = await self._complete(
                EXTRACTION_SYSTEM_PROMPT,
                EXTRACTION_USER_PROMPT.format(description=description),
                self.settings.extraction_temperature,
                json_mode=True,
            )
        except openai.OpenAIError as e:
            logger.error("claim_extraction_failed", error=str(e))
            raise map_openai_error(e, prefix, ExtractionError) from e

        if not content.strip():
            raise ExtractionError(f"{prefix}: empty response from OpenAI")

        try:
            return ExtractionResponse.model_validate(json.loads(content))
        except ValueError as e:
            logger.error("claim_extraction_unparsable", error=str(e))
            raise ExtractionError(f"{prefix}: {e}") from e

    # =========================================================================
    # Clarifying Questions
    # =========================================================================

    async def generate_question(
        self,
        field: str,
        context: str,
        description: str,
    ) -> ClarifyingQuestion:
        """Ask the model for a single clarifying question about ``field``."""
        prefix = "Failed to generate question"
        try:
            content = await self._complete(
                QUESTION_SYSTEM_PROMPT,
                QUESTION_USER_PROMPT.format(
                    field=field,
                    context=context or "None",
                    description=description,
                ),
                self.settings.question_temperature,
                json_mode=True,
            )
        except openai.OpenAIError as e:
            logger.error("question_generation_failed", field=field, error=str(e))
            raise map_openai_error(e, prefix, QuestionGenerationError) from e

        try:
            return ClarifyingQuestion.model_validate(json.loads(content or "{}"))
        except ValueError as e:
            raise QuestionGenerationError(f"{prefix}: {e}") from e

    # =========================================================================
    # Drafting
    # =========================================================================

    async def draft_claim_documents(self, summary: str) -> str:
        """Draft Form 7A and Schedule "A" text from the intake summary."""
        prefix = "Failed to generate documents"
        try:
            content = await self._complete(
                DRAFTING_SYSTEM_PROMPT,
                DRAFTING_USER_PROMPT.format(summary=summary),
                self.settings.drafting_temperature,
            )
        except openai.OpenAIError as e:
            logger.error("claim_drafting_failed", error=str(e))
            raise map_openai_error(e, prefix, DraftingError) from e

        if not content.strip():
            raise DraftingError(f"{prefix}: empty response from OpenAI")
        return content


@lru_cache()
def get_llm_service() -> LLMService:
    """Get cached LLM service instance."""
    return LLMService()

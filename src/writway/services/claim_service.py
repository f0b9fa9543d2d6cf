"""
Claim intake service.

Turns a free-text description into a partially filled claim and picks the
next question to ask the claimant.
"""

from functools import lru_cache
from typing import Any, Iterable

import structlog

from writway.claims.normalizer import (
    flatten_extraction,
    infer_from_description,
    map_extraction,
    prune_claim,
)
from writway.claims.questions import FIELD_QUESTIONS, all_field_paths
from writway.config import get_settings
from writway.models.api import ExtractionResult, NextQuestionResponse
from writway.models.claim import ClaimFormData, get_field_value, has_value
from writway.services.llm_service import LLMService, get_llm_service

logger = structlog.get_logger(__name__)


class ClaimService:
    """Extraction normalization and question selection."""

    def __init__(self, llm_service: LLMService | None = None):
        self.settings = get_settings()
        self.llm = llm_service or get_llm_service()

    async def analyze_description(self, description: str) -> ExtractionResult:
        """
        Extract and normalize claim fields from a description.

        Without an OpenAI key nothing is extracted and every question is
        reported as missing.
        """
        if not self.llm.is_configured:
            logger.warning("openai_not_configured", action="analyze_description")
            return ExtractionResult(missing=all_field_paths())

        response = await self.llm.extract_claim_data(description)

        flat = flatten_extraction(response.extracted)
        claim = map_extraction(flat, amount_limit=self.settings.small_claims_limit)

        inferred: list[str] = []
        if self.settings.claim_inference_enabled:
            inferred = infer_from_description(claim, description)

        result = ExtractionResult(
            extracted=prune_claim(claim),
            missing=response.missing,
            ambiguous=response.ambiguous,
            inferred=inferred,
        )

        logger.info(
            "claim_analyzed",
            sections=list(result.extracted),
            missing=len(result.missing),
            ambiguous=len(result.ambiguous),
            inferred=len(result.inferred),
        )
        return result

    def get_next_question(
        self,
        claim_data: ClaimFormData | dict[str, Any],
        answered_questions: Iterable[str] = (),
    ) -> NextQuestionResponse:
        """
        Return the first required, unanswered, empty field's question.

        Walks the question table in order. ``completed`` is True once no
        such field remains.
        """
        answered = set(answered_questions)

        for question in FIELD_QUESTIONS:
            if question.field in answered or not question.required:
                continue
            if not has_value(get_field_value(claim_data, question.field)):
                return NextQuestionResponse(
                    question=question.to_descriptor(),
                    completed=False,
                )

        return NextQuestionResponse(question=None, completed=True)


@lru_cache()
def get_claim_service() -> ClaimService:
    """Get cached claim service instance."""
    return ClaimService()

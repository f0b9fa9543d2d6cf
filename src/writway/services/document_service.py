"""
Document service: renders the Plaintiff's Claim as PDF and Word, and drafts
Form 7A / Schedule "A" text with the LLM.
"""

import asyncio
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import structlog

from writway.claims.content_plan import Block, build_content_plan, build_draft_plan
from writway.claims.draft_parser import DraftedDocuments, parse_draft
from writway.claims.prompts import format_claim_summary
from writway.config import get_settings
from writway.errors import DocumentGenerationError
from writway.models.claim import ClaimFormData
from writway.rendering import render_pdf, render_word
from writway.services.llm_service import LLMService, get_llm_service

logger = structlog.get_logger(__name__)


PDF_MIME_TYPE = "application/pdf"
WORD_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@dataclass
class GeneratedDocuments:
    """Rendered claim in both formats."""

    pdf: bytes
    word: bytes
    pdf_filename: str
    word_filename: str


def _payload(claim_data: ClaimFormData | dict[str, Any]) -> dict[str, Any]:
    if isinstance(claim_data, ClaimFormData):
        return claim_data.to_payload()
    return dict(claim_data or {})


class DocumentService:
    """PDF/Word rendering and LLM drafting."""

    def __init__(self, llm_service: LLMService | None = None):
        self.settings = get_settings()
        self._llm = llm_service

    @property
    def llm(self) -> LLMService:
        if self._llm is None:
            self._llm = get_llm_service()
        return self._llm

    async def _render(self, blocks: list[Block], filename_base: str) -> GeneratedDocuments:
        """Run both writers concurrently; if either fails, return nothing."""
        try:
            pdf, word = await asyncio.gather(
                asyncio.to_thread(render_pdf, blocks),
                asyncio.to_thread(render_word, blocks),
            )
        except Exception as e:
            logger.error("document_generation_failed", error=str(e))
            raise DocumentGenerationError(f"Failed to generate documents: {e}") from e

        logger.info(
            "documents_generated",
            blocks=len(blocks),
            pdf_bytes=len(pdf),
            word_bytes=len(word),
        )
        return GeneratedDocuments(
            pdf=pdf,
            word=word,
            pdf_filename=f"{filename_base}.pdf",
            word_filename=f"{filename_base}.docx",
        )

    async def generate_documents(
        self,
        claim_data: ClaimFormData | dict[str, Any],
        initial_description: str | None = None,
    ) -> GeneratedDocuments:
        """
        Render the claim to PDF and Word concurrently.

        Both formats are produced from the same content plan. If either
        writer fails, no document is returned.
        """
        blocks = build_content_plan(_payload(claim_data), initial_description)
        return await self._render(blocks, self.settings.document_filename_base)

    async def render_draft(self, drafted: DraftedDocuments) -> GeneratedDocuments:
        """Render drafted Form 7A and Schedule "A" text to PDF and Word."""
        blocks = build_draft_plan(drafted.form7a_text, drafted.schedule_a_text)
        return await self._render(blocks, f"{self.settings.document_filename_base}-draft")

    async def draft_documents(
        self,
        claim_data: ClaimFormData | dict[str, Any],
        initial_description: str | None = None,
    ) -> DraftedDocuments:
        """Draft Form 7A and Schedule "A" text with the LLM."""
        summary = format_claim_summary(_payload(claim_data), initial_description)
        content = await self.llm.draft_claim_documents(summary)
        drafted = parse_draft(content)

        logger.info(
            "documents_drafted",
            claim_type=drafted.claim_type,
            form7a_chars=len(drafted.form7a_text),
            schedule_a_chars=len(drafted.schedule_a_text),
            has_warnings=drafted.warnings is not None,
        )
        return drafted


@lru_cache()
def get_document_service() -> DocumentService:
    """Get cached document service instance."""
    return DocumentService()

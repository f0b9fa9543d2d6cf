"""
Business logic services for WritWay.
"""

from writway.services.llm_service import LLMService, get_llm_service
from writway.services.claim_service import ClaimService, get_claim_service
from writway.services.document_service import (
    DocumentService,
    GeneratedDocuments,
    get_document_service,
)

__all__ = [
    "LLMService",
    "get_llm_service",
    "ClaimService",
    "get_claim_service",
    "DocumentService",
    "GeneratedDocuments",
    "get_document_service",
]

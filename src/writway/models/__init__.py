"""
Pydantic models for WritWay.

- Claim models for the nested claim form
- API models for request/response schemas
"""

from writway.models.claim import (
    Amount,
    ClaimDetails,
    ClaimFormData,
    Defendant,
    Defendants,
    Eligibility,
    Evidence,
    Plaintiff,
    Remedy,
    Representative,
    get_field_value,
    has_value,
)
from writway.models.api import (
    AnalyzeRequest,
    Envelope,
    ExtractionResponse,
    ExtractionResult,
    DraftDocumentsRequest,
    GenerateDocumentsRequest,
    NextQuestionRequest,
    NextQuestionResponse,
    QuestionDescriptor,
)

__all__ = [
    # Claim models
    "Amount",
    "ClaimDetails",
    "ClaimFormData",
    "Defendant",
    "Defendants",
    "Eligibility",
    "Evidence",
    "Plaintiff",
    "Remedy",
    "Representative",
    "get_field_value",
    "has_value",
    # API models
    "AnalyzeRequest",
    "Envelope",
    "ExtractionResponse",
    "ExtractionResult",
    "DraftDocumentsRequest",
    "GenerateDocumentsRequest",
    "NextQuestionRequest",
    "NextQuestionResponse",
    "QuestionDescriptor",
]

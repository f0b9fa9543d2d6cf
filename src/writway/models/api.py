"""
API request and response models.
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from writway.models.claim import ClaimFormData


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Envelope
# =============================================================================


class ErrorBody(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Standard ``{success, data, error}`` response wrapper."""

    success: bool
    data: T | None = None
    error: ErrorBody | None = None


# =============================================================================
# Analyze
# =============================================================================


class AnalyzeRequest(ApiModel):
    """Request model for claim description analysis."""

    description: str = Field(
        ...,
        min_length=10,
        description="Free-text description of the claim",
    )


class Ambiguity(ApiModel):
    field: str
    reason: str = ""
    question: str = ""


class ExtractionResponse(ApiModel):
    """Raw reply of the extraction model."""

    model_config = ConfigDict(extra="ignore")

    extracted: dict[str, Any] = Field(default_factory=dict)
    missing: list[str] = Field(default_factory=list)
    ambiguous: list[Ambiguity] = Field(default_factory=list)

    @field_validator("extracted", mode="before")
    @classmethod
    def _extracted_mapping(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    @field_validator("missing", mode="before")
    @classmethod
    def _missing_strings(cls, value: Any) -> list[str]:
        if not isinstance(value, list):
            return []
        return [
            str(item) for item in value
            if item is not None and not isinstance(item, (dict, list))
        ]

    @field_validator("ambiguous", mode="before")
    @classmethod
    def _ambiguous_entries(cls, value: Any) -> list[Any]:
        """Bare field names become entries; anything without a field is dropped."""
        if not isinstance(value, list):
            return []
        entries: list[Any] = []
        for item in value:
            if isinstance(item, Ambiguity):
                entries.append(item)
            elif isinstance(item, str) and item.strip():
                entries.append({"field": item})
            elif isinstance(item, dict) and isinstance(item.get("field"), str):
                entries.append({
                    key: str(item[key])
                    for key in ("field", "reason", "question")
                    if item.get(key) is not None
                })
        return entries


class ExtractionResult(ApiModel):
    """Normalized extraction merged into the claim structure."""

    extracted: dict[str, Any] = Field(default_factory=dict)
    missing: list[str] = Field(default_factory=list)
    ambiguous: list[Ambiguity] = Field(default_factory=list)
    inferred: list[str] = Field(
        default_factory=list,
        description="Field paths filled by keyword inference, not by the model",
    )


# =============================================================================
# Questions
# =============================================================================


QuestionType = Literal["text", "number", "date", "select", "boolean", "textarea"]


class QuestionOption(ApiModel):
    label: str
    value: str


class QuestionDescriptor(ApiModel):
    """Question shown to the claimant for one field."""

    id: str
    field: str
    type: QuestionType
    label: str
    description: str | None = None
    required: bool
    options: list[QuestionOption] | None = None


class NextQuestionRequest(ApiModel):
    claim_data: ClaimFormData
    answered_questions: list[str] = Field(default_factory=list)


class NextQuestionResponse(ApiModel):
    question: QuestionDescriptor | None = None
    completed: bool


class ClarifyQuestionRequest(ApiModel):
    field: str = Field(..., min_length=1)
    context: str = ""
    description: str = Field(..., min_length=1)


class ClarifyingQuestion(ApiModel):
    question: str
    type: str = "text"
    options: list[str] | None = None


# =============================================================================
# Documents
# =============================================================================


class GenerateDocumentsRequest(ApiModel):
    claim_data: ClaimFormData
    initial_description: str | None = None


class EncodedDocument(ApiModel):
    content: str = Field(..., description="Base64 encoded file")
    filename: str
    mime_type: str


class GeneratedDocumentsResponse(ApiModel):
    pdf: EncodedDocument
    word: EncodedDocument


class DraftDocumentsRequest(GenerateDocumentsRequest):
    include_documents: bool = Field(
        default=False,
        description="Also render the drafted text as PDF and Word",
    )


class DraftedDocumentsResponse(ApiModel):
    claim_type: str
    legal_bases: str | None = None
    form7a_text: str = Field(alias="form7AText")
    schedule_a_text: str = Field(alias="scheduleAText")
    warnings: str | None = None
    documents: GeneratedDocumentsResponse | None = None

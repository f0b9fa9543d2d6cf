"""
Claim intake routes.

Every route answers with the ``{success, data, error}`` envelope. Errors
are raised to the app's exception handlers.
"""

import base64

import structlog
from fastapi import APIRouter

from writway.models.api import (
    AnalyzeRequest,
    ClarifyingQuestion,
    ClarifyQuestionRequest,
    DraftDocumentsRequest,
    DraftedDocumentsResponse,
    EncodedDocument,
    Envelope,
    ExtractionResult,
    GenerateDocumentsRequest,
    GeneratedDocumentsResponse,
    NextQuestionRequest,
    NextQuestionResponse,
)
from writway.services.claim_service import get_claim_service
from writway.services.document_service import (
    PDF_MIME_TYPE,
    WORD_MIME_TYPE,
    GeneratedDocuments,
    get_document_service,
)
from writway.services.llm_service import get_llm_service

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("/analyze", response_model=Envelope[ExtractionResult])
async def analyze_claim(request: AnalyzeRequest) -> Envelope[ExtractionResult]:
    """
    Extract claim fields from a free-text description.
    """
    result = await get_claim_service().analyze_description(request.description)
    return Envelope[ExtractionResult](success=True, data=result)


@router.post("/questions/next", response_model=Envelope[NextQuestionResponse])
async def next_question(request: NextQuestionRequest) -> Envelope[NextQuestionResponse]:
    """
    Get the next required question that is still unanswered.
    """
    result = get_claim_service().get_next_question(
        request.claim_data,
        request.answered_questions,
    )
    return Envelope[NextQuestionResponse](success=True, data=result)


@router.post("/questions/clarify", response_model=Envelope[ClarifyingQuestion])
async def clarify_question(request: ClarifyQuestionRequest) -> Envelope[ClarifyingQuestion]:
    """
    Generate a clarifying question for an ambiguous field.
    """
    question = await get_llm_service().generate_question(
        request.field,
        request.context,
        request.description,
    )
    return Envelope[ClarifyingQuestion](success=True, data=question)


def _encode(documents: GeneratedDocuments) -> GeneratedDocumentsResponse:
    return GeneratedDocumentsResponse(
        pdf=EncodedDocument(
            content=base64.b64encode(documents.pdf).decode("ascii"),
            filename=documents.pdf_filename,
            mime_type=PDF_MIME_TYPE,
        ),
        word=EncodedDocument(
            content=base64.b64encode(documents.word).decode("ascii"),
            filename=documents.word_filename,
            mime_type=WORD_MIME_TYPE,
        ),
    )


@router.post("/generate", response_model=Envelope[GeneratedDocumentsResponse])
async def generate_documents(
    request: GenerateDocumentsRequest,
) -> Envelope[GeneratedDocumentsResponse]:
    """
    Render the Plaintiff's Claim as base64 encoded PDF and Word files.
    """
    documents = await get_document_service().generate_documents(
        request.claim_data,
        request.initial_description,
    )
    return Envelope[GeneratedDocumentsResponse](success=True, data=_encode(documents))


@router.post("/draft", response_model=Envelope[DraftedDocumentsResponse])
async def draft_documents(
    request: DraftDocumentsRequest,
) -> Envelope[DraftedDocumentsResponse]:
    """
    Draft Form 7A and Schedule "A" text with the LLM, optionally rendered
    as PDF and Word.
    """
    service = get_document_service()
    drafted = await service.draft_documents(
        request.claim_data,
        request.initial_description,
    )

    documents = None
    if request.include_documents:
        documents = _encode(await service.render_draft(drafted))

    data = DraftedDocumentsResponse(
        claim_type=drafted.claim_type,
        legal_bases=drafted.legal_bases,
        form7a_text=drafted.form7a_text,
        schedule_a_text=drafted.schedule_a_text,
        warnings=drafted.warnings,
        documents=documents,
    )
    return Envelope[DraftedDocumentsResponse](success=True, data=data)

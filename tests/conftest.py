"""Shared pytest fixtures and mocks for the WritWay test suite."""

import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from writway.config import Settings


# ---------------------------------------------------------------------------
# Singleton cache clearing (autouse)
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clear_singletons(monkeypatch):
    """Clear all @lru_cache singletons and any ambient OpenAI key between tests."""
    from writway.config import get_settings
    from writway.services.llm_service import get_llm_service
    from writway.services.claim_service import get_claim_service
    from writway.services.document_service import get_document_service

    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    caches = (get_settings, get_llm_service, get_claim_service, get_document_service)
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip tenacity back-off waits."""
    monkeypatch.setattr("time.sleep", lambda seconds: None)


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_claim():
    """A claim with every required question answered."""
    return {
        "eligibility": {
            "totalAmount": "5500",
            "isAmountUnder35000": True,
            "isBasedInOntario": True,
            "issueDate": "2024-03-15",
            "claimType": "money",
        },
        "plaintiff": {
            "fullName": "Jane Smith",
            "filingType": "individual",
            "address": "12 King St W",
            "city": "Toronto",
            "province": "Ontario",
            "postalCode": "M5H 1A1",
            "phone": "416-555-0101",
            "email": "jane@example.com",
            "hasRepresentative": False,
        },
        "defendants": {
            "count": 1,
            "defendants": [
                {"fullName": "John Doe", "type": "individual", "address": "9 Queen St"},
            ],
        },
        "claimDetails": {
            "description": "Paid a deposit for a deck that was never built.",
            "issueStartDate": "2024-03-15",
            "location": "Toronto, Ontario",
            "askedToResolve": True,
            "response": "No response",
        },
        "amount": {
            "principalAmount": "5500",
            "claimingInterest": True,
            "interestRate": "5",
            "claimingCosts": True,
            "claimingDamages": False,
            "totalAmount": "5500",
        },
        "remedy": {"payMoney": True, "interestAndCosts": True},
        "evidence": {"documents": "Contract/Agreement, Receipts/Invoices", "hasWitnesses": False},
    }


@pytest.fixture
def claim_file(tmp_path, sample_claim):
    """The sample claim written to a JSON file."""
    path = tmp_path / "claim.json"
    path.write_text(json.dumps(sample_claim))
    return path


@pytest.fixture
def sample_description():
    return (
        "I hired a contractor named Mike Johnson operating as Johnson Renovations "
        "to build a deck. I paid a $5000 deposit by e-transfer in March 2024 and he "
        "never started. I sent him emails asking for a refund but got no response. "
        "I want to claim the money back plus interest and filing fees."
    )


@pytest.fixture
def grouped_extraction():
    """Extraction reply grouped under section keys, as the model often returns it."""
    return {
        "ELIGIBILITY": {
            "totalAmount": 5000,
            "issueDate": "2024-03-01",
            "claimType": "money",
        },
        "PLAINTIFF": {
            "plaintiffName": "Sarah Lee",
            "plaintiffProvince": "Ontario",
        },
        "DEFENDANT": {
            "defendants": [{"fullName": "Mike Johnson", "type": "business"}],
        },
        "CLAIM DETAILS": {
            "location": "Ottawa",
            "response": False,
        },
        "AMOUNT": {"claimingInterest": True},
        "EVIDENCE": {"documents": ["Emails", "Payment records"]},
    }


# ---------------------------------------------------------------------------
# Service mocks
# ---------------------------------------------------------------------------

@pytest.fixture
def test_settings():
    return Settings(openai_api_key="test-key", openai_model="gpt-test")


def make_completion(content, prompt_tokens=100, completion_tokens=50):
    """Build a chat completion response mock."""
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    response.usage = MagicMock(
        total_tokens=prompt_tokens + completion_tokens,
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
    )
    return response


@pytest.fixture
def llm_service(test_settings):
    """LLMService with a mocked OpenAI client."""
    from writway.services.llm_service import LLMService

    svc = LLMService.__new__(LLMService)
    svc.settings = test_settings
    svc.model = test_settings.openai_model

    mock_openai = MagicMock()
    mock_openai.chat.completions.create.return_value = make_completion(
        json.dumps({"extracted": {}, "missing": [], "ambiguous": []})
    )
    svc._openai = mock_openai
    return svc


@pytest.fixture
def mock_llm_service():
    """Configured LLM service double with async methods."""
    mock = MagicMock()
    mock.is_configured = True
    mock.extract_claim_data = AsyncMock()
    mock.generate_question = AsyncMock()
    mock.draft_claim_documents = AsyncMock()
    mock.health_check.return_value = {"openai": True}
    return mock


@pytest.fixture
def completion():
    """Factory for chat completion response mocks."""
    return make_completion

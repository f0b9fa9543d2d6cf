"""Tests for writway/services/claim_service.py: analysis and question selection."""

import asyncio

import pytest

from writway.claims.questions import FIELD_QUESTIONS, all_field_paths, required_field_paths
from writway.config import Settings
from writway.errors import LLMRateLimitError
from writway.models.api import Ambiguity, ExtractionResponse
from writway.models.claim import ClaimFormData
from writway.services.claim_service import ClaimService, get_claim_service
from writway.services.llm_service import LLMService


@pytest.fixture
def claim_service(mock_llm_service):
    return ClaimService(llm_service=mock_llm_service)


class TestAnalyzeDescription:

    def test_without_api_key_everything_missing(self):
        service = ClaimService(llm_service=LLMService())
        result = asyncio.run(service.analyze_description("I am owed money by my landlord"))
        assert result.extracted == {}
        assert result.missing == all_field_paths()
        assert result.ambiguous == []
        assert result.inferred == []

    def test_normalizes_grouped_extraction(
        self, claim_service, mock_llm_service, grouped_extraction, sample_description,
    ):
        mock_llm_service.extract_claim_data.return_value = ExtractionResponse(
            extracted=grouped_extraction,
            missing=["plaintiffPhone"],
            ambiguous=[Ambiguity(field="issueDate", reason="Only a month was given")],
        )

        result = asyncio.run(claim_service.analyze_description(sample_description))

        mock_llm_service.extract_claim_data.assert_awaited_once_with(sample_description)
        assert result.extracted["eligibility"]["totalAmount"] == "5000"
        assert result.extracted["plaintiff"]["fullName"] == "Sarah Lee"
        assert result.extracted["remedy"] == {"payMoney": True}
        assert result.missing == ["plaintiffPhone"]
        assert result.ambiguous[0].field == "issueDate"
        assert "remedy.payMoney" in result.inferred

    def test_inference_disabled(self, claim_service, mock_llm_service, sample_description):
        claim_service.settings = Settings(claim_inference_enabled=False)
        mock_llm_service.extract_claim_data.return_value = ExtractionResponse(
            extracted={"plaintiffName": "Sarah Lee"},
        )

        result = asyncio.run(claim_service.analyze_description(sample_description))

        assert result.extracted == {"plaintiff": {"fullName": "Sarah Lee"}}
        assert result.inferred == []

    def test_empty_sections_pruned(self, claim_service, mock_llm_service):
        claim_service.settings = Settings(claim_inference_enabled=False)
        mock_llm_service.extract_claim_data.return_value = ExtractionResponse(
            extracted={"plaintiffName": "", "location": None},
        )
        result = asyncio.run(claim_service.analyze_description("nothing useful here"))
        assert result.extracted == {}

    def test_extracted_data_validates_as_claim(
        self, claim_service, mock_llm_service, grouped_extraction, sample_description,
    ):
        mock_llm_service.extract_claim_data.return_value = ExtractionResponse(
            extracted=grouped_extraction,
        )
        result = asyncio.run(claim_service.analyze_description(sample_description))
        claim = ClaimFormData.model_validate(result.extracted)
        assert claim.defendants.count == 1

    def test_adapter_errors_propagate(self, claim_service, mock_llm_service):
        mock_llm_service.extract_claim_data.side_effect = LLMRateLimitError()
        with pytest.raises(LLMRateLimitError):
            asyncio.run(claim_service.analyze_description("a long enough description"))


class TestGetNextQuestion:

    def test_empty_claim_starts_with_amount(self, claim_service):
        result = claim_service.get_next_question({})
        assert result.completed is False
        assert result.question.field == "eligibility.totalAmount"
        assert result.question.id == "q-eligibility-amount"

    def test_eligibility_complete_moves_to_plaintiff(self, claim_service):
        claim = {
            "eligibility": {
                "totalAmount": "100",
                "isAmountUnder35000": True,
                "isBasedInOntario": True,
                "issueDate": "2024-01-01",
                "claimType": "money",
            },
        }
        result = claim_service.get_next_question(claim)
        assert result.question.field.startswith("plaintiff.")

    def test_deterministic(self, claim_service, sample_claim):
        del sample_claim["plaintiff"]["email"]
        first = claim_service.get_next_question(sample_claim)
        second = claim_service.get_next_question(sample_claim)
        assert first == second
        assert first.question.field == "plaintiff.email"

    def test_skips_answered_questions(self, claim_service):
        answered = ["eligibility.totalAmount", "eligibility.isAmountUnder35000"]
        result = claim_service.get_next_question({}, answered)
        assert result.question.field == "eligibility.isBasedInOntario"

    def test_never_returns_answered_field(self, claim_service):
        answered: list[str] = []
        while True:
            result = claim_service.get_next_question({}, answered)
            if result.completed:
                break
            assert result.question.field not in answered
            answered.append(result.question.field)
        assert answered == required_field_paths()

    def test_false_counts_as_answered(self, claim_service, sample_claim):
        sample_claim["amount"]["claimingInterest"] = False
        assert claim_service.get_next_question(sample_claim).completed is True

    def test_blank_string_is_unanswered(self, claim_service, sample_claim):
        sample_claim["plaintiff"]["city"] = "   "
        assert claim_service.get_next_question(sample_claim).question.field == "plaintiff.city"

    def test_optional_fields_never_asked(self, claim_service, sample_claim):
        del sample_claim["remedy"]
        result = claim_service.get_next_question(sample_claim)
        assert result.completed is True
        assert result.question is None

    def test_completed_when_all_required_answered(self, claim_service, sample_claim):
        assert claim_service.get_next_question(sample_claim).completed is True

    def test_completed_by_answered_list_alone(self, claim_service):
        result = claim_service.get_next_question({}, [q.field for q in FIELD_QUESTIONS])
        assert result.completed is True

    def test_accepts_model(self, claim_service, sample_claim):
        del sample_claim["defendants"]
        claim = ClaimFormData.model_validate(sample_claim)
        assert claim_service.get_next_question(claim).question.field == "defendants.count"

    def test_select_question_options(self, claim_service):
        result = claim_service.get_next_question({}, all_field_paths()[:4])
        assert result.question.type == "select"
        assert [o.value for o in result.question.options] == ["money", "property", "damages"]


class TestGetClaimService:

    def test_singleton(self):
        assert get_claim_service() is get_claim_service()

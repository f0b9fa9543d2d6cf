"""Tests for writway/models: claim sections, aliases, field lookups."""

import pytest
from pydantic import ValidationError

from writway.models.api import (
    AnalyzeRequest,
    Ambiguity,
    DraftedDocumentsResponse,
    Envelope,
    ExtractionResponse,
    NextQuestionRequest,
)
from writway.models.claim import ClaimFormData, Defendants, get_field_value, has_value


class TestHasValue:

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_unanswered(self, value):
        assert has_value(value) is False

    @pytest.mark.parametrize("value", [False, 0, "x", [], {"a": 1}])
    def test_answered(self, value):
        assert has_value(value) is True


class TestClaimFormData:

    def test_parses_camel_case(self, sample_claim):
        claim = ClaimFormData.model_validate(sample_claim)
        assert claim.eligibility.is_amount_under_35000 is True
        assert claim.plaintiff.postal_code == "M5H 1A1"
        assert claim.defendants.defendants[0].full_name == "John Doe"
        assert claim.claim_details.asked_to_resolve is True

    def test_payload_round_trips_aliases(self, sample_claim):
        payload = ClaimFormData.model_validate(sample_claim).to_payload()
        assert payload["eligibility"]["isAmountUnder35000"] is True
        assert payload["claimDetails"]["issueStartDate"] == "2024-03-15"

    def test_payload_drops_unset_sections(self):
        payload = ClaimFormData.model_validate({"amount": {"principalAmount": "10"}}).to_payload()
        assert payload == {"amount": {"principalAmount": "10"}}

    def test_unknown_keys_ignored(self):
        claim = ClaimFormData.model_validate({"eligibility": {"somethingElse": 1}})
        assert claim.eligibility is not None

    def test_invalid_claim_type_rejected(self):
        with pytest.raises(ValidationError):
            ClaimFormData.model_validate({"eligibility": {"claimType": "divorce"}})

    def test_defendant_count_at_least_one(self):
        with pytest.raises(ValidationError):
            Defendants(count=0)


class TestGetFieldValue:

    def test_from_dict(self, sample_claim):
        assert get_field_value(sample_claim, "plaintiff.city") == "Toronto"

    def test_from_model(self, sample_claim):
        claim = ClaimFormData.model_validate(sample_claim)
        assert get_field_value(claim, "eligibility.claimType") == "money"

    def test_missing_section(self):
        assert get_field_value({}, "plaintiff.city") is None

    def test_false_is_returned(self, sample_claim):
        assert get_field_value(sample_claim, "plaintiff.hasRepresentative") is False


class TestApiModels:

    def test_description_min_length(self):
        AnalyzeRequest(description="0123456789")
        with pytest.raises(ValidationError):
            AnalyzeRequest(description="012345678")

    def test_next_question_request_aliases(self, sample_claim):
        req = NextQuestionRequest.model_validate(
            {"claimData": sample_claim, "answeredQuestions": ["plaintiff.email"]}
        )
        assert req.answered_questions == ["plaintiff.email"]
        assert req.claim_data.plaintiff.full_name == "Jane Smith"

    def test_drafted_response_aliases(self):
        data = DraftedDocumentsResponse(
            claim_type="Breach of contract",
            form7a_text="form",
            schedule_a_text="schedule",
        ).model_dump(by_alias=True)
        assert data["claimType"] == "Breach of contract"
        assert data["form7AText"] == "form"
        assert data["scheduleAText"] == "schedule"

    def test_envelope_shape(self):
        env = Envelope[dict](success=True, data={"a": 1}).model_dump()
        assert env == {"success": True, "data": {"a": 1}, "error": None}


class TestExtractionResponse:

    def test_string_ambiguities(self):
        resp = ExtractionResponse.model_validate({"ambiguous": ["issueDate", "  "]})
        assert resp.ambiguous == [Ambiguity(field="issueDate")]

    def test_partial_ambiguity_entries(self):
        resp = ExtractionResponse.model_validate({
            "ambiguous": [
                {"field": "totalAmount", "reason": None, "question": 5},
                {"question": "Who?"},
                ["issueDate"],
            ],
        })
        assert resp.ambiguous == [Ambiguity(field="totalAmount", question="5")]

    def test_model_instances_kept(self):
        entry = Ambiguity(field="issueDate", reason="vague")
        assert ExtractionResponse(ambiguous=[entry]).ambiguous == [entry]

    def test_non_list_shapes(self):
        resp = ExtractionResponse.model_validate(
            {"extracted": ["not", "a", "map"], "missing": "plaintiffPhone", "ambiguous": None}
        )
        assert resp.extracted == {}
        assert resp.missing == []
        assert resp.ambiguous == []

"""Tests for writway/claims/questions.py: the ordered question table."""

from writway.claims.questions import (
    FIELD_QUESTIONS,
    all_field_paths,
    get_question,
    required_field_paths,
)


class TestQuestionTable:

    def test_twenty_one_questions(self):
        assert len(FIELD_QUESTIONS) == 21

    def test_section_order(self):
        sections = []
        for path in all_field_paths():
            section = path.split(".")[0]
            if section not in sections:
                sections.append(section)
        assert sections == ["eligibility", "plaintiff", "defendants", "amount", "remedy"]

    def test_first_question(self):
        assert FIELD_QUESTIONS[0].field == "eligibility.totalAmount"

    def test_remedy_questions_optional(self):
        optional = [q.field for q in FIELD_QUESTIONS if not q.required]
        assert optional == ["remedy.payMoney", "remedy.returnProperty", "remedy.performObligation"]

    def test_required_count(self):
        assert len(required_field_paths()) == 18

    def test_unique_ids_and_fields(self):
        assert len({q.question_id for q in FIELD_QUESTIONS}) == 21
        assert len(set(all_field_paths())) == 21

    def test_select_questions_have_options(self):
        for q in FIELD_QUESTIONS:
            if q.type == "select":
                assert q.options


class TestDescriptor:

    def test_claim_type_descriptor(self):
        descriptor = get_question("eligibility.claimType").to_descriptor()
        assert descriptor.field == "eligibility.claimType"
        assert descriptor.type == "select"
        assert {o.value for o in descriptor.options} == {"money", "property", "damages"}

    def test_unknown_field(self):
        assert get_question("plaintiff.favouriteColour") is None

    def test_descriptor_serializes_camel_case(self):
        data = get_question("plaintiff.fullName").to_descriptor().model_dump(by_alias=True)
        assert set(data) == {"id", "field", "type", "label", "description", "required", "options"}

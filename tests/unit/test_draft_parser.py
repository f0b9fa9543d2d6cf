"""Tests for writway/claims/draft_parser.py: parsing the drafting reply."""

from writway.claims.draft_parser import UNKNOWN_CLAIM_TYPE, parse_draft, split_sections


WELL_FORMED = """### CLAIM TYPE AND LEGAL BASIS
Claim Type: Breach of contract
Legal Basis: The defendant accepted a deposit and failed to perform the work.

### FORM 7A
PLAINTIFF'S CLAIM
Reasons for claim: see Schedule "A".

### SCHEDULE A
1. On March 1, 2024 the plaintiff paid a deposit.
2. The defendant never started the work.

### WARNINGS
None
"""


class TestSplitSections:

    def test_all_sections(self):
        sections = split_sections(WELL_FORMED)
        assert set(sections) == {"claim", "form7a", "schedule_a", "warnings"}
        assert sections["form7a"].startswith("PLAINTIFF'S CLAIM")

    def test_first_occurrence_wins(self):
        content = "## Form 7A\nfirst\n## Form 7A\nsecond\n## Warnings\nw"
        sections = split_sections(content)
        assert "first" in sections["form7a"]
        assert "second" in sections["form7a"]


class TestParseDraft:

    def test_well_formed(self):
        drafted = parse_draft(WELL_FORMED)
        assert drafted.claim_type == "Breach of contract"
        assert drafted.legal_bases.startswith("The defendant accepted")
        assert drafted.form7a_text.startswith("PLAINTIFF'S CLAIM")
        assert drafted.schedule_a_text.startswith("1. On March 1")
        assert drafted.warnings is None

    def test_bold_headings(self):
        content = (
            "**Claim Type and Legal Basis**\nClaim Type: Unpaid invoice\n\n"
            "**Form 7A**\nForm body\n\n"
            '**Schedule "A"**\n1. Facts\n\n'
            "**Warnings**\nThe claim may be out of time."
        )
        drafted = parse_draft(content)
        assert drafted.claim_type == "Unpaid invoice"
        assert drafted.form7a_text == "Form body"
        assert drafted.schedule_a_text == "1. Facts"
        assert drafted.warnings == "The claim may be out of time."

    def test_no_headings_falls_back(self):
        content = "Claim Type: Property damage\nHere is your Form 7A draft text."
        drafted = parse_draft(content)
        assert drafted.claim_type == "Property damage"
        assert drafted.form7a_text == content
        assert drafted.schedule_a_text == ""

    def test_unknown_claim_type(self):
        drafted = parse_draft("Nothing useful")
        assert drafted.claim_type == UNKNOWN_CLAIM_TYPE
        assert drafted.form7a_text == ""
        assert drafted.legal_bases is None

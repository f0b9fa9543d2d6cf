"""
Claim form data models.

A claim is assembled section by section (eligibility, plaintiff,
defendants, claim details, amount, remedy, evidence). Every field is
optional until the questionnaire completes. Wire payloads use camelCase.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


ClaimType = Literal["money", "property", "damages"]
FilingType = Literal["individual", "business", "organization"]
DefendantType = Literal["individual", "business", "corporation"]


class ClaimSection(BaseModel):
    """Base for claim sections: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Eligibility(ClaimSection):
    """Step 1: does the claim belong in Small Claims Court."""

    total_amount: str | None = None
    is_amount_under_35000: bool | None = Field(default=None, alias="isAmountUnder35000")
    is_based_in_ontario: bool | None = None
    issue_date: str | None = None
    claim_type: ClaimType | None = None
    qualifies: bool | None = None


class Representative(ClaimSection):
    name: str | None = None
    business_name: str | None = None
    address: str | None = None
    contact: str | None = None


class Plaintiff(ClaimSection):
    """Step 2: the party making the claim."""

    full_name: str | None = None
    filing_type: FilingType | None = None
    address: str | None = None
    city: str | None = None
    province: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    email: str | None = None
    has_representative: bool | None = None
    representative: Representative | None = None


class Defendant(ClaimSection):
    full_name: str
    type: DefendantType
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    registered_business_name: str | None = None


class Defendants(ClaimSection):
    """Step 3: who is being sued."""

    count: int | None = Field(default=None, ge=1)
    defendants: list[Defendant] | None = None


class ClaimDetails(ClaimSection):
    """Step 4: what happened."""

    description: str | None = None
    issue_start_date: str | None = None
    location: str | None = None
    agreement: str | None = None
    defendant_action: str | None = None
    asked_to_resolve: bool | None = None
    response: str | None = None
    partial_payments: bool | None = None
    partial_payment_details: str | None = None


class Amount(ClaimSection):
    """Step 5: amounts claimed. Amounts stay strings exactly as entered."""

    principal_amount: str | None = None
    claiming_interest: bool | None = None
    interest_rate: str | None = None
    interest_date: str | None = None
    claiming_costs: bool | None = None
    costs_amount: str | None = None
    claiming_damages: bool | None = None
    damages_details: str | None = None
    total_amount: str | None = None


class Remedy(ClaimSection):
    """Step 6: what the court is asked to order."""

    pay_money: bool | None = None
    return_property: bool | None = None
    perform_obligation: bool | None = None
    interest_and_costs: bool | None = None


class Evidence(ClaimSection):
    """Step 7: supporting facts."""

    documents: str | None = None
    has_witnesses: bool | None = None
    witness_details: str | None = None
    evidence_description: str | None = None
    timeline: str | None = None


class ClaimFormData(ClaimSection):
    """The full claim, filled incrementally by extraction and Q&A."""

    eligibility: Eligibility | None = None
    plaintiff: Plaintiff | None = None
    defendants: Defendants | None = None
    claim_details: ClaimDetails | None = None
    amount: Amount | None = None
    remedy: Remedy | None = None
    evidence: Evidence | None = None

    def to_payload(self) -> dict[str, Any]:
        """camelCase dict with unset fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)


SECTION_NAMES: tuple[str, ...] = (
    "eligibility",
    "plaintiff",
    "defendants",
    "claimDetails",
    "amount",
    "remedy",
    "evidence",
)


def has_value(value: Any) -> bool:
    """
    True when a field counts as answered.

    None and empty or whitespace-only strings are unanswered. Booleans
    (including False) and numbers (including 0) always count.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def get_field_value(claim_data: ClaimFormData | dict[str, Any], field_path: str) -> Any:
    """Look up ``section.field`` in a claim model or camelCase dict."""
    payload = (
        claim_data.to_payload()
        if isinstance(claim_data, ClaimFormData)
        else claim_data or {}
    )
    section, _, field = field_path.partition(".")
    section_data = payload.get(section)
    if not isinstance(section_data, dict):
        return None
    return section_data.get(field)

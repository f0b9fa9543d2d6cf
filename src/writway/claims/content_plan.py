"""
Format-independent content plan for the statement of claim.

The PDF and Word writers both consume the block list built here, so the two
outputs always carry the same content in the same order:
header, plaintiff, defendant(s), statement of claim, amount table, remedy
list, evidence, footer.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Literal

from writway.models.claim import ClaimFormData, has_value


BlockKind = Literal[
    "title",
    "subtitle",
    "heading",
    "subheading",
    "line",
    "paragraph",
    "table",
    "bullets",
    "page_break",
    "footer",
]

STATEMENT_PLACEHOLDER = "[Describe what happened]"

FILING_TYPE_LABELS = {
    "individual": "Individual",
    "business": "Business",
    "organization": "Organization",
}
DEFENDANT_TYPE_LABELS = {
    "individual": "Individual",
    "business": "Business",
    "corporation": "Corporation",
}
CLAIM_TYPE_LABELS = {
    "money": "Money owed",
    "property": "Return of property",
    "damages": "Damages for a loss",
}
REMEDY_LABELS = (
    ("payMoney", "Payment of money"),
    ("returnProperty", "Return of property"),
    ("performObligation", "Performance of an obligation"),
    ("interestAndCosts", "Interest and costs"),
)


@dataclass(frozen=True)
class Block:
    """One renderable unit of the document."""

    kind: BlockKind
    text: str = ""
    rows: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    items: tuple[str, ...] = field(default_factory=tuple)


def money(value: Any) -> str:
    """Prefix the stored amount with '$', without reformatting it."""
    return f"${value}"


def yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def _looks_numeric(value: Any) -> bool:
    try:
        float(str(value).replace(",", ""))
    except ValueError:
        return False
    return True


def _lines(pairs: list[tuple[str, Any]]) -> list[Block]:
    return [Block("line", f"{label}: {value}") for label, value in pairs if has_value(value)]


def _join(*parts: Any) -> str:
    return ", ".join(str(p).strip() for p in parts if has_value(p))


def _header(claim: dict[str, Any]) -> list[Block]:
    blocks = [
        Block("title", "ONTARIO"),
        Block("subtitle", "Superior Court of Justice - Small Claims Court"),
        Block("title", "PLAINTIFF'S CLAIM"),
        Block("subtitle", "Form 7A"),
    ]
    eligibility = claim.get("eligibility")
    if eligibility is not None:
        claim_type = eligibility.get("claimType")
        blocks += _lines([
            ("Nature of claim", CLAIM_TYPE_LABELS.get(claim_type, claim_type)),
            ("Date the issue arose", eligibility.get("issueDate")),
        ])
    return blocks


def _plaintiff(plaintiff: dict[str, Any]) -> list[Block]:
    filing_type = plaintiff.get("filingType")
    blocks = [Block("heading", "PLAINTIFF NO. 1")]
    blocks += _lines([
        ("Full name", plaintiff.get("fullName")),
        ("Filing as", FILING_TYPE_LABELS.get(filing_type, filing_type)),
        ("Address", _join(plaintiff.get("address"), plaintiff.get("city"), plaintiff.get("province"))),
        ("Postal code", plaintiff.get("postalCode")),
        ("Phone", plaintiff.get("phone")),
        ("Email", plaintiff.get("email")),
    ])
    representative = plaintiff.get("representative") or {}
    if plaintiff.get("hasRepresentative") and any(has_value(v) for v in representative.values()):
        blocks.append(Block("subheading", "Representative"))
        blocks += _lines([
            ("Name", representative.get("name")),
            ("Business name", representative.get("businessName")),
            ("Address", representative.get("address")),
            ("Contact", representative.get("contact")),
        ])
    return blocks


def _defendants(section: dict[str, Any]) -> list[Block]:
    blocks = [Block("heading", "DEFENDANT(S)")]
    defendants = section.get("defendants") or []
    if not defendants:
        return blocks + _lines([("Number of defendants", section.get("count"))])

    for idx, defendant in enumerate(defendants, start=1):
        defendant_type = defendant.get("type")
        blocks.append(Block("subheading", f"Defendant No. {idx}"))
        blocks += _lines([
            ("Full name", defendant.get("fullName")),
            ("Type", DEFENDANT_TYPE_LABELS.get(defendant_type, defendant_type)),
            ("Operating as", defendant.get("registeredBusinessName")),
            ("Address", defendant.get("address")),
            ("Phone", defendant.get("phone")),
            ("Email", defendant.get("email")),
        ])
    return blocks


def _statement(claim: dict[str, Any], initial_description: str | None) -> list[Block]:
    details = claim.get("claimDetails")
    body = initial_description
    if not has_value(body) and details is not None:
        body = details.get("description")
    if not has_value(body):
        body = STATEMENT_PLACEHOLDER

    blocks = [
        Block("heading", "REASONS FOR CLAIM AND DETAILS"),
        Block("paragraph", body.strip()),
    ]
    if details is not None:
        asked = details.get("askedToResolve")
        partial = details.get("partialPayments")
        blocks += _lines([
            ("Issue start date", details.get("issueStartDate")),
            ("Location", details.get("location")),
            ("Agreement", details.get("agreement")),
            ("What the defendant did", details.get("defendantAction")),
            ("Asked the defendant to resolve", yes_no(asked) if asked is not None else None),
            ("Defendant's response", details.get("response")),
            ("Partial payments received", yes_no(partial) if partial is not None else None),
            ("Partial payment details", details.get("partialPaymentDetails")),
        ])
    return blocks


def _amount(amount: dict[str, Any]) -> list[Block]:
    rows: list[tuple[str, str]] = []
    if has_value(amount.get("principalAmount")):
        rows.append(("Principal amount", money(amount["principalAmount"])))
    if has_value(amount.get("claimingInterest")):
        rows.append(("Interest claimed", yes_no(amount["claimingInterest"])))
    if has_value(amount.get("interestRate")):
        rows.append(("Interest rate", f"{amount['interestRate']}%"))
    if has_value(amount.get("interestDate")):
        rows.append(("Interest from", str(amount["interestDate"])))
    if has_value(amount.get("claimingCosts")):
        rows.append(("Costs claimed", yes_no(amount["claimingCosts"])))
    if has_value(amount.get("costsAmount")):
        rows.append(("Costs", money(amount["costsAmount"])))
    if has_value(amount.get("claimingDamages")):
        rows.append(("Damages claimed", yes_no(amount["claimingDamages"])))
    damages = amount.get("damagesDetails")
    if has_value(damages):
        rows.append(("Damages", money(damages) if _looks_numeric(damages) else str(damages)))
    if has_value(amount.get("totalAmount")):
        rows.append(("Total amount claimed", money(amount["totalAmount"])))

    blocks = [Block("heading", "AMOUNT OF CLAIM")]
    if rows:
        blocks.append(Block("table", rows=tuple(rows)))
    return blocks


def _remedy(remedy: dict[str, Any]) -> list[Block]:
    items = tuple(label for key, label in REMEDY_LABELS if remedy.get(key) is True)
    blocks = [Block("heading", "THE PLAINTIFF ASKS THE COURT TO ORDER")]
    if items:
        blocks.append(Block("bullets", items=items))
    else:
        blocks.append(Block("line", "No remedy selected"))
    return blocks


def _evidence(evidence: dict[str, Any]) -> list[Block]:
    witnesses = evidence.get("hasWitnesses")
    blocks = [Block("heading", "SUPPORTING EVIDENCE")]
    blocks += _lines([
        ("Documents", evidence.get("documents")),
        ("Witnesses", yes_no(witnesses) if witnesses is not None else None),
        ("Witness details", evidence.get("witnessDetails")),
        ("Evidence", evidence.get("evidenceDescription")),
        ("Timeline", evidence.get("timeline")),
    ])
    return blocks


def build_content_plan(
    claim_data: ClaimFormData | dict[str, Any],
    initial_description: str | None = None,
    generated_on: date | None = None,
) -> list[Block]:
    """Build the ordered block list for one claim."""
    claim = (
        claim_data.to_payload()
        if isinstance(claim_data, ClaimFormData)
        else dict(claim_data or {})
    )
    blocks = _header(claim)
    if claim.get("plaintiff") is not None:
        blocks += _plaintiff(claim["plaintiff"])
    if claim.get("defendants") is not None:
        blocks += _defendants(claim["defendants"])
    blocks += _statement(claim, initial_description)
    if claim.get("amount") is not None:
        blocks += _amount(claim["amount"])
    if claim.get("remedy") is not None:
        blocks += _remedy(claim["remedy"])
    if claim.get("evidence") is not None:
        blocks += _evidence(claim["evidence"])
    blocks.append(_footer(generated_on))
    return blocks


def _footer(generated_on: date | None) -> Block:
    generated_on = generated_on or datetime.now(timezone.utc).date()
    return Block("footer", f"Generated on {generated_on.isoformat()} by WritWay")


def _is_heading_line(line: str) -> bool:
    return line == line.upper() and any(c.isalpha() for c in line)


def build_draft_plan(
    form7a_text: str,
    schedule_a_text: str,
    generated_on: date | None = None,
) -> list[Block]:
    """
    Block list for LLM-drafted Form 7A and Schedule "A" text.

    All-caps lines of the form become subheadings. Schedule "A" starts on
    its own page under a centered title.
    """
    blocks = []
    for line in form7a_text.splitlines():
        line = line.strip()
        if line:
            blocks.append(Block("subheading" if _is_heading_line(line) else "line", line))

    blocks.append(Block("page_break"))
    blocks.append(Block("title", 'SCHEDULE "A"'))
    blocks.append(Block("subtitle", "STATEMENT OF FACTS"))
    blocks += [Block("line", line.strip()) for line in schedule_a_text.splitlines() if line.strip()]
    blocks.append(_footer(generated_on))
    return blocks


def plan_to_text(blocks: list[Block]) -> str:
    """Plain-text rendering of a plan, used for previews and logging."""
    out: list[str] = []
    for block in blocks:
        if block.kind == "table":
            out += [f"{label}: {value}" for label, value in block.rows]
        elif block.kind == "bullets":
            out += [f"- {item}" for item in block.items]
        elif block.kind == "page_break":
            out.append("")
        else:
            out.append(block.text)
    return "\n".join(out)

"""
Prompt templates for claim extraction, drafting and clarifying questions.
"""

from typing import Any


EXTRACTION_SYSTEM_PROMPT = """You are a legal assistant extracting structured data from claim descriptions for Ontario Small Claims Court.

Extract ALL information you can find in the description.

ELIGIBILITY:
- totalAmount: total dollar amount claimed (number)
- isAmountUnder35000: true if the amount is $35,000 or less
- isBasedInOntario: true if the transaction or event happened in Ontario
- issueDate: date the problem occurred (YYYY-MM-DD)
- claimType: "money" (payment owed), "property" (return of property) or "damages" (losses)

PLAINTIFF (the person making the claim, often "I"):
- plaintiffName, filingType ("individual", "business" or "organization")
- plaintiffAddress, plaintiffCity, plaintiffProvince, plaintiffPostalCode
- plaintiffPhone, plaintiffEmail
- hasRepresentative, representativeName, representativeBusinessName,
  representativeAddress, representativeContact

DEFENDANT (the person or business being sued):
- defendantCount: number of defendants (usually 1)
- defendants: array of {fullName, type ("individual", "business" or "corporation"),
  address, phone, email, registeredBusinessName}

CLAIM DETAILS:
- issueStartDate (YYYY-MM-DD), location, agreement, defendantAction
- askedToResolve: true if the plaintiff tried to resolve it first
- response: what the defendant said, or "No response"
- partialPayments, partialPaymentDetails

AMOUNT:
- principalAmount, totalAmount, damagesAmount, interestRate, interestDate, costsAmount
- claimingInterest, claimingCosts, claimingDamages (booleans)

REMEDY:
- payMoney, returnProperty, performObligation, interestAndCosts (booleans)

EVIDENCE:
- documents: documents mentioned (contracts, receipts, emails, ...)
- hasWitnesses, witnessDetails, evidenceDescription, timeline

Return a JSON object with:
- "extracted": every field you found
- "missing": field names that are completely absent
- "ambiguous": array of {"field", "reason", "question"} for fields needing clarification

Convert dates to YYYY-MM-DD and amounts to numbers."""


EXTRACTION_USER_PROMPT = """Extract ALL data from this claim description:

{description}"""


QUESTION_SYSTEM_PROMPT = """You are a legal assistant writing clear, concise questions for a claim form.
Write a single question that clarifies the missing field. Return JSON with:
- "question": the question text
- "type": one of "text", "number", "date", "select", "boolean", "textarea"
- "options": array of strings when type is "select"
Keep the question simple and friendly."""


QUESTION_USER_PROMPT = """Field: {field}
Context: {context}
Original description: {description}"""


# Section markers the drafting reply must use; the parser splits on them
CLAIM_TYPE_MARKER = "### CLAIM TYPE AND LEGAL BASIS"
FORM_7A_MARKER = "### FORM 7A"
SCHEDULE_A_MARKER = "### SCHEDULE A"
WARNINGS_MARKER = "### WARNINGS"


DRAFTING_SYSTEM_PROMPT = f"""You are a legal assistant preparing Ontario Small Claims Court filings.

From the claimant's intake answers:
1. Identify the type of claim (e.g. breach of contract, unpaid invoice, property damage).
2. Draft Form 7A (Plaintiff's Claim) using the claimant's data.
3. Draft Schedule "A" (Statement of Facts) in numbered paragraphs.
4. List warnings if the case may not qualify.

Write plain, factual, professional English. Use bracketed placeholders such
as [Insert date] where information is missing. Reference Schedule "A" in the
Form 7A reasons for claim.

Structure the reply EXACTLY with these headings, each on its own line:

{CLAIM_TYPE_MARKER}
Claim Type: <type>
Legal Basis: <one paragraph>

{FORM_7A_MARKER}
<Form 7A draft>

{SCHEDULE_A_MARKER}
<numbered paragraphs>

{WARNINGS_MARKER}
<warnings, or "None">

Add a warning when the claim exceeds $35,000, did not arise in Ontario, or
the issue is older than two years."""


DRAFTING_USER_PROMPT = """Below are the claimant's answers to the intake steps.

{summary}

Generate the claim type and legal basis, the Form 7A draft, the Schedule "A"
statement of facts and any warnings."""


def _yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def _or(value: Any, default: str = "Not provided") -> str:
    return str(value) if value not in (None, "") else default


def format_claim_summary(claim: dict[str, Any], initial_description: str | None = None) -> str:
    """Render the camelCase claim payload as the step-by-step intake summary."""
    lines: list[str] = []

    if initial_description:
        lines += ["Initial description:", initial_description, ""]

    eligibility = claim.get("eligibility")
    if eligibility is not None:
        lines += [
            "Step 1 - Eligibility Check:",
            f"- Total Amount: {_or(eligibility.get('totalAmount'))}",
            f"- Amount under $35,000: {_yes_no(eligibility.get('isAmountUnder35000'))}",
            f"- Based in Ontario: {_yes_no(eligibility.get('isBasedInOntario'))}",
            f"- Issue Date: {_or(eligibility.get('issueDate'))}",
            f"- Claim Type: {_or(eligibility.get('claimType'))}",
            "",
        ]

    plaintiff = claim.get("plaintiff")
    if plaintiff is not None:
        lines += ["Step 2 - Plaintiff Information:"]
        for label, key in (
            ("Full Name", "fullName"),
            ("Filing Type", "filingType"),
            ("Address", "address"),
            ("City", "city"),
            ("Province", "province"),
            ("Postal Code", "postalCode"),
            ("Phone", "phone"),
            ("Email", "email"),
        ):
            lines.append(f"- {label}: {_or(plaintiff.get(key))}")
        representative = plaintiff.get("representative")
        if plaintiff.get("hasRepresentative") and representative:
            details = ", ".join(f"{k}: {v}" for k, v in representative.items() if v)
            lines.append(f"- Representative: {details}")
        lines.append("")

    defendants = claim.get("defendants")
    if defendants is not None:
        lines += [
            "Step 3 - Defendant Information:",
            f"- Number of Defendants: {defendants.get('count') or 0}",
        ]
        for idx, defendant in enumerate(defendants.get("defendants") or [], start=1):
            details = ", ".join(f"{k}: {v}" for k, v in defendant.items() if v)
            lines.append(f"- Defendant {idx}: {details}")
        lines.append("")

    details = claim.get("claimDetails")
    if details is not None:
        lines += [
            "Step 4 - Details of the Claim:",
            f"- Description: {_or(details.get('description'))}",
            f"- Issue Start Date: {_or(details.get('issueStartDate'))}",
            f"- Location: {_or(details.get('location'))}",
            f"- Agreement: {_or(details.get('agreement'))}",
            f"- Defendant Action: {_or(details.get('defendantAction'))}",
            f"- Asked to Resolve: {_yes_no(details.get('askedToResolve'))}",
        ]
        if details.get("response"):
            lines.append(f"- Response: {details['response']}")
        lines.append(f"- Partial Payments: {_yes_no(details.get('partialPayments'))}")
        if details.get("partialPaymentDetails"):
            lines.append(f"- Partial Payment Details: {details['partialPaymentDetails']}")
        lines.append("")

    amount = claim.get("amount")
    if amount is not None:
        lines += [
            "Step 5 - Amount of Claim:",
            f"- Principal Amount: {_or(amount.get('principalAmount'), '0.00')}",
            f"- Claiming Interest: {_yes_no(amount.get('claimingInterest'))}",
        ]
        if amount.get("interestRate"):
            lines.append(f"- Interest Rate: {amount['interestRate']}%")
        if amount.get("interestDate"):
            lines.append(f"- Interest Date: {amount['interestDate']}")
        lines.append(f"- Claiming Costs: {_yes_no(amount.get('claimingCosts'))}")
        if amount.get("costsAmount"):
            lines.append(f"- Costs Amount: {amount['costsAmount']}")
        lines.append(f"- Claiming Damages: {_yes_no(amount.get('claimingDamages'))}")
        if amount.get("damagesDetails"):
            lines.append(f"- Damages Amount: {amount['damagesDetails']}")
        lines += [f"- Total Amount: {_or(amount.get('totalAmount'), '0.00')}", ""]

    remedy = claim.get("remedy")
    if remedy is not None:
        lines += [
            "Step 6 - Remedy Requested:",
            f"- Pay Money: {_yes_no(remedy.get('payMoney'))}",
            f"- Return Property: {_yes_no(remedy.get('returnProperty'))}",
            f"- Perform Obligation: {_yes_no(remedy.get('performObligation'))}",
            f"- Interest and Costs: {_yes_no(remedy.get('interestAndCosts'))}",
            "",
        ]

    evidence = claim.get("evidence")
    if evidence is not None:
        lines += [
            "Step 7 - Supporting Facts & Evidence:",
            f"- Documents: {_or(evidence.get('documents'))}",
            f"- Has Witnesses: {_yes_no(evidence.get('hasWitnesses'))}",
        ]
        for label, key in (
            ("Witness Details", "witnessDetails"),
            ("Evidence Description", "evidenceDescription"),
            ("Timeline", "timeline"),
        ):
            if evidence.get(key):
                lines.append(f"- {label}: {evidence[key]}")

    return "\n".join(lines).rstrip()

"""
Normalization of LLM extraction payloads into the claim form structure.

Three passes, each usable on its own:

1. ``flatten_extraction``: the model sometimes groups fields under section
   keys ("ELIGIBILITY", "PLAINTIFF", ...). Collapse them into one flat map.
2. ``map_extraction``: canonical flat keys to the nested camelCase claim
   sections. Pure; only uses what the model returned.
3. ``infer_from_description``: keyword heuristics over the description for
   fields the model left out. Never overrides a mapped value and reports
   every path it fills.
"""

import re
from typing import Any, Callable

from writway.models.claim import SECTION_NAMES, has_value


SECTION_KEYS: tuple[str, ...] = (
    "ELIGIBILITY",
    "PLAINTIFF",
    "DEFENDANT",
    "CLAIM DETAILS",
    "AMOUNT",
    "REMEDY",
    "EVIDENCE",
)
# Any of these marks a grouped payload
GROUP_MARKERS: tuple[str, ...] = ("ELIGIBILITY", "PLAINTIFF", "DEFENDANT")

CLAIM_TYPES = ("money", "property", "damages")
FILING_TYPES = ("individual", "business", "organization")
DEFENDANT_TYPES = ("individual", "business", "corporation")

DEFAULT_AMOUNT_LIMIT = 35000.0


# =============================================================================
# Pass 1: flatten
# =============================================================================


def flatten_extraction(raw: dict[str, Any] | None) -> dict[str, Any]:
    """Collapse section-grouped payloads into a single flat key space."""
    if not raw:
        return {}
    if not any(marker in raw for marker in GROUP_MARKERS):
        return dict(raw)

    flat: dict[str, Any] = {}
    for key in SECTION_KEYS:
        group = raw.get(key)
        if isinstance(group, dict):
            flat.update(group)
    # Top-level keys outside any group win
    flat.update({k: v for k, v in raw.items() if k not in SECTION_KEYS})
    return flat


# =============================================================================
# Pass 2: map
# =============================================================================


def _as_text(value: Any) -> str:
    """Stringify a scalar the way it was given; whole floats lose the '.0'."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


AMOUNT_PREFIX = re.compile(r"\s*\$?\s*(\d[\d,]*(?:\.\d+)?)")


def _parse_amount(value: Any) -> float | None:
    """Leading number of an amount; '5000 plus interest' reads as 5000."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return None
    match = AMOUNT_PREFIX.match(value)
    if not match:
        return None
    return float(match.group(1).replace(",", ""))


def _text(value: Any) -> str | None:
    """String field: scalars stringified, lists joined, mappings dropped."""
    if value is None or isinstance(value, dict):
        return None
    if isinstance(value, (list, tuple)):
        parts = [_text(item) for item in value]
        value = ", ".join(p for p in parts if p)
    text = _as_text(value)
    return text if text.strip() else None


TRUE_WORDS = ("true", "yes", "y")
FALSE_WORDS = ("false", "no", "n")


def _flag(value: Any) -> bool | None:
    """Boolean field: real bools and yes/no words, anything else dropped."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
    return None


def _choice(allowed: tuple[str, ...]) -> Callable[[Any], Any]:
    def convert(value: Any) -> Any:
        if isinstance(value, str) and value.strip().lower() in allowed:
            return value.strip().lower()
        return None

    return convert


# (source key, target path, converter). Converters return None to skip.
DIRECT_FIELDS: tuple[tuple[str, str, Callable[[Any], Any]], ...] = (
    ("claimType", "eligibility.claimType", _choice(CLAIM_TYPES)),
    ("isBasedInOntario", "eligibility.isBasedInOntario", _flag),
    # Plaintiff
    ("plaintiffName", "plaintiff.fullName", _text),
    ("filingType", "plaintiff.filingType", _choice(FILING_TYPES)),
    ("plaintiffAddress", "plaintiff.address", _text),
    ("plaintiffCity", "plaintiff.city", _text),
    ("plaintiffProvince", "plaintiff.province", _text),
    ("plaintiffPostalCode", "plaintiff.postalCode", _text),
    ("plaintiffPhone", "plaintiff.phone", _text),
    ("plaintiffEmail", "plaintiff.email", _text),
    ("hasRepresentative", "plaintiff.hasRepresentative", _flag),
    # Claim details
    ("location", "claimDetails.location", _text),
    ("agreement", "claimDetails.agreement", _text),
    ("defendantAction", "claimDetails.defendantAction", _text),
    ("askedToResolve", "claimDetails.askedToResolve", _flag),
    ("partialPayments", "claimDetails.partialPayments", _flag),
    ("partialPaymentDetails", "claimDetails.partialPaymentDetails", _text),
    # Amount
    ("principalAmount", "amount.principalAmount", _text),
    ("damagesAmount", "amount.damagesDetails", _text),
    ("claimingInterest", "amount.claimingInterest", _flag),
    ("interestRate", "amount.interestRate", _text),
    ("interestDate", "amount.interestDate", _text),
    ("claimingCosts", "amount.claimingCosts", _flag),
    ("costsAmount", "amount.costsAmount", _text),
    ("claimingDamages", "amount.claimingDamages", _flag),
    # Remedy
    ("payMoney", "remedy.payMoney", _flag),
    ("returnProperty", "remedy.returnProperty", _flag),
    ("performObligation", "remedy.performObligation", _flag),
    ("interestAndCosts", "remedy.interestAndCosts", _flag),
    # Evidence
    ("documents", "evidence.documents", _text),
    ("hasWitnesses", "evidence.hasWitnesses", _flag),
    ("witnessDetails", "evidence.witnessDetails", _text),
    ("evidenceDescription", "evidence.evidenceDescription", _text),
    ("timeline", "evidence.timeline", _text),
)

# Text fields kept on each defendant record
DEFENDANT_FIELDS = ("fullName", "address", "phone", "email", "registeredBusinessName")
REPRESENTATIVE_FIELDS = (
    ("representativeName", "name"),
    ("representativeBusinessName", "businessName"),
    ("representativeAddress", "address"),
    ("representativeContact", "contact"),
)


def empty_claim() -> dict[str, dict[str, Any]]:
    return {section: {} for section in SECTION_NAMES}


def _set(claim: dict[str, dict[str, Any]], path: str, value: Any) -> None:
    section, _, field = path.partition(".")
    claim[section][field] = value


def _get(claim: dict[str, dict[str, Any]], path: str) -> Any:
    section, _, field = path.partition(".")
    return claim.get(section, {}).get(field)


def _normalize_defendants(items: list[Any]) -> list[dict[str, Any]]:
    defendants = []
    for item in items:
        if isinstance(item, str):
            item = {"fullName": item}
        if not isinstance(item, dict):
            continue
        defendant = {}
        for key in DEFENDANT_FIELDS:
            text = _text(item.get(key))
            if text is not None:
                defendant[key] = text
        if "fullName" not in defendant:
            continue
        defendant["fullName"] = defendant["fullName"].strip()
        defendant["type"] = _choice(DEFENDANT_TYPES)(item.get("type")) or "individual"
        defendants.append(defendant)
    return defendants


def _defendant_count(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return count if count >= 1 else None


def map_extraction(
    flat: dict[str, Any],
    amount_limit: float = DEFAULT_AMOUNT_LIMIT,
) -> dict[str, dict[str, Any]]:
    """
    Map a flat extraction payload onto the nested claim sections.

    Every value is coerced to its field's type or dropped, so the result
    always validates as ``ClaimFormData``.
    """
    claim = empty_claim()

    for source, target, convert in DIRECT_FIELDS:
        value = flat.get(source)
        if value is None:
            continue
        converted = convert(value)
        if converted is not None:
            _set(claim, target, converted)

    # Total amount feeds eligibility and the amount section
    total = _text(flat.get("totalAmount"))
    if total is not None:
        claim["eligibility"]["totalAmount"] = total
        claim["amount"]["totalAmount"] = total
        if "principalAmount" not in claim["amount"]:
            claim["amount"]["principalAmount"] = total

        parsed = _parse_amount(flat["totalAmount"])
        if parsed is not None:
            claim["eligibility"]["isAmountUnder35000"] = parsed <= amount_limit
    under_limit = _flag(flat.get("isAmountUnder35000"))
    if under_limit is not None:
        claim["eligibility"]["isAmountUnder35000"] = under_limit

    if "isBasedInOntario" not in claim["eligibility"]:
        location = " ".join(
            _text(flat.get(key)) or "" for key in ("location", "plaintiffProvince")
        )
        if "ontario" in location.lower():
            claim["eligibility"]["isBasedInOntario"] = True

    # Issue date and start date back each other up
    issue_date = _text(flat.get("issueDate"))
    issue_start = _text(flat.get("issueStartDate"))
    if issue_date or issue_start:
        claim["eligibility"]["issueDate"] = issue_date or issue_start
        claim["claimDetails"]["issueStartDate"] = issue_start or issue_date

    response = flat.get("response")
    if response:
        text = None if isinstance(response, bool) else _text(response)
        claim["claimDetails"]["response"] = text or "No response"

    representative = {}
    for source, target in REPRESENTATIVE_FIELDS:
        text = _text(flat.get(source))
        if text is not None:
            representative[target] = text
    if "name" in representative:
        claim["plaintiff"]["representative"] = representative

    defendants = flat.get("defendants")
    defendants = _normalize_defendants(defendants) if isinstance(defendants, list) else []
    if defendants:
        claim["defendants"]["defendants"] = defendants
        claim["defendants"]["count"] = len(defendants)
    else:
        count = _defendant_count(flat.get("defendantCount"))
        if count is not None:
            claim["defendants"]["count"] = count

    return claim


# =============================================================================
# Pass 3: keyword inference
# =============================================================================


# (target path, keywords, value): set value when any keyword appears
KEYWORD_FLAGS: tuple[tuple[str, tuple[str, ...], Any], ...] = (
    ("claimDetails.askedToResolve", ("contacted", "asked", "requested", "sent"), True),
    (
        "claimDetails.response",
        ("no response", "didn't respond", "never responded"),
        "No response",
    ),
    ("amount.claimingInterest", ("interest",), True),
    ("amount.claimingCosts", ("costs", "filing fees"), True),
    ("amount.claimingDamages", ("damage", "lost", "replaced"), True),
)

# First match wins
CLAIM_TYPE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("money", ("money", "paid", "deposit", "refund")),
    ("property", ("property",)),
    ("damages", ("damage", "loss")),
)

DOCUMENT_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Contract/Agreement", ("contract", "agreement")),
    ("Receipts/Invoices", ("receipt", "invoice")),
    ("Emails", ("email",)),
    ("Text messages", ("text",)),
    ("Payment records", ("payment", "e-transfer")),
)

DEFENDANT_NAME_PATTERNS = (
    re.compile(
        r"(?:named|called|contractor|hired|hired a|employed)\s+"
        r"([A-Z][a-z]+\s+[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)"
    ),
    re.compile(r"(?:by|to)\s+([A-Z][a-z]+\s+[A-Z][a-z]+)"),
)
BUSINESS_NAME_PATTERN = re.compile(r"operating\s+as\s+([A-Z][\w&'-]*(?:\s+[A-Z][\w&'-]*)*)")


def _find_defendant(description: str) -> dict[str, Any] | None:
    name = None
    for pattern in DEFENDANT_NAME_PATTERNS:
        match = pattern.search(description)
        if match:
            name = match.group(1)
            break
    if not name:
        return None

    defendant: dict[str, Any] = {"fullName": name, "type": "individual"}
    business = BUSINESS_NAME_PATTERN.search(description)
    if business:
        defendant["type"] = "business"
        defendant["registeredBusinessName"] = business.group(1).strip()
    return defendant


def infer_from_description(
    claim: dict[str, dict[str, Any]],
    description: str,
) -> list[str]:
    """
    Fill fields the model omitted using keyword presence in the description.

    Mutates ``claim`` in place and returns the paths it filled, in the
    order they were inferred.
    """
    text = description.lower()
    inferred: list[str] = []

    def fill(path: str, value: Any) -> None:
        if not has_value(_get(claim, path)):
            _set(claim, path, value)
            inferred.append(path)

    if not has_value(_get(claim, "eligibility.claimType")):
        for claim_type, keywords in CLAIM_TYPE_KEYWORDS:
            if any(k in text for k in keywords):
                fill("eligibility.claimType", claim_type)
                break

    fill("plaintiff.filingType", "individual")

    if not claim["defendants"].get("defendants"):
        defendant = _find_defendant(description)
        if defendant:
            claim["defendants"]["defendants"] = [defendant]
            inferred.append("defendants.defendants")
            fill("defendants.count", 1)

    for path, keywords, value in KEYWORD_FLAGS:
        if any(k in text for k in keywords):
            fill(path, value)

    if "claim" in text and any(k in text for k in ("$", "amount", "paid")):
        fill("remedy.payMoney", True)

    documents = [label for label, keywords in DOCUMENT_KEYWORDS if any(k in text for k in keywords)]
    if documents:
        fill("evidence.documents", ", ".join(documents))

    return inferred


# =============================================================================
# Output
# =============================================================================


def prune_claim(claim: dict[str, Any]) -> dict[str, Any]:
    """Drop unanswered fields and empty sections."""
    pruned: dict[str, Any] = {}
    for section, fields in claim.items():
        if not isinstance(fields, dict):
            continue
        kept = {}
        for key, value in fields.items():
            if isinstance(value, dict):
                value = {k: v for k, v in value.items() if has_value(v)}
                if not value:
                    continue
            if has_value(value):
                kept[key] = value
        if kept:
            pruned[section] = kept
    return pruned

"""
Parser for the LLM drafting reply (claim type, Form 7A, Schedule A, warnings).

The reply is asked to use fixed headings, but models drift: headings may be
bold instead of '#', singular instead of plural, or missing entirely. The
parser takes the first occurrence of each heading and falls back to scanning
the whole reply for the claim type lines.
"""

import re
from dataclasses import dataclass


UNKNOWN_CLAIM_TYPE = "Unknown"

HEADING_PATTERN = re.compile(
    r"^[ \t]*(?:#{1,6}[ \t]*|\*\*)?"
    r"(?P<name>claim type and legal basis|form 7a|schedule[ \t]*[\"']?a[\"']?|warnings?)"
    r"(?:\*\*)?[ \t]*:?[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)
CLAIM_TYPE_PATTERN = re.compile(
    r"Claim Type\s*:\s*(.+?)(?=\s*Legal Basis|\n|$)", re.IGNORECASE
)
LEGAL_BASIS_PATTERN = re.compile(r"Legal Basis\s*:\s*(.+?)(?=\n\s*\n|$)", re.IGNORECASE | re.DOTALL)
EMPTY_WARNINGS = {"", "none", "none.", "n/a", "no warnings", "no warnings."}


@dataclass
class DraftedDocuments:
    """Parsed drafting reply."""

    claim_type: str
    form7a_text: str
    schedule_a_text: str
    legal_bases: str | None = None
    warnings: str | None = None


def _section_key(name: str) -> str:
    name = name.lower()
    if name.startswith("claim type"):
        return "claim"
    if name.startswith("form"):
        return "form7a"
    if name.startswith("schedule"):
        return "schedule_a"
    return "warnings"


def split_sections(content: str) -> dict[str, str]:
    """Split the reply on its first heading of each kind."""
    starts: list[tuple[int, int, str]] = []
    seen: set[str] = set()
    for match in HEADING_PATTERN.finditer(content):
        key = _section_key(match.group("name"))
        if key in seen:
            continue
        seen.add(key)
        starts.append((match.start(), match.end(), key))

    sections: dict[str, str] = {}
    for idx, (_, body_start, key) in enumerate(starts):
        body_end = starts[idx + 1][0] if idx + 1 < len(starts) else len(content)
        sections[key] = content[body_start:body_end].strip()
    return sections


def _parse_claim_type(text: str) -> tuple[str, str | None]:
    claim_type = UNKNOWN_CLAIM_TYPE
    legal_bases = None

    type_match = CLAIM_TYPE_PATTERN.search(text)
    if type_match:
        claim_type = type_match.group(1).strip().strip("*").strip() or UNKNOWN_CLAIM_TYPE

    basis_match = LEGAL_BASIS_PATTERN.search(text)
    if basis_match:
        legal_bases = basis_match.group(1).strip()
    elif type_match:
        remainder = text[type_match.end():].strip()
        # Unlabelled explanation after the claim type line
        if len(remainder) > 20:
            legal_bases = remainder.split("\n\n")[0].strip()

    return claim_type, legal_bases


def parse_draft(content: str) -> DraftedDocuments:
    """Parse the drafting reply into its four parts."""
    sections = split_sections(content)

    claim_text = sections.get("claim")
    if claim_text is None:
        # No heading: look for the labels anywhere before the form
        claim_text = content.split("Form 7A")[0] if "Form 7A" in content else content
    claim_type, legal_bases = _parse_claim_type(claim_text)

    form7a = sections.get("form7a")
    if form7a is None:
        form7a = content.strip() if "form 7a" in content.lower() else ""

    schedule_a = sections.get("schedule_a", "")

    warnings = sections.get("warnings")
    if warnings is not None and warnings.strip().lower() in EMPTY_WARNINGS:
        warnings = None

    return DraftedDocuments(
        claim_type=claim_type,
        legal_bases=legal_bases,
        form7a_text=form7a,
        schedule_a_text=schedule_a,
        warnings=warnings,
    )

"""
Claim intake logic: question table, normalization, content planning.
"""

from writway.claims.content_plan import Block, build_content_plan, build_draft_plan
from writway.claims.draft_parser import DraftedDocuments, parse_draft
from writway.claims.normalizer import (
    flatten_extraction,
    infer_from_description,
    map_extraction,
    prune_claim,
)
from writway.claims.questions import FIELD_QUESTIONS, FieldQuestion

__all__ = [
    "Block",
    "build_content_plan",
    "build_draft_plan",
    "DraftedDocuments",
    "parse_draft",
    "flatten_extraction",
    "infer_from_description",
    "map_extraction",
    "prune_claim",
    "FIELD_QUESTIONS",
    "FieldQuestion",
]

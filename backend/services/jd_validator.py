"""Orchestrator: rule-based job description scoring pipeline.

Pipeline:
1. Posting type normalization (explicit flag, else in-band marker)
2. Mandated-section extraction (preamble/legal boilerplate removed)
3. Lexicon scan of the cleaned text -> warnings
4. Dimension scoring (length, inclusivity, culture, transparency, slop)
5. Aggregation into score, grade and category breakdown

The whole pipeline is a pure function of its inputs.
"""

import logging

from config import settings
from models.schemas.validation_result import DimensionBreakdown, PostingType, ValidationResult
from services import pattern_scanner
from services.aggregator import aggregate
from services.dimension_scorers import (
    count_words,
    score_compensation,
    score_encouragement,
    score_extrovert_bias,
    score_length,
    score_masculine_coded,
    score_red_flags,
    score_slop,
)
from services.mandated_sections import extract_mandated_sections
from services.slop_detector import SlopDetector

logger = logging.getLogger(__name__)


def infer_posting_type(text: str, explicit: PostingType | str | None = None) -> PostingType:
    """Resolve the posting type once, before any scoring.

    An explicit flag always wins; otherwise the internal marker anywhere in
    the text selects ``internal``. Unknown explicit values raise ``ValueError``.
    """
    if explicit is not None:
        return PostingType(explicit)
    if settings.internal_posting_marker.lower() in text.lower():
        return PostingType.INTERNAL
    return PostingType.EXTERNAL


def validate_document(
    text: str,
    posting_type: PostingType | str | None = None,
    slop_detector: SlopDetector | None = None,
) -> ValidationResult:
    """Score a job description against the inclusive-language rubric.

    ``None`` (or any non-string) raises ``TypeError``; the empty string is a
    valid, low-scoring document.
    """
    if not isinstance(text, str):
        raise TypeError(f"validate_document expects str, got {type(text).__name__}")

    # --- Layer 1: Posting type ---
    resolved_type = infer_posting_type(text, posting_type)

    # --- Layer 2: Mandated sections ---
    clean_text, mandated = extract_mandated_sections(text)

    # --- Layer 3: Lexicon scan ---
    warnings = pattern_scanner.scan(clean_text, mandated)

    # --- Layer 4: Dimension scoring ---
    dims = DimensionBreakdown(
        length=score_length(count_words(text)),
        masculine_coded=score_masculine_coded(warnings),
        extrovert_bias=score_extrovert_bias(warnings),
        red_flags=score_red_flags(warnings),
        compensation=score_compensation(text, resolved_type is PostingType.INTERNAL),
        encouragement=score_encouragement(text),
        slop=score_slop(text, slop_detector),
    )

    # --- Layer 5: Aggregation ---
    result = aggregate(dims, warnings, resolved_type)
    logger.debug(
        "Validated document: words=%d warnings=%d mandated=%d score=%d",
        result.word_count, len(warnings), len(mandated), result.score,
    )
    return result

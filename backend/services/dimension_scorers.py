"""Independent scorers, one per rubric dimension.

Each scorer is a pure function returning a ``DimensionResult`` whose
``penalty`` is deducted from a 100-point score. Thresholds and caps are
module constants so tests can refer to them directly.
"""

import math
import re

from models.schemas.dimension_result import (
    CompensationResult,
    EncouragementResult,
    LengthResult,
    SlopResult,
    TermCountResult,
)
from models.schemas.lexicon import LanguageWarning, LexiconCategory
from services.compensation import find_compensation_range, has_compensation
from services.slop_detector import SlopDetector, get_slop_penalty

# Length
IDEAL_MIN_WORDS = 400
IDEAL_MAX_WORDS = 700
SHORT_WORDS_PER_POINT = 20
LONG_WORDS_PER_POINT = 50
SHORT_MAX_PENALTY = 15
LONG_MAX_PENALTY = 10

# Lexicon dimensions
POINTS_PER_TERM = 5
MASCULINE_MAX_PENALTY = 25
EXTROVERT_MAX_PENALTY = 20
RED_FLAG_MAX_PENALTY = 25

# Transparency
COMPENSATION_PENALTY = 10
ENCOURAGEMENT_PENALTY = 5

# Slop
SLOP_WEIGHT = 0.6
SLOP_MAX_PENALTY = 5
SLOP_MAX_ISSUES = 2

# Encouragement phrases are matched inside one sentence or line.
_SENTENCE = r"[^.!?\n]"
ENCOURAGEMENT_PATTERNS: tuple[re.Pattern, ...] = (
    # "If you meet 60-70% of the qualifications" / "60 to 70 percent"
    re.compile(r"\b[5-8]\d\s*%?\s*(?:[-–—]|to)\s*[6-9]\d\s*(?:%|percent)", re.IGNORECASE),
    # "meet most of the qualifications"
    re.compile(
        rf"\bmeet(?:s|ing)?\s+most\b{_SENTENCE}{{0,40}}?\b(?:qualifications?|requirements?|criteria)\b",
        re.IGNORECASE,
    ),
    # "we encourage you to apply", "you are encouraged to apply"
    re.compile(rf"\bencourag(?:e|ed|es|ing)\b{_SENTENCE}{{0,80}}?\bapply", re.IGNORECASE),
    # "don't meet all the qualifications" (qualifier required)
    re.compile(
        rf"\b(?:don['’]?t|do\s+not|doesn['’]?t|does\s+not)\s+meet\s+(?:all|every)\b"
        rf"{_SENTENCE}{{0,40}}?\b(?:qualifications?|requirements?|criteria)\b",
        re.IGNORECASE,
    ),
)


def count_words(text: str) -> int:
    """Whitespace-delimited token count."""
    return len(text.split())


def score_length(word_count: int) -> LengthResult:
    if IDEAL_MIN_WORDS <= word_count <= IDEAL_MAX_WORDS:
        return LengthResult(
            penalty=0,
            max_penalty=SHORT_MAX_PENALTY,
            feedback_line=f"✅ Good length: {word_count} words (ideal: {IDEAL_MIN_WORDS}-{IDEAL_MAX_WORDS})",
            word_count=word_count,
            band="ideal",
        )

    if word_count < IDEAL_MIN_WORDS:
        penalty = min(SHORT_MAX_PENALTY, (IDEAL_MIN_WORDS - word_count) // SHORT_WORDS_PER_POINT)
        return LengthResult(
            penalty=penalty,
            max_penalty=SHORT_MAX_PENALTY,
            feedback_line=f"⚠️ Short: {word_count} words (aim for {IDEAL_MIN_WORDS}-{IDEAL_MAX_WORDS})",
            deduction_line=(
                f"-{penalty} pts: Too short ({word_count} words, aim for {IDEAL_MIN_WORDS}+)"
                if penalty else None
            ),
            word_count=word_count,
            band="short",
        )

    penalty = min(LONG_MAX_PENALTY, (word_count - IDEAL_MAX_WORDS) // LONG_WORDS_PER_POINT)
    return LengthResult(
        penalty=penalty,
        max_penalty=LONG_MAX_PENALTY,
        feedback_line=f"⚠️ Long: {word_count} words (aim for {IDEAL_MIN_WORDS}-{IDEAL_MAX_WORDS})",
        deduction_line=(
            f"-{penalty} pts: Too long ({word_count} words, aim for ≤{IDEAL_MAX_WORDS})"
            if penalty else None
        ),
        word_count=word_count,
        band="long",
    )


def _score_terms(
    warnings: list[LanguageWarning],
    category: LexiconCategory,
    max_penalty: int,
    noun: str,
) -> TermCountResult:
    terms = [w.term for w in warnings if w.category is category]
    count = len(terms)
    if count == 0:
        return TermCountResult(
            max_penalty=max_penalty,
            feedback_line=f"✅ No {noun}s",
        )
    penalty = min(max_penalty, count * POINTS_PER_TERM)
    return TermCountResult(
        penalty=penalty,
        max_penalty=max_penalty,
        feedback_line=f"🚨 {count} {noun}(s) found",
        deduction_line=f"-{penalty} pts: {count} {noun}(s)",
        count=count,
        terms=terms,
    )


def score_masculine_coded(warnings: list[LanguageWarning]) -> TermCountResult:
    return _score_terms(
        warnings, LexiconCategory.MASCULINE_CODED, MASCULINE_MAX_PENALTY, "masculine-coded word"
    )


def score_extrovert_bias(warnings: list[LanguageWarning]) -> TermCountResult:
    return _score_terms(
        warnings, LexiconCategory.EXTROVERT_BIAS, EXTROVERT_MAX_PENALTY, "extrovert-bias phrase"
    )


def score_red_flags(warnings: list[LanguageWarning]) -> TermCountResult:
    return _score_terms(
        warnings, LexiconCategory.RED_FLAG, RED_FLAG_MAX_PENALTY, "red flag phrase"
    )


def score_compensation(text: str, is_internal: bool) -> CompensationResult:
    """Missing pay range costs 10 points on external postings only."""
    if is_internal:
        return CompensationResult(
            max_penalty=COMPENSATION_PENALTY,
            feedback_line="ℹ️ Internal posting: compensation check skipped",
            skipped=True,
        )

    if has_compensation(text):
        return CompensationResult(
            max_penalty=COMPENSATION_PENALTY,
            feedback_line="✅ Compensation range included",
            has_compensation=True,
            matched_range=find_compensation_range(text),
        )

    return CompensationResult(
        penalty=COMPENSATION_PENALTY,
        max_penalty=COMPENSATION_PENALTY,
        feedback_line="⚠️ No compensation range found",
        deduction_line=f"-{COMPENSATION_PENALTY} pts: No compensation range found",
    )


def has_encouragement(text: str) -> bool:
    return any(p.search(text) for p in ENCOURAGEMENT_PATTERNS)


def score_encouragement(text: str) -> EncouragementResult:
    if has_encouragement(text):
        return EncouragementResult(
            max_penalty=ENCOURAGEMENT_PENALTY,
            feedback_line="✅ Includes encouragement statement",
            has_encouragement=True,
        )
    return EncouragementResult(
        penalty=ENCOURAGEMENT_PENALTY,
        max_penalty=ENCOURAGEMENT_PENALTY,
        feedback_line='⚠️ Missing encouragement statement (e.g., "If you meet 60-70%...")',
        deduction_line=f'-{ENCOURAGEMENT_PENALTY} pts: Missing "60-70%" encouragement statement',
    )


def score_slop(text: str, detector: SlopDetector | None = None) -> SlopResult:
    """Scale the detector's penalty down to the 5-point slop cap.

    Detector exceptions are not caught: there is no fallback for this dimension.
    """
    detection = (detector or get_slop_penalty)(text)
    penalty = 0
    issues: list[str] = []
    if detection.penalty > 0:
        penalty = min(SLOP_MAX_PENALTY, math.floor(detection.penalty * SLOP_WEIGHT))
        issues = list(detection.issues[:SLOP_MAX_ISSUES])

    if penalty == 0:
        return SlopResult(
            max_penalty=SLOP_MAX_PENALTY,
            feedback_line="✅ No generic AI-sounding language",
            raw_penalty=detection.penalty,
            issues=issues,
        )
    return SlopResult(
        penalty=penalty,
        max_penalty=SLOP_MAX_PENALTY,
        feedback_line="⚠️ AI-generated language detected - consider making more authentic",
        deduction_line=f"-{penalty} pts: AI slop detected ({detection.pattern_count} patterns)",
        raw_penalty=detection.penalty,
        issues=issues,
    )

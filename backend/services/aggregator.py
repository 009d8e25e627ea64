"""Combine dimension results into the total score and category breakdown."""

import logging

from models.schemas.lexicon import LanguageWarning, LexiconCategory
from models.schemas.validation_result import (
    CATEGORY_MAX_SCORE,
    CategoryBreakdown,
    CategoryScore,
    DimensionBreakdown,
    PostingType,
    SlopDetection,
    ValidationResult,
)

logger = logging.getLogger(__name__)

MAX_SCORE = 100

GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)

LABEL_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (80, "Excellent"),
    (70, "Ready"),
    (50, "Needs Work"),
    (30, "Draft"),
)

# Surplus from capped buckets is absorbed starting at the designated
# (last-computed) category and spills backwards when it bottoms out.
ABSORB_ORDER: tuple[str, ...] = ("transparency", "culture", "inclusivity", "length")


def get_grade(score: int) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return "F"


def get_score_label(score: int) -> str:
    for threshold, label in LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return "Incomplete"


def _category_penalties(dims: DimensionBreakdown) -> dict[str, int]:
    """Bucket penalties derived from the same values as the total."""
    return {
        "length": dims.length.penalty,
        "inclusivity": dims.masculine_coded.penalty + dims.extrovert_bias.penalty,
        "culture": dims.red_flags.penalty + dims.slop.penalty,
        "transparency": dims.compensation.penalty + dims.encouragement.penalty,
    }


def reconcile_categories(penalties: dict[str, int], score: int) -> dict[str, int]:
    """Per-bucket scores in ``[0, 25]`` that sum exactly to ``score``.

    Buckets floored at 0 can only push the sum above the total, never below,
    so the surplus is always absorbable.
    """
    scores = {name: max(0, CATEGORY_MAX_SCORE - p) for name, p in penalties.items()}
    surplus = sum(scores.values()) - score
    for name in ABSORB_ORDER:
        if surplus <= 0:
            break
        taken = min(surplus, scores[name])
        scores[name] -= taken
        surplus -= taken
    return scores


def _category_issues(
    dims: DimensionBreakdown,
    warnings: list[LanguageWarning],
) -> dict[str, list[str]]:
    length = dims.length
    length_issues: list[str] = []
    if length.penalty > 0:
        label = "Short" if length.band == "short" else "Long"
        length_issues.append(f"{label} ({length.word_count} words)")

    inclusivity = [
        f'Masculine-coded: "{w.term}"'
        for w in warnings if w.category is LexiconCategory.MASCULINE_CODED
    ] + [
        f'Extrovert-bias: "{w.term}"'
        for w in warnings if w.category is LexiconCategory.EXTROVERT_BIAS
    ]

    culture = [f'Red flag: "{w.term}"' for w in warnings if w.category is LexiconCategory.RED_FLAG]
    if dims.slop.penalty > 0:
        culture.append(f"AI patterns detected (-{dims.slop.penalty})")

    transparency: list[str] = []
    if dims.compensation.penalty > 0:
        transparency.append("No compensation range")
    if dims.encouragement.penalty > 0:
        transparency.append("Missing encouragement statement")

    return {
        "length": length_issues,
        "inclusivity": inclusivity,
        "culture": culture,
        "transparency": transparency,
    }


def _summary_issues(dims: DimensionBreakdown) -> list[str]:
    issues: list[str] = []
    if dims.length.penalty > 0:
        label = "Short" if dims.length.band == "short" else "Long"
        issues.append(f"{label} ({dims.length.word_count} words)")
    if dims.masculine_coded.count:
        issues.append(f"{dims.masculine_coded.count} masculine-coded word(s)")
    if dims.extrovert_bias.count:
        issues.append(f"{dims.extrovert_bias.count} extrovert-bias phrase(s)")
    if dims.red_flags.count:
        issues.append(f"{dims.red_flags.count} red flag phrase(s)")
    if dims.compensation.penalty > 0:
        issues.append("No compensation range")
    if dims.encouragement.penalty > 0:
        issues.append("Missing encouragement statement")
    issues.extend(dims.slop.issues if dims.slop.penalty > 0 else [])
    return issues


def aggregate(
    dims: DimensionBreakdown,
    warnings: list[LanguageWarning],
    posting_type: PostingType = PostingType.EXTERNAL,
) -> ValidationResult:
    """Build the final ``ValidationResult`` from scored dimensions."""
    score = max(0, MAX_SCORE - dims.total_penalty)

    bucket_scores = reconcile_categories(_category_penalties(dims), score)
    bucket_issues = _category_issues(dims, warnings)
    categories = CategoryBreakdown(**{
        name: CategoryScore(score=bucket_scores[name], issues=bucket_issues[name])
        for name in bucket_scores
    })

    ordered = (
        dims.length,
        dims.masculine_coded,
        dims.extrovert_bias,
        dims.red_flags,
        dims.compensation,
        dims.encouragement,
        dims.slop,
    )

    result = ValidationResult(
        score=score,
        grade=get_grade(score),
        label=get_score_label(score),
        posting_type=posting_type,
        word_count=dims.length.word_count,
        categories=categories,
        warnings=list(warnings),
        issues=_summary_issues(dims),
        feedback=[d.feedback_line for d in ordered if d.feedback_line],
        deductions=[d.deduction_line for d in ordered if d.deduction_line],
        dimensions=dims,
        slop_detection=SlopDetection(
            penalty=dims.slop.raw_penalty,
            deduction=dims.slop.penalty,
            issues=list(dims.slop.issues),
        ),
    )
    logger.debug("Aggregated score=%d grade=%s penalty=%d", score, result.grade, dims.total_penalty)
    return result

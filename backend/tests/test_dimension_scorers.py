"""Tests for the per-dimension scorers."""

import time

import pytest

from models.schemas.lexicon import LanguageWarning, LexiconCategory
from models.schemas.slop_penalty import SlopPenalty
from services.dimension_scorers import (
    COMPENSATION_PENALTY,
    ENCOURAGEMENT_PENALTY,
    EXTROVERT_MAX_PENALTY,
    LONG_MAX_PENALTY,
    MASCULINE_MAX_PENALTY,
    RED_FLAG_MAX_PENALTY,
    SHORT_MAX_PENALTY,
    SLOP_MAX_PENALTY,
    count_words,
    has_encouragement,
    score_compensation,
    score_encouragement,
    score_extrovert_bias,
    score_length,
    score_masculine_coded,
    score_red_flags,
    score_slop,
)


def _warnings(category: LexiconCategory, n: int) -> list[LanguageWarning]:
    return [
        LanguageWarning(category=category, term=f"term{i}", matched_text=f"term{i}", suggestion="")
        for i in range(n)
    ]


class TestCountWords:
    def test_whitespace_tokens(self):
        assert count_words("  one two\n\tthree  ") == 3

    def test_empty(self):
        assert count_words("") == 0
        assert count_words("   \n ") == 0

    def test_punctuation_is_part_of_token(self):
        assert count_words("$120,000 - $150,000") == 3


class TestScoreLength:
    def test_ideal(self):
        result = score_length(500)
        assert result.penalty == 0
        assert result.band == "ideal"
        assert result.deduction_line is None

    def test_bounds_are_ideal(self):
        assert score_length(400).penalty == 0
        assert score_length(700).penalty == 0

    def test_short(self):
        result = score_length(200)
        assert result.penalty == 10
        assert result.band == "short"
        assert result.deduction_line.startswith("-10 pts")

    def test_short_under_one_step_is_free(self):
        result = score_length(399)
        assert result.penalty == 0
        assert result.band == "short"
        assert result.deduction_line is None

    def test_short_capped(self):
        assert score_length(0).penalty == SHORT_MAX_PENALTY

    def test_long(self):
        result = score_length(800)
        assert result.penalty == 2
        assert result.band == "long"
        assert result.max_penalty == LONG_MAX_PENALTY

    def test_long_capped(self):
        assert score_length(5000).penalty == LONG_MAX_PENALTY


class TestTermScorers:
    def test_none_found(self):
        result = score_masculine_coded([])
        assert result.penalty == 0
        assert result.count == 0
        assert result.feedback_line.startswith("✅")

    def test_five_points_per_term(self):
        result = score_masculine_coded(_warnings(LexiconCategory.MASCULINE_CODED, 2))
        assert result.penalty == 10
        assert result.count == 2
        assert result.terms == ["term0", "term1"]

    def test_only_own_category_counts(self):
        warnings = _warnings(LexiconCategory.RED_FLAG, 3)
        assert score_masculine_coded(warnings).penalty == 0
        assert score_extrovert_bias(warnings).penalty == 0
        assert score_red_flags(warnings).penalty == 15

    @pytest.mark.parametrize("scorer,category,cap", [
        (score_masculine_coded, LexiconCategory.MASCULINE_CODED, MASCULINE_MAX_PENALTY),
        (score_extrovert_bias, LexiconCategory.EXTROVERT_BIAS, EXTROVERT_MAX_PENALTY),
        (score_red_flags, LexiconCategory.RED_FLAG, RED_FLAG_MAX_PENALTY),
    ])
    def test_caps(self, scorer, category, cap):
        result = scorer(_warnings(category, 8))
        assert result.penalty == cap
        assert result.count == 8


class TestScoreCompensation:
    def test_missing_external(self):
        result = score_compensation("No numbers here.", is_internal=False)
        assert result.penalty == COMPENSATION_PENALTY
        assert not result.has_compensation

    def test_range_present(self):
        result = score_compensation("Pay: $120k - $150k", is_internal=False)
        assert result.penalty == 0
        assert result.has_compensation
        assert result.matched_range == "$120k - $150k"

    def test_other_currencies(self):
        assert score_compensation("€60.000 – €75.000", False).penalty == 0
        assert score_compensation("CAD 90,000 to 110,000", False).penalty == 0
        assert score_compensation("90,000 - 110,000 GBP", False).penalty == 0

    def test_labeled_single_amount(self):
        result = score_compensation("Salary: $140,000 per year", is_internal=False)
        assert result.penalty == 0
        assert result.has_compensation

    @pytest.mark.parametrize("text", [
        "Our customer base generates $5M in revenue each year.",
        "We pay for a $50 monthly gym membership.",
        "Salary reviews happen every year, and the team offsite budget is $20,000.",
    ])
    def test_unlabeled_amount_is_not_pay(self, text):
        result = score_compensation(text, is_internal=False)
        assert result.penalty == COMPENSATION_PENALTY
        assert not result.has_compensation

    def test_long_digit_run_is_fast(self):
        text = "$" + "1" * 20000
        start = time.perf_counter()
        result = score_compensation(text, is_internal=False)
        assert time.perf_counter() - start < 1.0
        assert not result.has_compensation

    def test_internal_skipped(self):
        result = score_compensation("No numbers here.", is_internal=True)
        assert result.penalty == 0
        assert result.skipped


class TestScoreEncouragement:
    @pytest.mark.parametrize("text", [
        "If you meet 60-70% of the qualifications, apply.",
        "Meeting 60 to 70 percent of these is enough.",
        "If you don't meet all the qualifications, still apply",
        "You do not meet every requirement? That's fine.",
        "We encourage you to apply even if unsure.",
        "If you meet most of the listed requirements, reach out.",
    ])
    def test_satisfied(self, text):
        assert has_encouragement(text)
        assert score_encouragement(text).penalty == 0

    @pytest.mark.parametrize("text", [
        "We don't meet all our goals",
        "Apply now.",
        "",
    ])
    def test_not_satisfied(self, text):
        assert not has_encouragement(text)
        result = score_encouragement(text)
        assert result.penalty == ENCOURAGEMENT_PENALTY
        assert result.deduction_line is not None


class TestScoreSlop:
    def test_zero(self):
        result = score_slop("text", lambda t: SlopPenalty())
        assert result.penalty == 0
        assert result.issues == []

    def test_scaled_and_floored(self):
        result = score_slop("text", lambda t: SlopPenalty(penalty=3, issues=["a"], pattern_count=1))
        assert result.penalty == 1  # floor(3 * 0.6)
        assert result.raw_penalty == 3

    def test_small_penalty_rounds_to_zero(self):
        result = score_slop("text", lambda t: SlopPenalty(penalty=1, issues=["a"]))
        assert result.penalty == 0
        assert result.deduction_line is None

    def test_capped_and_issues_truncated(self):
        detector = lambda t: SlopPenalty(penalty=15, issues=["a", "b", "c"], pattern_count=5)
        result = score_slop("text", detector)
        assert result.penalty == SLOP_MAX_PENALTY
        assert result.issues == ["a", "b"]
        assert "5 patterns" in result.deduction_line

    def test_detector_errors_propagate(self):
        def broken(text):
            raise RuntimeError("detector down")

        with pytest.raises(RuntimeError):
            score_slop("text", broken)

    def test_default_detector(self):
        assert score_slop("A plain sentence about databases.").penalty == 0

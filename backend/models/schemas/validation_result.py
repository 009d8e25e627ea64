"""Top-level output of ``validate_document``."""

from enum import Enum

from pydantic import BaseModel

from models.schemas.dimension_result import (
    CompensationResult,
    EncouragementResult,
    LengthResult,
    SlopResult,
    TermCountResult,
)
from models.schemas.lexicon import LanguageWarning

CATEGORY_MAX_SCORE = 25


class PostingType(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"


class CategoryScore(BaseModel):
    score: int = CATEGORY_MAX_SCORE
    max_score: int = CATEGORY_MAX_SCORE
    issues: list[str] = []


class CategoryBreakdown(BaseModel):
    """Four 25-point buckets. Scores always sum to the total score."""
    length: CategoryScore = CategoryScore()
    inclusivity: CategoryScore = CategoryScore()
    culture: CategoryScore = CategoryScore()
    transparency: CategoryScore = CategoryScore()

    @property
    def total(self) -> int:
        return (
            self.length.score
            + self.inclusivity.score
            + self.culture.score
            + self.transparency.score
        )


class DimensionBreakdown(BaseModel):
    length: LengthResult
    masculine_coded: TermCountResult
    extrovert_bias: TermCountResult
    red_flags: TermCountResult
    compensation: CompensationResult
    encouragement: EncouragementResult
    slop: SlopResult

    @property
    def total_penalty(self) -> int:
        return (
            self.length.penalty
            + self.masculine_coded.penalty
            + self.extrovert_bias.penalty
            + self.red_flags.penalty
            + self.compensation.penalty
            + self.encouragement.penalty
            + self.slop.penalty
        )


class SlopDetection(BaseModel):
    penalty: int = 0  # raw detector penalty
    deduction: int = 0  # points actually deducted from the score
    issues: list[str] = []


class ValidationResult(BaseModel):
    score: int = 0
    grade: str = "F"
    label: str = "Incomplete"
    posting_type: PostingType = PostingType.EXTERNAL
    word_count: int = 0
    categories: CategoryBreakdown = CategoryBreakdown()
    warnings: list[LanguageWarning] = []
    issues: list[str] = []
    feedback: list[str] = []
    deductions: list[str] = []
    dimensions: DimensionBreakdown
    slop_detection: SlopDetection = SlopDetection()

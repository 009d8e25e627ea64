"""Per-dimension scoring output.

Every scorer returns a ``DimensionResult`` (or a subclass carrying the
dimension-specific fields). Penalties are deductions from a 100-point score.
"""

from pydantic import BaseModel


class DimensionResult(BaseModel):
    penalty: int = 0
    max_penalty: int = 0
    feedback_line: str = ""
    deduction_line: str | None = None  # None when penalty == 0


class LengthResult(DimensionResult):
    word_count: int = 0
    band: str = "ideal"  # "short" | "ideal" | "long"


class TermCountResult(DimensionResult):
    """Masculine-coded, extrovert-bias and red-flag dimensions."""
    count: int = 0
    terms: list[str] = []


class CompensationResult(DimensionResult):
    skipped: bool = False  # internal postings are not checked
    has_compensation: bool = False
    matched_range: str = ""


class EncouragementResult(DimensionResult):
    has_encouragement: bool = False


class SlopResult(DimensionResult):
    raw_penalty: int = 0  # penalty reported by the slop detector
    issues: list[str] = []  # at most 2, surfaced to the user

"""Pydantic contracts shared by the validator, extractor and API layers."""

from models.schemas.dimension_result import (
    CompensationResult,
    DimensionResult,
    EncouragementResult,
    LengthResult,
    SlopResult,
    TermCountResult,
)
from models.schemas.extracted_fields import ExtractedFields
from models.schemas.lexicon import LanguageWarning, LexiconCategory, LexiconEntry
from models.schemas.mandated_section import MandatedKind, MandatedSection
from models.schemas.slop_penalty import SlopPenalty
from models.schemas.validation_result import (
    CategoryBreakdown,
    CategoryScore,
    DimensionBreakdown,
    PostingType,
    SlopDetection,
    ValidationResult,
)

__all__ = [
    "CategoryBreakdown",
    "CategoryScore",
    "CompensationResult",
    "DimensionBreakdown",
    "DimensionResult",
    "EncouragementResult",
    "ExtractedFields",
    "LanguageWarning",
    "LengthResult",
    "LexiconCategory",
    "LexiconEntry",
    "MandatedKind",
    "MandatedSection",
    "PostingType",
    "SlopDetection",
    "SlopPenalty",
    "SlopResult",
    "TermCountResult",
    "ValidationResult",
]

"""Lexicon entries and the warnings produced when a term is found."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class LexiconCategory(str, Enum):
    """Categories in declaration order. Scanner output follows this order."""
    MASCULINE_CODED = "masculine-coded"
    EXTROVERT_BIAS = "extrovert-bias"
    RED_FLAG = "red-flag"


class LexiconEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str
    category: LexiconCategory
    suggestion: str


class LanguageWarning(BaseModel):
    """A lexicon term found in the analysed (non-mandated) text."""
    model_config = ConfigDict(frozen=True)

    category: LexiconCategory
    term: str
    matched_text: str  # surface form of the first occurrence, e.g. "Fast paced"
    suggestion: str

"""Scan text for lexicon terms and turn hits into warnings."""

import logging
import re
from functools import lru_cache

from models.schemas.lexicon import LanguageWarning
from models.schemas.mandated_section import MandatedSection
from services.lexicon import LEXICON
from services.mandated_sections import is_in_mandated_section

logger = logging.getLogger(__name__)

# Hyphens and whitespace are interchangeable between the words of a phrase:
# "fast-paced", "fast paced" and "fast - paced" all match the same term.
_SEPARATOR_RE = re.compile(r"[\s-]+")


@lru_cache(maxsize=None)
def build_term_pattern(term: str) -> re.Pattern:
    """Case-insensitive, word-bounded pattern for a lexicon term."""
    words = [re.escape(w) for w in _SEPARATOR_RE.split(term.strip()) if w]
    body = r"[\s-]+".join(words)
    return re.compile(rf"\b{body}\b", re.IGNORECASE)


def scan(
    clean_text: str,
    mandated_sections: list[MandatedSection] | None = None,
) -> list[LanguageWarning]:
    """Return one warning per lexicon term present in ``clean_text``.

    Output order is category declaration order, then lexicon order. A term
    that also occurs inside mandated boilerplate is exempted.
    """
    sections = mandated_sections or []
    warnings: list[LanguageWarning] = []

    for entry in LEXICON:
        match = build_term_pattern(entry.term).search(clean_text)
        if match is None:
            continue
        matched_text = match.group(0)
        if is_in_mandated_section(entry.term, sections) or is_in_mandated_section(
            matched_text, sections
        ):
            logger.debug("Exempted %r: appears in mandated section", entry.term)
            continue
        warnings.append(LanguageWarning(
            category=entry.category,
            term=entry.term,
            matched_text=matched_text,
            suggestion=entry.suggestion,
        ))

    return warnings

"""Strip organization-mandated boilerplate before stylistic analysis.

Preamble and legal blocks are delimited by sentinel markers. Their content is
removed from the analysed text and kept aside so that lexicon terms appearing
in that boilerplate can be exempted. An unterminated block is left in place.
"""

import re

from models.schemas.mandated_section import MandatedKind, MandatedSection

PREAMBLE_RE = re.compile(
    r"\[COMPANY_PREAMBLE\](.*?)\[/COMPANY_PREAMBLE\]", re.IGNORECASE | re.DOTALL
)
LEGAL_RE = re.compile(
    r"\[COMPANY_LEGAL_TEXT\](.*?)\[/COMPANY_LEGAL_TEXT\]", re.IGNORECASE | re.DOTALL
)

_BLOCK_PATTERNS: tuple[tuple[MandatedKind, re.Pattern], ...] = (
    (MandatedKind.PREAMBLE, PREAMBLE_RE),
    (MandatedKind.LEGAL, LEGAL_RE),
)


def extract_mandated_sections(text: str) -> tuple[str, list[MandatedSection]]:
    """Return ``(clean_text, sections)``.

    ``clean_text`` has every complete sentinel block removed (markers and
    content). ``sections`` holds the inner content of each block, preamble
    blocks first, each kind in document order.
    """
    sections = [
        MandatedSection(kind=kind, content=match.group(1))
        for kind, pattern in _BLOCK_PATTERNS
        for match in pattern.finditer(text)
    ]
    clean_text = text
    for _, pattern in _BLOCK_PATTERNS:
        clean_text = pattern.sub("", clean_text)
    return clean_text, sections


def is_in_mandated_section(term: str, sections: list[MandatedSection]) -> bool:
    """Case-insensitive substring check across all mandated section contents."""
    needle = term.lower()
    return any(needle in section.content.lower() for section in sections)

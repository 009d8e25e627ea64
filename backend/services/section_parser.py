"""Job description section segmentation.

Headings are detected in four shapes (markdown ``#``, bold-only lines,
ALL-CAPS lines, and plain lines naming a known section) and classified
against per-field pattern sets. Lines under an unrecognized heading are
collected into an unnamed section that no output field reads.
"""

import logging
import re

from rapidfuzz import fuzz, process

logger = logging.getLogger(__name__)

# Section heading patterns and their canonical field names (checked in order)
SECTION_PATTERNS: dict[str, list[str]] = {
    "responsibilities": [
        r"(?:key\s+)?responsibilities",
        r"duties",
        r"job\s+duties",
        r"what\s+you['’]?ll\s+do",
        r"what\s+you\s+will\s+do",
        r"the\s+role",
        r"your\s+role",
    ],
    "requirements": [
        r"requirements?",
        r"(?:required\s+|minimum\s+|basic\s+)?qualifications?",
        r"must\s+haves?",
        r"required\s+skills?",
        r"what\s+we['’]?re\s+looking\s+for",
        r"our\s+ideal\s+candidate",
        r"who\s+you\s+are",
    ],
    "preferred": [
        r"preferred(?:\s+(?:qualifications?|skills?))?",
        r"nice\s+to\s+haves?",
        r"bonus(?:\s+points)?",
        r"desired(?:\s+(?:qualifications?|skills?))?",
        r"plus",
        r"ideal",
    ],
    "benefits": [
        r"(?:our\s+)?benefits?",
        r"what\s+we\s+offer",
        r"perks(?:\s*(?:&|and)\s*benefits)?",
        r"compensation(?:\s*(?:&|and)\s*benefits)?",
        r"why\s+join\s+us\??",
    ],
    "about": [
        r"about(?:\s+the)?\s+(?:company|us)",
        r"who\s+we\s+are",
        r"company\s+overview",
    ],
    "role_overview": [
        r"role\s+overview",
        r"about(?:\s+the)?\s+role",
        r"position\s+summary",
        r"overview",
    ],
}

# Compile all patterns into a single anchored regex per section
_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(rf"^(?:{combined})$", re.IGNORECASE)

# Canonical heading text per section for typo-tolerant matching
CANONICAL_HEADINGS: dict[str, str] = {
    "responsibilities": "responsibilities",
    "key responsibilities": "responsibilities",
    "requirements": "requirements",
    "qualifications": "requirements",
    "required qualifications": "requirements",
    "preferred qualifications": "preferred",
    "nice to have": "preferred",
    "benefits": "benefits",
    "what we offer": "benefits",
    "about the company": "about",
    "about us": "about",
    "role overview": "role_overview",
    "about the role": "role_overview",
}
_CANONICAL_CHOICES = list(CANONICAL_HEADINGS)
FUZZY_THRESHOLD = 90

MD_HEADING_RE = re.compile(r"^#{1,3}\s+(.+)$")
BOLD_HEADING_RE = re.compile(r"^\*\*([^*]+)\*\*\s*$")
CAPS_HEADING_RE = re.compile(r"^[A-Z][A-Z\s\-&]*$")
CAPS_MIN_LENGTH = 5


def _normalize_heading(text: str) -> str:
    return re.sub(r"\s+", " ", text.strip().rstrip(":").strip())


def classify_heading(heading: str) -> str | None:
    """Map heading text to a section name, or ``None`` if unrecognized."""
    normalized = _normalize_heading(heading).lower()
    if not normalized:
        return None

    for section_name, pattern in _COMPILED.items():
        if pattern.match(normalized):
            return section_name

    best = process.extractOne(
        normalized, _CANONICAL_CHOICES, scorer=fuzz.token_sort_ratio
    )
    if best and best[1] >= FUZZY_THRESHOLD:
        logger.debug("Fuzzy heading match %r -> %r (%.0f)", heading, best[0], best[1])
        return CANONICAL_HEADINGS[best[0]]
    return None


def extract_heading(line: str) -> str | None:
    """Return the heading text if ``line`` is a heading, else ``None``."""
    stripped = line.strip()
    if not stripped:
        return None

    md_match = MD_HEADING_RE.match(stripped)
    if md_match:
        return _normalize_heading(md_match.group(1))

    bold_match = BOLD_HEADING_RE.match(stripped)
    if bold_match:
        return _normalize_heading(bold_match.group(1))

    if len(stripped) >= CAPS_MIN_LENGTH and CAPS_HEADING_RE.match(stripped):
        return _normalize_heading(stripped)

    # Plain "Requirements:" style lines naming a known section
    candidate = stripped.rstrip(":").strip()
    if candidate and any(p.match(candidate) for p in _COMPILED.values()):
        return _normalize_heading(candidate)

    return None


def parse_sections(text: str) -> dict[str, str]:
    """Split job description text into named sections.

    Returns a dict mapping section name -> section text content. Content
    before the first heading and under unrecognized headings is dropped.
    Repeated headings of the same section are appended.
    """
    buffers: dict[str, list[str]] = {}
    current_section: str | None = None
    current_lines: list[str] = []

    def _flush() -> None:
        if current_section is None:
            return
        content = "\n".join(current_lines).strip()
        if content:
            buffers.setdefault(current_section, []).append(content)

    for line in text.split("\n"):
        heading = extract_heading(line)
        if heading is not None:
            _flush()
            current_section = classify_heading(heading)
            current_lines = []
        else:
            current_lines.append(line)

    _flush()

    return {name: "\n\n".join(parts) for name, parts in buffers.items()}

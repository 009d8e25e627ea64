"""Structured field extraction from job description markdown.

Each output field is produced by an ordered tuple of small rule functions.
The first rule returning a non-empty string wins. A rule that raises is
logged and skipped, so a field degrades to ``""`` instead of failing the
whole extraction.

Fields:
    job_title, company_name, role_level, location, compensation_range,
    tech_stack (targeted heuristics over the whole document) and
    responsibilities, required_qualifications, preferred_qualifications,
    benefits, role_overview, about_company (section segmentation).
"""

import logging
import re
from collections.abc import Callable
from functools import cached_property

from models.schemas.extracted_fields import ExtractedFields
from services.compensation import find_compensation_range
from services.section_parser import parse_sections

logger = logging.getLogger(__name__)

# --- Job title ---

H1_RE = re.compile(r"^#[ \t]+(.+?)[ \t]*$", re.MULTILINE)
TITLE_PREFIX_RE = re.compile(r"^job\s+description:\s*", re.IGNORECASE)
BARE_HEADING_MARKER_RE = re.compile(r"^#{1,3}\s*$")
HORIZONTAL_RULE_RE = re.compile(r"^[-=*]{3,}$")
TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 150

# --- Role level (checked in order, first match wins) ---
# Whole-word matches only, so "Internal" never reads as "intern".

ROLE_LEVEL_KEYWORDS: tuple[str, ...] = (
    "principal", "staff", "senior", "sr", "lead", "director", "manager",
    "junior", "jr", "associate", "entry", "intern", "head of", "vp", "chief",
)
_ROLE_LEVEL_DISPLAY = {"vp": "VP"}
_ROLE_LEVEL_RES = tuple(
    (kw, re.compile(r"\b" + re.escape(kw).replace(r"\ ", r"\s+") + r"\b", re.IGNORECASE))
    for kw in ROLE_LEVEL_KEYWORDS
)

# --- Company name ---

_PROPER_NOUN = r"[A-Z][\w&.'-]*(?:[ \t]+(?:&|[A-Z][\w&.'-]*))*"
COMPANY_INTRO_RE = re.compile(
    rf"\b(?:[Aa]t|[Jj]oin)[ \t]+(?P<name>{_PROPER_NOUN})"
    r"(?=[ \t]*[,.!]|[ \t]+(?i:we|our|is|was|has)\b)"
)
ABOUT_SUBJECT_RE = re.compile(rf"^(?P<name>{_PROPER_NOUN})[ \t]+(?:is|was|has)\b")
COMPANY_STOPWORDS = frozenset({"The", "This", "That", "Our", "Its", "Their", "A", "An"})

# --- Location ---

LABELED_LOCATION_RE = re.compile(
    r"^[ \t*_>-]*location[ \t*_]*[:\-–][ \t*_]*(?P<value>.+?)[ \t*_]*$",
    re.IGNORECASE | re.MULTILINE,
)
BASED_IN_RE = re.compile(
    r"\bbased[ \t]+in[ \t]+(?P<value>[A-Z][A-Za-z \t,'-]{1,60}?)[ \t]*(?=[.;()\n]|$)"
)
WORK_MODE_RE = re.compile(
    r"\b(?:fully[ \t]+remote|remote[- ]first|remote|hybrid|on[- ]?site|in[- ]office)\b",
    re.IGNORECASE,
)

# --- Tech stack ---

TECH_KEYWORDS: tuple[str, ...] = (
    "aws", "azure", "gcp", "react", "vue", "angular", "node", "nodejs",
    "python", "java", "javascript", "typescript", "go", "golang", "rust",
    "docker", "kubernetes", "k8s", "sql", "postgresql", "mysql", "mongodb",
    "redis", "kafka", "rabbitmq", "graphql", "rest", "api",
    "tensorflow", "pytorch", "llm", "gpt", "openai", "claude",
    "asr", "tts", "nlp", "ml", "ai", "sip", "webrtc", "twilio",
)

# Short words that are also plain English only count in their canonical casing.
CASE_SENSITIVE_TECH: dict[str, str] = {
    "go": "Go",
    "rest": "REST",
    "ai": "AI",
    "ml": "ML",
    "sip": "SIP",
    "tts": "TTS",
    "asr": "ASR",
}


def _tech_pattern(keyword: str) -> re.Pattern:
    canonical = CASE_SENSITIVE_TECH.get(keyword)
    if canonical:
        return re.compile(rf"\b{re.escape(canonical)}\b")
    return re.compile(rf"\b({re.escape(keyword)})s?\b", re.IGNORECASE)


_TECH_RES = tuple((kw, _tech_pattern(kw)) for kw in TECH_KEYWORDS)


class _Document:
    """Parsed views of one markdown document, computed on demand."""

    def __init__(self, markdown: str) -> None:
        self.markdown = markdown
        self.lines = markdown.split("\n")

    @cached_property
    def sections(self) -> dict[str, str]:
        return parse_sections(self.markdown)

    @cached_property
    def title(self) -> str:
        return _run_rules("job_title", FIELD_RULES["job_title"], self)


Rule = Callable[[_Document], str]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def title_from_h1(doc: _Document) -> str:
    match = H1_RE.search(doc.markdown)
    if not match:
        return ""
    title = TITLE_PREFIX_RE.sub("", match.group(1)).strip()
    return title if len(title) <= TITLE_MAX_LENGTH else ""


def title_from_first_line(doc: _Document) -> str:
    for line in doc.lines:
        stripped = line.strip()
        if not stripped:
            continue
        if BARE_HEADING_MARKER_RE.match(stripped) or HORIZONTAL_RULE_RE.match(stripped):
            continue
        title = re.sub(r"^#{1,3}\s*", "", stripped).replace("**", "").strip()
        if TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
            return title
    return ""


def role_level_from_title(doc: _Document) -> str:
    title = doc.title
    if not title:
        return ""
    for keyword, pattern in _ROLE_LEVEL_RES:
        if pattern.search(title):
            return _ROLE_LEVEL_DISPLAY.get(keyword, keyword[0].upper() + keyword[1:])
    return ""


def company_from_intro(doc: _Document) -> str:
    """Openers like "At Acme Corporation, we ..." or "Join Acme!"."""
    for match in COMPANY_INTRO_RE.finditer(doc.markdown):
        name = match.group("name").strip().rstrip(".")
        if name.split()[0] in COMPANY_STOPWORDS or len(name) < 2:
            continue
        return name
    return ""


def company_from_about(doc: _Document) -> str:
    about = doc.sections.get("about", "")
    match = ABOUT_SUBJECT_RE.match(about.lstrip())
    if not match:
        return ""
    name = match.group("name").strip().rstrip(".")
    return "" if name.split()[0] in COMPANY_STOPWORDS else name


def location_from_label(doc: _Document) -> str:
    match = LABELED_LOCATION_RE.search(doc.markdown)
    return match.group("value").strip() if match else ""


def location_from_based_in(doc: _Document) -> str:
    match = BASED_IN_RE.search(doc.markdown)
    return match.group("value").strip(" \t,") if match else ""


def location_from_work_mode(doc: _Document) -> str:
    match = WORK_MODE_RE.search(doc.markdown)
    return match.group(0) if match else ""


def compensation_from_range(doc: _Document) -> str:
    return find_compensation_range(doc.markdown)


def tech_stack_from_keywords(doc: _Document) -> str:
    """Comma-joined keywords in list order, cased as first seen."""
    found: list[str] = []
    seen: set[str] = set()
    for keyword, pattern in _TECH_RES:
        match = pattern.search(doc.markdown)
        if not match:
            continue
        # Group 1 excludes the plural "s" for case-insensitive keywords
        display = match.group(1) if pattern.groups else match.group(0)
        if display.lower() not in seen:
            seen.add(display.lower())
            found.append(display)
    return ", ".join(found)


def _section_rule(name: str) -> Rule:
    def rule(doc: _Document) -> str:
        return doc.sections.get(name, "")

    rule.__name__ = f"section_{name}"
    return rule


FIELD_RULES: dict[str, tuple[Rule, ...]] = {
    "job_title": (title_from_h1, title_from_first_line),
    "company_name": (company_from_intro, company_from_about),
    "role_level": (role_level_from_title,),
    "location": (location_from_label, location_from_based_in, location_from_work_mode),
    "responsibilities": (_section_rule("responsibilities"),),
    "required_qualifications": (_section_rule("requirements"),),
    "preferred_qualifications": (_section_rule("preferred"),),
    "compensation_range": (compensation_from_range,),
    "benefits": (_section_rule("benefits"),),
    "tech_stack": (tech_stack_from_keywords,),
    "role_overview": (_section_rule("role_overview"),),
    "about_company": (_section_rule("about"),),
}


def _run_rules(field: str, rules: tuple[Rule, ...], doc: _Document) -> str:
    for rule in rules:
        try:
            value = rule(doc)
        except Exception as e:
            logger.warning("Extraction rule %s for %s failed: %s", rule.__name__, field, e)
            continue
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def extract_fields(markdown: object) -> ExtractedFields:
    """Extract structured fields from job description markdown.

    Never raises: non-string or blank input yields the all-empty record,
    and any field whose rules all come up empty is ``""``.
    """
    if not isinstance(markdown, str) or not markdown.strip():
        return ExtractedFields()

    doc = _Document(markdown)
    values = {field: _run_rules(field, rules, doc) for field, rules in FIELD_RULES.items()}
    logger.debug(
        "Extracted %d/%d fields", sum(1 for v in values.values() if v), len(values)
    )
    return ExtractedFields(**values)

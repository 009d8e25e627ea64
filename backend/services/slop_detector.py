"""Built-in lexical detector for generic, AI-sounding prose.

Scans for stock adjectives/verbs/nouns, canned phrases and em-dash overuse,
and converts the hits into a penalty. This is the default collaborator for
the slop dimension; any callable with the same signature can replace it.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from models.schemas.slop_penalty import SlopPenalty

logger = logging.getLogger(__name__)

SlopDetector = Callable[[str], SlopPenalty]


@dataclass(frozen=True)
class SlopThresholds:
    word_points: int = 1
    phrase_points: int = 2
    em_dash_points: int = 2
    em_dash_words_basis: float = 150.0
    em_dash_density_threshold: float = 1.0
    free_allowance: int = 3  # points tolerated before any penalty
    max_penalty: int = 15


DEFAULT_THRESHOLDS = SlopThresholds()

SLOP_WORDS: tuple[str, ...] = (
    # adjectives
    "groundbreaking", "pivotal", "paramount", "seamless", "holistic",
    "multifaceted", "meticulous", "unparalleled", "game-changing",
    "revolutionary", "world-class", "best-in-class", "cutting-edge",
    "next-generation", "synergistic", "visionary",
    # verbs
    "delve", "delves", "delving", "embark", "elevate", "harness", "unleash",
    "unlock", "supercharge", "leverage", "leveraging", "synergize",
    # nouns
    "synergy", "synergies", "tapestry", "paradigm", "landscape", "journey",
    "realm", "testament",
)

SLOP_PHRASES: tuple[str, ...] = (
    "it's worth noting", "it's important to note", "in today's world",
    "in today's digital age", "at the end of the day", "look no further",
    "take it to the next level", "push the boundaries", "game changer",
    "dynamic team", "exciting opportunity", "unique opportunity",
    "make a real impact", "passionate about making a difference",
    "rapidly evolving", "ever-evolving", "think outside the box",
)

_SLOP_WORD_RE = re.compile(
    r"\b(" + "|".join(re.escape(w) for w in SLOP_WORDS) + r")\b", re.IGNORECASE
)
_SLOP_PHRASE_RE = re.compile(
    r"\b(" + "|".join(re.escape(p).replace("'", "['’]") for p in SLOP_PHRASES) + r")\b",
    re.IGNORECASE,
)
_EM_DASH_RE = re.compile("—")


def get_slop_penalty(text: str, thresholds: SlopThresholds = DEFAULT_THRESHOLDS) -> SlopPenalty:
    """Score generic language in ``text``.

    Returns the penalty after the free allowance (capped), the issue strings
    ordered most severe first, and the number of distinct patterns found.
    """
    words = {m.group(1).lower() for m in _SLOP_WORD_RE.finditer(text)}
    phrases = {m.group(1).lower() for m in _SLOP_PHRASE_RE.finditer(text)}

    issues: list[str] = []
    raw = 0

    for phrase in sorted(phrases):
        raw += thresholds.phrase_points
        issues.append(f'Stock phrase: "{phrase}"')

    word_count = len(text.split())
    em_dashes = len(_EM_DASH_RE.findall(text))
    em_dash_overuse = False
    if word_count and em_dashes:
        density = em_dashes / (word_count / thresholds.em_dash_words_basis)
        if density > thresholds.em_dash_density_threshold:
            em_dash_overuse = True
            raw += thresholds.em_dash_points
            issues.append(f"Em-dash overuse ({em_dashes} in {word_count} words)")

    if words:
        raw += thresholds.word_points * len(words)
        issues.append("Generic wording: " + ", ".join(f'"{w}"' for w in sorted(words)))

    penalty = min(thresholds.max_penalty, max(0, raw - thresholds.free_allowance))
    pattern_count = len(words) + len(phrases) + int(em_dash_overuse)
    if penalty:
        logger.debug("Slop penalty %d from %d pattern(s)", penalty, pattern_count)

    return SlopPenalty(penalty=penalty, issues=issues, pattern_count=pattern_count)

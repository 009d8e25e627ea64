"""Categorized inclusive-language lexicon.

Masculine-coded terms follow Gaucher et al. (2011) and Textio research,
extrovert-bias phrases follow Deloitte neurodiversity guidance, and red-flag
phrases come from Glassdoor/Blind/LinkedIn culture complaints.
Tables are built once at import time and never mutated.
"""

from models.schemas.lexicon import LexiconCategory, LexiconEntry

MASCULINE_CODED: tuple[str, ...] = (
    "aggressive", "ambitious", "assertive", "competitive", "confident",
    "decisive", "determined", "dominant", "driven", "fearless",
    "independent", "ninja", "rockstar", "guru", "self-reliant",
    "self-sufficient", "superior",
)

EXTROVERT_BIAS: tuple[str, ...] = (
    "outgoing", "high-energy", "energetic", "people person", "gregarious",
    "strong communicator", "excellent verbal", "team player",
)

RED_FLAGS: tuple[str, ...] = (
    "fast-paced", "like a family", "wear many hats", "always-on",
    "hustle", "grind", "unlimited pto", "work hard play hard",
    "hit the ground running", "self-starter", "thick skin",
    "no ego", "drama-free", "whatever it takes", "passion required",
)

SUGGESTIONS: dict[str, str] = {
    # Masculine-coded
    "aggressive": 'Use "proactive" or "bold" instead',
    "ambitious": 'Use "motivated" or "goal-oriented" instead',
    "assertive": 'Use "confident communicator" instead',
    "competitive": 'Use "collaborative" or "results-oriented" instead',
    "confident": 'Use "capable" or "skilled" instead',
    "decisive": 'Use "sound decision-maker" instead',
    "determined": 'Use "dedicated" or "committed" instead',
    "dominant": 'Use "influential" or "guiding" instead',
    "driven": 'Use "motivated" or "dedicated" instead',
    "fearless": 'Use "resilient" or "innovative" instead',
    "independent": 'Use "self-directed" or "ownership-focused" instead',
    "ninja": 'Use "expert" or "specialist" instead',
    "rockstar": 'Use "expert" or "impact player" instead',
    "guru": 'Use "expert" or "specialist" instead',
    "self-reliant": 'Use "capable" or "resourceful" instead',
    "self-sufficient": 'Use "capable" or "resourceful" instead',
    "superior": 'Use "excellent" or "skilled" instead',
    # Extrovert-bias
    "outgoing": 'Use "collaborative" or remove if not essential',
    "high-energy": 'Use "dynamic" or "engaged" instead',
    "energetic": 'Use "engaged" or "motivated" instead',
    "people person": 'Use "collaborative" or "team-oriented" instead',
    "gregarious": 'Use "collaborative" instead',
    "strong communicator": 'Use "shares ideas clearly via writing, visuals, or discussion"',
    "excellent verbal": 'Use "communicates effectively" instead',
    "team player": 'Use "contributes to team goals through your strengths"',
    # Red flags
    "fast-paced": 'Use "dynamic projects with clear priorities" instead',
    "like a family": 'Use "supportive, collaborative team" instead',
    "wear many hats": 'Use "versatile role with growth opportunities" instead',
    "always-on": 'Use "flexible hours; async work" instead',
    "hustle": 'Use "dedicated effort" or "commitment" instead',
    "grind": 'Use "dedicated effort" or "commitment" instead',
    "unlimited pto": 'Use "20+ PTO days + recharge policy" instead',
    "work hard play hard": 'Use "balanced work culture" instead',
    "hit the ground running": 'Use "ramp up quickly with support" instead',
    "self-starter": 'Use "self-directed" or "ownership-focused" instead',
    "thick skin": 'Use "resilient" or "adaptable" instead',
    "no ego": 'Use "collaborative" or "humble" instead',
    "drama-free": 'Use "professional" or "respectful" instead',
    "whatever it takes": 'Use "committed to delivering results" instead',
    "passion required": 'Use "deeply engaged in problem-solving" instead',
}

_CATEGORY_TERMS: dict[LexiconCategory, tuple[str, ...]] = {
    LexiconCategory.MASCULINE_CODED: MASCULINE_CODED,
    LexiconCategory.EXTROVERT_BIAS: EXTROVERT_BIAS,
    LexiconCategory.RED_FLAG: RED_FLAGS,
}


def get_suggestion(term: str, category: LexiconCategory | None = None) -> str:
    """Curated replacement advice, or a generic hint for uncurated terms."""
    suggestion = SUGGESTIONS.get(term.lower())
    if suggestion:
        return suggestion
    tone = "more positive" if category is LexiconCategory.RED_FLAG else "more inclusive"
    return f'Consider replacing "{term}" with {tone} language'


def _build_entries() -> tuple[LexiconEntry, ...]:
    return tuple(
        LexiconEntry(term=term, category=category, suggestion=get_suggestion(term, category))
        for category in LexiconCategory
        for term in _CATEGORY_TERMS[category]
    )


LEXICON: tuple[LexiconEntry, ...] = _build_entries()


def entries_for(category: LexiconCategory) -> tuple[LexiconEntry, ...]:
    """Entries of one category, in lexicon order."""
    return tuple(e for e in LEXICON if e.category is category)

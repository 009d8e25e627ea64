"""Shared test configuration, fixtures and pytest markers."""

import pytest

from models.schemas.slop_penalty import SlopPenalty
from services.dimension_scorers import count_words

COMPENSATION_SENTENCE = "The salary range is $120,000 - $150,000 per year."
ENCOURAGEMENT_SENTENCE = "If you meet 60-70% of the qualifications, please apply."


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )


@pytest.fixture
def zero_slop():
    """Slop collaborator that never finds anything."""
    return lambda text: SlopPenalty()


@pytest.fixture
def make_document():
    """Factory for otherwise-clean documents of an exact word count.

    The document always discloses pay and includes an encouragement
    statement unless told otherwise; ``extra`` is placed before the filler.
    """
    def _make(
        words: int = 500,
        extra: str = "",
        compensation: bool = True,
        encouragement: bool = True,
    ) -> str:
        parts = []
        if compensation:
            parts.append(COMPENSATION_SENTENCE)
        if encouragement:
            parts.append(ENCOURAGEMENT_SENTENCE)
        if extra:
            parts.append(extra)
        prefix = " ".join(parts)
        remaining = words - count_words(prefix)
        assert remaining >= 0, "prefix longer than requested document"
        return (prefix + " " + "word " * remaining).strip()

    return _make

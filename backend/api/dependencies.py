"""Shared dependencies for API routes."""

from services.slop_detector import SlopDetector, get_slop_penalty


def get_slop_detector() -> SlopDetector:
    return get_slop_penalty

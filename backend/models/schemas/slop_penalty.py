"""Contract returned by a slop detector collaborator."""

from pydantic import BaseModel


class SlopPenalty(BaseModel):
    penalty: int = 0
    issues: list[str] = []
    pattern_count: int = 0

from pydantic import BaseModel

from models.schemas.extracted_fields import ExtractedFields
from models.schemas.validation_result import ValidationResult


class HealthResponse(BaseModel):
    status: str = "ok"
    lexicon_terms: int = 0


__all__ = ["ExtractedFields", "HealthResponse", "ValidationResult"]

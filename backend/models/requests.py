from pydantic import BaseModel, Field

from config import settings
from models.schemas.validation_result import PostingType


class ValidateRequest(BaseModel):
    text: str = Field(..., max_length=settings.max_document_chars, description="Job description text")
    posting_type: PostingType | None = Field(
        None, description="internal or external; inferred from the text when omitted"
    )


class ExtractRequest(BaseModel):
    markdown: str = Field(..., max_length=settings.max_document_chars, description="Job description markdown")

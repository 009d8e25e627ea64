from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_slop_detector
from config import settings
from models.requests import ExtractRequest, ValidateRequest
from models.responses import ExtractedFields, HealthResponse, ValidationResult
from services import jd_extractor, jd_validator
from services.lexicon import LEXICON
from services.slop_detector import SlopDetector

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", lexicon_terms=len(LEXICON))


@router.post("/validate", response_model=ValidationResult)
@limiter.limit(settings.rate_limit)
async def validate(
    request: Request,
    body: ValidateRequest,
    slop_detector: SlopDetector = Depends(get_slop_detector),
):
    return jd_validator.validate_document(body.text, body.posting_type, slop_detector)


@router.post("/extract", response_model=ExtractedFields)
@limiter.limit(settings.rate_limit)
async def extract(request: Request, body: ExtractRequest):
    return jd_extractor.extract_fields(body.markdown)

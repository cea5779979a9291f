import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .settings import settings
from .logging_config import setup_logging
from .middleware import RequestIdMiddleware
from .error_handlers import init_error_handlers
from .errors import InputError
from .schemas import ParsedPropertyData, ParseRequest, ParseResponse, ValidateResponse, CatalogResponse
from .parser import parse_property_text, validate_missing_fields
from .keyword_catalog import (
    LOCATION_LABEL, PROPERTY_TYPE_LABEL, AMENITY_LABEL, DEFAULT_LOCATION_ID, DEFAULT_PROPERTY_TYPE_ID,
)

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Villa Smart Import API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)
init_error_handlers(app)

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/smart-import/parse", response_model=ParseResponse)
def smart_import_parse(req: ParseRequest):
    text = req.text or ""
    if not text.strip():
        raise InputError("Chưa có nội dung bài đăng để phân tích.")
    if len(text) > settings.MAX_TEXT_LENGTH:
        raise InputError("Nội dung quá dài.", details={"max_length": settings.MAX_TEXT_LENGTH, "length": len(text)})

    # 1) Trích xuất
    data = parse_property_text(text)

    # 2) Kiểm tra trường bắt buộc (chỉ để gợi ý, không chặn)
    missing = validate_missing_fields(data)
    logger.info("Parsed %s (%d chars), missing=%d", data.code or "-", len(text), len(missing))

    return ParseResponse(data=data, missing_fields=missing)

@app.post("/smart-import/validate", response_model=ValidateResponse)
def smart_import_validate(data: ParsedPropertyData):
    return ValidateResponse(missing_fields=validate_missing_fields(data))

@app.get("/smart-import/catalog", response_model=CatalogResponse)
def smart_import_catalog():
    return CatalogResponse(
        locations=dict(LOCATION_LABEL),
        property_types=dict(PROPERTY_TYPE_LABEL),
        amenities=dict(AMENITY_LABEL),
        default_location_id=DEFAULT_LOCATION_ID,
        default_property_type_id=DEFAULT_PROPERTY_TYPE_ID,
    )

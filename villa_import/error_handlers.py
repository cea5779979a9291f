import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from .errors import AppError

logger = logging.getLogger(__name__)

def init_error_handlers(app):
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        logger.warning("%s(code=%s) on %s: %s", exc.__class__.__name__, exc.code, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_content(),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("ValidationError on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=422,
            content={"error": "VALIDATION_ERROR", "message": "Dữ liệu gửi lên không hợp lệ", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unexpected error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "INTERNAL_ERROR", "message": "Đã xảy ra lỗi không mong muốn"},
        )

"""
API 응답 엔벨로프 / 예외 처리

모든 응답은 {success, message, code, data} 형태를 따른다.
검증 실패 코드(INVALID_FORMAT 등)와 내부 오류(INTERNAL_ERROR)는 구분된다.
"""
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.constants import get_message
from utils.logger import get_logger

logger = get_logger(__name__)

# 라우팅 단계 HTTP 오류 (존재하지 않는 경로 등)
HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


class ApiError(Exception):
    """엔벨로프 형태로 응답할 API 오류"""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: Optional[str] = None,
        errors: Optional[List[Any]] = None,
        messages: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message or get_message(code)
        self.errors = errors
        self.messages = messages
        self.details = details
        super().__init__(f"[{code}] {self.message}")


def success_response(data: Dict[str, Any], message: str = "OK", code: str = "OK") -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "code": code,
        "data": data,
    }


def error_response(error: ApiError) -> JSONResponse:
    content: Dict[str, Any] = {
        "success": False,
        "message": error.message,
        "code": error.code,
        "data": None,
    }
    if error.errors is not None:
        content["errors"] = error.errors
    if error.messages is not None:
        content["messages"] = error.messages
    if error.details is not None:
        content["details"] = error.details
    return JSONResponse(status_code=error.status_code, content=jsonable_encoder(content))


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"잘못된 요청 데이터: {request.url.path}")
    errors = [
        {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg")}
        for err in exc.errors()
    ]
    return error_response(ApiError(400, "INVALID_REQUEST", errors=errors))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return error_response(ApiError(exc.status_code, code, message=str(exc.detail)))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"처리되지 않은 오류: {request.method} {request.url.path}")
    return error_response(ApiError(500, "INTERNAL_ERROR"))


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

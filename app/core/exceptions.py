from enum import Enum

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.context import get_request_id
from app.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """에러 코드 열거형"""

    GITHUB_UNAUTHORIZED = "GITHUB_UNAUTHORIZED"
    GITHUB_NOT_CONNECTED = "GITHUB_NOT_CONNECTED"
    GITHUB_NOT_FOUND = "GITHUB_NOT_FOUND"
    GITHUB_API_ERROR = "GITHUB_API_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CustomException(Exception):
    def __init__(
        self,
        status_code: int,
        error_code: ErrorCode | str,
        message: str,
        detail: str | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.detail = detail
        super().__init__(message)


class GitHubAPIError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=502,
            error_code=ErrorCode.GITHUB_API_ERROR,
            message="GitHub API 호출에 실패했습니다",
            detail=detail,
        )


class GitHubUnauthorizedError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=401,
            error_code=ErrorCode.GITHUB_UNAUTHORIZED,
            message="GitHub 인증에 실패했습니다",
            detail=detail,
        )


class GitHubNotConnectedError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=403,
            error_code=ErrorCode.GITHUB_NOT_CONNECTED,
            message="GitHub 계정이 연결되지 않았습니다",
            detail=detail,
        )


class GitHubNotFoundError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=404,
            error_code=ErrorCode.GITHUB_NOT_FOUND,
            message="GitHub 리소스를 찾을 수 없습니다",
            detail=detail,
        )


class ValidationError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=400,
            error_code=ErrorCode.INVALID_INPUT,
            message="입력값이 올바르지 않습니다",
            detail=detail,
        )


def register_exception_handlers(app):
    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        content = {
            "error_code": exc.error_code,
            "message": exc.message,
        }
        if exc.detail and not settings.is_production:
            content["detail"] = exc.detail

        return JSONResponse(
            status_code=exc.status_code,
            content=content,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "처리되지 않은 예외",
            path=request.url.path,
            error_type=type(exc).__name__,
        )
        content = {
            "error_code": ErrorCode.INTERNAL_ERROR,
            "message": "서버 내부 오류가 발생했습니다",
        }
        request_id = get_request_id()
        if request_id:
            content["request_id"] = request_id
        if not settings.is_production:
            content["detail"] = str(exc)

        return JSONResponse(status_code=500, content=content)

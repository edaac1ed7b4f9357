from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional

class AppException(HTTPException):
    """애플리케이션 전용 예외 클래스"""
    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.error_code = error_code

def create_error_response(message: str) -> Dict[str, Any]:
    """클라이언트에 내려가는 에러 응답 포맷: {"error": message}"""
    return {"error": message}

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.detail),
        headers=exc.headers,
    )

# 자주 사용되는 에러들
class NotFoundException(AppException):
    def __init__(self, resource: str, detail: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail or f"{resource} not found",
            error_code="NOT_FOUND"
        )

class InternalServerException(AppException):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
            error_code="INTERNAL_ERROR"
        )

class MissingCredentialsError(RuntimeError):
    """DB_USER / DB_PASS 없이 MongoDB URI를 만들려고 할 때 발생 (기동 중단)"""
    def __init__(self, message: str = "DB_USER and DB_PASS must be set (or MONGO_URI)"):
        super().__init__(message)

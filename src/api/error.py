"""HTTP error mapping for Result errors"""

from typing import Optional
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from libs.result import Error
from src.domain.errors import ErrorCode

ERROR_STATUS_CODES = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATUS_TRANSITION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CANNOT_CANCEL_DRAFT: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_CANCELLED: status.HTTP_409_CONFLICT,
    ErrorCode.CANNOT_DELETE_ISSUED: status.HTTP_409_CONFLICT,
    ErrorCode.DOCUMENT_IMMUTABLE: status.HTTP_409_CONFLICT,
    ErrorCode.LIMIT_EXCEEDED: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorCode.SUBSCRIPTION_INACTIVE: status.HTTP_403_FORBIDDEN,
    ErrorCode.DOCUMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.COMPANY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SAVE_DOCUMENT_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.CANCEL_DOCUMENT_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.DELETE_DOCUMENT_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.GET_DOCUMENT_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.LIST_DOCUMENTS_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.SYNC_CUSTOMER_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.GET_USAGE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(error: Error) -> int:
    try:
        return ERROR_STATUS_CODES[ErrorCode(error.code)]
    except ValueError:
        return status.HTTP_400_BAD_REQUEST


class ClientError(HTTPException):
    """
    HTTP error carrying a use case Error

    Status code defaults to the mapping of the error code.
    Rendered as {"error": {"code": ..., "message": ...}}.
    """

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(
            status_code=status_code or status_code_for(error),
            detail=error.message,
        )
        self.error = error


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error.code, "message": exc.error.message}},
    )

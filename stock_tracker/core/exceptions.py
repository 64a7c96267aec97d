from fastapi import HTTPException
from stock_tracker.constants.error_codes import ErrorCode


class AppException(HTTPException):
    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: ErrorCode,
        details: dict | None = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.error_code = error_code
        self.details = details


class StoreOperationError(AppException):
    """A record store call failed (network, driver or database error)."""

    def __init__(self, operation: str):
        super().__init__(
            503,
            "Record store operation failed",
            ErrorCode.STORE_ERROR,
            {"operation": operation},
        )

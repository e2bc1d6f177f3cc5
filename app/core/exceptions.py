from typing import Optional
from fastapi import HTTPException, status

class BaseAppException(HTTPException):
    def __init__(self, status_code: int, detail: str, error: Optional[str] = None):
        super().__init__(status_code=status_code, detail=detail)
        self.error = error

class ValidationError(BaseAppException):
    def __init__(self, detail: str = "Validation error"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class ConflictError(BaseAppException):
    """State conflict: locked inventory, second active count at a location"""
    def __init__(self, detail: str = "Operation not allowed in the current state"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class DuplicateError(BaseAppException):
    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)

class NotFoundError(BaseAppException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class InternalError(BaseAppException):
    def __init__(self, detail: str = "Internal server error", error: Optional[str] = None):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail, error=error)

from fastapi import HTTPException, status

class AppException(HTTPException):
    """Base exception for application errors"""
    pass

class NotFoundException(AppException):
    def __init__(self, detail: str = "Resource not found."):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail
        )

class ForbiddenException(AppException):
    def __init__(self, detail: str = "Request rejected."):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )

class InvalidIdentifierException(ForbiddenException):
    def __init__(self, field: str, value: str):
        super().__init__(f'{field}: "{value}" is not a valid identifier.')

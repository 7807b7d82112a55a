"""
Exceptions for Follows module
"""
from src.exceptions import ForbiddenException


class SelfFollowException(ForbiddenException):
    def __init__(self, detail: str = "A user cannot follow themselves."):
        super().__init__(detail=detail)

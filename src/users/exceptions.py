"""
Exceptions for Users module
"""
from src.exceptions import NotFoundException, ForbiddenException


class NoSuchUserException(NotFoundException):
    def __init__(self, detail: str = "No such user."):
        super().__init__(detail=detail)


class DuplicateUserException(ForbiddenException):
    def __init__(self, detail: str = "User already exists."):
        super().__init__(detail=detail)

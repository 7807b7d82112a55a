"""
Exceptions for Tuits module
"""
from src.exceptions import NotFoundException, ForbiddenException
from src.tuits.constants import NO_SUCH_TUIT, EMPTY_TUIT_CONTENT


class NoSuchTuitException(NotFoundException):
    def __init__(self, detail: str = NO_SUCH_TUIT):
        super().__init__(detail=detail)


class EmptyTuitContentException(ForbiddenException):
    def __init__(self, detail: str = EMPTY_TUIT_CONTENT):
        super().__init__(detail=detail)

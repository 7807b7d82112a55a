"""
Exceptions for Messages module
"""
from src.exceptions import NotFoundException, ForbiddenException
from src.messages.constants import NO_SUCH_MESSAGE, EMPTY_MESSAGE


class NoSuchMessageException(NotFoundException):
    def __init__(self, detail: str = NO_SUCH_MESSAGE):
        super().__init__(detail=detail)


class EmptyMessageException(ForbiddenException):
    def __init__(self, detail: str = EMPTY_MESSAGE):
        super().__init__(detail=detail)

from src.exceptions import ForbiddenException
from src.auth.constants import NO_USER_LOGGED_IN, INCORRECT_CREDENTIAL


class NoUserLoggedInException(ForbiddenException):
    def __init__(self, detail: str = NO_USER_LOGGED_IN):
        super().__init__(detail=detail)


class IncorrectCredentialException(ForbiddenException):
    def __init__(self, detail: str = INCORRECT_CREDENTIAL):
        super().__init__(detail=detail)

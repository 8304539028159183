from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


ERROR_STATUS_CODES = {
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "ACCOUNT_DISABLED": status.HTTP_403_FORBIDDEN,
    "ACCOUNT_LOCKED": status.HTTP_423_LOCKED,
    "INVALID_TOKEN": status.HTTP_400_BAD_REQUEST,
    "INVALID_PASSWORD": status.HTTP_400_BAD_REQUEST,
    "ROLE_INACTIVE": status.HTTP_400_BAD_REQUEST,
    "TOKEN_EXPIRED": status.HTTP_410_GONE,
    "TOKEN_ALREADY_USED": status.HTTP_409_CONFLICT,
    "LAST_ADMIN_PROTECTED": status.HTTP_409_CONFLICT,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "ROLE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "ACCOUNT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ROLE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error) -> None:
    """Translate a use case error into the matching HTTP exception"""
    status_code = ERROR_STATUS_CODES.get(error.code)
    if status_code is None:
        # INVALID_CONFIGURATION and anything unexpected
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)

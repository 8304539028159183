from libs.result import Error

INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
TOKEN_EXPIRED = "TOKEN_EXPIRED"
TOKEN_ALREADY_USED = "TOKEN_ALREADY_USED"
LAST_ADMIN_PROTECTED = "LAST_ADMIN_PROTECTED"


def invalid_configuration(message: str) -> Error:
    return Error(INVALID_CONFIGURATION, message)


def token_expired() -> Error:
    return Error(TOKEN_EXPIRED, "Password reset token has expired")


def token_already_used() -> Error:
    return Error(TOKEN_ALREADY_USED, "Password reset token has already been used")


def last_admin_protected() -> Error:
    return Error(
        LAST_ADMIN_PROTECTED,
        "Cannot deactivate or demote the last active administrator",
    )

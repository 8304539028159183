from libs.result import Error, Result, Return

DEFAULT_MIN_LENGTH = 8


def validate_password(password: str, min_length: int = DEFAULT_MIN_LENGTH) -> Result[None]:
    """
    Validate password complexity.

    Args:
        password: Password to validate
        min_length: Minimum accepted length

    Returns:
        Result with None if valid, or Error if invalid
    """
    if password is None or len(password) < min_length:
        return Return.err(
            Error(
                "INVALID_PASSWORD",
                f"Password must be at least {min_length} characters long",
            )
        )

    return Return.ok(None)

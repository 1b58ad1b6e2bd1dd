"""Common validation helpers for user use cases."""

from app.domain.exceptions import ValidationError

PASSWORD_MIN_LENGTH = 8


def normalize_email(email: str) -> str:
    """Return the trimmed, lower-cased address or raise ``ValidationError``."""

    normalized = (email or "").strip().lower()
    if normalized.count("@") != 1:
        raise ValidationError("Email must be a valid address", code="INVALID_EMAIL")

    local_part, domain = normalized.split("@", 1)
    if not local_part or not domain:
        raise ValidationError("Email must be a valid address", code="INVALID_EMAIL")

    return normalized


def ensure_valid_password(password: str) -> str:
    if len(password or "") < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
            code="PASSWORD_TOO_SHORT",
            details={"min_length": PASSWORD_MIN_LENGTH},
        )
    return password

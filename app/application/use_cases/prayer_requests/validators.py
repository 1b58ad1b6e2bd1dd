"""Input cleaning shared by the prayer request use cases."""

from app.domain.exceptions import ValidationError

TITLE_MAX_LENGTH = 200


def clean_required_text(value: str | None, *, field_name: str) -> str:
    """Return ``value`` trimmed or raise when nothing is left."""

    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(
            f"{field_name.capitalize()} is required",
            code="REQUIRED_FIELD",
            details={"field": field_name},
        )
    return cleaned


def clean_optional_text(value: str | None) -> str | None:
    """Return ``value`` trimmed, turning blank input into ``None``."""

    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def clean_title(value: str | None) -> str | None:
    title = clean_optional_text(value)
    if title is not None and len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters",
            code="TITLE_TOO_LONG",
            details={"field": "title", "max_length": TITLE_MAX_LENGTH},
        )
    return title

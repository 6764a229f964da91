"""API errors and validation helpers."""

from app.errors import ValidationError

MIN_TAG = 1


def validate_tag(tag: int) -> None:
    """Validate contestant tag is a positive integer."""
    if isinstance(tag, bool) or not isinstance(tag, int) or tag < MIN_TAG:
        raise ValidationError(f"Invalid contestant tag: {tag}. Must be an integer >= {MIN_TAG}")


def validate_election_key(key: str) -> None:
    """Validate election key is a non-empty string."""
    if not isinstance(key, str) or not key.strip():
        raise ValidationError("Election key must be a non-empty string")

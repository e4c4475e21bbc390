from typing import Dict, Iterable, List, Tuple

from flask import session

from utils.errors import ValidationFailed

REQUIRED_MESSAGE = "The {field} field is required."
MAX_LENGTH_MESSAGE = "The {field} field must not be greater than {max_length} characters."


def clean_value(value) -> str:
    """Submitted value as text, surrounding whitespace trimmed. Markup is kept verbatim."""
    if value is None:
        return ""
    return str(value).strip()


def validate_required(data, fields: Iterable[str], redirect_to: str = "/",
                      max_length: int = 255) -> Dict[str, str]:
    """
    Validates that every field is present and non-empty.

    Args:
        data: submitted form mapping
        fields: required field names
        redirect_to: fallback target of the "redirect back" on failure
        max_length: upper bound on the trimmed value length

    Returns:
        Dict of trimmed values, one per field

    Raises:
        ValidationFailed: with errors keyed by exactly the failing fields
    """
    fields = tuple(fields)
    cleaned: Dict[str, str] = {}
    errors: Dict[str, List[str]] = {}

    for field in fields:
        value = clean_value(data.get(field))
        if not value:
            errors.setdefault(field, []).append(REQUIRED_MESSAGE.format(field=field))
        elif len(value) > max_length:
            errors.setdefault(field, []).append(
                MAX_LENGTH_MESSAGE.format(field=field, max_length=max_length)
            )
        else:
            cleaned[field] = value

    if errors:
        old_input = {field: data.get(field) or "" for field in fields}
        raise ValidationFailed(errors, old_input=old_input, redirect_to=redirect_to)

    return cleaned


def pop_form_state() -> Tuple[Dict[str, List[str]], Dict[str, str]]:
    """Consumes the errors and old input left by a failed submission"""
    return session.pop("errors", {}), session.pop("_old_input", {})

from typing import Any, List, Optional, Sequence
from scrolljob.models.base import URL_PATTERN
from scrolljob.utils.exceptions import ValidationError

def raise_if_errors(errors: List[str]) -> None:
    """Raises a single ValidationError listing every violation."""
    if errors:
        raise ValidationError(", ".join(errors))

def _as_text(value: Any, label: str, errors: List[str]) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        errors.append(f"{label} must be a string")
        return None
    return value.strip()

def check_text(
    errors: List[str],
    value: Any,
    label: str,
    max_length: int,
    required: bool = False,
    url: bool = False
) -> None:
    """Appends the violations of one text field to `errors`."""
    text = _as_text(value, label, errors)

    if required and not text and isinstance(value, (str, type(None))):
        errors.append(f"{label} is required")
    if not text:
        return
    if len(text) > max_length:
        errors.append(f"{label} cannot exceed {max_length} characters")
    if url and not URL_PATTERN.match(text):
        errors.append(f"{label} must be a valid URL")

def validate_update_status(status: Any, allowed_statuses: Sequence[str]) -> None:
    """Membership check only; any allowed status is reachable from any other."""
    if not status:
        raise ValidationError("Status is required")

    if status not in allowed_statuses:
        raise ValidationError(f"Invalid status. Must be: {', '.join(allowed_statuses)}")

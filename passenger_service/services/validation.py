"""
Input validation helpers.

These are pure functions with no storage access; they return the list of
problems found (empty when the input is valid) or raise ValidationError
where noted.
"""

import re
from typing import Any, Dict, List

from passenger_service.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")

# Placeholders a cancellation message template may use
TEMPLATE_FIELDS = ("flight_id", "first_name", "last_name", "email")

_REQUIRED_TEXT_FIELDS = (
    ("first_name", "firstName"),
    ("last_name", "lastName"),
    ("email", "email"),
)


def _is_blank(value: Any) -> bool:
    return value is None or not isinstance(value, str) or not value.strip()


def validate_passenger(dto) -> List[str]:
    """
    Validate a passenger creation transfer object.

    Args:
        dto: Object exposing first_name, last_name, email and flight_id

    Returns:
        List[str]: Human-readable problems, empty if the input is valid
    """
    errors = []

    for attr, label in _REQUIRED_TEXT_FIELDS:
        if _is_blank(getattr(dto, attr, None)):
            errors.append(f"{label} is required")

    email = getattr(dto, "email", None)
    if not _is_blank(email) and not EMAIL_PATTERN.match(email.strip()):
        errors.append("email must be a valid email address")

    flight_id = getattr(dto, "flight_id", None)
    if flight_id is None:
        errors.append("flightId is required")
    elif isinstance(flight_id, bool) or not isinstance(flight_id, int):
        errors.append("flightId must be an integer")
    elif flight_id < 1:
        errors.append("flightId must be a positive integer")

    return errors


def render_message(template: str, **values: Any) -> str:
    """
    Render a notification message template.

    Every name in TEMPLATE_FIELDS is available to the template; names not
    passed in ``values`` render as empty strings.

    Args:
        template: ``str.format`` template, e.g. "Flight {flight_id} has been cancelled."
        **values: Placeholder values

    Returns:
        str: The rendered message

    Raises:
        ValidationError: If the template is empty, uses an unknown
            placeholder or renders to an empty message
    """
    if _is_blank(template):
        raise ValidationError(["message template is required"])

    context: Dict[str, Any] = {name: "" for name in TEMPLATE_FIELDS}
    context.update(values)
    try:
        message = template.format(**context)
    except KeyError as e:
        raise ValidationError([f"message template uses unknown placeholder {e}"]) from e
    except (IndexError, ValueError) as e:
        raise ValidationError([f"message template is malformed: {e}"]) from e

    if not message.strip():
        raise ValidationError(["message template renders an empty message"])
    return message

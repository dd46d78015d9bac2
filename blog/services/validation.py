"""Input checks shared by the post engines.

Every function here accepts arbitrary input and either returns the cleaned
value or raises ``InvalidArgument``. Nothing else escapes, so callers can
hand them raw JSON or query-string values.
"""

from blog.models.post_model import TAG_DELIMITER
from blog.services.errors import InvalidArgument


SORT_FIELDS = ("id", "reads", "likes", "popularity")
SORT_DIRECTIONS = ("asc", "desc")

# largest value a BIGINT column can hold
MAX_IDENTIFIER = 2**63 - 1


def _parse_identifier(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not (value.isdigit() and value.isascii()):
            return None
        if len(value.lstrip("0")) > len(str(MAX_IDENTIFIER)):
            return None
        value = int(value)
    if isinstance(value, int) and 0 <= value <= MAX_IDENTIFIER:
        return value
    return None


def validate_identifier(value, field="id") -> int:
    parsed = _parse_identifier(value)
    if parsed is None:
        raise InvalidArgument(f"{field} must be a positive number")
    return parsed


def validate_positive_integers(values, field="ids") -> list[int]:
    if not isinstance(values, (list, tuple)):
        raise InvalidArgument(f"{field} must be an array")
    if not values:
        raise InvalidArgument(f"{field} must not be empty")

    parsed = [_parse_identifier(value) for value in values]
    if any(value is None for value in parsed):
        raise InvalidArgument(f"{field} must be positive numbers")
    return parsed


def parse_id_list(raw, field="ids") -> list[int]:
    """Parse the comma-separated form used in query strings ("1,2,3")."""
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidArgument(f"Must provide {field}")
    return validate_positive_integers(raw.split(","), field=field)


def validate_non_empty_string(value, field="value") -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field} must be a non-empty string")
    return value.strip()


def validate_non_empty_strings(values, field="values") -> list[str]:
    if not isinstance(values, (list, tuple)):
        raise InvalidArgument(f"{field} must be an array")
    if not values:
        raise InvalidArgument(f"{field} must not be empty")
    if not all(isinstance(value, str) and value.strip() for value in values):
        raise InvalidArgument(f"{field} must be non-empty strings")
    return [value.strip() for value in values]


def validate_tags(values, field="tags") -> list[str]:
    tags = validate_non_empty_strings(values, field=field)
    if any(TAG_DELIMITER in tag for tag in tags):
        raise InvalidArgument(f"{field} must not contain '{TAG_DELIMITER}'")
    return tags


def validate_enum(value, allowed, field="value") -> str:
    if not isinstance(value, str) or value not in allowed:
        raise InvalidArgument(f"{field} must be one of {', '.join(allowed)}")
    return value

from apps.shared.exceptions import ValidationError


def parse_object_id(raw_id, field: str = 'id') -> int:
    """
    Parse a primary key taken from the URL path.

    Raises:
        ValidationError: ``raw_id`` is not a positive integer
    """
    value = str(raw_id).strip()
    if not (value.isascii() and value.isdigit()) or int(value) <= 0:
        raise ValidationError(
            'Invalid ID format',
            error_code='invalid_id',
            context={'field': field, 'value': str(raw_id)},
        )
    return int(value)

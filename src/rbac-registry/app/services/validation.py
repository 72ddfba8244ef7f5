"""Input checks shared by the registries."""

from __future__ import annotations

from shared.observability import get_logger

from .exceptions import ValidationError

logger = get_logger(__name__)


def check_name_length(field: str, value: str, min_length: int, max_length: int) -> None:
    """Raise ValidationError unless ``value`` is min_length..max_length characters."""
    if len(value) < min_length:
        msg = f'"{field}" length must be at least {min_length} characters long'
    elif len(value) > max_length:
        msg = f'"{field}" length must be less than or equal to {max_length} characters long'
    else:
        return

    logger.warning(msg, field=field, length=len(value))
    raise ValidationError(msg)


def check_not_empty(field: str, value: str) -> None:
    if not value:
        msg = f'"{field}" is not allowed to be empty'
        logger.warning(msg, field=field)
        raise ValidationError(msg)

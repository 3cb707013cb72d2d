"""Submission input rules. Checked before any repository call."""

from src.jm_common.errors import ValidationError
from src.jm_common.money import to_paise


def require_message(message: object) -> str:
    """Return the message with surrounding whitespace removed; reject if empty."""
    if not isinstance(message, str) or not message.strip():
        raise ValidationError("message must not be empty")
    return message.strip()


def require_proposed_amount(amount: object) -> int:
    """Finite number > 0, in rupees; returned as paise."""
    return to_paise(amount, field="proposed_amount")

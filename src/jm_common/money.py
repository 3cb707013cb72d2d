"""Integer money utilities.

All budgets, proposed amounts and wallet figures are int paise (1/100 INR).
User input may arrive as int, float, Decimal or numeric string; it is converted
exactly once, here.
"""

from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation

from src.jm_common.errors import ValidationError

_PAISE_PER_RUPEE = 100

# Largest amount a BIGINT paise column holds.
MAX_PAISE = 2**63 - 1
_MAX_RUPEES = Decimal(MAX_PAISE) / _PAISE_PER_RUPEE


def to_paise(amount: object, field: str = "amount") -> int:
    """Convert a positive, finite rupee amount to paise.

    Raises ValidationError for bools, non-numeric values, NaN/inf, anything
    that is not strictly greater than zero after rounding, and anything above
    MAX_PAISE.
    """
    if isinstance(amount, bool) or amount is None:
        raise ValidationError(f"{field} must be a number")
    if isinstance(amount, (int, float, Decimal)):
        raw = str(amount)
    elif isinstance(amount, str):
        raw = amount.strip()
    else:
        raise ValidationError(f"{field} must be a number")

    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValidationError(f"{field} must be a number") from None

    if not value.is_finite():
        raise ValidationError(f"{field} must be finite")
    if value <= 0:
        raise ValidationError(f"{field} must be greater than zero")
    if value > _MAX_RUPEES:
        raise ValidationError(f"{field} is too large")

    try:
        paise = int((value * _PAISE_PER_RUPEE).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except DecimalException:
        raise ValidationError(f"{field} is too large") from None
    if paise <= 0:
        raise ValidationError(f"{field} must be greater than zero")
    if paise > MAX_PAISE:
        raise ValidationError(f"{field} is too large")
    return paise


def paise_to_display(paise: int | None) -> str:
    """Render paise for display: 500000 -> '₹5,000.00', None -> '₹0.00'."""
    paise = paise or 0
    if paise < 0:
        abs_paise = -paise
        return f"-₹{abs_paise // 100:,}.{abs_paise % 100:02d}"
    return f"₹{paise // 100:,}.{paise % 100:02d}"

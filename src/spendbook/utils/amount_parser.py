"""Amount parsing utilities."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation


def parse_amount_to_minor(amount_str: str) -> int:
    """Parse a user-entered amount into integer minor units (cents).

    Handles formats such as:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "7"

    Values with more than two decimals are rounded half-up to the cent. The
    sign is kept; rejecting non-positive amounts is the validators' job.

    Args:
        amount_str: Amount string

    Returns:
        Amount in minor units

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove currency symbols, thousands separators and whitespace
    cleaned = re.sub(r"[$€£¥₹]", "", amount_str)
    cleaned = cleaned.replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")

    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

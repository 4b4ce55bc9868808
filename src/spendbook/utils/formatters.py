"""Money formatting helpers for display."""

CURRENCY_SYMBOLS = {
    "LKR": "Rs ",
    "USD": "$",
    "CAD": "$",
    "AUD": "$",
    "NZD": "$",
    "EUR": "EUR ",
    "GBP": "GBP ",
    "INR": "INR ",
    "JPY": "JPY ",
}


def get_currency_symbol(code: str) -> str:
    """Display prefix for a currency code; unknown codes render as "XYZ "."""
    upper = code.upper()
    return CURRENCY_SYMBOLS.get(upper, f"{upper} ")


def format_amount_minor(amount_minor: int) -> str:
    """Format minor units as a grouped two-decimal string, e.g. 123456 -> "1,234.56"."""
    sign = "-" if amount_minor < 0 else ""
    major, minor = divmod(abs(amount_minor), 100)
    return f"{sign}{major:,}.{minor:02d}"


def format_currency(amount_minor: int, currency_code: str) -> str:
    """Format minor units with a currency prefix, e.g. (500, "USD") -> "$5.00"."""
    formatted = format_amount_minor(amount_minor)
    symbol = get_currency_symbol(currency_code)
    if formatted.startswith("-"):
        return f"-{symbol}{formatted[1:]}"
    return f"{symbol}{formatted}"

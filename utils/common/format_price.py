def format_price(price: float) -> str:
    """Format a price in dollars, e.g. 85 -> "$85.00"."""
    return f"${price:,.2f}"

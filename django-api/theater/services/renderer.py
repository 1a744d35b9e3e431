"""Plain-text rendering of aggregated statements."""

from theater.domain import Money, StatementData


def usd(cents: int) -> str:
    """Format an amount in cents as US dollars, e.g. 123456 -> "$1,234.56"."""
    return str(Money(cents))


def render(data: StatementData) -> str:
    result = f"Statement for {data.customer}\n"
    for line in data.lines:
        result += f"  {line.play_name}: {usd(line.amount)} ({line.audience} seats)\n"
    result += f"Amount owed is {usd(data.total_amount)}\n"
    result += f"You earned {data.total_volume_credits} credits\n"
    return result

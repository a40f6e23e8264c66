"""Console output formatting utilities."""

from __future__ import annotations

from bitex_analytics.metrics.config import QUADRANTS
from bitex_analytics.metrics.types import DerivedMetrics

CURRENCY = "₹"


def format_money(value: float) -> str:
    """Format an amount with the currency symbol and thousands separators.

    Examples:
        >>> format_money(125000)
        '₹125,000'
    """
    return f"{CURRENCY}{value:,.0f}"


def format_trend(value: float) -> str:
    arrow = "▲" if value >= 0 else "▼"
    return f"{arrow} {abs(value):.1f}%"


def format_metrics_for_console(metrics: DerivedMetrics) -> str:
    """Build a human-readable summary of a metrics snapshot for console output.

    Args:
        metrics: Snapshot returned by compute_metrics.

    Returns:
        Multi-line text with KPIs, peak hour, rankings and distributions.
    """
    lines = []
    lines.append("BiteX Executive Analytics")
    lines.append("=" * 60)

    if not metrics.metadata.get("order_count", 1):
        lines.append("No orders available.")
        lines.append("")

    lines.append(
        f"Daily Revenue:      {format_money(metrics.total_daily_sales)} "
        f"({format_trend(metrics.sales_trend)} vs yesterday)"
    )
    lines.append(f"Avg Ticket Size:    {format_money(metrics.aov)}")
    lines.append(f"Loyalty Rate:       {metrics.repeat_rate:.1f}%")
    lines.append(f"Guest Satisfaction: {metrics.avg_rating:.1f} / 5")

    busiest = max(metrics.peak_hour_data, key=lambda h: h.sales, default=None)
    if busiest is not None and busiest.sales > 0:
        lines.append(f"Peak Hour:          {busiest.hour} ({format_money(busiest.sales)})")
    lines.append("")

    if metrics.most_ordered_items:
        lines.append("Most Ordered:")
        for item in metrics.most_ordered_items:
            lines.append(f"  {item.name}: {item.orders} sold, {format_money(item.revenue)}")
        lines.append("")

    if metrics.contribution_data:
        lines.append("Revenue Contribution:")
        for item in metrics.contribution_data:
            lines.append(f"  {item.name}: {format_money(item.value)} ({item.percentage}%)")
        lines.append("")

    lines.append("Basket Size:")
    for bucket in metrics.buckets:
        lines.append(f"  {bucket.range}: {bucket.count}")
    lines.append("")

    lines.append("Party Size:")
    for party in metrics.party_size_dist:
        lines.append(f"  {party.size}: {party.count}")
    lines.append("")

    lines.append("Week over Week AOV:")
    for day in metrics.day_averages:
        marker = " (est.)" if day.prev_is_estimate else ""
        lines.append(
            f"  {day.day}: {format_money(day.aov)} vs {format_money(day.prev_aov)}{marker}"
        )
    lines.append("")

    if metrics.matrix_data:
        lines.append(
            f"Menu Engineering (avg qty {metrics.avg_qty:.1f}, "
            f"avg profit {format_money(metrics.avg_profit)}):"
        )
        for quadrant in QUADRANTS:
            names = [p.name for p in metrics.matrix_data if p.quadrant == quadrant]
            if names:
                lines.append(f"  {quadrant}: {', '.join(names)}")

    return "\n".join(lines)

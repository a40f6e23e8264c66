"""Output formatters for metrics snapshots."""

from bitex_analytics.formatters.console import format_metrics_for_console

__all__ = ["format_metrics_for_console"]

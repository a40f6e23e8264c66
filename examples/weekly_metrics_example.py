"""Example: Weekly dashboard metrics from a dataset file

This example shows the library flow behind the dashboard: load (or generate)
a dataset, narrow it to the last 7 days, compute metrics and export CSVs.

Prerequisites:
- A dataset JSON at data/dataset.json ({orders, menuItems, customers}),
  or nothing at all: a seeded sample dataset is generated instead
"""

from datetime import datetime

from bitex_analytics import DataPaths, compute_metrics, filter_by_window
from bitex_analytics.dataset import add_manual_order, generate_sample_dataset, load_dataset
from bitex_analytics.export import export_metrics, export_orders
from bitex_analytics.formatters import format_metrics_for_console

paths = DataPaths.from_root("data")
now = datetime(2025, 1, 31, 22, 0)

print("=" * 80)
print("Example 1: Last 7 days of orders")
print("=" * 80)

if paths.dataset_json.exists():
    print(f"\nLoading data from: {paths.dataset_json}")
    dataset = load_dataset(paths.dataset_json)
else:
    print("\nNo dataset file found, generating a sample month (seed=42)")
    dataset = generate_sample_dataset(now, seed=42)

print(f"Loaded {len(dataset.orders)} orders and {len(dataset.menu_items)} menu items")

orders = filter_by_window(dataset.orders, "last-7-days", now)
metrics = compute_metrics(orders, dataset.menu_items, now)

print()
print(format_metrics_for_console(metrics))

print("\n" + "=" * 80)
print("Example 2: Recording a walk-in order")
print("=" * 80)

dataset = add_manual_order(dataset, "Walk-in Guest", 1450, guest_count=2, rating=4.5, now=now)
orders = filter_by_window(dataset.orders, "last-7-days", now)
metrics = compute_metrics(orders, dataset.menu_items, now)
print(f"\nDaily revenue now: {metrics.total_daily_sales:,.0f}")

print("\n" + "=" * 80)
print("Example 3: CSV exports")
print("=" * 80)

paths.ensure_dirs()
print(f"\nOrders:  {export_orders(paths, orders, now.date())}")
print(f"Metrics: {export_metrics(paths, metrics, now.date())}")

"""Dataset module.

Loading, generating and editing the {orders, menuItems, customers} document,
and preparing the pandas frames the metrics engine aggregates.

Example:
    >>> from datetime import datetime
    >>> from bitex_analytics.dataset import generate_sample_dataset, load_dataset
    >>>
    >>> dataset = generate_sample_dataset(datetime(2025, 1, 31, 22, 0), seed=42)
    >>> dataset = load_dataset("data/dataset.json")
"""

from bitex_analytics.dataset.generator import generate_sample_dataset
from bitex_analytics.dataset.loaders import (
    dataset_from_dict,
    dataset_to_dict,
    load_dataset,
    save_dataset,
)
from bitex_analytics.dataset.manual import add_manual_order, clear_orders

__all__ = [
    "add_manual_order",
    "clear_orders",
    "dataset_from_dict",
    "dataset_to_dict",
    "generate_sample_dataset",
    "load_dataset",
    "save_dataset",
]

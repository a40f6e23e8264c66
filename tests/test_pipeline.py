"""Smoke tests for the metrics CLI."""

import json
from pathlib import Path

import pytest

from bitex_analytics.dataset import generate_sample_dataset, save_dataset
from bitex_analytics.dataset.loaders import parse_timestamp
from bitex_analytics.pipeline import build_parser, main

NOW = "2025-01-31T22:00:00"


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.window == "all-time"
    assert args.data_root == "data"
    assert not args.sample
    assert not args.strict


def test_parser_rejects_unknown_window() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--window", "last-90-days"])


def test_sample_run_writes_exports(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    code = main(
        [
            "--sample",
            "--seed",
            "1",
            "--now",
            NOW,
            "--window",
            "last-7-days",
            "--data-root",
            str(tmp_path),
            "--export-orders",
            "--export-metrics",
        ]
    )

    assert code == 0
    assert "BiteX Executive Analytics" in capsys.readouterr().out
    assert (tmp_path / "exports" / "bitex_orders_2025-01-31.csv").exists()
    assert (tmp_path / "exports" / "bitex_metrics_2025-01-31.csv").exists()


def test_file_run_prints_json(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    dataset_path = save_dataset(
        generate_sample_dataset(parse_timestamp(NOW), seed=2, days=3, customer_count=10),
        tmp_path / "dataset.json",
    )

    code = main(["--file", str(dataset_path), "--now", NOW, "--json", "--strict"])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["peakHourData"]) == 24
    assert payload["totalDailySales"] > 0


def test_missing_file_returns_error(tmp_path: Path) -> None:
    assert main(["--file", str(tmp_path / "missing.json"), "--now", NOW]) == 1


def test_strict_mismatch_returns_error(tmp_path: Path) -> None:
    path = tmp_path / "dataset.json"
    path.write_text(
        json.dumps(
            {
                "orders": [
                    {
                        "id": "o1",
                        "timestamp": NOW,
                        "customerId": "c1",
                        "items": [{"menuItemId": "1", "quantity": 1, "priceAtOrder": 850}],
                        "totalAmount": 100,
                        "orderPlacedAt": NOW,
                        "orderServedAt": NOW,
                        "guestCount": 2,
                        "rating": 4.0,
                    }
                ],
                "menuItems": [],
                "customers": [],
            }
        ),
        encoding="utf-8",
    )

    assert main(["--file", str(path), "--now", NOW]) == 0
    assert main(["--file", str(path), "--now", NOW, "--strict"]) == 1

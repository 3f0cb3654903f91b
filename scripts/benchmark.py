#!/usr/bin/env python3
"""Benchmark script for filterable performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from dataclasses import dataclass
from pathlib import Path

from filterable import FilterableByKeypaths, Selection, filter_by_text, filter_by_values

ITEM_COUNT = 10000


@dataclass(frozen=True)
class _Row(FilterableByKeypaths):
    search_fields = ("name", "city")

    name: str
    city: str
    group: int

    def matches(self, filter_value: object, /) -> bool:
        if isinstance(filter_value, int):
            return self.group == filter_value
        return FilterableByKeypaths.matches(self, filter_value)


def _make_rows() -> list[_Row]:
    return [
        _Row(name=f"Zoë Ñúñez {i}", city=f"Ciudad {i % 97}", group=i % 10)
        for i in range(ITEM_COUNT)
    ]


def benchmark_text_search(rows: list[_Row]) -> float:
    """Measure multi-token search over all rows."""
    start = time.perf_counter()
    filter_by_text(rows, "zoe nunez ciudad 4")
    return time.perf_counter() - start


def benchmark_value_filter(rows: list[_Row]) -> float:
    """Measure value filtering over all rows."""
    selection = Selection([3])
    start = time.perf_counter()
    filter_by_values(rows, selection)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run filterable benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    rows = _make_rows()
    results = [
        {
            "name": f"Text Search ({ITEM_COUNT} items)",
            "unit": "seconds",
            "value": benchmark_text_search(rows),
        },
        {
            "name": f"Value Filter ({ITEM_COUNT} items)",
            "unit": "seconds",
            "value": benchmark_value_filter(rows),
        },
    ]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()

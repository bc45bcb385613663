#!/usr/bin/env python3
"""
jsxparser Latency Benchmark

Measures one render() call end to end.

INCLUDED:
  - Markup parsing (AST construction)
  - Expression evaluation
  - Element construction (props, keys, sanitization)

EXCLUDED:
  - Grammar construction (warmed up before timing)
  - Host rendering of the returned Element tree
"""

import time
import statistics
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from jsxparser import render


def benchmark(markup: str, bindings: dict, iterations: int = 1000) -> dict:
    """Benchmark a single markup/bindings pair."""
    times_us = []

    for _ in range(iterations):
        start = time.perf_counter_ns()
        render(markup, bindings=bindings, disable_key_generation=True)
        end = time.perf_counter_ns()
        times_us.append((end - start) / 1000)  # ns → µs

    return {
        "iterations": iterations,
        "mean_us": statistics.mean(times_us),
        "median_us": statistics.median(times_us),
        "stdev_us": statistics.stdev(times_us) if len(times_us) > 1 else 0,
        "min_us": min(times_us),
        "max_us": max(times_us),
        "p95_us": sorted(times_us)[int(iterations * 0.95)],
        "p99_us": sorted(times_us)[int(iterations * 0.99)],
    }


def main():
    print("=" * 70)
    print("JSXPARSER LATENCY BENCHMARK")
    print("=" * 70)
    print()
    print("INCLUDED: Parsing, evaluation, element construction")
    print("EXCLUDED: Grammar construction, host rendering")
    print()

    rows = [{"id": i, "name": f"row {i}", "done": i % 3 == 0} for i in range(20)]

    # Test cases with increasing complexity
    cases = [
        {
            "name": "Static element",
            "markup": "<h1>Hello</h1>",
            "bindings": {},
        },
        {
            "name": "Attributes and interpolation",
            "markup": '<p className="greeting" style="color: red; margin: 0 1px">Hi {user.name}!</p>',
            "bindings": {"user": {"name": "Ada"}},
        },
        {
            "name": "Mapped list (20 rows)",
            "markup": "<ul>{rows.map(row => <li key={row.id} className={row.done ? 'done' : ''}>{row.name}</li>)}</ul>",
            "bindings": {"rows": rows},
        },
        {
            "name": "Block arrow + table",
            "markup": (
                "<table><tbody>{rows.filter(r => !r.done).map(r => {"
                " const label = `${r.id}: ${r.name}`; return <tr key={r.id}><td>{label}</td></tr> })}"
                "</tbody></table>"
            ),
            "bindings": {"rows": rows},
        },
    ]

    iterations = 1000
    print(f"Iterations per case: {iterations}")
    print()

    # grammar construction happens once per process
    render("<b/>")

    for case in cases:
        print(f"Markup: {case['markup'][:50]}{'...' if len(case['markup']) > 50 else ''}")
        stats = benchmark(case["markup"], case["bindings"], iterations)
        print(f"  {case['name']}")
        print(f"  Mean:   {stats['mean_us']:>9.1f} µs")
        print(f"  Median: {stats['median_us']:>9.1f} µs")
        print(f"  P95:    {stats['p95_us']:>9.1f} µs")
        print(f"  P99:    {stats['p99_us']:>9.1f} µs")
        print(f"  Max:    {stats['max_us']:>9.1f} µs")
        print()

    print("Note: the first render is slower (grammar construction).")
    print("      Long-running hosts should render once on startup.")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Performance benchmark script for the divider solver."""

import sys
import time
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vdiv_app.solver.divider import solve


def generate_requests(count: int) -> list[tuple[float, float]]:
    """Spread requests over input voltages and output fractions."""
    requests = []
    for i in range(count):
        v_in = 1.0 + (i % 50)
        fraction = 0.05 + 0.9 * ((i * 7) % 100) / 100
        requests.append((v_in, v_in * fraction))
    return requests


def benchmark_solver(count: int = 1000) -> dict[str, float]:
    """Time solve() over a batch of requests."""
    print(f"🏃 Benchmarking solver with {count} requests...")

    requests = generate_requests(count)

    start_time = time.time()
    for v_in, target in requests:
        solve(v_in, target)
    total_time = time.time() - start_time

    return {
        "total_time": total_time,
        "avg_time_ms": total_time / count * 1000,
        "solves_per_second": count / total_time if total_time > 0 else float("inf"),
    }


def main() -> None:
    """Main benchmark function."""
    results = benchmark_solver()
    print(f"  Total time:        {results['total_time']:.3f}s")
    print(f"  Average per solve: {results['avg_time_ms']:.3f}ms")
    print(f"  Solves per second: {results['solves_per_second']:.0f}")


if __name__ == "__main__":
    main()

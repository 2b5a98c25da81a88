"""
Microbenchmark: time per intersects() call vs polygon vertex count.
Run:
  python benchmarks/bench_queries.py
"""
import math
import time

import numpy as np

from geom2d import Circle, Polygon, Rectangle


def regular_polygon(n: int, radius: float = 5.0) -> Polygon:
    angles = np.linspace(0.0, 2 * math.pi, n, endpoint=False)
    return Polygon(np.column_stack([radius * np.cos(angles), radius * np.sin(angles)]))


def run(n: int, calls: int = 500):
    rng = np.random.default_rng(12345)  # determinism
    poly = regular_polygon(n)
    others = []
    for _ in range(calls):
        x, y = rng.uniform(-10, 10, size=2)
        others.append(Circle(x, y, 1.0) if rng.random() < 0.5 else Rectangle(x, y, 2.0, 1.0))

    t0 = time.perf_counter()
    hits = sum(poly.intersects(o) for o in others)
    t1 = time.perf_counter()
    return (t1 - t0) / calls, hits


if __name__ == "__main__":
    for n in [3, 8, 32, 128]:
        per_call, hits = run(n)
        print(f"N={n:4d}  call={1e6*per_call:9.1f} us  hits={hits}")

"""
scripts/bench_matmul_blocked_vs_naive.py

Blocked vs naive matmul microbenchmark (NOT a unit test) for KeyTensor.

Benchmarks forward-only matrix multiplication for:
- blocked: Tensor.matmul (cache-blocked kernel, via `@`)
- naive: the triple-loop reference kernel `matmul_naive_cpu`
- numpy: NumPy's own `@` on the same operands, as an upper bound

Timing policy
-------------
- Operands are built once per case, outside the timed region.
- The naive kernel is pure Python; keep its shapes small or pass --skip-naive.

Usage
-----
python scripts/bench_matmul_blocked_vs_naive.py --presets
python scripts/bench_matmul_blocked_vs_naive.py --M 128 --K 128 --N 128 --block-size 64
python scripts/bench_matmul_blocked_vs_naive.py --M 1024 --K 1024 --N 1024 --skip-naive --sweep
"""

from __future__ import annotations

import argparse
import os
import statistics
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

# -------------------------
# Make repo_root/src importable
# -------------------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from keytensor import Tensor, matmul_config
from keytensor.infrastructure.ops.matmul_cpu import matmul_naive_cpu


def _time_one(fn: Callable[[], None], *, warmup: int, repeats: int) -> list[float]:
    for _ in range(warmup):
        fn()
    ts: list[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        ts.append(t1 - t0)
    return ts


def _fmt_seconds(x: float) -> str:
    if x < 1e-6:
        return f"{x*1e9:.2f} ns"
    if x < 1e-3:
        return f"{x*1e6:.2f} µs"
    if x < 1:
        return f"{x*1e3:.2f} ms"
    return f"{x:.3f} s"


def _gflops(m: int, k: int, n: int, seconds: float) -> float:
    # GEMM does 2*M*K*N flops
    return (2.0 * m * k * n / seconds) / 1e9 if seconds > 0 else float("inf")


@dataclass(frozen=True)
class Case:
    name: str
    M: int
    K: int
    N: int


def _bench_case(
    case: Case,
    *,
    block_sizes: list[int],
    warmup: int,
    repeats: int,
    skip_naive: bool,
    sanity: bool,
    rng_seed: int,
) -> None:
    M, K, N = case.M, case.K, case.N
    rng = np.random.default_rng(rng_seed)
    a_np = rng.standard_normal((M, K))
    b_np = rng.standard_normal((K, N))

    A = Tensor.from_numpy(a_np)
    B = Tensor.from_numpy(b_np)

    naive_med: Optional[float] = None
    if not skip_naive:
        t_naive = _time_one(
            lambda: matmul_naive_cpu(a_np, b_np), warmup=0, repeats=max(1, repeats // 5)
        )
        naive_med = statistics.median(t_naive)
        print(
            f"[{case.name}] naive     (M={M} K={K} N={N})  "
            f"{_fmt_seconds(naive_med):>10} ({_gflops(M, K, N, naive_med):8.3f} GFLOP/s)"
        )

    t_numpy = _time_one(lambda: a_np @ b_np, warmup=warmup, repeats=repeats)
    numpy_med = statistics.median(t_numpy)
    print(
        f"[{case.name}] numpy @   (M={M} K={K} N={N})  "
        f"{_fmt_seconds(numpy_med):>10} ({_gflops(M, K, N, numpy_med):8.3f} GFLOP/s)"
    )

    for bs in block_sizes:
        if sanity:
            np.testing.assert_allclose(
                A.matmul(B, block_size=bs).to_numpy(), a_np @ b_np, rtol=1e-9, atol=1e-9
            )

        with matmul_config(block_size=bs):
            t_blocked = _time_one(lambda: A @ B, warmup=warmup, repeats=repeats)
        med = statistics.median(t_blocked)

        speedup = ""
        if naive_med is not None:
            speedup = f"  speedup={naive_med / med:>8.2f}x"
        print(
            f"[{case.name}] blocked bs={bs:<4} "
            f"{_fmt_seconds(med):>10} ({_gflops(M, K, N, med):8.3f} GFLOP/s){speedup}"
        )


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--M", type=int, default=96)
    ap.add_argument("--K", type=int, default=96)
    ap.add_argument("--N", type=int, default=96)
    ap.add_argument("--block-size", type=int, default=32)
    ap.add_argument(
        "--sweep",
        action="store_true",
        help="Time block sizes 8, 16, 32, 64 and 128 instead of --block-size.",
    )
    ap.add_argument("--warmup", type=int, default=2)
    ap.add_argument("--repeats", type=int, default=10)
    ap.add_argument("--presets", action="store_true", help="Run a preset suite.")
    ap.add_argument(
        "--skip-naive", action="store_true", help="Do not time the naive kernel."
    )
    ap.add_argument(
        "--sanity",
        action="store_true",
        help="Check blocked output against NumPy (not timed).",
    )
    ap.add_argument("--seed", type=int, default=0, help="RNG seed.")
    args = ap.parse_args()

    block_sizes = [8, 16, 32, 64, 128] if args.sweep else [args.block_size]

    print("\n" + "=" * 88)
    print(
        "KeyTensor matmul blocked vs naive benchmark  "
        f"(warmup={args.warmup}, repeats={args.repeats})"
    )
    print("=" * 88)

    if args.presets:
        cases = [
            Case("tiny-16", 16, 16, 16),
            Case("small-64", 64, 64, 64),
            Case("edge-33", 33, 33, 33),
            Case("rect-48x96x32", 48, 96, 32),
        ]
    else:
        cases = [Case("single", args.M, args.K, args.N)]

    for c in cases:
        _bench_case(
            c,
            block_sizes=block_sizes,
            warmup=args.warmup,
            repeats=args.repeats,
            skip_naive=args.skip_naive,
            sanity=args.sanity,
            rng_seed=args.seed,
        )


if __name__ == "__main__":
    main()
